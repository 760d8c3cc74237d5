# File: exporter/core/common/enums.py

from enum import Enum, IntFlag, unique

@unique
class NodeType(str, Enum):
    FILE = "file"
    FOLDER = "dir"

@unique
class RecordType(str, Enum):
    FILE = "file"
    FOLDER = "folder"

@unique
class TraversalOrder(str, Enum):
    SELF_FIRST = "self_first"    # folder, then its children
    CHILD_FIRST = "child_first"  # children, then the folder
    LEAVES_ONLY = "leaves_only"  # files only

class Permission(IntFlag):
    READ = 1
    UPDATE = 2
    CREATE = 4
    DELETE = 8
    SHARE = 16
    ALL = 31
