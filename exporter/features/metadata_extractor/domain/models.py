from dataclasses import dataclass, field
from datetime import datetime
from typing import List
from exporter.core.common.enums import RecordType

@dataclass(frozen=True)
class FileRecord:
    """
    Exported metadata of one file or folder.
    The path is relative to the folder the export started from ("" for that folder itself).
    """
    path: str
    etag: str
    permissions: int
    type: RecordType

@dataclass
class ExportMetadata:
    """
    Everything exported about one user's files.
    """
    date: datetime
    origin_server: str  # "host:port" of the exporting server
    user_id: str
    files: List[FileRecord] = field(default_factory=list)
    trash_files: List[FileRecord] = field(default_factory=list)
