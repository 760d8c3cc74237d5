from typing import Iterable, NamedTuple
from exporter.features.filesystem.domain.interfaces import IFolder, INode

class NodeIteratorResult(NamedTuple):
    """
    What the iterator factory hands back. Unpacks as (nodes, base_folder).
    The base folder is the one relative paths must be computed against.
    """
    nodes: Iterable[INode]
    base_folder: IFolder
