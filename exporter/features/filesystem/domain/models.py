from dataclasses import dataclass
from exporter.core.common.enums import NodeType

@dataclass(frozen=True)
class NodeInfo:
    """
    Snapshot of a node's attributes, taken when the filesystem layer produced it.
    """
    path: str
    node_type: NodeType
    etag: str
    permissions: int
    storage_id: str

    @property
    def name(self) -> str:
        return self.path.rstrip("/").rsplit("/", 1)[-1]

@dataclass(frozen=True)
class CacheEntry:
    """
    A filecache row detached from its session.
    """
    fileid: int
    info: NodeInfo
