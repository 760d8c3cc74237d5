from exporter.features.filesystem.domain.interfaces import INode
from ..domain.interfaces import ISkipCondition

class StorageBoundarySkipCondition(ISkipCondition):
    """
    Skips every node living on a storage other than the reference one.
    Keeps a traversal on the primary storage when external storages are mounted
    as subfolders.
    """

    def __init__(self, storage_id: str):
        self.storage_id = storage_id

    def matches(self, node: INode) -> bool:
        return node.storage_id != self.storage_id

    def __repr__(self) -> str:
        return f"StorageBoundarySkipCondition(storage_id={self.storage_id!r})"
