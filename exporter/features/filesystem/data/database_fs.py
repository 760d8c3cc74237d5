from typing import List
from exporter.core.common.enums import NodeType
from exporter.core.common.exceptions import NodeNotFoundError, UserNotFoundError
from ..domain.interfaces import FileNode, IFilecacheRepository, IFolder, INode, IRootFolder
from ..domain.models import CacheEntry
from ..domain.paths import join_path, parent_path

class DatabaseRootFolder(IRootFolder):
    """
    Filesystem backend over the filecache tables.
    Folders load their children lazily, one query per expanded folder.
    """

    def __init__(self, repo: IFilecacheRepository):
        self.repo = repo

    def get_user_folder(self, user_id: str) -> IFolder:
        home = self.repo.get_user_home(user_id)
        if home is None:
            raise UserNotFoundError(user_id)

        node = self.get(home)
        if not isinstance(node, IFolder):
            raise NodeNotFoundError(home)
        return node

    def get(self, path: str) -> INode:
        entry = self.repo.get_by_path(path)
        if entry is None:
            raise NodeNotFoundError(path)
        return self.wrap(entry)

    def wrap(self, entry: CacheEntry) -> INode:
        if entry.info.node_type == NodeType.FOLDER:
            return DatabaseFolder(entry, self)
        return FileNode(entry.info)


class DatabaseFolder(IFolder):

    def __init__(self, entry: CacheEntry, root: DatabaseRootFolder):
        super().__init__(entry.info)
        self.fileid = entry.fileid
        self._root = root

    def get_children(self) -> List[INode]:
        return [self._root.wrap(entry) for entry in self._root.repo.get_children(self.fileid)]

    def get(self, path: str) -> INode:
        return self._root.get(join_path(self.path, path))

    def get_parent(self) -> IFolder:
        node = self._root.get(parent_path(self.path))
        if not isinstance(node, IFolder):
            raise NodeNotFoundError(node.path)
        return node
