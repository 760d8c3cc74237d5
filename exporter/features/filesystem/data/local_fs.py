import hashlib
import os
import stat
from pathlib import Path
from typing import List

from exporter.core.common.enums import NodeType, Permission
from exporter.core.common.exceptions import NodeNotFoundError, UserNotFoundError
from ..domain.interfaces import FileNode, IFolder, INode, IRootFolder
from ..domain.models import NodeInfo
from ..domain.paths import SEPARATOR, join_path, parent_path


class LocalRootFolder(IRootFolder):
    """
    Filesystem backend over a local data directory laid out as
    <data_dir>/<user_id>/files, <data_dir>/<user_id>/files_trashbin/files, ...

    Node paths are virtual: "/<user_id>/files/a.txt" maps to
    <data_dir>/<user_id>/files/a.txt on disk.
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def get_user_folder(self, user_id: str) -> IFolder:
        if not user_id or SEPARATOR in user_id or user_id in (".", ".."):
            raise UserNotFoundError(user_id)
        if not (self.data_dir / user_id).is_dir():
            raise UserNotFoundError(user_id)

        node = self.get(f"/{user_id}/files")
        if not isinstance(node, IFolder):
            raise NodeNotFoundError(node.path)
        return node

    def get(self, path: str) -> INode:
        """Resolves an absolute virtual path into a node snapshot."""
        return self._make_node(path)

    def to_disk_path(self, path: str) -> Path:
        return self.data_dir / path.lstrip(SEPARATOR)

    def _make_node(self, path: str) -> INode:
        disk_path = self.to_disk_path(path)
        try:
            st = os.stat(disk_path, follow_symlinks=False)
        except (FileNotFoundError, NotADirectoryError) as e:
            # NotADirectoryError: some ancestor of the path is a plain file
            raise NodeNotFoundError(path) from e

        # Symlinks are reported as files so they are never descended into
        node_type = NodeType.FOLDER if stat.S_ISDIR(st.st_mode) else NodeType.FILE
        info = NodeInfo(
            path=path,
            node_type=node_type,
            etag=self._etag(st),
            permissions=int(self._permissions(disk_path, node_type)),
            storage_id=f"local::{st.st_dev}"
        )

        if node_type == NodeType.FOLDER:
            return LocalFolder(info, self)
        return FileNode(info)

    @staticmethod
    def _etag(st: os.stat_result) -> str:
        fingerprint = f"{st.st_ino}:{st.st_mtime_ns}:{st.st_size}"
        return hashlib.md5(fingerprint.encode("utf-8")).hexdigest()

    @staticmethod
    def _permissions(disk_path: Path, node_type: NodeType) -> Permission:
        perms = Permission(0)
        if os.access(disk_path, os.R_OK):
            perms |= Permission.READ | Permission.SHARE

        if os.access(disk_path, os.W_OK):
            perms |= Permission.UPDATE
            if node_type == NodeType.FOLDER:
                perms |= Permission.CREATE

        # Deleting an entry needs write access on the directory that holds it
        if os.access(disk_path.parent, os.W_OK):
            perms |= Permission.DELETE

        return perms


class LocalFolder(IFolder):

    def __init__(self, info: NodeInfo, root: LocalRootFolder):
        super().__init__(info)
        self._root = root

    def get_children(self) -> List[INode]:
        disk_path = self._root.to_disk_path(self.path)
        with os.scandir(disk_path) as entries:
            names = [entry.name for entry in entries]

        return [self._root.get(join_path(self.path, name)) for name in names]

    def get(self, path: str) -> INode:
        return self._root.get(join_path(self.path, path))

    def get_parent(self) -> IFolder:
        node = self._root.get(parent_path(self.path))
        if not isinstance(node, IFolder):
            raise NodeNotFoundError(node.path)
        return node
