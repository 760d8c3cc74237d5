from abc import ABC, abstractmethod
from typing import List, Optional
from exporter.core.common.enums import NodeType
from .models import CacheEntry, NodeInfo
from .paths import relative_path

class INode(ABC):
    """
    Read-only view of one filesystem entry.
    Concrete backends decide where the snapshot comes from (disk, database).
    """

    def __init__(self, info: NodeInfo):
        self._info = info

    @property
    def info(self) -> NodeInfo:
        return self._info

    @property
    def path(self) -> str:
        return self._info.path

    @property
    def name(self) -> str:
        return self._info.name

    @property
    def node_type(self) -> NodeType:
        return self._info.node_type

    @property
    def etag(self) -> str:
        return self._info.etag

    @property
    def permissions(self) -> int:
        return self._info.permissions

    @property
    def storage_id(self) -> str:
        return self._info.storage_id

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.path!r}, storage_id={self.storage_id!r})"


class IFolder(INode):
    """
    Contract for folder nodes.
    """

    @abstractmethod
    def get_children(self) -> List[INode]:
        """
        Returns the direct children of this folder.
        Reads the backing store on every call; nothing is cached.
        """
        pass

    @abstractmethod
    def get(self, path: str) -> INode:
        """
        Resolves a node below this folder by relative path.

        Raises:
            NodeNotFoundError: If nothing exists at that path.
            InvalidPathError: If the path tries to leave this folder.
        """
        pass

    @abstractmethod
    def get_parent(self) -> "IFolder":
        pass

    def get_relative_path(self, path: str) -> str:
        return relative_path(self.path, path)


class FileNode(INode):
    """A plain file. Files need nothing from the backend beyond their snapshot."""
    pass


class IRootFolder(ABC):
    """
    Entry point into a filesystem backend.
    """

    @abstractmethod
    def get_user_folder(self, user_id: str) -> IFolder:
        """
        Resolves the home folder of a user.

        Raises:
            UserNotFoundError: If the user is unknown to this backend.
        """
        pass


class IFilecacheRepository(ABC):
    """
    Contract for the database tables backing the filesystem tree.
    """

    @abstractmethod
    def get_user_home(self, user_id: str) -> Optional[str]:
        """Returns the home folder path of a user, or None for unknown users."""
        pass

    @abstractmethod
    def get_by_path(self, path: str) -> Optional[CacheEntry]:
        pass

    @abstractmethod
    def get_children(self, fileid: int) -> List[CacheEntry]:
        """Returns the direct children of a folder entry, ordered by name."""
        pass
