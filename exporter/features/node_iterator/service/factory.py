import logging
from typing import Optional
from exporter.core.config.settings import settings
from exporter.core.common.enums import TraversalOrder
from exporter.core.common.exceptions import InvalidNodeTypeError, InvalidPathError, NodeNotFoundError
from exporter.features.filesystem.domain.interfaces import IFolder, IRootFolder
from ..data.skip_conditions import StorageBoundarySkipCondition
from ..domain.models import NodeIteratorResult
from .iterator import RecursiveNodeIterator

logger = logging.getLogger(__name__)

class RecursiveNodeIteratorFactory:
    """
    Builds ready-to-use walks over a user's files.

    Every walk comes with a StorageBoundarySkipCondition on the base folder's
    own storage, so only the primary storage is traversed.
    Usage:

        nodes, base_folder = factory.get_user_folder_iterator("alice")
        for node in nodes:
            relative = base_folder.get_relative_path(node.path)
    """

    def __init__(self, root_folder: IRootFolder, trash_bin_path: Optional[str] = None):
        self.root_folder = root_folder
        self.trash_bin_path = trash_bin_path or settings.TRASHBIN_PATH

    def get_user_folder_iterator(self,
                                 user_id: str,
                                 order: TraversalOrder = TraversalOrder.SELF_FIRST) -> NodeIteratorResult:
        """
        Raises:
            UserNotFoundError: If the user is unknown.
        """
        user_folder = self.root_folder.get_user_folder(user_id)
        return self._build(user_folder, order)

    def get_trash_bin_iterator(self,
                               user_id: str,
                               order: TraversalOrder = TraversalOrder.SELF_FIRST) -> NodeIteratorResult:
        """
        Walks <user folder parent>/files_trashbin/files.

        Raises:
            UserNotFoundError: If the user is unknown.
            NodeNotFoundError: If the trash bin folder is missing.
            InvalidNodeTypeError: If the trash bin path is not a folder.
        """
        user_folder = self.root_folder.get_user_folder(user_id)
        try:
            trash_bin = user_folder.get_parent().get(self.trash_bin_path)
        except InvalidPathError as e:
            raise NodeNotFoundError(self.trash_bin_path) from e

        if not isinstance(trash_bin, IFolder):
            raise InvalidNodeTypeError("Only folders can be passed to iterator")

        return self._build(trash_bin, order)

    def _build(self, folder: IFolder, order: TraversalOrder) -> NodeIteratorResult:
        node_iterator = RecursiveNodeIterator(folder).add_skip_condition(
            StorageBoundarySkipCondition(folder.storage_id)
        )
        logger.info(f"Prepared traversal of {folder.path} on storage {folder.storage_id}")
        return NodeIteratorResult(node_iterator.walk(order), folder)
