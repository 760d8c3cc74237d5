import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional
from exporter.core.config.settings import settings
from exporter.core.common.enums import NodeType, RecordType
from exporter.core.common.exceptions import NodeNotFoundError
from exporter.features.filesystem.domain.interfaces import IFolder, INode
from exporter.features.node_iterator.service.factory import RecursiveNodeIteratorFactory
from ..domain.models import ExportMetadata, FileRecord

logger = logging.getLogger(__name__)

class FilesMetadataExtractor:
    """
    Turns a user's file tree into a flat list of FileRecords.
    """

    def __init__(self, iterator_factory: RecursiveNodeIteratorFactory):
        self.iterator_factory = iterator_factory

    def extract(self, user_id: str) -> List[FileRecord]:
        """
        Raises:
            UserNotFoundError: If the user is unknown.
        """
        nodes, base_folder = self.iterator_factory.get_user_folder_iterator(user_id)
        return self._to_records(nodes, base_folder)

    def extract_trash_bin(self, user_id: str) -> List[FileRecord]:
        """
        Raises:
            UserNotFoundError: If the user is unknown.
            NodeNotFoundError: If the user has no trash bin folder.
            InvalidNodeTypeError: If the trash bin path is not a folder.
        """
        nodes, base_folder = self.iterator_factory.get_trash_bin_iterator(user_id)
        return self._to_records(nodes, base_folder)

    def _to_records(self, nodes: Iterable[INode], base_folder: IFolder) -> List[FileRecord]:
        records = []
        for node in nodes:
            records.append(FileRecord(
                path=base_folder.get_relative_path(node.path),
                etag=node.etag,
                permissions=node.permissions,
                type=RecordType.FILE if node.node_type == NodeType.FILE else RecordType.FOLDER
            ))
        return records


class MetadataExtractor:
    """
    Collects the export metadata of a user: header, files and trash bin.
    """

    def __init__(self,
                 files_extractor: FilesMetadataExtractor,
                 origin_server: Optional[str] = None):
        self.files_extractor = files_extractor
        self.origin_server = origin_server or settings.ORIGIN_SERVER

    def extract(self, user_id: str) -> ExportMetadata:
        logger.info(f"Extracting metadata for user {user_id}")

        files = self.files_extractor.extract(user_id)

        try:
            trash_files = self.files_extractor.extract_trash_bin(user_id)
        except NodeNotFoundError:
            # Users that never deleted anything have no trash bin folder
            logger.info(f"No trash bin for user {user_id}")
            trash_files = []

        logger.info(f"Extracted {len(files)} files and {len(trash_files)} trash bin entries for user {user_id}")
        return ExportMetadata(
            date=datetime.now(timezone.utc),
            origin_server=self.origin_server,
            user_id=user_id,
            files=files,
            trash_files=trash_files
        )
