from typing import Optional
from exporter.features.filesystem.service.api import get_root_folder
from exporter.features.node_iterator.service.factory import RecursiveNodeIteratorFactory
from ..domain.models import ExportMetadata
from .extractor import FilesMetadataExtractor, MetadataExtractor

def extract_user_metadata(user_id: str, backend: Optional[str] = None) -> ExportMetadata:
    """
    Public Service API: Extract the export metadata of one user.

    Args:
        user_id: Id of the user to export.
        backend: Filesystem backend ("local" or "database"). Defaults to the configured one.

    Raises:
        UserNotFoundError: If the user is unknown.
        InvalidNodeTypeError: If the trash bin path exists but is not a folder.
    """
    # 1. Wire the filesystem backend into the traversal
    factory = RecursiveNodeIteratorFactory(get_root_folder(backend))

    # 2. Extract
    extractor = MetadataExtractor(FilesMetadataExtractor(factory))
    return extractor.extract(user_id)
