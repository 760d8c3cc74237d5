import logging
from typing import Optional
from exporter.core.config.settings import settings
from ..domain.interfaces import IRootFolder
from ..data.local_fs import LocalRootFolder
from ..data.database_fs import DatabaseRootFolder
from ..data.repository import DatabaseFilesystemRepo

logger = logging.getLogger(__name__)

BACKENDS = ("local", "database")

def get_root_folder(backend: Optional[str] = None) -> IRootFolder:
    """
    Public Service API: Build the filesystem backend named in the settings.

    Args:
        backend: "local" or "database". Defaults to settings.FILESYSTEM_BACKEND.

    Raises:
        ValueError: If the backend name is unknown.
    """
    backend = (backend or settings.FILESYSTEM_BACKEND).lower()

    if backend == "local":
        logger.debug(f"Using local filesystem backend at {settings.DATA_DIR}")
        return LocalRootFolder(settings.DATA_DIR)
    if backend == "database":
        logger.debug("Using database filesystem backend")
        return DatabaseRootFolder(DatabaseFilesystemRepo())

    raise ValueError(f"Unknown filesystem backend '{backend}'. Expected one of: {', '.join(BACKENDS)}")
