import uuid
from typing import List, Optional
from sqlalchemy.orm import Session, sessionmaker
from exporter.core.database.connection import SessionLocal
from exporter.core.common.enums import NodeType, Permission
from exporter.core.common.exceptions import NodeNotFoundError
from .sql_models import FilecacheModel, StorageModel, UserModel
from ..domain.interfaces import IFilecacheRepository
from ..domain.models import CacheEntry, NodeInfo
from ..domain.paths import SEPARATOR, parent_path

class DatabaseFilesystemRepo(IFilecacheRepository):
    """
    Reads (and seeds) the storages / filecache / users tables.
    Every call opens its own short-lived session and returns detached snapshots.
    """

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self.session_factory = session_factory

    # --- Reads ---

    def get_user_home(self, user_id: str) -> Optional[str]:
        with self.session_factory() as db:
            user = db.get(UserModel, user_id)
            return user.home if user else None

    def get_by_path(self, path: str) -> Optional[CacheEntry]:
        with self.session_factory() as db:
            row = (
                db.query(FilecacheModel, StorageModel.id)
                .join(StorageModel, FilecacheModel.storage_numeric_id == StorageModel.numeric_id)
                .filter(FilecacheModel.path == path)
                .first()
            )
            return self._to_entry(*row) if row else None

    def get_children(self, fileid: int) -> List[CacheEntry]:
        with self.session_factory() as db:
            rows = (
                db.query(FilecacheModel, StorageModel.id)
                .join(StorageModel, FilecacheModel.storage_numeric_id == StorageModel.numeric_id)
                .filter(FilecacheModel.parent_id == fileid)
                .order_by(FilecacheModel.name)
                .all()
            )
            return [self._to_entry(node, storage_id) for node, storage_id in rows]

    # --- Writes ---

    def create_storage(self, storage_id: str) -> int:
        with self.session_factory() as db:
            try:
                storage = StorageModel(id=storage_id)
                db.add(storage)
                db.commit()
                return storage.numeric_id
            except Exception as e:
                db.rollback()
                raise e

    def create_user(self, user_id: str, home: Optional[str] = None) -> str:
        with self.session_factory() as db:
            try:
                user = UserModel(user_id=user_id, home=home or f"/{user_id}/files")
                db.add(user)
                db.commit()
                return user.home
            except Exception as e:
                db.rollback()
                raise e

    def create_node(self,
                    path: str,
                    node_type: NodeType,
                    storage_id: str,
                    etag: Optional[str] = None,
                    permissions: int = int(Permission.ALL)) -> int:
        """
        Inserts one filecache row.
        The storage is created on first use; the parent folder must already exist
        unless the node sits directly below the root.

        Returns:
            The fileid of the new row.
        """
        with self.session_factory() as db:
            try:
                parent_id = self._resolve_parent_id(db, path)

                storage = db.query(StorageModel).filter(StorageModel.id == storage_id).first()
                if storage is None:
                    storage = StorageModel(id=storage_id)
                    db.add(storage)
                    db.flush()  # Flush to generate numeric_id

                node = FilecacheModel(
                    storage_numeric_id=storage.numeric_id,
                    path=path,
                    name=path.rstrip(SEPARATOR).rsplit(SEPARATOR, 1)[-1],
                    parent_id=parent_id,
                    node_type=node_type,
                    etag=etag or uuid.uuid4().hex[:13],
                    permissions=permissions
                )
                db.add(node)
                db.commit()
                return node.fileid
            except Exception as e:
                db.rollback()
                raise e

    @staticmethod
    def _resolve_parent_id(db: Session, path: str) -> Optional[int]:
        parent = parent_path(path)
        if parent == SEPARATOR:
            return None

        parent_row = db.query(FilecacheModel).filter(FilecacheModel.path == parent).first()
        if parent_row is None:
            raise NodeNotFoundError(parent)
        return parent_row.fileid

    @staticmethod
    def _to_entry(node: FilecacheModel, storage_id: str) -> CacheEntry:
        return CacheEntry(
            fileid=node.fileid,
            info=NodeInfo(
                path=node.path,
                node_type=node.node_type,
                etag=node.etag,
                permissions=node.permissions,
                storage_id=storage_id
            )
        )
