# File: tests/conftest.py

import pytest
import os
import sys
import tempfile
import sqlalchemy
from typing import Dict, List, Optional, Set
from sqlalchemy import create_engine, text
from sqlalchemy_utils import database_exists, create_database

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Keep test data (and the SQLite file) out of the project tree
os.environ.setdefault("EXPORTER_DATA_DIR", tempfile.mkdtemp(prefix="exporter_test_"))

# 3. Import Settings
from exporter.core.config.settings import settings
from exporter.core.common.enums import NodeType, Permission
from exporter.core.common.exceptions import NodeNotFoundError, UserNotFoundError
from exporter.features.filesystem.domain.interfaces import FileNode, IFolder, INode, IRootFolder
from exporter.features.filesystem.domain.models import NodeInfo
from exporter.features.filesystem.domain.paths import join_path, parent_path

# 4. Create Test Engine
TEST_ENGINE = create_engine(settings.DATABASE_URL)


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Ensures the data dir and DB exist and all tables are created.
    """
    settings.ensure_dirs()

    if not database_exists(TEST_ENGINE.url):
        create_database(TEST_ENGINE.url)

    # Import all models to ensure they are registered
    from exporter.core.database.base import Base
    import exporter.features.filesystem.data.sql_models

    Base.metadata.create_all(bind=TEST_ENGINE)

    yield


@pytest.fixture(scope="function", autouse=True)
def clean_db(global_setup):
    """
    Runs before EVERY test.
    Empties all tables so tests can seed their own trees.
    """
    from exporter.core.database.base import Base

    Base.metadata.create_all(bind=TEST_ENGINE)

    with TEST_ENGINE.connect() as conn:
        trans = conn.begin()

        is_sqlite = "sqlite" in str(TEST_ENGINE.url)
        table_names = sqlalchemy.inspect(TEST_ENGINE).get_table_names()

        if table_names:
            if is_sqlite:
                conn.execute(text("PRAGMA foreign_keys = OFF;"))
                for table in table_names:
                    conn.execute(text(f'DELETE FROM "{table}";'))
                conn.execute(text("PRAGMA foreign_keys = ON;"))
            else:
                conn.execute(text("SET session_replication_role = 'replica';"))
                for table in table_names:
                    conn.execute(text(f'TRUNCATE TABLE "{table}" CASCADE;'))
                conn.execute(text("SET session_replication_role = 'origin';"))

        trans.commit()

    yield


# --- In-memory filesystem ---

class MemoryFolder(IFolder):

    def __init__(self, info: NodeInfo, root: "MemoryRootFolder"):
        super().__init__(info)
        self._root = root

    def get_children(self) -> List[INode]:
        self._root.listings.append(self.path)
        if self.path in self._root.broken:
            raise OSError(f"I/O error while listing {self.path}")
        return [self._root.get(path) for path in self._root.children_of(self.path)]

    def get(self, path: str) -> INode:
        return self._root.get(join_path(self.path, path))

    def get_parent(self) -> IFolder:
        return self._root.get(parent_path(self.path))


class MemoryRootFolder(IRootFolder):
    """
    Dict-backed filesystem. Children come back in reverse insertion order so
    tests notice when something relies on backend ordering.
    """

    def __init__(self):
        self.nodes: Dict[str, NodeInfo] = {}
        self.users: Dict[str, str] = {}
        self.broken: Set[str] = set()
        self.listings: List[str] = []

    def add_user(self, user_id: str, storage_id: Optional[str] = None) -> str:
        storage_id = storage_id or f"home::{user_id}"
        self.add_folder(f"/{user_id}", storage_id)
        self.add_folder(f"/{user_id}/files", storage_id)
        self.users[user_id] = f"/{user_id}/files"
        return storage_id

    def add_folder(self, path: str, storage_id: str, permissions: int = int(Permission.ALL)):
        self._add(path, NodeType.FOLDER, storage_id, permissions)

    def add_file(self, path: str, storage_id: str, permissions: int = 27):
        self._add(path, NodeType.FILE, storage_id, permissions)

    def _add(self, path: str, node_type: NodeType, storage_id: str, permissions: int):
        self.nodes[path] = NodeInfo(
            path=path,
            node_type=node_type,
            etag=f"etag-{len(self.nodes)}",
            permissions=permissions,
            storage_id=storage_id
        )

    def children_of(self, path: str) -> List[str]:
        children = [p for p in self.nodes if p != path and p != "/" and parent_path(p) == path]
        return list(reversed(children))

    def get(self, path: str) -> INode:
        info = self.nodes.get(path)
        if info is None:
            raise NodeNotFoundError(path)
        if info.node_type == NodeType.FOLDER:
            return MemoryFolder(info, self)
        return FileNode(info)

    def get_user_folder(self, user_id: str) -> IFolder:
        if user_id not in self.users:
            raise UserNotFoundError(user_id)
        return self.get(self.users[user_id])


@pytest.fixture
def memory_fs():
    return MemoryRootFolder()


@pytest.fixture
def mounted_tree(memory_fs):
    """
    /u1/files            (S1)
      a.txt              (S1)
      ext/               (S2, external mount)
        b.txt            (S2)
    """
    memory_fs.add_user("u1", storage_id="S1")
    memory_fs.add_file("/u1/files/a.txt", "S1")
    memory_fs.add_folder("/u1/files/ext", "S2")
    memory_fs.add_file("/u1/files/ext/b.txt", "S2")
    return memory_fs
