from sqlalchemy import Column, String, Integer, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from exporter.core.database.base import Base
from exporter.core.common.enums import NodeType, Permission

class StorageModel(Base):
    __tablename__ = "storages"

    numeric_id = Column(Integer, primary_key=True, autoincrement=True)
    # e.g. "home::alice", "local::/mnt/archive", "smb::fileserver/share"
    id = Column(String(64), nullable=False, unique=True)

    nodes = relationship("FilecacheModel", back_populates="storage")

class FilecacheModel(Base):
    __tablename__ = "filecache"

    fileid = Column(Integer, primary_key=True, autoincrement=True)
    storage_numeric_id = Column(Integer, ForeignKey("storages.numeric_id"), nullable=False, index=True)
    # Absolute path in the virtual tree, e.g. "/alice/files/docs/a.txt"
    path = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=False)
    parent_id = Column(Integer, ForeignKey("filecache.fileid"), nullable=True, index=True)
    node_type = Column(SQLEnum(NodeType), nullable=False)
    etag = Column(String(40), nullable=False)
    permissions = Column(Integer, nullable=False, default=int(Permission.ALL))

    storage = relationship("StorageModel", back_populates="nodes")

class UserModel(Base):
    __tablename__ = "users"

    user_id = Column(String(64), primary_key=True)
    # Path of the user's home folder, "/<user_id>/files" unless relocated
    home = Column(String, nullable=False)
