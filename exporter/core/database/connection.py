# File: exporter/core/database/connection.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from exporter.core.config.settings import settings

# SQLite connections are opened lazily by whichever thread drives the export
_is_sqlite = settings.DATABASE_URL.startswith("sqlite")

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=not _is_sqlite,
    connect_args={"check_same_thread": False} if _is_sqlite else {}
)

# Repository writes read generated ids after commit without another round trip
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
