# File: exporter/core/database/base.py

from sqlalchemy.orm import declarative_base

# The shared registry. Feature models (storages, filecache, users) inherit from this.
Base = declarative_base()
