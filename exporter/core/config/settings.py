# File: exporter/core/config/settings.py

import os
from pathlib import Path


class Settings:
    # --- Paths ---
    # exporter/core/config/settings.py -> exporter/core/config -> exporter/core -> exporter -> ROOT
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
    DATA_DIR: Path = Path(os.getenv("EXPORTER_DATA_DIR", str(BASE_DIR / "data")))

    # --- Filesystem ---
    # "local" reads <DATA_DIR>/<user>/files from disk, "database" reads the filecache tables
    FILESYSTEM_BACKEND: str = os.getenv("EXPORTER_FS_BACKEND", "local")
    TRASHBIN_PATH: str = os.getenv("EXPORTER_TRASHBIN_PATH", "files_trashbin/files")

    # --- Export ---
    # Address of the exporting server, including port ("10.10.10.10:8080", "my.server:443")
    ORIGIN_SERVER: str = os.getenv("EXPORTER_ORIGIN_SERVER", "localhost:80")

    # --- Database ---
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_SERVER: str = os.getenv("POSTGRES_SERVER", "localhost")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "exporter_db")

    @property
    def DATABASE_URL(self) -> str:
        # SQLite next to the data files unless Postgres is explicitly requested.
        if os.getenv("USE_POSTGRES", "false").lower() == "true":
            return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

        return f"sqlite:///{self.DATA_DIR / 'exporter.db'}"

    def ensure_dirs(self):
        """Creates necessary data directories if they don't exist."""
        self.DATA_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
