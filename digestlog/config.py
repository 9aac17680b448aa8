from __future__ import annotations

import os
from pathlib import Path
from typing import List


def _int_env(*names: str, default: int) -> int:
    for name in names:
        raw = os.environ.get(name)
        if not raw:
            continue
        try:
            return int(raw)
        except ValueError:
            return default
    return default


class Settings:
    """Centralized configuration for the digestlog server and client."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("DIGESTLOG_DATA_ROOT") or data_root_default
        ).expanduser()
        self.db_path: Path = Path(
            os.environ.get("DIGESTLOG_DB_PATH") or (self.data_root / "digestive_health.db")
        ).expanduser()

        self.host: str = os.environ.get("DIGESTLOG_HOST") or os.environ.get("HOST") or "127.0.0.1"
        self.port: int = _int_env("DIGESTLOG_PORT", "PORT", default=3000)
        # Base URL the CLI client talks to.
        self.api_url: str = os.environ.get("DIGESTLOG_API_URL") or f"http://{self.host}:{self.port}"
        self.log_level: str = (os.environ.get("DIGESTLOG_LOG_LEVEL") or "INFO").upper()

        cors = os.environ.get("DIGESTLOG_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
