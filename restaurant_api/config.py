from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class AppConfig:
    database_path: Path = Path(os.getenv("RESTAURANT_API_DB", "database1.sqlite"))
    host: str = os.getenv("RESTAURANT_API_HOST", "127.0.0.1")
    port: int = int(os.getenv("RESTAURANT_API_PORT", "3000"))
    log_level: str = os.getenv("RESTAURANT_API_LOG_LEVEL", "INFO")

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


DEFAULT_APP_CONFIG = AppConfig()
