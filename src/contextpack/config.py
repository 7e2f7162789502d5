"""Environment-backed settings for callers of the index and store."""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Tunables read from the environment (and an optional .env file).

    The core components never read these directly; callers pass the values
    into their constructors.
    """

    docs_zip_path: Path = Path("./docs.zip")
    chunk_size: int = 1000
    max_context_chunks: int = 5
    max_messages: int = 20
    max_conversation_age: float = 3600.0
    cleanup_interval: float = 900.0
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            docs_zip_path=Path(os.getenv("DOCS_ZIP_PATH", "./docs.zip")),
            chunk_size=int(os.getenv("CHUNK_SIZE", "1000")),
            max_context_chunks=int(os.getenv("MAX_CONTEXT_CHUNKS", "5")),
            max_messages=int(os.getenv("MAX_MESSAGES", "20")),
            max_conversation_age=float(os.getenv("MAX_CONVERSATION_AGE", "3600")),
            cleanup_interval=float(os.getenv("CLEANUP_INTERVAL", "900")),
            log_level=os.getenv("LOG_LEVEL", "info"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv()
    return Settings.from_env()
