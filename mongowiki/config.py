from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@dataclass(frozen=True)
class Settings:
    mongodb_uri: str = "mongodb://localhost:27017/"
    database: str = "wiki"
    collection: str = "pages"
    templates_dir: str = str(DEFAULT_TEMPLATES_DIR)
    timeout_ms: int = 5000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        raw_timeout = os.getenv("WIKI_MONGODB_TIMEOUT_MS", "").strip()
        try:
            timeout_ms = int(raw_timeout) if raw_timeout else cls.timeout_ms
        except ValueError:
            raise ValueError(f"WIKI_MONGODB_TIMEOUT_MS must be an integer, got {raw_timeout!r}")
        return cls(
            mongodb_uri=os.getenv("WIKI_MONGODB_URI") or cls.mongodb_uri,
            database=os.getenv("WIKI_MONGODB_DB") or cls.database,
            collection=os.getenv("WIKI_PAGES_COLLECTION") or cls.collection,
            templates_dir=os.getenv("WIKI_TEMPLATES_DIR") or cls.templates_dir,
            timeout_ms=timeout_ms,
            log_level=(os.getenv("WIKI_LOG_LEVEL") or cls.log_level).upper(),
        )
