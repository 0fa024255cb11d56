from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, List

BACKENDS = ("memory", "sqlite")
LOG_FORMATS = ("text", "json")


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration, read from the environment by get_settings().

    Env vars:
    - PERSISTENCE_BACKEND: 'memory' (default) or 'sqlite'
    - SQLITE_DB_PATH: database file for the sqlite backend. Default './data/todos.db'
    - CORS_ALLOW_ORIGINS: '*' (default) or comma-separated origins
    - LOG_LEVEL: root log level name. Default 'INFO'
    - LOG_FORMAT: 'text' (default) or 'json'
    """

    persistence_backend: str
    sqlite_db_path: str
    cors_allow_origins: List[str]
    log_level: str
    log_format: str


def _env(name: str, default: str) -> str:
    return (os.getenv(name) or default).strip()


def _choice(name: str, allowed: Iterable[str]) -> str:
    """Read a lower-cased env value, falling back to the first allowed value."""
    allowed = tuple(allowed)
    value = _env(name, allowed[0]).lower()
    return value if value in allowed else allowed[0]


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return settings built from the current environment."""
    return Settings(
        persistence_backend=_choice("PERSISTENCE_BACKEND", BACKENDS),
        sqlite_db_path=_env("SQLITE_DB_PATH", "./data/todos.db"),
        cors_allow_origins=_split_origins(_env("CORS_ALLOW_ORIGINS", "*")),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        log_format=_choice("LOG_FORMAT", LOG_FORMATS),
    )
