"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all.  In a production
deployment you should at least override ``SECRET_KEY``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Tuzla Guide API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # When enabled, requests without an ``Authorization`` header are
    # served as the anonymous principal instead of being rejected.
    # Catalog reads never require a caller identity.
    allow_anonymous: bool = _env_flag("ALLOW_ANONYMOUS", "true")

    # Path to the SQLite file holding the persisted snapshot.  A
    # relative path is resolved against the package root by ``core.db``.
    database_url: str = os.getenv("DATABASE_URL", "tuzla_guide.db")

    # Persist the full snapshot after every successful mutation in
    # addition to the shutdown snapshot.
    persist_on_write: bool = _env_flag("PERSIST_ON_WRITE", "true")

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
