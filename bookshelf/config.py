"""
Configuration management.

``Settings`` reads its values from environment variables when it is
instantiated. Every field has a default, so the service runs with no
environment at all: it binds to ``0.0.0.0:4000`` and gives each
request 15 seconds.
"""

import os
from dataclasses import dataclass, field


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("BOOKSHELF_PROJECT_NAME", "Book Catalog Service"))
    api_version: str = field(default_factory=lambda: os.getenv("BOOKSHELF_API_VERSION", "1.0.0"))
    host: str = field(default_factory=lambda: os.getenv("BOOKSHELF_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("BOOKSHELF_PORT", "4000")))

    # Upper bound, in seconds, on the time spent handling one request.
    # Also used as uvicorn's keep-alive timeout.
    request_timeout: float = field(default_factory=lambda: _env_float("BOOKSHELF_REQUEST_TIMEOUT", 15.0))

    log_level: str = field(default_factory=lambda: os.getenv("BOOKSHELF_LOG_LEVEL", "INFO"))


settings = Settings()
