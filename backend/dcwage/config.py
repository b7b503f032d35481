"""Server settings read from the environment.

Values may also come from a ``.env`` file in the project root or in
``backend/``; real environment variables take precedence.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from dcwage.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

_BACKEND_DIR = Path(__file__).resolve().parent.parent
_PROJECT_ROOT = _BACKEND_DIR.parent

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Where the server binds and how loudly it logs."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Raises ConfigurationError for a non-numeric or out-of-range port
        or an unknown log level.
        """
        env = os.environ if environ is None else environ

        host = env.get("DCWAGE_HOST", "").strip() or DEFAULT_HOST

        raw_port = env.get("DCWAGE_PORT", "").strip()
        if raw_port:
            try:
                port = int(raw_port)
            except ValueError as exc:
                msg = f"DCWAGE_PORT must be an integer, got {raw_port!r}"
                raise ConfigurationError(msg) from exc
            if not 1 <= port <= 65535:
                msg = f"DCWAGE_PORT must be between 1 and 65535, got {port}"
                raise ConfigurationError(msg)
        else:
            port = DEFAULT_PORT

        log_level = env.get("DCWAGE_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
        if log_level not in LOG_LEVELS:
            msg = (
                f"DCWAGE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got {log_level!r}"
            )
            raise ConfigurationError(msg)

        return cls(host=host, port=port, log_level=log_level)


def load_settings() -> Settings:
    """Load ``.env`` files, then read settings from the environment."""
    load_dotenv(_PROJECT_ROOT / ".env")
    load_dotenv(_BACKEND_DIR / ".env")
    return Settings.from_env()
