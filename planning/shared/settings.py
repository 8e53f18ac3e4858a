"""
Application settings.

Reads process configuration from environment variables (optionally from a
``.env`` file) for the HTTP layer and logging setup. Planning tables are
not configurable here; they live beside the components that use them.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """
    Process-wide settings.

    Attributes:
        log_level: Root log level name (PLANNING_LOG_LEVEL)
        log_file: Optional log file path (PLANNING_LOG_FILE)
        json_logs: Emit structured JSON logs instead of text (PLANNING_JSON_LOGS)
        debug_errors: Include full diagnostic details in error responses
            (PLANNING_DEBUG_ERRORS)
        cors_origins: Allowed CORS origins, comma separated (PLANNING_CORS_ORIGINS)
    """

    log_level: str = "INFO"
    log_file: Optional[str] = None
    json_logs: bool = False
    debug_errors: bool = False
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


def load_settings() -> Settings:
    """Build settings from the current environment."""
    origins = os.environ.get("PLANNING_CORS_ORIGINS")
    return Settings(
        log_level=os.environ.get("PLANNING_LOG_LEVEL", "INFO").upper(),
        log_file=os.environ.get("PLANNING_LOG_FILE") or None,
        json_logs=_env_flag("PLANNING_JSON_LOGS"),
        debug_errors=_env_flag("PLANNING_DEBUG_ERRORS"),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()]
        if origins
        else ["*"],
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached process settings."""
    return load_settings()
