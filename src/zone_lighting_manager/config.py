"""Environment-driven configuration for the zone lighting service.

All settings are read from ``ZONE_LIGHTS_*`` environment variables at the
point of use so tests can override them with ``monkeypatch.setenv``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parent
DEFAULT_STATIC_DIR = PACKAGE_ROOT.parent.parent / "public"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SERVICE_URL = "http://localhost:3000"


def get_env(name: str, default: str | None = None) -> str | None:
    """Return an environment variable, or ``default`` when it is unset."""
    value = os.getenv(name)
    if value is None:
        return default
    return value


def get_env_bool(name: str, default: bool) -> bool:
    """Get boolean environment variable.

    Args:
        name: Environment variable name
        default: Default value if not found

    Returns:
        Boolean value from environment or default
    """
    raw = get_env(name)
    if raw is None:
        return default

    s = raw.strip()
    if s == "":
        return default

    lowered = s.lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False

    try:
        return bool(int(s))
    except ValueError:
        return default


def get_env_int(name: str, default: int) -> int:
    """Get integer environment variable.

    Args:
        name: Environment variable name
        default: Default value if not found or invalid

    Returns:
        Integer value from environment or default
    """
    raw = get_env(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        return int(raw.strip())
    except ValueError:
        logger.warning(
            f"Invalid integer value for {name}: '{raw}'. Using default: {default}"
        )
        return default


def service_host() -> str:
    return get_env("ZONE_LIGHTS_HOST", DEFAULT_HOST) or DEFAULT_HOST


def service_port() -> int:
    return get_env_int("ZONE_LIGHTS_PORT", DEFAULT_PORT)


def log_level() -> str:
    return (get_env("ZONE_LIGHTS_LOG_LEVEL", DEFAULT_LOG_LEVEL) or "").upper()


def static_dir() -> Path:
    """Directory holding the browser control panel."""
    return Path(
        get_env("ZONE_LIGHTS_STATIC_DIR", str(DEFAULT_STATIC_DIR))
        or str(DEFAULT_STATIC_DIR)
    )


def serve_static() -> bool:
    return get_env_bool("ZONE_LIGHTS_SERVE_STATIC", True)


def service_url() -> str:
    return (
        get_env("ZONE_LIGHTS_URL", DEFAULT_SERVICE_URL) or DEFAULT_SERVICE_URL
    ).rstrip("/")
