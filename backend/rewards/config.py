"""
Runtime settings for the rewards backend.

Every value comes from an environment variable with a default. Malformed
values are logged and replaced by their defaults so a bad deployment
variable never prevents the service from starting.
"""

import logging
import os
from typing import List

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off", ""):
        return False
    logger.warning("Invalid %s value %r; falling back to default %s", name, raw, default)
    return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """Centralized service settings with environment variable overrides"""
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./rewards.db")

    _valid_log_levels = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if LOG_LEVEL not in _valid_log_levels:
        logger.warning("Invalid LOG_LEVEL value; falling back to default INFO")
        LOG_LEVEL = "INFO"

    SEED_SAMPLE_DATA = _env_bool("SEED_SAMPLE_DATA", False)

    CORS_ORIGINS = _env_list(
        "CORS_ORIGINS",
        [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
    )

    API_HOST = os.getenv("API_HOST", "0.0.0.0")

    # Parse port with validation and fallback
    _default_port = 8000
    try:
        API_PORT = int(os.getenv("API_PORT", str(_default_port)))
    except (TypeError, ValueError):
        logger.warning(
            "Invalid API_PORT value; falling back to default %s",
            _default_port,
        )
        API_PORT = _default_port
