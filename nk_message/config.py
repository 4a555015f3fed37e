"""Configuration module — frozen dataclass loaded from environment variables."""

import logging
import os
from dataclasses import dataclass

from nk_message import PROGRAM_NAME

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def _parse_age(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        age = int(value)
    except ValueError:
        logger.warning("Invalid NK_MESSAGE_PURGE_AGE_DAYS '%s', using %d", value, default)
        return default
    if age < 0:
        logger.warning("Negative NK_MESSAGE_PURGE_AGE_DAYS '%s', using %d", value, default)
        return default
    return age


@dataclass(frozen=True)
class Config:
    app_name: str = PROGRAM_NAME
    purge_dir: str = "."
    purge_max_age_days: int = 1
    escape_xml: bool = True
    log_level: str = "WARNING"


def load_config() -> Config:
    """Build Config from environment variables with sensible defaults."""
    log_level = os.environ.get("NK_MESSAGE_LOG_LEVEL", Config.log_level).strip().upper()
    if log_level not in LOG_LEVELS:
        logger.warning("Invalid NK_MESSAGE_LOG_LEVEL '%s', falling back to WARNING", log_level)
        log_level = Config.log_level

    return Config(
        app_name=os.environ.get("NK_MESSAGE_APP", Config.app_name) or Config.app_name,
        purge_dir=os.environ.get("NK_MESSAGE_PURGE_DIR", Config.purge_dir) or Config.purge_dir,
        purge_max_age_days=_parse_age(
            os.environ.get("NK_MESSAGE_PURGE_AGE_DAYS"), Config.purge_max_age_days
        ),
        escape_xml=_parse_bool(os.environ.get("NK_MESSAGE_ESCAPE_XML", "true")),
        log_level=log_level,
    )
