"""Message and purge request records."""

import logging
from dataclasses import dataclass, fields

from nk_message import PROGRAM_NAME

logger = logging.getLogger(__name__)

# Maximum length per field, in characters. Longer values keep the first N.
FIELD_LIMITS: dict[str, int] = {
    "host": 1023,
    "user": 63,
    "timestamp": 19,
    "subject": 99,
    "text": 8191,
    "status": 31,
    "app": 99,
}


def truncate(value: str, limit: int) -> str:
    return value[:limit]


@dataclass
class MessageRecord:
    host: str = ""
    user: str = ""
    timestamp: str = ""
    subject: str = ""
    text: str = ""
    status: str = ""
    app: str = PROGRAM_NAME

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                value = ""
            limit = FIELD_LIMITS[f.name]
            if len(value) > limit:
                logger.debug(
                    "Truncating %s from %d to %d characters", f.name, len(value), limit
                )
                value = truncate(value, limit)
            setattr(self, f.name, value)


@dataclass(frozen=True)
class PurgeRequest:
    directory: str = "."
    max_age_days: int = 1
    dry_run: bool = False
