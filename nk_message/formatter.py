"""XML message formatter — fills defaults and renders the fixed schema."""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable
from xml.sax.saxutils import escape

from nk_message.models import MessageRecord
from nk_message.status import resolve_status
from nk_message.system import current_user, host_name

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
COMPACT_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

XML_TEMPLATE = (
    "<?xml version='1.0' standalone='yes'?>\n"
    "<messages>\n"
    "  <message>\n"
    "    <host>{host}</host>\n"
    "    <sender>{user}</sender>\n"
    "    <timestamp>{timestamp}</timestamp>\n"
    "    <subject>{subject}</subject>\n"
    "    <status>{status}</status>\n"
    "    <text>{text}</text>\n"
    "    <application>{app}</application>\n"
    "  </message>\n"
    "</messages>\n"
)


def format_timestamp(now: datetime) -> str:
    """Human-readable timestamp, YYYY-MM-DD HH:MM:SS."""
    return now.strftime(TIMESTAMP_FORMAT)


def compact_timestamp(now: datetime) -> str:
    """Timestamp without separators, YYYYMMDDHHMMSS."""
    return now.strftime(COMPACT_TIMESTAMP_FORMAT)


def complete_record(
    record: MessageRecord,
    now: datetime | None = None,
    user_func: Callable[[], str] = current_user,
    host_func: Callable[[], str] = host_name,
) -> MessageRecord:
    """Return a copy of record with timestamp, user, host and status filled in.

    The timestamp is always replaced with the current local time. User and
    host values shorter than two characters are replaced by the lookups.
    """
    now = now or datetime.now()
    user = record.user
    if len(user) < 2:
        user = user_func()
        logger.debug("No sender given, using %r", user)
    host = record.host
    if len(host) < 2:
        host = host_func()
        logger.debug("No host given, using %r", host)

    return replace(
        record,
        timestamp=format_timestamp(now),
        user=user,
        host=host,
        status=resolve_status(record.status),
    )


def render_xml(record: MessageRecord, escape_xml: bool = True) -> str:
    """Render a completed record into the messages document.

    With escape_xml=False field values are inserted verbatim, so input
    containing markup characters yields a malformed document.
    """
    values = {
        "host": record.host,
        "user": record.user,
        "timestamp": record.timestamp,
        "subject": record.subject,
        "status": record.status,
        "text": record.text,
        "app": record.app,
    }
    if escape_xml:
        values = {k: escape(v) for k, v in values.items()}
    return XML_TEMPLATE.format(**values)


def format_message(
    record: MessageRecord,
    now: datetime | None = None,
    escape_xml: bool = True,
    user_func: Callable[[], str] = current_user,
    host_func: Callable[[], str] = host_name,
) -> str:
    """Complete the record and render it as XML text."""
    completed = complete_record(record, now=now, user_func=user_func, host_func=host_func)
    return render_xml(completed, escape_xml=escape_xml)
