"""Output targets: auto-built message filenames, file writing, and stdout."""

import logging
import sys
from typing import Callable

from nk_message.system import host_name

logger = logging.getLogger(__name__)

FILENAME_PREFIX = "message-"
FILENAME_SUFFIX = ".xml"

# Undecodable command-line bytes arrive as lone surrogates; write them back
# out as the original bytes.
ENCODING_ERRORS = "surrogateescape"


def build_filename(
    host: str,
    timestamp_compact: str,
    host_func: Callable[[], str] = host_name,
) -> str:
    """message-<host>-<YYYYMMDDHHMMSS>.xml; an empty host is looked up first."""
    if not host:
        host = host_func()
    return f"{FILENAME_PREFIX}{host}-{timestamp_compact}{FILENAME_SUFFIX}"


def write_message(path: str, xml_text: str) -> None:
    """Write the document to path, replacing any existing file.

    Raises OSError if the file cannot be opened or written.
    """
    with open(path, "w", encoding="utf-8", errors=ENCODING_ERRORS) as f:
        f.write(xml_text)
    logger.info("Wrote message to %s (%d characters)", path, len(xml_text))


def write_stdout(text: str) -> None:
    """Write text to stdout, passing undecodable bytes through unchanged."""
    stream = sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(text)
        return
    stream.flush()
    buffer.write(text.encode(stream.encoding or "utf-8", ENCODING_ERRORS))
    buffer.flush()
