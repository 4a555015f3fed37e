"""Host, user, and directory lookups backed by the running platform."""

import getpass
import logging
import os
import socket

logger = logging.getLogger(__name__)

UNKNOWN_HOST = "Unknown_Host_Name"
UNKNOWN_USER = "No Username"


def host_name() -> str:
    """Local host name, or UNKNOWN_HOST if it cannot be determined."""
    try:
        name = socket.gethostname()
    except OSError as e:
        logger.warning("Host name lookup failed: %s", e)
        return UNKNOWN_HOST
    return name or UNKNOWN_HOST


def current_user() -> str:
    """Login name from LOGNAME, USER, LNAME or USERNAME, then the password
    database entry of the current uid; UNKNOWN_USER if none is found.
    """
    try:
        name = getpass.getuser()
    except (OSError, KeyError) as e:
        logger.warning("User lookup failed: %s", e)
        return UNKNOWN_USER
    return name or UNKNOWN_USER


def list_directory(path: str) -> list[os.DirEntry]:
    """Return the entries of a directory (non-recursive).

    Raises OSError if the directory cannot be opened.
    """
    with os.scandir(path) as it:
        return list(it)
