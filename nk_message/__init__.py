"""nk_message — format monitoring messages as XML and purge stale message files."""

PROGRAM_NAME = "nk_message"
__version__ = "1.4"
