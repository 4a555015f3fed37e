"""Status keyword → numeric severity code mapping."""

DEFAULT_CODE = "0"

# Case-sensitive, exact match. Codes are consumed by the message viewer.
STATUS_CODES: dict[str, str] = {
    "info": "0",
    "information": "0",
    "warn": "1",
    "warning": "1",
    "crit": "2",
    "critical": "2",
    "success": "3",
    "successful": "3",
    "test": "9",
}

# (code, keywords, meaning) rows for the usage text
STATUS_TABLE = (
    ("0", "info|information", "'Normal', successful execution of an action (white)"),
    ("1", "warn|warning", "A non-critical problem has occurred (yellow)"),
    ("2", "crit|critical", "A critical problem (red)"),
    ("3", "success|successful", "An 'extra good' successful execution (green)"),
    ("9", "test", "Used when testing messages (blue)"),
)


def resolve_status(keyword: str | None) -> str:
    """Return the numeric code for a status keyword. Unknown or empty → "0"."""
    if not keyword:
        return DEFAULT_CODE
    return STATUS_CODES.get(keyword, DEFAULT_CODE)
