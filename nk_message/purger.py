"""Purge stale message files from a directory."""

import logging
import os
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable

from nk_message.output import FILENAME_PREFIX
from nk_message.system import list_directory

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


@dataclass
class PurgeReport:
    directory: str
    max_age_days: int
    dry_run: bool = False
    removed: list[str] = field(default_factory=list)
    kept: list[str] = field(default_factory=list)
    errors: list[tuple[str, str]] = field(default_factory=list)

    @property
    def matched(self) -> int:
        return len(self.removed) + len(self.kept) + len(self.errors)


def is_message_file(entry) -> bool:
    """Regular file (not following symlinks) whose name starts with message-."""
    return entry.name.startswith(FILENAME_PREFIX) and entry.is_file(follow_symlinks=False)


def is_stale(age_seconds: float, max_age_days: int) -> bool:
    """True when a file of the given age should be removed.

    Strictly older than the threshold; a negative threshold matches everything.
    """
    if max_age_days < 0:
        return True
    return age_seconds > max_age_days * SECONDS_PER_DAY


def purge_message_files(
    directory: str,
    max_age_days: int,
    dry_run: bool = False,
    time_func=None,
    list_dir: Callable[[str], Iterable] = list_directory,
) -> PurgeReport:
    """Delete message files in directory older than max_age_days.

    Raises OSError if the directory cannot be listed. Failures on single
    entries are recorded in the report and the scan continues.
    """
    now_func = time_func or time.time
    report = PurgeReport(directory=directory, max_age_days=max_age_days, dry_run=dry_run)

    logger.info("Purging files older than %d day(s) in '%s'", max_age_days, directory)
    entries = list_dir(directory)
    now = now_func()

    for entry in sorted(entries, key=lambda e: e.name):
        if not is_message_file(entry):
            continue

        try:
            mtime = entry.stat(follow_symlinks=False).st_mtime
        except OSError as e:
            logger.warning("Cannot stat %s: %s", entry.name, e)
            report.errors.append((entry.name, str(e)))
            continue

        age = now - mtime
        if not is_stale(age, max_age_days):
            logger.debug("Keeping %s (age %.0fs)", entry.name, age)
            report.kept.append(entry.name)
            continue

        if dry_run:
            logger.debug("Would remove %s (age %.0fs)", entry.name, age)
            report.removed.append(entry.name)
            continue

        try:
            os.remove(entry.path)
        except OSError as e:
            logger.warning("Cannot remove %s: %s", entry.name, e)
            report.errors.append((entry.name, str(e)))
            continue
        logger.info("Removed %s (age %.0fs)", entry.name, age)
        report.removed.append(entry.name)

    return report
