"""Removes files whose modification time is older than a maximum age."""

from __future__ import annotations

import errno
import logging
import os
import stat
import time
from datetime import timedelta
from typing import Callable, Optional, Union

from ..models import PurgeReport

MaxAge = Union[timedelta, int, float]
PurgeCallback = Callable[[str], None]


class _Purger:
    def __init__(self, max_age: float, callback: Optional[PurgeCallback], sort: bool) -> None:
        self.max_age = max_age
        self.callback = callback
        self.sort = sort
        self.report = PurgeReport(started_at=time.time())

    def run(self, root: str) -> PurgeReport:
        root_info = os.lstat(root)
        if not stat.S_ISDIR(root_info.st_mode):
            raise NotADirectoryError(errno.ENOTDIR, "cannot purge non-directory", root)
        self._purge_directory(root)
        return self.report

    def _purge_directory(self, directory: str) -> None:
        try:
            with os.scandir(directory) as iterator:
                entries = list(iterator)
        except OSError as exc:
            logging.debug("Skipping unreadable directory %s: %s", directory, exc)
            return
        if self.sort:
            entries.sort(key=lambda entry: entry.name)

        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as exc:
                logging.debug("Skipping unreadable entry %s: %s", entry.path, exc)
                continue
            if is_dir:
                self._purge_directory(entry.path)
            else:
                self._consider(entry.path)

    def _consider(self, path: str) -> None:
        try:
            info = os.stat(path)
        except OSError as exc:
            logging.debug("Skipping %s, stat failed: %s", path, exc)
            return
        if info.st_mtime + self.max_age >= self.report.started_at:
            return

        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as exc:
            logging.warning("Failed to remove expired file %s: %s", path, exc)
            self.report.failed.append(path)
            return

        self.report.deleted.append(path)
        if self.callback is not None:
            self.callback(path)


def delete_files_older_than(
    folder: str,
    max_age: MaxAge,
    callback: Optional[PurgeCallback] = None,
    *,
    sort: bool = False,
) -> PurgeReport:
    """Deletes every file under ``folder`` last modified more than ``max_age`` ago.

    ``max_age`` is a :class:`~datetime.timedelta` or a number of seconds and is
    measured against the moment the scan starts. Directories are kept, symbolic
    links are not followed, and unreadable nodes below the root are skipped.
    A missing or non-directory ``folder`` raises :class:`OSError` before
    anything is removed. ``callback`` is invoked with the path of each removed
    file.
    """

    seconds = max_age.total_seconds() if isinstance(max_age, timedelta) else float(max_age)
    purger = _Purger(seconds, callback, sort)
    report = purger.run(folder)
    if report.deleted:
        logging.info("Purged %s expired files under %s", report.count, folder)
    return report
