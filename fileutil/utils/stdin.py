"""Detects whether a CLI is being fed through a pipe or redirect."""

from __future__ import annotations

import os
import stat
import sys
from typing import IO, Any, Optional


def has_stdin(stream: Optional[IO[Any]] = None) -> bool:
    """Returns True when ``stream`` (default ``sys.stdin``) is piped or redirected.

    A terminal is a character device, so anything else counts as piped input.
    Handles that cannot be stat'ed report False.
    """

    if stream is None:
        stream = sys.stdin
    if stream is None:
        return False
    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (OSError, ValueError, AttributeError):
        return False

    piped_from_chr_dev = not stat.S_ISCHR(mode)
    piped_from_fifo = stat.S_ISFIFO(mode)
    return piped_from_chr_dev or piped_from_fifo
