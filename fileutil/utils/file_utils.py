"""Filesystem helpers for probing paths, preparing folders and moving bytes around."""

from __future__ import annotations

import logging
import os
import shutil
import stat
from typing import Iterable, List, Union

O_RDONLY = os.O_RDONLY
O_WRONLY = os.O_WRONLY
O_RDWR = os.O_RDWR
O_APPEND = os.O_APPEND
O_CREAT = os.O_CREAT
O_TRUNC = os.O_TRUNC
O_EXCL = os.O_EXCL
O_SYNC = getattr(os, "O_SYNC", 0)

# Windows opens descriptors in text mode unless told otherwise.
_O_BINARY = getattr(os, "O_BINARY", 0)

FOLDER_MODE = 0o700
CONTENT_FILE_MODE = 0o666
COPY_FILE_MODE = 0o644
DEFAULT_WRITE_FLAGS = O_WRONLY | O_CREAT | O_TRUNC

Content = Union[bytes, bytearray, memoryview, str]


def file_exists(path: str) -> bool:
    """Returns True when ``path`` exists and is not a directory.

    Stat failures of any kind are reported as ``False``.
    """

    try:
        info = os.stat(path)
    except OSError:
        return False
    return not stat.S_ISDIR(info.st_mode)


def folder_exists(path: str) -> bool:
    """Returns True when ``path`` exists and is a directory."""

    try:
        info = os.stat(path)
    except OSError:
        return False
    return stat.S_ISDIR(info.st_mode)


def path_exists(path: str) -> bool:
    """Returns False only when ``path`` is definitely missing.

    Unlike :func:`file_exists`, other stat errors (permissions, loops) count as
    existing.
    """

    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError as exc:
        logging.debug("stat %s failed, assuming it exists: %s", path, exc)
    return True


def create_folder(path: str, mode: int = FOLDER_MODE) -> str:
    """Creates a directory (and its parents) if needed."""

    os.makedirs(path, mode=mode, exist_ok=True)
    return path


def create_folders(paths: Iterable[str]) -> None:
    """Creates every folder in order, stopping at the first failure."""

    for path in paths:
        create_folder(path)


def read_file_content(path: str) -> bytes:
    with open(path, "rb") as handle:
        return handle.read()


def write_content_to_file(content: Content, filepath: str, flag: int = DEFAULT_WRITE_FLAGS) -> None:
    """Writes ``content`` to ``filepath`` opened with the given ``os.O_*`` flags."""

    if isinstance(content, str):
        data = content.encode("utf-8")
    elif isinstance(content, (bytes, bytearray, memoryview)):
        data = bytes(content)
    else:
        raise TypeError(f"content must be bytes-like or str, not {type(content).__name__}")
    fd = os.open(filepath, flag | _O_BINARY, CONTENT_FILE_MODE)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)


def put_content_file(path: str, content: Content) -> None:
    """Appends ``content`` to ``path``, creating the file when it is missing."""

    write_content_to_file(content, path, O_CREAT | O_APPEND | O_RDWR)


def walk_dir(dir_path: str, suffix: str) -> List[str]:
    """Lists every file below ``dir_path`` whose name ends with ``suffix``.

    The suffix comparison ignores case. Directories are never returned and
    symbolic links are not followed. Any traversal error is raised.
    """

    files: List[str] = []
    target = suffix.upper()

    root_info = os.lstat(dir_path)
    if not stat.S_ISDIR(root_info.st_mode):
        if os.path.basename(dir_path).upper().endswith(target):
            files.append(dir_path)
        return files

    _collect_suffix_matches(dir_path, target, files)
    return files


def _collect_suffix_matches(directory: str, target: str, files: List[str]) -> None:
    with os.scandir(directory) as iterator:
        entries = sorted(iterator, key=lambda entry: entry.name)
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            _collect_suffix_matches(entry.path, target, files)
        elif entry.name.upper().endswith(target):
            files.append(entry.path)


def copy_file(source: str, dest: str) -> bool:
    """Copies ``source`` over ``dest`` (created or truncated) and returns True."""

    with open(source, "rb") as src:
        fd = os.open(dest, O_WRONLY | O_CREAT | O_TRUNC | _O_BINARY, COPY_FILE_MODE)
        with os.fdopen(fd, "wb") as dst:
            shutil.copyfileobj(src, dst)
    logging.debug("Copied %s to %s", source, dest)
    return True
