"""Utility helpers for filesystem and HTTP operations."""

from .file_utils import (
    copy_file,
    create_folder,
    create_folders,
    file_exists,
    folder_exists,
    path_exists,
    put_content_file,
    read_file_content,
    walk_dir,
    write_content_to_file,
)
from .http_client import HttpClient, download_file
from .line_reader import LineStream, LineTooLongError, read_file, read_file_with_buffer_size
from .purge import delete_files_older_than
from .stdin import has_stdin

__all__ = [
    "HttpClient",
    "LineStream",
    "LineTooLongError",
    "copy_file",
    "create_folder",
    "create_folders",
    "delete_files_older_than",
    "download_file",
    "file_exists",
    "folder_exists",
    "has_stdin",
    "path_exists",
    "put_content_file",
    "read_file",
    "read_file_content",
    "read_file_with_buffer_size",
    "walk_dir",
    "write_content_to_file",
]
