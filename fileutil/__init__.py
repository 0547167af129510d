"""Small filesystem and download helpers."""

from .models import PurgeReport
from .utils import (
    HttpClient,
    LineStream,
    LineTooLongError,
    copy_file,
    create_folder,
    create_folders,
    delete_files_older_than,
    download_file,
    file_exists,
    folder_exists,
    has_stdin,
    path_exists,
    put_content_file,
    read_file,
    read_file_content,
    read_file_with_buffer_size,
    walk_dir,
    write_content_to_file,
)
from .utils.file_utils import O_APPEND, O_CREAT, O_EXCL, O_RDONLY, O_RDWR, O_SYNC, O_TRUNC, O_WRONLY

__version__ = "0.1.0"

__all__ = [
    "HttpClient",
    "LineStream",
    "LineTooLongError",
    "PurgeReport",
    "O_APPEND",
    "O_CREAT",
    "O_EXCL",
    "O_RDONLY",
    "O_RDWR",
    "O_SYNC",
    "O_TRUNC",
    "O_WRONLY",
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
