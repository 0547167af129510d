from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

import requests
from dotenv import load_dotenv

from .utils.file_utils import copy_file, create_folders, file_exists, folder_exists, walk_dir
from .utils.http_client import DEFAULT_TIMEOUT, download_file
from .utils.line_reader import DEFAULT_MAX_LINE_SIZE, LineStream, read_file, read_file_with_buffer_size
from .utils.purge import delete_files_older_than
from .utils.stdin import has_stdin

load_dotenv()


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def _env_int(name: str) -> int | None:
    value = _env_str(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _env_float(name: str) -> float | None:
    value = _env_str(name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fileutil", description="Small filesystem and download helpers.")
    parser.add_argument(
        "--log-level",
        default=(_env_str("FILEUTIL_LOG_LEVEL") or "INFO").upper(),
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    exists = commands.add_parser("exists", help="Exit 0 when the path exists as a file (or folder with --dir)")
    exists.add_argument("path")
    exists.add_argument("--dir", action="store_true", help="Probe for a folder instead of a file")

    mkdir = commands.add_parser("mkdir", help="Create folders and their parents")
    mkdir.add_argument("paths", nargs="+")

    purge = commands.add_parser("purge", help="Delete files older than --max-age seconds")
    purge.add_argument("folder")
    purge.add_argument(
        "--max-age",
        type=float,
        default=_env_float("FILEUTIL_MAX_AGE"),
        help="Maximum file age in seconds",
    )
    purge.add_argument("--sorted", action="store_true", help="Visit entries in name order")

    download = commands.add_parser("download", help="Download a URL to a local file")
    download.add_argument("url")
    download.add_argument("dest")
    download.add_argument(
        "--timeout",
        type=float,
        default=_env_float("FILEUTIL_TIMEOUT") or DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds",
    )
    download.add_argument("--user-agent", default=_env_str("FILEUTIL_USER_AGENT"), help="Override the User-Agent header")

    walk = commands.add_parser("walk", help="List files under a folder matching a suffix (case-insensitive)")
    walk.add_argument("root")
    walk.add_argument("suffix")

    copy = commands.add_parser("copy", help="Copy a file")
    copy.add_argument("source")
    copy.add_argument("dest")

    cat = commands.add_parser("cat", help="Print a file (or piped stdin) line by line")
    cat.add_argument("path", nargs="?")
    cat.add_argument(
        "--buffer-size",
        type=int,
        default=_env_int("FILEUTIL_BUFFER_SIZE"),
        help="Maximum line size in bytes",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _open_lines(args: argparse.Namespace) -> LineStream | None:
    if args.path:
        if args.buffer_size:
            return read_file_with_buffer_size(args.path, args.buffer_size)
        return read_file(args.path)
    if not has_stdin():
        logging.error("No input: pass a path or pipe data on stdin.")
        return None
    return LineStream(
        sys.stdin.buffer,
        "<stdin>",
        max_line_size=args.buffer_size or DEFAULT_MAX_LINE_SIZE,
        close_handle=False,
    )


def run_command(args: argparse.Namespace) -> int:
    if args.command == "exists":
        found = folder_exists(args.path) if args.dir else file_exists(args.path)
        return 0 if found else 1

    if args.command == "mkdir":
        create_folders(args.paths)
        return 0

    if args.command == "purge":
        if args.max_age is None:
            logging.error("--max-age (or FILEUTIL_MAX_AGE) is required for purge.")
            return 2
        report = delete_files_older_than(
            args.folder,
            args.max_age,
            lambda path: logging.info("Deleted %s", path),
            sort=args.sorted,
        )
        return 1 if report.failed else 0

    if args.command == "download":
        download_file(args.dest, args.url, timeout=args.timeout, user_agent=args.user_agent)
        logging.info("Saved %s to %s", args.url, args.dest)
        return 0

    if args.command == "walk":
        for path in walk_dir(args.root, args.suffix):
            print(path)
        return 0

    if args.command == "copy":
        copy_file(args.source, args.dest)
        return 0

    if args.command == "cat":
        lines = _open_lines(args)
        if lines is None:
            return 1
        out = sys.stdout.buffer
        with lines:
            for line in lines:
                out.write(line.encode(lines.encoding, errors="surrogateescape") + b"\n")
        out.flush()
        return 0

    logging.error("Unknown command %s", args.command)
    return 2


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        return run_command(args)
    except (OSError, ValueError, requests.RequestException) as exc:
        logging.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
