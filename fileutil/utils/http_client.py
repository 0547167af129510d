"""HTTP helpers for downloading remote files to disk."""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional

import requests

DEFAULT_TIMEOUT = 10
CHUNK_SIZE = 1 << 14
DEFAULT_USER_AGENT = "fileutil/0.1.0"

DEFAULT_HEADERS: Dict[str, str] = {
    "user-agent": DEFAULT_USER_AGENT,
    "accept": "*/*",
}


class HttpClient:
    """A requests session with fixed headers and timeout, reusable across downloads."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, user_agent: Optional[str] = None) -> None:
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(DEFAULT_HEADERS)
        if user_agent:
            self._session.headers["user-agent"] = user_agent

    def download_file(self, url: str, dest_path: str) -> None:
        """Stream a remote file to ``dest_path``.

        The destination is only created once the server has answered. A
        download that fails half-way leaves the partial file behind.
        """

        try:
            with self._session.get(url, stream=True, timeout=self.timeout) as resp:
                resp.raise_for_status()
                with open(dest_path, "wb") as file_obj:
                    for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                        if chunk:
                            file_obj.write(chunk)
        except requests.RequestException as exc:
            logging.error("Download failed from %s: %s", url, exc)
            raise
        logging.debug("Saved %s to %s", url, dest_path)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def download_file(
    filepath: str,
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: Optional[str] = None,
    client: Optional[HttpClient] = None,
) -> None:
    """Downloads ``url`` into ``filepath``, raising on any request or I/O error."""

    if client is not None:
        client.download_file(url, os.fspath(filepath))
        return
    with HttpClient(timeout=timeout, user_agent=user_agent) as owned_client:
        owned_client.download_file(url, os.fspath(filepath))
