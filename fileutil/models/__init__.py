"""Data models returned by the filesystem helpers."""

from .purge_models import PurgeReport

__all__ = ["PurgeReport"]
