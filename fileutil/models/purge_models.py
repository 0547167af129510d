from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class PurgeReport:
    started_at: float
    deleted: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.deleted)
