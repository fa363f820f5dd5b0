from __future__ import annotations

from typing import Protocol, Sequence

from .model import ReviewEntry


class ReviewLogRepository(Protocol):
    def record(self, entry: ReviewEntry) -> ReviewEntry:
        raise NotImplementedError

    def list_recent(self, *, limit: int = 50) -> Sequence[ReviewEntry]:
        raise NotImplementedError
