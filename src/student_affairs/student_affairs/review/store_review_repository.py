from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Mapping, Sequence

from ..core.enums import ReviewKind
from ..database.query import OrderBy
from ..database.store import RecordStore
from .model import ReviewEntry
from .repository import ReviewLogRepository

COLLECTION = "identity_reviews"


def _created_at(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def row_to_entry(row: Mapping[str, Any]) -> ReviewEntry:
    return ReviewEntry(
        id=str(row["id"]),
        kind=ReviewKind(row["kind"]),
        account_id=str(row["account_id"]),
        student_ids=tuple(json.loads(row.get("student_ids") or "[]")),
        detail=row.get("detail"),
        created_at=_created_at(row["created_at"]),
    )


class StoreReviewLogRepository(ReviewLogRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def record(self, entry: ReviewEntry) -> ReviewEntry:
        row = self._store.insert(
            COLLECTION,
            {
                "kind": entry.kind.value,
                "account_id": entry.account_id,
                "student_ids": json.dumps(list(entry.student_ids)),
                "detail": (entry.detail or "")[:500] or None,
                "created_at": entry.created_at,
            },
        )
        return row_to_entry(row)

    def list_recent(self, *, limit: int = 50) -> Sequence[ReviewEntry]:
        rows = self._store.query(COLLECTION, order=OrderBy("created_at", descending=True), limit=limit)
        return [row_to_entry(r) for r in rows]
