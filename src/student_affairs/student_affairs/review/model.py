from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from ..core.enums import ReviewKind


@dataclass(frozen=True)
class ReviewEntry:
    """A resolver event an administrator should look at (conflict, ambiguity, orphan hint)."""

    kind: ReviewKind
    account_id: str
    student_ids: Tuple[str, ...]
    detail: Optional[str]
    created_at: datetime
    id: Optional[str] = field(default=None, compare=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "account_id": self.account_id,
            "student_ids": list(self.student_ids),
            "detail": self.detail,
            "created_at": self.created_at.isoformat(sep=" ", timespec="seconds"),
        }
