from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.enums import MatchKind, ResolutionStatus, ReviewKind
from ..students.model import StudentRecord


@dataclass(frozen=True)
class ResolveOptions:
    """Per-call switches for ``IdentityResolver.resolve``.

    ``persist_links=False`` is a dry run: nothing is written, not even the
    lazily created profile. ``allow_bootstrap`` lets the resolver create a new
    student record for student-role accounts nobody could be matched to.
    """

    persist_links: bool = True
    allow_bootstrap: bool = False


@dataclass(frozen=True)
class MatchOutcome:
    kind: MatchKind
    student: Optional[StudentRecord] = None
    candidates: Tuple[StudentRecord, ...] = ()
    detail: Optional[str] = None
    review: Optional[ReviewKind] = None

    @classmethod
    def matched(cls, student: StudentRecord, detail: Optional[str] = None) -> "MatchOutcome":
        return cls(MatchKind.MATCHED, student=student, candidates=(student,), detail=detail)

    @classmethod
    def ambiguous(cls, candidates, *, review: ReviewKind, detail: Optional[str] = None) -> "MatchOutcome":
        return cls(MatchKind.AMBIGUOUS, candidates=tuple(candidates), detail=detail, review=review)

    @classmethod
    def conflict(cls, student: StudentRecord, detail: Optional[str] = None) -> "MatchOutcome":
        return cls(
            MatchKind.CONFLICT,
            student=student,
            candidates=(student,),
            detail=detail,
            review=ReviewKind.LINK_CONFLICT,
        )

    @classmethod
    def not_applicable(cls, detail: Optional[str] = None) -> "MatchOutcome":
        return cls(MatchKind.NOT_APPLICABLE, detail=detail)

    @classmethod
    def no_match(cls, detail: Optional[str] = None, *, candidates=(), review: Optional[ReviewKind] = None) -> "MatchOutcome":
        return cls(MatchKind.NO_MATCH, candidates=tuple(candidates), detail=detail, review=review)


@dataclass(frozen=True)
class Resolution:
    """Result of one resolve call. ``NOT_FOUND`` is a value, not an exception."""

    status: ResolutionStatus
    student: Optional[StudentRecord] = None
    strategy: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status != ResolutionStatus.NOT_FOUND

    @property
    def student_id(self) -> Optional[str]:
        return self.student.id if self.student else None

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "strategy": self.strategy,
            "student": self.student.to_dict() if self.student else None,
        }


NOT_FOUND = Resolution(status=ResolutionStatus.NOT_FOUND)
