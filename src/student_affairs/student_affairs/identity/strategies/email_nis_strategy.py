from __future__ import annotations

from ...core.enums import ReviewKind, StudentStatus
from ...students.repository import StudentRepository
from ..context import ResolveContext
from ..model import MatchOutcome
from .base import MatchStrategy

DEFAULT_MIN_PATTERN_LENGTH = 4


class EmailNisPatternStrategy(MatchStrategy):
    """Unlinked active student whose NIS contains the email local part.

    Schools often issue addresses like ``1001@smk.sch.id``.
    Short local parts are skipped, they would match too many NIS values.
    """

    name = "email_nis_pattern"

    def __init__(self, students: StudentRepository, *, min_length: int = DEFAULT_MIN_PATTERN_LENGTH):
        self._students = students
        self._min_length = int(min_length)

    def attempt(self, ctx: ResolveContext) -> MatchOutcome:
        local = ctx.account.email_local_part
        if not local or len(local) < self._min_length:
            return MatchOutcome.not_applicable("email tidak cukup spesifik")

        candidates = self._students.find_unlinked(nis_contains=local, status=StudentStatus.ACTIVE, limit=10)
        if not candidates:
            return MatchOutcome.no_match()
        if len(candidates) > 1:
            return MatchOutcome.ambiguous(
                candidates,
                review=ReviewKind.AMBIGUOUS_NIS_PATTERN,
                detail=f"{len(candidates)} siswa dengan NIS mengandung '{local}'",
            )
        return MatchOutcome.matched(candidates[0], f"NIS mengandung '{local}'")
