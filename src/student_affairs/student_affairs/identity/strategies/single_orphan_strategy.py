from __future__ import annotations

from ...core.enums import ReviewKind
from ...students.repository import StudentRepository
from ..context import ResolveContext
from ..model import MatchOutcome
from .base import MatchStrategy


class SingleOrphanStrategy(MatchStrategy):
    """Report-only: flags the case where exactly one student is still unlinked.

    Never returns a match. Being the last orphan says nothing about who the
    record belongs to, so it is left to an administrator.
    """

    name = "single_orphan"

    def __init__(self, students: StudentRepository):
        self._students = students

    def attempt(self, ctx: ResolveContext) -> MatchOutcome:
        orphans = self._students.find_unlinked(limit=2)
        if len(orphans) != 1:
            return MatchOutcome.no_match()
        return MatchOutcome.no_match(
            f"hanya satu siswa belum terhubung ({orphans[0].nis})",
            candidates=orphans,
            review=ReviewKind.SINGLE_ORPHAN,
        )
