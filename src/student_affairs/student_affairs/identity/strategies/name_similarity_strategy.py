from __future__ import annotations

from ...core.enums import ReviewKind
from ...students.repository import StudentRepository
from ..context import ResolveContext
from ..model import MatchOutcome
from .base import MatchStrategy


class NameSimilarityStrategy(MatchStrategy):
    """Unlinked student whose full name contains the profile name (case-insensitive).

    Only a unique hit is a match; two or more is ambiguous and never linked.
    """

    name = "name_similarity"

    def __init__(self, students: StudentRepository):
        self._students = students

    def attempt(self, ctx: ResolveContext) -> MatchOutcome:
        name = (ctx.profile.full_name or "").strip()
        if not name:
            return MatchOutcome.not_applicable("profil tanpa nama")

        candidates = self._students.find_unlinked(name_contains=name, limit=10)
        if not candidates:
            return MatchOutcome.no_match()
        if len(candidates) > 1:
            return MatchOutcome.ambiguous(
                candidates,
                review=ReviewKind.AMBIGUOUS_NAME,
                detail=f"{len(candidates)} siswa dengan nama mengandung '{name}'",
            )
        return MatchOutcome.matched(candidates[0], f"nama '{name}'")
