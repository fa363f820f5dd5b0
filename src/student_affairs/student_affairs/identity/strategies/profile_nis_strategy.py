from __future__ import annotations

from ...students.repository import StudentRepository
from ..context import ResolveContext
from ..model import MatchOutcome
from .base import MatchStrategy


class ProfileNisStrategy(MatchStrategy):
    """Exact NIS from the account's profile."""

    name = "profile_nis"

    def __init__(self, students: StudentRepository):
        self._students = students

    def attempt(self, ctx: ResolveContext) -> MatchOutcome:
        nis = ctx.profile.nis
        if not nis:
            return MatchOutcome.not_applicable("profil tanpa NIS")

        student = self._students.find_by_nis(nis)
        if student is None:
            return MatchOutcome.no_match(f"NIS {nis} tidak ditemukan")

        owner = student.linked_account_id
        if owner is not None and owner != ctx.account.id:
            return MatchOutcome.conflict(student, f"NIS {nis} sudah terhubung ke akun {owner}")
        return MatchOutcome.matched(student, f"NIS {nis}")
