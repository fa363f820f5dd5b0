from __future__ import annotations

from ...students.repository import StudentRepository
from ..context import ResolveContext
from ..model import MatchOutcome
from .base import MatchStrategy


class DirectLinkStrategy(MatchStrategy):
    """Student already carries this account id."""

    name = "direct_link"

    def __init__(self, students: StudentRepository):
        self._students = students

    def attempt(self, ctx: ResolveContext) -> MatchOutcome:
        student = self._students.find_by_linked_account(ctx.account.id)
        if student is None:
            return MatchOutcome.no_match()
        return MatchOutcome.matched(student)
