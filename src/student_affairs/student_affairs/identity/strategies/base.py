from __future__ import annotations

from abc import ABC, abstractmethod

from ..context import ResolveContext
from ..model import MatchOutcome


class MatchStrategy(ABC):
    """Strategy Pattern: one way of finding the student record behind an account.

    Strategies only read; linking is done by the resolver through the LinkingWriter.
    """

    name: str = "base"

    @abstractmethod
    def attempt(self, ctx: ResolveContext) -> MatchOutcome:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
