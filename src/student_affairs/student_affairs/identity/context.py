from __future__ import annotations

from typing import Callable, Optional

from ..accounts.model import Account
from ..profiles.model import Profile
from .model import ResolveOptions


class ResolveContext:
    """State shared by the strategies during a single resolve call.

    The profile is loaded on first access so that an already-linked account
    resolves with one read and no profile lookup.
    """

    def __init__(self, account: Account, options: ResolveOptions, profile_loader: Callable[[], Profile]):
        self.account = account
        self.options = options
        self._profile_loader = profile_loader
        self._profile: Optional[Profile] = None

    @property
    def profile(self) -> Profile:
        if self._profile is None:
            self._profile = self._profile_loader()
        return self._profile

    @property
    def profile_loaded(self) -> bool:
        return self._profile is not None
