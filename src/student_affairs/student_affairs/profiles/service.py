from __future__ import annotations

from typing import Optional

from ..accounts.model import Account
from ..common.log import get_logger
from ..common.validators import optional_text
from ..core.constants import DEFAULT_NEW_PROFILE_NAME
from ..core.enums import Role
from .model import Profile
from .repository import ProfileRepository

logger = get_logger(__name__)


class ProfileBootstrapService:
    """Use case: make sure every resolved account has a profile (get-or-create)."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def get(self, account_id: str) -> Optional[Profile]:
        return self._profiles.get_by_id(account_id)

    def get_or_create(self, account: Account, *, full_name: Optional[str] = None, persist: bool = True) -> Profile:
        existing = self._profiles.get_by_id(account.id)
        if existing:
            return existing

        profile = Profile(
            id=account.id,
            full_name=optional_text(full_name) or account.email_local_part or DEFAULT_NEW_PROFILE_NAME,
            role=Role.least_privileged(),
        )
        if not persist:
            return profile

        if self._profiles.insert_if_absent(profile):
            logger.info("Created profile for account %s (role=%s)", account.id, profile.role.value)
            return profile

        # Lost a race with a concurrent creator; their row is authoritative.
        return self._profiles.get_by_id(account.id) or profile
