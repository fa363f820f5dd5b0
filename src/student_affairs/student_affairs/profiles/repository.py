from __future__ import annotations

from typing import Optional, Protocol

from .model import Profile


class ProfileRepository(Protocol):
    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        raise NotImplementedError

    def insert_if_absent(self, profile: Profile) -> bool:
        """Create the profile keyed on its id; False when one already exists."""

        raise NotImplementedError

    def set_student_id(self, *, profile_id: str, student_id: str) -> bool:
        raise NotImplementedError
