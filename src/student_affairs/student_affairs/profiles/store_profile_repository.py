from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.validators import optional_text
from ..core.enums import Role
from ..database.store import RecordStore
from .model import Profile
from .repository import ProfileRepository

COLLECTION = "profiles"


def row_to_profile(row: Mapping[str, Any]) -> Profile:
    return Profile(
        id=str(row["id"]),
        full_name=optional_text(row.get("full_name")),
        role=Role.parse(row.get("role")),
        nis=optional_text(row.get("nis")),
        student_id=row.get("student_id"),
    )


class StoreProfileRepository(ProfileRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        row = self._store.get(COLLECTION, profile_id)
        return row_to_profile(row) if row else None

    def insert_if_absent(self, profile: Profile) -> bool:
        return self._store.insert_if_absent(
            COLLECTION,
            {
                "id": profile.id,
                "full_name": profile.full_name,
                "nis": profile.nis,
                "role": profile.role.value,
                "student_id": profile.student_id,
            },
        )

    def set_student_id(self, *, profile_id: str, student_id: str) -> bool:
        return self._store.update(COLLECTION, profile_id, {"student_id": student_id})
