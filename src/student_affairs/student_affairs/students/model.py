from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import Gender, StudentStatus


@dataclass(frozen=True)
class StudentRecord:
    """Entitas domain: data induk siswa.

    ``linked_account_id`` is stored in the ``user_id`` column; it goes from
    NULL to one account id once and is never cleared by the resolver.
    """

    id: str
    nis: str
    full_name: str
    linked_account_id: Optional[str] = None
    gender: Gender = Gender.MALE
    status: StudentStatus = StudentStatus.ACTIVE
    nisn: Optional[str] = None
    admission_date: Optional[date] = None

    @property
    def is_linked(self) -> bool:
        return self.linked_account_id is not None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nis": self.nis,
            "nisn": self.nisn,
            "full_name": self.full_name,
            "user_id": self.linked_account_id,
            "gender": self.gender.value,
            "status": self.status.value,
            "admission_date": self.admission_date.isoformat() if self.admission_date else None,
        }
