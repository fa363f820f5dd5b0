from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import Gender, StudentStatus
from .model import StudentRecord


class StudentRepository(Protocol):
    """Giao diện repository cho StudentRecord.

    Note (DIP): the resolver depends on this interface, not on a concrete store.
    """

    def get_by_id(self, student_id: str) -> Optional[StudentRecord]:
        raise NotImplementedError

    def find_by_linked_account(self, account_id: str) -> Optional[StudentRecord]:
        raise NotImplementedError

    def find_by_nis(self, nis: str) -> Optional[StudentRecord]:
        raise NotImplementedError

    def find_unlinked(
        self,
        *,
        name_contains: Optional[str] = None,
        nis_contains: Optional[str] = None,
        status: Optional[StudentStatus] = None,
        limit: Optional[int] = None,
    ) -> Sequence[StudentRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        nis: str,
        full_name: str,
        linked_account_id: Optional[str],
        gender: Gender = Gender.MALE,
        status: StudentStatus = StudentStatus.ACTIVE,
        admission_date: Optional[date] = None,
    ) -> StudentRecord:
        raise NotImplementedError

    def link_account(self, *, student_id: str, account_id: str) -> bool:
        """Set ``user_id`` only if it is currently NULL; False when someone else holds it."""

        raise NotImplementedError
