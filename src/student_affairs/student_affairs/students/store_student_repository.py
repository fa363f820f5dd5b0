from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.enums import Gender, StudentStatus
from ..database.query import Eq, ILike, IsNull, OrderBy
from ..database.store import RecordStore
from .model import StudentRecord
from .repository import StudentRepository

COLLECTION = "students"


def _gender(value: Any) -> Gender:
    try:
        return Gender(value)
    except ValueError:
        return Gender.MALE


def _status(value: Any) -> StudentStatus:
    try:
        return StudentStatus(value)
    except ValueError:
        return StudentStatus.ACTIVE


def _date(value: Any) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    return parse_iso_date(str(value)[:10])


def row_to_student(row: Mapping[str, Any]) -> StudentRecord:
    return StudentRecord(
        id=str(row["id"]),
        nis=str(row["nis"]),
        full_name=row.get("full_name") or "",
        linked_account_id=row.get("user_id"),
        gender=_gender(row.get("gender")),
        status=_status(row.get("status")),
        nisn=row.get("nisn"),
        admission_date=_date(row.get("admission_date")),
    )


class StoreStudentRepository(StudentRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_by_id(self, student_id: str) -> Optional[StudentRecord]:
        row = self._store.get(COLLECTION, student_id)
        return row_to_student(row) if row else None

    def find_by_linked_account(self, account_id: str) -> Optional[StudentRecord]:
        rows = self._store.query(COLLECTION, [Eq("user_id", account_id)], order=OrderBy("nis"), limit=1)
        return row_to_student(rows[0]) if rows else None

    def find_by_nis(self, nis: str) -> Optional[StudentRecord]:
        rows = self._store.query(COLLECTION, [Eq("nis", nis)], limit=1)
        return row_to_student(rows[0]) if rows else None

    def find_unlinked(
        self,
        *,
        name_contains: Optional[str] = None,
        nis_contains: Optional[str] = None,
        status: Optional[StudentStatus] = None,
        limit: Optional[int] = None,
    ) -> Sequence[StudentRecord]:
        filters: list = [IsNull("user_id")]
        if name_contains:
            filters.append(ILike.contains("full_name", name_contains))
        if nis_contains:
            filters.append(ILike.contains("nis", nis_contains))
        if status is not None:
            filters.append(Eq("status", status.value))
        rows = self._store.query(COLLECTION, filters, order=OrderBy("nis"), limit=limit)
        return [row_to_student(r) for r in rows]

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
        row = self._store.insert(
            COLLECTION,
            {
                "nis": nis,
                "full_name": full_name,
                "user_id": linked_account_id,
                "gender": gender.value,
                "status": status.value,
                "admission_date": admission_date,
            },
        )
        return row_to_student(row)

    def link_account(self, *, student_id: str, account_id: str) -> bool:
        return self._store.update(
            COLLECTION,
            student_id,
            {"user_id": account_id},
            condition=[IsNull("user_id")],
        )
