from __future__ import annotations

from typing import Any, Mapping, Optional

from ..database.query import Eq
from ..database.store import RecordStore
from .model import AccountCredentials
from .repository import AccountRepository

COLLECTION = "accounts"


def row_to_credentials(row: Mapping[str, Any]) -> AccountCredentials:
    return AccountCredentials(
        id=str(row["id"]),
        email=row.get("email"),
        password_hash=row.get("password_hash") or "",
        is_active=bool(row.get("is_active", True)),
    )


class StoreAccountRepository(AccountRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_by_id(self, account_id: str) -> Optional[AccountCredentials]:
        row = self._store.get(COLLECTION, account_id)
        return row_to_credentials(row) if row else None

    def get_by_email(self, email: str) -> Optional[AccountCredentials]:
        rows = self._store.query(COLLECTION, [Eq("email", email.strip().lower())], limit=1)
        return row_to_credentials(rows[0]) if rows else None
