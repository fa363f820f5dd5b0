from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Account:
    """Identitas terautentikasi dari penyedia auth (read-only bagi resolver)."""

    id: str
    email: Optional[str] = None

    @property
    def email_local_part(self) -> Optional[str]:
        if not self.email or "@" not in self.email:
            return (self.email or "").strip() or None
        local = self.email.split("@", 1)[0].strip()
        return local or None


@dataclass(frozen=True)
class AccountCredentials:
    """Row from the local accounts table, including the password hash."""

    id: str
    email: Optional[str]
    password_hash: str
    is_active: bool = True

    def to_account(self) -> Account:
        return Account(id=self.id, email=self.email)
