from __future__ import annotations

from typing import Optional, Protocol

from .model import AccountCredentials


class AccountRepository(Protocol):
    """Read-only view of the local auth provider's accounts."""

    def get_by_id(self, account_id: str) -> Optional[AccountCredentials]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[AccountCredentials]:
        raise NotImplementedError
