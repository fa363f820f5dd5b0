from __future__ import annotations

from werkzeug.security import check_password_hash

from ..common.log import get_logger
from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError
from .model import Account
from .repository import AccountRepository

logger = get_logger(__name__)


class AuthService:
    """Use case: authenticate an account (login) against the local accounts table."""

    def __init__(self, accounts: AccountRepository):
        self._accounts = accounts

    def authenticate(self, email: str, password: str) -> Account:
        email = require_non_empty(email, "Email")
        creds = self._accounts.get_by_email(email)
        if not creds or not creds.is_active:
            raise AuthenticationError("Email atau kata sandi salah")

        try:
            ok = check_password_hash(creds.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Failed login for account %s", creds.id)
            raise AuthenticationError("Email atau kata sandi salah")

        return creds.to_account()
