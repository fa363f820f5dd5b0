class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when an account lacks permission for an action."""


class StoreError(Exception):
    """Raised when a read or write against the record store fails.

    Not a DomainError: callers decide whether to retry, the resolver never does.
    """
