"""
Domain-specific errors for the password bounded context.

All errors raised from the domain layer must be defined here.
No framework imports allowed.
"""


class PasswordDomainError(Exception):
    """Base error for all password domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class PasswordListUnavailableError(PasswordDomainError):
    """Raised when a configured common-password list cannot be read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Common password list unavailable: {path}")
        self.path = path
