"""
Port interfaces (ABCs) for the password bounded context.

Ports define the contracts that adapters consume from collaborators.
Request adapters only rely on the method names declared here, so any
object exposing them is accepted; subclassing is not required.
"""

from abc import ABC, abstractmethod


class PasswordValidator(ABC):
    """Port for checking a password against format and strength rules."""

    @abstractmethod
    def is_valid(self, password: str) -> bool:
        """Return True if the password satisfies the rules.

        Called synchronously; implementations must not block on IO.
        """
        raise NotImplementedError


class PasswordCheckUseCase(ABC):
    """Port for the business-level password check."""

    @abstractmethod
    async def check(self, password: str) -> bool:
        """Return True if the password is acceptable for use."""
        raise NotImplementedError


class CompromisedPasswordRepository(ABC):
    """Port for looking up passwords known to be weak or leaked."""

    @abstractmethod
    def contains(self, password: str) -> bool:
        """Return True if the password is on the compromised list."""
        raise NotImplementedError
