"""
Use case: Check whether a password is acceptable for use.

Input: password (str)
Output: bool, False when the password is on the compromised list.
Side effects: None.
Failure cases: Whatever the repository raises is propagated.
"""

import asyncio
import logging

from passcheck.domain.password.ports import (
    CompromisedPasswordRepository,
    PasswordCheckUseCase,
)

logger = logging.getLogger(__name__)


class CheckPasswordUseCase(PasswordCheckUseCase):
    """Rejects passwords known to be common or leaked.

    The repository lookup runs in a worker thread so that
    file or network backed repositories do not block the event loop.
    """

    def __init__(self, compromised_repository: CompromisedPasswordRepository) -> None:
        self._compromised_repository = compromised_repository

    async def check(self, password: str) -> bool:
        """Run the password check use case.

        Args:
            password: The candidate password. Never logged.

        Returns:
            True if the password is not on the compromised list.
        """
        compromised = await asyncio.to_thread(
            self._compromised_repository.contains, password
        )
        if compromised:
            logger.info("Password rejected: found on compromised list")
        return not compromised
