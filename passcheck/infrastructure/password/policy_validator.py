"""
Adapter: Policy-based password validator.

Implements the PasswordValidator port on top of PasswordPolicy.
"""

import logging

from passcheck.domain.password.policy import PasswordPolicy
from passcheck.domain.password.ports import PasswordValidator

logger = logging.getLogger(__name__)


class PolicyPasswordValidator(PasswordValidator):
    """Accepts passwords that break none of the policy rules."""

    def __init__(self, policy: PasswordPolicy | None = None) -> None:
        self._policy = policy or PasswordPolicy()

    @property
    def policy(self) -> PasswordPolicy:
        return self._policy

    def is_valid(self, password: str) -> bool:
        if not isinstance(password, str):
            logger.debug("Password rejected: not a string")
            return False
        broken = self._policy.violations(password)
        if broken:
            logger.debug("Password failed policy rules: %s", ", ".join(broken))
        return not broken
