"""
Dependency injection for the password bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into the use case and the request adapter.
These are the composition root for the password context.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends

from passcheck.application.password.check_password import CheckPasswordUseCase
from passcheck.core.config import settings
from passcheck.domain.password.policy import PasswordPolicy
from passcheck.infrastructure.password.common_password_repository import (
    CommonPasswordListRepository,
)
from passcheck.infrastructure.password.policy_validator import (
    PolicyPasswordValidator,
)
from passcheck.interfaces.password.password_check_router import PasswordCheckRouter


@lru_cache(maxsize=4)
def _get_common_password_repository(
    path: Optional[str],
) -> CommonPasswordListRepository:
    """Load the common password list once per configured path."""
    return CommonPasswordListRepository(path=path)


def get_common_password_repository() -> CommonPasswordListRepository:
    """Return the common password list for the configured path.

    Raises:
        PasswordListUnavailableError: If the configured file cannot be read.
    """
    return _get_common_password_repository(settings.common_passwords_path)


def get_password_validator() -> PolicyPasswordValidator:
    """Build the policy validator from application settings."""
    return PolicyPasswordValidator(policy=PasswordPolicy.from_settings(settings))


def get_password_check_use_case() -> CheckPasswordUseCase:
    """Build CheckPasswordUseCase with its infrastructure dependencies."""
    return CheckPasswordUseCase(
        compromised_repository=get_common_password_repository(),
    )


def get_password_check_router(
    use_case: CheckPasswordUseCase = Depends(get_password_check_use_case),
    validator: PolicyPasswordValidator = Depends(get_password_validator),
) -> PasswordCheckRouter:
    """Build the PasswordCheckRouter with its collaborators."""
    return PasswordCheckRouter(use_case, validator)
