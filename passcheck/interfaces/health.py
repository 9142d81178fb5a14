"""
Health and readiness endpoint.

The service is ready once the common password list can be loaded;
until then password checks would fail with a 500.
"""

import logging

from fastapi import APIRouter, Response

from passcheck.core.config import settings
from passcheck.domain.password.errors import PasswordDomainError
from passcheck.interfaces.password.dependencies import get_common_password_repository
from passcheck.interfaces.password.schemas import HealthResponse

logger = logging.getLogger(__name__)

HTTP_503 = 503

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
    summary="Health check",
    description=(
        "Reports the service version and how many common passwords are "
        "loaded. Answers 503 while the list cannot be read."
    ),
)
def health_check(response: Response) -> HealthResponse:
    try:
        repository = get_common_password_repository()
    except PasswordDomainError as exc:
        logger.warning("Not ready: %s", exc.message)
        response.status_code = HTTP_503
        return HealthResponse(status="degraded", version=settings.version)

    return HealthResponse(
        status="ok",
        version=settings.version,
        common_passwords=len(repository),
    )
