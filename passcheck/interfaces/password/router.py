"""
FastAPI router for the password bounded context.

The route hands the raw body to PasswordCheckRouter and renders the
HttpResponse it returns. No business logic here.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from passcheck.core.config import settings
from passcheck.interfaces.http import HttpRequest, HttpResponse
from passcheck.interfaces.password.dependencies import get_password_check_router
from passcheck.interfaces.password.password_check_router import PasswordCheckRouter
from passcheck.interfaces.password.schemas import (
    ErrorResponse,
    PasswordCheckRequest,
    PasswordCheckResponse,
)
from passcheck.shared.errors.kinds import RouterError
from passcheck.shared.security.rate_limiting import limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/password", tags=["password"])


async def _read_json_object(request: Request) -> dict[str, Any] | None:
    """Return the JSON body if it is an object, otherwise None."""
    try:
        payload = await request.json()
    except ValueError:
        logger.debug("Request body is missing or not valid JSON")
        return None
    return payload if isinstance(payload, dict) else None


def _render(http_response: HttpResponse) -> JSONResponse:
    body = http_response.body
    if isinstance(body, RouterError):
        content = body.to_dict()
    else:
        content = jsonable_encoder(body)
    return JSONResponse(status_code=http_response.status_code, content=content)


@router.post(
    "/check",
    response_model=PasswordCheckResponse,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {
                    "schema": PasswordCheckRequest.model_json_schema()
                }
            },
            "required": True,
        }
    },
    summary="Check a password",
    description=(
        "Validate a password against the strength policy and the list "
        "of common passwords."
    ),
)
@limiter.limit(settings.rate_limit_check)
async def check_password(
    request: Request,
    password_check_router: PasswordCheckRouter = Depends(get_password_check_router),
) -> JSONResponse:
    """Check a password and report whether it may be used."""
    body = await _read_json_object(request)
    http_response = await password_check_router.route(HttpRequest(body=body))
    return _render(http_response)
