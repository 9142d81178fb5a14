"""
Centralized error handlers for FastAPI.

Maps error kinds raised outside a router to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from passcheck.domain.password.errors import PasswordDomainError
from passcheck.shared.errors.kinds import HTTP_500, RouterError, ServerError

logger = logging.getLogger(__name__)


def _error_response(error: RouterError) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RouterError)
    async def handle_router_error(
        _request: Request, exc: RouterError
    ) -> JSONResponse:
        """Handle error kinds raised instead of returned."""
        if exc.status_code >= HTTP_500:
            logger.error("Server error raised at the edge: %s", exc.error)
        else:
            logger.warning("Client error raised at the edge: %s", exc.error)
        return _error_response(exc)

    @app.exception_handler(PasswordDomainError)
    async def handle_password_domain(
        _request: Request, exc: PasswordDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled password domain errors."""
        logger.error("Unhandled password domain error: %s", exc.message)
        return _error_response(ServerError())

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(ServerError())
