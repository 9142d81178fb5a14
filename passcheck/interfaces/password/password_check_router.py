"""
Request adapter for the password check.

Validates the request shape, runs the password through the validator
and then the use case, and turns every outcome into an HttpResponse.
No exception ever leaves route(): collaborator failures and unusable
collaborators become a 500 ServerError.
"""

import inspect
import logging
from typing import Any, Mapping

from passcheck.interfaces.http.envelopes import HttpResponse
from passcheck.shared.errors.kinds import InvalidParamError, MissingParamError

logger = logging.getLogger(__name__)

PASSWORD_PARAM = "password"


def _has_method(collaborator: Any, name: str) -> bool:
    return collaborator is not None and callable(getattr(collaborator, name, None))


def _request_body(http_request: Any) -> Any:
    """Return the request body, accepting envelopes and plain mappings."""
    if http_request is None:
        return None
    if isinstance(http_request, Mapping):
        return http_request.get("body")
    return getattr(http_request, "body", None)


class PasswordCheckRouter:
    """Adapter between HTTP requests and the password check collaborators.

    Both collaborators are optional at construction time; a missing or
    malformed one is reported as a 500 response when route() runs.

    Args:
        password_check_use_case: Object exposing ``async check(password)``.
        password_validator: Object exposing ``is_valid(password)``.
    """

    def __init__(
        self,
        password_check_use_case: Any = None,
        password_validator: Any = None,
    ) -> None:
        self._password_check_use_case = password_check_use_case
        self._password_validator = password_validator

    async def route(self, http_request: Any = None) -> HttpResponse:
        """Handle one password check request.

        Args:
            http_request: An HttpRequest, or any object or mapping with a
                ``body`` holding a ``password`` field.

        Returns:
            200 with ``{"isValidPassword": bool}`` on success,
            400 with MissingParamError or InvalidParamError for bad input,
            500 with ServerError for anything else.
        """
        try:
            body = _request_body(http_request)
            if body is None:
                logger.warning("Rejected password check: request has no body")
                return HttpResponse.server_error()
            password = body.get(PASSWORD_PARAM) if isinstance(body, Mapping) else None
            missing = not password
        except Exception:
            logger.exception("Password check request could not be read")
            return HttpResponse.server_error()

        if missing:
            return HttpResponse.bad_request(MissingParamError(PASSWORD_PARAM))

        if not _has_method(self._password_validator, "is_valid"):
            logger.error("Password validator is missing or has no is_valid()")
            return HttpResponse.server_error()

        try:
            is_valid = bool(self._password_validator.is_valid(password))
        except Exception:
            logger.exception("Password validator failed")
            return HttpResponse.server_error()

        if not is_valid:
            return HttpResponse.bad_request(InvalidParamError(PASSWORD_PARAM))

        if not _has_method(self._password_check_use_case, "check"):
            logger.error("Password check use case is missing or has no check()")
            return HttpResponse.server_error()

        try:
            is_valid_password = self._password_check_use_case.check(password)
            if inspect.isawaitable(is_valid_password):
                is_valid_password = await is_valid_password
        except Exception:
            logger.exception("Password check use case failed")
            return HttpResponse.server_error()

        return HttpResponse.ok({"isValidPassword": is_valid_password})
