"""
HTTP-style envelopes exchanged with request adapters.

They carry data between the FastAPI layer and adapters.
They are plain dataclasses; the factories only set status codes.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from passcheck.shared.errors.kinds import RouterError, ServerError

HTTP_200 = 200
HTTP_400 = 400
HTTP_500 = 500


@dataclass(frozen=True)
class HttpRequest:
    """Incoming request envelope.

    Attributes:
        body: Parsed request body, or None when there is none.
    """

    body: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class HttpResponse:
    """Outgoing response envelope.

    Attributes:
        status_code: HTTP status code (200, 400 or 500).
        body: Success payload or an error kind.
    """

    status_code: int
    body: Any

    @classmethod
    def ok(cls, body: Any) -> "HttpResponse":
        return cls(status_code=HTTP_200, body=body)

    @classmethod
    def bad_request(cls, error: RouterError) -> "HttpResponse":
        return cls(status_code=HTTP_400, body=error)

    @classmethod
    def server_error(cls) -> "HttpResponse":
        return cls(status_code=HTTP_500, body=ServerError())
