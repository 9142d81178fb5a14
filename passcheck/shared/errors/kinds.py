"""
Error kinds produced by request adapters.

Each kind is both an exception and a value: routers return instances
as response bodies instead of raising them. Two errors are equal when
they are of the same kind and name the same parameter.
"""

from typing import Optional

HTTP_400 = 400
HTTP_500 = 500


class RouterError(Exception):
    """Base class for all error kinds returned by routers."""

    status_code: int = HTTP_500

    def __init__(self, message: str, param_name: Optional[str] = None) -> None:
        self.message = message
        self.param_name = param_name
        super().__init__(self.message)

    @property
    def error(self) -> str:
        """Kind name, used as the ``error`` field of response bodies."""
        return type(self).__name__

    def to_dict(self) -> dict[str, str]:
        """Render the error as an ``ErrorResponse`` body."""
        return {"error": self.error, "detail": self.message}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RouterError):
            return NotImplemented
        return type(self) is type(other) and self.param_name == other.param_name

    def __hash__(self) -> int:
        return hash((type(self), self.param_name))

    def __repr__(self) -> str:
        if self.param_name is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.param_name!r})"


class MissingParamError(RouterError):
    """A required input field was absent or empty."""

    status_code = HTTP_400

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Missing param: {param_name}", param_name)


class InvalidParamError(RouterError):
    """A required input field was present but failed validation."""

    status_code = HTTP_400

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Invalid param: {param_name}", param_name)


class ServerError(RouterError):
    """Malformed call, unusable collaborator, or collaborator failure."""

    status_code = HTTP_500

    def __init__(self) -> None:
        super().__init__("Internal server error")
