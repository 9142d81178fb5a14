"""
Shared error handling package.

Defines the error kinds returned as response bodies and centralizes
error-to-HTTP mapping so failures are translated consistently.
"""

from passcheck.shared.errors.kinds import (
    InvalidParamError,
    MissingParamError,
    RouterError,
    ServerError,
)

__all__ = ["InvalidParamError", "MissingParamError", "RouterError", "ServerError"]
