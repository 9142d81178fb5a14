"""Shared pytest fixtures."""

import pytest

from passcheck.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Start every test with empty rate limit counters."""
    limiter.reset()
    yield
    limiter.reset()
