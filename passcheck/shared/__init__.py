"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error kinds and their HTTP mapping
- Security middleware and rate limiting
- Logging configuration
"""
