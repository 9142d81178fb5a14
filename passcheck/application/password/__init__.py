"""
Application layer for the password bounded context.

Use cases coordinate domain ports to fulfill business operations.
No framework or infrastructure imports allowed.
"""
