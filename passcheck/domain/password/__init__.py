"""Domain layer for the password bounded context."""
