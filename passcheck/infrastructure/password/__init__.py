"""Infrastructure adapters for the password bounded context."""
