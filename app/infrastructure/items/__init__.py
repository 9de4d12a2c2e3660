"""Infrastructure adapters for the items bounded context."""
