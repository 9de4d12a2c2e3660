"""HTTP interface for the items bounded context."""
