"""
Domain-specific errors for the items bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses by the centralized error handlers.
No framework imports allowed.

Expected outcomes (missing item, duplicate item) are NOT errors:
they are returned as Outcome values by the store.
"""


class ItemDomainError(RuntimeError):
    """Base error for all item domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class MissingValueError(ItemDomainError):
    """Raised when a required value is None where one must be present."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing value for field: {field}")
        self.field = field


class InvalidItemArgumentError(ItemDomainError, ValueError):
    """Raised when an item operation receives an argument of the wrong shape."""

    def __init__(self, argument: str, value: object) -> None:
        super().__init__(f"Invalid argument {argument}: {value!r}")
        self.argument = argument
        self.value = value
