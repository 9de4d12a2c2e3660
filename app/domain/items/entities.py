"""
Domain entities for the items bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    """Logical result of a store operation, prior to HTTP rendering."""

    OK = "ok"
    CREATED = "created"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class Record:
    """A single identifier-to-value entry in the record store.

    Attributes:
        id: Caller-supplied unique identifier, used as the store key.
        value: The stored string value.
    """

    id: int
    value: str
