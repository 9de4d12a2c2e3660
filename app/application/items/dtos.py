"""
Data Transfer Objects for the items application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from app.domain.items.entities import Outcome

ITEM_NOT_FOUND = "Item not found"
ITEM_ALREADY_EXISTS = "Item already exists"
ITEM_CREATED = "Item created successfully"
ITEM_UPDATED = "Item updated successfully"
ITEM_DELETED = "Item deleted successfully"


@dataclass(frozen=True)
class GetItemQuery:
    """Input DTO for reading a single item."""

    item_id: int


@dataclass(frozen=True)
class CreateItemCommand:
    """Input DTO for creating an item.

    Attributes:
        item_id: Caller-supplied identifier of the new item.
        first_name: The value stored under item_id.
    """

    item_id: int
    first_name: str


@dataclass(frozen=True)
class UpdateItemCommand:
    """Input DTO for overwriting the value of an existing item."""

    item_id: int
    value: str


@dataclass(frozen=True)
class DeleteItemCommand:
    """Input DTO for removing an item."""

    item_id: int


@dataclass(frozen=True)
class ItemResult:
    """Output DTO shared by all item use cases.

    Attributes:
        outcome: Logical result of the operation.
        body: The stored value on a successful read, otherwise a
            short human-readable message.
    """

    outcome: Outcome
    body: str
