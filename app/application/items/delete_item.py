"""
Use case: Remove an item.

Input: DeleteItemCommand (item_id)
Output: ItemResult (OK, or NOT_FOUND)
Side effects: Removes the record from the store.
Failure cases: None beyond a malformed id.

Deleting twice is not idempotent: the second call is NOT_FOUND.
"""

import logging

from app.application.items.dtos import (
    ITEM_DELETED,
    ITEM_NOT_FOUND,
    DeleteItemCommand,
    ItemResult,
)
from app.domain.items.entities import Outcome
from app.domain.items.ports import RecordStore

logger = logging.getLogger(__name__)


class DeleteItemUseCase:
    """Orchestrates removing a record."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def execute(self, command: DeleteItemCommand) -> ItemResult:
        logger.info("Deleting item id=%s", command.item_id)
        outcome = self._store.remove(command.item_id)
        if outcome is Outcome.NOT_FOUND:
            return ItemResult(outcome=outcome, body=ITEM_NOT_FOUND)
        return ItemResult(outcome=outcome, body=ITEM_DELETED)
