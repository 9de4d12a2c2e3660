"""
Use case: Overwrite the value of an existing item.

Input: UpdateItemCommand (item_id, value)
Output: ItemResult (OK, or NOT_FOUND)
Side effects: Replaces the stored value unconditionally.
Failure cases: MissingValueError when value is None.
"""

import logging

from app.application.items.dtos import (
    ITEM_NOT_FOUND,
    ITEM_UPDATED,
    ItemResult,
    UpdateItemCommand,
)
from app.domain.items.entities import Outcome, Record
from app.domain.items.ports import RecordStore

logger = logging.getLogger(__name__)


class UpdateItemUseCase:
    """Orchestrates replacing a record's value.

    There is no equality short-circuit: writing the current value
    again is still a successful update.
    """

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def execute(self, command: UpdateItemCommand) -> ItemResult:
        logger.info("Updating item id=%s", command.item_id)
        outcome = self._store.replace(Record(id=command.item_id, value=command.value))
        if outcome is Outcome.NOT_FOUND:
            return ItemResult(outcome=outcome, body=ITEM_NOT_FOUND)
        return ItemResult(outcome=outcome, body=ITEM_UPDATED)
