"""
Use case: Create a new item.

Input: CreateItemCommand (item_id, first_name)
Output: ItemResult (CREATED, or CONFLICT when the id is taken)
Side effects: Inserts item_id -> first_name into the record store.
Failure cases: MissingValueError when first_name is None.
"""

import logging

from app.application.items.dtos import (
    ITEM_ALREADY_EXISTS,
    ITEM_CREATED,
    CreateItemCommand,
    ItemResult,
)
from app.domain.items.entities import Outcome, Record
from app.domain.items.ports import RecordStore

logger = logging.getLogger(__name__)


class CreateItemUseCase:
    """Orchestrates inserting a new record.

    The existence check and the insert happen in one store call,
    so two concurrent creates for the same id yield exactly one
    CREATED and one CONFLICT.
    """

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def execute(self, command: CreateItemCommand) -> ItemResult:
        """Run the create item use case.

        Args:
            command: Identifier and value of the new item.

        Returns:
            A created result, or a conflict result if the id exists.
        """
        logger.info("Creating item id=%s", command.item_id)
        outcome = self._store.insert(
            Record(id=command.item_id, value=command.first_name)
        )
        if outcome is Outcome.CONFLICT:
            logger.info("Item id=%s already exists", command.item_id)
            return ItemResult(outcome=outcome, body=ITEM_ALREADY_EXISTS)
        return ItemResult(outcome=outcome, body=ITEM_CREATED)
