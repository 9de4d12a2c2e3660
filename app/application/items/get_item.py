"""
Use case: Retrieve a single item by identifier.

Input: GetItemQuery (item_id)
Output: ItemResult (OK with the stored value, or NOT_FOUND)
Side effects: None (read-only query).
Failure cases: InvalidItemArgumentError for a malformed id.
"""

import logging

from app.application.items.dtos import ITEM_NOT_FOUND, GetItemQuery, ItemResult
from app.domain.items.entities import Outcome
from app.domain.items.ports import RecordStore

logger = logging.getLogger(__name__)


class GetItemUseCase:
    """Orchestrates reading one record from the store."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def execute(self, query: GetItemQuery) -> ItemResult:
        """Run the get item use case.

        Args:
            query: The identifier to look up.

        Returns:
            The stored value, or a not-found result.
        """
        logger.info("Retrieving item id=%s", query.item_id)
        value = self._store.get(query.item_id)
        if value is None:
            return ItemResult(outcome=Outcome.NOT_FOUND, body=ITEM_NOT_FOUND)
        return ItemResult(outcome=Outcome.OK, body=value)
