"""
Use case: List items.

Input: None
Output: ItemResult with a fixed placeholder body.
Side effects: None.
Failure cases: None.

The store is deliberately not consulted; there is no listing contract.
"""

import logging

from app.application.items.dtos import ItemResult
from app.domain.items.entities import Outcome

logger = logging.getLogger(__name__)

LIST_PLACEHOLDER = "e"


class ListItemsUseCase:
    """Returns the placeholder listing."""

    def execute(self) -> ItemResult:
        logger.info("Listing items (placeholder)")
        return ItemResult(outcome=Outcome.OK, body=LIST_PLACEHOLDER)
