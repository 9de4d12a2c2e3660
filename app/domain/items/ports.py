"""
Port interfaces (ABCs) for the items bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.items.entities import Outcome, Record


class RecordStore(ABC):
    """Port for storing identifier-to-value records.

    Every operation is atomic with respect to the others. Expected
    outcomes (absent or duplicate identifier) are returned as Outcome
    values; malformed arguments are raised as domain errors.
    """

    @abstractmethod
    def get(self, record_id: int) -> Optional[str]:
        """Return the value stored for record_id, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def contains(self, record_id: int) -> bool:
        """Return True if a value is stored for record_id."""
        raise NotImplementedError

    @abstractmethod
    def insert(self, record: Record) -> Outcome:
        """Store a new record.

        Returns:
            Outcome.CREATED on success, Outcome.CONFLICT if the id exists.
        """
        raise NotImplementedError

    @abstractmethod
    def replace(self, record: Record) -> Outcome:
        """Overwrite the value of an existing record.

        Returns:
            Outcome.OK on success, Outcome.NOT_FOUND if the id is absent.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, record_id: int) -> Outcome:
        """Remove a record.

        Returns:
            Outcome.OK on success, Outcome.NOT_FOUND if the id is absent.
        """
        raise NotImplementedError

    @abstractmethod
    def snapshot(self) -> dict[int, str]:
        """Return a copy of the current store contents."""
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError
