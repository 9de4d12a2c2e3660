"""
Adapter: In-memory record storage.

Implements RecordStore port.
Holds records in a plain dict for the lifetime of the owning application.
Nothing is persisted across restarts.
"""

import logging
import threading
from typing import Optional

from app.domain.items.entities import Outcome, Record
from app.domain.items.errors import InvalidItemArgumentError, MissingValueError
from app.domain.items.ports import RecordStore

logger = logging.getLogger(__name__)


def _check_id(record_id: int) -> None:
    # bool is an int subclass but never a valid identifier
    if isinstance(record_id, bool) or not isinstance(record_id, int):
        raise InvalidItemArgumentError("id", record_id)


def _check_record(record: Record) -> None:
    _check_id(record.id)
    if record.value is None:
        raise MissingValueError("value")
    if not isinstance(record.value, str):
        raise InvalidItemArgumentError("value", record.value)


class InMemoryRecordStore(RecordStore):
    """Concrete adapter keeping records in process memory.

    A single lock serializes every read and mutation, so each
    check-then-act sequence (exists? then write) is atomic.
    """

    def __init__(self, initial: Optional[dict[int, str]] = None) -> None:
        self._records: dict[int, str] = {}
        self._lock = threading.Lock()
        for record_id, value in (initial or {}).items():
            record = Record(id=record_id, value=value)
            _check_record(record)
            self._records[record.id] = record.value

    def get(self, record_id: int) -> Optional[str]:
        _check_id(record_id)
        with self._lock:
            return self._records.get(record_id)

    def contains(self, record_id: int) -> bool:
        _check_id(record_id)
        with self._lock:
            return record_id in self._records

    def insert(self, record: Record) -> Outcome:
        _check_record(record)
        with self._lock:
            if record.id in self._records:
                return Outcome.CONFLICT
            self._records[record.id] = record.value
        logger.debug("Inserted record id=%d", record.id)
        return Outcome.CREATED

    def replace(self, record: Record) -> Outcome:
        _check_record(record)
        with self._lock:
            if record.id not in self._records:
                return Outcome.NOT_FOUND
            self._records[record.id] = record.value
        logger.debug("Replaced record id=%d", record.id)
        return Outcome.OK

    def remove(self, record_id: int) -> Outcome:
        _check_id(record_id)
        with self._lock:
            if self._records.pop(record_id, None) is None:
                return Outcome.NOT_FOUND
        logger.debug("Removed record id=%d", record_id)
        return Outcome.OK

    def snapshot(self) -> dict[int, str]:
        with self._lock:
            return dict(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
