"""
Service layer for records.

``RecordStore`` owns the ordered in-memory collection and a single
``asyncio.Lock``.  Every operation holds the lock for its whole
duration, so only one store operation runs at a time regardless of
whether it reads or writes.  Nothing is persisted: the collection is
rebuilt from the seed records whenever a new store is created.

Lookups by id scan the collection in order and act on the first match.
Ids are not unique; creating a record never checks for collisions.
Records handed back to callers are copies taken under the lock, so a
later update cannot change a value that was already returned.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional

from record_store_api.app.core.errors import RecordNotFoundError
from record_store_api.app.schemas.record import Record

logger = logging.getLogger(__name__)

SEED_RECORDS = (
    Record(id=1, author="Jane Doe"),
    Record(id=2, author="Patrick Star"),
)


class RecordStore:
    """Ordered collection of records guarded by one exclusive lock."""

    def __init__(self, records: Optional[Iterable[Record]] = None) -> None:
        if records is None:
            records = SEED_RECORDS
        self._records: List[Record] = [record.model_copy() for record in records]
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def _index_of(self, record_id: int) -> Optional[int]:
        """Return the position of the first record with ``record_id``."""
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    async def create(self, record: Record) -> Record:
        """Append ``record`` to the end of the collection and return it."""
        async with self._lock:
            stored = record.model_copy()
            self._records.append(stored)
            logger.info("Created record %s", stored.id)
            return stored.model_copy()

    async def list(self) -> List[Record]:
        """Return every record in collection order."""
        async with self._lock:
            return [record.model_copy() for record in self._records]

    async def get(self, record_id: int) -> Record:
        """Return the first record whose id equals ``record_id``.

        Raises ``RecordNotFoundError`` when there is no such record.
        """
        async with self._lock:
            index = self._index_of(record_id)
            if index is None:
                logger.debug("Record %s not found", record_id)
                raise RecordNotFoundError(record_id)
            return self._records[index].model_copy()

    async def update(self, record_id: int, record: Record) -> Record:
        """Replace the first record whose id equals ``record_id``.

        The slot receives ``record`` as a whole, including its own
        ``id``.  That id may differ from ``record_id``, which renumbers
        the stored record.  Raises ``RecordNotFoundError`` and leaves
        the collection untouched when nothing matches.
        """
        async with self._lock:
            index = self._index_of(record_id)
            if index is None:
                logger.debug("Record %s not found for update", record_id)
                raise RecordNotFoundError(record_id)
            stored = record.model_copy()
            self._records[index] = stored
            if stored.id != record_id:
                logger.info("Updated record %s (renumbered to %s)", record_id, stored.id)
            else:
                logger.info("Updated record %s", record_id)
            return stored.model_copy()

    async def delete(self, record_id: int) -> Record:
        """Remove and return the first record whose id equals ``record_id``.

        The remaining records keep their relative order.  Raises
        ``RecordNotFoundError`` when nothing matches.
        """
        async with self._lock:
            index = self._index_of(record_id)
            if index is None:
                logger.debug("Record %s not found for delete", record_id)
                raise RecordNotFoundError(record_id)
            removed = self._records.pop(index)
            logger.info("Deleted record %s", record_id)
            return removed
