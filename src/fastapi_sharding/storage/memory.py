"""In-memory sharding-entry storage for testing and development.

Warning:
    Entries live in a Python dictionary and are **lost when the process
    exits**.  Use this store for unit tests, local development, and demos.
    For anything persistent use ``SQLAlchemyShardingEntryStore``.

Design notes
------------
- No async I/O: all operations complete synchronously, wrapped in
  ``async def`` to satisfy the ``ShardingEntryStore`` interface.
- Mutating methods hold ``_lock`` for their whole check-then-write sequence
  so concurrent tasks cannot both add the same name.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from fastapi_sharding.core.exceptions import (
    DuplicateShardingEntryError,
    ShardingEntryNotFoundError,
)
from fastapi_sharding.storage.entry_store import ShardingEntryStore

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fastapi_sharding.core.types import ShardingEntry

logger = logging.getLogger(__name__)


class InMemoryShardingEntryStore(ShardingEntryStore):
    """In-memory sharding-entry store.

    Args:
        entries: Optional entries to pre-load.  Names must be unique.

    Example — pytest fixture::

        @pytest.fixture
        def entry_store():
            store = InMemoryShardingEntryStore()
            yield store
            store.clear()
    """

    def __init__(self, entries: Iterable[ShardingEntry] | None = None) -> None:
        self._entries: dict[str, ShardingEntry] = {}
        self._lock: asyncio.Lock = asyncio.Lock()
        for entry in entries or ():
            if entry.name in self._entries:
                raise DuplicateShardingEntryError(entry.name)
            self._entries[entry.name] = entry
        logger.debug("InMemoryShardingEntryStore initialised with %d entries", len(self._entries))

    ###################
    # Read operations #
    ###################

    async def get(self, name: str) -> ShardingEntry:
        entry = self._entries.get(name)
        if entry is None:
            raise ShardingEntryNotFoundError(name)
        return entry

    async def get_all(self) -> list[ShardingEntry]:
        return [self._entries[name] for name in sorted(self._entries)]

    async def count(self) -> int:
        return len(self._entries)

    async def exists(self, name: str) -> bool:
        return name in self._entries

    ####################
    # Write operations #
    ####################

    async def add(self, entry: ShardingEntry) -> ShardingEntry:
        async with self._lock:
            if entry.name in self._entries:
                raise DuplicateShardingEntryError(entry.name)
            self._entries[entry.name] = entry
        logger.debug("Added sharding entry %r", entry.name)
        return entry

    async def add_if_empty(self, entry: ShardingEntry) -> bool:
        """Add *entry* only when the store is empty, atomically."""
        async with self._lock:
            if self._entries:
                return False
            self._entries[entry.name] = entry
        logger.debug("Seeded sharding entry %r", entry.name)
        return True

    async def update(self, entry: ShardingEntry) -> ShardingEntry:
        async with self._lock:
            if entry.name not in self._entries:
                raise ShardingEntryNotFoundError(entry.name)
            self._entries[entry.name] = entry
        logger.debug("Updated sharding entry %r", entry.name)
        return entry

    async def remove(self, name: str) -> None:
        async with self._lock:
            if self._entries.pop(name, None) is None:
                raise ShardingEntryNotFoundError(name)
        logger.debug("Removed sharding entry %r", name)

    ########################
    # Test / debug helpers #
    ########################

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()
        logger.debug("InMemoryShardingEntryStore cleared")


__all__ = ["InMemoryShardingEntryStore"]
