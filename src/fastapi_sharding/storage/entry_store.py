"""Abstract sharding-entry storage interface — the repository pattern.

``ShardingEntryStore`` defines the CRUD contract for sharding entries.  All
concrete implementations (SQLAlchemy, in-memory) implement this interface,
giving the manager a stable dependency target regardless of the backend.

Extending
---------
Subclass ``ShardingEntryStore`` and implement every ``@abstractmethod``::

    class MyStore(ShardingEntryStore):
        async def get(self, name: str) -> ShardingEntry: ...
        # ... implement all other abstract methods
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fastapi_sharding.core.types import ShardingEntry

logger = logging.getLogger(__name__)


class ShardingEntryStore(ABC):
    """Abstract base class for sharding-entry storage backends.

    Implementations must be:

    - **Fully async** — every method is a coroutine.
    - **Unique by name** — ``add`` rejects a name that is already stored.
    - **Raise on not-found** — ``get``, ``update`` and ``remove`` raise
      ``ShardingEntryNotFoundError``, never return ``None``.
    """

    ############################
    # Required CRUD operations #
    ############################

    @abstractmethod
    async def get(self, name: str) -> ShardingEntry:
        """Fetch a sharding entry by name.

        Args:
            name: The entry name.

        Returns:
            The matching entry.

        Raises:
            ShardingEntryNotFoundError: When no entry named *name* exists.
        """

    @abstractmethod
    async def get_all(self) -> Sequence[ShardingEntry]:
        """Return every stored entry, ordered by name."""

    @abstractmethod
    async def add(self, entry: ShardingEntry) -> ShardingEntry:
        """Persist a new entry.

        Args:
            entry: The entry to store.  Its ``name`` must be unique.

        Returns:
            The stored entry.

        Raises:
            DuplicateShardingEntryError: When ``entry.name`` already exists.
        """

    @abstractmethod
    async def update(self, entry: ShardingEntry) -> ShardingEntry:
        """Replace the stored entry that has the same name as *entry*.

        Args:
            entry: The new version of the entry.

        Returns:
            The stored entry.

        Raises:
            ShardingEntryNotFoundError: When ``entry.name`` does not exist.
        """

    @abstractmethod
    async def remove(self, name: str) -> None:
        """Delete the entry named *name*.

        Raises:
            ShardingEntryNotFoundError: When *name* does not exist.
        """

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored entries."""

    ######################
    # Derived operations #
    ######################

    async def exists(self, name: str) -> bool:
        """Return ``True`` if an entry named *name* is stored.

        The base implementation scans :meth:`get_all`; override it when the
        backend can answer directly.
        """
        return any(entry.name == name for entry in await self.get_all())

    async def is_empty(self) -> bool:
        """Return ``True`` when the store holds no entries."""
        return await self.count() == 0

    async def add_if_empty(self, entry: ShardingEntry) -> bool:
        """Add *entry* only when the store holds no entries yet.

        Used at start-up to seed the default sharding entry.

        Args:
            entry: The entry to seed.

        Returns:
            ``True`` when *entry* was written; ``False`` when the store
            already had entries.
        """
        if not await self.is_empty():
            logger.debug(
                "%s already has sharding entries; %r not added",
                type(self).__name__,
                entry.name,
            )
            return False
        await self.add(entry)
        return True

    async def close(self) -> None:
        """Release any resources held by this store.

        The base implementation is a no-op; stores holding connection pools
        override it.
        """


__all__ = ["ShardingEntryStore"]
