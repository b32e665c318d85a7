"""Sharding-entry storage backends.

Available backends
------------------
``InMemoryShardingEntryStore``
    Dict-backed store for tests and development.  No persistence.

``SQLAlchemyShardingEntryStore``
    Async SQLAlchemy store for PostgreSQL, SQLite, MySQL, and MSSQL.
"""

from fastapi_sharding.storage.database import SQLAlchemyShardingEntryStore
from fastapi_sharding.storage.entry_store import ShardingEntryStore
from fastapi_sharding.storage.memory import InMemoryShardingEntryStore

__all__ = [
    "InMemoryShardingEntryStore",
    "SQLAlchemyShardingEntryStore",
    "ShardingEntryStore",
]
