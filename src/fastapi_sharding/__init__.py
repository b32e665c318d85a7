"""fastapi-sharding — default sharding entries for multi-tenant FastAPI apps.

A sharding entry ties a logical database identity to one of the
application's connection strings and to the short name of its database
provider.  This package resolves the *default* entry from the application's
configuration, seeds it into an empty entry store at start-up, and manages
entries afterwards.

Quick start
-----------
.. code-block:: python

    from fastapi import FastAPI
    from fastapi_sharding import ShardingConfig, ShardingEntryOptions, ShardingManager
    from fastapi_sharding.storage.memory import InMemoryShardingEntryStore

    config = ShardingConfig(
        database_url="sqlite+aiosqlite:///:memory:",
        connection_strings={"DefaultConnection": "sqlite+aiosqlite:///:memory:"},
    )
    manager = ShardingManager(
        config,
        ShardingEntryOptions(tenants_in_auth_db=True),
        InMemoryShardingEntryStore(),
    )
    app = FastAPI(lifespan=manager.create_lifespan())

Public surface
--------------
The symbols exported below form the **stable public API**.  Anything not
listed here is an implementation detail and may change between minor versions.
"""

from fastapi_sharding.connections import form_connection_string, get_connection_string_names
from fastapi_sharding.core.config import InternalData, ShardingConfig
from fastapi_sharding.core.exceptions import (
    ConfigurationError,
    ConnectionStringNotFoundError,
    DatabaseProviderNotSetError,
    DuplicateShardingEntryError,
    InvalidShardingEntryError,
    MissingShardingEntryNameError,
    ProviderNameSourceRequiredError,
    ShardingEntryNotFoundError,
    ShardingError,
    UnknownDatabaseProviderError,
)
from fastapi_sharding.core.types import (
    DatabaseProviderType,
    ProviderNameSource,
    ShardingEntry,
)
from fastapi_sharding.manager import ShardingManager
from fastapi_sharding.options import ShardingEntryOptions, resolve_default_sharding_entry
from fastapi_sharding.providers import SQLAlchemyProviderNameSource
from fastapi_sharding.storage.database import SQLAlchemyShardingEntryStore
from fastapi_sharding.storage.entry_store import ShardingEntryStore
from fastapi_sharding.storage.memory import InMemoryShardingEntryStore
from fastapi_sharding.utils.db_compat import get_short_provider_name

try:
    from importlib.metadata import version as _pkg_version
    __version__: str = _pkg_version("fastapi-sharding")
except Exception:  # pragma: no cover — package not installed
    __version__ = "0.0.0.dev0"

__all__ = [  # NOQA
    # Version
    "__version__",
    # Configuration
    "InternalData",
    "ShardingConfig",
    # Options / resolution
    "ShardingEntryOptions",
    "get_short_provider_name",
    "resolve_default_sharding_entry",
    # Manager
    "ShardingManager",
    # Domain types
    "DatabaseProviderType",
    "ProviderNameSource",
    "ShardingEntry",
    # Provider sources
    "SQLAlchemyProviderNameSource",
    # Connections
    "form_connection_string",
    "get_connection_string_names",
    # Exceptions
    "ConfigurationError",
    "ConnectionStringNotFoundError",
    "DatabaseProviderNotSetError",
    "DuplicateShardingEntryError",
    "InvalidShardingEntryError",
    "MissingShardingEntryNameError",
    "ProviderNameSourceRequiredError",
    "ShardingEntryNotFoundError",
    "ShardingError",
    "UnknownDatabaseProviderError",
    # Storage
    "InMemoryShardingEntryStore",
    "SQLAlchemyShardingEntryStore",
    "ShardingEntryStore",
]
