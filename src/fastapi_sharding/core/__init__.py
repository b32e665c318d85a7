"""Core sharding abstractions — types, config, and exceptions."""

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

__all__ = [
    # Config
    "InternalData",
    "ShardingConfig",
    # Exceptions
    "ShardingError",
    "ConfigurationError",
    "MissingShardingEntryNameError",
    "DatabaseProviderNotSetError",
    "UnknownDatabaseProviderError",
    "ProviderNameSourceRequiredError",
    "ShardingEntryNotFoundError",
    "DuplicateShardingEntryError",
    "InvalidShardingEntryError",
    "ConnectionStringNotFoundError",
    # Types
    "DatabaseProviderType",
    "ProviderNameSource",
    "ShardingEntry",
]
