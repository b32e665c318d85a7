"""Custom exceptions for fastapi-sharding.

All exceptions derive from ``ShardingError`` so callers can catch the entire
family with a single ``except ShardingError`` clause while still being able to
handle individual sub-types.

Exception hierarchy::

    ShardingError
    ├── ConfigurationError
    │   ├── MissingShardingEntryNameError
    │   ├── DatabaseProviderNotSetError
    │   ├── UnknownDatabaseProviderError
    │   └── ProviderNameSourceRequiredError
    ├── ShardingEntryNotFoundError
    ├── DuplicateShardingEntryError
    ├── InvalidShardingEntryError
    └── ConnectionStringNotFoundError

Design decisions:
    - Every exception carries a structured ``details`` dict that is safe to
      log.  It must never contain a raw connection string.
    - Configuration errors are raised during application start-up and are
      meant to stop it.  Nothing in this library retries them.
    - All subclasses call ``super().__init__(message, details)`` so the base
      ``ShardingError`` attributes are always populated.
"""

from __future__ import annotations

from typing import Any


class ShardingError(Exception):
    """Base exception for all fastapi-sharding errors.

    Attributes:
        message: Human-readable description of the error.
        details: Supplementary key-value context.  Safe to log.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.details: dict[str, Any] = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return ``human-readable`` string."""
        if self.details:
            return f"{self.message} | details={self.details}"
        return self.message

    def __repr__(self) -> str:
        """Return ``repr`` string for debugging purpose."""
        return f"{type(self).__name__}(message={self.message!r})"


###########################
# Configuration (fatal)   #
###########################


class ConfigurationError(ShardingError):
    """Raised when the sharding configuration is invalid or incomplete.

    Raised at start-up so a misconfigured application stops before it serves
    a single request.

    Attributes:
        parameter: The name of the offending configuration field.
        reason: Why the current value is invalid.
    """

    def __init__(
        self,
        parameter: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"Invalid configuration for {parameter!r}: {reason}", details)
        self.parameter = parameter
        self.reason = reason


class MissingShardingEntryNameError(ConfigurationError):
    """Raised when the default entry has no name and the config supplies none."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            parameter="default_sharding_entry_name",
            reason=(
                "the default sharding entry has no name and "
                "default_sharding_entry_name is not set."
            ),
            details=details,
        )


class DatabaseProviderNotSetError(ConfigurationError):
    """Raised when the database provider type is still ``NOT_SET``."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            parameter="internal_data.database_type",
            reason="You have not set the database provider.",
            details=details,
        )


class UnknownDatabaseProviderError(ConfigurationError):
    """Raised when the database provider type is outside the known set.

    Attributes:
        value: The unrecognised provider value.
    """

    def __init__(self, value: object, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            parameter="internal_data.database_type",
            reason=f"unrecognised database provider {value!r}.",
            details=details,
        )
        self.value = value


class ProviderNameSourceRequiredError(ConfigurationError):
    """Raised when a custom database is configured without a provider-name source.

    The short name of a custom provider cannot be derived from the enum, so
    the caller must pass an object implementing
    :class:`~fastapi_sharding.core.types.ProviderNameSource` (or set
    ``database_type`` on the options explicitly).
    """

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            parameter="provider_source",
            reason=(
                "a custom database provider needs a provider name source "
                "to derive the database type."
            ),
            details=details,
        )


###########################
# Entry management        #
###########################


class ShardingEntryNotFoundError(ShardingError):
    """Raised when no sharding entry with the requested name exists.

    Attributes:
        name: The entry name that was looked up.
    """

    def __init__(self, name: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Sharding entry not found: {name!r}", details)
        self.name = name


class DuplicateShardingEntryError(ShardingError):
    """Raised when adding an entry whose name is already taken.

    Attributes:
        name: The duplicate entry name.
    """

    def __init__(self, name: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Sharding entry {name!r} already exists", details)
        self.name = name


class InvalidShardingEntryError(ShardingError):
    """Raised when an entry refers to something the application does not have.

    Attributes:
        name: The entry name.
        reason: What is wrong with it.
    """

    def __init__(
        self,
        name: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"Sharding entry {name!r} is invalid: {reason}", details)
        self.name = name
        self.reason = reason


class ConnectionStringNotFoundError(ShardingError):
    """Raised when a connection name is missing from the connection-string table.

    Attributes:
        connection_name: The missing key.
    """

    def __init__(
        self,
        connection_name: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"No connection string named {connection_name!r}", details)
        self.connection_name = connection_name


__all__ = [
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
]
