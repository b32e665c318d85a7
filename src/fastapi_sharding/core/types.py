"""Domain types, enumerations, and data models for fastapi-sharding.

This module is the single source of truth for the library's public domain
vocabulary.  All other modules import *from* this module — never the reverse —
to keep the dependency graph acyclic.

Design notes
------------
* Enumerations use :class:`~enum.StrEnum` so values serialise to plain
  strings in JSON, logs, environment variables, and database rows.
* :class:`ShardingEntry` is a Pydantic ``frozen=True`` model.  Stores hand
  out the same instance to every caller, so it must not be mutated in place;
  use :meth:`~pydantic.BaseModel.model_copy` to derive a modified copy.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class DatabaseProviderType(StrEnum):
    """Database backend the authorization database was configured with.

    Members
    -------
    NOT_SET
        No backend chosen yet.  Resolving a default sharding entry in this
        state is a configuration error.
    SQLITE_IN_MEMORY
        SQLite, typically in-memory for tests and demos.
    SQL_SERVER
        Microsoft SQL Server.
    POSTGRESQL
        PostgreSQL.
    CUSTOM_DATABASE
        Any other backend.  Its short name comes from a
        :class:`ProviderNameSource` supplied by the application.
    """

    NOT_SET = "not_set"
    SQLITE_IN_MEMORY = "sqlite_in_memory"
    SQL_SERVER = "sqlserver"
    POSTGRESQL = "postgresql"
    CUSTOM_DATABASE = "custom"


# ---------------------------------------------------------------------------
# Domain models
# ---------------------------------------------------------------------------


class ShardingEntry(BaseModel):
    """Immutable sharding entry.

    A sharding entry ties a logical database identity to one of the
    application's connection strings and to the short name of the database
    provider that serves it.  Tenants that own a database point at an entry
    by ``name``.

    Attributes:
        name: Unique name of the entry within its store.
        connection_name: Key into the application's connection-string table.
        database_type: Short provider name (``"SqlServer"``, ``"PostgreSQL"``,
            ``"Sqlite"``, or a custom provider's own name).
        database_name: Database substituted into the named connection string.
            ``None`` means the connection string is used unchanged.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Default Database",
                    "connection_name": "DefaultConnection",
                    "database_type": "SqlServer",
                    "database_name": None,
                }
            ]
        },
    )

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Unique sharding entry name.",
    )
    connection_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Name of the connection string this entry uses.",
    )
    database_type: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Short name of the database provider.",
    )
    database_name: str | None = Field(
        default=None,
        max_length=255,
        description="Database name substituted into the connection string.",
    )


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


@runtime_checkable
class ProviderNameSource(Protocol):
    """Structural type for objects that know a custom provider's short name.

    Only consulted when the configured backend is
    :attr:`DatabaseProviderType.CUSTOM_DATABASE`.  The built-in
    :class:`~fastapi_sharding.providers.SQLAlchemyProviderNameSource`
    satisfies this protocol; any object with a matching method does too.
    """

    def get_provider_short_name(self) -> str:
        """Return the short name of the database provider (e.g. ``"MySql"``)."""
        ...


__all__ = [
    "DatabaseProviderType",
    "ProviderNameSource",
    "ShardingEntry",
]
