"""Database provider detection and short-name mapping.

This module turns the configured :class:`~fastapi_sharding.core.types.DatabaseProviderType`
into the short provider name stored on a sharding entry, and maps SQLAlchemy
connection-URL schemes back to a provider type.

Provider short names
--------------------

+---------------------+----------------+-----------------------------------+
| Provider type       | Short name     | URL schemes                       |
+=====================+================+===================================+
| ``SQLITE_IN_MEMORY``| ``Sqlite``     | ``sqlite``, ``sqlite+aiosqlite``  |
+---------------------+----------------+-----------------------------------+
| ``SQL_SERVER``      | ``SqlServer``  | ``mssql``, ``mssql+aioodbc``      |
+---------------------+----------------+-----------------------------------+
| ``POSTGRESQL``      | ``PostgreSQL`` | ``postgresql+asyncpg``, …         |
+---------------------+----------------+-----------------------------------+
| ``CUSTOM_DATABASE`` | from a source  | any other recognised scheme       |
+---------------------+----------------+-----------------------------------+
| ``NOT_SET``         | error          | malformed URL                     |
+---------------------+----------------+-----------------------------------+
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from fastapi_sharding.core.exceptions import (
    DatabaseProviderNotSetError,
    ProviderNameSourceRequiredError,
    UnknownDatabaseProviderError,
)
from fastapi_sharding.core.types import DatabaseProviderType

if TYPE_CHECKING:
    from fastapi_sharding.core.types import ProviderNameSource


##############################
# Provider type → short name #
##############################

_SHORT_NAMES: dict[DatabaseProviderType, str] = {
    DatabaseProviderType.SQLITE_IN_MEMORY: "Sqlite",
    DatabaseProviderType.SQL_SERVER: "SqlServer",
    DatabaseProviderType.POSTGRESQL: "PostgreSQL",
}


def get_short_provider_name(
    database_type: DatabaseProviderType | str,
    provider_source: ProviderNameSource | None = None,
) -> str:
    """Return the short provider name for *database_type*.

    Args:
        database_type: The configured backend.
        provider_source: Only used for ``CUSTOM_DATABASE``; supplies the
            custom provider's own short name.

    Returns:
        The short provider name (e.g. ``"SqlServer"``).

    Raises:
        DatabaseProviderNotSetError: When *database_type* is ``NOT_SET``.
        ProviderNameSourceRequiredError: When *database_type* is
            ``CUSTOM_DATABASE`` and no *provider_source* was given.
        UnknownDatabaseProviderError: When *database_type* is not a known
            provider type.

    Errors raised by ``provider_source.get_provider_short_name()`` propagate
    unchanged.

    Examples::

        get_short_provider_name(DatabaseProviderType.SQL_SERVER)   # "SqlServer"
        get_short_provider_name(DatabaseProviderType.CUSTOM_DATABASE, source)
    """
    if database_type == DatabaseProviderType.NOT_SET:
        raise DatabaseProviderNotSetError()

    if database_type == DatabaseProviderType.CUSTOM_DATABASE:
        if provider_source is None:
            raise ProviderNameSourceRequiredError()
        return provider_source.get_provider_short_name()

    try:
        return _SHORT_NAMES[database_type]  # type: ignore[index]
    except (KeyError, TypeError):
        raise UnknownDatabaseProviderError(database_type) from None


###########################################
# SQLAlchemy backend name → short name    #
###########################################

_BACKEND_SHORT_NAMES: dict[str, str] = {
    "postgresql": "PostgreSQL",
    "sqlite": "Sqlite",
    "mssql": "SqlServer",
    "mysql": "MySql",
    "mariadb": "MySql",
    "oracle": "Oracle",
}


def short_name_for_backend(backend_name: str) -> str:
    """Return the short provider name for a SQLAlchemy backend name.

    Unknown backends fall back to the backend name with its first letter
    upper-cased, so third-party dialects still get a stable name.

    Args:
        backend_name: SQLAlchemy backend name (``URL.get_backend_name()``).

    Returns:
        The short provider name.

    Examples::

        short_name_for_backend("postgresql")   # "PostgreSQL"
        short_name_for_backend("cockroachdb")  # "Cockroachdb"
    """
    backend = backend_name.lower().strip()
    if not backend:
        msg = "backend_name must not be empty"
        raise ValueError(msg)
    return _BACKEND_SHORT_NAMES.get(backend, backend[:1].upper() + backend[1:])


################################
# URL scheme → provider type   #
################################

_SCHEME_RE = re.compile(r"^([a-z][a-z0-9+]*?)://", re.IGNORECASE)

_PROVIDER_BY_BACKEND: dict[str, DatabaseProviderType] = {
    "postgresql": DatabaseProviderType.POSTGRESQL,
    "asyncpg": DatabaseProviderType.POSTGRESQL,
    "sqlite": DatabaseProviderType.SQLITE_IN_MEMORY,
    "aiosqlite": DatabaseProviderType.SQLITE_IN_MEMORY,
    "mssql": DatabaseProviderType.SQL_SERVER,
}


def detect_provider_type(database_url: str) -> DatabaseProviderType:
    """Infer the :class:`DatabaseProviderType` from a SQLAlchemy URL.

    Only the scheme (up to the first ``://``) is examined; the driver part
    after ``+`` is ignored.  Well-formed URLs for backends without a built-in
    short name map to ``CUSTOM_DATABASE``.  Malformed URLs map to ``NOT_SET``.

    Args:
        database_url: A SQLAlchemy connection URL string.

    Returns:
        The matched provider type.

    Examples::

        detect_provider_type("postgresql+asyncpg://u:p@host/db")  # POSTGRESQL
        detect_provider_type("mysql+aiomysql://u:p@host/db")      # CUSTOM_DATABASE
        detect_provider_type("not a url")                         # NOT_SET
    """
    match = _SCHEME_RE.match(database_url.strip())
    if not match:
        return DatabaseProviderType.NOT_SET
    backend = match.group(1).lower().split("+", 1)[0]
    return _PROVIDER_BY_BACKEND.get(backend, DatabaseProviderType.CUSTOM_DATABASE)


def requires_static_pool(database_url: str) -> bool:
    """Return ``True`` if *database_url* needs SQLAlchemy's ``StaticPool``.

    SQLite in-memory databases exist only on a single connection, so every
    checkout must reuse it.

    Args:
        database_url: A SQLAlchemy connection URL string.

    Returns:
        ``True`` only for SQLite URLs.
    """
    return detect_provider_type(database_url) == DatabaseProviderType.SQLITE_IN_MEMORY


_PASSWORD_RE = re.compile(r"://([^:/@]+):([^@/]+)@")


def mask_url(database_url: str) -> str:
    """Return *database_url* with its password replaced by ``***``.

    Examples::

        mask_url("postgresql://app:s3cret@db/main")  # "postgresql://app:***@db/main"
    """
    return _PASSWORD_RE.sub(r"://\1:***@", database_url)


__all__ = [
    "detect_provider_type",
    "get_short_provider_name",
    "mask_url",
    "requires_static_pool",
    "short_name_for_backend",
]
