"""Connection-string helpers for sharding entries.

Sharding entries never store a connection URL; they store the *name* of one
of the application's connection strings (``ShardingConfig.connection_strings``)
and, optionally, the database to use on that server.  This module answers
two questions about that table:

* which connection names may a new sharding entry use?
  (:func:`get_connection_string_names`)
* what is the full connection URL of a given entry?
  (:func:`form_connection_string`)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from fastapi_sharding.core.exceptions import (
    ConnectionStringNotFoundError,
    InvalidShardingEntryError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fastapi_sharding.core.types import ShardingEntry
    from fastapi_sharding.options import ShardingEntryOptions


def get_connection_string_names(
    connection_strings: Mapping[str, str],
    options: ShardingEntryOptions,
) -> list[str]:
    """Return the connection names a sharding entry may refer to.

    When ``options.remove_default_connection_if_others`` is ``True`` and
    there is more than one connection string, the
    ``options.default_connection_name`` connection is left out: in a
    sharding-only application the authorization database is not a home for
    tenants.

    Args:
        connection_strings: Connection name → URL mapping.
        options: Sharding entry options.

    Returns:
        Sorted list of connection names.

    Example::

        get_connection_string_names(
            {"DefaultConnection": "...", "EastCoast": "..."},
            ShardingEntryOptions(tenants_in_auth_db=False),
        )
        # ["EastCoast"]
    """
    names = sorted(connection_strings)
    if (
        options.remove_default_connection_if_others
        and len(names) > 1
        and options.default_connection_name in names
    ):
        names.remove(options.default_connection_name)
    return names


def form_connection_string(
    entry: ShardingEntry,
    connection_strings: Mapping[str, str],
) -> str:
    """Build the connection URL for *entry*.

    The URL registered under ``entry.connection_name`` is returned as is
    when ``entry.database_name`` is ``None``; otherwise its database part is
    replaced with ``entry.database_name``.

    Args:
        entry: The sharding entry.
        connection_strings: Connection name → URL mapping.

    Returns:
        A SQLAlchemy connection URL string (password included).

    Raises:
        ConnectionStringNotFoundError: When ``entry.connection_name`` is not
            in *connection_strings*.
        InvalidShardingEntryError: When the named connection string is not a
            valid SQLAlchemy URL.

    Example::

        entry = ShardingEntry(name="East", connection_name="EastCoast",
                              database_type="PostgreSQL", database_name="east_1")
        form_connection_string(entry, {"EastCoast": "postgresql+asyncpg://u:p@east/postgres"})
        # "postgresql+asyncpg://u:p@east/east_1"
    """
    url = connection_strings.get(entry.connection_name)
    if url is None:
        raise ConnectionStringNotFoundError(
            entry.connection_name,
            details={"entry_name": entry.name},
        )
    if entry.database_name is None:
        return url

    try:
        parsed = make_url(url)
    except ArgumentError as exc:
        raise InvalidShardingEntryError(
            entry.name,
            reason=f"connection string {entry.connection_name!r} is not a valid URL",
        ) from exc
    return parsed.set(database=entry.database_name).render_as_string(hide_password=False)


__all__ = ["form_connection_string", "get_connection_string_names"]
