"""Default sharding entry options and resolution.

``ShardingEntryOptions`` describes the sharding entry that is added to an
empty sharding-entry store at start-up.  The application can set any of the
entry fields itself; the rest are filled in from ``ShardingConfig`` when
:meth:`ShardingEntryOptions.provide_default_sharding_entry` runs.

Hybrid vs sharding-only
-----------------------
``tenants_in_auth_db=True``
    Tenants may live in the authorization database, so a default entry
    pointing at ``DefaultConnection`` is resolved and seeded.

``tenants_in_auth_db=False``
    Every tenant owns its database.  No default entry is produced, and
    ``DefaultConnection`` is hidden from the eligible connection names when
    other connection strings exist.

Example::

    options = ShardingEntryOptions(tenants_in_auth_db=True)
    entry = options.provide_default_sharding_entry(config)
    # ShardingEntry(name="Default Database",
    #               connection_name="DefaultConnection",
    #               database_type="SqlServer")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi_sharding.core.exceptions import (
    ConfigurationError,
    MissingShardingEntryNameError,
)
from fastapi_sharding.core.types import ShardingEntry
from fastapi_sharding.utils.db_compat import get_short_provider_name

if TYPE_CHECKING:
    from fastapi_sharding.core.config import ShardingConfig
    from fastapi_sharding.core.types import ProviderNameSource

logger = logging.getLogger(__name__)

DEFAULT_CONNECTION_NAME = "DefaultConnection"


class ShardingEntryOptions:
    """The default sharding entry, plus how ``DefaultConnection`` is treated.

    Args:
        tenants_in_auth_db: ``True`` when tenants may share the authorization
            database (hybrid).  ``False`` when every tenant has its own
            database (sharding-only); no default entry is then produced.
        include_default_connection: Whether ``DefaultConnection`` stays in
            the eligible connection names when other connection strings
            exist.  ``None`` follows *tenants_in_auth_db*.
        name: Preset entry name.
        connection_name: Preset connection name.
        database_type: Preset short provider name.  Required in practice for
            custom databases when no provider-name source is available.
        database_name: Preset database name.

    Attributes:
        default_connection_name: Key of the application's primary connection
            string.  Default: ``"DefaultConnection"``.
    """

    def __init__(
        self,
        tenants_in_auth_db: bool,
        include_default_connection: bool | None = None,
        *,
        name: str | None = None,
        connection_name: str | None = None,
        database_type: str | None = None,
        database_name: str | None = None,
    ) -> None:
        self._tenants_in_auth_db = tenants_in_auth_db
        keep_default = (
            include_default_connection
            if include_default_connection is not None
            else tenants_in_auth_db
        )
        self._remove_default_connection_if_others = not keep_default
        self.default_connection_name: str = DEFAULT_CONNECTION_NAME

        self.name = name
        self.connection_name = connection_name
        self.database_type = database_type
        self.database_name = database_name

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(tenants_in_auth_db={self._tenants_in_auth_db!r}, "
            f"remove_default_connection_if_others={self._remove_default_connection_if_others!r}, "
            f"name={self.name!r}, connection_name={self.connection_name!r}, "
            f"database_type={self.database_type!r})"
        )

    @property
    def tenants_in_auth_db(self) -> bool:
        """``True`` when tenants may live in the authorization database."""
        return self._tenants_in_auth_db

    @property
    def remove_default_connection_if_others(self) -> bool:
        """``True`` when ``DefaultConnection`` is dropped if other connections exist."""
        return self._remove_default_connection_if_others

    ##############
    # Resolution #
    ##############

    def form_default_sharding_entry(
        self,
        config: ShardingConfig,
        provider_source: ProviderNameSource | None = None,
    ) -> ShardingEntry:
        """Fill in every unset entry field and return the resulting entry.

        Fields already set on this object are kept.  The resolved values are
        recorded back on the options, so a second call returns an equal
        entry without consulting *config* or *provider_source* again.

        Args:
            config: Supplies ``default_sharding_entry_name`` and the
                configured database backend.
            provider_source: Needed only for a custom database whose
                ``database_type`` was not preset.

        Returns:
            A fully-populated :class:`~fastapi_sharding.core.types.ShardingEntry`.

        Raises:
            MissingShardingEntryNameError: When neither ``name`` nor
                ``config.default_sharding_entry_name`` is set.
            DatabaseProviderNotSetError: When ``database_type`` must be
                derived but no backend is configured.
            ProviderNameSourceRequiredError: When ``database_type`` must be
                derived from a custom database and *provider_source* is
                ``None``.
            UnknownDatabaseProviderError: When the configured backend is not
                recognised.
        """
        entry = resolve_default_sharding_entry(self, config, provider_source)
        self.name = entry.name
        self.connection_name = entry.connection_name
        self.database_type = entry.database_type
        return entry

    def provide_default_sharding_entry(
        self,
        config: ShardingConfig,
        provider_source: ProviderNameSource | None = None,
    ) -> ShardingEntry | None:
        """Return the default sharding entry, or ``None`` for sharding-only setups.

        Args:
            config: Global sharding configuration.
            provider_source: Only needed when using a custom database and
                ``database_type`` was not preset.

        Returns:
            ``None`` when ``tenants_in_auth_db`` is ``False``; otherwise the
            fully-populated default entry.

        Raises:
            ConfigurationError: See :meth:`form_default_sharding_entry`.
        """
        if not self._tenants_in_auth_db:
            logger.debug("tenants_in_auth_db=False: no default sharding entry")
            return None

        return self.form_default_sharding_entry(config, provider_source)


def resolve_default_sharding_entry(
    options: ShardingEntryOptions,
    config: ShardingConfig,
    provider_source: ProviderNameSource | None = None,
) -> ShardingEntry:
    """Merge the preset fields of *options* with defaults derived from *config*.

    Each field is resolved independently: a preset value is kept as is,
    otherwise its default is computed.  Nothing is mutated.

    Args:
        options: Entry options carrying any preset fields.
        config: Global sharding configuration.
        provider_source: Custom provider short-name source.

    Returns:
        A new, fully-populated :class:`~fastapi_sharding.core.types.ShardingEntry`.

    Raises:
        ConfigurationError: When a field cannot be resolved.
    """
    name = options.name or config.default_sharding_entry_name
    if not name:
        raise MissingShardingEntryNameError()

    connection_name = options.connection_name or DEFAULT_CONNECTION_NAME

    database_type = options.database_type
    if not database_type:
        database_type = get_short_provider_name(
            config.internal_data.database_type,
            provider_source,
        )
        if not database_type:
            raise ConfigurationError(
                parameter="database_type",
                reason=(
                    "the provider name source returned no name; set database_type "
                    "on the sharding entry options instead."
                ),
                details={"entry_name": name},
            )

    logger.debug(
        "Resolved default sharding entry name=%s connection=%s type=%s",
        name,
        connection_name,
        database_type,
    )
    return ShardingEntry(
        name=name,
        connection_name=connection_name,
        database_type=database_type,
        database_name=options.database_name,
    )


__all__ = [
    "DEFAULT_CONNECTION_NAME",
    "ShardingEntryOptions",
    "resolve_default_sharding_entry",
]
