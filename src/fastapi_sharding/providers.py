"""Provider-name sources for custom databases.

When the authorization database is configured as
:attr:`~fastapi_sharding.core.types.DatabaseProviderType.CUSTOM_DATABASE`, the
short provider name of the default sharding entry cannot come from the enum.
It is read from an object implementing
:class:`~fastapi_sharding.core.types.ProviderNameSource` instead.

:class:`SQLAlchemyProviderNameSource` derives it from a SQLAlchemy URL or
engine, so an application that already has an engine for its authorization
database can pass that engine straight through::

    engine = create_async_engine("mysql+aiomysql://app:secret@db/auth")
    source = SQLAlchemyProviderNameSource(engine)
    source.get_provider_short_name()  # "MySql"
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.engine import make_url

from fastapi_sharding.utils.db_compat import short_name_for_backend

if TYPE_CHECKING:
    from sqlalchemy.engine import URL, Engine
    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


class SQLAlchemyProviderNameSource:
    """Short provider name taken from a SQLAlchemy URL or engine.

    Args:
        bind: A URL string, a :class:`sqlalchemy.engine.URL`, or a sync or
            async engine.  Only the backend name is read; no connection is
            opened.

    Raises:
        sqlalchemy.exc.ArgumentError: When *bind* is a string that is not a
            valid SQLAlchemy URL.
    """

    def __init__(self, bind: str | URL | Engine | AsyncEngine) -> None:
        url = getattr(bind, "url", bind)
        self._url: URL = make_url(url)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(backend={self._url.get_backend_name()!r})"

    def get_provider_short_name(self) -> str:
        """Return the short provider name for the wrapped backend.

        Returns:
            E.g. ``"PostgreSQL"`` for ``postgresql+asyncpg://...``.
        """
        name = short_name_for_backend(self._url.get_backend_name())
        logger.debug("Provider short name for %s is %s", self._url.drivername, name)
        return name


__all__ = ["SQLAlchemyProviderNameSource"]
