"""FastAPI dependency factories for sharding entries.

The dependencies are **closure-based**: the ``ShardingManager`` is captured
when the dependency is created, so nothing is looked up on ``app.state`` at
request time.

Usage pattern — in your FastAPI app::

    from typing import Annotated
    from fastapi import Depends, FastAPI
    from fastapi_sharding import ShardingEntry
    from fastapi_sharding.dependencies import make_sharding_entry_dependency

    manager = ShardingManager(config, ShardingEntryOptions(True), store)
    app = FastAPI(lifespan=manager.create_lifespan())
    get_sharding_entry = make_sharding_entry_dependency(manager)

    @app.get("/sharding/{entry_name}")
    async def show_entry(
        entry: Annotated[ShardingEntry, Depends(get_sharding_entry)],
    ):
        return entry
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import HTTPException, status

from fastapi_sharding.core.exceptions import ShardingEntryNotFoundError
from fastapi_sharding.core.types import ShardingEntry  # noqa: TC001 - resolved by FastAPI

if TYPE_CHECKING:
    from fastapi_sharding.manager import ShardingManager


def make_sharding_entries_dependency(manager: ShardingManager) -> Any:
    """Create a dependency returning every sharding entry, ordered by name.

    Args:
        manager: The configured :class:`~fastapi_sharding.manager.ShardingManager`.

    Returns:
        An async function suitable for ``Depends``.
    """

    async def _get_sharding_entries() -> list[ShardingEntry]:
        return await manager.get_all_entries()

    return _get_sharding_entries


def make_sharding_entry_dependency(manager: ShardingManager) -> Any:
    """Create a dependency resolving the ``entry_name`` path parameter to an entry.

    An unknown name becomes an HTTP 404 response.

    Args:
        manager: The configured :class:`~fastapi_sharding.manager.ShardingManager`.

    Returns:
        An async function suitable for ``Depends``.
    """

    async def _get_sharding_entry(entry_name: str) -> ShardingEntry:
        try:
            return await manager.get_entry(entry_name)
        except ShardingEntryNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=exc.message,
            ) from exc

    return _get_sharding_entry


def make_connection_names_dependency(manager: ShardingManager) -> Any:
    """Create a dependency returning the connection names new entries may use.

    Args:
        manager: The configured :class:`~fastapi_sharding.manager.ShardingManager`.

    Returns:
        A function suitable for ``Depends``.
    """

    def _get_connection_names() -> list[str]:
        return manager.get_connection_string_names()

    return _get_connection_names


__all__ = [
    "make_connection_names_dependency",
    "make_sharding_entries_dependency",
    "make_sharding_entry_dependency",
]
