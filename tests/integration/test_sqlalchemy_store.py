"""Integration tests — fastapi_sharding.storage.database (SQLite :memory: and file databases)"""

from __future__ import annotations

import asyncio

import pytest
from sqlalchemy import inspect

from fastapi_sharding.core.exceptions import (
    DuplicateShardingEntryError,
    ShardingEntryNotFoundError,
)
from fastapi_sharding.manager import ShardingManager
from fastapi_sharding.options import ShardingEntryOptions
from fastapi_sharding.storage.database import SQLAlchemyShardingEntryStore

pytestmark = pytest.mark.integration


class TestSchema:
    async def test_table_created(self, sqlite_store):
        async with sqlite_store.engine.connect() as conn:
            tables = await conn.run_sync(lambda c: inspect(c).get_table_names())
        assert "sharding_entries" in tables

    async def test_initialize_is_idempotent(self, sqlite_store, entry_factory):
        await sqlite_store.add(entry_factory(name="East"))
        await sqlite_store.initialize()
        assert await sqlite_store.exists("East")


class TestCrud:
    async def test_add_and_get(self, sqlite_store, entry_factory):
        entry = entry_factory(name="East", database_name="east_1")
        await sqlite_store.add(entry)
        assert await sqlite_store.get("East") == entry

    async def test_database_name_none_round_trips(self, sqlite_store, entry_factory):
        await sqlite_store.add(entry_factory(name="East"))
        assert (await sqlite_store.get("East")).database_name is None

    async def test_duplicate(self, sqlite_store, entry_factory):
        await sqlite_store.add(entry_factory(name="East"))
        with pytest.raises(DuplicateShardingEntryError):
            await sqlite_store.add(entry_factory(name="East", connection_name="WestCoast"))
        assert await sqlite_store.count() == 1

    async def test_get_missing(self, sqlite_store):
        with pytest.raises(ShardingEntryNotFoundError):
            await sqlite_store.get("ghost")

    async def test_get_all_ordered(self, sqlite_store, entry_factory):
        for name in ("West", "East", "Central"):
            await sqlite_store.add(entry_factory(name=name))
        assert [e.name for e in await sqlite_store.get_all()] == ["Central", "East", "West"]

    async def test_update(self, sqlite_store, entry_factory):
        entry = await sqlite_store.add(entry_factory(name="East"))
        await sqlite_store.update(
            entry.model_copy(update={"connection_name": "WestCoast", "database_name": "w1"})
        )
        stored = await sqlite_store.get("East")
        assert stored.connection_name == "WestCoast"
        assert stored.database_name == "w1"

    async def test_update_missing(self, sqlite_store, entry_factory):
        with pytest.raises(ShardingEntryNotFoundError):
            await sqlite_store.update(entry_factory(name="ghost"))

    async def test_remove(self, sqlite_store, entry_factory):
        await sqlite_store.add(entry_factory(name="East"))
        await sqlite_store.remove("East")
        assert await sqlite_store.is_empty()

    async def test_remove_missing(self, sqlite_store):
        with pytest.raises(ShardingEntryNotFoundError):
            await sqlite_store.remove("ghost")

    async def test_exists(self, sqlite_store, entry_factory):
        await sqlite_store.add(entry_factory(name="East"))
        assert await sqlite_store.exists("East")
        assert not await sqlite_store.exists("West")


class TestSeeding:
    async def test_add_if_empty(self, sqlite_store, entry_factory):
        assert await sqlite_store.add_if_empty(entry_factory(name="Default Database"))
        assert not await sqlite_store.add_if_empty(entry_factory(name="Other"))
        assert [e.name for e in await sqlite_store.get_all()] == ["Default Database"]

    async def test_manager_seeds_database(self, sqlite_store, sqlserver_config):
        manager = ShardingManager(sqlserver_config, ShardingEntryOptions(True), sqlite_store)
        seeded = await manager.initialize()
        assert seeded is not None
        stored = await sqlite_store.get("Default Database")
        assert stored.connection_name == "DefaultConnection"
        assert stored.database_type == "SqlServer"

    async def test_manager_restart_does_not_reseed(self, sqlite_store, sqlserver_config):
        first = ShardingManager(sqlserver_config, ShardingEntryOptions(True), sqlite_store)
        await first.initialize()
        second = ShardingManager(sqlserver_config, ShardingEntryOptions(True), sqlite_store)
        assert await second.initialize() is None
        assert await sqlite_store.count() == 1


class TestSharedDatabaseSeeding:
    """Several workers starting against one database seed a single entry."""

    @pytest.fixture
    def shared_url(self, tmp_path):
        pytest.importorskip("aiosqlite")
        return f"sqlite+aiosqlite:///{tmp_path / 'auth.db'}"

    async def test_lost_seed_race_returns_false(self, sqlite_store, entry_factory, monkeypatch):
        await sqlite_store.add(entry_factory(name="Default Database"))

        async def _looks_empty() -> bool:
            return True

        # The emptiness check passed before another worker's insert committed.
        monkeypatch.setattr(sqlite_store, "is_empty", _looks_empty)
        assert await sqlite_store.add_if_empty(entry_factory(name="Default Database")) is False
        assert await sqlite_store.count() == 1

    async def test_two_workers_seed_once(self, shared_url, sqlserver_config):
        stores = [SQLAlchemyShardingEntryStore(shared_url) for _ in range(2)]
        try:
            for store in stores:
                await store.initialize()
            managers = [
                ShardingManager(sqlserver_config, ShardingEntryOptions(True), store)
                for store in stores
            ]
            results = await asyncio.gather(*(m.seed_default_entry() for m in managers))
            seeded = [r for r in results if r is not None]
            assert len(seeded) == 1
            assert seeded[0].name == "Default Database"
            assert await stores[0].count() == 1
            assert await stores[1].get("Default Database") == seeded[0]
        finally:
            for store in stores:
                await store.close()

    async def test_worker_restart_after_seed(self, shared_url, sqlserver_config):
        first = SQLAlchemyShardingEntryStore(shared_url)
        second = SQLAlchemyShardingEntryStore(shared_url)
        try:
            await ShardingManager(sqlserver_config, ShardingEntryOptions(True), first).initialize()
            assert (
                await ShardingManager(
                    sqlserver_config, ShardingEntryOptions(True), second
                ).initialize()
                is None
            )
            assert await second.count() == 1
        finally:
            await first.close()
            await second.close()
