"""Unit tests — fastapi_sharding.core.types"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fastapi_sharding.core.types import DatabaseProviderType, ProviderNameSource, ShardingEntry
from fastapi_sharding.providers import SQLAlchemyProviderNameSource

pytestmark = pytest.mark.unit


class TestDatabaseProviderType:
    def test_values_are_strings(self):
        assert DatabaseProviderType.SQL_SERVER == "sqlserver"
        assert str(DatabaseProviderType.POSTGRESQL) == "postgresql"

    def test_lookup_by_value(self):
        assert DatabaseProviderType("custom") is DatabaseProviderType.CUSTOM_DATABASE

    def test_members(self):
        assert {m.name for m in DatabaseProviderType} == {
            "NOT_SET",
            "SQLITE_IN_MEMORY",
            "SQL_SERVER",
            "POSTGRESQL",
            "CUSTOM_DATABASE",
        }


class TestShardingEntry:
    def test_database_name_optional(self):
        entry = ShardingEntry(name="A", connection_name="C", database_type="Sqlite")
        assert entry.database_name is None

    def test_frozen(self):
        entry = ShardingEntry(name="A", connection_name="C", database_type="Sqlite")
        with pytest.raises(ValidationError):
            entry.name = "B"  # type: ignore[misc]

    def test_model_copy(self):
        entry = ShardingEntry(name="A", connection_name="C", database_type="Sqlite")
        changed = entry.model_copy(update={"database_name": "tenant_1"})
        assert changed.database_name == "tenant_1"
        assert entry.database_name is None

    def test_equality_by_value(self):
        a = ShardingEntry(name="A", connection_name="C", database_type="Sqlite")
        b = ShardingEntry(name="A", connection_name="C", database_type="Sqlite")
        assert a == b

    @pytest.mark.parametrize("field", ["name", "connection_name", "database_type"])
    def test_required_fields_not_empty(self, field):
        data = {"name": "A", "connection_name": "C", "database_type": "Sqlite"}
        data[field] = ""
        with pytest.raises(ValidationError):
            ShardingEntry(**data)


class TestProviderNameSourceProtocol:
    def test_duck_typed_object(self):
        class Source:
            def get_provider_short_name(self) -> str:
                return "X"

        assert isinstance(Source(), ProviderNameSource)

    def test_sqlalchemy_source(self):
        assert isinstance(SQLAlchemyProviderNameSource("sqlite://"), ProviderNameSource)

    def test_plain_object_is_not_a_source(self):
        assert not isinstance(object(), ProviderNameSource)
