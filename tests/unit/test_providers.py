"""Unit tests — fastapi_sharding.providers"""

from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from fastapi_sharding.core.types import DatabaseProviderType
from fastapi_sharding.options import ShardingEntryOptions
from fastapi_sharding.providers import SQLAlchemyProviderNameSource

pytestmark = pytest.mark.unit


class TestSQLAlchemyProviderNameSource:
    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("mysql+aiomysql://app:secret@db/auth", "MySql"),
            ("postgresql+asyncpg://app:secret@db/auth", "PostgreSQL"),
            ("mssql+aioodbc://app:secret@db/auth", "SqlServer"),
            ("sqlite+aiosqlite:///:memory:", "Sqlite"),
            ("cockroachdb://app@db/auth", "Cockroachdb"),
        ],
    )
    def test_from_string(self, url, expected):
        assert SQLAlchemyProviderNameSource(url).get_provider_short_name() == expected

    def test_from_url_object(self):
        source = SQLAlchemyProviderNameSource(make_url("mariadb://app@db/auth"))
        assert source.get_provider_short_name() == "MySql"

    def test_from_engine(self):
        engine = create_engine("sqlite://")
        try:
            assert SQLAlchemyProviderNameSource(engine).get_provider_short_name() == "Sqlite"
        finally:
            engine.dispose()

    def test_invalid_url(self):
        with pytest.raises(ArgumentError):
            SQLAlchemyProviderNameSource("not a url")

    def test_repr_shows_backend_only(self):
        text = repr(SQLAlchemyProviderNameSource("mysql+aiomysql://app:secret@db/auth"))
        assert text == "SQLAlchemyProviderNameSource(backend='mysql')"

    def test_feeds_custom_default_entry(self, make_config):
        config = make_config(DatabaseProviderType.CUSTOM_DATABASE)
        source = SQLAlchemyProviderNameSource("mysql+aiomysql://app:secret@db/auth")
        entry = ShardingEntryOptions(True).provide_default_sharding_entry(config, source)
        assert entry.database_type == "MySql"
