"""
Basic Example 1 — Hybrid Default Entry
=======================================
A hybrid multi-tenant app: tenants may share the authorization database, so
the default sharding entry is seeded into the entry store at startup.

What you'll learn
-----------------
- Configure ShardingConfig with named connection strings
- Let ShardingEntryOptions fill in the default sharding entry
- Seed it through the manager's lifespan
- Expose sharding entries through closure-based dependencies

Run
---
    pip install "fastapi-sharding[sqlite]"
    pip install "fastapi[standard]"
    uvicorn main:app --reload

Test
----
    # The seeded default entry
    curl http://localhost:8000/sharding

    # One entry by name → its full connection URL
    curl "http://localhost:8000/sharding/Default%20Database/connection"

    # Connection names a new entry may use
    curl http://localhost:8000/connections

    # Add an entry on another server
    curl -X POST http://localhost:8000/sharding \
         -H "Content-Type: application/json" \
         -d '{"name": "East 1", "connection_name": "EastCoast",
              "database_type": "Sqlite", "database_name": "./east_1.db"}'

    # Unknown entry → 404
    curl http://localhost:8000/sharding/ghost
"""
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException

from fastapi_sharding import (
    ShardingConfig,
    ShardingEntry,
    ShardingEntryOptions,
    ShardingError,
    ShardingManager,
)
from fastapi_sharding.dependencies import (
    make_connection_names_dependency,
    make_sharding_entries_dependency,
    make_sharding_entry_dependency,
)
from fastapi_sharding.storage.database import SQLAlchemyShardingEntryStore

# ── 1. Configuration ──────────────────────────────────────────────────────────
#
# database_url points at the authorization database.  Its scheme tells the
# config which provider it is, so the default entry gets database_type
# "Sqlite" without any extra setting.
#
config = ShardingConfig(
    database_url="sqlite+aiosqlite:///./auth.db",
    connection_strings={
        "DefaultConnection": "sqlite+aiosqlite:///./auth.db",
        "EastCoast": "sqlite+aiosqlite:///./east.db",
    },
)

# ── 2. Store, options & manager ───────────────────────────────────────────────
#
# tenants_in_auth_db=True → the default entry "Default Database" is resolved
# and written into the store the first time the app starts.
#
store = SQLAlchemyShardingEntryStore("sqlite+aiosqlite:///./auth.db")
options = ShardingEntryOptions(tenants_in_auth_db=True)
manager = ShardingManager(config, options, store)

# ── 3. App + lifespan ─────────────────────────────────────────────────────────

app = FastAPI(
    title="Hybrid Default Entry — Basic Example",
    description="Seeds the default sharding entry at startup.",
    lifespan=manager.create_lifespan(),
)

get_entries = make_sharding_entries_dependency(manager)
get_entry = make_sharding_entry_dependency(manager)
get_connection_names = make_connection_names_dependency(manager)

# ── 4. Routes ─────────────────────────────────────────────────────────────────


@app.get("/sharding")
async def list_entries(
    entries: Annotated[list[ShardingEntry], Depends(get_entries)],
):
    return entries


@app.get("/sharding/{entry_name}")
async def show_entry(entry: Annotated[ShardingEntry, Depends(get_entry)]):
    return entry


@app.get("/sharding/{entry_name}/connection")
async def show_connection(entry: Annotated[ShardingEntry, Depends(get_entry)]):
    """Return the URL a tenant database context would connect with.

    Never expose this in production: it includes the password.
    """
    return {"url": await manager.form_connection_string(entry.name)}


@app.post("/sharding", status_code=201)
async def add_entry(entry: ShardingEntry):
    try:
        return await manager.add_entry(entry)
    except ShardingError as exc:
        raise HTTPException(status_code=400, detail=exc.message) from exc


@app.get("/connections")
async def list_connections(
    names: Annotated[list[str], Depends(get_connection_names)],
):
    return names
