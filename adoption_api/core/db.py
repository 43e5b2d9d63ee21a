"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns one connection pool. The app builds exactly one instance in
its lifespan (see `adoption_api/main.py`), keeps it on `app.state.db`, and
routes receive it through the `get_db` dependency. Services and repositories
take it as their first argument; nothing in the package holds a global pool.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

from . import config
from .schemas import INT4_MAX


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = config.env_str("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def _init_connection(conn: asyncpg.Connection) -> None:
    # jsonb columns (contact_info, sess, ...) travel as Python objects.
    await conn.set_type_codec(
        "jsonb",
        encoder=json.dumps,
        decoder=json.loads,
        schema="pg_catalog",
    )


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Queries(ABC):
    """
    fetch/execute helpers over anything exposing asyncpg's
    `fetchrow` / `fetch` / `execute` (a pool or a single connection).
    """

    @abstractmethod
    def _executor(self) -> Any:
        ...

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self._executor().fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self._executor().fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> str:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL). Returns the status tag,
        e.g. "DELETE 1".
        """
        return await self._executor().execute(sql, *args)


class Transaction(Queries):
    """
    Query helpers bound to one connection inside an open transaction.
    """

    def __init__(self, conn: asyncpg.Connection) -> None:
        self._conn = conn

    def _executor(self) -> asyncpg.Connection:
        return self._conn


class Database(Queries):
    def __init__(
        self,
        dsn: str,
        *,
        min_size: int = 1,
        max_size: int = 5,
        command_timeout: float = 30.0,
    ) -> None:
        self._dsn = dsn
        self._min_size = min_size
        self._max_size = max_size
        self._command_timeout = command_timeout
        self._pool: asyncpg.Pool | None = None

    @classmethod
    def from_env(cls) -> "Database":
        return cls(
            database_url(),
            min_size=config.env_int("DB_POOL_MIN_SIZE", 1),
            max_size=config.env_int("DB_POOL_MAX_SIZE", 5),
            command_timeout=config.env_float("DB_COMMAND_TIMEOUT_S", 30.0),
        )

    async def connect(self) -> None:
        if self._pool is not None:
            return None
        self._pool = await asyncpg.create_pool(
            dsn=self._dsn,
            min_size=self._min_size,
            max_size=self._max_size,
            command_timeout=self._command_timeout,
            init=_init_connection,
        )

    async def close(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None

    @property
    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("DB pool is not initialized. Call connect() on startup.")
        return self._pool

    def _executor(self) -> asyncpg.Pool:
        return self.pool

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Transaction]:
        """
        Run several repository calls atomically:

            async with db.transaction() as tx:
                await repository.insert_shelter(tx, ...)
        """
        async with self.pool.acquire() as conn:  # type: asyncpg.Connection
            async with conn.transaction():
                yield Transaction(conn)


def get_db(request: Request) -> Database:
    """
    FastAPI dependency: the process-wide database built in the lifespan.
    """
    return request.app.state.db


def affected_rows(status: str) -> int:
    """
    Parse the row count out of an asyncpg status tag ("DELETE 3" -> 3).
    """
    try:
        return int((status or "").rsplit(" ", 1)[-1])
    except ValueError:
        return 0


def fits_int4(value: int) -> bool:
    """
    True when `value` can be bound to an `integer`/`serial` parameter.
    asyncpg refuses anything wider before the query is sent.
    """
    return -INT4_MAX - 1 <= value <= INT4_MAX


def select_list(alias: str, columns: tuple[str, ...] | list[str], prefix: str = "") -> str:
    """
    "p", ("id", "name"), "p__" -> "p.id AS p__id, p.name AS p__name"
    """
    return ", ".join(f"{alias}.{c} AS {prefix}{c}" for c in columns)


def nest_prefixed(row: dict[str, Any], prefix: str, key: str) -> dict[str, Any]:
    """
    Move joined columns named `<prefix><col>` into a nested dict under `key`.
    """
    outer = {k: v for k, v in row.items() if not k.startswith(prefix)}
    outer[key] = {k[len(prefix):]: v for k, v in row.items() if k.startswith(prefix)}
    return outer
