"""Pooled access to the relational store."""

from __future__ import annotations

import shlex
from collections.abc import Mapping
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine, make_url

from shopapi.config import DatabaseConfig

_DIALECTS = {"pgx": "postgresql", "postgres": "postgresql"}


class NoRowsError(LookupError):
    """A single-row query matched nothing."""

    def __init__(self) -> None:
        super().__init__("no rows in result set")


class Database:
    """A connection pool with helpers for running statements."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def close(self) -> None:
        """Release every pooled connection."""
        self.engine.dispose()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def query(self, sql: str, params: Mapping[str, Any] | None = None) -> list[tuple]:
        """Run a statement in its own transaction and return every row."""
        with self.engine.begin() as conn:
            result = conn.execute(text(sql), dict(params or {}))
            return [tuple(row) for row in result] if result.returns_rows else []

    def query_row(self, sql: str, params: Mapping[str, Any] | None = None) -> tuple:
        """Run a statement and return its first row; raise NoRowsError if none."""
        rows = self.query(sql, params)
        if not rows:
            raise NoRowsError()
        return rows[0]


def _build_url(driver: str, dsn: str) -> URL:
    if not dsn:
        raise ValueError("database DSN is empty")
    if "://" in dsn:
        return make_url(dsn)
    if not driver:
        raise ValueError("database driver is not set")

    pairs: dict[str, str] = {}
    for token in shlex.split(dsn):
        key, sep, value = token.partition("=")
        if not sep or not key:
            raise ValueError(f"malformed DSN entry {token!r}")
        pairs[key] = value
    port = pairs.pop("port", None)
    return URL.create(
        _DIALECTS.get(driver.lower(), driver),
        username=pairs.pop("user", None),
        password=pairs.pop("password", None),
        host=pairs.pop("host", None),
        port=int(port) if port else None,
        database=pairs.pop("dbname", None),
        query=pairs,
    )


def new_db(config: DatabaseConfig) -> Database:
    """Open a pool for ``config`` and verify that the store answers."""
    url = _build_url(config.driver, config.dsn)

    pool_size = max(config.max_idle_conns, 1)
    max_overflow = -1
    if config.max_open_conns > 0:
        pool_size = min(pool_size, config.max_open_conns)
        max_overflow = config.max_open_conns - pool_size
    lifetime = config.conn_max_lifetime_minutes

    engine = create_engine(
        url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_recycle=lifetime * 60 if lifetime > 0 else -1,
    )
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:
        engine.dispose()
        raise
    return Database(engine)