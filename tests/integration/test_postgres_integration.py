import os
import uuid

import pytest

from fluentsql import Database


def _require_postgres():
    try:
        import psycopg  # noqa: F401
    except ImportError:
        pytest.skip("psycopg driver not installed")
    dsn = os.getenv("FLUENTSQL_POSTGRES_DSN")
    if not dsn:
        pytest.skip("FLUENTSQL_POSTGRES_DSN not set; skipping Postgres integration test")
    try:
        return Database.from_dsn(dsn)
    except Exception as exc:  # pragma: no cover - environment dependent
        pytest.skip(f"Cannot connect to Postgres for integration test: {exc}")


def test_postgres_roundtrip():
    db = _require_postgres()
    table = f"fluent_pg_{uuid.uuid4().hex[:8]}"
    try:
        db.schema().create_table(table, lambda t: t.id().string("name").unique())
        assert db.schema().has_table(table)
        db.insert(table).set({"name": "pg-ok"}).execute()
        rows = db.select(table).where("id = %s", [1]).execute()
        assert rows == [{"id": 1, "name": "pg-ok"}]
    finally:
        db.schema().drop_table(table)
        db.close()
