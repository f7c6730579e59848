import logging

import pytest

from fluentsql.dialects import PostgresDialect, SQLiteDialect
from fluentsql.errors import UnsupportedStatementKindError
from fluentsql.query import ClauseSet, QueryBuilder, SQLCompiler, StatementKind


def test_compiler_works_on_a_bare_clause_set():
    clauses = ClauseSet(filters=["id = %s"], params=[5], limit=1)
    compiler = SQLCompiler("users", StatementKind.SELECT, PostgresDialect(), clauses)
    assert compiler.compile() == ("SELECT * FROM users WHERE id = %s LIMIT 1", [5])


def test_compiler_rejects_unknown_kind():
    compiler = SQLCompiler("users", "UPSERT", SQLiteDialect(), ClauseSet())
    with pytest.raises(UnsupportedStatementKindError):
        compiler.compile()


def test_compile_logs_redacted_params(caplog):
    caplog.set_level(logging.DEBUG, logger="fluentsql.query.builder")
    query = QueryBuilder("users", StatementKind.INSERT, SQLiteDialect())
    query.set({"name": "Ann", "password": "password123"}).to_sql()
    records = [r for r in caplog.records if r.name == "fluentsql.query.builder"]
    assert records
    assert records[0].params == ["Ann", "***"]
    assert records[0].sql == "INSERT INTO users (name, password) VALUES (?, ?)"
