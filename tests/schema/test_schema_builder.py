import logging

import pytest

from fluentsql import Database
from fluentsql.dialects import MySQLDialect, PostgresDialect, SQLiteDialect
from fluentsql.errors import UnboundBuilderError
from fluentsql.schema import SchemaBuilder


def posts(table):
    table.id().string("title")


def test_build_sqlite():
    sql = SchemaBuilder(SQLiteDialect()).build("posts", posts)
    assert sql == (
        "CREATE TABLE posts (\n"
        "id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
        "title VARCHAR(255) NOT NULL\n"
        ")"
    )


def test_build_mysql_appends_table_options():
    sql = SchemaBuilder(MySQLDialect()).build("posts", posts)
    assert sql.startswith("CREATE TABLE posts (\nid INT AUTO_INCREMENT PRIMARY KEY,\n")
    assert sql.endswith("\n) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4")


def test_build_postgres_appends_storage_options():
    sql = SchemaBuilder(PostgresDialect()).build("posts", posts)
    assert "id SERIAL PRIMARY KEY" in sql
    assert sql.endswith("\n) WITH (fillfactor = 100)")


def test_build_renders_constraints_after_columns():
    def definer(table):
        table.integer("author_id").string("slug").add_unique_constraint(["author_id", "slug"])

    sql = SchemaBuilder(SQLiteDialect()).build("posts", definer)
    assert sql == (
        "CREATE TABLE posts (\n"
        "author_id INTEGER NOT NULL,\n"
        "slug VARCHAR(255) NOT NULL,\n"
        "UNIQUE (author_id, slug)\n"
        ")"
    )


def test_build_requires_columns():
    with pytest.raises(ValueError):
        SchemaBuilder(SQLiteDialect()).build("empty", lambda table: None)


def test_drop_table_sql_is_idempotent_form():
    assert SchemaBuilder(SQLiteDialect()).drop_table_sql("posts") == "DROP TABLE IF EXISTS posts"


def test_drop_table_logs_warning(caplog):
    caplog.set_level(logging.WARNING, logger="fluentsql.schema.builder")
    SchemaBuilder(SQLiteDialect()).drop_table_sql("posts")
    assert any("DROP TABLE generated" in record.message for record in caplog.records)


def test_unbound_builder_cannot_execute():
    with pytest.raises(UnboundBuilderError):
        SchemaBuilder(SQLiteDialect()).create_table("posts", posts)


def test_create_and_drop_table_against_sqlite():
    db = Database("sqlite", {"database": ":memory:"})
    schema = db.schema()
    assert schema.create_table("test", posts) is schema

    rows = db.fetch_all("SELECT name FROM sqlite_master WHERE type='table' AND name = ?", ["test"])
    assert rows[0]["name"] == "test"
    assert schema.has_table("test") is True

    schema.drop_table("test").drop_table("test")
    assert schema.has_table("test") is False
    db.close()


def test_created_table_applies_defaults_and_timestamps():
    db = Database("sqlite", {"database": ":memory:"})
    db.schema().create_table(
        "articles",
        lambda t: t.id().string("title").boolean("draft").default(True).timestamps(),
    )
    db.insert("articles").set({"title": "Hello"}).execute()
    row = db.select("articles").execute()[0]
    assert row["title"] == "Hello"
    assert row["draft"] == 1
    assert row["created_at"] is None
    assert row["updated_at"] is not None
    db.close()
