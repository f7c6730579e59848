from fluentsql.dialects import SQLiteDialect


def test_sqlite_identifier_quoting():
    dialect = SQLiteDialect()
    assert dialect.quote_identifier("table") == '"table"'
    assert dialect.quote_identifier('bad"name') == '"bad""name"'


def test_sqlite_limit_clause():
    dialect = SQLiteDialect()
    assert dialect.limit_clause(10, None) == "LIMIT 10"
    assert dialect.limit_clause(10, 5) == "LIMIT 10 OFFSET 5"
    assert dialect.limit_clause(None, 5) == "LIMIT -1 OFFSET 5"
    assert dialect.limit_clause(None, None) == ""


def test_sqlite_primary_key_and_timestamps():
    dialect = SQLiteDialect()
    assert dialect.primary_key_syntax("id") == "id INTEGER PRIMARY KEY AUTOINCREMENT"
    assert dialect.timestamp_default_syntax() == "DEFAULT CURRENT_TIMESTAMP"
    assert dialect.timestamp_type == "DATETIME"


def test_sqlite_has_no_table_options():
    assert SQLiteDialect().table_options_syntax() == ""


def test_sqlite_placeholder():
    assert SQLiteDialect().parameter_placeholder() == "?"
