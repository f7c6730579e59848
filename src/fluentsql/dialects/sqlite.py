"""
SQLite dialect implementation.
"""

from __future__ import annotations

from typing import Any, Final

from .base import DialectName, pagination, render_literal


class SQLiteDialect:
    """
    SQLite dialect using qmark param style.
    """

    name: Final[DialectName] = DialectName.SQLITE
    param_style: Final[str] = "qmark"
    timestamp_type: Final[str] = "DATETIME"
    required_config_keys: Final[tuple[str, ...]] = ("database",)

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def parameter_placeholder(self) -> str:
        return "?"

    def primary_key_syntax(self, column: str) -> str:
        return f"{column} INTEGER PRIMARY KEY AUTOINCREMENT"

    def timestamp_default_syntax(self) -> str:
        return "DEFAULT CURRENT_TIMESTAMP"

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        # SQLite cannot express OFFSET without LIMIT; -1 means unbounded.
        return pagination(limit, offset, no_limit="-1")

    def table_options_syntax(self) -> str:
        return ""

    def table_exists_sql(self) -> str:
        return "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?"

    def render_default(self, value: Any) -> str:
        return render_literal(value)
