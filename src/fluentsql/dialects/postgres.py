"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from typing import Any, Final

from .base import DialectName, pagination, render_literal


class PostgresDialect:
    """
    PostgreSQL dialect using percent positional parameters.
    """

    name: Final[DialectName] = DialectName.POSTGRESQL
    param_style: Final[str] = "format"
    timestamp_type: Final[str] = "TIMESTAMP"
    required_config_keys: Final[tuple[str, ...]] = ("host", "database", "user", "password")

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def parameter_placeholder(self) -> str:
        return "%s"

    def primary_key_syntax(self, column: str) -> str:
        return f"{column} SERIAL PRIMARY KEY"

    def timestamp_default_syntax(self) -> str:
        return "DEFAULT CURRENT_TIMESTAMP"

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        return pagination(limit, offset, no_limit=None)

    def table_options_syntax(self) -> str:
        return " WITH (fillfactor = 100)"

    def table_exists_sql(self) -> str:
        return (
            "SELECT table_name FROM information_schema.tables "
            "WHERE table_schema = current_schema() AND table_name = %s"
        )

    def render_default(self, value: Any) -> str:
        return render_literal(value)
