"""
MySQL dialect implementation.
"""

from __future__ import annotations

from typing import Any, Final

from .base import DialectName, pagination, render_literal

# Largest BIGINT UNSIGNED; MySQL documents it as the "all remaining rows" limit.
MAX_ROWS: Final[str] = "18446744073709551615"


class MySQLDialect:
    """
    MySQL dialect using percent-style placeholders.

    MySQL has no bare ``OFFSET``: an offset without a limit renders
    ``LIMIT 18446744073709551615 OFFSET n``.
    """

    name: Final[DialectName] = DialectName.MYSQL
    param_style: Final[str] = "format"
    timestamp_type: Final[str] = "DATETIME"
    required_config_keys: Final[tuple[str, ...]] = ("host", "database", "user", "password")

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace("`", "``")
        return f"`{escaped}`"

    def parameter_placeholder(self) -> str:
        return "%s"

    def primary_key_syntax(self, column: str) -> str:
        return f"{column} INT AUTO_INCREMENT PRIMARY KEY"

    def timestamp_default_syntax(self) -> str:
        return "DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP"

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        return pagination(limit, offset, no_limit=MAX_ROWS)

    def table_options_syntax(self) -> str:
        return " ENGINE=InnoDB DEFAULT CHARSET=utf8mb4"

    def table_exists_sql(self) -> str:
        return (
            "SELECT table_name FROM information_schema.tables "
            "WHERE table_schema = DATABASE() AND table_name = %s"
        )

    def render_default(self, value: Any) -> str:
        return render_literal(value)
