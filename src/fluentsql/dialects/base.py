"""
Dialect strategy interfaces describing SQL generation behaviors.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable

from ..errors import UnsupportedDialectError


class DialectName(str, Enum):
    """
    Tags of the supported SQL dialects.
    """

    SQLITE = "sqlite"
    MYSQL = "mysql"
    POSTGRESQL = "pgsql"

    @classmethod
    def parse(cls, value: "str | DialectName") -> "DialectName":
        if isinstance(value, DialectName):
            return value
        normalized = str(value).strip().lower()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedDialectError(str(value)) from None


_ALIASES = {
    "sqlite3": "sqlite",
    "mariadb": "mysql",
    "postgres": "pgsql",
    "postgresql": "pgsql",
}


@runtime_checkable
class Dialect(Protocol):
    """
    Strategy interface consumed by the schema, query, and adapter layers.
    """

    @property
    def name(self) -> DialectName: ...

    @property
    def param_style(self) -> str: ...

    @property
    def timestamp_type(self) -> str: ...

    @property
    def required_config_keys(self) -> tuple[str, ...]: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def parameter_placeholder(self) -> str: ...

    def primary_key_syntax(self, column: str) -> str: ...

    def timestamp_default_syntax(self) -> str: ...

    def limit_clause(self, limit: int | None, offset: int | None) -> str: ...

    def table_options_syntax(self) -> str: ...

    def table_exists_sql(self) -> str: ...

    def render_default(self, value: Any) -> str: ...


def render_literal(value: Any) -> str:
    """
    Render a Python value as an SQL literal for DDL defaults.

    Strings are single-quoted with embedded quotes doubled. DDL cannot carry
    bound parameters, so this is the only place values reach SQL text.
    """
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, str):
        escaped = value.replace("'", "''")
        return f"'{escaped}'"
    return str(value)


def pagination(limit: int | None, offset: int | None, *, no_limit: str | None) -> str:
    parts: list[str] = []
    if limit is not None:
        parts.append(f"LIMIT {limit}")
    if offset is not None:
        if limit is None and no_limit is not None:
            parts.append(f"LIMIT {no_limit}")
        parts.append(f"OFFSET {offset}")
    return " ".join(parts)


def count_placeholders(sql: str, placeholder: str) -> int:
    """
    Count positional placeholders in ``sql``.

    A ``?`` inside a quoted literal or identifier is plain text to SQLite and
    is not counted. The ``%s`` drivers format the whole string, literals
    included, so for that style only an escaped ``%%`` is skipped.
    """
    if placeholder != "%s":
        return _count_outside_quotes(sql, placeholder)
    count = 0
    idx = 0
    while idx < len(sql) - 1:
        if sql[idx] == "%" and sql[idx + 1] == "s":
            count += 1
            idx += 2
            continue
        if sql[idx] == "%" and sql[idx + 1] == "%":
            idx += 2
            continue
        idx += 1
    return count


def _count_outside_quotes(sql: str, placeholder: str) -> int:
    # A doubled quote closes and reopens the literal, so it needs no special case.
    count = 0
    quote: str | None = None
    for char in sql:
        if quote is not None:
            if char == quote:
                quote = None
        elif char in ("'", '"'):
            quote = char
        elif char == placeholder:
            count += 1
    return count
