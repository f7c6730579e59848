"""
Dialect strategy registry.
"""

from __future__ import annotations

from ..errors import UnsupportedDialectError
from .base import Dialect, DialectName
from .mysql import MySQLDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect

_REGISTRY: dict[DialectName, Dialect] = {
    DialectName.SQLITE: SQLiteDialect(),
    DialectName.MYSQL: MySQLDialect(),
    DialectName.POSTGRESQL: PostgresDialect(),
}


def get_dialect(name: "str | DialectName | Dialect") -> Dialect:
    """
    Resolve a dialect tag (or an existing dialect object) to its strategy.

    Raises ``UnsupportedDialectError`` for unknown tags and for objects that
    are not dialects.
    """
    if isinstance(name, (str, DialectName)):
        return _REGISTRY[DialectName.parse(name)]
    if isinstance(name, Dialect):
        return name
    raise UnsupportedDialectError(repr(name))


__all__ = [
    "Dialect",
    "DialectName",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "get_dialect",
]
