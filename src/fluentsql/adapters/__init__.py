"""
Database adapter interfaces and implementations.
"""

from __future__ import annotations

from ..dialects.base import DialectName
from .base import (
    AdapterConfigurationError,
    AdapterConnectionError,
    AdapterError,
    AdapterExecutionError,
    ConnectionConfig,
    DatabaseAdapter,
)
from .mysql import MySQLAdapter
from .postgres import PostgresAdapter
from .sqlite import SQLiteAdapter

_ADAPTERS: dict[DialectName, type] = {
    DialectName.SQLITE: SQLiteAdapter,
    DialectName.MYSQL: MySQLAdapter,
    DialectName.POSTGRESQL: PostgresAdapter,
}


def adapter_for(driver: "str | DialectName", **kwargs) -> DatabaseAdapter:
    """
    Instantiate the adapter serving ``driver``.
    """

    return _ADAPTERS[DialectName.parse(driver)](**kwargs)


__all__ = [
    "ConnectionConfig",
    "DatabaseAdapter",
    "AdapterError",
    "AdapterConfigurationError",
    "AdapterConnectionError",
    "AdapterExecutionError",
    "SQLiteAdapter",
    "PostgresAdapter",
    "MySQLAdapter",
    "adapter_for",
]
