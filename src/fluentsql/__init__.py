"""
fluentsql public package initialization.

A small database access layer: a connection facade, a fluent statement
builder and a schema builder for SQLite, MySQL and PostgreSQL.
"""

from .database import Database  # noqa: F401
from .dialects import Dialect, DialectName, get_dialect  # noqa: F401
from .errors import (  # noqa: F401
    AlreadyCompiledError,
    ConnectionFailedError,
    DatabaseError,
    MissingConfigKeyError,
    NoCurrentColumnError,
    QueryError,
    UnboundBuilderError,
    UnsupportedDialectError,
    UnsupportedStatementKindError,
)
from .query import QueryBuilder, StatementKind  # noqa: F401
from .schema import SchemaBuilder, TableSchema  # noqa: F401

__all__ = [
    "Database",
    "Dialect",
    "DialectName",
    "get_dialect",
    "QueryBuilder",
    "StatementKind",
    "SchemaBuilder",
    "TableSchema",
    "DatabaseError",
    "UnsupportedDialectError",
    "MissingConfigKeyError",
    "ConnectionFailedError",
    "NoCurrentColumnError",
    "UnsupportedStatementKindError",
    "AlreadyCompiledError",
    "QueryError",
    "UnboundBuilderError",
]
