"""
Error taxonomy shared across fluentsql packages.
"""

from __future__ import annotations

from typing import Any, Sequence


class DatabaseError(RuntimeError):
    """Base error for every failure raised by fluentsql."""


class UnsupportedDialectError(DatabaseError, ValueError):
    """Raised when a dialect tag does not name a supported SQL dialect."""

    def __init__(self, dialect: str) -> None:
        super().__init__(f"Unsupported driver: {dialect}")
        self.dialect = dialect


class MissingConfigKeyError(DatabaseError, KeyError):
    """Raised when connection parameters lack a key required by the dialect."""

    def __init__(self, key: str, dialect: str | None = None) -> None:
        message = f"Missing config key: {key}"
        if dialect:
            message += f" (required by {dialect})"
        super().__init__(message)
        self.key = key
        self.dialect = dialect

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class ConnectionFailedError(DatabaseError):
    """Raised when the driver cannot open a connection."""


class NoCurrentColumnError(DatabaseError):
    """Raised when a column modifier is called before any column exists."""


class UnsupportedStatementKindError(DatabaseError):
    """Raised when a statement builder holds a kind it cannot compile."""


class AlreadyCompiledError(DatabaseError):
    """Raised when a statement builder is mutated after compilation."""


class UnboundBuilderError(DatabaseError):
    """Raised when a builder created without a Database is asked to execute."""


class QueryError(DatabaseError):
    """
    Raised when the driver rejects a statement.

    Carries the SQL text and bound parameters so the failure can be diagnosed
    without re-running the statement.
    """

    def __init__(self, message: str, sql: str, params: Sequence[Any] = ()) -> None:
        super().__init__(message)
        self.sql = sql
        self.params = list(params)

    def debug_info(self) -> dict[str, Any]:
        return {"message": str(self), "sql": self.sql, "params": list(self.params)}
