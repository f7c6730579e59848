"""
SQL compilation translating accumulated clauses into SQL text and parameters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

from ..dialects.base import Dialect
from ..errors import UnsupportedStatementKindError


class StatementKind(str, Enum):
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass
class ClauseSet:
    """
    Clauses gathered by a ``QueryBuilder``.

    ``filters`` and ``params`` grow together: each ``where()`` call appends
    one fragment and the values bound by its placeholders.
    """

    projection: str = "*"
    joins: List[str] = field(default_factory=list)
    filters: List[str] = field(default_factory=list)
    params: List[Any] = field(default_factory=list)
    ordering: List[Tuple[str, str]] = field(default_factory=list)
    limit: int | None = None
    offset: int | None = None
    data: Dict[str, Any] = field(default_factory=dict)


class SQLCompiler:
    """
    Compile a clause set into a statement of the requested kind.
    """

    def __init__(self, table: str, kind: Any, dialect: Dialect, clauses: ClauseSet) -> None:
        self.table = table
        self.kind = kind
        self.dialect = dialect
        self.clauses = clauses

    def compile(self) -> Tuple[str, List[Any]]:
        routines: Dict[Any, Callable[[], Tuple[str, List[Any]]]] = {
            StatementKind.SELECT: self._compile_select,
            StatementKind.INSERT: self._compile_insert,
            StatementKind.UPDATE: self._compile_update,
            StatementKind.DELETE: self._compile_delete,
        }
        routine = routines.get(self.kind)
        if routine is None:
            raise UnsupportedStatementKindError(f"Unsupported query type: {self.kind!r}")
        return routine()

    # Statement kinds ---------------------------------------------------
    def _compile_select(self) -> Tuple[str, List[Any]]:
        clauses = self.clauses
        sql_parts: List[str] = [f"SELECT {clauses.projection}", "FROM", self.table]
        sql_parts.extend(clauses.joins)
        sql_parts.extend(self._where_parts())

        if clauses.ordering:
            sql_parts.append("ORDER BY")
            sql_parts.append(", ".join(f"{column} {direction}" for column, direction in clauses.ordering))

        # LIMIT 0 means "no limit", not "no rows".
        limit = clauses.limit or None
        limit_clause = self.dialect.limit_clause(limit, clauses.offset)
        if limit_clause:
            sql_parts.append(limit_clause)

        return " ".join(sql_parts), list(clauses.params)

    def _compile_insert(self) -> Tuple[str, List[Any]]:
        data = self._require_data()
        columns = ", ".join(data)
        placeholder = self.dialect.parameter_placeholder()
        placeholders = ", ".join(placeholder for _ in data)
        sql = f"INSERT INTO {self.table} ({columns}) VALUES ({placeholders})"
        return sql, list(data.values())

    def _compile_update(self) -> Tuple[str, List[Any]]:
        data = self._require_data()
        placeholder = self.dialect.parameter_placeholder()
        assignments = ", ".join(f"{column} = {placeholder}" for column in data)
        sql_parts = [f"UPDATE {self.table} SET {assignments}"]
        sql_parts.extend(self._where_parts())
        # SET values always precede WHERE values.
        return " ".join(sql_parts), list(data.values()) + list(self.clauses.params)

    def _compile_delete(self) -> Tuple[str, List[Any]]:
        sql_parts = [f"DELETE FROM {self.table}"]
        sql_parts.extend(self._where_parts())
        return " ".join(sql_parts), list(self.clauses.params)

    # Helpers -----------------------------------------------------------
    def _where_parts(self) -> List[str]:
        if not self.clauses.filters:
            return []
        return ["WHERE", " AND ".join(self.clauses.filters)]

    def _require_data(self) -> Dict[str, Any]:
        if not self.clauses.data:
            raise ValueError(f"{self.kind.value} on '{self.table}' requires data; call set() first.")
        return self.clauses.data
