"""
Fluent table definition used by the schema builder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List

from ..dialects.base import Dialect
from ..errors import NoCurrentColumnError


@dataclass
class ColumnDefinition:
    """
    A single column of a table definition.

    ``nullable`` is ``None`` for primary-key columns, whose dialect fragment
    already implies non-nullability.
    """

    name: str
    column_type: str
    nullable: bool | None = False
    defaults: List[str] = field(default_factory=list)  # rendered DEFAULT clauses
    unique: bool = False
    primary_key: bool = False

    def render(self) -> str:
        parts = [self.column_type if self.primary_key else f"{self.name} {self.column_type}"]
        if self.nullable is False:
            parts.append("NOT NULL")
        parts.extend(self.defaults)
        if self.unique:
            parts.append("UNIQUE")
        return " ".join(parts)


@dataclass(frozen=True)
class UniqueConstraint:
    columns: tuple[str, ...]

    def render(self) -> str:
        return f"UNIQUE ({', '.join(self.columns)})"


class TableSchema:
    """
    Ordered, mutable description of a table's columns and constraints.

    Column methods append a column and make it current; modifiers
    (``nullable``, ``required``, ``default``, ``unique``) act on the current
    column. Every method returns ``self`` so calls can be chained::

        table.id().string("title", 120).unique().boolean("draft").default(True)
    """

    def __init__(self, table: str, dialect: Dialect) -> None:
        self.table = table
        self.dialect = dialect
        self._columns: List[ColumnDefinition] = []
        self._constraints: List[UniqueConstraint] = []
        self._current: int | None = None

    # ------------------------------------------------------------------ #
    # Columns
    # ------------------------------------------------------------------ #
    def id(self, name: str = "id") -> "TableSchema":
        fragment = self.dialect.primary_key_syntax(name)
        return self._append(ColumnDefinition(name, fragment, nullable=None, primary_key=True))

    def string(self, name: str, length: int = 255) -> "TableSchema":
        if length <= 0:
            raise ValueError(f"String column '{name}' requires a positive length.")
        return self._append(ColumnDefinition(name, f"VARCHAR({length})"))

    def text(self, name: str) -> "TableSchema":
        return self._append(ColumnDefinition(name, "TEXT"))

    def integer(self, name: str) -> "TableSchema":
        return self._append(ColumnDefinition(name, "INTEGER"))

    def boolean(self, name: str) -> "TableSchema":
        return self._append(ColumnDefinition(name, "BOOLEAN"))

    def timestamp(self, name: str) -> "TableSchema":
        return self._append(ColumnDefinition(name, self.dialect.timestamp_type))

    def timestamps(self) -> "TableSchema":
        self.timestamp("created_at").nullable()
        self.timestamp("updated_at")
        self._current_column().defaults.append(self.dialect.timestamp_default_syntax())
        return self

    # ------------------------------------------------------------------ #
    # Modifiers
    # ------------------------------------------------------------------ #
    def nullable(self) -> "TableSchema":
        self._current_column().nullable = True
        return self

    def required(self) -> "TableSchema":
        self._current_column().nullable = False
        return self

    def default(self, value: Any) -> "TableSchema":
        # Repeated calls add repeated DEFAULT clauses; callers own that.
        self._current_column().defaults.append(f"DEFAULT {self.dialect.render_default(value)}")
        return self

    def unique(self) -> "TableSchema":
        self._current_column().unique = True
        return self

    # ------------------------------------------------------------------ #
    # Table constraints
    # ------------------------------------------------------------------ #
    def add_unique_constraint(self, columns: Iterable[str]) -> "TableSchema":
        names = (columns,) if isinstance(columns, str) else tuple(columns)
        if not names:
            raise ValueError("A unique constraint needs at least one column.")
        self._constraints.append(UniqueConstraint(names))
        return self

    # ------------------------------------------------------------------ #
    @property
    def columns(self) -> List[str]:
        return [column.render() for column in self._columns]

    @property
    def constraints(self) -> List[str]:
        return [constraint.render() for constraint in self._constraints]

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self._columns]

    def _append(self, column: ColumnDefinition) -> "TableSchema":
        self._columns.append(column)
        self._current = len(self._columns) - 1
        return self

    def _current_column(self) -> ColumnDefinition:
        if self._current is None:
            raise NoCurrentColumnError(
                f"Table '{self.table}' has no column to modify; add a column first."
            )
        return self._columns[self._current]
