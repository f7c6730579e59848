"""
Fluent statement builder for SELECT, INSERT, UPDATE and DELETE.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Sequence, Tuple

from ..dialects.base import Dialect, count_placeholders
from ..errors import AlreadyCompiledError, UnboundBuilderError
from ..security.redaction import redact_params
from ..utils import get_logger
from .compiler import ClauseSet, SQLCompiler, StatementKind

if TYPE_CHECKING:
    from ..database import Database


JOIN_TYPES = ("INNER", "LEFT", "RIGHT", "FULL", "CROSS", "LEFT OUTER", "RIGHT OUTER", "FULL OUTER")
DIRECTIONS = ("ASC", "DESC")


def _resolve_kind(kind: Any) -> Any:
    # Unknown kinds are kept as-is and rejected when compiled.
    try:
        return StatementKind(str(getattr(kind, "value", kind)).upper())
    except ValueError:
        return kind


class QueryBuilder:
    """
    Accumulates the clauses of one statement and compiles them on demand.

    A builder is single-use: the first ``to_sql()``/``execute()`` freezes it
    and any later mutator raises ``AlreadyCompiledError``. Table, column and
    condition text is trusted and emitted verbatim; values only ever travel
    as bound parameters.
    """

    def __init__(
        self,
        table: str,
        kind: StatementKind | str,
        dialect: Dialect,
        *,
        database: "Database | None" = None,
    ) -> None:
        self.table = table
        self.kind = _resolve_kind(kind)
        self.dialect = dialect
        self.database = database
        self._clauses = ClauseSet()
        self._compiled: Tuple[str, List[Any]] | None = None
        self._queued = False
        self.logger = get_logger("query.builder")

    # Public API --------------------------------------------------------
    def select(self, columns: Iterable[str]) -> "QueryBuilder":
        self._ensure_mutable()
        names = [columns] if isinstance(columns, str) else list(columns)
        self._clauses.projection = ", ".join(names) if names else "*"
        return self

    def join(self, table: str, condition: str, type: str = "INNER") -> "QueryBuilder":
        self._ensure_mutable()
        join_type = " ".join(type.upper().split())
        if join_type not in JOIN_TYPES:
            raise ValueError(f"Unsupported join type '{type}'")
        self._clauses.joins.append(f"{join_type} JOIN {table} ON {condition}")
        return self

    def left_join(self, table: str, condition: str) -> "QueryBuilder":
        return self.join(table, condition, "LEFT")

    def where(self, condition: str, params: Sequence[Any] = ()) -> "QueryBuilder":
        """
        Add a raw filter, joined to earlier ones with ``AND``.

        ``condition`` must use the dialect's placeholder (``?`` on SQLite,
        ``%s`` on MySQL and PostgreSQL; see ``Database.placeholder``), so
        ``where("id = ?", [1])`` is rejected on the ``%s`` dialects. A
        ``ValueError`` is raised when the placeholder count differs from
        ``params``; a ``?`` inside a quoted literal is not a placeholder.
        """
        self._ensure_mutable()
        values = list(params)
        expected = count_placeholders(condition, self.dialect.parameter_placeholder())
        if expected != len(values):
            raise ValueError(
                f"Condition '{condition}' has {expected} placeholder(s) but {len(values)} parameter(s) were given."
            )
        self._clauses.filters.append(condition)
        self._clauses.params.extend(values)
        return self

    def order_by(self, column: str, direction: str = "ASC") -> "QueryBuilder":
        self._ensure_mutable()
        normalized = direction.upper()
        if normalized not in DIRECTIONS:
            raise ValueError(f"Order direction must be ASC or DESC, got '{direction}'")
        self._clauses.ordering.append((column, normalized))
        return self

    def limit(self, value: int) -> "QueryBuilder":
        self._ensure_mutable()
        self._clauses.limit = self._non_negative("limit", value)
        return self

    def offset(self, value: int) -> "QueryBuilder":
        self._ensure_mutable()
        self._clauses.offset = self._non_negative("offset", value)
        return self

    def set(self, data: Mapping[str, Any]) -> "QueryBuilder":
        self._ensure_mutable()
        self._clauses.data = dict(data)
        return self

    # Terminal calls ----------------------------------------------------
    def to_sql(self) -> tuple[str, list[Any]]:
        if self._compiled is None:
            compiler = SQLCompiler(self.table, self.kind, self.dialect, self._clauses)
            self._compiled = compiler.compile()
            sql, params = self._compiled
            self.logger.debug(
                "Compiled %s statement", self._label,
                extra={"sql": sql, "params": redact_params(params)},
            )
        sql, params = self._compiled
        return sql, list(params)

    def execute(self) -> list[dict[str, Any]] | bool:
        """
        Compile and run the statement.

        Returns the row set for SELECT and ``True`` for the other kinds.
        """
        return self._require_database().run(self)

    def queue(self) -> "QueryBuilder":
        """
        Defer execution to the owning database's statement queue.

        The builder is not compiled here; compilation happens when the queue
        is executed.
        """
        self._require_database().add_to_queue(self)
        self._queued = True
        return self

    @property
    def is_queued(self) -> bool:
        return self._queued

    @property
    def _label(self) -> str:
        return getattr(self.kind, "value", str(self.kind))

    @property
    def compiled(self) -> bool:
        return self._compiled is not None

    # Internal helpers --------------------------------------------------
    def _ensure_mutable(self) -> None:
        if self._compiled is not None:
            raise AlreadyCompiledError(
                f"{self._label} builder for '{self.table}' was already compiled; create a new builder."
            )

    def _require_database(self) -> "Database":
        if self.database is None:
            raise UnboundBuilderError(
                "QueryBuilder is not bound to a Database; create it through Database.select/insert/update/delete."
            )
        return self.database

    @staticmethod
    def _non_negative(name: str, value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")
        return value

    def __repr__(self) -> str:
        state = "compiled" if self.compiled else "building"
        return f"<QueryBuilder {self._label} {self.table} ({state})>"
