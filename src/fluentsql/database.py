"""
Database session tying a dialect, a driver adapter and the builders together.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator, List, Mapping, Sequence

from .adapters import ConnectionConfig, DatabaseAdapter, adapter_for
from .dialects import get_dialect
from .dialects.base import Dialect
from .errors import ConnectionFailedError, DatabaseError, QueryError
from .query import QueryBuilder, StatementKind
from .schema import SchemaBuilder
from .security.redaction import redact_params
from .utils import get_logger


class Database:
    """
    Execution facade over one driver connection.

    ``Database("sqlite", {"database": ":memory:"})`` validates the dialect tag
    and the connection keys it requires, then connects. Statements are built
    with :meth:`select`, :meth:`insert`, :meth:`update` and :meth:`delete`;
    DDL goes through :meth:`schema`.
    """

    def __init__(
        self,
        driver: str,
        config: Mapping[str, Any] | ConnectionConfig,
        *,
        adapter: DatabaseAdapter | None = None,
    ) -> None:
        self._dialect: Dialect = get_dialect(driver)
        if isinstance(config, ConnectionConfig):
            if config.driver is not self._dialect.name:
                raise ValueError(
                    f"ConnectionConfig is for {config.driver.value}, not {self._dialect.name.value}"
                )
            self.connection_config = config
        else:
            # Statements commit on their own unless a transaction is open.
            settings = {"autocommit": True, **config}
            self.connection_config = ConnectionConfig.from_mapping(self._dialect.name, settings)
        self.logger = get_logger("database")
        self._queue: List[QueryBuilder] = []
        self.adapter = adapter or adapter_for(self._dialect.name)
        self._connect()

    @classmethod
    def from_dsn(cls, dsn: str, **kwargs: Any) -> "Database":
        return cls._from_config(ConnectionConfig.from_dsn(dsn, **kwargs), kwargs)

    @classmethod
    def from_env(cls, env_var: str, **kwargs: Any) -> "Database":
        return cls._from_config(ConnectionConfig.from_env(env_var, **kwargs), kwargs)

    @classmethod
    def _from_config(cls, config: ConnectionConfig, overrides: Mapping[str, Any]) -> "Database":
        dsn_query = config.dsn.query if config.dsn else {}
        if "autocommit" not in overrides and "autocommit" not in dsn_query:
            config.autocommit = True
        return cls(config.driver, config)

    def _connect(self) -> None:
        try:
            self.adapter.connect(self.connection_config)
        except DatabaseError:
            raise
        except Exception as exc:
            raise ConnectionFailedError(
                f"Connection failed: {exc} ({self.connection_config.descriptive_label()})"
            ) from exc

    # ------------------------------------------------------------------ #
    # Properties
    # ------------------------------------------------------------------ #
    @property
    def dialect(self) -> Dialect:
        return self._dialect

    @property
    def driver(self) -> str:
        return self._dialect.name.value

    @property
    def placeholder(self) -> str:
        """Placeholder to use in ``where()`` conditions for this dialect."""
        return self._dialect.parameter_placeholder()

    # ------------------------------------------------------------------ #
    # Raw execution
    # ------------------------------------------------------------------ #
    def query(self, sql: str, params: Sequence[Any] = ()) -> Any:
        """
        Prepare and execute ``sql`` with positional ``params``.

        Driver failures surface as ``QueryError`` carrying the SQL text and
        parameters.
        """
        values = list(params)
        try:
            return self.adapter.execute(sql, values)
        except Exception as exc:
            self.logger.error(
                "Query failed: %s",
                exc,
                extra={"sql": sql, "params": redact_params(values)},
            )
            raise QueryError(str(exc), sql, values) from exc

    def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        cursor = self.query(sql, params)
        try:
            return [self._row_to_dict(cursor, row) for row in cursor.fetchall()]
        except Exception as exc:
            raise QueryError(str(exc), sql, list(params)) from exc

    def run(self, builder: QueryBuilder) -> list[dict[str, Any]] | bool:
        """
        Compile ``builder`` and execute it: rows for SELECT, ``True`` otherwise.
        """
        sql, params = builder.to_sql()
        if builder.kind is StatementKind.SELECT:
            return self.fetch_all(sql, params)
        self.query(sql, params)
        return True

    # ------------------------------------------------------------------ #
    # Builders
    # ------------------------------------------------------------------ #
    def select(self, table: str) -> QueryBuilder:
        return QueryBuilder(table, StatementKind.SELECT, self._dialect, database=self)

    def insert(self, table: str) -> QueryBuilder:
        return QueryBuilder(table, StatementKind.INSERT, self._dialect, database=self)

    def update(self, table: str) -> QueryBuilder:
        return QueryBuilder(table, StatementKind.UPDATE, self._dialect, database=self)

    def delete(self, table: str) -> QueryBuilder:
        return QueryBuilder(table, StatementKind.DELETE, self._dialect, database=self)

    def schema(self) -> SchemaBuilder:
        return SchemaBuilder(self._dialect, database=self)

    # ------------------------------------------------------------------ #
    # Transactions
    # ------------------------------------------------------------------ #
    def begin(self) -> None:
        self.adapter.begin()

    def commit(self) -> None:
        self.adapter.commit()

    def rollback(self) -> None:
        self.adapter.rollback()

    @contextmanager
    def transaction(self) -> Generator["Database", None, None]:
        self.begin()
        try:
            yield self
        except Exception:
            self.rollback()
            raise
        else:
            self.commit()

    # ------------------------------------------------------------------ #
    # Statement queue
    # ------------------------------------------------------------------ #
    def add_to_queue(self, builder: QueryBuilder) -> None:
        if any(queued is builder for queued in self._queue):
            raise ValueError(f"{builder!r} is already queued.")
        self._queue.append(builder)

    @property
    def queued(self) -> tuple[QueryBuilder, ...]:
        return tuple(self._queue)

    def clear_queue(self) -> None:
        self._queue.clear()

    def execute_queue(self) -> list[list[dict[str, Any]] | bool]:
        """
        Run queued builders in insertion order inside one transaction.

        The first failure rolls back the whole batch and is re-raised; the
        queue is emptied either way.
        """
        pending, self._queue = self._queue, []
        if not pending:
            return []
        self.logger.info("Executing %d queued statement(s)", len(pending))
        results: list[list[dict[str, Any]] | bool] = []
        with self.transaction():
            for builder in pending:
                results.append(self.run(builder))
        return results

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #
    def close(self) -> None:
        self.adapter.close()

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @staticmethod
    def _row_to_dict(cursor, row) -> dict[str, Any]:
        if hasattr(row, "keys"):
            return dict(row)
        if getattr(cursor, "description", None):
            columns = [col[0] for col in cursor.description]
            return {col: row[idx] for idx, col in enumerate(columns)}
        raise ValueError("Unable to map database row to dictionary.")
