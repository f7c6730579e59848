"""
Schema builder converting table definitions into DDL statements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ..dialects.base import Dialect
from ..errors import UnboundBuilderError
from ..utils import get_logger
from .table import TableSchema

if TYPE_CHECKING:
    from ..database import Database


TableDefiner = Callable[[TableSchema], object]


class SchemaBuilder:
    """
    Produces dialect-specific DDL and, when bound to a database, runs it.
    """

    def __init__(self, dialect: Dialect, database: "Database | None" = None) -> None:
        self.dialect = dialect
        self.database = database
        self.logger = get_logger("schema.builder")

    def build(self, table: str, definer: TableDefiner) -> str:
        """
        Return the ``CREATE TABLE`` statement for the columns ``definer`` adds.

        DDL carries no bound parameters; only SQL text is returned.
        """
        schema = TableSchema(table, self.dialect)
        definer(schema)
        if not schema.columns:
            raise ValueError(f"Table '{table}' must define at least one column.")
        body = ",\n".join(schema.columns + schema.constraints)
        return f"CREATE TABLE {table} (\n{body}\n){self.dialect.table_options_syntax()}"

    def create_table(self, table: str, definer: TableDefiner) -> "SchemaBuilder":
        sql = self.build(table, definer)
        self.logger.info("Creating table %s", table)
        self._require_database().query(sql)
        return self

    def drop_table_sql(self, table: str) -> str:
        self.logger.warning(
            "DROP TABLE generated for %s; the table and its data will be removed.", table
        )
        return f"DROP TABLE IF EXISTS {table}"

    def drop_table(self, table: str) -> "SchemaBuilder":
        self._require_database().query(self.drop_table_sql(table))
        return self

    def has_table(self, table: str) -> bool:
        rows = self._require_database().fetch_all(self.dialect.table_exists_sql(), [table])
        return bool(rows)

    def _require_database(self) -> "Database":
        if self.database is None:
            raise UnboundBuilderError(
                "SchemaBuilder is not bound to a Database; use Database.schema() to execute DDL."
            )
        return self.database
