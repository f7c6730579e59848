"""
Schema definition and DDL utilities.
"""

from .builder import SchemaBuilder
from .table import ColumnDefinition, TableSchema, UniqueConstraint

__all__ = ["SchemaBuilder", "TableSchema", "ColumnDefinition", "UniqueConstraint"]
