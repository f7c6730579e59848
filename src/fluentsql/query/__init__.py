"""
Statement construction APIs.
"""

from .builder import QueryBuilder
from .compiler import ClauseSet, SQLCompiler, StatementKind

__all__ = ["QueryBuilder", "StatementKind", "SQLCompiler", "ClauseSet"]
