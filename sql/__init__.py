"""
=================================================
SQL statement templates for single-table access.
=================================================

This package generates the basic CRUD statements for a single table from a
TableSQL descriptor. All functions are pure and return parameterized SQL
using positional '?' placeholders.

The package follows a clear organization:
    - table_sql.py: TableSQL statement descriptor
    - query_builder.py: SELECT builders and the WHERE comment fragment
    - dml.py: INSERT/UPDATE/DELETE builders
    - render.py: Builder registry and stream writer

Architecture:
    - All builders end with '_builder' suffix (e.g., select_builder, insert_builder)
    - Builders never call each other; they share only TableSQL and helpers
    - Incomplete descriptors produce an empty string, not an exception

Example:
    >>> from sql import TableSQL, select_builder, update_builder
    >>>
    >>> tbl = TableSQL(table='foo', columns=['bar', 'biz'], where_columns=['id'])
    >>> select_builder(tbl)
    'SELECT bar, biz FROM foo WHERE id = ?'
    >>> update_builder(tbl)
    'UPDATE foo SET bar = ?, biz = ? WHERE id = ?'
"""

__version__ = "1.0.0"
__all__ = [
    'TableSQL',
    # SELECT builders
    'select_builder', 'select_mixed_builder', 'where_comment_builder',
    # DML builders
    'insert_builder', 'update_builder', 'delete_builder',
    # Registry
    'STATEMENT_BUILDERS', 'render_statement', 'write_statement',
    'StatementWriteError', 'UnknownStatementError'
]

from .dml import delete_builder, insert_builder, update_builder
from .query_builder import select_builder, select_mixed_builder, where_comment_builder
from .render import (
    STATEMENT_BUILDERS,
    StatementWriteError,
    UnknownStatementError,
    render_statement,
    write_statement,
)
from .table_sql import TableSQL
