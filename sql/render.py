"""
=========================================
Statement registry and output sink helper.
=========================================

Maps statement kinds to their builders so callers can pick a statement by
name, and writes generated statements to a text stream.

The registry is built once at import time and is read-only afterwards.

Example:
    >>> import io
    >>> from sql.render import render_statement, write_statement
    >>> from sql.table_sql import TableSQL
    >>>
    >>> tbl = TableSQL(table='foo', columns=['a', 'b'])
    >>> render_statement('insert', tbl)
    'INSERT INTO foo (a, b) VALUES (?, ?)'
    >>> buf = io.StringIO()
    >>> write_statement(buf, 'insert', tbl)
    36
"""

import logging
from types import MappingProxyType
from typing import Callable, Mapping, TextIO

from sql.dml import delete_builder, insert_builder, update_builder
from sql.query_builder import select_builder, select_mixed_builder, where_comment_builder
from sql.table_sql import TableSQL

logger = logging.getLogger(__name__)


class UnknownStatementError(KeyError):
    """Exception raised when a statement kind has no registered builder."""
    pass


class StatementWriteError(OSError):
    """Exception raised when generated SQL cannot be written to its sink."""
    pass


STATEMENT_BUILDERS: Mapping[str, Callable[[TableSQL], str]] = MappingProxyType({
    'select': select_builder,
    'select_mixed': select_mixed_builder,
    'insert': insert_builder,
    'update': update_builder,
    'delete': delete_builder,
    'where_comment': where_comment_builder,
})


def render_statement(kind: str, table_sql: TableSQL) -> str:
    """
    Generate a statement of the given kind.

    Args:
        kind: One of the STATEMENT_BUILDERS keys
        table_sql: Statement descriptor

    Returns:
        Statement text, empty if the descriptor is incomplete

    Raises:
        UnknownStatementError: If kind is not registered
    """
    try:
        builder = STATEMENT_BUILDERS[kind]
    except KeyError:
        raise UnknownStatementError(kind) from None
    return builder(table_sql)


def write_statement(stream: TextIO, kind: str, table_sql: TableSQL) -> int:
    """
    Generate a statement and write it to a text stream.

    The statement is fully generated before anything is written, so a
    failure never comes from a half-built statement.

    Args:
        stream: Writable text stream
        kind: One of the STATEMENT_BUILDERS keys
        table_sql: Statement descriptor

    Returns:
        Number of characters written (0 for incomplete descriptors)

    Raises:
        UnknownStatementError: If kind is not registered
        StatementWriteError: If the stream rejects the write
    """
    sql = render_statement(kind, table_sql)
    if not sql:
        return 0

    try:
        written = stream.write(sql)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to write {kind} statement for {table_sql.table}: {e}")
        raise StatementWriteError(f"Failed to write {kind} statement for {table_sql.table}: {e}") from e

    return len(sql) if written is None else written
