"""
============================
SQL Query Builder Utilities.
============================

This module provides the SELECT builders for a single table. All builders
follow the _builder naming convention and take a TableSQL descriptor.

Query Builders:
- select_builder: SELECT with an equality-only, AND-only WHERE clause
- select_mixed_builder: SELECT with per-predicate operators and connectives
- where_comment_builder: Human-readable WHERE fragment for generated docstrings

Builders never raise on incomplete input. When the descriptor lacks what a
statement needs, the result is an empty string.

Usage:
    from sql.query_builder import select_builder, select_mixed_builder
    from sql.table_sql import TableSQL

    # SELECT name, email FROM customers WHERE id = ?
    sql = select_builder(TableSQL(
        table='customers',
        columns=['name', 'email'],
        where_columns=['id']
    ))

    # SELECT name FROM customers WHERE id >= ? AND id < ?
    sql = select_mixed_builder(TableSQL(
        table='customers',
        columns=['name'],
        where_columns=['id', 'id'],
        where_operators=['>=', '<'],
        where_conditions=['AND']
    ))
"""

from typing import Sequence

from sql.table_sql import TableSQL

PLACEHOLDER = "?"


def column_list(columns: Sequence[str]) -> str:
    """Join column names with ', '."""
    return ", ".join(columns)


def where_and_clause(where_columns: Sequence[str]) -> str:
    """
    Build an equality-only WHERE clause joined with AND.

    Args:
        where_columns: Columns compared against a positional placeholder

    Returns:
        ' WHERE a = ? AND b = ?' with a leading space, or an empty string
        when there are no columns
    """
    if not where_columns:
        return ""
    predicates = [f"{col} = {PLACEHOLDER}" for col in where_columns]
    return " WHERE " + " AND ".join(predicates)


def select_builder(table_sql: TableSQL) -> str:
    """
    Build a SELECT for a single table where every predicate is col = ?.

    Args:
        table_sql: Descriptor with table, columns and optional where_columns

    Returns:
        SQL SELECT statement, or an empty string if the table or columns
        are missing
    """
    if not table_sql.table or not table_sql.columns:
        return ""

    sql = f"SELECT {column_list(table_sql.columns)} FROM {table_sql.table}"
    return sql + where_and_clause(table_sql.where_columns)


def select_mixed_builder(table_sql: TableSQL) -> str:
    """
    Build a SELECT whose WHERE predicates each have their own operator.

    The connective before predicate i is where_conditions[i - 1]. This is
    meant for range queries such as "id > ? AND id < ?"; there is no
    grouping or precedence handling.

    Args:
        table_sql: Descriptor with aligned where_columns, where_operators
            and where_conditions

    Returns:
        SQL SELECT statement, or an empty string if the table, columns or
        WHERE clause are missing or the WHERE sequences are misaligned
    """
    if not table_sql.table or not table_sql.columns:
        return ""
    if not table_sql.has_aligned_where():
        return ""

    sql = f"SELECT {column_list(table_sql.columns)} FROM {table_sql.table}"
    return sql + _mixed_where(table_sql, PLACEHOLDER)


def where_comment_builder(table_sql: TableSQL) -> str:
    """
    Build a WHERE fragment describing argument order for documentation.

    Placeholders are written as arg[i] so that the fragment can be pasted
    into the docstring of a function taking *args.

    Args:
        table_sql: Descriptor with aligned WHERE sequences; table and
            columns are ignored

    Returns:
        'WHERE id > arg[0] AND id < arg[1]', or an empty string if the
        WHERE sequences are missing or misaligned
    """
    if not table_sql.has_aligned_where():
        return ""
    return _mixed_where(table_sql, None).lstrip()


def _mixed_where(table_sql: TableSQL, placeholder) -> str:
    """Render ' WHERE ...' for aligned sequences; None gives arg[i] markers."""
    parts = []
    for i, col in enumerate(table_sql.where_columns):
        marker = placeholder if placeholder is not None else f"arg[{i}]"
        predicate = f"{col} {table_sql.where_operators[i]} {marker}"
        if i == 0:
            parts.append(f" WHERE {predicate}")
        else:
            parts.append(f" {table_sql.where_conditions[i - 1]} {predicate}")
    return "".join(parts)
