"""
===========================================
Data Manipulation Language (DML) Utilities.
===========================================

This module provides the INSERT, UPDATE, and DELETE builders for a single
table. Like the SELECT builders they take a TableSQL, use positional '?'
placeholders, and return an empty string when the descriptor cannot
produce a statement.

Functions:
- insert_builder: INSERT INTO t (a, b) VALUES (?, ?)
- update_builder: UPDATE t SET a = ?, b = ? WHERE id = ?
- delete_builder: DELETE FROM t WHERE id = ?

Usage:
    from sql.dml import delete_builder, insert_builder, update_builder
    from sql.table_sql import TableSQL

    customers = TableSQL(
        table='customers',
        columns=['name', 'email'],
        where_columns=['id']
    )
    insert_sql = insert_builder(customers)
    update_sql = update_builder(customers)
    delete_sql = delete_builder(customers)
"""

from sql.query_builder import PLACEHOLDER, column_list, where_and_clause
from sql.table_sql import TableSQL


def insert_builder(table_sql: TableSQL) -> str:
    """
    Generate an INSERT statement with one placeholder per column.

    WHERE columns are ignored; INSERT has no WHERE clause.

    Args:
        table_sql: Descriptor with table and columns

    Returns:
        SQL INSERT statement, or an empty string if the table or columns
        are missing
    """
    if not table_sql.table or not table_sql.columns:
        return ""

    placeholders = ", ".join([PLACEHOLDER] * len(table_sql.columns))
    return (
        f"INSERT INTO {table_sql.table} ({column_list(table_sql.columns)}) "
        f"VALUES ({placeholders})"
    )


def update_builder(table_sql: TableSQL) -> str:
    """
    Generate an UPDATE statement setting every column to a placeholder.

    Args:
        table_sql: Descriptor with table, columns and optional where_columns

    Returns:
        SQL UPDATE statement, or an empty string if the table or columns
        are missing
    """
    if not table_sql.table or not table_sql.columns:
        return ""

    set_clause = ", ".join([f"{col} = {PLACEHOLDER}" for col in table_sql.columns])
    sql = f"UPDATE {table_sql.table} SET {set_clause}"
    return sql + where_and_clause(table_sql.where_columns)


def delete_builder(table_sql: TableSQL) -> str:
    """
    Generate a DELETE statement.

    Only the table is required. Without WHERE columns the statement
    deletes every row, which is what the descriptor asks for.

    Args:
        table_sql: Descriptor with table and optional where_columns

    Returns:
        SQL DELETE statement, or an empty string if the table is missing
    """
    if not table_sql.table:
        return ""

    return f"DELETE FROM {table_sql.table}" + where_and_clause(table_sql.where_columns)
