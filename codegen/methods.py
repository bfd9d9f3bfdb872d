"""
=========================================
CRUD method emission for generated classes.
=========================================

Builds the SQL constants and data-access methods that are added to each
generated dataclass. All SQL comes from the single-table builders in the
sql package; a builder returning an empty string means the table cannot
support that operation, and the method is left out.

Generated methods take a DB-API cursor:
- select: Reload the instance by primary key
- insert: Insert the instance, skipping autoincrement key columns
- update: Update non-key columns by primary key
- delete: Delete by primary key
- select_in_range_exclusive / select_in_range_inclusive: Classmethods
  returning instances whose primary key lies within the given bounds

Example:
    >>> from catalog.models import Column, Table
    >>> from codegen.methods import method_source
    >>>
    >>> table = Table('abc', columns=[Column('id', 1, 'int', nullable=False)], primary_key=['id'])
    >>> print(method_source(table))
"""

from typing import Dict, List, Sequence

from catalog.models import Table
from codegen.naming import field_names
from sql.dml import delete_builder, insert_builder, update_builder
from sql.query_builder import (
    PLACEHOLDER,
    select_builder,
    select_mixed_builder,
    where_comment_builder,
)
from sql.table_sql import TableSQL

INDENT = '    '


def _sql_constant(name: str, sql: str, placeholder: str) -> str:
    if placeholder != PLACEHOLDER:
        sql = sql.replace(PLACEHOLDER, placeholder)
    return f"{INDENT}{name} = {sql!r}"


def _attributes(fields: Dict[str, str], columns: Sequence[str], owner: str = 'self') -> str:
    """Render a tuple of attributes: (self.a,) or (self.a, self.b)."""
    attrs = [f"{owner}.{fields[col]}" for col in columns]
    if len(attrs) == 1:
        return f"({attrs[0]},)"
    return f"({', '.join(attrs)})"


def _key_names(table: Table) -> List[str]:
    return [col.name for col in table.primary_key_columns]


def _method(signature: str, doc: str, body: List[str], decorator: str = None) -> str:
    lines = []
    if decorator:
        lines.append(f"{INDENT}{decorator}")
    lines.append(f"{INDENT}def {signature}:")
    doc_lines = doc.split('\n')
    if len(doc_lines) == 1:
        lines.append(f'{INDENT * 2}"""{doc}"""')
    else:
        lines.append(f'{INDENT * 2}"""')
        lines.extend(f"{INDENT * 2}{line}".rstrip() for line in doc_lines)
        lines.append(f'{INDENT * 2}"""')
    lines.extend(f"{INDENT * 2}{line}" for line in body)
    return '\n'.join(lines)


def _select(table: Table, fields: Dict[str, str], placeholder: str):
    sql = select_builder(table.table_sql())
    if not sql:
        return None, None
    method = _method(
        'select(self, cursor)',
        'Reload this row by primary key; returns False if it no longer exists.',
        [
            f"cursor.execute(self.SELECT_SQL, {_attributes(fields, _key_names(table))})",
            "row = cursor.fetchone()",
            "if row is None:",
            f"{INDENT}return False",
            f"{_attributes(fields, table.column_names)} = row",
            "return True",
        ]
    )
    return _sql_constant('SELECT_SQL', sql, placeholder), method


def _insert(table: Table, fields: Dict[str, str], placeholder: str):
    columns = [
        col.name for col in table.columns
        if not (col.primary_key and col.autoincrement)
    ]
    sql = insert_builder(TableSQL(table=table.name, columns=columns))
    if not sql:
        return None, None
    method = _method(
        'insert(self, cursor)',
        'Insert this row and return the id the database generated, if any.',
        [
            f"cursor.execute(self.INSERT_SQL, {_attributes(fields, columns)})",
            "return cursor.lastrowid",
        ]
    )
    return _sql_constant('INSERT_SQL', sql, placeholder), method


def _update(table: Table, fields: Dict[str, str], placeholder: str):
    columns = [col.name for col in table.non_key_columns]
    sql = update_builder(TableSQL(
        table=table.name,
        columns=columns,
        where_columns=table.primary_key
    ))
    if not sql:
        return None, None
    method = _method(
        'update(self, cursor)',
        'Update this row by primary key and return the number of rows changed.',
        [
            f"cursor.execute(self.UPDATE_SQL, {_attributes(fields, columns + _key_names(table))})",
            "return cursor.rowcount",
        ]
    )
    return _sql_constant('UPDATE_SQL', sql, placeholder), method


def _delete(table: Table, fields: Dict[str, str], placeholder: str):
    sql = delete_builder(TableSQL(table=table.name, where_columns=table.primary_key))
    if not sql:
        return None, None
    method = _method(
        'delete(self, cursor)',
        'Delete this row by primary key and return the number of rows deleted.',
        [
            f"cursor.execute(self.DELETE_SQL, {_attributes(fields, _key_names(table))})",
            "return cursor.rowcount",
        ]
    )
    return _sql_constant('DELETE_SQL', sql, placeholder), method


def _select_in_range(table: Table, fields: Dict[str, str], placeholder: str, inclusive: bool):
    kind = 'inclusive' if inclusive else 'exclusive'
    range_sql = TableSQL.range(table.name, table.column_names, table.primary_key, inclusive=inclusive)
    sql = select_mixed_builder(range_sql)
    if not sql:
        return None, None
    constant = f"SELECT_IN_RANGE_{kind.upper()}_SQL"
    doc = (
        f"Select the rows whose primary key lies within a range, {kind} of the\n"
        f"boundaries. args holds the boundaries in the order of the WHERE clause:\n"
        f"\"{where_comment_builder(range_sql)}\"."
    )
    method = _method(
        f'select_in_range_{kind}(cls, cursor, *args)',
        doc,
        [
            f"cursor.execute(cls.{constant}, args)",
            "return [cls(*row) for row in cursor.fetchall()]",
        ],
        decorator='@classmethod'
    )
    return _sql_constant(constant, sql, placeholder), method


def method_source(table: Table, placeholder: str = PLACEHOLDER) -> str:
    """
    Build the SQL constants and CRUD methods for a table's dataclass.

    Views get nothing. Tables without a primary key only get insert, since
    every other statement needs a key to identify a row.

    Args:
        table: Catalog table
        placeholder: Positional placeholder of the target driver

    Returns:
        Class body source indented one level, or an empty string
    """
    if table.is_view:
        return ""

    fields = field_names(table.column_names)

    if table.primary_key:
        parts = [
            _select(table, fields, placeholder),
            _insert(table, fields, placeholder),
            _update(table, fields, placeholder),
            _delete(table, fields, placeholder),
            _select_in_range(table, fields, placeholder, inclusive=False),
            _select_in_range(table, fields, placeholder, inclusive=True),
        ]
    else:
        parts = [_insert(table, fields, placeholder)]

    constants = [constant for constant, _ in parts if constant]
    methods = [method for _, method in parts if method]
    if not constants:
        return ""
    return '\n'.join(constants) + '\n\n' + '\n\n'.join(methods)
