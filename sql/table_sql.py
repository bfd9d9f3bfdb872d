"""
==================================================
Statement descriptor for single-table SQL builders.
==================================================

TableSQL describes the basic components of a SQL statement for a single
table: the table name, the columns that are selected or written, and the
WHERE clause as three positionally aligned sequences (columns, comparison
operators, and the connectives between adjacent predicates).

Every builder in sql.query_builder and sql.dml takes a TableSQL and
returns statement text. A TableSQL with missing pieces is valid input:
builders return an empty string when they cannot produce a statement.

Example:
    >>> from sql.table_sql import TableSQL
    >>>
    >>> by_id = TableSQL(table='customers', columns=['id', 'name'], where_columns=['id'])
    >>>
    >>> # Range over the primary key: id > ? AND id < ?
    >>> window = TableSQL.range('customers', ['id', 'name'], ['id'])
"""

from dataclasses import dataclass, field
from typing import Sequence, Tuple


@dataclass(frozen=True)
class TableSQL:
    """Components of a SQL statement for a single table.

    Attributes:
        table: Table the statement operates on; empty means no statement
        columns: Columns to SELECT, INSERT, or SET, in order
        where_columns: WHERE clause column names, in order
        where_operators: Comparison operator for the column at the same index
        where_conditions: Connective between each adjacent pair of predicates
    """

    table: str = ""
    columns: Tuple[str, ...] = field(default_factory=tuple)
    where_columns: Tuple[str, ...] = field(default_factory=tuple)
    where_operators: Tuple[str, ...] = field(default_factory=tuple)
    where_conditions: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence from callers but store tuples
        for name in ('columns', 'where_columns', 'where_operators', 'where_conditions'):
            value = getattr(self, name)
            if value is None:
                value = ()
            object.__setattr__(self, name, tuple(value))

    @classmethod
    def range(
        cls,
        table: str,
        columns: Sequence[str],
        key_columns: Sequence[str],
        inclusive: bool = False
    ) -> "TableSQL":
        """
        Build a descriptor selecting rows between a lower and an upper bound.

        Each key column contributes a lower-bound and an upper-bound predicate,
        all joined with AND.

        Args:
            table: Table name
            columns: Columns to select
            key_columns: Columns the range is applied to
            inclusive: Use >= and <= instead of > and <

        Returns:
            TableSQL for the mixed-operator builders
        """
        lower, upper = ('>=', '<=') if inclusive else ('>', '<')
        where_columns = []
        where_operators = []
        for col in key_columns:
            where_columns.extend([col, col])
            where_operators.extend([lower, upper])
        where_conditions = ['AND'] * max(len(where_columns) - 1, 0)
        return cls(
            table=table,
            columns=columns,
            where_columns=where_columns,
            where_operators=where_operators,
            where_conditions=where_conditions
        )

    def has_aligned_where(self) -> bool:
        """
        Check that the WHERE sequences line up for mixed-operator builders.

        Returns:
            True when there is at least one WHERE column, one operator per
            column, and one condition between each pair of columns
        """
        count = len(self.where_columns)
        if count == 0:
            return False
        if len(self.where_operators) != count:
            return False
        return len(self.where_conditions) == count - 1
