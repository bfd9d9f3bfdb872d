"""
========================================
Catalog value objects for introspection.
========================================

Plain dataclasses holding what the catalog reader scans out of a
database's metadata: tables, their columns, indexes, and foreign keys.
They own no connections and can be built by hand in tests.

Classes:
    Column: A single table column
    Index: A secondary index
    ForeignKey: A foreign key constraint
    Table: A table or view with its columns and constraints
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from sql.table_sql import TableSQL

BASE_TABLE = 'BASE TABLE'
VIEW = 'VIEW'


@dataclass
class Column:
    """A column within a table.

    Attributes:
        name: Column name in the database's native case
        ordinal_position: 1-based position within the table
        data_type: Lower-cased base type name (e.g. 'varchar', 'bigint')
        nullable: True if the column accepts NULL
        default: Server default expression, if any
        max_length: Character length for string types
        numeric_precision: Precision for numeric types
        numeric_scale: Scale for numeric types
        primary_key: True if the column is part of the primary key
        autoincrement: True if the database generates the value
        comment: Column comment
    """

    name: str
    ordinal_position: int
    data_type: str
    nullable: bool = True
    default: Optional[Any] = None
    max_length: Optional[int] = None
    numeric_precision: Optional[int] = None
    numeric_scale: Optional[int] = None
    primary_key: bool = False
    autoincrement: bool = False
    comment: Optional[str] = None


@dataclass
class Index:
    """A table index."""

    name: str
    columns: List[str] = field(default_factory=list)
    unique: bool = False


@dataclass
class ForeignKey:
    """A foreign key constraint."""

    name: Optional[str]
    columns: List[str] = field(default_factory=list)
    referred_table: str = ""
    referred_columns: List[str] = field(default_factory=list)


@dataclass
class Table:
    """A table or view and everything needed to generate code for it.

    Attributes:
        name: Table name
        schema: Schema (or MySQL database) the table belongs to
        columns: Columns in ordinal order
        table_type: 'BASE TABLE' or 'VIEW'
        comment: Table comment
        primary_key: Primary key column names in key order
        indexes: Secondary indexes
        foreign_keys: Foreign key constraints
    """

    name: str
    schema: Optional[str] = None
    columns: List[Column] = field(default_factory=list)
    table_type: str = BASE_TABLE
    comment: Optional[str] = None
    primary_key: List[str] = field(default_factory=list)
    indexes: List[Index] = field(default_factory=list)
    foreign_keys: List[ForeignKey] = field(default_factory=list)

    @property
    def is_view(self) -> bool:
        return self.table_type == VIEW

    @property
    def column_names(self) -> List[str]:
        return [col.name for col in self.columns]

    @property
    def primary_key_columns(self) -> List[Column]:
        """Primary key columns in key order."""
        by_name = {col.name: col for col in self.columns}
        return [by_name[name] for name in self.primary_key if name in by_name]

    @property
    def non_key_columns(self) -> List[Column]:
        """Columns that are not part of the primary key, in ordinal order."""
        keys = set(self.primary_key)
        return [col for col in self.columns if col.name not in keys]

    def table_sql(self) -> TableSQL:
        """
        Describe this table for the AND-only builders.

        Returns:
            TableSQL selecting every column, keyed on the primary key
        """
        return TableSQL(
            table=self.name,
            columns=self.column_names,
            where_columns=self.primary_key
        )
