"""
=====================================
SQL to Python type mapping for codegen.
=====================================

Maps catalog data type names from MySQL and PostgreSQL to the Python types
their DB-API drivers return. Nullable columns are annotated Optional.

Example:
    >>> from catalog.models import Column
    >>> from codegen.types import python_type
    >>>
    >>> python_type(Column('created', 1, 'datetime', nullable=True)).annotation
    'Optional[datetime]'
"""

from dataclasses import dataclass
from typing import Optional

from catalog.models import Column


@dataclass(frozen=True)
class PythonType:
    """A Python annotation and where its name is imported from.

    Attributes:
        name: Type name as written in an annotation
        module: Module the name is imported from; None for builtins
        nullable: Wrap the annotation in Optional
    """

    name: str
    module: Optional[str] = None
    nullable: bool = False

    @property
    def annotation(self) -> str:
        if self.nullable:
            return f"Optional[{self.name}]"
        return self.name

    @property
    def imports(self):
        """(module, name) pairs the annotation needs."""
        needed = []
        if self.module:
            needed.append((self.module, self.name))
        if self.nullable:
            needed.append(('typing', 'Optional'))
        return needed


_INT = ('int', None)
_FLOAT = ('float', None)
_DECIMAL = ('Decimal', 'decimal')
_STR = ('str', None)
_BYTES = ('bytes', None)
_BOOL = ('bool', None)
_DATETIME = ('datetime', 'datetime')
_DATE = ('date', 'datetime')
_TIME = ('time', 'datetime')
_TIMEDELTA = ('timedelta', 'datetime')
_UUID = ('UUID', 'uuid')
_LIST = ('list', None)
_ANY = ('Any', 'typing')

TYPE_MAP = {
    # Integers
    'int': _INT, 'integer': _INT, 'tinyint': _INT, 'smallint': _INT,
    'mediumint': _INT, 'bigint': _INT, 'serial': _INT, 'smallserial': _INT,
    'bigserial': _INT, 'year': _INT, 'bit': _INT,
    # Floating point and fixed point
    'float': _FLOAT, 'double': _FLOAT, 'double_precision': _FLOAT, 'real': _FLOAT,
    'decimal': _DECIMAL, 'numeric': _DECIMAL, 'money': _DECIMAL,
    # Character data
    'char': _STR, 'varchar': _STR, 'nchar': _STR, 'nvarchar': _STR,
    'text': _STR, 'tinytext': _STR, 'mediumtext': _STR, 'longtext': _STR,
    'string': _STR, 'unicode': _STR, 'unicode_text': _STR, 'citext': _STR,
    'enum': _STR, 'set': _STR, 'inet': _STR, 'cidr': _STR, 'macaddr': _STR,
    'xml': _STR, 'tsvector': _STR,
    # Binary data
    'binary': _BYTES, 'varbinary': _BYTES, 'blob': _BYTES, 'tinyblob': _BYTES,
    'mediumblob': _BYTES, 'longblob': _BYTES, 'bytea': _BYTES,
    'large_binary': _BYTES,
    # Booleans
    'boolean': _BOOL, 'bool': _BOOL,
    # Dates and times
    'datetime': _DATETIME, 'timestamp': _DATETIME, 'date': _DATE,
    'time': _TIME, 'interval': _TIMEDELTA,
    # Structured
    'json': _ANY, 'jsonb': _ANY, 'uuid': _UUID, 'array': _LIST,
}


def python_type(column: Column) -> PythonType:
    """
    Get the Python type for a column.

    Args:
        column: Catalog column

    Returns:
        PythonType; unknown data types map to typing.Any
    """
    name, module = TYPE_MAP.get(column.data_type.lower(), _ANY)
    # Optional[Any] adds nothing
    nullable = column.nullable and name != 'Any'
    return PythonType(name=name, module=module, nullable=nullable)
