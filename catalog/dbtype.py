"""
Supported database types.

Example:
    >>> from catalog.dbtype import DBType, parse_db_type
    >>> parse_db_type('MySQL') is DBType.MYSQL
    True
"""

from enum import Enum


class UnsupportedDBError(Exception):
    """Exception raised when a database type name is not supported."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"{value}: unsupported database")

    def __eq__(self, other):
        return isinstance(other, UnsupportedDBError) and other.value == self.value

    def __hash__(self):
        return hash(self.value)


class DBType(Enum):
    """Database types the catalog reader can introspect."""

    MYSQL = 'mysql'
    POSTGRES = 'postgres'

    @property
    def drivername(self) -> str:
        """SQLAlchemy driver name for URL.create()."""
        return _DRIVERS[self]

    @property
    def default_port(self) -> int:
        """Port used when none is configured."""
        return _DEFAULT_PORTS[self]

    @property
    def display_name(self) -> str:
        """Name used in generated file headers and log messages."""
        return _DISPLAY_NAMES[self]

    @property
    def default_placeholder(self) -> str:
        """DB-API paramstyle placeholder of the default driver."""
        return '%s'


_DRIVERS = {
    DBType.MYSQL: 'mysql+mysqlconnector',
    DBType.POSTGRES: 'postgresql+psycopg2',
}

_DEFAULT_PORTS = {
    DBType.MYSQL: 3306,
    DBType.POSTGRES: 5432,
}

_DISPLAY_NAMES = {
    DBType.MYSQL: 'MySQL',
    DBType.POSTGRES: 'PostgreSQL',
}

_ALIASES = {
    'mysql': DBType.MYSQL,
    'postgres': DBType.POSTGRES,
    'postgresql': DBType.POSTGRES,
}


def parse_db_type(value: str) -> DBType:
    """
    Parse a database type name, ignoring case.

    Args:
        value: Name such as 'mysql', 'MySQL', 'postgres' or 'postgresql'

    Returns:
        Matching DBType

    Raises:
        UnsupportedDBError: If the name is not a supported database
    """
    try:
        return _ALIASES[value.strip().lower()]
    except (KeyError, AttributeError):
        raise UnsupportedDBError(value) from None
