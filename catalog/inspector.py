"""
==============================================
Catalog reader for database table metadata.
==============================================

Scans a database's catalog (tables, views, columns, primary keys, indexes,
and foreign keys) into the value objects in catalog.models. SQLAlchemy's
runtime inspection API does the dialect-specific querying, so the same
reader serves MySQL's information_schema and PostgreSQL's system catalogs.

Prerequisites:
    - A database user allowed to read the catalog
    - SQLAlchemy plus the driver for the target RDBMS

Example:
    >>> from catalog.dbtype import DBType
    >>> from catalog.inspector import CatalogReader
    >>>
    >>> with CatalogReader(
    ...     db_type=DBType.MYSQL,
    ...     host='localhost',
    ...     port=3306,
    ...     user='codegen',
    ...     password='password',
    ...     database='inventory'
    ... ) as reader:
    ...     for table in reader.get_tables():
    ...         print(table.name, table.column_names)
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import Engine, inspect
from sqlalchemy.engine import Inspector
from sqlalchemy.exc import SQLAlchemyError

from catalog.dbtype import DBType
from catalog.models import BASE_TABLE, VIEW, Column, ForeignKey, Index, Table
from utils.database_utils import create_sqlalchemy_engine

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Exception raised when the database catalog cannot be read."""
    pass


def column_type_name(column_type: Any) -> str:
    """
    Get the lower-cased base type name of a SQLAlchemy column type.

    Args:
        column_type: TypeEngine instance from Inspector.get_columns()

    Returns:
        Type name without length or precision, e.g. 'varchar', 'bigint'
    """
    name = getattr(column_type, '__visit_name__', None) or type(column_type).__name__
    return str(name).lower()


class CatalogReader:
    """Reads table metadata from a database catalog.

    The engine is created on first use and shared by all reads until
    close() is called.

    Attributes:
        db_type: Database type
        host: Server hostname
        port: Server port; None uses the RDBMS default
        user: Database user
        password: Database password
        database: Database to introspect
        schema: Schema to introspect; None uses the connection default
    """

    def __init__(
        self,
        db_type: DBType,
        host: str,
        port: Optional[int],
        user: str,
        password: str,
        database: str,
        schema: Optional[str] = None
    ):
        self.db_type = db_type
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.database = database
        self.schema = schema

        self._engine: Optional[Engine] = None
        self._inspector: Optional[Inspector] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def _get_engine(self) -> Engine:
        """Get the SQLAlchemy engine for the target database."""
        if self._engine is None:
            self._engine = create_sqlalchemy_engine(
                self.db_type,
                host=self.host,
                port=self.port,
                user=self.user,
                password=self.password,
                database=self.database
            )
        return self._engine

    def _get_inspector(self) -> Inspector:
        """Get the inspector; it caches catalog reads for its lifetime."""
        if self._inspector is None:
            self._inspector = inspect(self._get_engine())
        return self._inspector

    def get_table_names(self) -> List[str]:
        """
        List the tables and views in the database.

        Returns:
            Base table names sorted by name, followed by view names sorted
            by name

        Raises:
            CatalogError: If the catalog cannot be read
        """
        try:
            inspector = self._get_inspector()
            tables = sorted(inspector.get_table_names(schema=self.schema))
            views = sorted(inspector.get_view_names(schema=self.schema))
        except SQLAlchemyError as e:
            logger.error(f"Error listing tables in {self.database}: {e}")
            raise CatalogError(f"Failed to list tables in {self.database}: {e}")

        logger.debug(f"Found {len(tables)} tables and {len(views)} views in {self.database}")
        return tables + views

    def get_table(self, name: str, table_type: Optional[str] = None) -> Table:
        """
        Read the metadata of a single table or view.

        Args:
            name: Table name
            table_type: 'BASE TABLE' or 'VIEW'; looked up when not given

        Returns:
            Table with columns, primary key, indexes and foreign keys

        Raises:
            CatalogError: If the catalog cannot be read
        """
        try:
            inspector = self._get_inspector()
            if table_type is None:
                views = inspector.get_view_names(schema=self.schema)
                table_type = VIEW if name in views else BASE_TABLE

            pk = inspector.get_pk_constraint(name, schema=self.schema) or {}
            primary_key = list(pk.get('constrained_columns') or [])

            columns = [
                self._to_column(position, info, primary_key)
                for position, info in enumerate(inspector.get_columns(name, schema=self.schema), start=1)
            ]

            indexes = []
            foreign_keys = []
            if table_type == BASE_TABLE:
                indexes = [
                    Index(
                        name=info.get('name'),
                        columns=[col for col in info.get('column_names', []) if col],
                        unique=bool(info.get('unique'))
                    )
                    for info in inspector.get_indexes(name, schema=self.schema)
                ]
                foreign_keys = [
                    ForeignKey(
                        name=info.get('name'),
                        columns=list(info.get('constrained_columns', [])),
                        referred_table=info.get('referred_table', ''),
                        referred_columns=list(info.get('referred_columns', []))
                    )
                    for info in inspector.get_foreign_keys(name, schema=self.schema)
                ]

            comment = self._table_comment(inspector, name)

        except SQLAlchemyError as e:
            logger.error(f"Error reading table {self.database}.{name}: {e}")
            raise CatalogError(f"Failed to read table {self.database}.{name}: {e}")

        return Table(
            name=name,
            schema=self.schema or self.database,
            columns=columns,
            table_type=table_type,
            comment=comment,
            primary_key=primary_key,
            indexes=indexes,
            foreign_keys=foreign_keys
        )

    def get_tables(self) -> List[Table]:
        """
        Read every table and view in the database.

        Returns:
            Tables followed by views, each group in name order

        Raises:
            CatalogError: If the catalog cannot be read
        """
        try:
            views = set(self._get_inspector().get_view_names(schema=self.schema))
        except SQLAlchemyError as e:
            logger.error(f"Error listing views in {self.database}: {e}")
            raise CatalogError(f"Failed to list views in {self.database}: {e}")

        tables = []
        for name in self.get_table_names():
            table_type = VIEW if name in views else BASE_TABLE
            tables.append(self.get_table(name, table_type=table_type))
            logger.debug(f"Read {table_type.lower()} {name}")

        logger.info(f"📋 Read {len(tables)} tables from {self.database}")
        return tables

    def _to_column(self, position: int, info: Dict[str, Any], primary_key: List[str]) -> Column:
        """Convert an Inspector.get_columns() entry to a Column."""
        column_type = info['type']
        default = info.get('default')
        return Column(
            name=info['name'],
            ordinal_position=position,
            data_type=column_type_name(column_type),
            nullable=bool(info.get('nullable', True)),
            default=default,
            max_length=getattr(column_type, 'length', None),
            numeric_precision=getattr(column_type, 'precision', None),
            numeric_scale=getattr(column_type, 'scale', None),
            primary_key=info['name'] in primary_key,
            autoincrement=info.get('autoincrement') is True,
            comment=info.get('comment')
        )

    def _table_comment(self, inspector: Inspector, name: str) -> Optional[str]:
        """Read the table comment; dialects without comments give None."""
        try:
            return (inspector.get_table_comment(name, schema=self.schema) or {}).get('text')
        except NotImplementedError:
            return None

    def close(self) -> None:
        """Dispose of the engine and forget cached catalog reads."""
        self._inspector = None
        if self._engine:
            self._engine.dispose()
            self._engine = None
