"""
=====================================
Database catalog introspection package.
=====================================

Reads table metadata from a database catalog into plain value objects
that the code generator consumes.

Modules:
    dbtype: Supported database types and name parsing
    models: Table, Column, Index and ForeignKey value objects
    inspector: CatalogReader, which scans a live catalog via SQLAlchemy

The reader is imported from catalog.inspector directly; it depends on
utils.database_utils, which in turn depends on catalog.dbtype.

Example:
    >>> from catalog import DBType, parse_db_type
    >>> from catalog.inspector import CatalogReader
"""

__all__ = [
    'DBType', 'UnsupportedDBError', 'parse_db_type',
    'Column', 'ForeignKey', 'Index', 'Table'
]

from .dbtype import DBType, UnsupportedDBError, parse_db_type
from .models import Column, ForeignKey, Index, Table
