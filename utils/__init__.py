"""
==========================
Utility Functions Package.
==========================

Reusable utility functions for database connectivity shared by the catalog
reader and the command-line driver.

Modules:
    database_utils: Connection URLs, engines, and availability checks
"""

__version__ = "1.0.0"
__all__ = [
    'DatabaseConnectionError',
    'wait_for_database',
    'check_database_available',
    'get_connection_url',
    'create_sqlalchemy_engine',
    'verify_connection'
]

from .database_utils import (
    DatabaseConnectionError,
    check_database_available,
    create_sqlalchemy_engine,
    get_connection_url,
    verify_connection,
    wait_for_database,
)
