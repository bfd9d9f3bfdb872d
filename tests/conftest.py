"""
Shared pytest configuration and fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path to enable importing project modules
# This allows tests to import from 'sql', 'catalog', 'codegen', etc. without installation
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests - isolated function-level tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interactions")
    config.addinivalue_line("markers", "smoke: Smoke tests - basic functionality checks")
    config.addinivalue_line("markers", "edge_case: Edge case tests - boundary conditions")
    config.addinivalue_line("markers", "e2e: End-to-end tests - complete workflow tests")


@pytest.fixture
def abc_table():
    """
    Catalog table with an autoincrement primary key and mixed column types.
    """
    from catalog.models import Column, Table

    return Table(
        name='abc',
        schema='test',
        columns=[
            Column('id', 1, 'int', nullable=False, primary_key=True, autoincrement=True),
            Column('code', 2, 'char', nullable=False, max_length=12),
            Column('description', 3, 'varchar', nullable=False, max_length=20),
            Column('tiny', 4, 'tinyint', nullable=True),
            Column('cost', 5, 'decimal', nullable=True, numeric_precision=10, numeric_scale=4),
            Column('created', 6, 'datetime', nullable=True),
        ],
        primary_key=['id'],
    )


@pytest.fixture
def jkl_table():
    """
    Catalog table with a two-column primary key and no autoincrement.
    """
    from catalog.models import Column, Table

    return Table(
        name='jkl',
        schema='test',
        columns=[
            Column('id', 1, 'int', nullable=False, primary_key=True),
            Column('fid', 2, 'int', nullable=False, primary_key=True),
            Column('txt', 3, 'text', nullable=True),
            Column('bin', 4, 'blob', nullable=True),
        ],
        primary_key=['id', 'fid'],
    )


@pytest.fixture
def ghi_table():
    """
    Catalog table without a primary key.
    """
    from catalog.models import Column, Table

    return Table(
        name='ghi',
        schema='test',
        columns=[
            Column('tiny_stuff', 1, 'tinyblob', nullable=True),
            Column('stuff', 2, 'blob', nullable=True),
        ],
    )
