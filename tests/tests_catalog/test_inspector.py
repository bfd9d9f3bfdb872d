"""
==================================================
Comprehensive pytest suite for catalog/inspector.py
==================================================

Sections:
---------
1. Unit tests - Table and column conversion
2. Integration tests - Full catalog reads
3. Edge case tests - Views, comments, and errors
4. Smoke tests

Available markers:
------------------
unit, integration, edge_case, smoke

Mocks and helpers:
------------------
- FakeInspector: stands in for sqlalchemy.engine.Inspector, serving a
  small catalog held in dicts
- FakeEngine: records dispose()

How to Execute:
---------------
All tests:          pytest tests/tests_catalog/test_inspector.py -v
By category:        pytest tests/tests_catalog/test_inspector.py -m unit
"""

from unittest.mock import patch

import pytest
from sqlalchemy import types as sqltypes
from sqlalchemy.exc import OperationalError

from catalog.dbtype import DBType
from catalog.inspector import CatalogError, CatalogReader, column_type_name
from catalog.models import BASE_TABLE, VIEW

# ====================
# Mock Helper Classes
# ====================

class FakeEngine:
    """Mock SQLAlchemy engine."""
    def __init__(self):
        self.disposed = False

    def dispose(self):
        self.disposed = True


class FakeInspector:
    """Mock Inspector serving a fixed catalog."""

    def __init__(self, tables=None, views=None, columns=None, pks=None,
                 indexes=None, foreign_keys=None, comments=None, error=None):
        self.tables = tables or []
        self.views = views or []
        self.columns = columns or {}
        self.pks = pks or {}
        self.indexes = indexes or {}
        self.foreign_keys = foreign_keys or {}
        self.comments = comments
        self.error = error
        self.schemas = []

    def _check(self, schema):
        self.schemas.append(schema)
        if self.error:
            raise self.error

    def get_table_names(self, schema=None):
        self._check(schema)
        return list(self.tables)

    def get_view_names(self, schema=None):
        self._check(schema)
        return list(self.views)

    def get_pk_constraint(self, name, schema=None):
        self._check(schema)
        return {'constrained_columns': self.pks.get(name, []), 'name': None}

    def get_columns(self, name, schema=None):
        self._check(schema)
        return self.columns[name]

    def get_indexes(self, name, schema=None):
        self._check(schema)
        return self.indexes.get(name, [])

    def get_foreign_keys(self, name, schema=None):
        self._check(schema)
        return self.foreign_keys.get(name, [])

    def get_table_comment(self, name, schema=None):
        self._check(schema)
        if self.comments is None:
            raise NotImplementedError()
        return {'text': self.comments.get(name)}


def _col(name, type_, nullable=True, autoincrement='auto', comment=None, default=None):
    return {
        'name': name,
        'type': type_,
        'nullable': nullable,
        'default': default,
        'autoincrement': autoincrement,
        'comment': comment,
    }


@pytest.fixture
def fake_inspector():
    """Catalog with two tables, deliberately unsorted, and one view."""
    return FakeInspector(
        tables=['orders', 'abc'],
        views=['order_totals'],
        columns={
            'abc': [
                _col('id', sqltypes.INTEGER(), nullable=False, autoincrement=True),
                _col('description', sqltypes.VARCHAR(length=20), nullable=False, comment='free text'),
                _col('cost', sqltypes.NUMERIC(precision=10, scale=4)),
            ],
            'orders': [
                _col('id', sqltypes.BIGINT(), nullable=False, autoincrement=True),
                _col('abc_id', sqltypes.INTEGER(), nullable=False),
                _col('placed', sqltypes.DATETIME()),
            ],
            'order_totals': [
                _col('abc_id', sqltypes.INTEGER()),
                _col('total', sqltypes.NUMERIC(precision=12, scale=2)),
            ],
        },
        pks={'abc': ['id'], 'orders': ['id']},
        indexes={
            'orders': [{'name': 'ix_orders_placed', 'column_names': ['placed'], 'unique': False}],
        },
        foreign_keys={
            'orders': [{
                'name': 'fk_orders_abc',
                'constrained_columns': ['abc_id'],
                'referred_table': 'abc',
                'referred_columns': ['id'],
            }],
        },
        comments={'abc': 'Reference data', 'orders': None, 'order_totals': None},
    )


@pytest.fixture
def reader_factory():
    """
    Factory that creates a CatalogReader bound to a FakeInspector.

    Yields (make_reader, engine); the engine factory and inspect() are
    patched for the duration of the test.
    """
    engine = FakeEngine()
    with patch('catalog.inspector.create_sqlalchemy_engine', return_value=engine) as mock_engine:
        with patch('catalog.inspector.inspect') as mock_inspect:
            def make_reader(inspector, schema=None):
                mock_inspect.return_value = inspector
                return CatalogReader(
                    db_type=DBType.MYSQL,
                    host='localhost',
                    port=3306,
                    user='codegen',
                    password='secret',
                    database='test',
                    schema=schema
                )
            make_reader.create_engine = mock_engine
            yield make_reader, engine


# ===============
# 1. UNIT TESTS
# ===============

@pytest.mark.unit
@pytest.mark.parametrize("type_, expected", [
    (sqltypes.INTEGER(), 'integer'),
    (sqltypes.VARCHAR(length=20), 'varchar'),
    (sqltypes.NUMERIC(10, 2), 'numeric'),
    (sqltypes.DateTime(), 'datetime'),
    (sqltypes.Text(), 'text'),
])
def test_column_type_name(type_, expected):
    """
    Test SQLAlchemy types are reduced to their lower-case base name.
    """
    assert column_type_name(type_) == expected


@pytest.mark.unit
def test_get_table_reads_columns(reader_factory, fake_inspector):
    """
    Test column metadata, key flags and comments are carried over.
    """
    make_reader, _ = reader_factory
    reader = make_reader(fake_inspector)

    table = reader.get_table('abc')

    assert table.name == 'abc'
    assert table.schema == 'test'
    assert table.table_type == BASE_TABLE
    assert table.comment == 'Reference data'
    assert table.primary_key == ['id']
    assert table.column_names == ['id', 'description', 'cost']

    id_col, description, cost = table.columns
    assert (id_col.ordinal_position, id_col.data_type) == (1, 'integer')
    assert id_col.primary_key and id_col.autoincrement and not id_col.nullable
    assert description.max_length == 20
    assert description.comment == 'free text'
    assert not description.primary_key
    assert (cost.numeric_precision, cost.numeric_scale) == (10, 4)
    assert cost.nullable
    assert not cost.autoincrement


@pytest.mark.unit
def test_get_table_reads_constraints(reader_factory, fake_inspector):
    """
    Test indexes and foreign keys are read for base tables.
    """
    make_reader, _ = reader_factory
    table = make_reader(fake_inspector).get_table('orders')

    assert [(ix.name, ix.columns, ix.unique) for ix in table.indexes] == [
        ('ix_orders_placed', ['placed'], False)
    ]
    fk = table.foreign_keys[0]
    assert (fk.name, fk.columns, fk.referred_table, fk.referred_columns) == (
        'fk_orders_abc', ['abc_id'], 'abc', ['id']
    )


# =====================
# 2. INTEGRATION TESTS
# =====================

@pytest.mark.integration
def test_get_table_names_sorts_tables_then_views(reader_factory, fake_inspector):
    """
    Test tables come first in name order, then views in name order.
    """
    make_reader, _ = reader_factory

    assert make_reader(fake_inspector).get_table_names() == ['abc', 'orders', 'order_totals']


@pytest.mark.integration
def test_get_tables(reader_factory, fake_inspector):
    """
    Test every table and view is read with its type.
    """
    make_reader, _ = reader_factory

    tables = make_reader(fake_inspector).get_tables()

    assert [(t.name, t.table_type) for t in tables] == [
        ('abc', BASE_TABLE), ('orders', BASE_TABLE), ('order_totals', VIEW)
    ]
    assert tables[2].is_view
    assert tables[2].indexes == []
    assert tables[2].foreign_keys == []


@pytest.mark.integration
def test_engine_created_once_and_disposed(reader_factory, fake_inspector):
    """
    Test the engine is shared across reads and disposed on close.
    """
    make_reader, engine = reader_factory

    with make_reader(fake_inspector) as reader:
        reader.get_tables()
        reader.get_table('abc')

    assert make_reader.create_engine.call_count == 1
    assert engine.disposed


@pytest.mark.integration
def test_schema_is_passed_to_inspector(reader_factory, fake_inspector):
    """
    Test an explicit schema is used for every catalog call.
    """
    make_reader, _ = reader_factory

    table = make_reader(fake_inspector, schema='sales').get_table('abc')

    assert set(fake_inspector.schemas) == {'sales'}
    assert table.schema == 'sales'


# =================
# 3. EDGE CASES
# =================

@pytest.mark.edge_case
def test_get_table_detects_view(reader_factory, fake_inspector):
    """
    Test the table type is looked up when not given.
    """
    make_reader, _ = reader_factory

    table = make_reader(fake_inspector).get_table('order_totals')

    assert table.table_type == VIEW
    assert table.primary_key == []


@pytest.mark.edge_case
def test_comments_not_supported(reader_factory, fake_inspector):
    """
    Test dialects without table comments give None.
    """
    make_reader, _ = reader_factory
    fake_inspector.comments = None

    assert make_reader(fake_inspector).get_table('abc').comment is None


@pytest.mark.edge_case
def test_catalog_error_on_sqlalchemy_error(reader_factory):
    """
    Test SQLAlchemy errors are re-raised as CatalogError.
    """
    make_reader, _ = reader_factory
    inspector = FakeInspector(error=OperationalError("SELECT", {}, Exception("gone away")))
    reader = make_reader(inspector)

    with pytest.raises(CatalogError, match="Failed to list tables in test"):
        reader.get_table_names()
    with pytest.raises(CatalogError, match="Failed to read table test.abc"):
        reader.get_table('abc')
    with pytest.raises(CatalogError):
        reader.get_tables()


@pytest.mark.edge_case
def test_empty_database(reader_factory):
    """
    Test a database without tables reads as an empty list.
    """
    make_reader, _ = reader_factory

    assert make_reader(FakeInspector()).get_tables() == []


# ===============
# 4. SMOKE TESTS
# ===============

@pytest.mark.smoke
def test_close_without_engine():
    """
    Smoke test: closing an unused reader is harmless.
    """
    reader = CatalogReader(DBType.POSTGRES, 'localhost', None, 'u', 'p', 'd')
    reader.close()

    assert reader._engine is None
