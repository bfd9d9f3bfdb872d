"""
=====================================
Pytest suite for catalog/models.py
=====================================

Available markers:
------------------
unit
"""

import pytest

from catalog.models import VIEW, Column, Table
from sql.query_builder import select_builder


@pytest.mark.unit
def test_table_key_columns(jkl_table):
    """
    Test key and non-key column partitions keep their order.
    """
    assert [col.name for col in jkl_table.primary_key_columns] == ['id', 'fid']
    assert [col.name for col in jkl_table.non_key_columns] == ['txt', 'bin']
    assert jkl_table.column_names == ['id', 'fid', 'txt', 'bin']


@pytest.mark.unit
def test_primary_key_columns_follow_key_order():
    """
    Test primary key order, not ordinal order, is used for key columns.
    """
    table = Table(
        name='t',
        columns=[Column('a', 1, 'int'), Column('b', 2, 'int')],
        primary_key=['b', 'a']
    )

    assert [col.name for col in table.primary_key_columns] == ['b', 'a']


@pytest.mark.unit
def test_table_sql_keys_on_primary_key(abc_table):
    """
    Test the table descriptor selects every column by primary key.
    """
    table_sql = abc_table.table_sql()

    assert table_sql.table == 'abc'
    assert table_sql.where_columns == ('id',)
    assert select_builder(table_sql) == (
        "SELECT id, code, description, tiny, cost, created FROM abc WHERE id = ?"
    )


@pytest.mark.unit
def test_is_view():
    assert Table(name='v', table_type=VIEW).is_view
    assert not Table(name='t').is_view
