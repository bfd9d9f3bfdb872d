"""
=====================================
Pytest suite for codegen/naming.py
=====================================

Available markers:
------------------
unit, edge_case
"""

import keyword

import pytest

from codegen.naming import RESERVED_MEMBERS, class_name, class_names, field_name, field_names, unique_names


@pytest.mark.unit
@pytest.mark.parametrize("table_name, expected", [
    ('abc', 'Abc'),
    ('user_accounts', 'UserAccounts'),
    ('order_id', 'OrderID'),
    ('OrderItems', 'OrderItems'),
    ('api_keys', 'APIKeys'),
    ('xmlData', 'XMLData'),
    ('customer-orders', 'CustomerOrders'),
    ('sales order lines', 'SalesOrderLines'),
])
def test_class_name(table_name, expected):
    """
    Test table names become PascalCase with initialisms upper-cased.
    """
    assert class_name(table_name) == expected


@pytest.mark.unit
@pytest.mark.parametrize("column_name, expected", [
    ('id', 'id'),
    ('ID', 'id'),
    ('first_name', 'first_name'),
    ('First Name', 'first_name'),
    ('price-usd', 'price_usd'),
    ('Class', 'class_'),
    ('from', 'from_'),
    ('match', 'match_'),
])
def test_field_name(column_name, expected):
    """
    Test column names become lower-case identifiers that are not keywords.
    """
    assert field_name(column_name) == expected


@pytest.mark.edge_case
def test_class_name_leading_digit():
    """
    Test class names never start with a digit.
    """
    assert class_name('2fa_codes') == 'T2faCodes'
    assert class_name('') == 'T'


@pytest.mark.edge_case
def test_field_name_leading_digit():
    assert field_name('1st_place') == 'c_1st_place'


@pytest.mark.edge_case
@pytest.mark.parametrize("member", sorted(RESERVED_MEMBERS))
def test_field_name_avoids_generated_methods(member):
    """
    Test a column named like a generated method gets a trailing underscore.
    """
    assert field_name(member) == member + '_'


@pytest.mark.edge_case
@pytest.mark.parametrize("column_name", ['class', 'def', 'lambda', 'None', 'import', 'order', 'group'])
def test_field_name_is_always_valid_identifier(column_name):
    name = field_name(column_name)

    assert name.isidentifier()
    assert not keyword.iskeyword(name)


@pytest.mark.unit
def test_field_names_without_clashes():
    assert field_names(['id', 'First Name', 'from']) == {
        'id': 'id',
        'First Name': 'first_name',
        'from': 'from_',
    }


@pytest.mark.edge_case
@pytest.mark.parametrize("column_names, expected", [
    (['id', 'Name', 'name'], ['id', 'name', 'name_2']),
    (['id', 'user-name', 'user_name'], ['id', 'user_name', 'user_name_2']),
    (['Name', 'name', 'NAME', 'name_2'], ['name', 'name_2', 'name_3', 'name_2_2']),
])
def test_field_names_suffix_clashing_columns(column_names, expected):
    """
    Test columns converting to the same attribute get distinct names in ordinal order.
    """
    fields = field_names(column_names)

    assert [fields[name] for name in column_names] == expected
    assert len(set(fields.values())) == len(column_names)


@pytest.mark.edge_case
def test_class_names_suffix_clashing_tables():
    names = class_names(['order_items', 'OrderItems', 'abc', 'ORDER_ITEMS'])

    assert names == {
        'order_items': 'OrderItems',
        'OrderItems': 'OrderItems2',
        'abc': 'Abc',
        'ORDER_ITEMS': 'OrderItems3',
    }


@pytest.mark.unit
def test_unique_names_uses_separator():
    assert unique_names(['a', 'A'], str.lower, '-') == {'a': 'a', 'A': 'a-2'}
