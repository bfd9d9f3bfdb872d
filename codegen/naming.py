"""
Identifier conversion from database names to Python names.

Example:
    >>> class_name('user_accounts')
    'UserAccounts'
    >>> class_name('order_id')
    'OrderID'
    >>> field_name('Class')
    'class_'
"""

import keyword
import re
from typing import Callable, Dict, Iterable

# Words kept fully upper-case inside class names
INITIALISMS = {
    'api', 'cpu', 'css', 'dns', 'html', 'http', 'https', 'id', 'ip', 'json',
    'sql', 'ssh', 'tcp', 'ttl', 'ui', 'uid', 'uri', 'url', 'utc', 'uuid', 'xml',
}

# Method names on generated classes; fields must not shadow them
RESERVED_MEMBERS = {
    'select', 'insert', 'update', 'delete',
    'select_in_range_exclusive', 'select_in_range_inclusive',
}

_WORD_SPLIT = re.compile(r'[^0-9A-Za-z]+')
_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')
_NOT_IDENTIFIER = re.compile(r'\W')


def _words(name: str):
    words = []
    for chunk in _WORD_SPLIT.split(name):
        words.extend(part for part in _CAMEL_BOUNDARY.split(chunk) if part)
    return words


def class_name(table_name: str) -> str:
    """
    Convert a table name to a PascalCase class name.

    Args:
        table_name: Name such as 'order_items' or 'OrderItems'

    Returns:
        Class name such as 'OrderItems'; names starting with a digit get a
        'T' prefix
    """
    parts = []
    for word in _words(table_name):
        if word.lower() in INITIALISMS:
            parts.append(word.upper())
        else:
            parts.append(word[0].upper() + word[1:])
    name = ''.join(parts)
    if not name or name[0].isdigit():
        name = 'T' + name
    return name


def field_name(column_name: str) -> str:
    """
    Convert a column name to a snake_case attribute name.

    Args:
        column_name: Column name in the database's native case

    Returns:
        Valid Python identifier that is neither a keyword nor a generated
        method name
    """
    name = _NOT_IDENTIFIER.sub('_', column_name.strip()).lower()
    if not name or name[0].isdigit():
        name = 'c_' + name
    if keyword.iskeyword(name) or keyword.issoftkeyword(name) or name in RESERVED_MEMBERS:
        name += '_'
    return name


def unique_names(names: Iterable[str], convert: Callable[[str], str], separator: str) -> Dict[str, str]:
    """
    Convert names, suffixing later names whose conversion is already taken.

    Args:
        names: Source names; the first to claim a converted name keeps it
        convert: Conversion applied to each name
        separator: Placed between a clashing name and its suffix (2, 3, ...)

    Returns:
        Dict of source name -> distinct converted name
    """
    taken = set()
    result = {}
    for name in names:
        base = convert(name)
        candidate = base
        n = 2
        while candidate in taken:
            candidate = f"{base}{separator}{n}"
            n += 1
        taken.add(candidate)
        result[name] = candidate
    return result


def field_names(column_names: Iterable[str]) -> Dict[str, str]:
    """
    Map a table's column names to distinct attribute names.

    Columns such as 'Name' and 'name' convert to the same attribute; the
    first in ordinal order keeps it and later ones get '_2', '_3', ...

    Args:
        column_names: Column names in ordinal order

    Returns:
        Dict of column name -> attribute name
    """
    return unique_names(column_names, field_name, '_')


def class_names(table_names: Iterable[str]) -> Dict[str, str]:
    """Map table names to distinct class names; later duplicates get '2', '3', ..."""
    return unique_names(table_names, class_name, '')
