"""
Dataclass emission for catalog tables.

Each table becomes a dataclass with one annotated field per column, in
ordinal order, followed by the SQL constants and CRUD methods from
codegen.methods.
"""

import logging
from typing import List, Optional, Tuple

from catalog.models import Table
from codegen.methods import method_source
from codegen.naming import class_name, field_name, field_names
from codegen.types import python_type
from sql.query_builder import PLACEHOLDER

logger = logging.getLogger(__name__)


def _docstring_text(text: str) -> str:
    return text.strip().replace('\\', '\\\\').replace('"', '\\"')


def table_imports(table: Table) -> List[Tuple[str, str]]:
    """(module, name) pairs the generated class for a table needs."""
    needed = [('dataclasses', 'dataclass')]
    for col in table.columns:
        needed.extend(python_type(col).imports)
    return needed


def dataclass_source(table: Table, placeholder: str = PLACEHOLDER, name: Optional[str] = None) -> str:
    """
    Generate the dataclass definition for a table.

    Args:
        table: Catalog table or view
        placeholder: Positional placeholder used in the emitted SQL
        name: Class name to use instead of the one derived from the table
            name

    Returns:
        Python source of the class, ending with a newline
    """
    kind = 'view' if table.is_view else 'table'
    doc = _docstring_text(table.comment or '') or f"Row of the {table.name} {kind}."

    lines = [
        '@dataclass',
        f'class {name or class_name(table.name)}:',
        f'    """{doc}"""',
    ]

    if table.columns:
        lines.append('')
    fields = field_names(table.column_names)
    for col in table.columns:
        if fields[col.name] != field_name(col.name):
            logger.warning(
                f"⚠️  Column {table.name}.{col.name} clashes with another column; "
                f"its field is named {fields[col.name]}"
            )
        lines.append(f'    {fields[col.name]}: {python_type(col).annotation}')

    methods = method_source(table, placeholder)
    if methods:
        lines.append('')
        lines.append(methods)

    return '\n'.join(lines) + '\n'
