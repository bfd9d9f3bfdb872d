"""
==========================================
Module assembly for generated source files.
==========================================

Combines the dataclasses of one or more tables into a complete Python
module: a header docstring, the import lines the annotations need, and
the class definitions. The result is parsed before it is returned, so a
syntax error in generated code is reported instead of written.

Example:
    >>> from catalog.dbtype import DBType
    >>> from codegen.module import ModuleEmitter
    >>>
    >>> emitter = ModuleEmitter(package='inventory', db_type=DBType.MYSQL)
    >>> source = emitter.module_source(tables)
"""

import ast
import logging
from collections import defaultdict
from typing import Iterable, List, Sequence, Tuple

from catalog.dbtype import DBType
from catalog.models import Table
from codegen.naming import class_name, class_names
from codegen.structs import dataclass_source, table_imports
from sql.query_builder import PLACEHOLDER

logger = logging.getLogger(__name__)

TOOL_NAME = 'table-codegen'


class CodegenError(Exception):
    """Exception raised when generated source is not valid Python."""
    pass


def import_lines(imports: Iterable[Tuple[str, str]]) -> List[str]:
    """
    Group (module, name) pairs into sorted 'from module import ...' lines.

    Args:
        imports: Pairs such as ('typing', 'Optional')

    Returns:
        One line per module, modules and names sorted
    """
    by_module = defaultdict(set)
    for module, name in imports:
        by_module[module].add(name)
    return [
        f"from {module} import {', '.join(sorted(names))}"
        for module, names in sorted(by_module.items())
    ]


class ModuleEmitter:
    """Builds complete generated modules for catalog tables.

    Attributes:
        package: Package name written into the header
        db_type: Database the tables were read from
        placeholder: Positional placeholder used in emitted SQL
    """

    def __init__(self, package: str, db_type: DBType, placeholder: str = PLACEHOLDER):
        self.package = package
        self.db_type = db_type
        self.placeholder = placeholder

    def header(self) -> str:
        """Module docstring naming the package and RDBMS."""
        return (
            f'"""\n'
            f'{self.package}: {self.db_type.display_name} dataclass definitions '
            f'for database tables and views.\n'
            f'\n'
            f'Auto-generated by {TOOL_NAME}; do not edit.\n'
            f'"""\n'
        )

    def module_source(self, tables: Sequence[Table]) -> str:
        """
        Generate a module holding the dataclasses of all given tables.

        Args:
            tables: Catalog tables, emitted in the given order. Tables whose
                class names clash get a numeric suffix, in that order

        Returns:
            Python source of the module

        Raises:
            CodegenError: If the generated source does not parse
        """
        imports = []
        for table in tables:
            imports.extend(table_imports(table))

        sections = [self.header()]
        if imports:
            sections.append('\n'.join(import_lines(imports)) + '\n')
        names = class_names(table.name for table in tables)
        for table in tables:
            if names[table.name] != class_name(table.name):
                logger.warning(
                    f"⚠️  Table {table.name} clashes with another table's class name; "
                    f"its class is named {names[table.name]}"
                )
            sections.append(dataclass_source(table, self.placeholder, names[table.name]))

        source = '\n\n'.join(sections)
        self.validate(source, ', '.join(table.name for table in tables) or self.package)
        return source

    def table_source(self, table: Table) -> str:
        """Generate a module holding a single table's dataclass."""
        return self.module_source([table])

    def validate(self, source: str, label: str) -> None:
        """
        Check that generated source parses.

        Raises:
            CodegenError: On a syntax error, with the offending line
        """
        try:
            ast.parse(source)
        except SyntaxError as e:
            logger.error(f"Generated code for {label} is invalid: {e}")
            raise CodegenError(f"Generated code for {label} is invalid at line {e.lineno}: {e.msg}") from e
