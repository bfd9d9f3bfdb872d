"""
=================================
Python source generation package.
=================================

Turns catalog tables into Python dataclasses with CRUD methods whose SQL
comes from the sql package builders.

Modules:
    naming: Table and column names to Python identifiers
    types: SQL data types to Python annotations
    methods: SQL constants and CRUD methods for a class body
    structs: Dataclass definitions
    module: Complete modules with header, imports and validation
"""

__all__ = [
    'CodegenError', 'ModuleEmitter',
    'dataclass_source', 'method_source', 'python_type',
    'class_name', 'class_names', 'field_name', 'field_names'
]

from .methods import method_source
from .module import CodegenError, ModuleEmitter
from .naming import class_name, class_names, field_name, field_names
from .structs import dataclass_source
from .types import python_type
