"""
Dialect-specific type adaptation for abstract column types.

Every abstract type can be rendered and parsed either as:
- Module functions: to_sql(INTEGER(10)), parse('FLOAT', 'NaN')
- DataType / factory methods: INTEGER(10).to_sql(), FLOAT.parse('NaN')

The module functions are facades over the configured dialect.
"""
__version__ = '0.1.0'

from typing import Any

from dialect_types.config import Settings, get_settings
from dialect_types.dialects import Dialect, get_available_dialects, get_dialect
from dialect_types.exceptions import DataTypeError
from dialect_types.exceptions import UnknownDialectError, UnknownTypeError
from dialect_types.exceptions import ValidationError
from dialect_types.options import DataTypeOptions
from dialect_types.registry import UNSUPPORTED, abstract_type_for
from dialect_types.registry import canonical_native_type, is_supported
from dialect_types.registry import supported_native_types
from dialect_types.types import BIGINT, BLOB, BOOLEAN, CHAR, DATE, DATEONLY
from dialect_types.types import DECIMAL, DOUBLE, ENUM, FLOAT, GEOMETRY, INTEGER
from dialect_types.types import NUMBER, REAL, STRING, TEXT, TIME, UUID
from dialect_types.types import DataType, TypeFactory, TypeOptions, create_type


def to_sql(data_type: DataType, dialect: str | None = None) -> str:
    """Render the column type declaration for a descriptor.
    """
    return data_type.to_sql(dialect)


def parse(name: str, value: Any, context: Any = None, dialect: str | None = None) -> Any:
    """Parse a raw stored value for an abstract type.
    """
    if dialect is None:
        dialect = get_settings().dialect
    return get_dialect(dialect).parse(name, value, context)


def extend(data_type: DataType, options: Any = None) -> DataType:
    """New descriptor of the same type from a copy of the options.
    """
    return data_type.extend(options)


__all__ = [
    'to_sql',
    'parse',
    'extend',
    'create_type',
    'DataType',
    'TypeFactory',
    'TypeOptions',
    'DATE',
    'STRING',
    'CHAR',
    'TEXT',
    'NUMBER',
    'INTEGER',
    'BIGINT',
    'FLOAT',
    'DOUBLE',
    'REAL',
    'DECIMAL',
    'BOOLEAN',
    'BLOB',
    'UUID',
    'ENUM',
    'GEOMETRY',
    'TIME',
    'DATEONLY',
    'UNSUPPORTED',
    'supported_native_types',
    'canonical_native_type',
    'is_supported',
    'abstract_type_for',
    'Dialect',
    'get_dialect',
    'get_available_dialects',
    'DataTypeOptions',
    'Settings',
    'get_settings',
    'DataTypeError',
    'UnknownTypeError',
    'UnknownDialectError',
    'ValidationError',
]
