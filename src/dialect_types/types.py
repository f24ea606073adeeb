"""
Abstract data type descriptors.

This module provides:
- TypeOptions: the options record carried by every descriptor
- DataType: an abstract type plus its options, rendered through a dialect
- TypeFactory: one callable per abstract type (INTEGER, STRING, ...)
- base_sql: dialect-independent rendering used when a dialect has no override
"""
import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from dialect_types.exceptions import UnknownTypeError, ValidationError
from dialect_types.registry import ABSTRACT_TYPES, normalize_type_name

# NUMBER is the generic numeric type, rendered with whatever key it is given
TYPE_NAMES = ABSTRACT_TYPES + ('NUMBER',)

NUMERIC_TYPES = frozenset({'NUMBER', 'INTEGER', 'BIGINT', 'FLOAT', 'DOUBLE', 'REAL'})
FLOATING_TYPES = frozenset({'FLOAT', 'DOUBLE', 'REAL'})

# Keys that differ from the registry name
DEFAULT_KEYS = MappingProxyType({
    'DOUBLE': 'DOUBLE PRECISION',
    })

POSITIONAL_OPTIONS = MappingProxyType({
    'NUMBER': ('length',),
    'INTEGER': ('length',),
    'BIGINT': ('length',),
    'FLOAT': ('length', 'decimals'),
    'DOUBLE': ('length', 'decimals'),
    'REAL': ('length', 'decimals'),
    'DECIMAL': ('length', 'decimals'),
    'STRING': ('length', 'binary'),
    'CHAR': ('length', 'binary'),
    'TEXT': ('length',),
    'BLOB': ('length',),
    })

OPTION_ALIASES = MappingProxyType({
    'precision': 'length',
    'scale': 'decimals',
    })

SIZED_TYPES = MappingProxyType({
    'tiny': 'TINY',
    'medium': 'MEDIUM',
    'long': 'LONG',
    })


@dataclass
class TypeOptions:
    """Options record shared by all abstract types.

    Only the fields meaningful to a type are read when rendering it.
    """
    length: int | str | None = None
    decimals: int | None = None
    unsigned: bool = False
    zerofill: bool = False
    binary: bool = False
    values: tuple = ()

    def __post_init__(self):
        if isinstance(self.values, str):
            raise ValidationError('ENUM values must be a sequence of members, not a string')
        self.values = tuple(self.values or ())

    @classmethod
    def from_value(cls, value: Any = None, **overrides: Any) -> 'TypeOptions':
        """Build a new options record from a TypeOptions, a mapping or None.

        The result never shares identity with the input.
        """
        if value is None:
            data = {}
        elif isinstance(value, TypeOptions):
            data = dataclasses.asdict(value)
        elif isinstance(value, Mapping):
            data = dict(value)
        else:
            raise ValidationError(f'Options must be a mapping or TypeOptions, got {type(value).__name__}')
        data.update(overrides)

        known = {f.name for f in dataclasses.fields(cls)}
        normalized = {}
        for k, v in data.items():
            name = OPTION_ALIASES.get(k, k)
            if name not in known:
                raise ValidationError(f'Unknown type option: {k}')
            normalized[name] = v
        return cls(**normalized)


def resolve_type_name(name: str) -> str:
    """Canonical name for a factory lookup (registry names plus NUMBER)."""
    if isinstance(name, str) and name.strip().upper() in TYPE_NAMES:
        return name.strip().upper()
    return normalize_type_name(name)


def _get_dialect(dialect):
    from dialect_types.dialects import get_dialect
    from dialect_types.dialects.base import Dialect
    if isinstance(dialect, Dialect):
        return dialect
    if dialect is None:
        from dialect_types.config import get_settings
        dialect = get_settings().dialect
    return get_dialect(dialect)


@dataclass
class DataType:
    """An abstract column type with its own options record.
    """
    name: str
    key: str
    options: TypeOptions = field(default_factory=TypeOptions)

    def to_sql(self, dialect=None) -> str:
        """Render the column type declaration for a dialect."""
        return _get_dialect(dialect).render(self)

    def parse(self, raw: Any, context: Mapping | None = None, dialect=None) -> Any:
        """Parse a raw stored value for this type."""
        return _get_dialect(dialect).parse(self.name, raw, context)

    def extend(self, options: Any = None) -> 'DataType':
        """New descriptor of the same type from a copy of the options.

        A custom key is not carried over.
        """
        return create_type(self.name, self.options if options is None else options)

    def __str__(self) -> str:
        return self.to_sql()


def _positional_options(name: str, args: tuple) -> dict:
    if name == 'ENUM':
        values = args
        if len(args) == 1 and isinstance(args[0], Iterable) and not isinstance(args[0], str | bytes):
            values = args[0]
        return {'values': tuple(values)}
    names = POSITIONAL_OPTIONS.get(name, ())
    if len(args) > len(names):
        raise ValidationError(f'{name} accepts at most {len(names)} positional argument(s), got {len(args)}')
    return dict(zip(names, args))


def create_type(name: str, *args: Any, key: str | None = None, **options: Any) -> DataType:
    """Build a DataType descriptor.

    Accepts either a single options record (TypeOptions or mapping) or the
    positional arguments of the type, e.g. ``create_type('FLOAT', 10, 2)``.
    Keyword options override both.
    """
    name = resolve_type_name(name)

    if len(args) == 1 and isinstance(args[0], TypeOptions | Mapping):
        record = TypeOptions.from_value(args[0], **options)
    else:
        record = TypeOptions.from_value(_positional_options(name, args), **options)

    if name in {'STRING', 'CHAR'} and record.length is None:
        from dialect_types.config import get_settings
        record.length = get_settings().string_length

    return DataType(name=name, key=key or DEFAULT_KEYS.get(name, name), options=record)


class TypeFactory:
    """Callable producing DataType descriptors for one abstract type.

    ``INTEGER(10)``, ``INTEGER({'length': 10})`` and ``INTEGER(length=10)``
    all build equivalent descriptors.
    """

    def __init__(self, name: str) -> None:
        self.name = resolve_type_name(name)
        self.key = DEFAULT_KEYS.get(self.name, self.name)

    def __call__(self, *args: Any, key: str | None = None, **options: Any) -> DataType:
        return create_type(self.name, *args, key=key, **options)

    def parse(self, raw: Any, context: Mapping | None = None, dialect=None) -> Any:
        """Parse a raw stored value for this type."""
        return _get_dialect(dialect).parse(self.name, raw, context)

    def extend(self, old_type: DataType) -> DataType:
        """Build a descriptor of this type from another descriptor's options."""
        return create_type(self.name, old_type.options)

    def __repr__(self) -> str:
        return f'TypeFactory({self.name!r})'


# Generic rendering, used by dialects without an override

def is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def format_length(options: TypeOptions) -> str:
    """``(length[,decimals])``, or an empty string without a length."""
    if not options.length:
        return ''
    if is_number(options.decimals):
        return f'({options.length},{options.decimals})'
    return f'({options.length})'


def _sized(prefix: str, options: TypeOptions) -> str:
    size = options.length.lower() if isinstance(options.length, str) else None
    return SIZED_TYPES.get(size, '') + prefix


def _quote(value: Any) -> str:
    return "'" + str(value).replace("'", "''") + "'"


def _base_number(data_type: DataType) -> str:
    options = data_type.options
    result = data_type.key + format_length(options)
    if options.unsigned:
        result += ' UNSIGNED'
    if options.zerofill:
        result += ' ZEROFILL'
    return result


def _base_string(data_type: DataType) -> str:
    binary = ' BINARY' if data_type.options.binary else ''
    return f'VARCHAR({data_type.options.length}){binary}'


def _base_char(data_type: DataType) -> str:
    binary = ' BINARY' if data_type.options.binary else ''
    return f'CHAR({data_type.options.length}){binary}'


def _base_decimal(data_type: DataType) -> str:
    options = data_type.options
    if options.length is None:
        return 'DECIMAL'
    return 'DECIMAL' + format_length(options)


def _base_enum(data_type: DataType) -> str:
    return 'ENUM(' + ', '.join(_quote(v) for v in data_type.options.values) + ')'


BASE_RENDERERS = {
    'NUMBER': _base_number,
    'INTEGER': _base_number,
    'BIGINT': _base_number,
    'FLOAT': _base_number,
    'DOUBLE': _base_number,
    'REAL': _base_number,
    'DECIMAL': _base_decimal,
    'STRING': _base_string,
    'CHAR': _base_char,
    'TEXT': lambda data_type: _sized('TEXT', data_type.options),
    'BLOB': lambda data_type: _sized('BLOB', data_type.options),
    'ENUM': _base_enum,
    'BOOLEAN': lambda data_type: 'TINYINT(1)',
    'DATE': lambda data_type: 'DATETIME',
    'DATEONLY': lambda data_type: 'DATE',
    'TIME': lambda data_type: 'TIME',
    'UUID': lambda data_type: 'UUID',
    'GEOMETRY': lambda data_type: 'GEOMETRY',
    }


def base_sql(data_type: DataType) -> str:
    """Dialect-independent declaration for a descriptor."""
    try:
        renderer = BASE_RENDERERS[data_type.name]
    except KeyError:
        raise UnknownTypeError(f'No base renderer for type: {data_type.name}') from None
    return renderer(data_type)


DATE = TypeFactory('DATE')
STRING = TypeFactory('STRING')
CHAR = TypeFactory('CHAR')
TEXT = TypeFactory('TEXT')
NUMBER = TypeFactory('NUMBER')
INTEGER = TypeFactory('INTEGER')
BIGINT = TypeFactory('BIGINT')
FLOAT = TypeFactory('FLOAT')
DOUBLE = TypeFactory('DOUBLE')
REAL = TypeFactory('REAL')
DECIMAL = TypeFactory('DECIMAL')
BOOLEAN = TypeFactory('BOOLEAN')
BLOB = TypeFactory('BLOB')
UUID = TypeFactory('UUID')
ENUM = TypeFactory('ENUM')
GEOMETRY = TypeFactory('GEOMETRY')
TIME = TypeFactory('TIME')
DATEONLY = TypeFactory('DATEONLY')
