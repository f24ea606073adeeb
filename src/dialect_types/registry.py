"""
Native type registry for each supported dialect.

Maps every abstract type name onto the ordered native column-type keywords
the dialect accepts for it. The first keyword is canonical. Types the
dialect cannot declare natively (ENUM, GEOMETRY on SQLite) map to
UNSUPPORTED and must be emulated by the caller.

The tables are built once at import and exposed read-only.
"""
import logging
import re
from types import MappingProxyType

from dialect_types.exceptions import UnknownDialectError, UnknownTypeError

logger = logging.getLogger(__name__)

ABSTRACT_TYPES = (
    'DATE',
    'STRING',
    'CHAR',
    'TEXT',
    'INTEGER',
    'BIGINT',
    'FLOAT',
    'TIME',
    'DATEONLY',
    'BOOLEAN',
    'BLOB',
    'DECIMAL',
    'UUID',
    'ENUM',
    'REAL',
    'DOUBLE',
    'GEOMETRY',
    )

# Export names that differ from the registry name
ALIASES = MappingProxyType({
    'DOUBLE PRECISION': 'DOUBLE',
    })

NUMERIC_MODIFIERS = frozenset({'UNSIGNED', 'ZEROFILL'})


class _Unsupported:
    """Marker for abstract types without a native declaration."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'UNSUPPORTED'

    def __reduce__(self):
        return (_Unsupported, ())


UNSUPPORTED = _Unsupported()


def _freeze(table: dict) -> MappingProxyType:
    missing = set(ABSTRACT_TYPES) - set(table)
    if missing:
        raise RuntimeError(f'Native type table is missing entries for {sorted(missing)}')
    return MappingProxyType({
        name: tuple(native) if native is not UNSUPPORTED else UNSUPPORTED
        for name, native in table.items()
        })


_NATIVE_TYPES = MappingProxyType({
    'sqlite': _freeze({
        'DATE': ['DATETIME'],
        'STRING': ['VARCHAR', 'VARCHAR BINARY'],
        'CHAR': ['CHAR', 'CHAR BINARY'],
        'TEXT': ['TEXT'],
        'INTEGER': ['INTEGER'],
        'BIGINT': ['BIGINT'],
        'FLOAT': ['FLOAT'],
        'TIME': ['TIME'],
        'DATEONLY': ['DATE'],
        'BOOLEAN': ['TINYINT'],
        'BLOB': ['TINYBLOB', 'BLOB', 'LONGBLOB'],
        'DECIMAL': ['DECIMAL'],
        'UUID': ['UUID'],
        'ENUM': UNSUPPORTED,
        'REAL': ['REAL'],
        'DOUBLE': ['DOUBLE PRECISION'],
        'GEOMETRY': UNSUPPORTED,
        }),
    })


def _build_reverse(table: MappingProxyType) -> MappingProxyType:
    reverse = {}
    for name, native in table.items():
        for keyword in native or ():
            reverse.setdefault(keyword, name)
    return MappingProxyType(reverse)


_REVERSE_TYPES = MappingProxyType({
    dialect: _build_reverse(table) for dialect, table in _NATIVE_TYPES.items()
    })


def normalize_type_name(name: str) -> str:
    """Canonical registry spelling of an abstract type name.

    Raises UnknownTypeError for names outside the registry.
    """
    if not isinstance(name, str):
        raise UnknownTypeError(f'Abstract type name must be a string, got {name!r}')
    normalized = ' '.join(name.upper().split())
    normalized = ALIASES.get(normalized, normalized)
    if normalized not in ABSTRACT_TYPES:
        raise UnknownTypeError(f'Unknown abstract type: {name}. Available: {list(ABSTRACT_TYPES)}')
    return normalized


def get_native_type_table(dialect: str = 'sqlite') -> MappingProxyType:
    """Return the read-only native type table for a dialect."""
    try:
        return _NATIVE_TYPES[dialect]
    except KeyError:
        raise UnknownDialectError(
            f'No native type table for dialect: {dialect}. Available: {list(_NATIVE_TYPES)}'
            ) from None


def supported_native_types(name: str, dialect: str = 'sqlite') -> tuple[str, ...] | _Unsupported:
    """Native keywords the dialect accepts for an abstract type.

    Returns an ordered tuple (first entry canonical) or UNSUPPORTED when the
    type has no native form and must be emulated.
    """
    return get_native_type_table(dialect)[normalize_type_name(name)]


def canonical_native_type(name: str, dialect: str = 'sqlite') -> str | _Unsupported:
    """First (canonical) native keyword for an abstract type, or UNSUPPORTED."""
    native = supported_native_types(name, dialect)
    if native is UNSUPPORTED:
        return UNSUPPORTED
    return native[0]


def is_supported(name: str, dialect: str = 'sqlite') -> bool:
    """Check if an abstract type has a native declaration in the dialect."""
    return supported_native_types(name, dialect) is not UNSUPPORTED


def normalize_native_type(native: str) -> str:
    """Normalize a declared column type for lookup.

    Uppercases, collapses whitespace and drops parenthesized parameters
    and numeric modifiers, so ``varchar binary (255)`` becomes
    ``VARCHAR BINARY`` and ``integer unsigned zerofill(10)`` becomes
    ``INTEGER``.
    """
    normalized = re.sub(r'\(.*?\)', ' ', native).upper().split()
    return ' '.join(word for word in normalized if word not in NUMERIC_MODIFIERS)


def abstract_type_for(native: str, dialect: str = 'sqlite') -> str | None:
    """Resolve a declared native column type back to its abstract type.

    Returns None when no abstract type lists the keyword.
    """
    if not native:
        return None
    get_native_type_table(dialect)
    reverse = _REVERSE_TYPES[dialect]
    normalized = normalize_native_type(native)
    name = reverse.get(normalized)
    if name is None:
        logger.debug(f'No abstract type declares native type {native!r} for {dialect}')
    return name
