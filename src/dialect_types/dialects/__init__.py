"""
Dialect factory for dialect-specific type handling.
"""
from functools import lru_cache

from dialect_types.dialects.base import _DIALECT_REGISTRY
from dialect_types.dialects.base import Dialect as Dialect
from dialect_types.dialects.base import register_dialect as register_dialect
from dialect_types.dialects.sqlite import SQLiteDialect as SQLiteDialect
from dialect_types.exceptions import UnknownDialectError


def _validate_dialect(dialect: str) -> None:
    """Raise UnknownDialectError if dialect is not registered."""
    if dialect not in _DIALECT_REGISTRY:
        available = list(_DIALECT_REGISTRY.keys())
        raise UnknownDialectError(f'Unsupported dialect: {dialect}. Available: {available}')


@lru_cache(maxsize=8)
def _get_dialect(dialect: str) -> Dialect:
    """Get cached dialect instance."""
    _validate_dialect(dialect)
    return _DIALECT_REGISTRY[dialect]()


def get_dialect(dialect: str) -> Dialect:
    """Get dialect instance for a dialect name."""
    return _get_dialect(dialect)


def get_available_dialects() -> list[str]:
    """Return list of registered dialect names."""
    return list(_DIALECT_REGISTRY.keys())


def is_supported_dialect(dialect: str) -> bool:
    """Check if a dialect is supported."""
    return dialect in _DIALECT_REGISTRY


def get_dialect_class(dialect: str) -> type[Dialect]:
    """Get the dialect class without instantiating."""
    _validate_dialect(dialect)
    return _DIALECT_REGISTRY[dialect]
