"""
Base dialect interface for type rendering and value parsing.

Defines the abstract base class that all dialect implementations inherit
from. A dialect contributes two read-only tables keyed by abstract type
name: renderers (descriptor -> SQL declaration) and parsers (raw stored
value -> Python value). Types missing from a table fall back to the
generic base rendering and to passing the value through unchanged.
"""
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from dialect_types import registry
from dialect_types.types import DataType, base_sql, resolve_type_name

logger = logging.getLogger(__name__)

Renderer = Callable[[DataType], str]
Parser = Callable[[Any, Mapping], Any]

# Registry of dialect name -> dialect class
_DIALECT_REGISTRY: dict[str, type['Dialect']] = {}


def register_dialect(name: str):
    """Decorator to register a dialect class.

    Usage:
        @register_dialect('sqlite')
        class SQLiteDialect(Dialect):
            ...
    """
    def decorator(cls: type['Dialect']) -> type['Dialect']:
        _DIALECT_REGISTRY[name] = cls
        return cls
    return decorator


def warn(link: str, message: str) -> None:
    """Advisory warning pointing at dialect documentation."""
    logger.warning(f'{message} >> Check: {link}')


class Dialect(ABC):
    """Base class for dialect-specific type handling.
    """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the dialect identifier."""

    def get_renderers(self) -> Mapping[str, Renderer]:
        """Renderers overriding the generic base rendering."""
        return MappingProxyType({})

    def get_parsers(self) -> Mapping[str, Parser]:
        """Parsers for raw values read back from storage."""
        return MappingProxyType({})

    def render(self, data_type: DataType) -> str:
        """Render the SQL type declaration for a descriptor.
        """
        renderer = self.get_renderers().get(data_type.name)
        if renderer is None:
            return base_sql(data_type)
        return renderer(data_type)

    def parse(self, name: str, value: Any, context: Mapping | None = None) -> Any:
        """Parse a raw stored value for an abstract type.

        NULLs pass through, as do values of types without a parser.
        """
        if value is None:
            return None
        parser = self.get_parsers().get(resolve_type_name(name))
        if parser is None:
            return value
        return parser(value, context if context is not None else {})

    def supported_native_types(self, name: str):
        """Native keywords for an abstract type, or registry.UNSUPPORTED."""
        return registry.supported_native_types(name, self.dialect_name)

    def abstract_type_for(self, native: str) -> str | None:
        """Abstract type declaring a native column type, if any."""
        return registry.abstract_type_for(native, self.dialect_name)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.dialect_name!r})'
