import re
from dataclasses import dataclass

from dialect_types.dialects import get_available_dialects, is_supported_dialect

from libb import ConfigOptions

__all__ = [
    'DataTypeOptions',
]

TIMEZONE_RE = re.compile(r'^(Z|[+-]\d{2}:\d{2})$')


@dataclass
class DataTypeOptions(ConfigOptions):
    """Options

    supported dialect names: `sqlite`

    - timezone: offset appended to stored timestamps that carry none (default: +00:00)
    - string_length: length given to STRING/CHAR when none is supplied (default: 255)
    """
    dialect: str = 'sqlite'
    timezone: str = '+00:00'
    string_length: int = 255

    def __post_init__(self):
        if not is_supported_dialect(self.dialect):
            available = get_available_dialects()
            raise ValueError(f'dialect must be one of: {available}')
        if not TIMEZONE_RE.match(self.timezone or ''):
            raise ValueError(f'timezone must look like +HH:MM, -HH:MM or Z, got {self.timezone!r}')
        if not isinstance(self.string_length, int) or self.string_length <= 0:
            raise ValueError(f'string_length must be a positive integer, got {self.string_length!r}')
