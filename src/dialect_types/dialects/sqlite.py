"""
SQLite-specific type rendering and parsing.

SQLite accepts most declarations but has its own limits:
- TEXT takes no length or size options
- No native enumerated type, ENUM columns are declared as TEXT
- Binary strings are declared as ``VARCHAR BINARY(n)`` / ``CHAR BINARY(n)``
- Numeric modifiers precede the length: ``INTEGER UNSIGNED(10)``
- Timestamps written by older releases were stored without an offset
- Floating columns may hold the strings NaN, Infinity and -Infinity
"""
import datetime
import logging
import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import dateutil.parser
import pandas as pd

from dialect_types.dialects.base import Dialect, register_dialect
from dialect_types.dialects.base import warn
from dialect_types.types import FLOATING_TYPES, NUMERIC_TYPES, DataType
from dialect_types.types import base_sql, format_length

logger = logging.getLogger(__name__)

DOCS_URL = 'https://www.sqlite.org/datatype3.html'

FLOAT_SPECIALS = MappingProxyType({
    'NaN': math.nan,
    'Infinity': math.inf,
    '-Infinity': -math.inf,
    })


def render_number(data_type: DataType) -> str:
    """Shared rendering for NUMBER, INTEGER, BIGINT, FLOAT, DOUBLE and REAL.

    ``KEY[ UNSIGNED][ ZEROFILL][(length[,decimals])]``
    """
    options = data_type.options
    result = data_type.key
    if options.unsigned:
        result += ' UNSIGNED'
    if options.zerofill:
        result += ' ZEROFILL'
    return result + format_length(options)


def render_string(data_type: DataType) -> str:
    if data_type.options.binary:
        return f'VARCHAR BINARY({data_type.options.length})'
    return base_sql(data_type)


def render_char(data_type: DataType) -> str:
    if data_type.options.binary:
        return f'CHAR BINARY({data_type.options.length})'
    return base_sql(data_type)


def render_text(data_type: DataType) -> str:
    """Plain TEXT; a length option is dropped from the descriptor."""
    if data_type.options.length:
        warn(DOCS_URL, 'SQLite does not support TEXT with options. Plain `TEXT` will be used instead.')
        data_type.options.length = None
    return 'TEXT'


def render_enum(data_type: DataType) -> str:
    return 'TEXT'


def _timezone(context: Mapping) -> str:
    timezone = context.get('timezone')
    if timezone:
        return timezone
    from dialect_types.config import get_settings
    return get_settings().timezone


def parse_date(value: Any, context: Mapping) -> Any:
    """Parse a stored DATETIME value.

    Values without a ``+`` carry no offset and get the context timezone
    appended. Anything that is not an ISO 8601 timestamp becomes NaT.
    """
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, bytes):
        value = value.decode()
    value = str(value)
    if '+' not in value:
        # Rows written before offsets were stored
        value += _timezone(context)
    try:
        return dateutil.parser.isoparse(value)
    except (ValueError, OverflowError) as e:
        logger.debug(f'Invalid date {value!r}: {e}')
        return pd.NaT


def parse_float(value: Any, context: Mapping) -> Any:
    """Map the special float strings, pass everything else through."""
    if isinstance(value, str):
        return FLOAT_SPECIALS.get(value, value)
    return value


RENDERERS = MappingProxyType({
    **dict.fromkeys(NUMERIC_TYPES, render_number),
    'STRING': render_string,
    'CHAR': render_char,
    'TEXT': render_text,
    'ENUM': render_enum,
    })

PARSERS = MappingProxyType({
    'DATE': parse_date,
    **dict.fromkeys(FLOATING_TYPES, parse_float),
    })


@register_dialect('sqlite')
class SQLiteDialect(Dialect):
    """SQLite type rendering and parsing.
    """

    @property
    def dialect_name(self) -> str:
        """Return the dialect identifier for SQLite."""
        return 'sqlite'

    def get_renderers(self) -> Mapping:
        return RENDERERS

    def get_parsers(self) -> Mapping:
        return PARSERS
