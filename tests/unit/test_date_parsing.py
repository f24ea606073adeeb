"""
Tests for DATE rendering and parsing of stored timestamps.
"""
import datetime

import pandas as pd
import pytest
from dateutil.tz import tzlocal, tzoffset, tzutc
from dialect_types import DATE, DATEONLY, TIME, get_settings, parse

from libb import attrdict


def test_date_renders_datetime():
    """DATE uses the generic DATETIME declaration"""
    assert DATE().to_sql() == 'DATETIME'
    assert DATEONLY().to_sql() == 'DATE'
    assert TIME().to_sql() == 'TIME'


def test_naive_value_gets_context_timezone(utc_context):
    """Legacy rows without an offset are read in the context timezone"""
    legacy = DATE.parse('2020-01-01 00:00:00', utc_context)
    stored = DATE.parse('2020-01-01 00:00:00+00:00', {})
    assert legacy == stored
    assert legacy == datetime.datetime(2020, 1, 1, tzinfo=tzutc())


def test_offset_in_value_wins():
    """A stored offset is used as is, the context timezone is ignored"""
    value = DATE.parse('2020-01-01 10:00:00+02:00', attrdict(timezone='+05:00'))
    assert value.utcoffset() == datetime.timedelta(hours=2)
    assert value == datetime.datetime(2020, 1, 1, 8, 0, tzinfo=tzutc())


@pytest.mark.parametrize(('timezone', 'hours'), [
    ('+00:00', 0),
    ('+05:30', 5.5),
    ('-05:00', -5),
])
def test_context_timezones(timezone, hours):
    value = DATE.parse('2021-06-15 12:30:00', {'timezone': timezone})
    assert value.utcoffset() == datetime.timedelta(hours=hours)
    assert (value.hour, value.minute) == (12, 30)


def test_settings_timezone_is_the_default():
    """Without a context timezone the configured default applies"""
    get_settings().update(timezone='+02:00')
    value = DATE.parse('2020-01-01 00:00:00')
    assert value.utcoffset() == datetime.timedelta(hours=2)


def test_bytes_are_decoded(utc_context):
    assert DATE.parse(b'2020-01-01 00:00:00', utc_context) == DATE.parse('2020-01-01 00:00:00', utc_context)


def test_datetime_passthrough(utc_context):
    """Values already converted by the driver are returned unchanged"""
    value = datetime.datetime(2020, 1, 1, 12, 0)
    assert DATE.parse(value, utc_context) is value


def test_null_passthrough(utc_context):
    assert DATE.parse(None, utc_context) is None


@pytest.mark.parametrize('value', [
    'not a date',
    '2020-13-45 99:99:99',
    '10:00:00',
    'Jan 1 2020 10:00',
])
def test_malformed_dates_are_invalid(utc_context, value):
    """Malformed input yields NaT rather than raising"""
    assert DATE.parse(value, utc_context) is pd.NaT


def test_module_parse_facade(utc_context):
    assert parse('DATE', '2020-01-01 00:00:00', utc_context) == datetime.datetime(2020, 1, 1, tzinfo=tzutc())


def test_dateonly_has_no_parser(utc_context):
    """Only DATE is parsed by the SQLite dialect"""
    assert DATEONLY.parse('2020-01-01', utc_context) == '2020-01-01'


def test_time_only_value_is_invalid(utc_context):
    """A bare time is not read as today's date"""
    assert DATE.parse('10:00:00', utc_context) is pd.NaT


@pytest.mark.parametrize(('raw', 'tzinfo'), [
    ('2020-01-01 00:00:00', tzutc()),
    ('2020-01-01 00:00:00+00:00', tzutc()),
    ('2020-01-01 00:00:00+05:30', tzoffset(None, 19800)),
])
def test_offsets_are_fixed(utc_context, raw, tzinfo):
    """Offsets resolve to fixed zones, never the machine's local zone"""
    value = DATE.parse(raw, utc_context)
    assert not isinstance(value.tzinfo, tzlocal)
    assert value.tzinfo == tzinfo
