"""
Tests for type descriptor construction, defaulting and extension.
"""
import pytest
from dialect_types import DOUBLE, ENUM, FLOAT, INTEGER, STRING, TEXT
from dialect_types import DataType, TypeOptions, create_type, extend, to_sql
from dialect_types.exceptions import UnknownTypeError, ValidationError
from dialect_types.types import DEFAULT_KEYS, OPTION_ALIASES, POSITIONAL_OPTIONS
from dialect_types.types import SIZED_TYPES, TypeFactory


def test_factory_and_function_forms_agree():
    """Calling a factory is the same as create_type"""
    assert INTEGER(10) == create_type('INTEGER', 10)
    assert FLOAT(10, 2) == create_type('float', 10, 2)


def test_each_call_builds_a_new_descriptor():
    first = INTEGER(10)
    second = INTEGER(10)
    assert first == second
    assert first is not second
    assert first.options is not second.options


def test_options_record_is_copied():
    """A descriptor never shares the caller's options record"""
    record = TypeOptions(length=10)
    descriptor = INTEGER(record)
    record.length = 20
    assert descriptor.to_sql() == 'INTEGER(10)'


def test_keyword_options_override_record():
    assert INTEGER({'length': 10}, unsigned=True).to_sql() == 'INTEGER UNSIGNED(10)'
    assert FLOAT(10, 2, decimals=4).to_sql() == 'FLOAT(10,4)'


def test_precision_and_scale_aliases():
    assert create_type('DECIMAL', {'precision': 10, 'scale': 2}).to_sql() == 'DECIMAL(10,2)'
    assert create_type('DECIMAL').to_sql() == 'DECIMAL'


@pytest.mark.parametrize(('name', 'key'), [
    ('INTEGER', 'INTEGER'),
    ('DOUBLE', 'DOUBLE PRECISION'),
    ('DOUBLE PRECISION', 'DOUBLE PRECISION'),
    ('STRING', 'STRING'),
    ('ENUM', 'ENUM'),
])
def test_key_defaults(name, key):
    """The key defaults from the registry name unless the type fixes one"""
    assert create_type(name).key == key


def test_double_precision_alias():
    assert create_type('DOUBLE PRECISION', 10, 2) == DOUBLE(10, 2)


def test_factory_attributes():
    assert DOUBLE.name == 'DOUBLE'
    assert DOUBLE.key == 'DOUBLE PRECISION'
    assert repr(DOUBLE) == "TypeFactory('DOUBLE')"
    assert isinstance(DOUBLE, TypeFactory)


def test_too_many_positional_arguments():
    with pytest.raises(ValidationError, match='INTEGER accepts at most 1'):
        INTEGER(10, 2)
    with pytest.raises(ValidationError):
        create_type('BOOLEAN', 1)


def test_unknown_option():
    with pytest.raises(ValidationError, match='Unknown type option: size'):
        INTEGER(size=10)


def test_bad_options_value():
    with pytest.raises(ValidationError):
        TypeOptions.from_value(42)
    with pytest.raises(ValidationError):
        TypeOptions(values='abc')


def test_unknown_type_name():
    with pytest.raises(UnknownTypeError):
        create_type('JSONB')


class TestExtend:
    """Cloning a descriptor onto a new options record"""

    def test_factory_extend_uses_old_options(self):
        old = INTEGER(11, unsigned=True)
        new = FLOAT.extend(old)
        assert new.name == 'FLOAT'
        assert new.to_sql() == 'FLOAT UNSIGNED(11)'

    def test_options_are_not_shared(self):
        old = STRING(64)
        new = STRING.extend(old)
        new.options.length = 128
        assert old.options.length == 64
        assert new.to_sql() == 'VARCHAR(128)'
        assert old.to_sql() == 'VARCHAR(64)'

    def test_key_override_not_carried(self):
        """Only the options survive, the key returns to the default"""
        old = INTEGER(10, key='SMALLINT')
        assert INTEGER.extend(old).key == 'INTEGER'
        assert old.extend().key == 'INTEGER'
        assert extend(old).to_sql() == 'INTEGER(10)'

    def test_descriptor_extend_with_new_options(self):
        old = ENUM('a', 'b')
        new = old.extend({'values': ['c']})
        assert new.options.values == ('c',)
        assert old.options.values == ('a', 'b')

    def test_extend_copies_text_length_before_render(self):
        old = TEXT(100)
        new = TEXT.extend(old)
        assert new.options.length == 100
        assert new.options is not old.options


def test_descriptor_str_and_facade():
    descriptor = DataType(name='INTEGER', key='INTEGER', options=TypeOptions(length=4))
    assert str(descriptor) == 'INTEGER(4)'
    assert to_sql(descriptor) == 'INTEGER(4)'
    assert to_sql(descriptor, 'sqlite') == 'INTEGER(4)'


@pytest.mark.parametrize('table', [DEFAULT_KEYS, POSITIONAL_OPTIONS, OPTION_ALIASES, SIZED_TYPES])
def test_lookup_tables_are_read_only(table):
    with pytest.raises(TypeError):
        table['INTEGER'] = 'INT'
