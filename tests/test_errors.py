import pytest
from snakeoil.cli.exceptions import UserException

from flatini import errors
from flatini.exceptions import FlatiniException


@pytest.mark.parametrize('cls, reason', (
    (errors.EmptySectionName, 'section name cannot be empty'),
    (errors.InvalidLine, 'invalid configuration line'),
    (errors.EmptyKey, 'key cannot be empty'),
    (errors.LineOutsideSection, 'configuration line without section'),
))
def test_line_errors(cls, reason):
    e = cls('some line')
    assert e.line == 'some line'
    assert e.reason == reason
    assert str(e) == f'some line: {reason}'
    assert isinstance(e, errors.LineError)
    assert isinstance(e, UserException)


def test_line_error_custom_reason():
    e = errors.LineError('x', 'odd')
    assert str(e) == 'x: odd'


def test_config_error():
    line_error = errors.LineOutsideSection('a = 1')
    e = errors.ConfigError('/etc/app.ini', line_error, 3)
    assert e.path == '/etc/app.ini'
    assert e.error is line_error
    assert e.lineno == 3
    assert str(e) == (
        'configuration file error: /etc/app.ini, line 3\n'
        '\ta = 1: configuration line without section')
    assert str(errors.ConfigError('f', line_error)).startswith(
        'configuration file error: f\n')


def test_config_io_error():
    exc = FileNotFoundError(2, 'No such file or directory')
    e = errors.ConfigIOError('/missing', exc)
    assert e.exc is exc
    assert "'/missing'" in str(e)
    assert 'No such file or directory' in str(e)


def test_lookup_errors():
    e = errors.NoSuchSection('s')
    assert str(e) == 'no such section [s] was set'
    e = errors.NoSuchKey('s', 'k')
    assert str(e) == 'no such key [k] was set under section [s]'
    assert isinstance(e, LookupError)


def test_hierarchy():
    for cls in (errors.LineError, errors.ConfigError, errors.ConfigIOError,
                errors.AlreadyParsed, errors.NoSuchSection, errors.NoSuchKey):
        assert issubclass(cls, errors.IniError)
        assert issubclass(cls, FlatiniException)
