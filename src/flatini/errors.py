"""Exceptions raised while reading and querying ini files."""

__all__ = (
    "IniError", "LineError", "EmptySectionName", "InvalidLine", "EmptyKey",
    "LineOutsideSection", "ConfigError", "ConfigIOError", "AlreadyParsed",
    "NoSuchSection", "NoSuchKey",
)

from .exceptions import FlatiniException, FlatiniUserException


class IniError(FlatiniException):
    """Generic ini reader exception."""


class LineError(IniError, FlatiniUserException):
    """A single line failed to parse.

    :ivar line: text of the offending line, line terminator stripped.
    :ivar reason: human readable cause.
    """

    reason = 'malformed line'

    def __init__(self, line, reason=None):
        if reason is not None:
            self.reason = reason
        super().__init__(f'{line}: {self.reason}')
        self.line = line

    def __str__(self):
        return f'{self.line}: {self.reason}'


class EmptySectionName(LineError):
    """Header brackets enclose nothing."""

    reason = 'section name cannot be empty'


class InvalidLine(LineError):
    """Key/value line without a separator, or with nothing before it."""

    reason = 'invalid configuration line'


class EmptyKey(LineError):
    """Key/value line whose key is blank."""

    reason = 'key cannot be empty'


class LineOutsideSection(LineError):
    """Key/value line seen before any section header."""

    reason = 'configuration line without section'


class ConfigError(IniError, FlatiniUserException):
    """A line error, located to the file it occurred in.

    :ivar path: path of the file being parsed.
    :ivar error: the wrapped :class:`LineError`.
    :ivar lineno: 1-based line number within ``path``.
    """

    def __init__(self, path, error, lineno=None):
        super().__init__(f'{path}: {error}')
        self.path = path
        self.error = error
        self.lineno = lineno

    def __str__(self):
        location = self.path
        if self.lineno is not None:
            location = f'{location}, line {self.lineno}'
        return f'configuration file error: {location}\n\t{self.error}'


class ConfigIOError(IniError, FlatiniUserException):
    """Opening or reading a file failed.

    :ivar path: path of the file.
    :ivar exc: underlying exception.
    """

    def __init__(self, path, exc):
        super().__init__(f'{path}: {exc}')
        self.path = path
        self.exc = exc

    def __str__(self):
        return f'failed reading configuration file {self.path!r}: {self.exc}'


class AlreadyParsed(IniError):
    """Parsing was requested on a reader that already parsed its files."""

    def __str__(self):
        return 'configuration files were already parsed'


class NoSuchSection(IniError, LookupError):

    def __init__(self, section):
        super().__init__(section)
        self.section = section

    def __str__(self):
        return f'no such section [{self.section}] was set'


class NoSuchKey(IniError, LookupError):

    def __init__(self, section, key):
        super().__init__(section, key)
        self.section = section
        self.key = key

    def __str__(self):
        return f'no such key [{self.key}] was set under section [{self.section}]'
