"""
line classification and the section tracking state machine

Each line is first classified on syntax alone by :func:`classify_line`, then
applied to a :class:`SectionStore` by :func:`parse_line`, which takes the
current :class:`ParseState` and returns the next one.  The state is a plain
value; threading the same chain of states through several files lets a
section opened in one file be continued in the next.
"""

__all__ = (
    "Blank", "SectionHeader", "KeyValue", "ParseState",
    "classify_line", "unquote", "parse_line",
)

import typing
from collections import namedtuple

from . import errors
from .log import logger
from .sections import SectionStore

Blank = namedtuple("Blank", ())
SectionHeader = namedtuple("SectionHeader", ("name",))
KeyValue = namedtuple("KeyValue", ("key", "value"))

_BLANK = Blank()


class ParseState(namedtuple("ParseState", ("section",))):
    """Parsing cursor: the section key/value lines currently land in."""

    __slots__ = ()

    def __new__(cls, section=None):
        return super().__new__(cls, section)

    @property
    def active(self) -> bool:
        return self.section is not None


def unquote(value: str) -> str:
    """Strip one pair of double quotes wrapping ``value``.

    A lone ``"`` is left as is.
    """
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def classify_line(raw: str) -> typing.Union[Blank, SectionHeader, KeyValue]:
    """Classify a single line of text.

    :param raw: line content, line terminator already stripped.
    :return: :obj:`Blank`, :obj:`SectionHeader` or :obj:`KeyValue` instance.
    :raises LineError: if the line is syntactically invalid.
    """
    line = raw.strip()
    if not line:
        return _BLANK

    if line[0] == '[' and line[-1] == ']':
        # interior whitespace is part of the name
        name = line[1:-1]
        if not name:
            raise errors.EmptySectionName(raw)
        return SectionHeader(name)

    pos = line.find('=')
    if pos <= 0:
        raise errors.InvalidLine(raw)
    key = line[:pos].strip()
    if not key:
        raise errors.EmptyKey(raw)
    return KeyValue(key, unquote(line[pos + 1:].strip()))


def parse_line(raw: str, state: ParseState, store: SectionStore) -> ParseState:
    """Apply a single line to ``store``.

    :param raw: line content, line terminator already stripped.
    :param state: :obj:`ParseState` in effect before this line.
    :param store: :obj:`flatini.sections.SectionStore` being filled.
    :return: :obj:`ParseState` in effect after this line.
    :raises LineError: on syntax errors, or a key/value line with no
        active section.
    """
    kind = classify_line(raw)
    if isinstance(kind, SectionHeader):
        if kind.name in store:
            logger.debug(f'reopening section [{kind.name}]')
        return ParseState(store.get_or_create(kind.name))
    elif isinstance(kind, KeyValue):
        if not state.active:
            raise errors.LineOutsideSection(raw)
        previous = state.section.set(kind.key, kind.value)
        if previous is not None:
            logger.debug(
                f'[{state.section.name}] {kind.key}: '
                f'overriding {previous!r} with {kind.value!r}')
    return state
