"""
multi-file ini reader
"""

__all__ = ("PendingFile", "OpenFile", "ConfigReader")

import typing
from collections import namedtuple
from contextlib import ExitStack

from snakeoil.mappings import ImmutableDict

from . import errors
from .lineparser import ParseState, parse_line
from .log import logger
from .sections import SectionStore

# a configured path that hasn't been acquired yet
PendingFile = namedtuple("PendingFile", ("path",))
# a path acquired for the duration of a single parse() call
OpenFile = namedtuple("OpenFile", ("path", "handle"))


class ConfigReader:
    """Read a sequence of ini files into a single set of sections.

    Files are parsed in the order given; a section header repeated in a
    later file (or later in the same file) continues the existing section.
    Key/value lines at the top of a file continue whichever section was
    active at the end of the previous file.

    Construction does no I/O; call :meth:`parse` exactly once, then query
    values with :meth:`get`.
    """

    __slots__ = ('_pending', '_store', '_parsed', 'encoding')

    def __init__(self, paths: typing.Iterable[str], encoding: str = 'utf8') -> None:
        self._pending = tuple(PendingFile(path) for path in paths)
        self._store = SectionStore()
        self._parsed = False
        self.encoding = encoding

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(slot.path for slot in self._pending)

    @property
    def sections(self) -> ImmutableDict:
        """Immutable snapshot of the parsed sections."""
        return self._store.freeze()

    def __contains__(self, section: str) -> bool:
        return section in self._store

    def parse(self) -> None:
        """Parse every configured file.

        :raises AlreadyParsed: if called more than once.
        :raises ConfigIOError: if a file can't be opened or read.
        :raises ConfigError: on the first malformed line in any file.
        """
        if self._parsed:
            raise errors.AlreadyParsed()
        self._parsed = True

        with ExitStack() as stack:
            opened = [self._open(slot, stack) for slot in self._pending]
            state = ParseState()
            for slot in opened:
                state = self._parse_file(slot, state)

    def _open(self, slot: PendingFile, stack: ExitStack) -> OpenFile:
        try:
            handle = stack.enter_context(
                open(slot.path, 'r', encoding=self.encoding, newline='\n'))
        except OSError as e:
            logger.error(f'failed opening {slot.path!r}: {e}')
            raise errors.ConfigIOError(slot.path, e) from e
        return OpenFile(slot.path, handle)

    def _parse_file(self, slot: OpenFile, state: ParseState) -> ParseState:
        logger.debug(f'parsing {slot.path!r}')
        lineno = 0
        try:
            # a line is only ever parsed once it was read in full; a read
            # failure discards whatever was pending
            for lineno, line in enumerate(slot.handle, 1):
                try:
                    line = line.rstrip('\n').removesuffix('\r')
                    state = parse_line(line, state, self._store)
                except errors.LineError as e:
                    raise errors.ConfigError(slot.path, e, lineno) from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f'failed reading {slot.path!r} after line {lineno}: {e}')
            raise errors.ConfigIOError(slot.path, e) from e
        return state

    def get(self, section: str, key: str) -> str:
        """Return the value of ``key`` in ``section``.

        Lookups before a successful :meth:`parse` see an empty store.

        :raises NoSuchSection: if ``section`` was never declared.
        :raises NoSuchKey: if ``section`` exists but lacks ``key``.
        """
        return self._store.lookup(section, key)

    def __repr__(self):
        return f'<{self.__class__.__name__} paths={self.paths!r}>'
