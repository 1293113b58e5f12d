"""
named sections of key/value settings
"""

__all__ = ("Section", "SectionStore")

from collections.abc import Mapping

from snakeoil.mappings import ImmutableDict

from . import errors


class Section(Mapping):
    """A named group of key/value settings.

    Read-only to consumers; the line parser fills it in via :meth:`set`.
    """

    __slots__ = ('name', '_fields')

    def __init__(self, name: str) -> None:
        self.name = name
        self._fields = {}

    def __getitem__(self, key: str) -> str:
        return self._fields[key]

    def __iter__(self):
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def set(self, key: str, value: str):
        """Set ``key`` to ``value``, returning the value replaced, if any."""
        previous = self._fields.get(key)
        self._fields[key] = value
        return previous

    def __eq__(self, other):
        if not isinstance(other, Section):
            return NotImplemented
        return self.name == other.name and self._fields == other._fields

    __hash__ = None

    def __repr__(self):
        return f'<{self.__class__.__name__} [{self.name}] {self._fields!r}>'


class SectionStore(Mapping):
    """Sections keyed by name, ordered by first sight.

    The store only ever grows: sections are never removed or replaced.
    """

    __slots__ = ('_sections',)

    def __init__(self) -> None:
        self._sections = {}

    def __getitem__(self, name: str) -> Section:
        return self._sections[name]

    def __iter__(self):
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def get_or_create(self, name: str) -> Section:
        section = self._sections.get(name)
        if section is None:
            section = self._sections[name] = Section(name)
        return section

    def lookup(self, section: str, key: str) -> str:
        """Return the value of ``key`` under ``section``.

        :raises NoSuchSection: if ``section`` was never declared.
        :raises NoSuchKey: if ``section`` exists but lacks ``key``.
        """
        try:
            fields = self._sections[section]
        except KeyError:
            raise errors.NoSuchSection(section) from None
        try:
            return fields[key]
        except KeyError:
            raise errors.NoSuchKey(section, key) from None

    def freeze(self) -> ImmutableDict:
        """Immutable snapshot mapping section names to their settings."""
        return ImmutableDict({
            name: ImmutableDict(dict(section))
            for name, section in self._sections.items()})
