"""
flat ini configuration reader

Reads one or more ``[section]`` / ``key = value`` files, in order, into a
single set of sections::

    reader = load_config('/etc/app/base.ini', '/etc/app/local.ini')
    reader.get('server', 'port')
"""

__all__ = ("ConfigReader", "load_config")

from .reader import ConfigReader


def load_config(*paths, encoding='utf8'):
    """Parse ``paths`` in order and return the populated :class:`ConfigReader`.

    Exceptions raised while parsing propagate unchanged.
    """
    reader = ConfigReader(paths, encoding=encoding)
    reader.parse()
    return reader
