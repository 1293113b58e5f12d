"""Exception roots shared by the flatini reader and lookup errors."""

from snakeoil.cli.exceptions import UserException


class FlatiniException(Exception):
    """Base for everything flatini raises."""


class FlatiniUserException(FlatiniException, UserException):
    """Failure caused by configuration content, printable as-is to users."""
