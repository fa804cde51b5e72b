"""
Errors raised while loading and parsing game records.
"""


class ResourceMissingError(FileNotFoundError):
    """The input resource could not be located."""


class GameParseError(ValueError):
    """Base class for a line that is not a well-formed game record."""


class MalformedLineError(GameParseError):
    """A delimiter or the `Game` header is missing."""


class InvalidNumberError(GameParseError):
    """An id or amount is not a non-negative integer."""


class UnknownColorError(GameParseError):
    """A color name is not one of red, green or blue."""
