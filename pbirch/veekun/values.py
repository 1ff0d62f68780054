"""Decoding of single Veekun CSV fields into typed values.

A *kind* is anything with a `veekun_intermediate` (an object with a
`parse(text)` method returning a primitive) and a `from_veekun(value)`
method turning that primitive into the typed value, or None if the
primitive isn't valid.  Integer types and enumerations are kinds; this
module adds a few more.
"""

from pbirch.enums import U8, U16, I8


class ReprError(ValueError):
    """A single CSV field could not be decoded."""


class ParseError(ReprError):
    """The CSV field could not be parsed as the intermediate type."""

    def __init__(self, cause):
        ReprError.__init__(self, cause)
        self.cause = cause

    def __repr__(self):
        return "ParseError({0!r})".format(str(self.cause))

    def __str__(self):
        return "The CSV field could not be parsed: {0}".format(self.cause)


class InvalidValue(ReprError):
    """The parsed intermediate value isn't a valid representation."""

    def __init__(self, value):
        ReprError.__init__(self, value)
        self.value = value

    def __repr__(self):
        return "InvalidValue({0!r})".format(self.value)

    def __str__(self):
        return "The parsed value {0!r} is invalid.".format(self.value)


def is_blank(field):
    return not field or field.isspace()


def from_veekun_field(kind, field, default=None):
    """Decode a CSV field.

    If the field can't be parsed, but is blank and a `default` is given, the
    default is returned instead.
    """
    try:
        value = kind.veekun_intermediate.parse(field)
    except ValueError as e:
        if default is not None and is_blank(field):
            return default
        raise ParseError(e) from e
    result = kind.from_veekun(value)
    if result is None:
        raise InvalidValue(value)
    return result


def nullable_from_veekun_field(kind, field):
    """Decode a CSV field in which a blank means absence (None)."""
    if is_blank(field):
        return None
    return from_veekun_field(kind, field)


class _Text(object):
    """Raw text; never fails."""

    @property
    def veekun_intermediate(self):
        return self

    def parse(self, text):
        return text

    def from_veekun(self, value):
        return value

    def __repr__(self):
        return 'TEXT'

TEXT = _Text()


class _Bool(object):
    """Veekun booleans are 0 or 1."""

    veekun_intermediate = U8

    def from_veekun(self, value):
        return {0: False, 1: True}.get(value)

    def __repr__(self):
        return 'BOOL'

BOOL = _Bool()


class Range(object):
    """An integer in a closed range."""

    def __init__(self, intermediate, low, high):
        self.veekun_intermediate = intermediate
        self.low = low
        self.high = high

    def from_veekun(self, value):
        if self.low <= value <= self.high:
            return value
        return None

    def __repr__(self):
        return "Range({0!r}, {1}, {2})".format(
            self.veekun_intermediate, self.low, self.high)


class Id(Range):
    """A Veekun ID into a dense table of `count` rows."""

    def __init__(self, count, intermediate=U16):
        Range.__init__(self, intermediate, 1, count)


class Choice(object):
    """One of a fixed set of strings."""

    veekun_intermediate = TEXT

    def __init__(self, *choices):
        self.choices = choices

    def from_veekun(self, value):
        if value in self.choices:
            return value
        return None

    def __repr__(self):
        return "Choice{0!r}".format(self.choices)


PERCENT = Range(U8, 0, 100)
STAGE = Range(I8, -6, 6)
