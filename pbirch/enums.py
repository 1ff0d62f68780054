"""Closed integer-backed enumerations.

Every enumeration in pbirch is an :class:`Enum` with a fixed backing integer
width, declared with the :func:`repr_enum` decorator::

    @repr_enum(U8)
    class Pocket(Enum):
        Misc = 1
        Medicine = auto()

Members without an explicit discriminant continue from the previous member,
or start at 0.  Declaration problems (duplicate discriminants, discriminants
that don't fit the width) are raised when the class is created, i.e. at
import time.
"""

import enum
import re

from enum import auto

__all__ = [
    'IntType', 'U8', 'U16', 'U32', 'U64', 'U128',
    'I8', 'I16', 'I32', 'I64', 'I128',
    'Enum', 'ExplicitEnum', 'repr_enum', 'auto',
]

_decimal_re = re.compile(r'([+-]?)([0-9]*)\Z')


class IntType(object):
    """A fixed-width integer type.

    Used both as the backing representation of an enumeration and as the
    intermediate primitive parsed out of a CSV field.
    """

    def __init__(self, name, bits, signed):
        self.name = name
        self.bits = bits
        self.signed = signed
        if signed:
            self.min = -(1 << (bits - 1))
            self.max = (1 << (bits - 1)) - 1
        else:
            self.min = 0
            self.max = (1 << bits) - 1

    def __repr__(self):
        return self.name

    def __contains__(self, value):
        return self.min <= value <= self.max

    def __iter__(self):
        return iter(range(self.min, self.max + 1))

    def parse(self, text):
        """Parse plain decimal text.

        Only an optional sign followed by ASCII digits is accepted; no
        surrounding whitespace.
        """
        match = _decimal_re.match(text)
        if not text:
            raise ValueError("cannot parse integer from empty string")
        if match is None or not match.group(2):
            raise ValueError("invalid digit found in string")
        if match.group(1) == '-' and not self.signed:
            raise ValueError("invalid digit found in string")
        value = int(text)
        if value > self.max:
            raise ValueError("number too large to fit in target type")
        if value < self.min:
            raise ValueError("number too small to fit in target type")
        return value

    # An integer type is its own Veekun kind: any value that parses is valid.
    @property
    def veekun_intermediate(self):
        return self

    def from_veekun(self, value):
        return value


U8 = IntType('u8', 8, False)
U16 = IntType('u16', 16, False)
U32 = IntType('u32', 32, False)
U64 = IntType('u64', 64, False)
U128 = IntType('u128', 128, False)
I8 = IntType('i8', 8, True)
I16 = IntType('i16', 16, True)
I32 = IntType('i32', 32, True)
I64 = IntType('i64', 64, True)
I128 = IntType('i128', 128, True)


class Enum(enum.IntEnum):
    """Base class for pbirch enumerations."""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        if last_values:
            return last_values[-1] + 1
        return 0

    def repr(self):
        """The discriminant of this member."""
        return int(self)

    @classmethod
    def from_repr(cls, value):
        """The member with the given discriminant, or None if there isn't
        one.
        """
        try:
            return cls._value2member_map_[value]
        except (KeyError, TypeError):
            return None

    @classmethod
    def from_veekun(cls, value):
        """The member for a Veekun ID.

        Most enumerations share their numbering with Veekun; the ones that
        don't override this.
        """
        return cls.from_repr(value)


class ExplicitEnum(Enum):
    """An enumeration in which every member needs an explicit discriminant.
    """

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        raise TypeError(
            "{0} needs an explicit discriminant".format(name))


def repr_enum(repr_type, veekun=None):
    """Class decorator fixing the backing integer type of an enumeration.

    `veekun` is the primitive parsed out of CSV fields before
    `from_veekun` is called; it defaults to `repr_type`.
    """
    def decorator(cls):
        enum.unique(cls)
        for member in cls:
            if member.value not in repr_type:
                raise ValueError(
                    "discriminant {0} of {1}.{2} does not fit in {3!r}".format(
                        member.value, cls.__name__, member.name, repr_type))
        cls.repr_type = repr_type
        cls.veekun_intermediate = veekun or repr_type
        return cls
    return decorator
