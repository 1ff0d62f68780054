"""Containers shared by the entity tables."""


class EntitySuperclass(object):
    """Superclass for loaded entities, to give them some generic niceties
    like stringification.
    """

    def __repr__(self):
        """Be as useful as possible.  Show the ID, and a name if we've got
        one.
        """
        typename = '.'.join((type(self).__module__, type(self).__name__))
        try:
            key = self.id
        except AttributeError:
            return "<%s object at %x>" % (typename, id(self))
        try:
            return "<%s object (%s): %s>" % (typename, key, self.name)
        except AttributeError:
            return "<%s object (%s)>" % (typename, key)


class DenseTable(object):
    """A fixed number of rows indexed by Veekun ID, starting at 1.

    Rows that were never set are None, and looking them up raises KeyError
    just like IDs out of range.
    """

    def __init__(self, size):
        self.size = size
        self.rows = [None] * size

    def valid_id(self, id):
        return 1 <= id <= self.size

    def __getitem__(self, id):
        row = self.get(id)
        if row is None:
            raise KeyError(id)
        return row

    def __setitem__(self, id, row):
        if not self.valid_id(id):
            raise KeyError(id)
        self.rows[id - 1] = row

    def get(self, id, default=None):
        if not self.valid_id(id) or self.rows[id - 1] is None:
            return default
        return self.rows[id - 1]

    def __contains__(self, id):
        return self.get(id) is not None

    def __len__(self):
        return sum(1 for row in self.rows if row is not None)

    def __iter__(self):
        """Iterate over the IDs of rows that are set, in order."""
        for index, row in enumerate(self.rows):
            if row is not None:
                yield index + 1

    def items(self):
        for id in self:
            yield id, self.rows[id - 1]

    def values(self):
        for row in self.rows:
            if row is not None:
                yield row


class OneOrTwo(object):
    """One value or two values, never zero or more than two.

    Used for a Pokémon's types and abilities and a species' egg groups.
    """

    __slots__ = ('first', 'second')

    def __init__(self, first, second=None):
        self.first = first
        self.second = second

    @property
    def is_two(self):
        return self.second is not None

    def __iter__(self):
        yield self.first
        if self.second is not None:
            yield self.second

    def __len__(self):
        return 2 if self.is_two else 1

    def __contains__(self, value):
        return value == self.first or (
            self.is_two and value == self.second)

    def __eq__(self, other):
        if not isinstance(other, OneOrTwo):
            return NotImplemented
        return (self.first, self.second) == (other.first, other.second)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.first, self.second))

    def __repr__(self):
        if self.is_two:
            return "Two(%r, %r)" % (self.first, self.second)
        return "One(%r)" % (self.first,)


def one_or_two(first, second):
    """Fold two optional slots into a OneOrTwo.

    Returns None if both slots are empty.  If only the second slot is
    filled, it becomes the only value.
    """
    if first is None:
        if second is None:
            return None
        return OneOrTwo(second)
    return OneOrTwo(first, second)
