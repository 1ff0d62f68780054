import pytest

from pbirch.containers import DenseTable, EntitySuperclass, OneOrTwo, one_or_two


def test_dense_table():
    table = DenseTable(3)
    table[1] = 'a'
    table[3] = 'c'
    assert len(table) == 2
    assert list(table) == [1, 3]
    assert list(table.items()) == [(1, 'a'), (3, 'c')]
    assert list(table.values()) == ['a', 'c']
    assert table[3] == 'c'
    assert 1 in table
    assert 2 not in table
    assert table.get(2) is None
    assert table.get(4, 'x') == 'x'
    with pytest.raises(KeyError):
        table[2]
    with pytest.raises(KeyError):
        table[0]
    with pytest.raises(KeyError):
        table[4] = 'd'


def test_one_or_two():
    assert one_or_two(None, None) is None
    assert one_or_two(1, None) == OneOrTwo(1)
    assert one_or_two(None, 2) == OneOrTwo(2)
    assert one_or_two(1, 2) == OneOrTwo(1, 2)
    assert OneOrTwo(1, 2) != OneOrTwo(2, 1)


def test_one_or_two_contents():
    one = OneOrTwo('grass')
    two = OneOrTwo('grass', 'poison')
    assert (len(one), len(two)) == (1, 2)
    assert list(two) == ['grass', 'poison']
    assert 'poison' in two
    assert 'poison' not in one
    assert repr(one) == "One('grass')"
    assert repr(two) == "Two('grass', 'poison')"
    assert hash(two) == hash(OneOrTwo('grass', 'poison'))


def test_entity_repr():
    class Thing(EntitySuperclass):
        def __init__(self, id, name=None):
            self.id = id
            if name is not None:
                self.name = name

    assert repr(Thing(1, 'Pound')).endswith('Thing object (1): Pound>')
    assert repr(Thing(2)).endswith('Thing object (2)>')
