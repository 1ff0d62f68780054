import pytest
parametrize = pytest.mark.parametrize

from pbirch.natures import (
    BattleStyle, ContestType, Flavor, Nature, PalaceTable, Stat)
from pbirch.veekun.load import VeekunError
from pbirch.tests import load_rows


@parametrize(('nature', 'increased', 'decreased', 'liked', 'disliked'), [
    (Nature.Lonely, Stat.Attack, Stat.Defense, Flavor.Spicy, Flavor.Sour),
    (Nature.Adamant, Stat.Attack, Stat.SpecialAttack, Flavor.Spicy, Flavor.Dry),
    (Nature.Bold, Stat.Defense, Stat.Attack, Flavor.Sour, Flavor.Spicy),
    (Nature.Timid, Stat.Speed, Stat.Attack, Flavor.Sweet, Flavor.Spicy),
    (Nature.Modest, Stat.SpecialAttack, Stat.Attack, Flavor.Dry, Flavor.Spicy),
    (Nature.Calm, Stat.SpecialDefense, Stat.Attack, Flavor.Bitter, Flavor.Spicy),
    (Nature.Sassy, Stat.SpecialDefense, Stat.Speed, Flavor.Bitter, Flavor.Sweet),
])
def test_nature_effects(nature, increased, decreased, liked, disliked):
    assert not nature.is_neutral()
    assert nature.increased() is increased
    assert nature.decreased() is decreased
    assert nature.liked() is liked
    assert nature.disliked() is disliked


@parametrize('nature', [Nature.Hardy, Nature.Docile, Nature.Serious,
                        Nature.Bashful, Nature.Quirky])
def test_neutral_natures(nature):
    assert nature.is_neutral()
    assert nature.increased() is None
    assert nature.decreased() is None
    assert nature.liked() is None
    assert nature.disliked() is None


def test_natures_change_different_stats():
    for nature in Nature:
        if not nature.is_neutral():
            assert nature.increased() is not nature.decreased()
            assert nature.liked() is not nature.disliked()


def test_veekun_natures():
    assert Nature.from_veekun(1) is Nature.Hardy
    assert Nature.from_veekun(2) is Nature.Bold
    assert Nature.from_veekun(25) is Nature.Serious
    assert Nature.from_veekun(0) is None
    assert Nature.from_veekun(26) is None
    assert len(set(Nature.from_veekun(i) for i in range(1, 26))) == 25


def test_flavors_and_contest_types():
    for flavor in Flavor:
        assert flavor.contest_type().flavor() is flavor
    assert ContestType.Cool.flavor() is Flavor.Spicy
    assert ContestType.Smart.flavor() is Flavor.Bitter
    assert ContestType.from_veekun(5) is ContestType.Tough
    assert Flavor.from_veekun(5) is Flavor.Sour
    assert Flavor.from_veekun(6) is None


def test_stats():
    assert Stat.from_veekun(1) is Stat.HP
    assert Stat.from_veekun(4) is Stat.SpecialAttack
    assert Stat.from_veekun(6) is Stat.Speed
    assert Stat.from_veekun(9) is None
    assert [stat for stat in Stat if stat.is_permanent()] == [
        Stat.HP, Stat.Attack, Stat.Defense, Stat.Speed,
        Stat.SpecialAttack, Stat.SpecialDefense]


def test_palace_preferences():
    table = load_rows(PalaceTable, [
        (1, 1, 61, 61),
        (1, 2, 7, 7),
        (1, 3, 32, 32),
        (2, 1, 40, 20),
        (2, 2, 35, 70),
        (2, 3, 25, 10),
    ])
    assert table.preference(Nature.Hardy, BattleStyle.Attack, True) == 61
    assert table.preference(Nature.Hardy, BattleStyle.Support, False) == 32
    assert table.preference(Nature.Bold, BattleStyle.Attack, True) == 40
    assert table.preference(Nature.Bold, BattleStyle.Defense, True) == 35
    assert table.preference(Nature.Bold, BattleStyle.Support, True) == 25
    assert table.preference(Nature.Bold, BattleStyle.Defense, False) == 70
    assert table.preference(Nature.Bold, BattleStyle.Support, False) == 10


@parametrize(('support', 'field'), [
    ((1, 3, 31, 32), 2),
    ((1, 3, 33, 32), 2),
    ((1, 3, 32, 31), 3),
    ((1, 3, 32, 33), 3),
])
def test_palace_preferences_sum(support, field):
    with pytest.raises(VeekunError) as excinfo:
        load_rows(PalaceTable, [(1, 1, 61, 61), (1, 2, 7, 7), support])
    assert excinfo.value.line == 4
    assert excinfo.value.field == field
