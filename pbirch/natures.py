"""Natures, stats, flavors, and Battle Palace preferences."""

from pbirch.enums import Enum, I8, U8, repr_enum
from pbirch.veekun import tables
from pbirch.veekun.load import CsvTable

NATURE_COUNT = 25

# Stats changeable in battle, i.e. all but HP.
CHANGEABLE_STATS = 7

# Stats a Pokémon keeps outside of battle.
PERMANENT_STATS = 6


@repr_enum(U8)
class BattleStyle(Enum):
    """The Battle Palace style of a move."""

    Attack = 1
    Defense = 2
    Support = 3


@repr_enum(U8)
class ContestType(Enum):
    Cool = 0
    Tough = 1
    Cute = 2
    Beauty = 3
    Smart = 4

    @classmethod
    def from_veekun(cls, value):
        return _veekun_contest_types.get(value)

    def flavor(self):
        """The flavor corresponding to this contest condition."""
        return Flavor(self.repr())

_veekun_contest_types = {
    1: ContestType.Cool,
    2: ContestType.Beauty,
    3: ContestType.Cute,
    4: ContestType.Smart,
    5: ContestType.Tough,
}


@repr_enum(U8)
class Flavor(Enum):
    Spicy = 0
    Sour = 1
    Sweet = 2
    Dry = 3
    Bitter = 4

    @classmethod
    def from_veekun(cls, value):
        # Veekun identifies flavors by their contest types.
        contest_type = ContestType.from_veekun(value)
        if contest_type is None:
            return None
        return contest_type.flavor()

    def contest_type(self):
        """The contest condition corresponding to this flavor."""
        return ContestType(self.repr())


@repr_enum(I8, veekun=U8)
class Stat(Enum):
    HP = -1
    Attack = 0
    Defense = 1
    Speed = 2
    SpecialAttack = 3
    SpecialDefense = 4
    Accuracy = 5
    Evasion = 6

    @classmethod
    def from_veekun(cls, value):
        return _veekun_stats.get(value)

    def is_permanent(self):
        """True for the six stats every Pokémon has outside of battle."""
        return self.repr() < PERMANENT_STATS - 1

_veekun_stats = {
    1: Stat.HP,
    2: Stat.Attack,
    3: Stat.Defense,
    4: Stat.SpecialAttack,
    5: Stat.SpecialDefense,
    6: Stat.Speed,
    7: Stat.Accuracy,
    8: Stat.Evasion,
}


@repr_enum(U8)
class Nature(Enum):
    """A Pokémon's nature, in game order.

    A nature's value is 5 * its increased stat + its decreased stat, counting
    from Attack; natures on the diagonal are neutral.
    """

    Hardy = 0
    Lonely = 1
    Brave = 2
    Adamant = 3
    Naughty = 4
    Bold = 5
    Docile = 6
    Relaxed = 7
    Impish = 8
    Lax = 9
    Timid = 10
    Hasty = 11
    Serious = 12
    Jolly = 13
    Naive = 14
    Modest = 15
    Mild = 16
    Quiet = 17
    Bashful = 18
    Rash = 19
    Calm = 20
    Gentle = 21
    Sassy = 22
    Careful = 23
    Quirky = 24

    @classmethod
    def from_veekun(cls, value):
        return _veekun_natures.get(value)

    def is_neutral(self):
        return self.repr() % 6 == 0

    def increased(self):
        """The stat this nature raises by 10%, or None if neutral."""
        if self.is_neutral():
            return None
        return Stat(self.repr() // 5)

    def decreased(self):
        """The stat this nature lowers by 10%, or None if neutral."""
        if self.is_neutral():
            return None
        return Stat(self.repr() % 5)

    def liked(self):
        """The flavor Pokémon of this nature like, or None if neutral."""
        if self.is_neutral():
            return None
        return Flavor(self.repr() // 5)

    def disliked(self):
        """The flavor Pokémon of this nature dislike, or None if neutral."""
        if self.is_neutral():
            return None
        return Flavor(self.repr() % 5)

_veekun_natures = {
    1: Nature.Hardy,
    2: Nature.Bold,
    3: Nature.Modest,
    4: Nature.Calm,
    5: Nature.Timid,
    6: Nature.Lonely,
    7: Nature.Docile,
    8: Nature.Mild,
    9: Nature.Gentle,
    10: Nature.Hasty,
    11: Nature.Adamant,
    12: Nature.Impish,
    13: Nature.Bashful,
    14: Nature.Careful,
    15: Nature.Rash,
    16: Nature.Jolly,
    17: Nature.Naughty,
    18: Nature.Lax,
    19: Nature.Quirky,
    20: Nature.Naive,
    21: Nature.Brave,
    22: Nature.Relaxed,
    23: Nature.Quiet,
    24: Nature.Sassy,
    25: Nature.Serious,
}


class PalaceTable(CsvTable):
    """Battle Palace move style preferences of each nature.

    Attack and Defense preferences are stored, per HP tier; Support is
    whatever remains of 100%.  The Support rows are only checked.
    """

    source = tables.nature_battle_style_preferences

    def __init__(self):
        self.low_attack = [0] * NATURE_COUNT
        self.low_defense = [0] * NATURE_COUNT
        self.high_attack = [0] * NATURE_COUNT
        self.high_defense = [0] * NATURE_COUNT

    def preference(self, nature, style, low_hp):
        """The chance, in percent, that a Pokémon of the given nature picks
        a move of the given style.

        `low_hp` selects the preferences used under half HP.
        """
        i = nature.repr()
        if low_hp:
            attack, defense = self.low_attack[i], self.low_defense[i]
        else:
            attack, defense = self.high_attack[i], self.high_defense[i]
        if style == BattleStyle.Attack:
            return attack
        elif style == BattleStyle.Defense:
            return defense
        return 100 - attack - defense

    def load_csv_record(self, record):
        i = record.field('nature_id', Nature).repr()
        style = record.field('move_battle_style_id', BattleStyle)
        low = record.field('low_hp_preference', U8)
        high = record.field('high_hp_preference', U8)

        if style == BattleStyle.Attack:
            self.low_attack[i] = low
            self.high_attack[i] = high
        elif style == BattleStyle.Defense:
            self.low_defense[i] = low
            self.high_defense[i] = high
        else:
            debug = "Preferences must sum to 100."
            if self.low_attack[i] + self.low_defense[i] + low != 100:
                raise record.error('low_hp_preference', debug)
            if self.high_attack[i] + self.high_defense[i] + high != 100:
                raise record.error('high_hp_preference', debug)
