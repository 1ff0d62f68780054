"""Types and type efficacy."""

from pbirch.enums import Enum, I8, U8, repr_enum
from pbirch.veekun import tables
from pbirch.veekun.load import CsvTable

TYPE_COUNT = 17


@repr_enum(I8, veekun=U8)
class Efficacy(Enum):
    """How effective a damaging type is against a target type."""

    Not = -2
    NotVery = -1
    Regular = 0
    Super = 1

    @classmethod
    def from_veekun(cls, value):
        return _efficacy_factors.get(value)

_efficacy_factors = {
    0: Efficacy.Not,
    50: Efficacy.NotVery,
    100: Efficacy.Regular,
    200: Efficacy.Super,
}


@repr_enum(U8)
class Type(Enum):
    """An elemental type, in game order."""

    Normal = 0
    Fighting = 1
    Flying = 2
    Poison = 3
    Ground = 4
    Rock = 5
    Bug = 6
    Ghost = 7
    Steel = 8
    Fire = 9
    Water = 10
    Grass = 11
    Electric = 12
    Psychic = 13
    Ice = 14
    Dragon = 15
    Dark = 16

    @classmethod
    def from_veekun(cls, value):
        # Veekun counts from 1.
        return cls.from_repr(value - 1)


class EfficacyTable(CsvTable):
    """The efficacy of every damaging type against every target type.

    Pairs missing from the CSV file are regularly effective.
    """

    source = tables.type_efficacy

    def __init__(self):
        self.table = [Efficacy.Regular] * (TYPE_COUNT * TYPE_COUNT)

    @staticmethod
    def index(damage, target):
        return damage.repr() * TYPE_COUNT + target.repr()

    def efficacy(self, damage, target):
        return self.table[self.index(damage, target)]

    def load_csv_record(self, record):
        damage = record.field('damage_type_id', Type)
        target = record.field('target_type_id', Type)
        efficacy = record.field('damage_factor', Efficacy)
        self.table[self.index(damage, target)] = efficacy
