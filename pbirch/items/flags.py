"""Item bitflags."""

import enum

from pbirch.enums import U8, U16
from pbirch.veekun import tables
from pbirch.veekun.load import CsvTable


class Flags(enum.IntFlag):
    """Miscellaneous bitflags for items."""

    #: The item can stack in the bag.
    Countable = 0x01
    #: The item is consumed when used.
    Consumable = 0x02
    #: The item is usable out of battle.
    UsableOverworld = 0x04
    #: The item is usable in battle.
    UsableInBattle = 0x08
    #: The item can be held by a Pokémon.
    Holdable = 0x10
    #: When held by a Pokémon, the effect applies without active use.
    HoldablePassive = 0x20
    #: When held by a Pokémon, the effect requires active use.
    HoldableActive = 0x40
    #: The item can appear in the Sinnoh Underground.
    Underground = 0x80

    @classmethod
    def from_veekun(cls, value):
        if 1 <= value <= 8:
            return cls(1 << (value - 1))
        return None

Flags.veekun_intermediate = U8


class FlagTable(CsvTable):
    """The flags of each item, by item ID.

    Every row sets one flag; rows for the same item accumulate.
    """

    source = tables.item_flag_map

    def __init__(self):
        self.flags = {}
        self.lines = {}

    def load_csv_record(self, record):
        item_id = record.field('item_id', U16)
        flag = record.field('item_flag_id', Flags)
        self.flags[item_id] = self.flags.get(item_id, Flags(0)) | flag
        self.lines.setdefault(item_id, record.line)
