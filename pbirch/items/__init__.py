"""Items, their flags, and berries."""

import logging

from pbirch.containers import EntitySuperclass
from pbirch.enums import Enum, U8, U16, auto, repr_enum
from pbirch.items.berries import Berry, BerryFirmness, BerryTable
from pbirch.items.flags import Flags, FlagTable
from pbirch.veekun import tables, to_pascal_case
from pbirch.veekun.load import CsvTable, csv_path

log = logging.getLogger(__name__)


@repr_enum(U8)
class Category(Enum):
    """Broad item category; only used for organization."""

    #: X *Stat*, Dire Hit, and Guard Spec.
    StatBoosts = 1
    #: Berries that lower EVs and raise happiness; unused in pbirch.
    EffortDrop = auto()
    #: Berries that act as medicine.
    Medicine = auto()
    #: Miscellaneous berries.
    Other = auto()
    #: Berries consumed at quarter HP, generally to boost a stat.
    InAPinch = auto()
    #: Berries that heal 1/8 HP if their flavor is not disliked.
    PickyHealing = auto()
    #: Berries that halve damage of a typed attack, usually only when super
    #: effective.
    TypeProtection = auto()
    #: Berries that are only useful for baking; unused in pbirch.
    BakingOnly = auto()
    #: Items that have no effect, but can be traded for items or moves.
    Collectibles = auto()
    #: Items involved in evolution.
    Evolution = auto()
    #: Non-held items that affect wild battles, and the Escape Rope.
    Spelunking = auto()
    #: Miscellaneous held items.
    HeldItems = auto()
    #: Choice Band, Scarf, and Specs.
    Choice = auto()
    #: Items that add EVs but halve Speed, and the Macho Brace.
    EffortTraining = auto()
    #: Held items that have a negative effect on the holder.
    BadHeldItems = auto()
    #: Various held items useful in training.
    Training = auto()
    #: Arceus type plates.
    Plates = auto()
    #: Held items that only affect a specific species.
    SpeciesSpecific = auto()
    #: Held items that increase the damage of typed moves.
    TypeEnhancement = auto()
    #: Key items from Nintendo events.
    EventItems = auto()
    #: Key items to facilitate various gameplay elements.
    Gameplay = auto()
    #: Key items to facilitate plot advancement.
    PlotAdvancement = auto()
    #: Key items that have code but are unused.
    Unused = auto()
    #: Valuables that can be sold or traded.
    Loot = auto()
    #: Held items which may contain a message for a trade.
    Mail = auto()
    #: Medicines which increase EVs.
    Vitamins = auto()
    #: Medicines which restore HP.
    Healing = auto()
    #: Medicines which restore PP.
    PPRecovery = auto()
    #: Medicines which revive Pokémon from fainting.
    Revival = auto()
    #: Medicines which cure status ailments.
    StatusCures = auto()
    #: Items to be used on soil to affect berry growth.
    Mulch = 32
    #: Poké Balls which have a special effect.
    SpecialBalls = auto()
    #: Poké Balls without any special effect.
    StandardBalls = auto()
    #: Fossils, Honey, and the Odd Keystone.
    DexCompletion = auto()
    #: Held items which raise the holder's contest condition.
    Scarves = auto()
    #: TMs and HMs.
    Machines = auto()
    #: Blue, Red, and Yellow Flutes.
    Flutes = auto()
    #: Poké Balls produced from apricorns.
    ApricornBalls = auto()
    #: Apricorns.
    ApricornBox = auto()
    #: Key items which record Pokéathlon statistics.
    DataCards = auto()
    #: Held items which are consumed, increasing the power of a typed move.
    Jewels = auto()
    #: Wonder Launcher items.
    MiracleShooter = auto()

    def unused(self):
        """True if items of this category have no use in pbirch."""
        return self.repr() in _unused_categories

    def pocket(self):
        """The bag pocket items of this category are stored in."""
        x = self.repr()
        if 9 <= x <= 19 or x in (24, 32, 35, 36, 42):
            return Pocket.Misc
        elif 26 <= x <= 30:
            return Pocket.Medicine
        elif x in (33, 34, 39):
            return Pocket.Pokeballs
        elif x == 37:
            return Pocket.Machines
        elif 2 <= x <= 8:
            return Pocket.Berries
        elif x == 25:
            return Pocket.Mail
        elif x in (1, 38, 43):
            return Pocket.Battle
        elif 20 <= x <= 23 or x in (40, 41):
            return Pocket.Key
        raise AssertionError("category {0!r} has no pocket".format(self))

_unused_categories = frozenset(
    [2, 8, 9, 11, 14, 16] + list(range(20, 27)) + [32, 33, 34, 36]
    + [39, 40, 41, 43])


@repr_enum(U8)
class FlingEffect(Enum):
    """Extra effect when thrown using Fling."""

    BadlyPoison = 1
    Burn = auto()
    ActivateBerry = auto()
    ActivateHerb = auto()
    Paralyze = auto()
    Poison = auto()
    Flinch = auto()


@repr_enum(U8)
class Pocket(Enum):
    """Bag pocket in which items are stored."""

    Misc = 1
    Medicine = auto()
    Pokeballs = auto()
    Machines = auto()
    Berries = auto()
    Mail = auto()
    Battle = auto()
    Key = auto()


class Item(EntitySuperclass):
    """A bag item.

    `fling_power` is None if the item can't be flung, and `fling_effect` is
    None if Fling has no extra effect with it.  `berry` is None unless the
    item is a berry.
    """

    def __init__(self, id, name, category, cost, fling_power=None,
                 fling_effect=None, flags=Flags(0), berry=None):
        self.id = id
        self.name = name
        self.category = category
        self.cost = cost
        self.fling_power = fling_power
        self.fling_effect = fling_effect
        self.flags = flags
        self.berry = berry

    @property
    def pocket(self):
        return self.category.pocket()

    @property
    def unused(self):
        return self.category.unused()


class ItemTable(CsvTable):
    """All items, by Veekun ID."""

    source = tables.items

    def __init__(self):
        self.items = {}
        self.lines = {}

    @classmethod
    def from_files(cls, items_file, flags_file, berries_file, flavors_file):
        """Load items from the given CSV files, and attach their flags and
        berries.
        """
        berries_table = BerryTable.from_files(berries_file, flavors_file)
        flags_table = FlagTable.from_csv_file(flags_file)
        items_table = cls.from_csv_file(items_file)
        items_table.set_flags(flags_table)
        items_table.set_berries(berries_table)
        return items_table

    @classmethod
    def from_directory(cls, directory):
        return cls.from_files(
            csv_path(directory, tables.items),
            csv_path(directory, tables.item_flag_map),
            csv_path(directory, tables.berries),
            csv_path(directory, tables.berry_flavors),
        )

    def set_flags(self, flags_table):
        for item_id, flags in flags_table.flags.items():
            if item_id not in self.items:
                raise flags_table.error(
                    flags_table.lines[item_id], 'item_id',
                    "No item with ID {0}.".format(item_id))
            self.items[item_id].flags = flags
        log.debug("Set flags of %d items", len(flags_table.flags))

    def set_berries(self, berries_table):
        for berry in berries_table:
            item = self.items.get(berry.item_id)
            if item is None:
                raise berries_table.error(
                    berries_table.lines[berry.id], 'item_id',
                    "No item with ID {0}.".format(berry.item_id))
            item.berry = berry
        log.debug("Attached %d berries", len(berries_table))

    def __getitem__(self, item_id):
        return self.items[item_id]

    def __iter__(self):
        return iter(self.items.values())

    def __len__(self):
        return len(self.items)

    def get(self, item_id, default=None):
        return self.items.get(item_id, default)

    def load_csv_record(self, record):
        item_id = record.field('id', U16)
        self.items[item_id] = Item(
            id=item_id,
            name=to_pascal_case(record.text('identifier')),
            category=record.field('category_id', Category),
            cost=record.field('cost', U16),
            fling_power=record.field('fling_power', U8),
            fling_effect=record.field('fling_effect_id', FlingEffect),
        )
        self.lines[item_id] = record.line
