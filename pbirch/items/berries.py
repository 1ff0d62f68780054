"""Berries and their flavors."""

from pbirch.containers import DenseTable, EntitySuperclass
from pbirch.enums import Enum, U8, U16, auto, repr_enum
from pbirch.natures import Flavor
from pbirch.types import Type
from pbirch.veekun import tables
from pbirch.veekun.load import CsvTable
from pbirch.veekun.values import Id

BERRY_COUNT = 64


@repr_enum(U8)
class BerryFirmness(Enum):
    VerySoft = 1
    Soft = auto()
    Hard = auto()
    VeryHard = auto()
    SuperHard = auto()


def dominant_flavor(intensities):
    """The flavor with the strictly highest intensity, or None.

    `intensities` maps flavors to their intensity; missing flavors count as
    zero.  A tie for the highest intensity, including all zeros, has no
    dominant flavor.
    """
    best = None
    best_value = 0
    for flavor in Flavor:
        value = intensities.get(flavor, 0)
        if value > best_value:
            best = flavor
            best_value = value
        elif value == best_value:
            best = None
    return best


class Berry(EntitySuperclass):
    """A berry, attached to the item it's used as."""

    def __init__(self, id, item_id, firmness, natural_gift_power,
                 natural_gift_type, size, max_harvest, growth_time,
                 soil_dryness, smoothness):
        self.id = id
        self.item_id = item_id
        self.firmness = firmness
        self.natural_gift_power = natural_gift_power
        self.natural_gift_type = natural_gift_type
        self.size = size
        self.max_harvest = max_harvest
        self.growth_time = growth_time
        self.soil_dryness = soil_dryness
        self.smoothness = smoothness
        self.flavors = dict.fromkeys(Flavor, 0)
        self.flavor = None


class BerryFlavorTable(CsvTable):
    """The intensity of each flavor of each berry."""

    source = tables.berry_flavors

    def __init__(self):
        self.flavors = dict((flavor, [0] * BERRY_COUNT) for flavor in Flavor)

    def intensities(self, berry_id):
        return dict((flavor, values[berry_id - 1])
                    for flavor, values in self.flavors.items())

    def load_csv_record(self, record):
        berry_id = record.field('berry_id', Id(BERRY_COUNT))
        flavor = record.field('contest_type_id', Flavor)
        self.flavors[flavor][berry_id - 1] = record.field('flavor', U8)


class BerryTable(CsvTable):
    """All berries, by berry ID."""

    source = tables.berries

    def __init__(self):
        self.berries = DenseTable(BERRY_COUNT)
        self.lines = {}

    @classmethod
    def from_files(cls, berries_file, flavors_file):
        flavors_table = BerryFlavorTable.from_csv_file(flavors_file)
        berries_table = cls.from_csv_file(berries_file)
        berries_table.set_flavors(flavors_table)
        return berries_table

    def set_flavors(self, flavors_table):
        for berry_id, berry in self.berries.items():
            berry.flavors = flavors_table.intensities(berry_id)
            berry.flavor = dominant_flavor(berry.flavors)

    def __getitem__(self, berry_id):
        return self.berries[berry_id]

    def __iter__(self):
        return self.berries.values()

    def __len__(self):
        return len(self.berries)

    def load_csv_record(self, record):
        berry_id = record.field('id', Id(BERRY_COUNT))
        self.berries[berry_id] = Berry(
            id=berry_id,
            item_id=record.field('item_id', U16),
            firmness=record.field('firmness_id', BerryFirmness),
            natural_gift_power=record.field('natural_gift_power', U8, 0),
            natural_gift_type=record.field(
                'natural_gift_type_id', Type, Type.Normal),
            size=record.field('size', U16),
            max_harvest=record.field('max_harvest', U8),
            growth_time=record.field('growth_time', U8),
            soil_dryness=record.field('soil_dryness', U8),
            smoothness=record.field('smoothness', U8),
        )
        self.lines[berry_id] = record.line
