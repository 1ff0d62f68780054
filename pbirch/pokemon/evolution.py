"""Evolution methods."""

from pbirch.enums import Enum, I8, U8, U16, auto, repr_enum
from pbirch.types import Type
from pbirch.veekun import tables
from pbirch.veekun.load import CsvTable
from pbirch.veekun.values import BOOL, Choice, Range


@repr_enum(U8)
class EvolutionTrigger(Enum):
    LevelUp = 1
    Trade = auto()
    UseItem = auto()
    Shed = auto()


@repr_enum(U8)
class Gender(Enum):
    Female = 1
    Male = auto()
    Genderless = auto()


class EvolutionMethod(object):
    """The conditions of one way a species evolves.

    Conditions that don't apply are None (or False for the flags).  Item,
    location, move and species conditions are Veekun IDs.
    """

    def __init__(self, id, trigger, trigger_item_id=None, minimum_level=None,
                 gender=None, location_id=None, held_item_id=None,
                 time_of_day=None, known_move_id=None, known_move_type=None,
                 minimum_happiness=None, minimum_beauty=None,
                 minimum_affection=None, relative_physical_stats=None,
                 party_species_id=None, party_type=None,
                 trade_species_id=None, needs_overworld_rain=False,
                 turn_upside_down=False):
        self.id = id
        self.trigger = trigger
        self.trigger_item_id = trigger_item_id
        self.minimum_level = minimum_level
        self.gender = gender
        self.location_id = location_id
        self.held_item_id = held_item_id
        self.time_of_day = time_of_day
        self.known_move_id = known_move_id
        self.known_move_type = known_move_type
        self.minimum_happiness = minimum_happiness
        self.minimum_beauty = minimum_beauty
        self.minimum_affection = minimum_affection
        self.relative_physical_stats = relative_physical_stats
        self.party_species_id = party_species_id
        self.party_type = party_type
        self.trade_species_id = trade_species_id
        self.needs_overworld_rain = needs_overworld_rain
        self.turn_upside_down = turn_upside_down

    def __repr__(self):
        return "<EvolutionMethod {0}: {1}>".format(self.id, self.trigger.name)


class EvolvesFrom(object):
    """The species a species evolves from, and every way it does."""

    def __init__(self, from_id, methods):
        self.from_id = from_id
        self.methods = methods

    def __repr__(self):
        return "<EvolvesFrom {0}: {1!r}>".format(self.from_id, self.methods)


class EvolutionTable(CsvTable):
    """Evolution methods, by evolved species ID, in file order."""

    source = tables.pokemon_evolution

    def __init__(self):
        self.methods = {}
        self.lines = {}

    def load_csv_record(self, record):
        species_id = record.field('evolved_species_id', U16)
        method = EvolutionMethod(
            id=record.field('id', U16),
            trigger=record.field('evolution_trigger_id', EvolutionTrigger),
            trigger_item_id=record.field('trigger_item_id', U16),
            minimum_level=record.field('minimum_level', U8),
            gender=record.field('gender_id', Gender),
            location_id=record.field('location_id', U16),
            held_item_id=record.field('held_item_id', U16),
            time_of_day=record.field('time_of_day', Choice('day', 'night')),
            known_move_id=record.field('known_move_id', U16),
            known_move_type=record.field('known_move_type_id', Type),
            minimum_happiness=record.field('minimum_happiness', U8),
            minimum_beauty=record.field('minimum_beauty', U8),
            minimum_affection=record.field('minimum_affection', U8),
            relative_physical_stats=record.field(
                'relative_physical_stats', Range(I8, -1, 1)),
            party_species_id=record.field('party_species_id', U16),
            party_type=record.field('party_type_id', Type),
            trade_species_id=record.field('trade_species_id', U16),
            needs_overworld_rain=record.field('needs_overworld_rain', BOOL),
            turn_upside_down=record.field('turn_upside_down', BOOL),
        )
        self.methods.setdefault(species_id, []).append(method)
        self.lines.setdefault(species_id, record.line)
