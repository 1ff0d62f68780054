"""Moves and related data."""

import logging

from pbirch.containers import DenseTable, EntitySuperclass
from pbirch.enums import Enum, I8, U8, U16, auto, repr_enum
from pbirch.moves.effects import Effect
from pbirch.moves.meta import Ailment, Category, Flags, FlagTable, Meta, MetaTable
from pbirch.natures import BattleStyle, ContestType
from pbirch.types import Type
from pbirch.veekun import tables, to_pascal_case
from pbirch.veekun.load import SENTINEL_ID, CsvTable, csv_path
from pbirch.veekun.values import PERCENT
from pbirch.versions import Generation

log = logging.getLogger(__name__)

MOVE_COUNT = 559


@repr_enum(U8)
class DamageClass(Enum):
    """The damage class (status, physical, or special) of a move."""

    NonDamaging = 1
    Physical = auto()
    Special = auto()


@repr_enum(U8)
class LearnMethod(Enum):
    """The method by which a Pokémon learns a move."""

    #: Learned at a certain level.
    LevelUp = 1
    #: Known by newly-hatched Pokémon if the father knew it.
    Egg = auto()
    #: Taught by a move tutor.
    Tutor = auto()
    #: Taught using a TM or HM.
    Machine = auto()
    #: Stadium; unused in pbirch.
    StadiumSurfingPikachu = auto()
    #: Known by newly-hatched Pichu if the mother was holding a Light Ball.
    LightBallEgg = auto()
    #: Shadow; unused in pbirch.
    ColosseumPurification = auto()
    #: Shadow; unused in pbirch.
    XDShadow = auto()
    #: Shadow; unused in pbirch.
    XDPurification = auto()
    #: Appears via Rotom form change.
    FormChange = auto()


@repr_enum(U8)
class Target(Enum):
    """The target selection mechanism of a move."""

    #: Target depends on some battle state (Counter, Curse, Mirror Coat, and
    #: Metal Burst).
    SpecificMove = 1
    #: One selected Pokémon (not the user).  Stolen moves reuse the same
    #: target.
    SelectedPokemonReuseStolen = auto()
    #: The user's ally (Helping Hand).
    Ally = auto()
    #: The user side of the field (user and ally).
    UsersField = auto()
    #: Selected user or ally (Acupressure).
    UserOrAlly = auto()
    #: The opposing side of the field (Spikes, Toxic Spikes, and Stealth
    #: Rock).
    OpponentsField = auto()
    #: The user.
    User = auto()
    #: One random opposing Pokémon.
    RandomOpponent = auto()
    #: All Pokémon other than the user.
    AllOtherPokemon = auto()
    #: One selected Pokémon (not the user).
    SelectedPokemon = auto()
    #: All opposing Pokémon.
    AllOpponents = auto()
    #: The entire field.
    EntireField = auto()


class Move(EntitySuperclass):
    """A move is the primary action that a Pokémon can take on its turn.

    `accuracy` is None for moves that can't miss, and `effect_chance` is
    None where the effect isn't a matter of chance.  Moves without a set
    power or PP have 0.  `meta` is None if there is no meta data for the
    move.
    """

    def __init__(self, id, name, generation, type, power, pp, accuracy,
                 priority, target, damage_class, effect, effect_chance=None,
                 contest_type=None, meta=None, flags=Flags(0)):
        self.id = id
        self.name = name
        self.generation = generation
        self.type = type
        self.power = power
        self.pp = pp
        self.accuracy = accuracy
        self.priority = priority
        self.target = target
        self.damage_class = damage_class
        self.effect = effect
        self.effect_chance = effect_chance
        self.contest_type = contest_type
        self.meta = meta
        self.flags = flags


class MoveTable(CsvTable):
    """All moves, by Veekun ID.

    Shadow moves are left out.
    """

    source = tables.moves

    def __init__(self):
        self.moves = DenseTable(MOVE_COUNT)
        self.lines = {}

    @classmethod
    def from_files(cls, moves_file, meta_file, stat_changes_file, flags_file):
        """Load moves from the given CSV files, and attach their meta data
        and flags.
        """
        meta_table = MetaTable.from_files(meta_file, stat_changes_file)
        flags_table = FlagTable.from_csv_file(flags_file)
        moves_table = cls.from_csv_file(moves_file)
        moves_table.set_meta(meta_table)
        moves_table.set_flags(flags_table)
        return moves_table

    @classmethod
    def from_directory(cls, directory):
        return cls.from_files(
            csv_path(directory, tables.moves),
            csv_path(directory, tables.move_meta),
            csv_path(directory, tables.move_meta_stat_changes),
            csv_path(directory, tables.move_flag_map),
        )

    def set_meta(self, meta_table):
        for move_id, meta in meta_table.meta.items():
            if move_id > SENTINEL_ID:
                continue
            if move_id not in self.moves:
                raise meta_table.error(
                    meta_table.lines[move_id], 'move_id',
                    "No move with ID {0}.".format(move_id))
            self.moves[move_id].meta = meta
        log.debug("Set meta data of %d moves", len(meta_table.meta))

    def set_flags(self, flags_table):
        for move_id, flags in flags_table.flags.items():
            if move_id > SENTINEL_ID:
                continue
            if move_id not in self.moves:
                raise flags_table.error(
                    flags_table.lines[move_id], 'move_id',
                    "No move with ID {0}.".format(move_id))
            self.moves[move_id].flags = flags
        log.debug("Set flags of %d moves", len(flags_table.flags))

    def __getitem__(self, move_id):
        return self.moves[move_id]

    def __iter__(self):
        return self.moves.values()

    def __len__(self):
        return len(self.moves)

    def get(self, move_id, default=None):
        return self.moves.get(move_id, default)

    def load_csv_record(self, record):
        move_id = record.field('id', U16)
        if move_id > SENTINEL_ID:
            log.debug("Skipping Shadow move %d", move_id)
            return
        if not self.moves.valid_id(move_id):
            raise record.error('id', "Move ID {0} out of range.".format(move_id))

        self.moves[move_id] = Move(
            id=move_id,
            name=to_pascal_case(record.text('identifier')),
            generation=record.field('generation_id', Generation),
            type=record.field('type_id', Type),
            power=record.field('power', U8, 0),
            pp=record.field('pp', U8, 0),
            accuracy=record.field('accuracy', PERCENT),
            priority=record.field('priority', I8),
            target=record.field('target_id', Target),
            damage_class=record.field('damage_class_id', DamageClass),
            effect=record.field('effect_id', Effect),
            effect_chance=record.field('effect_chance', PERCENT),
            contest_type=record.field('contest_type_id', ContestType),
        )
        self.lines[move_id] = record.line
