"""Move "meta" data: machine-readable details of what moves do."""

import enum

from pbirch.enums import Enum, I8, U8, U16, auto, repr_enum
from pbirch.natures import CHANGEABLE_STATS, Stat
from pbirch.veekun import tables
from pbirch.veekun.load import CsvTable
from pbirch.veekun.values import PERCENT, STAGE


@repr_enum(I8, veekun=I8)
class Ailment(Enum):
    """A status ailment a move can cause."""

    Unknown = -1
    NoAilment = auto()
    Paralysis = auto()
    Sleep = auto()
    Freeze = auto()
    Burn = auto()
    Poison = auto()
    Confusion = auto()
    Infatuation = auto()
    Trap = auto()
    Nightmare = auto()
    Torment = 12
    Disable = auto()
    Yawn = auto()
    HealBlock = auto()
    NoTypeImmunity = 17
    LeechSeed = auto()
    Embargo = auto()
    PerishSong = auto()
    Ingrain = auto()


@repr_enum(U8)
class Category(Enum):
    """A broad classification of what a move does."""

    Damage = 0
    Ailment = auto()
    NetGoodStats = auto()
    Heal = auto()
    DamageAilment = auto()
    Swagger = auto()
    DamageLower = auto()
    DamageRaise = auto()
    DamageHeal = auto()
    OneHitKO = auto()
    WholeFieldEffect = auto()
    FieldEffect = auto()
    ForceSwitch = auto()
    Unique = auto()


class Flags(enum.IntFlag):
    """Miscellaneous bitflags for moves."""

    #: The move makes contact with the target.
    Contact = 1 << 0
    #: The move takes one turn to charge before attacking.
    Charge = 1 << 1
    #: The user must recharge for one turn after attacking.
    Recharge = 1 << 2
    #: The move is blocked by Detect and Protect.
    Protect = 1 << 3
    #: The move is reflected by Magic Coat and Magic Bounce.
    Reflectable = 1 << 4
    #: The move is stolen by Snatch.
    Snatch = 1 << 5
    #: The move is copied by Mirror Move.
    Mirror = 1 << 6
    #: The move is boosted by Iron Fist.
    Punch = 1 << 7
    #: The move is sound-based, so blocked by Soundproof.
    Sound = 1 << 8
    #: The move is unusable under Gravity.
    Gravity = 1 << 9
    #: The move thaws the user if it is frozen.
    Defrost = 1 << 10
    #: The move can target any Pokémon in a Triple Battle.
    Distance = 1 << 11
    #: The move heals, so it is blocked by Heal Block.
    Heal = 1 << 12
    #: The move ignores Substitute.
    Authentic = 1 << 13
    #: The move is a powder move, so Grass Pokémon are immune.
    Powder = 1 << 14
    #: The move is boosted by Strong Jaw.
    Bite = 1 << 15
    #: The move is boosted by Mega Launcher.
    Pulse = 1 << 16
    #: The move is blocked by Bulletproof.
    Ballistic = 1 << 17
    #: The move is blocked by Aroma Veil and cured by Mental Herb.
    Mental = 1 << 18
    #: The move is unusable in a Sky Battle.
    NonSkyBattle = 1 << 19
    #: The move triggers Dancer.
    Dance = 1 << 20

    @classmethod
    def from_veekun(cls, value):
        if 1 <= value <= 21:
            return cls(1 << (value - 1))
        return None

Flags.veekun_intermediate = U8


class Meta(object):
    """Meta data of one move.

    `stat_changes` holds the stage change of each stat but HP, indexed by
    `Stat.repr()`.  Hit and turn counts are None where they don't apply.
    """

    def __init__(self, category, ailment, min_hits=None, max_hits=None,
                 min_turns=None, max_turns=None, drain=0, healing=0,
                 crit_rate=0, ailment_chance=0, flinch_chance=0,
                 stat_chance=0):
        self.category = category
        self.ailment = ailment
        self.min_hits = min_hits
        self.max_hits = max_hits
        self.min_turns = min_turns
        self.max_turns = max_turns
        self.drain = drain
        self.healing = healing
        self.crit_rate = crit_rate
        self.ailment_chance = ailment_chance
        self.flinch_chance = flinch_chance
        self.stat_chance = stat_chance
        self.stat_changes = [0] * CHANGEABLE_STATS

    def __repr__(self):
        return "<Meta {0} {1}>".format(self.category.name, self.ailment.name)

    def stat_change(self, stat):
        return self.stat_changes[stat.repr()]


class MetaTable(CsvTable):
    """Meta data of each move, by move ID."""

    source = tables.move_meta

    def __init__(self):
        self.meta = {}
        self.lines = {}

    @classmethod
    def from_files(cls, meta_file, stat_changes_file):
        stat_changes_table = StatChangeTable.from_csv_file(stat_changes_file)
        meta_table = cls.from_csv_file(meta_file)
        meta_table.set_stat_changes(stat_changes_table)
        return meta_table

    def set_stat_changes(self, stat_changes_table):
        for (move_id, stat), (change, line) in stat_changes_table.changes.items():
            meta = self.meta.get(move_id)
            if meta is None:
                raise stat_changes_table.error(
                    line, 'move_id',
                    "No move meta data with ID {0}.".format(move_id))
            meta.stat_changes[stat.repr()] = change

    def load_csv_record(self, record):
        move_id = record.field('move_id', U16)
        self.meta[move_id] = Meta(
            category=record.field('meta_category_id', Category),
            ailment=record.field('meta_ailment_id', Ailment),
            min_hits=record.field('min_hits', U8),
            max_hits=record.field('max_hits', U8),
            min_turns=record.field('min_turns', U8),
            max_turns=record.field('max_turns', U8),
            drain=record.field('drain', I8),
            healing=record.field('healing', I8),
            crit_rate=record.field('crit_rate', U8),
            ailment_chance=record.field('ailment_chance', PERCENT),
            flinch_chance=record.field('flinch_chance', PERCENT),
            stat_chance=record.field('stat_chance', PERCENT),
        )
        self.lines[move_id] = record.line


class StatChangeTable(CsvTable):
    """Stat stage changes caused by moves.

    `changes` maps (move ID, stat) to (stages, line).
    """

    source = tables.move_meta_stat_changes

    def __init__(self):
        self.changes = {}

    def load_csv_record(self, record):
        move_id = record.field('move_id', U16)
        stat = record.field('stat_id', Stat)
        if stat == Stat.HP:
            raise record.error('stat_id', "HP can't be changed by moves.")
        change = record.field('change', STAGE)
        self.changes[move_id, stat] = (change, record.line)


class FlagTable(CsvTable):
    """The flags of each move, by move ID.

    Every row sets one flag; rows for the same move accumulate.
    """

    source = tables.move_flag_map

    def __init__(self):
        self.flags = {}
        self.lines = {}

    def load_csv_record(self, record):
        move_id = record.field('move_id', U16)
        flag = record.field('move_flag_id', Flags)
        self.flags[move_id] = self.flags.get(move_id, Flags(0)) | flag
        self.lines.setdefault(move_id, record.line)
