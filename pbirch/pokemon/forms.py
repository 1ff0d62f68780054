"""Pokémon, i.e. the variants of a species, and the tables folded into them.

A species has one or more Pokémon; each Pokémon has its own types,
abilities, stats and moves, and one or more cosmetic forms.
"""

import logging

from pbirch.containers import EntitySuperclass, one_or_two
from pbirch.enums import U8, U16
from pbirch.moves import MOVE_COUNT, LearnMethod
from pbirch.natures import Stat
from pbirch.types import Type
from pbirch.veekun import tables, to_pascal_case
from pbirch.veekun.load import CsvTable
from pbirch.veekun.values import BOOL, Id, Range
from pbirch.versions import VersionGroup

log = logging.getLogger(__name__)

SPECIES_COUNT = 649

PERMANENT_STATS = [stat for stat in Stat if stat.is_permanent()]


class Form(EntitySuperclass):
    """A cosmetic form of a Pokémon.

    `form_name` is None for the default form of a Pokémon without named
    forms.
    """

    def __init__(self, id, name, form_name, pokemon_id, introduced_in,
                 is_default, is_battle_only, is_mega, form_order, order):
        self.id = id
        self.name = name
        self.form_name = form_name
        self.pokemon_id = pokemon_id
        self.introduced_in = introduced_in
        self.is_default = is_default
        self.is_battle_only = is_battle_only
        self.is_mega = is_mega
        self.form_order = form_order
        self.order = order


class PokemonMove(object):
    """A move a Pokémon can learn, and how."""

    __slots__ = ('move_id', 'learn_method', 'level', 'order')

    def __init__(self, move_id, learn_method, level=None, order=None):
        self.move_id = move_id
        self.learn_method = learn_method
        self.level = level
        self.order = order

    def __repr__(self):
        return "<PokemonMove {0} by {1}, level {2}>".format(
            self.move_id, self.learn_method.name, self.level)

    def __eq__(self, other):
        if not isinstance(other, PokemonMove):
            return NotImplemented
        return (
            (self.move_id, self.learn_method, self.level, self.order) ==
            (other.move_id, other.learn_method, other.level, other.order))


class Pokemon(EntitySuperclass):
    """One Pokémon of a species.

    Only filled in completely once the auxiliary tables are folded in by
    :class:`PokemonTable`.
    """

    def __init__(self, id, name, species_id, height, weight,
                 base_experience, order, is_default):
        self.id = id
        self.name = name
        self.species_id = species_id
        self.height = height
        self.weight = weight
        self.base_experience = base_experience
        self.order = order
        self.is_default = is_default

        self.abilities = None
        self.hidden_ability = None
        self.types = None
        self.forms = []
        self.base_stats = dict.fromkeys(PERMANENT_STATS, 0)
        self.effort = dict.fromkeys(PERMANENT_STATS, 0)
        self.moves = {}

    def learnset(self, version_group):
        """The moves this Pokémon can learn in a version group."""
        return self.moves.get(version_group, [])


class _SlotTable(CsvTable):
    """Base for tables filling numbered slots of each Pokémon."""

    slot_count = None

    def __init__(self):
        self.slots = {}
        self.lines = {}

    def set_slot(self, record, pokemon_id, slot, value):
        slots = self.slots.setdefault(pokemon_id, [None] * self.slot_count)
        slots[slot - 1] = (value, record.line)
        self.lines.setdefault(pokemon_id, record.line)


class PokemonAbilityTable(_SlotTable):
    """Abilities of each Pokémon, by slot.  Slot 3 is the hidden ability."""

    source = tables.pokemon_abilities
    slot_count = 3

    def load_csv_record(self, record):
        pokemon_id = record.field('pokemon_id', U16)
        ability_id = record.field('ability_id', U16)
        is_hidden = record.field('is_hidden', BOOL)
        slot = record.field('slot', Range(U8, 1, 3))
        if is_hidden != (slot == 3):
            raise record.error(
                'is_hidden', "Only slot 3 holds a hidden ability.")
        self.set_slot(record, pokemon_id, slot, ability_id)


class TypeTable(_SlotTable):
    """Types of each Pokémon, by slot."""

    source = tables.pokemon_types
    slot_count = 2

    def load_csv_record(self, record):
        pokemon_id = record.field('pokemon_id', U16)
        type = record.field('type_id', Type)
        slot = record.field('slot', Range(U8, 1, 2))
        self.set_slot(record, pokemon_id, slot, type)


class StatTable(CsvTable):
    """Base stats and effort yields of each Pokémon."""

    source = tables.pokemon_stats

    def __init__(self):
        self.stats = {}
        self.lines = {}

    def load_csv_record(self, record):
        pokemon_id = record.field('pokemon_id', U16)
        stat = record.field('stat_id', Stat)
        if not stat.is_permanent():
            raise record.error(
                'stat_id', "{0} is not a permanent stat.".format(stat.name))
        base_stat = record.field('base_stat', U8)
        effort = record.field('effort', U8)
        self.stats.setdefault(pokemon_id, {})[stat] = (base_stat, effort)
        self.lines.setdefault(pokemon_id, record.line)


class FormTable(CsvTable):
    """Forms of each Pokémon, in file order."""

    source = tables.pokemon_forms

    def __init__(self):
        self.forms = {}
        self.lines = {}

    def load_csv_record(self, record):
        form_id = record.field('id', U16)
        pokemon_id = record.field('pokemon_id', U16)
        form_identifier = record.text('form_identifier')
        form = Form(
            id=form_id,
            name=to_pascal_case(record.text('identifier')),
            form_name=to_pascal_case(form_identifier) or None,
            pokemon_id=pokemon_id,
            introduced_in=record.field(
                'introduced_in_version_group_id', VersionGroup),
            is_default=record.field('is_default', BOOL),
            is_battle_only=record.field('is_battle_only', BOOL),
            is_mega=record.field('is_mega', BOOL),
            form_order=record.field('form_order', U16),
            order=record.field('order', U16),
        )
        self.forms.setdefault(pokemon_id, []).append(form)
        self.lines.setdefault(pokemon_id, record.line)


class LearnsetTable(CsvTable):
    """Moves each Pokémon can learn, by version group, in file order."""

    source = tables.pokemon_moves

    def __init__(self):
        self.moves = {}
        self.lines = {}

    def load_csv_record(self, record):
        pokemon_id = record.field('pokemon_id', U16)
        version_group = record.field('version_group_id', VersionGroup)
        move = PokemonMove(
            move_id=record.field('move_id', Id(MOVE_COUNT)),
            learn_method=record.field('pokemon_move_method_id', LearnMethod),
            level=record.field('level', U8),
            order=record.field('order', U8),
        )
        learnsets = self.moves.setdefault(pokemon_id, {})
        learnsets.setdefault(version_group, []).append(move)
        self.lines.setdefault(pokemon_id, record.line)


class PokemonTable(CsvTable):
    """All Pokémon, by Veekun ID, alternate forms included."""

    source = tables.pokemon

    def __init__(self):
        self.pokemon = {}
        self.lines = {}

    @classmethod
    def from_files(cls, pokemon_file, abilities_table, abilities_file,
                   forms_file, moves_file, stats_file, types_file):
        """Load Pokémon from the given CSV files and fold in their
        abilities, forms, moves, stats and types.

        `abilities_table` is the already loaded
        :class:`pbirch.abilities.AbilityTable` that ability IDs refer to.
        """
        pokemon_abilities = PokemonAbilityTable.from_csv_file(abilities_file)
        forms = FormTable.from_csv_file(forms_file)
        learnsets = LearnsetTable.from_csv_file(moves_file)
        stats = StatTable.from_csv_file(stats_file)
        types = TypeTable.from_csv_file(types_file)

        pokemon_table = cls.from_csv_file(pokemon_file)
        pokemon_table.set_abilities(pokemon_abilities, abilities_table)
        pokemon_table.set_forms(forms)
        pokemon_table.set_moves(learnsets)
        pokemon_table.set_stats(stats)
        pokemon_table.set_types(types)
        return pokemon_table

    def __getitem__(self, pokemon_id):
        return self.pokemon[pokemon_id]

    def __iter__(self):
        return iter(self.pokemon.values())

    def __len__(self):
        return len(self.pokemon)

    def get(self, pokemon_id, default=None):
        return self.pokemon.get(pokemon_id, default)

    def _owner(self, table, pokemon_id):
        pokemon = self.pokemon.get(pokemon_id)
        if pokemon is None:
            raise table.error(
                table.lines[pokemon_id], 'pokemon_id',
                "No Pokémon with ID {0}.".format(pokemon_id))
        return pokemon

    def _check_all(self, attribute, what):
        for pokemon_id, pokemon in self.pokemon.items():
            if getattr(pokemon, attribute) is None:
                raise self.error(
                    self.lines[pokemon_id], 'id',
                    "Pokémon {0} has no {1}.".format(pokemon_id, what))

    def set_abilities(self, pokemon_abilities, abilities_table):
        for pokemon_id, slots in pokemon_abilities.slots.items():
            pokemon = self._owner(pokemon_abilities, pokemon_id)
            abilities = []
            for slot in slots:
                if slot is None:
                    abilities.append(None)
                    continue
                ability_id, line = slot
                ability = abilities_table.get(ability_id)
                if ability is None:
                    raise pokemon_abilities.error(
                        line, 'ability_id',
                        "No ability with ID {0}.".format(ability_id))
                abilities.append(ability)
            pokemon.abilities = one_or_two(abilities[0], abilities[1])
            pokemon.hidden_ability = abilities[2]
        self._check_all('abilities', 'abilities')
        log.debug("Set abilities of %d Pokémon", len(pokemon_abilities.slots))

    def set_types(self, types):
        for pokemon_id, slots in types.slots.items():
            pokemon = self._owner(types, pokemon_id)
            first, second = [slot and slot[0] for slot in slots]
            pokemon.types = one_or_two(first, second)
        self._check_all('types', 'types')
        log.debug("Set types of %d Pokémon", len(types.slots))

    def set_stats(self, stats):
        for pokemon_id, values in stats.stats.items():
            pokemon = self._owner(stats, pokemon_id)
            for stat, (base_stat, effort) in values.items():
                pokemon.base_stats[stat] = base_stat
                pokemon.effort[stat] = effort

    def set_forms(self, forms):
        for pokemon_id, pokemon_forms in forms.forms.items():
            self._owner(forms, pokemon_id).forms = pokemon_forms

    def set_moves(self, learnsets):
        for pokemon_id, moves in learnsets.moves.items():
            self._owner(learnsets, pokemon_id).moves = moves

    def load_csv_record(self, record):
        pokemon_id = record.field('id', U16)
        self.pokemon[pokemon_id] = Pokemon(
            id=pokemon_id,
            name=to_pascal_case(record.text('identifier')),
            species_id=record.field('species_id', Id(SPECIES_COUNT)),
            height=record.field('height', U16),
            weight=record.field('weight', U16),
            base_experience=record.field('base_experience', U16),
            order=record.field('order', U16),
            is_default=record.field('is_default', BOOL),
        )
        self.lines[pokemon_id] = record.line
