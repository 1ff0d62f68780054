"""Pokémon species and everything folded into them."""

import logging

from pbirch.abilities import AbilityTable
from pbirch.containers import DenseTable, EntitySuperclass, one_or_two
from pbirch.enums import Enum, I8, U8, U16, auto, repr_enum
from pbirch.pokemon.evolution import (
    EvolutionMethod, EvolutionTable, EvolutionTrigger, EvolvesFrom, Gender)
from pbirch.pokemon.forms import (
    SPECIES_COUNT, Form, Pokemon, PokemonMove, PokemonTable)
from pbirch.veekun import tables, to_pascal_case
from pbirch.veekun.load import CsvTable, csv_path
from pbirch.veekun.values import BOOL, Id, Range
from pbirch.versions import Generation

log = logging.getLogger(__name__)


@repr_enum(U8)
class EggGroup(Enum):
    Monster = 1
    Water1 = auto()
    Bug = auto()
    Flying = auto()
    Ground = auto()
    Fairy = auto()
    Plant = auto()
    Humanshape = auto()
    Water3 = auto()
    Mineral = auto()
    Indeterminate = auto()
    Water2 = auto()
    Ditto = auto()
    Dragon = auto()
    NoEggs = auto()


@repr_enum(U8)
class GrowthRate(Enum):
    Slow = 1
    Medium = auto()
    Fast = auto()
    MediumSlow = auto()
    SlowThenVeryFast = auto()
    FastThenVerySlow = auto()


class Species(EntitySuperclass):
    """A Pokémon species.

    A species groups one or more :class:`~pbirch.pokemon.forms.Pokemon`,
    exactly one of which is the default.  `gender_rate` is the chance of
    being female in eighths, or -1 for genderless species.  `evolves_from`
    is None for species that don't evolve from another.
    """

    def __init__(self, id, name, generation, evolution_chain_id,
                 gender_rate, capture_rate, base_happiness, is_baby,
                 hatch_counter, has_gender_differences, growth_rate,
                 forms_switchable, is_legendary, is_mythical, order):
        self.id = id
        self.name = name
        self.generation = generation
        self.evolution_chain_id = evolution_chain_id
        self.gender_rate = gender_rate
        self.capture_rate = capture_rate
        self.base_happiness = base_happiness
        self.is_baby = is_baby
        self.hatch_counter = hatch_counter
        self.has_gender_differences = has_gender_differences
        self.growth_rate = growth_rate
        self.forms_switchable = forms_switchable
        self.is_legendary = is_legendary
        self.is_mythical = is_mythical
        self.order = order

        self.egg_groups = None
        self.pokemon = []
        self.evolves_from = None

    @property
    def default(self):
        """The default Pokémon of this species."""
        for pokemon in self.pokemon:
            if pokemon.is_default:
                return pokemon
        raise AssertionError(
            "species {0} has no default Pokémon".format(self.id))

    @property
    def types(self):
        return self.default.types

    @property
    def is_genderless(self):
        return self.gender_rate == -1


class EggGroupTable(CsvTable):
    """Egg groups of each species, at most two."""

    source = tables.pokemon_egg_groups

    def __init__(self):
        self.groups = {}
        self.lines = {}

    def load_csv_record(self, record):
        species_id = record.field('species_id', U16)
        egg_group = record.field('egg_group_id', EggGroup)
        groups = self.groups.setdefault(species_id, [])
        if len(groups) == 2:
            raise record.error(
                'egg_group_id',
                "Species {0} has more than two egg groups.".format(species_id))
        groups.append(egg_group)
        self.lines.setdefault(species_id, record.line)


class SpeciesTable(CsvTable):
    """All species, by national Pokédex number."""

    source = tables.pokemon_species

    def __init__(self):
        self.species = DenseTable(SPECIES_COUNT)
        self.lines = {}
        # Species ID -> the species it evolves from; checked against the
        # evolution methods when those are folded in.
        self.parents = {}
        self.abilities = None

    @classmethod
    def from_files(cls, species_file, pokemon_file, abilities_file,
                   pokemon_abilities_file, forms_file, moves_file,
                   stats_file, types_file, egg_groups_file, evolution_file):
        """Load species from the given CSV files, and fold in their
        Pokémon, egg groups and evolutions.
        """
        abilities_table = AbilityTable.from_csv_file(abilities_file)
        pokemon_table = PokemonTable.from_files(
            pokemon_file, abilities_table, pokemon_abilities_file,
            forms_file, moves_file, stats_file, types_file)
        egg_groups_table = EggGroupTable.from_csv_file(egg_groups_file)
        evolution_table = EvolutionTable.from_csv_file(evolution_file)

        species_table = cls.from_csv_file(species_file)
        species_table.abilities = abilities_table
        species_table.set_pokemon(pokemon_table)
        species_table.set_egg_groups(egg_groups_table)
        species_table.set_evolutions(evolution_table)
        return species_table

    @classmethod
    def from_directory(cls, directory):
        return cls.from_files(*[
            csv_path(directory, source) for source in (
                tables.pokemon_species,
                tables.pokemon,
                tables.abilities,
                tables.pokemon_abilities,
                tables.pokemon_forms,
                tables.pokemon_moves,
                tables.pokemon_stats,
                tables.pokemon_types,
                tables.pokemon_egg_groups,
                tables.pokemon_evolution,
            )
        ])

    def __getitem__(self, species_id):
        return self.species[species_id]

    def __iter__(self):
        return self.species.values()

    def __len__(self):
        return len(self.species)

    def get(self, species_id, default=None):
        return self.species.get(species_id, default)

    def set_pokemon(self, pokemon_table):
        for pokemon in pokemon_table:
            species = None
            if pokemon.species_id is not None:
                species = self.species.get(pokemon.species_id)
            if species is None:
                raise pokemon_table.error(
                    pokemon_table.lines[pokemon.id], 'species_id',
                    "No species with ID {0}.".format(pokemon.species_id))
            species.pokemon.append(pokemon)

        for species_id, species in self.species.items():
            if not species.pokemon:
                raise self.error(
                    self.lines[species_id], 'id',
                    "Species {0} has no Pokémon.".format(species_id))
            if not any(pokemon.is_default for pokemon in species.pokemon):
                raise self.error(
                    self.lines[species_id], 'id',
                    "Species {0} has no default Pokémon.".format(species_id))
        log.debug("Attached %d Pokémon", len(pokemon_table))

    def set_egg_groups(self, egg_groups_table):
        for species_id, groups in egg_groups_table.groups.items():
            species = self.species.get(species_id)
            if species is None:
                raise egg_groups_table.error(
                    egg_groups_table.lines[species_id], 'species_id',
                    "No species with ID {0}.".format(species_id))
            second = groups[1] if len(groups) == 2 else None
            species.egg_groups = one_or_two(groups[0], second)

        for species_id, species in self.species.items():
            if species.egg_groups is None:
                raise self.error(
                    self.lines[species_id], 'id',
                    "Species {0} has no egg groups.".format(species_id))

    def set_evolutions(self, evolution_table):
        for species_id, methods in evolution_table.methods.items():
            line = evolution_table.lines[species_id]
            species = self.species.get(species_id)
            if species is None:
                raise evolution_table.error(
                    line, 'evolved_species_id',
                    "No species with ID {0}.".format(species_id))
            from_id = self.parents.get(species_id)
            if from_id is None:
                raise evolution_table.error(
                    line, 'evolved_species_id',
                    "Species {0} doesn't evolve from any species."
                    .format(species_id))
            species.evolves_from = EvolvesFrom(from_id, methods)

        for species_id, from_id in self.parents.items():
            if from_id not in self.species:
                raise self.error(
                    self.lines[species_id], 'evolves_from_species_id',
                    "No species with ID {0}.".format(from_id))
            if species_id not in evolution_table.methods:
                raise self.error(
                    self.lines[species_id], 'evolves_from_species_id',
                    "Species {0} has no evolution method.".format(species_id))

    def load_csv_record(self, record):
        species_id = record.field('id', Id(SPECIES_COUNT))
        evolves_from_id = record.field(
            'evolves_from_species_id', Id(SPECIES_COUNT))
        if evolves_from_id is not None:
            self.parents[species_id] = evolves_from_id

        self.species[species_id] = Species(
            id=species_id,
            name=to_pascal_case(record.text('identifier')),
            generation=record.field('generation_id', Generation),
            evolution_chain_id=record.field('evolution_chain_id', U16),
            gender_rate=record.field('gender_rate', Range(I8, -1, 8)),
            capture_rate=record.field('capture_rate', U8),
            base_happiness=record.field('base_happiness', U8, 0),
            is_baby=record.field('is_baby', BOOL),
            hatch_counter=record.field('hatch_counter', U8, 0),
            has_gender_differences=record.field(
                'has_gender_differences', BOOL),
            growth_rate=record.field('growth_rate_id', GrowthRate),
            forms_switchable=record.field('forms_switchable', BOOL),
            is_legendary=record.field('is_legendary', BOOL),
            is_mythical=record.field('is_mythical', BOOL),
            order=record.field('order', U16),
        )
        self.lines[species_id] = record.line
