import os

import pytest

from pbirch.containers import OneOrTwo
from pbirch.moves import LearnMethod
from pbirch.natures import Stat
from pbirch.pokemon import (
    EggGroup, EggGroupTable, EvolutionTrigger, GrowthRate, PokemonMove,
    SpeciesTable)
from pbirch.pokemon.forms import PokemonAbilityTable
from pbirch.types import Type
from pbirch.veekun import tables
from pbirch.veekun.load import VeekunError
from pbirch.versions import Generation, VersionGroup
from pbirch.tests import SAMPLE_ROWS, load_rows, write_sample


def load_species(tmpdir, **overrides):
    return SpeciesTable.from_directory(write_sample(tmpdir, **overrides))


def load_error(tmpdir, **overrides):
    directory = write_sample(tmpdir, **overrides)
    with pytest.raises(VeekunError) as excinfo:
        SpeciesTable.from_directory(directory)
    return excinfo.value


def test_species(tmpdir):
    species = load_species(tmpdir)
    assert len(species) == 2

    bulbasaur = species[1]
    assert bulbasaur.name == 'Bulbasaur'
    assert bulbasaur.generation is Generation.I
    assert bulbasaur.gender_rate == 1
    assert not bulbasaur.is_genderless
    assert bulbasaur.capture_rate == 45
    assert bulbasaur.base_happiness == 70
    assert bulbasaur.hatch_counter == 20
    assert bulbasaur.growth_rate is GrowthRate.MediumSlow
    assert bulbasaur.egg_groups == OneOrTwo(EggGroup.Monster, EggGroup.Plant)
    assert bulbasaur.evolves_from is None
    assert bulbasaur.types == OneOrTwo(Type.Grass, Type.Poison)


def test_pokemon(tmpdir):
    species = load_species(tmpdir)
    bulbasaur = species[1].default
    assert bulbasaur.name == 'Bulbasaur'
    assert bulbasaur.is_default
    assert bulbasaur.height == 7
    assert bulbasaur.weight == 69
    assert bulbasaur.types.is_two
    assert list(bulbasaur.types) == [Type.Grass, Type.Poison]

    assert len(bulbasaur.abilities) == 1
    assert bulbasaur.abilities.first.name == 'Overgrow'
    assert bulbasaur.hidden_ability.name == 'Chlorophyll'

    assert bulbasaur.base_stats[Stat.HP] == 45
    assert bulbasaur.base_stats[Stat.SpecialAttack] == 65
    assert bulbasaur.effort[Stat.SpecialAttack] == 1
    assert bulbasaur.effort[Stat.Attack] == 0

    [form] = bulbasaur.forms
    assert form.name == 'Bulbasaur'
    assert form.form_name is None
    assert form.introduced_in is VersionGroup.RedBlue


def test_learnsets(tmpdir):
    bulbasaur = load_species(tmpdir)[1].default
    assert bulbasaur.learnset(VersionGroup.BlackWhite) == [
        PokemonMove(33, LearnMethod.LevelUp, 1, None),
        PokemonMove(45, LearnMethod.LevelUp, 3, None),
        PokemonMove(92, LearnMethod.Machine, 0, None),
    ]
    assert bulbasaur.learnset(VersionGroup.RedBlue) == []


def test_missing_stats_default_to_zero(tmpdir):
    ivysaur = load_species(tmpdir)[2].default
    assert set(ivysaur.base_stats.values()) == set([0])
    assert set(ivysaur.effort.values()) == set([0])


def test_evolution(tmpdir):
    ivysaur = load_species(tmpdir)[2]
    assert ivysaur.evolves_from.from_id == 1
    [method] = ivysaur.evolves_from.methods
    assert method.trigger is EvolutionTrigger.LevelUp
    assert method.minimum_level == 16
    assert method.time_of_day is None
    assert not method.needs_overworld_rain


def test_several_evolution_methods(tmpdir):
    evolution = list(SAMPLE_ROWS[tables.pokemon_evolution])
    evolution.append((2, 2, 3, 81, None, None, None, None, 'day', None, None,
                      None, None, None, None, None, None, None, 0, 0))
    ivysaur = load_species(tmpdir, pokemon_evolution=evolution)[2]
    methods = ivysaur.evolves_from.methods
    assert [method.id for method in methods] == [1, 2]
    assert methods[1].trigger is EvolutionTrigger.UseItem
    assert methods[1].trigger_item_id == 81
    assert methods[1].time_of_day == 'day'


def test_single_type(tmpdir):
    species = load_species(tmpdir, pokemon_types=[
        (1, 12, 1),
        (2, 12, 1),
    ])
    assert species[1].types == OneOrTwo(Type.Grass)
    assert not species[1].types.is_two


def test_no_types(tmpdir):
    error = load_error(tmpdir, pokemon_types=[(1, 12, 1)])
    assert error.path.endswith('pokemon.csv')
    assert error.line == 3
    assert error.field == 0


def test_no_abilities(tmpdir):
    error = load_error(tmpdir, pokemon_abilities=[(1, 65, 0, 1)])
    assert error.path.endswith('pokemon.csv')
    assert error.line == 3


def test_unknown_ability(tmpdir):
    directory = write_sample(tmpdir, pokemon_abilities=[
        (1, 65, 0, 1),
        (2, 66, 0, 1),
    ])
    with pytest.raises(VeekunError) as excinfo:
        SpeciesTable.from_directory(directory)
    error = excinfo.value
    assert error.path == os.path.join(directory, 'pokemon_abilities.csv')
    assert error.line == 3
    assert error.field == 1


def test_conquest_abilities_skipped(tmpdir):
    species = load_species(tmpdir)
    assert len(species.abilities) == 2
    assert species.abilities.get(10001) is None


def test_hidden_ability_slot():
    with pytest.raises(VeekunError) as excinfo:
        load_rows(PokemonAbilityTable, [(1, 65, 1, 1)])
    assert excinfo.value.field == 2
    with pytest.raises(VeekunError):
        load_rows(PokemonAbilityTable, [(1, 34, 0, 3)])


def test_pokemon_without_species(tmpdir):
    pokemon = list(SAMPLE_ROWS[tables.pokemon])
    pokemon.append((3, 'venusaur', 3, 20, 1000, 236, 3, 1))
    abilities = list(SAMPLE_ROWS[tables.pokemon_abilities])
    abilities.append((3, 65, 0, 1))
    types = list(SAMPLE_ROWS[tables.pokemon_types])
    types.append((3, 12, 1))
    error = load_error(tmpdir, pokemon=pokemon, pokemon_abilities=abilities,
                       pokemon_types=types)
    assert error.path.endswith('pokemon.csv')
    assert error.line == 4
    assert error.field == 2


def test_species_without_pokemon(tmpdir):
    error = load_error(tmpdir, pokemon=[SAMPLE_ROWS[tables.pokemon][0]],
                       pokemon_abilities=[(1, 65, 0, 1)],
                       pokemon_forms=[SAMPLE_ROWS[tables.pokemon_forms][0]],
                       pokemon_moves=[],
                       pokemon_types=[(1, 12, 1)])
    assert error.path.endswith('pokemon_species.csv')
    assert error.line == 3


def test_egg_groups():
    table = load_rows(EggGroupTable, [(1, 1), (1, 7), (2, 15)])
    assert table.groups == {
        1: [EggGroup.Monster, EggGroup.Plant],
        2: [EggGroup.NoEggs],
    }


def test_single_egg_group(tmpdir):
    species = load_species(tmpdir, pokemon_egg_groups=[
        (1, 1),
        (2, 1),
        (2, 7),
    ])
    assert species[1].egg_groups == OneOrTwo(EggGroup.Monster)


def test_three_egg_groups():
    with pytest.raises(VeekunError) as excinfo:
        load_rows(EggGroupTable, [(1, 1), (1, 7), (1, 2)])
    assert excinfo.value.line == 4
    assert excinfo.value.field == 1


def test_no_egg_groups(tmpdir):
    error = load_error(tmpdir, pokemon_egg_groups=[(1, 1), (1, 7)])
    assert error.path.endswith('pokemon_species.csv')
    assert error.line == 3


def test_evolution_without_parent(tmpdir):
    evolution = list(SAMPLE_ROWS[tables.pokemon_evolution])
    evolution.append((2, 1, 1, None, 5, None, None, None, None, None, None,
                      None, None, None, None, None, None, None, 0, 0))
    error = load_error(tmpdir, pokemon_evolution=evolution)
    assert error.path.endswith('pokemon_evolution.csv')
    assert error.line == 3
    assert error.field == 1


def test_parent_without_evolution(tmpdir):
    error = load_error(tmpdir, pokemon_evolution=[])
    assert error.path.endswith('pokemon_species.csv')
    assert error.line == 3
    assert error.field == 3


def test_unknown_parent(tmpdir):
    species = list(SAMPLE_ROWS[tables.pokemon_species])
    species[1] = species[1][:3] + (3,) + species[1][4:]
    error = load_error(tmpdir, pokemon_species=species)
    assert error.line == 3
    assert error.field == 3


def test_species_without_default_pokemon(tmpdir):
    pokemon = list(SAMPLE_ROWS[tables.pokemon])
    pokemon[1] = pokemon[1][:7] + (0,)
    error = load_error(tmpdir, pokemon=pokemon)
    assert error.path.endswith('pokemon_species.csv')
    assert error.line == 3
    assert error.field == 0


def test_default_pokemon(tmpdir):
    pokemon = list(SAMPLE_ROWS[tables.pokemon])
    pokemon.append((10001, 'ivysaur-alt', 2, 10, 130, 142, 3, 0))
    abilities = list(SAMPLE_ROWS[tables.pokemon_abilities])
    abilities.append((10001, 65, 0, 1))
    types = list(SAMPLE_ROWS[tables.pokemon_types])
    types.append((10001, 11, 1))
    species = load_species(tmpdir, pokemon=[pokemon[0], pokemon[2], pokemon[1]],
                           pokemon_abilities=abilities, pokemon_types=types)
    ivysaur = species[2]
    assert [p.id for p in ivysaur.pokemon] == [10001, 2]
    assert ivysaur.default.id == 2
    assert ivysaur.types == OneOrTwo(Type.Grass, Type.Poison)
