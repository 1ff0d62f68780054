import pytest

from pbirch.abilities import ABILITY_COUNT
from pbirch.items import Pocket
from pbirch.moves import MOVE_COUNT
from pbirch.natures import BattleStyle, Nature
from pbirch.pokedex import Pokedex
from pbirch.pokemon import SPECIES_COUNT
from pbirch.types import Efficacy, Type
from pbirch.veekun.load import CsvError, VeekunError
from pbirch.tests import write_sample


def test_load(tmpdir):
    pokedex = Pokedex.load(write_sample(tmpdir))
    assert pokedex.efficacy.efficacy(Type.Fire, Type.Grass) is Efficacy.Super
    assert pokedex.palace.preference(
        Nature.Hardy, BattleStyle.Attack, False) == 61
    assert len(pokedex.items) == 2
    assert len(pokedex.moves) == 2
    assert len(pokedex.species) == 2
    assert len(pokedex.abilities) == 2


def test_load_default_directory(tmpdir, monkeypatch):
    monkeypatch.setenv('PBIRCH_CSV_DIR', write_sample(tmpdir))
    pokedex = Pokedex.load()
    assert pokedex.items[234].name == 'Leftovers'


def test_verbose(tmpdir, capsys):
    Pokedex.load(write_sample(tmpdir), verbose=True)
    out, err = capsys.readouterr()
    lines = out.splitlines()
    assert len(lines) == 5
    assert lines[0].startswith('efficacy...')
    assert all(line.endswith('ok') for line in lines)


def test_verbose_failure(tmpdir, capsys):
    directory = write_sample(tmpdir, type_efficacy=[(10, 12, 75)])
    with pytest.raises(VeekunError):
        Pokedex.load(directory, verbose=True)
    out, err = capsys.readouterr()
    assert out.startswith('efficacy...')
    assert out.rstrip().endswith('failed')


def test_missing_file(tmpdir):
    write_sample(tmpdir)
    tmpdir.join('moves.csv').remove()
    with pytest.raises(CsvError) as excinfo:
        Pokedex.load(str(tmpdir))
    assert excinfo.value.path == str(tmpdir.join('moves.csv'))


@pytest.fixture(scope='module')
def pokedex(csv_dir):
    return Pokedex.load(csv_dir)


@pytest.mark.slow
def test_counts(pokedex):
    assert len(pokedex.moves) == MOVE_COUNT
    assert len(pokedex.abilities) == ABILITY_COUNT
    assert len(pokedex.species) == SPECIES_COUNT


@pytest.mark.slow
def test_palace_preferences_sum(pokedex):
    for nature in Nature:
        for low_hp in (False, True):
            total = sum(pokedex.palace.preference(nature, style, low_hp)
                        for style in BattleStyle)
            assert total == 100


@pytest.mark.slow
def test_every_item_has_a_pocket(pokedex):
    for item in pokedex.items:
        assert isinstance(item.pocket, Pocket)


@pytest.mark.slow
def test_every_pokemon_is_complete(pokedex):
    for species in pokedex.species:
        assert species.pokemon
        assert species.egg_groups
        for pokemon in species.pokemon:
            assert pokemon.types
            assert pokemon.abilities


@pytest.mark.slow
def test_evolutions(pokedex):
    ivysaur = pokedex.species[2]
    assert ivysaur.evolves_from.from_id == 1
    assert ivysaur.evolves_from.methods[0].minimum_level == 16
    assert pokedex.species[1].evolves_from is None
