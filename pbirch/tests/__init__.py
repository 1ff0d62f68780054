import io
import os

from pbirch.veekun import tables


# test support code
def csv_text(source, rows, header=None):
    """CSV text with a header naming the columns of `source`.

    None fields are written as empty fields.
    """
    if header is None:
        header = list(source.c.keys())
    lines = [','.join(header)]
    for row in rows:
        lines.append(','.join('' if field is None else str(field)
                              for field in row))
    return '\n'.join(lines) + '\n'


def load_rows(table_class, rows):
    """Load a table from in-memory rows."""
    return table_class.from_csv(io.StringIO(csv_text(table_class.source, rows)))


def write_csv(directory, source, rows):
    path = os.path.join(str(directory), source.name + '.csv')
    with open(path, 'w', encoding='utf8', newline='') as f:
        f.write(csv_text(source, rows))
    return path


# A small but complete data set: two items (one a berry), three moves (one
# a Shadow move), one nature's palace preferences, a few type matchups, and
# the Bulbasaur family up to Ivysaur.
SAMPLE_ROWS = {
    tables.type_efficacy: [
        (10, 10, 50),
        (10, 12, 200),
        (1, 8, 0),
    ],
    tables.nature_battle_style_preferences: [
        (1, 1, 61, 61),
        (1, 2, 7, 7),
        (1, 3, 32, 32),
    ],
    tables.items: [
        (126, 'cheri-berry', 3, 20, 10, 3),
        (234, 'leftovers', 12, 200, 10, None),
    ],
    tables.item_flag_map: [
        (126, 1),
        (126, 5),
        (234, 1),
        (234, 5),
        (234, 6),
    ],
    tables.berries: [
        (1, 126, 2, 60, 10, 20, 5, 3, 15, 25),
    ],
    tables.berry_flavors: [
        (1, 1, 10),
        (1, 2, 0),
        (1, 3, 0),
        (1, 4, 0),
        (1, 5, 0),
    ],
    tables.moves: [
        (1, 'pound', 1, 1, 40, 35, 100, 0, 10, 2, 1, None, 5, 1, 5),
        (14, 'swords-dance', 1, 1, None, 20, None, 0, 7, 1, 51, None, 2, 11, None),
        (10001, 'shadow-rush', 3, 10002, 55, None, 100, 0, 10, 2, 10001, None, None, None, None),
    ],
    tables.move_meta: [
        (1, 0, 0, None, None, None, None, 0, 0, 0, 0, 0, 0),
        (14, 2, 0, None, None, None, None, 0, 0, 0, 0, 0, 100),
        (10001, 0, 0, None, None, None, None, 0, 0, 0, 0, 0, 0),
    ],
    tables.move_meta_stat_changes: [
        (14, 2, 2),
    ],
    tables.move_flag_map: [
        (1, 1),
        (1, 4),
        (1, 7),
        (14, 6),
        (10001, 1),
    ],
    tables.abilities: [
        (34, 'chlorophyll', 3, 1),
        (65, 'overgrow', 3, 1),
        (10001, 'mountaineer', 5, 0),
    ],
    tables.pokemon_species: [
        (1, 'bulbasaur', 1, None, 1, 5, 8, 3, 1, 45, 70, 0, 20, 0, 4, 0, 0, 0, 1, None),
        (2, 'ivysaur', 1, 1, 1, 5, 8, 3, 1, 45, 70, 0, 20, 0, 4, 0, 0, 0, 2, None),
    ],
    tables.pokemon: [
        (1, 'bulbasaur', 1, 7, 69, 64, 1, 1),
        (2, 'ivysaur', 2, 10, 130, 142, 2, 1),
    ],
    tables.pokemon_abilities: [
        (1, 65, 0, 1),
        (1, 34, 1, 3),
        (2, 65, 0, 1),
        (2, 34, 1, 3),
    ],
    tables.pokemon_forms: [
        (1, 'bulbasaur', None, 1, 1, 1, 0, 0, 1, 1),
        (2, 'ivysaur', None, 2, 1, 1, 0, 0, 1, 2),
    ],
    tables.pokemon_moves: [
        (1, 11, 33, 1, 1, None),
        (1, 11, 45, 1, 3, None),
        (1, 11, 92, 4, 0, None),
        (2, 11, 33, 1, 1, None),
    ],
    tables.pokemon_stats: [
        (1, 1, 45, 0),
        (1, 2, 49, 0),
        (1, 3, 49, 0),
        (1, 4, 65, 1),
        (1, 5, 65, 0),
        (1, 6, 45, 0),
    ],
    tables.pokemon_types: [
        (1, 12, 1),
        (1, 4, 2),
        (2, 12, 1),
        (2, 4, 2),
    ],
    tables.pokemon_egg_groups: [
        (1, 1),
        (1, 7),
        (2, 1),
        (2, 7),
    ],
    tables.pokemon_evolution: [
        (1, 2, 1, None, 16, None, None, None, None, None, None, None, None, None, None, None, None, None, 0, 0),
    ],
}


def write_sample(directory, **overrides):
    """Write the sample data set to `directory`.

    Keyword arguments replace the rows of the table they name.
    """
    for source, rows in SAMPLE_ROWS.items():
        write_csv(directory, source, overrides.get(source.name, rows))
    return str(directory)
