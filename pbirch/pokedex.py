"""Loading every pbirch table at once."""

import logging
import sys

from pbirch.defaults import get_default_csv_dir_with_origin
from pbirch.items import ItemTable
from pbirch.moves import MoveTable
from pbirch.natures import PalaceTable
from pbirch.pokemon import SpeciesTable
from pbirch.types import EfficacyTable

log = logging.getLogger(__name__)


def _get_verbose_prints(verbose):
    """If `verbose` is true, returns two functions: one for printing a
    starting message, and one for printing a success or failure message when
    finished.

    If `verbose` is false, returns no-op functions.
    """

    if not verbose:
        # Return dummies
        def dummy(*args, **kwargs):
            pass

        return dummy, dummy

    def print_start(thing):
        # Truncate to 66 characters, leaving 10 characters for a success
        # or failure message
        truncated_thing = thing[:66]

        # Also, space-pad to keep the cursor in a known column
        num_spaces = 66 - len(truncated_thing)

        print("%s...%s" % (truncated_thing, ' ' * num_spaces), end='')
        sys.stdout.flush()

    def print_done(msg='ok'):
        print(msg)

    return print_start, print_done


class Pokedex(object):
    """Every pbirch table, loaded from one directory of Veekun CSV files."""

    def __init__(self, efficacy, palace, items, moves, species):
        self.efficacy = efficacy
        self.palace = palace
        self.items = items
        self.moves = moves
        self.species = species

    @property
    def abilities(self):
        return self.species.abilities

    @classmethod
    def load(cls, directory=None, verbose=False):
        """Load all tables.

        `directory`
            Directory the CSV files reside in.  Defaults to $PBIRCH_CSV_DIR,
            or the `pbirch` data directory.

        `verbose`
            If set to True, status messages will be printed to stdout.

        The first error found aborts the load.
        """
        print_start, print_done = _get_verbose_prints(verbose)

        if directory is None:
            directory, origin = get_default_csv_dir_with_origin()
            log.info("Using %s CSV directory %s", origin, directory)

        loaded = {}
        for name, load in (
            ('efficacy', EfficacyTable.from_csv_directory),
            ('palace', PalaceTable.from_csv_directory),
            ('items', ItemTable.from_directory),
            ('moves', MoveTable.from_directory),
            ('species', SpeciesTable.from_directory),
        ):
            print_start(name)
            try:
                loaded[name] = load(directory)
            except Exception:
                print_done('failed')
                raise
            print_done()
            log.info("Loaded %s", name)

        return cls(**loaded)
