"""Abilities."""

import logging

from pbirch.containers import DenseTable, EntitySuperclass
from pbirch.enums import U16
from pbirch.veekun import tables, to_pascal_case
from pbirch.veekun.load import SENTINEL_ID, CsvTable
from pbirch.veekun.values import BOOL
from pbirch.versions import Generation

log = logging.getLogger(__name__)

ABILITY_COUNT = 164


class Ability(EntitySuperclass):
    def __init__(self, id, name, generation, is_main_series=True):
        self.id = id
        self.name = name
        self.generation = generation
        self.is_main_series = is_main_series


class AbilityTable(CsvTable):
    """All abilities, by Veekun ID.

    Conquest abilities are left out.
    """

    source = tables.abilities

    def __init__(self):
        self.abilities = DenseTable(ABILITY_COUNT)

    def __getitem__(self, ability_id):
        return self.abilities[ability_id]

    def __contains__(self, ability_id):
        return ability_id in self.abilities

    def __iter__(self):
        return self.abilities.values()

    def __len__(self):
        return len(self.abilities)

    def get(self, ability_id, default=None):
        return self.abilities.get(ability_id, default)

    def load_csv_record(self, record):
        ability_id = record.field('id', U16)
        if ability_id > SENTINEL_ID:
            log.debug("Skipping Conquest ability %d", ability_id)
            return
        if not self.abilities.valid_id(ability_id):
            raise record.error(
                'id', "Ability ID {0} out of range.".format(ability_id))

        self.abilities[ability_id] = Ability(
            id=ability_id,
            name=to_pascal_case(record.text('identifier')),
            generation=record.field('generation_id', Generation),
            is_main_series=record.field('is_main_series', BOOL),
        )
