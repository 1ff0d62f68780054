"""The layouts of the Veekun CSV files pbirch loads.

Each file is described by a SQLAlchemy table whose columns are in the same
order as the fields of the file.  The loader uses these to check headers, to
find fields by name, and to know which fields may be empty.

A table's CSV file is named after it: `items` is read from `items.csv`.
"""

from sqlalchemy import Column, ForeignKey, MetaData, Table
from sqlalchemy.types import Boolean, Enum, Integer, Unicode

metadata = MetaData()


def _identifier():
    return Column('identifier', Unicode(79), nullable=False,
        doc="An identifier, lowercase and hyphenated")


abilities = Table('abilities', metadata,
    Column('id', Integer, primary_key=True, nullable=False,
        doc="This ability's unique ID; Conquest abilities are above 10000"),
    _identifier(),
    Column('generation_id', Integer, nullable=False,
        doc="The ID of the generation this ability was introduced in"),
    Column('is_main_series', Boolean, nullable=False,
        doc="True iff the ability exists in the main series"),
)

berries = Table('berries', metadata,
    Column('id', Integer, primary_key=True, nullable=False,
        doc="This Berry's in-game number"),
    Column('item_id', Integer, ForeignKey('items.id'), nullable=False,
        doc="The ID of the item that represents this Berry"),
    Column('firmness_id', Integer, nullable=False,
        doc="The ID of this Berry's firmness category"),
    Column('natural_gift_power', Integer, nullable=True,
        doc="Natural Gift's power when used with this Berry"),
    Column('natural_gift_type_id', Integer, nullable=True,
        doc="The ID of the Type that Natural Gift has when used with this Berry"),
    Column('size', Integer, nullable=False,
        doc="The size of this Berry, in millimeters"),
    Column('max_harvest', Integer, nullable=False,
        doc="The maximum number of these berries that can grow on one tree in Generation IV"),
    Column('growth_time', Integer, nullable=False,
        doc="Time it takes the tree to grow one stage, in hours.  Berry trees go through four of these growth stages before they can be picked."),
    Column('soil_dryness', Integer, nullable=False,
        doc="The speed at which this Berry dries out the soil as it grows.  A higher rate means the soil dries more quickly."),
    Column('smoothness', Integer, nullable=False,
        doc="The smoothness of this Berry, used in making Pokéblocks or Poffins"),
)

berry_flavors = Table('berry_flavors', metadata,
    Column('berry_id', Integer, ForeignKey('berries.id'), primary_key=True, nullable=False,
        doc="The ID of the berry"),
    Column('contest_type_id', Integer, primary_key=True, nullable=False,
        doc="The ID of the flavor"),
    Column('flavor', Integer, nullable=False,
        doc="The level of the flavor in the berry"),
)

item_flag_map = Table('item_flag_map', metadata,
    Column('item_id', Integer, ForeignKey('items.id'), primary_key=True, nullable=False,
        doc="The ID of the item"),
    Column('item_flag_id', Integer, primary_key=True, nullable=False,
        doc="The ID of the item flag"),
)

items = Table('items', metadata,
    Column('id', Integer, primary_key=True, nullable=False,
        doc="A numeric ID"),
    _identifier(),
    Column('category_id', Integer, nullable=False,
        doc="ID of a category this item belongs to"),
    Column('cost', Integer, nullable=False,
        doc="Cost of the item when bought. Items sell for half this price."),
    Column('fling_power', Integer, nullable=True,
        doc="Power of the move Fling when used with this item."),
    Column('fling_effect_id', Integer, nullable=True,
        doc="ID of the fling-effect of the move Fling when used with this item. Note that these are different from move effects."),
)

move_flag_map = Table('move_flag_map', metadata,
    Column('move_id', Integer, ForeignKey('moves.id'), primary_key=True, nullable=False,
        doc="ID of the move"),
    Column('move_flag_id', Integer, primary_key=True, nullable=False,
        doc="ID of the flag"),
)

move_meta = Table('move_meta', metadata,
    Column('move_id', Integer, ForeignKey('moves.id'), primary_key=True, nullable=False,
        doc="A numeric ID"),
    Column('meta_category_id', Integer, nullable=False,
        doc="ID of the move category"),
    Column('meta_ailment_id', Integer, nullable=False,
        doc="ID of the caused ailment"),
    Column('min_hits', Integer, nullable=True,
        doc="Minimum number of hits per use"),
    Column('max_hits', Integer, nullable=True,
        doc="Maximum number of hits per use"),
    Column('min_turns', Integer, nullable=True,
        doc="Minimum number of turns the user is forced to use the move"),
    Column('max_turns', Integer, nullable=True,
        doc="Maximum number of turns the user is forced to use the move"),
    Column('drain', Integer, nullable=False,
        doc="HP drain (if positive) or Recoil damage (if negative), in percent of damage done"),
    Column('healing', Integer, nullable=False,
        doc="Healing, in percent of user's max HP"),
    Column('crit_rate', Integer, nullable=False,
        doc="Critical hit rate bonus"),
    Column('ailment_chance', Integer, nullable=False,
        doc="Chance to cause an ailment, in percent"),
    Column('flinch_chance', Integer, nullable=False,
        doc="Chance to cause flinching, in percent"),
    Column('stat_chance', Integer, nullable=False,
        doc="Chance to cause a stat change, in percent"),
)

move_meta_stat_changes = Table('move_meta_stat_changes', metadata,
    Column('move_id', Integer, ForeignKey('moves.id'), primary_key=True, nullable=False,
        doc="ID of the move"),
    Column('stat_id', Integer, primary_key=True, nullable=False,
        doc="ID of the stat"),
    Column('change', Integer, nullable=False,
        doc="Amount of increase/decrease, in stages"),
)

moves = Table('moves', metadata,
    Column('id', Integer, primary_key=True, nullable=False,
        doc="A numeric ID; Shadow moves are above 10000"),
    _identifier(),
    Column('generation_id', Integer, nullable=False,
        doc="ID of the generation this move first appeared in"),
    Column('type_id', Integer, nullable=False,
        doc="ID of the move's elemental type"),
    Column('power', Integer, nullable=True,
        doc="Base power of the move, null if it does not have a set base power."),
    Column('pp', Integer, nullable=True,
        doc="Base PP (Power Points) of the move, null if not applicable (e.g. Struggle and Shadow moves)."),
    Column('accuracy', Integer, nullable=True,
        doc="Accuracy of the move; NULL means it never misses"),
    Column('priority', Integer, nullable=False,
        doc="The move's priority bracket"),
    Column('target_id', Integer, nullable=False,
        doc="ID of the target (range) of the move"),
    Column('damage_class_id', Integer, nullable=False,
        doc="ID of the damage class (physical/special) of the move"),
    Column('effect_id', Integer, nullable=False,
        doc="ID of the move's effect"),
    Column('effect_chance', Integer, nullable=True,
        doc="The chance for a secondary effect. What this is a chance of is specified by the move's effect."),
    Column('contest_type_id', Integer, nullable=True,
        doc="ID of the move's Contest type (e.g. cool or smart)"),
    Column('contest_effect_id', Integer, nullable=True,
        doc="ID of the move's Contest effect"),
    Column('super_contest_effect_id', Integer, nullable=True,
        doc="ID of the move's Super Contest effect"),
)

nature_battle_style_preferences = Table('nature_battle_style_preferences', metadata,
    Column('nature_id', Integer, primary_key=True, nullable=False,
        doc="ID of the Pokémon's nature"),
    Column('move_battle_style_id', Integer, primary_key=True, nullable=False,
        doc="ID of the battle style"),
    Column('low_hp_preference', Integer, nullable=False,
        doc="Chance of using the move, in percent, if HP is under ½"),
    Column('high_hp_preference', Integer, nullable=False,
        doc="Chance of using the move, in percent, if HP is over ½"),
)

pokemon = Table('pokemon', metadata,
    Column('id', Integer, primary_key=True, nullable=False,
        doc="A numeric ID; alternate forms are above 10000"),
    _identifier(),
    Column('species_id', Integer, ForeignKey('pokemon_species.id'), nullable=True,
        doc="ID of the species this Pokémon belongs to"),
    Column('height', Integer, nullable=False,
        doc="The height of the Pokémon, in tenths of a meter (decimeters)"),
    Column('weight', Integer, nullable=False,
        doc="The weight of the Pokémon, in tenths of a kilogram (hectograms)"),
    Column('base_experience', Integer, nullable=False,
        doc="The base EXP gained when defeating this Pokémon"),
    Column('order', Integer, nullable=False, index=True,
        doc="Order for sorting. Almost national order, except families are grouped together."),
    Column('is_default', Boolean, nullable=False, index=True,
        doc='Set for exactly one pokemon used as the default for each species.'),
)

pokemon_abilities = Table('pokemon_abilities', metadata,
    Column('pokemon_id', Integer, ForeignKey('pokemon.id'), primary_key=True, nullable=False,
        doc="ID of the Pokémon"),
    Column('ability_id', Integer, ForeignKey('abilities.id'), nullable=False,
        doc="ID of the ability"),
    Column('is_hidden', Boolean, nullable=False, index=True,
        doc="Whether this is a hidden ability"),
    Column('slot', Integer, primary_key=True, nullable=False, autoincrement=False,
        doc="The ability slot, i.e. 1 or 2 for gen. IV"),
)

pokemon_egg_groups = Table('pokemon_egg_groups', metadata,
    Column('species_id', Integer, ForeignKey('pokemon_species.id'), primary_key=True, nullable=False, autoincrement=False,
        doc="ID of the species"),
    Column('egg_group_id', Integer, primary_key=True, nullable=False, autoincrement=False,
        doc="ID of the egg group"),
)

pokemon_evolution = Table('pokemon_evolution', metadata,
    Column('id', Integer, primary_key=True, nullable=False,
        doc="A numeric ID"),
    Column('evolved_species_id', Integer, ForeignKey('pokemon_species.id'), nullable=False,
        doc="The ID of the post-evolution species."),
    Column('evolution_trigger_id', Integer, nullable=False,
        doc="The ID of the evolution trigger."),
    Column('trigger_item_id', Integer, ForeignKey('items.id'), nullable=True,
        doc="The ID of the item that must be used on the Pokémon."),
    Column('minimum_level', Integer, nullable=True,
        doc="The minimum level for the Pokémon."),
    Column('gender_id', Integer, nullable=True,
        doc="The ID of the Pokémon's required gender, or None if gender doesn't matter"),
    Column('location_id', Integer, nullable=True,
        doc="The ID of the location the evolution must be triggered at."),
    Column('held_item_id', Integer, ForeignKey('items.id'), nullable=True,
        doc="The ID of the item the Pokémon must hold."),
    Column('time_of_day', Enum('day', 'night', name='pokemon_evolution_time_of_day'), nullable=True,
        doc="The required time of day."),
    Column('known_move_id', Integer, ForeignKey('moves.id'), nullable=True,
        doc="The ID of the move the Pokémon must know."),
    Column('known_move_type_id', Integer, nullable=True,
        doc='The ID of the type the Pokémon must know a move of.'),
    Column('minimum_happiness', Integer, nullable=True,
        doc="The minimum happiness value the Pokémon must have."),
    Column('minimum_beauty', Integer, nullable=True,
        doc="The minimum Beauty value the Pokémon must have."),
    Column('minimum_affection', Integer, nullable=True,
        doc="The minimum number of \"affection\" hearts the Pokémon must have in Pokémon-Amie."),
    Column('relative_physical_stats', Integer, nullable=True,
        doc="If -1, the Pokémon's Attack must be lower than its Defense. If 0, the two must be equal. If 1, Attack must be higher."),
    Column('party_species_id', Integer, ForeignKey('pokemon_species.id'), nullable=True,
        doc="The ID of the species that must be present in the party."),
    Column('party_type_id', Integer, nullable=True,
        doc="The ID of a type that a Pokémon of must be present in the party."),
    Column('trade_species_id', Integer, ForeignKey('pokemon_species.id'), nullable=True,
        doc="The ID of the species for which this one must be traded."),
    Column('needs_overworld_rain', Boolean, nullable=False,
        doc='True iff it needs to be raining outside of battle.'),
    Column('turn_upside_down', Boolean, nullable=False,
        doc='True iff the 3DS needs to be turned upside-down as this Pokémon levels up.'),
)

pokemon_forms = Table('pokemon_forms', metadata,
    Column('id', Integer, primary_key=True, nullable=False,
        doc="A unique ID for this form."),
    _identifier(),
    Column('form_identifier', Unicode(79), nullable=True,
        doc="An identifier of the form, unique among forms of the same species.  May be empty for the default form."),
    Column('pokemon_id', Integer, ForeignKey('pokemon.id'), nullable=False, autoincrement=False,
        doc='The ID of the base Pokémon for this form.'),
    Column('introduced_in_version_group_id', Integer, nullable=True, autoincrement=False,
        doc='The ID of the version group in which this form first appeared.'),
    Column('is_default', Boolean, nullable=False,
        doc='Set for exactly one form used as the default for each pokemon (not necessarily species).'),
    Column('is_battle_only', Boolean, nullable=False,
        doc='Set iff the form can only appear in battle.'),
    Column('is_mega', Boolean, nullable=False,
        doc='Records whether this form is a Mega Evolution.'),
    Column('form_order', Integer, nullable=False, autoincrement=False,
        doc="The order in which forms should be sorted within a species' forms."),
    Column('order', Integer, nullable=False, autoincrement=False,
        doc='The order in which forms should be sorted within all forms.'),
)

pokemon_moves = Table('pokemon_moves', metadata,
    Column('pokemon_id', Integer, ForeignKey('pokemon.id'), nullable=False, index=True,
        doc="ID of the Pokémon"),
    Column('version_group_id', Integer, nullable=False, index=True,
        doc="ID of the version group this applies to"),
    Column('move_id', Integer, ForeignKey('moves.id'), nullable=False, index=True,
        doc="ID of the move"),
    Column('pokemon_move_method_id', Integer, nullable=False, index=True,
        doc="ID of the method this move is learned by"),
    Column('level', Integer, nullable=True, index=True, autoincrement=False,
        doc="Level the move is learned at, if applicable"),
    Column('order', Integer, nullable=True,
        doc="The order which moves learned at the same level are learned in"),
)

pokemon_species = Table('pokemon_species', metadata,
    Column('id', Integer, primary_key=True, nullable=False,
        doc="A numeric ID"),
    _identifier(),
    Column('generation_id', Integer, nullable=True,
        doc="ID of the generation this species first appeared in"),
    Column('evolves_from_species_id', Integer, ForeignKey('pokemon_species.id'), nullable=True,
        doc="The species from which this one evolves"),
    Column('evolution_chain_id', Integer, nullable=False,
        doc="ID of the species' evolution chain (a.k.a. family)"),
    Column('color_id', Integer, nullable=False,
        doc="ID of this Pokémon's Pokédex color, as used for a gimmick search function in the games."),
    Column('shape_id', Integer, nullable=True,
        doc="ID of this Pokémon's body shape, as used for a gimmick search function in the games."),
    Column('habitat_id', Integer, nullable=True,
        doc="ID of this Pokémon's habitat, as used for a gimmick search function in the games."),
    Column('gender_rate', Integer, nullable=False,
        doc="The chance of this Pokémon being female, in eighths; or -1 for genderless"),
    Column('capture_rate', Integer, nullable=False,
        doc="The base capture rate; up to 255"),
    Column('base_happiness', Integer, nullable=True,
        doc="The tameness when caught by a normal ball"),
    Column('is_baby', Boolean, nullable=False,
        doc="True iff the Pokémon is a baby, i.e. a lowest-stage Pokémon that cannot breed but whose evolved form can."),
    Column('hatch_counter', Integer, nullable=True,
        doc="Initial hatch counter: one must walk Y × (hatch_counter + 1) steps before this Pokémon's egg hatches"),
    Column('has_gender_differences', Boolean, nullable=False,
        doc="Set iff the species exhibits enough sexual dimorphism to have separate sets of sprites in Gen IV and beyond."),
    Column('growth_rate_id', Integer, nullable=False,
        doc="ID of the growth rate for this family"),
    Column('forms_switchable', Boolean, nullable=False,
        doc="True iff a particular individual of this species can switch between its different forms."),
    Column('is_legendary', Boolean, nullable=False,
        doc="True iff the Pokémon is a legendary Pokémon."),
    Column('is_mythical', Boolean, nullable=False,
        doc="True iff the Pokémon is a mythical Pokémon."),
    Column('order', Integer, nullable=False, index=True,
        doc="The order in which species should be sorted.  Based on National Dex order, except that families are grouped together and sorted by stage."),
    Column('conquest_order', Integer, nullable=True, index=True,
        doc="The order in which species should be sorted for Pokémon Conquest-related tables."),
)

pokemon_stats = Table('pokemon_stats', metadata,
    Column('pokemon_id', Integer, ForeignKey('pokemon.id'), primary_key=True, nullable=False, autoincrement=False,
        doc="ID of the Pokémon"),
    Column('stat_id', Integer, primary_key=True, nullable=False, autoincrement=False,
        doc="ID of the stat"),
    Column('base_stat', Integer, nullable=False, autoincrement=False,
        doc="The base stat"),
    Column('effort', Integer, nullable=False, autoincrement=False,
        doc="The effort increase in this stat gained when this Pokémon is defeated"),
)

pokemon_types = Table('pokemon_types', metadata,
    Column('pokemon_id', Integer, ForeignKey('pokemon.id'), primary_key=True, nullable=False, autoincrement=False,
        doc="ID of the Pokémon"),
    Column('type_id', Integer, nullable=False,
        doc="ID of the type"),
    Column('slot', Integer, primary_key=True, nullable=False, autoincrement=False,
        doc="The type's slot, 1 or 2, used to sort types if there are two of them"),
)

type_efficacy = Table('type_efficacy', metadata,
    Column('damage_type_id', Integer, primary_key=True, nullable=False, autoincrement=False,
        doc="The ID of the damaging type."),
    Column('target_type_id', Integer, primary_key=True, nullable=False, autoincrement=False,
        doc="The ID of the defending type."),
    Column('damage_factor', Integer, nullable=False,
        doc="The multiplier, as a percentage of damage inflicted."),
)
