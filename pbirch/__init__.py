"""A typed reference database of the Generation I to V ruleset, loaded from
the Veekun Pokédex CSV files.

See :class:`pbirch.pokedex.Pokedex` to load everything at once.
"""
