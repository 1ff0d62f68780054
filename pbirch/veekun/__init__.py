"""Support for loading the Veekun Pokédex CSV data."""


def to_pascal_case(identifier):
    """Turn a hyphenated Veekun identifier into a pbirch name.

    >>> to_pascal_case('master-ball')
    'MasterBall'
    """
    return ''.join(word[:1].upper() + word[1:]
                   for word in identifier.split('-'))
