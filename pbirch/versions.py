"""Game versions and generations."""

from pbirch.enums import Enum, U8, auto, repr_enum


@repr_enum(U8)
class Generation(Enum):
    I = 1
    II = auto()
    III = auto()
    IV = auto()
    V = auto()


@repr_enum(U8)
class VersionGroup(Enum):
    RedBlue = 1
    Yellow = auto()
    GoldSilver = auto()
    Crystal = auto()
    RubySapphire = auto()
    Emerald = auto()
    FireredLeafgreen = auto()
    DiamondPearl = auto()
    Platinum = auto()
    HeartgoldSoulsilver = auto()
    BlackWhite = auto()
    Colosseum = auto()
    XD = auto()
    BlackWhite2 = auto()

    def generation(self):
        return _group_generations[self]


@repr_enum(U8)
class Version(Enum):
    Red = 1
    Blue = auto()
    Yellow = auto()
    Gold = auto()
    Silver = auto()
    Crystal = auto()
    Ruby = auto()
    Sapphire = auto()
    Emerald = auto()
    Firered = auto()
    Leafgreen = auto()
    Diamond = auto()
    Pearl = auto()
    Platinum = auto()
    Heartgold = auto()
    Soulsilver = auto()
    Black = auto()
    White = auto()
    Colosseum = auto()
    XD = auto()
    Black2 = auto()
    White2 = auto()

    def group(self):
        return _version_groups[self]

    def generation(self):
        return self.group().generation()


_version_groups = {
    Version.Red: VersionGroup.RedBlue,
    Version.Blue: VersionGroup.RedBlue,
    Version.Yellow: VersionGroup.Yellow,
    Version.Gold: VersionGroup.GoldSilver,
    Version.Silver: VersionGroup.GoldSilver,
    Version.Crystal: VersionGroup.Crystal,
    Version.Ruby: VersionGroup.RubySapphire,
    Version.Sapphire: VersionGroup.RubySapphire,
    Version.Emerald: VersionGroup.Emerald,
    Version.Firered: VersionGroup.FireredLeafgreen,
    Version.Leafgreen: VersionGroup.FireredLeafgreen,
    Version.Diamond: VersionGroup.DiamondPearl,
    Version.Pearl: VersionGroup.DiamondPearl,
    Version.Platinum: VersionGroup.Platinum,
    Version.Heartgold: VersionGroup.HeartgoldSoulsilver,
    Version.Soulsilver: VersionGroup.HeartgoldSoulsilver,
    Version.Black: VersionGroup.BlackWhite,
    Version.White: VersionGroup.BlackWhite,
    Version.Colosseum: VersionGroup.Colosseum,
    Version.XD: VersionGroup.XD,
    Version.Black2: VersionGroup.BlackWhite2,
    Version.White2: VersionGroup.BlackWhite2,
}

_group_generations = {
    VersionGroup.RedBlue: Generation.I,
    VersionGroup.Yellow: Generation.I,
    VersionGroup.GoldSilver: Generation.II,
    VersionGroup.Crystal: Generation.II,
    VersionGroup.RubySapphire: Generation.III,
    VersionGroup.Emerald: Generation.III,
    VersionGroup.FireredLeafgreen: Generation.III,
    VersionGroup.Colosseum: Generation.III,
    VersionGroup.XD: Generation.III,
    VersionGroup.DiamondPearl: Generation.IV,
    VersionGroup.Platinum: Generation.IV,
    VersionGroup.HeartgoldSoulsilver: Generation.IV,
    VersionGroup.BlackWhite: Generation.V,
    VersionGroup.BlackWhite2: Generation.V,
}
