"""Move effects."""

from pbirch.enums import Enum, U16, auto, repr_enum


@repr_enum(U16)
class Effect(Enum):
    """The effect of a move, by Veekun move effect ID.

    Effects shared by several moves are grouped as generic; the rest are
    named after their only move.
    """

    # Generic
    RegularDamage = 1
    SleepTarget = auto()
    ChancePoisonTarget = auto()
    HealUserHalfInflicted = auto()
    ChanceBurnTarget = auto()
    ChanceFreezeTarget = auto()
    ChanceParalyzeTarget = auto()
    FaintUser = auto()
    # Unique
    DreamEater = auto()
    MirrorMove = auto()
    # Generic
    RaiseUserAttack = auto()
    RaiseUserDefense = auto()
    RaiseUserSpecialAttack = 14
    RaiseUserEvasion = 17
    NeverMisses = auto()
    LowerTargetAttack = auto()
    LowerTargetDefense = auto()
    LowerTargetSpeed = auto()
    LowerTargetAccuracy = 24
    LowerTargetEvasion = auto()
    # Unique
    Haze = auto()
    Bide = auto()
    # Generic
    Hit2To3TurnsThenConfuseUser = auto()
    SwitchOutTarget = auto()
    Hit2To5Times = auto()
    Conversion = auto()
    ChanceFlinchTarget = auto()
    HealUserByHalfMaxHP = auto()
    # Unique
    Toxic = auto()
    PayDay = auto()
    LightScreen = auto()
    TriAttack = auto()
    Rest = auto()
    OneHitKO = auto()
    RazorWind = auto()
    SuperFang = auto()
    DragonRage = auto()
    # Generic
    SixteenthHP2To5Turns = auto()
    IncreasedCritical = auto()
    HitTwice = auto()
    HalfRecoilIfMiss = auto()
    # Unique
    Mist = auto()
    FocusEnergy = auto()
    # Generic
    QuarterRecoil = auto()
    ConfuseTarget = auto()
    RaiseUserAttack2 = auto()
    RaiseUserDefense2 = auto()
    RaiseUserSpeed2 = auto()
    RaiseUserSpecialAttack2 = auto()
    RaiseUserSpecialDefense2 = auto()
    Transform = 58
    LowerTargetAttack2 = auto()
    LowerTargetDefense2 = auto()
    LowerTargetSpeed2 = auto()
    LowerTargetSpecialDefense2 = 63
    Reflect = 66
    PoisonTarget = auto()
    ParalyzeTarget = auto()
    ChanceLowerTargetAttack = auto()
    ChanceLowerTargetDefense = auto()
    ChanceLowerTargetSpeed = auto()
    ChanceLowerTargetSpecialAttack = auto()
    ChanceLowerTargetSpecialDefense = auto()
    ChanceLowerTargetAccuracy = auto()
    SkyAttack = 76
    ChanceConfuseTarget = auto()
    # Unique
    Twineedle = auto()
    VitalThrow = auto()
    Substitute = auto()
    RechargeNextTurn = auto()
    Rage = auto()
    Mimic = auto()
    Metronome = auto()
    LeechSeed = auto()
    Splash = auto()
    Disable = auto()
    UserLevelDamage = auto()
    Psywave = auto()
    Counter = auto()
    Encore = auto()
    PainSplit = auto()
    Snore = auto()
    Conversion2 = auto()
    GuaranteeNextMoveHit = auto()
    Sketch = auto()
    SleepTalk = 98
    DestinyBond = auto()
    MoreDamageWhenLessUserHP = auto()
    Spite = auto()
    FalseSwipe = auto()
    # Generic
    CurePartyStatus = auto()
    Fast = auto()
    TripleKick = auto()
    TakeTargetItem = auto()
    PreventTargetLeaving = auto()
    # Unique
    Nightmare = auto()
    Minimize = auto()
    Curse = auto()
    PreventHitUser = 112
    Spikes = auto()
    ResetTargetEvadeDisableGhostImmunity = auto()
    PerishSong = auto()
    Sandstorm = auto()
    Endure = auto()
    DoubleEachSuccessiveUseMod5Turns = auto()
    Swagger = auto()
    FuryCutter = auto()
    Attract = auto()
    Return = auto()
    Present = auto()
    Frustration = auto()
    Safeguard = auto()
    ChanceBurnTargetThawUser = auto()
    Magnitude = auto()
    BatonPass = auto()
    Pursuit = auto()
    RapidSpin = auto()
    Sonicboom = auto()
    HealUserByHalfMaxHPWeather = 133
    HiddenPower = 136
    RainDance = auto()
    SunnyDay = auto()
    # Generic
    ChanceRaiseUserDefense = auto()
    ChanceRaiseUserAttack = auto()
    ChanceRaiseUserAllStats = auto()
    # Unique
    BellyDrum = 143
    PsychUp = auto()
    MirrorCoat = auto()
    SkullBash = auto()
    Twister = auto()
    Earthquake = auto()
    HitTargetInTwoTurns = auto()
    Gust = auto()
    ChanceFlinchTargetDoubleMinimized = auto()
    Solarbeam = auto()
    Thunder = auto()
    Teleport = auto()
    BeatUp = auto()
    Fly = auto()
    DefenseCurl = auto()
    FakeOut = 159
    Uproar = auto()
    Stockpile = auto()
    SpitUp = auto()
    Swallow = auto()
    Hail = 165
    Torment = auto()
    Flatter = auto()
    WillOWisp = auto()
    Memento = auto()
    Facade = auto()
    FocusPunch = auto()
    Smellingsalt = auto()
    TargetUserThisTurn = auto()
    NaturePower = auto()
    Charge = auto()
    Taunt = auto()
    HelpingHand = auto()
    SwapItems = auto()
    RolePlay = auto()
    Wish = auto()
    Assist = auto()
    Ingrain = auto()
    Superpower = auto()
    MagicCoat = auto()
    Recycle = auto()
    DoubleDamageIfUserHit = auto()
    BrickBreak = auto()
    Yawn = auto()
    KnockOff = auto()
    Endeavor = auto()
    MoreDamageWhenMoreUserHP = auto()
    SkillSwap = auto()
    Imprison = auto()
    Refresh = auto()
    Grudge = auto()
    Snatch = auto()
    MoreDamageWhenTargetHeavier = auto()
    SecretPower = auto()
    ThirdRecoil = auto()
    TeeterDance = auto()
    BlazeKick = auto()
    MudSport = auto()
    PoisonFange = auto()
    WeatherBall = auto()
    # Generic
    LowerUserSpecialAttack2AfterDamage = auto()
    LowerTargetAttackDefense = auto()
    RaiseUserDefenseSpecialDefense = auto()
    SkyUppercut = auto()
    RaiseUserAttackDefense = auto()
    IncreasedCriticalChancePoisonTarget = auto()
    WaterSport = auto()
    RaiseUserSpecialAttackSpecialDefense = auto()
    RaiseUserAttackSpeed = auto()
    # Unique
    Camouflage = auto()
    Roost = auto()
    Gravity = auto()
    MiracleEye = auto()
    WakeUpSlap = auto()
    HammerArm = auto()
    GyroBall = auto()
    HealingWish = auto()
    Brine = auto()
    NaturalGift = auto()
    Feint = auto()
    DoubleIfTargetBerry = auto()
    Tailwind = auto()
    Accupressure = auto()
    MetalBurst = auto()
    UserSwitchOutAfterAttack = auto()
    CloseCombat = auto()
    Payback = auto()
    Assurance = auto()
    Embargo = auto()
    Fling = auto()
    PsychoShift = auto()
    TrumpCard = auto()
    HealBlock = auto()
    MoreDamageWhenMoreTargetHP = auto()
    PowerTrick = auto()
    GastroAcid = auto()
    LuckyChant = auto()
    MeFirst = auto()
    Copycat = auto()
    PowerSwap = auto()
    GuardSwap = auto()
    Punishment = auto()
    LastResort = auto()
    WorrySeed = auto()
    SuckerPunch = auto()
    ToxicSpokes = auto()
    HeartSwap = auto()
    AquaRing = auto()
    MagnetRise = auto()
    FlareBlitz = auto()
    Struggle = auto()
    Dive = auto()
    Dig = auto()
    Surf = auto()
    Defog = auto()
    TrickRoom = auto()
    Blizzard = auto()
    Whirlpool = auto()
    VoltTackle = auto()
    Bounce = auto()
    Captivate = 266
    StealthRock = auto()
    Chatter = auto()
    PlateDriveType = auto()
    HeadSmash = auto()
    LunarDance = auto()
    SeedFlare = auto()
    ShadowForce = auto()
    FireFang = auto()
    IceFang = auto()
    ThunderFang = auto()
    ChanceRaiseUserSpecialAttack = auto()
    HoneClaws = auto()
    WideGuard = auto()
    GuardSplit = auto()
    PowerSplit = auto()
    WonderRoom = auto()
    UseTargetDefenseNotSpecial = auto()
    Venoshock = auto()
    Autotomize = auto()
    Telekinesis = auto()
    MagicRoom = auto()
    SmackDown = auto()
    AlwaysCritical = auto()
    FlameBurst = auto()
    QuiverDance = auto()
    MoreDamageWithUserTargetWeightRatio = auto()
    Synchronoise = auto()
    ElectroBall = auto()
    Soak = auto()
    FlameCharge = auto()
    AcidSpray = auto()
    FoulPlay = auto()
    SimpleBeam = auto()
    Entrainment = auto()
    AfterYou = auto()
    Round = auto()
    EchoedVoice = auto()
    IgnoresTargetStatModifiers = auto()
    ClearSmog = auto()
    StoredPower = auto()
    QuickGuard = auto()
    AllySwitch = auto()
    ShellSmash = auto()
    HealPulse = auto()
    Hex = auto()
    SkyDrop = auto()
    ShiftGear = auto()
    SwitchOutTargetAfterDamage = auto()
    Incinerate = auto()
    Quash = auto()
    Growth = auto()
    Acrobatics = auto()
    ReflectType = auto()
    Retaliate = auto()
    FinalGambit = auto()
    TailGlow = auto()
    Coil = auto()
    Bestow = auto()
    WaterPledge = auto()
    FirePledge = auto()
    GrassPledge = auto()
    WorkUp = auto()
    CottonGuard = auto()
    RelicSong = auto()
    Glaciate = auto()
    FreezeShock = auto()
    IceBurn = auto()
    VCreate = 335
    FusionFlare = auto()
    FusionBolt = auto()
    Hurricane = auto()
