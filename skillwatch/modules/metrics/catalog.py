"""
Metric Catalog
==============

Static registry of every tracked metric: skills, bosses, activities and
computed metrics, together with the per-metric row keys, display names and
experience limits. The experience table itself is derived by
skillwatch.modules.shared.formulas and re-exported here.

The catalog is pure data plus lookups, with no side effects at import time.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, Final, Tuple

from skillwatch.modules.shared.exceptions import InvalidMetricError
from skillwatch.modules.shared.formulas import (  # noqa: F401
    EXPERIENCE_TABLE,
    MAX_LEVEL,
    get_experience_for_level,
)


class MetricType(str, enum.Enum):
    """Metric family; decides which field a value represents."""

    SKILL = "skill"
    BOSS = "boss"
    ACTIVITY = "activity"
    COMPUTED = "computed"


class Metric(str, enum.Enum):
    """Every metric tracked on a snapshot."""

    # Skills
    OVERALL = "overall"
    ATTACK = "attack"
    DEFENCE = "defence"
    STRENGTH = "strength"
    HITPOINTS = "hitpoints"
    RANGED = "ranged"
    PRAYER = "prayer"
    MAGIC = "magic"
    COOKING = "cooking"
    WOODCUTTING = "woodcutting"
    FLETCHING = "fletching"
    FISHING = "fishing"
    FIREMAKING = "firemaking"
    CRAFTING = "crafting"
    SMITHING = "smithing"
    MINING = "mining"
    HERBLORE = "herblore"
    AGILITY = "agility"
    THIEVING = "thieving"
    SLAYER = "slayer"
    FARMING = "farming"
    RUNECRAFTING = "runecrafting"
    HUNTER = "hunter"
    CONSTRUCTION = "construction"

    # Activities
    LEAGUE_POINTS = "league_points"
    BOUNTY_HUNTER_HUNTER = "bounty_hunter_hunter"
    BOUNTY_HUNTER_ROGUE = "bounty_hunter_rogue"
    CLUE_SCROLLS_ALL = "clue_scrolls_all"
    CLUE_SCROLLS_BEGINNER = "clue_scrolls_beginner"
    CLUE_SCROLLS_EASY = "clue_scrolls_easy"
    CLUE_SCROLLS_MEDIUM = "clue_scrolls_medium"
    CLUE_SCROLLS_HARD = "clue_scrolls_hard"
    CLUE_SCROLLS_ELITE = "clue_scrolls_elite"
    CLUE_SCROLLS_MASTER = "clue_scrolls_master"
    LAST_MAN_STANDING = "last_man_standing"
    PVP_ARENA = "pvp_arena"
    SOUL_WARS_ZEAL = "soul_wars_zeal"
    GUARDIANS_OF_THE_RIFT = "guardians_of_the_rift"

    # Bosses
    ABYSSAL_SIRE = "abyssal_sire"
    ALCHEMICAL_HYDRA = "alchemical_hydra"
    BARROWS_CHESTS = "barrows_chests"
    BRYOPHYTA = "bryophyta"
    CALLISTO = "callisto"
    CERBERUS = "cerberus"
    CHAMBERS_OF_XERIC = "chambers_of_xeric"
    CHAMBERS_OF_XERIC_CM = "chambers_of_xeric_challenge_mode"
    CHAOS_ELEMENTAL = "chaos_elemental"
    CHAOS_FANATIC = "chaos_fanatic"
    COMMANDER_ZILYANA = "commander_zilyana"
    CORPOREAL_BEAST = "corporeal_beast"
    CRAZY_ARCHAEOLOGIST = "crazy_archaeologist"
    DAGANNOTH_PRIME = "dagannoth_prime"
    DAGANNOTH_REX = "dagannoth_rex"
    DAGANNOTH_SUPREME = "dagannoth_supreme"
    DERANGED_ARCHAEOLOGIST = "deranged_archaeologist"
    GENERAL_GRAARDOR = "general_graardor"
    GIANT_MOLE = "giant_mole"
    GROTESQUE_GUARDIANS = "grotesque_guardians"
    HESPORI = "hespori"
    KALPHITE_QUEEN = "kalphite_queen"
    KING_BLACK_DRAGON = "king_black_dragon"
    KRAKEN = "kraken"
    KREEARRA = "kreearra"
    KRIL_TSUTSAROTH = "kril_tsutsaroth"
    MIMIC = "mimic"
    NEX = "nex"
    NIGHTMARE = "nightmare"
    PHOSANIS_NIGHTMARE = "phosanis_nightmare"
    OBOR = "obor"
    SARACHNIS = "sarachnis"
    SCORPIA = "scorpia"
    SKOTIZO = "skotizo"
    TEMPOROSS = "tempoross"
    THE_GAUNTLET = "the_gauntlet"
    THE_CORRUPTED_GAUNTLET = "the_corrupted_gauntlet"
    THEATRE_OF_BLOOD = "theatre_of_blood"
    THEATRE_OF_BLOOD_HARD_MODE = "theatre_of_blood_hard_mode"
    THERMONUCLEAR_SMOKE_DEVIL = "thermonuclear_smoke_devil"
    TZKAL_ZUK = "tzkal_zuk"
    TZTOK_JAD = "tztok_jad"
    VENENATIS = "venenatis"
    VETION = "vetion"
    VORKATH = "vorkath"
    WINTERTODT = "wintertodt"
    ZALCANO = "zalcano"
    ZULRAH = "zulrah"

    # Computed
    EHP = "ehp"
    EHB = "ehb"


@dataclass(frozen=True)
class MetricProps:
    """Static properties of a single metric."""

    name: str
    type: MetricType
    is_members: bool = False


# ============================================================================
# METRIC GROUPS
# ============================================================================

REAL_SKILLS: Final[Tuple[Metric, ...]] = (
    Metric.ATTACK,
    Metric.DEFENCE,
    Metric.STRENGTH,
    Metric.HITPOINTS,
    Metric.RANGED,
    Metric.PRAYER,
    Metric.MAGIC,
    Metric.COOKING,
    Metric.WOODCUTTING,
    Metric.FLETCHING,
    Metric.FISHING,
    Metric.FIREMAKING,
    Metric.CRAFTING,
    Metric.SMITHING,
    Metric.MINING,
    Metric.HERBLORE,
    Metric.AGILITY,
    Metric.THIEVING,
    Metric.SLAYER,
    Metric.FARMING,
    Metric.RUNECRAFTING,
    Metric.HUNTER,
    Metric.CONSTRUCTION,
)

SKILLS: Final[Tuple[Metric, ...]] = (Metric.OVERALL,) + REAL_SKILLS

MEMBER_SKILLS: Final[Tuple[Metric, ...]] = (
    Metric.AGILITY,
    Metric.CONSTRUCTION,
    Metric.FARMING,
    Metric.FLETCHING,
    Metric.HERBLORE,
    Metric.HUNTER,
    Metric.THIEVING,
    Metric.SLAYER,
)

COMBAT_SKILLS: Final[Tuple[Metric, ...]] = (
    Metric.ATTACK,
    Metric.STRENGTH,
    Metric.DEFENCE,
    Metric.HITPOINTS,
    Metric.RANGED,
    Metric.MAGIC,
    Metric.PRAYER,
)

ACTIVITIES: Final[Tuple[Metric, ...]] = (
    Metric.LEAGUE_POINTS,
    Metric.BOUNTY_HUNTER_HUNTER,
    Metric.BOUNTY_HUNTER_ROGUE,
    Metric.CLUE_SCROLLS_ALL,
    Metric.CLUE_SCROLLS_BEGINNER,
    Metric.CLUE_SCROLLS_EASY,
    Metric.CLUE_SCROLLS_MEDIUM,
    Metric.CLUE_SCROLLS_HARD,
    Metric.CLUE_SCROLLS_ELITE,
    Metric.CLUE_SCROLLS_MASTER,
    Metric.LAST_MAN_STANDING,
    Metric.PVP_ARENA,
    Metric.SOUL_WARS_ZEAL,
    Metric.GUARDIANS_OF_THE_RIFT,
)

BOSSES: Final[Tuple[Metric, ...]] = tuple(
    m
    for m in Metric
    if m not in SKILLS and m not in ACTIVITIES and m not in (Metric.EHP, Metric.EHB)
)

F2P_BOSSES: Final[Tuple[Metric, ...]] = (Metric.OBOR, Metric.BRYOPHYTA)

COMPUTED_METRICS: Final[Tuple[Metric, ...]] = (Metric.EHP, Metric.EHB)

METRICS: Final[Tuple[Metric, ...]] = SKILLS + BOSSES + ACTIVITIES + COMPUTED_METRICS


# ============================================================================
# DISPLAY NAMES
# ============================================================================

_NAME_OVERRIDES: Final[Dict[Metric, str]] = {
    Metric.LEAGUE_POINTS: "League Points",
    Metric.BOUNTY_HUNTER_HUNTER: "Bounty Hunter (Hunter)",
    Metric.BOUNTY_HUNTER_ROGUE: "Bounty Hunter (Rogue)",
    Metric.CLUE_SCROLLS_ALL: "Clue Scrolls (All)",
    Metric.CLUE_SCROLLS_BEGINNER: "Clue Scrolls (Beginner)",
    Metric.CLUE_SCROLLS_EASY: "Clue Scrolls (Easy)",
    Metric.CLUE_SCROLLS_MEDIUM: "Clue Scrolls (Medium)",
    Metric.CLUE_SCROLLS_HARD: "Clue Scrolls (Hard)",
    Metric.CLUE_SCROLLS_ELITE: "Clue Scrolls (Elite)",
    Metric.CLUE_SCROLLS_MASTER: "Clue Scrolls (Master)",
    Metric.PVP_ARENA: "PvP Arena",
    Metric.CHAMBERS_OF_XERIC_CM: "Chambers Of Xeric (CM)",
    Metric.KREEARRA: "Kree'Arra",
    Metric.KRIL_TSUTSAROTH: "K'ril Tsutsaroth",
    Metric.PHOSANIS_NIGHTMARE: "Phosani's Nightmare",
    Metric.THEATRE_OF_BLOOD_HARD_MODE: "Theatre Of Blood (HM)",
    Metric.TZKAL_ZUK: "TzKal-Zuk",
    Metric.TZTOK_JAD: "TzTok-Jad",
    Metric.VETION: "Vet'ion",
    Metric.EHP: "EHP",
    Metric.EHB: "EHB",
}


def _default_name(metric: Metric) -> str:
    return " ".join(part.capitalize() for part in metric.value.split("_"))


def _metric_type_of(metric: Metric) -> MetricType:
    if metric in SKILLS:
        return MetricType.SKILL
    if metric in ACTIVITIES:
        return MetricType.ACTIVITY
    if metric in COMPUTED_METRICS:
        return MetricType.COMPUTED
    return MetricType.BOSS


METRIC_PROPS: Final[Dict[Metric, MetricProps]] = {
    m: MetricProps(
        name=_NAME_OVERRIDES.get(m, _default_name(m)),
        type=_metric_type_of(m),
        is_members=m in MEMBER_SKILLS or (m in BOSSES and m not in F2P_BOSSES),
    )
    for m in METRICS
}


# ============================================================================
# ROW KEYS
# ============================================================================

_VALUE_KEY_SUFFIXES: Final[Dict[MetricType, str]] = {
    MetricType.SKILL: "Experience",
    MetricType.BOSS: "Kills",
    MetricType.ACTIVITY: "Score",
    MetricType.COMPUTED: "Value",
}

RANK_KEY_SUFFIX: Final[str] = "Rank"


def get_metric_value_key(metric: Metric) -> str:
    """
    Row key holding a metric's value.

    Example:
        >>> get_metric_value_key(Metric.ATTACK)
        'attackExperience'
        >>> get_metric_value_key(Metric.ZULRAH)
        'zulrahKills'
    """
    return f"{metric.value}{_VALUE_KEY_SUFFIXES[METRIC_PROPS[metric].type]}"


def get_metric_rank_key(metric: Metric) -> str:
    """Row key holding a metric's rank, e.g. ``'attackRank'``."""
    return f"{metric.value}{RANK_KEY_SUFFIX}"


# ============================================================================
# LOOKUPS
# ============================================================================

_METRIC_VALUES: Final[frozenset] = frozenset(m.value for m in Metric)


def is_metric(value: Any) -> bool:
    if isinstance(value, Metric):
        return True
    if not isinstance(value, str):
        return False
    return value.lower() in _METRIC_VALUES


def find_metric(value: Any) -> Metric:
    """
    Resolve a metric identifier (enum member or its string value).

    Raises:
        InvalidMetricError: If the value does not name a catalog metric
    """
    if isinstance(value, Metric):
        return value
    if not is_metric(value):
        raise InvalidMetricError(value)
    return Metric(value.lower())


def get_metric_type(metric: Metric) -> MetricType:
    return METRIC_PROPS[metric].type


def get_metric_name(metric: Metric) -> str:
    return METRIC_PROPS[metric].name


def is_skill(metric: Metric) -> bool:
    return get_metric_type(metric) is MetricType.SKILL


def is_boss(metric: Metric) -> bool:
    return get_metric_type(metric) is MetricType.BOSS


def is_activity(metric: Metric) -> bool:
    return get_metric_type(metric) is MetricType.ACTIVITY


def is_computed_metric(metric: Metric) -> bool:
    return get_metric_type(metric) is MetricType.COMPUTED


# ============================================================================
# EXPERIENCE LIMITS
# ============================================================================

MAX_SKILL_EXP: Final[int] = 200_000_000
MIN_HITPOINTS_LEVEL: Final[int] = 10
