"""
Account classification predicates.

Each predicate encodes one game rule over a single snapshot; none of them
can fail on a well-formed snapshot. get_player_build() combines them into
the account type shown on profiles.
"""

from __future__ import annotations

from enum import Enum
from typing import Final, FrozenSet, Optional

from skillwatch.domain.models.snapshot import Snapshot
from skillwatch.modules.metrics import BOSSES, F2P_BOSSES, MEMBER_SKILLS, Metric
from skillwatch.modules.shared.formulas import MIN_COMBAT_LEVEL
from skillwatch.modules.snapshots.levels import combat_level_from_snapshot, skill_level

_MEMBER_BOSSES: Final[FrozenSet[Metric]] = frozenset(b for b in BOSSES if b not in F2P_BOSSES)

ZERKER_DEFENCE_LEVEL: Final[int] = 45
PURE_HITPOINTS_LEVEL: Final[int] = 10


class PlayerBuild(str, Enum):
    """Account build types."""

    MAIN = "main"
    F2P = "f2p"
    LVL3 = "lvl3"
    ZERKER = "zerker"
    DEF1 = "def1"
    HP10 = "hp10"


def is_f2p(snapshot: Snapshot) -> bool:
    """No member skill above level 1 and no kills on a member boss."""
    has_member_stats = any(skill_level(snapshot, skill) > 1 for skill in MEMBER_SKILLS)
    has_boss_kc = any(snapshot.value(boss) > 0 for boss in _MEMBER_BOSSES)

    return not has_member_stats and not has_boss_kc


def is_lvl3(snapshot: Snapshot) -> bool:
    return combat_level_from_snapshot(snapshot) <= MIN_COMBAT_LEVEL


def is_1def(snapshot: Snapshot) -> bool:
    return skill_level(snapshot, Metric.DEFENCE) == 1


def is_10hp(snapshot: Snapshot) -> bool:
    return (
        combat_level_from_snapshot(snapshot) > MIN_COMBAT_LEVEL
        and skill_level(snapshot, Metric.HITPOINTS) == PURE_HITPOINTS_LEVEL
    )


def is_zerker(snapshot: Snapshot) -> bool:
    return skill_level(snapshot, Metric.DEFENCE) == ZERKER_DEFENCE_LEVEL


def get_player_build(snapshot: Optional[Snapshot]) -> PlayerBuild:
    """
    Derive the account build from a snapshot.

    Checks run from most to least restrictive, so a level 3 free-to-play
    account is F2P, and a 1 defence level 3 account is LVL3.
    """
    if snapshot is None:
        return PlayerBuild.MAIN

    if is_f2p(snapshot):
        return PlayerBuild.F2P
    if is_lvl3(snapshot):
        return PlayerBuild.LVL3
    if is_1def(snapshot):
        return PlayerBuild.DEF1
    if is_10hp(snapshot):
        return PlayerBuild.HP10
    if is_zerker(snapshot):
        return PlayerBuild.ZERKER

    return PlayerBuild.MAIN
