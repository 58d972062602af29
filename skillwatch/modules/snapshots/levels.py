"""
Snapshot-level stats derived from skill experience.

These wrap the pure formulas in ``skillwatch.modules.shared.formulas`` with
snapshot access: total level, combat level, and the experience aggregates
used for normalized comparisons between players.
"""

from __future__ import annotations

from typing import Optional

from skillwatch.domain.models.snapshot import Snapshot
from skillwatch.modules.metrics import MAX_SKILL_EXP, REAL_SKILLS, Metric
from skillwatch.modules.shared.formulas import (
    MIN_COMBAT_LEVEL,
    Number,
    combat_level,
    level_from_experience,
)


def skill_level(snapshot: Snapshot, skill: Metric) -> int:
    return level_from_experience(snapshot.value(skill))


def total_level(snapshot: Snapshot) -> int:
    """Sum of levels over the real (non-overall) skills."""
    return sum(skill_level(snapshot, skill) for skill in REAL_SKILLS)


def combat_level_from_snapshot(snapshot: Optional[Snapshot]) -> int:
    """
    Combat level of a snapshot's player.

    An absent snapshot is treated as a fresh account at the minimum combat
    level.
    """
    if snapshot is None:
        return MIN_COMBAT_LEVEL

    return combat_level(
        skill_level(snapshot, Metric.ATTACK),
        skill_level(snapshot, Metric.STRENGTH),
        skill_level(snapshot, Metric.DEFENCE),
        skill_level(snapshot, Metric.RANGED),
        skill_level(snapshot, Metric.MAGIC),
        skill_level(snapshot, Metric.HITPOINTS),
        skill_level(snapshot, Metric.PRAYER),
    )


def get_200ms_count(snapshot: Snapshot) -> int:
    """Number of real skills at the maximum trackable experience."""
    return sum(1 for skill in REAL_SKILLS if snapshot.value(skill) == MAX_SKILL_EXP)


def get_minimum_exp(snapshot: Snapshot) -> Number:
    """Lowest experience across real skills; unranked skills count as 0."""
    return min(max(0, snapshot.value(skill)) for skill in REAL_SKILLS)


def get_capped_exp(snapshot: Snapshot, cap: Number) -> Number:
    """
    Experience summed over real skills, each capped at ``cap``.

    Unranked skills contribute their raw sentinel value.
    """
    return sum(min(snapshot.value(skill), cap) for skill in REAL_SKILLS)
