"""
Snapshot Formatter
==================

Purpose
-------
Turn a snapshot's flat per-metric records into the nested view consumed
by reporting collaborators, grouped by skills, bosses, activities and
computed metrics.

Rules
-----
- An absent snapshot formats to None
- OVERALL's level is the total level; other skills use the experience table
- Efficiency contributions are attached only when the map holds a finite
  number for that metric
- Activity and computed values are copied verbatim
"""

from __future__ import annotations

import math
from typing import Optional

from skillwatch.core.logging import get_logger
from skillwatch.domain.models.snapshot import Snapshot
from skillwatch.modules.metrics import ACTIVITIES, BOSSES, COMPUTED_METRICS, SKILLS, Metric
from skillwatch.modules.shared.formulas import level_from_experience
from skillwatch.modules.snapshots.efficiency import EfficiencyMap
from skillwatch.modules.snapshots.levels import total_level
from skillwatch.modules.snapshots.types import (
    ActivityValue,
    BossValue,
    ComputedMetricValue,
    FormattedSnapshot,
    SkillValue,
    SnapshotData,
)

logger = get_logger(__name__)


def _efficiency_of(efficiency_map: Optional[EfficiencyMap], metric: Metric) -> Optional[float]:
    if not efficiency_map:
        return None

    value = efficiency_map.get(metric)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value if math.isfinite(value) else None


def skill_value(snapshot: Snapshot, skill: Metric, efficiency_map: Optional[EfficiencyMap] = None) -> SkillValue:
    experience = snapshot.value(skill)
    level = total_level(snapshot) if skill is Metric.OVERALL else level_from_experience(experience)

    return SkillValue(
        metric=skill,
        experience=experience,
        rank=snapshot.rank(skill),
        level=level,
        ehp=_efficiency_of(efficiency_map, skill),
    )


def format_snapshot(
    snapshot: Optional[Snapshot],
    efficiency_map: Optional[EfficiencyMap] = None,
) -> Optional[FormattedSnapshot]:
    """
    Build the nested view of a snapshot.

    Args:
        snapshot: Snapshot to format, or None
        efficiency_map: Optional per-metric EHP (skills) / EHB (bosses) shares

    Returns:
        FormattedSnapshot, or None when no snapshot was given

    Example:
        >>> formatted = format_snapshot(snapshot)
        >>> formatted.data.skills[Metric.ATTACK].level
        99
    """
    if snapshot is None:
        return None

    skills = {skill: skill_value(snapshot, skill, efficiency_map) for skill in SKILLS}

    bosses = {
        boss: BossValue(
            metric=boss,
            kills=snapshot.value(boss),
            rank=snapshot.rank(boss),
            ehb=_efficiency_of(efficiency_map, boss),
        )
        for boss in BOSSES
    }

    activities = {
        activity: ActivityValue(
            metric=activity,
            score=snapshot.value(activity),
            rank=snapshot.rank(activity),
        )
        for activity in ACTIVITIES
    }

    computed = {
        metric: ComputedMetricValue(
            metric=metric,
            value=snapshot.value(metric),
            rank=snapshot.rank(metric),
        )
        for metric in COMPUTED_METRICS
    }

    logger.debug(
        "Formatted snapshot id=%s player=%s",
        snapshot.id,
        snapshot.player_id,
        extra={"player_id": snapshot.player_id, "efficiency": bool(efficiency_map)},
    )

    return FormattedSnapshot(
        id=snapshot.id,
        player_id=snapshot.player_id,
        created_at=snapshot.created_at,
        imported_at=snapshot.imported_at,
        data=SnapshotData(
            skills=skills,
            bosses=bosses,
            activities=activities,
            computed=computed,
        ),
    )
