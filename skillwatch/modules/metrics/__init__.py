"""
Skillwatch metric catalog.

Usage
-----
    from skillwatch.modules.metrics import Metric, SKILLS, get_metric_value_key

    key = get_metric_value_key(Metric.ATTACK)  # 'attackExperience'
"""

from __future__ import annotations

from .catalog import (
    ACTIVITIES,
    BOSSES,
    COMBAT_SKILLS,
    COMPUTED_METRICS,
    EXPERIENCE_TABLE,
    F2P_BOSSES,
    MAX_LEVEL,
    MAX_SKILL_EXP,
    MEMBER_SKILLS,
    METRIC_PROPS,
    METRICS,
    MIN_HITPOINTS_LEVEL,
    REAL_SKILLS,
    SKILLS,
    Metric,
    MetricProps,
    MetricType,
    find_metric,
    get_experience_for_level,
    get_metric_name,
    get_metric_rank_key,
    get_metric_type,
    get_metric_value_key,
    is_activity,
    is_boss,
    is_computed_metric,
    is_metric,
    is_skill,
)

__all__ = [
    "Metric",
    "MetricType",
    "MetricProps",
    "METRIC_PROPS",
    "SKILLS",
    "REAL_SKILLS",
    "MEMBER_SKILLS",
    "COMBAT_SKILLS",
    "BOSSES",
    "F2P_BOSSES",
    "ACTIVITIES",
    "COMPUTED_METRICS",
    "METRICS",
    "EXPERIENCE_TABLE",
    "MAX_LEVEL",
    "MAX_SKILL_EXP",
    "MIN_HITPOINTS_LEVEL",
    "get_metric_value_key",
    "get_metric_rank_key",
    "get_metric_type",
    "get_metric_name",
    "get_experience_for_level",
    "find_metric",
    "is_metric",
    "is_skill",
    "is_boss",
    "is_activity",
    "is_computed_metric",
]
