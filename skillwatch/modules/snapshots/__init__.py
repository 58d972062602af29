"""
Skillwatch Snapshot Engine

Purpose
-------
Pure computation over in-memory snapshots:
- Formatting a snapshot into its nested per-category view
- Validating the transition between two snapshots (anti-cheat rules)
- Averaging a group of snapshots and resolving metric leaders
- Deriving levels, combat level and account build

Usage
-----
    from skillwatch.modules.snapshots import within_range, get_metric_leaders

    if not within_range(previous, latest):
        ...

    leaders, leader_ids = get_metric_leaders(group_snapshots)
    leaders = assign_players_to_metric_leaders(leaders, leader_ids, players)
"""

from .aggregation import (
    LeaderIdMap,
    assign_players_to_metric_leaders,
    average,
    get_metric_leaders,
)
from .classification import (
    PlayerBuild,
    get_player_build,
    is_1def,
    is_10hp,
    is_f2p,
    is_lvl3,
    is_zerker,
)
from .constants import (
    CHANGE_IGNORED_METRICS,
    GAINS_FLAGGED_EVENT,
    MIN_EXCESSIVE_GAINS_HOURS,
    NEGATIVE_GAINS_IGNORED_METRICS,
)
from .efficiency import (
    DEFAULT_EFFICIENCY,
    EfficiencyCalculator,
    EfficiencyMap,
    StoredEfficiency,
)
from .formatter import format_snapshot
from .levels import (
    combat_level_from_snapshot,
    get_200ms_count,
    get_capped_exp,
    get_minimum_exp,
    skill_level,
    total_level,
)
from .types import (
    ActivityLeader,
    ActivityValue,
    BossLeader,
    BossValue,
    Clock,
    ComputedMetricLeader,
    ComputedMetricValue,
    FormattedSnapshot,
    GainCheck,
    MetricLeaders,
    SkillLeader,
    SkillValue,
    SnapshotData,
    utc_now,
)
from .validation import (
    check_gains,
    has_changed,
    has_excessive_gains,
    has_negative_gains,
    within_range,
)

__all__ = [
    # Formatting
    "format_snapshot",
    # Validation
    "check_gains",
    "within_range",
    "has_negative_gains",
    "has_excessive_gains",
    "has_changed",
    # Aggregation
    "average",
    "get_metric_leaders",
    "assign_players_to_metric_leaders",
    "LeaderIdMap",
    # Levels
    "skill_level",
    "total_level",
    "combat_level_from_snapshot",
    "get_200ms_count",
    "get_minimum_exp",
    "get_capped_exp",
    # Classification
    "PlayerBuild",
    "get_player_build",
    "is_f2p",
    "is_lvl3",
    "is_1def",
    "is_10hp",
    "is_zerker",
    # Rules
    "NEGATIVE_GAINS_IGNORED_METRICS",
    "CHANGE_IGNORED_METRICS",
    "MIN_EXCESSIVE_GAINS_HOURS",
    "GAINS_FLAGGED_EVENT",
    # Efficiency
    "EfficiencyCalculator",
    "EfficiencyMap",
    "StoredEfficiency",
    "DEFAULT_EFFICIENCY",
    # Types
    "Clock",
    "utc_now",
    "SkillValue",
    "BossValue",
    "ActivityValue",
    "ComputedMetricValue",
    "SkillLeader",
    "BossLeader",
    "ActivityLeader",
    "ComputedMetricLeader",
    "SnapshotData",
    "FormattedSnapshot",
    "MetricLeaders",
    "GainCheck",
]
