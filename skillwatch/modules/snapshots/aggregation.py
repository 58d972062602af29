"""
Snapshot Aggregation
====================

Purpose
-------
Reduce a population of snapshots to group-level views:
- average(): one synthetic snapshot holding the per-metric means
- get_metric_leaders(): the record holder of every metric
- assign_players_to_metric_leaders(): attach player identities to leaders

Design Decisions
----------------
- Empty input is invalid for both reductions (InvalidSnapshotsError)
- Means are rounded half-up per value and per rank independently; unranked
  sentinels take part in the mean as plain numbers
- The leader of a metric is the FIRST snapshot in input order holding the
  maximal value, so results are stable for identical input
- Leader resolution never touches a player store; identities are resolved
  in a second pass from players the caller fetched in one batch
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

from skillwatch.core.logging import get_logger
from skillwatch.domain.models.player import Player
from skillwatch.domain.models.snapshot import SYNTHETIC_ID, MetricRecord, Snapshot
from skillwatch.modules.metrics import (
    ACTIVITIES,
    BOSSES,
    COMPUTED_METRICS,
    METRICS,
    SKILLS,
    Metric,
)
from skillwatch.modules.shared.exceptions import InvalidSnapshotsError
from skillwatch.modules.shared.formulas import level_from_experience, round_half_up
from skillwatch.modules.snapshots.levels import total_level
from skillwatch.modules.snapshots.types import (
    ActivityLeader,
    BossLeader,
    Clock,
    ComputedMetricLeader,
    MetricLeaders,
    SkillLeader,
    utc_now,
)

logger = get_logger(__name__)

LeaderIdMap = Dict[Metric, int]


def average(snapshots: Optional[Iterable[Snapshot]], *, clock: Clock = utc_now) -> Snapshot:
    """
    Average a group of snapshots into one synthetic snapshot.

    Args:
        snapshots: Non-empty iterable of snapshots; consumed once
        clock: Source of the synthetic snapshot's ``created_at``

    Returns:
        Snapshot with id and player_id set to SYNTHETIC_ID

    Raises:
        InvalidSnapshotsError: If no snapshots were given

    Example:
        >>> avg = average([a, b])
        >>> avg.value(Metric.ATTACK) == round_half_up((a.value(Metric.ATTACK) + b.value(Metric.ATTACK)) / 2)
        True
    """
    snapshots = tuple(snapshots or ())
    if not snapshots:
        raise InvalidSnapshotsError("find average")

    count = len(snapshots)
    records = {}

    for metric in METRICS:
        value_sum = sum(s.value(metric) for s in snapshots)
        rank_sum = sum(s.rank(metric) for s in snapshots)

        records[metric] = MetricRecord(
            value=round_half_up(value_sum / count),
            rank=round_half_up(rank_sum / count),
        )

    logger.debug("Averaged %d snapshots", count, extra={"snapshot_count": count})

    return Snapshot(
        id=SYNTHETIC_ID,
        player_id=SYNTHETIC_ID,
        created_at=clock(),
        imported_at=None,
        records=records,
    )


def _leading_snapshot(snapshots: Sequence[Snapshot], metric: Metric) -> Snapshot:
    # max() keeps the first of equal maxima
    return max(snapshots, key=lambda s: s.value(metric))


def get_metric_leaders(
    snapshots: Optional[Iterable[Snapshot]],
) -> Tuple[MetricLeaders, LeaderIdMap]:
    """
    Find the leading snapshot of every metric.

    Returns:
        (leaders, leader_id_map): leader records with ``player`` unset, and
        the leading snapshot's player id per metric

    Raises:
        InvalidSnapshotsError: If no snapshots were given
    """
    snapshots = tuple(snapshots or ())
    if not snapshots:
        raise InvalidSnapshotsError("find metric leaders")

    leader_ids: LeaderIdMap = {}

    def lead(metric: Metric) -> Snapshot:
        snapshot = _leading_snapshot(snapshots, metric)
        leader_ids[metric] = snapshot.player_id
        return snapshot

    skills = {}
    for skill in SKILLS:
        snapshot = lead(skill)
        experience = snapshot.value(skill)
        skills[skill] = SkillLeader(
            metric=skill,
            experience=experience,
            rank=snapshot.rank(skill),
            level=total_level(snapshot) if skill is Metric.OVERALL else level_from_experience(experience),
        )

    bosses = {}
    for boss in BOSSES:
        snapshot = lead(boss)
        bosses[boss] = BossLeader(metric=boss, kills=snapshot.value(boss), rank=snapshot.rank(boss))

    activities = {}
    for activity in ACTIVITIES:
        snapshot = lead(activity)
        activities[activity] = ActivityLeader(
            metric=activity,
            score=snapshot.value(activity),
            rank=snapshot.rank(activity),
        )

    computed = {}
    for metric in COMPUTED_METRICS:
        snapshot = lead(metric)
        computed[metric] = ComputedMetricLeader(
            metric=metric,
            value=snapshot.value(metric),
            rank=snapshot.rank(metric),
        )

    leaders = MetricLeaders(skills=skills, bosses=bosses, activities=activities, computed=computed)
    return leaders, leader_ids


def assign_players_to_metric_leaders(
    leaders: MetricLeaders,
    leader_id_map: Mapping[Metric, int],
    players: Iterable[Player],
) -> MetricLeaders:
    """
    Attach player identities to metric leaders.

    Returns a new MetricLeaders; the input is left untouched. Leaders whose
    player id is not among ``players`` get ``player=None``.
    """
    player_map = {player.id: player for player in players}

    def resolve(group):
        return {
            metric: replace(entry, player=player_map.get(leader_id_map.get(metric)))
            for metric, entry in group.items()
        }

    resolved = MetricLeaders(
        skills=resolve(leaders.skills),
        bosses=resolve(leaders.bosses),
        activities=resolve(leaders.activities),
        computed=resolve(leaders.computed),
    )

    missing = sorted({pid for pid in leader_id_map.values() if pid not in player_map})
    if missing:
        logger.debug(
            "Metric leaders without a matching player: %s",
            missing,
            extra={"missing_player_ids": missing},
        )

    return resolved
