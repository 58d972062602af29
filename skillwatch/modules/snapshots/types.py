"""
Snapshot Output Types
=====================

Purpose
-------
Transient value objects produced by the snapshot engine: the nested view of
a formatted snapshot, the per-metric leader records, and the outcome of a
gain check.

Design Decisions
----------------
- Frozen dataclasses; derived views are never mutated after creation
- Leader records extend the plain value objects with a ``player`` field
- ``to_dict()`` on every output for external consumers (metric keys are
  the metric identifiers, timestamps ISO-8601)
- Clocks are plain callables so tests can pin "now"

Dependencies
------------
None beyond the domain models and the metric catalog
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Tuple, Union

from skillwatch.domain.models.base import DomainEvent
from skillwatch.domain.models.player import Player
from skillwatch.modules.metrics import Metric
from skillwatch.modules.snapshots.constants import GAINS_FLAGGED_EVENT

Number = Union[int, float]
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock."""
    return datetime.now(timezone.utc)


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _player_dict(player: Optional[Player]) -> Optional[Dict[str, Any]]:
    return player.to_dict() if player is not None else None


# ============================================================================
# Metric value objects
# ============================================================================


@dataclass(frozen=True)
class SkillValue:
    """Experience, rank and level of one skill, with optional EHP share."""

    metric: Metric
    experience: Number
    rank: int
    level: int
    ehp: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "metric": self.metric.value,
            "experience": self.experience,
            "rank": self.rank,
            "level": self.level,
        }
        if self.ehp is not None:
            data["ehp"] = self.ehp
        return data


@dataclass(frozen=True)
class BossValue:
    """Kill count and rank of one boss, with optional EHB share."""

    metric: Metric
    kills: Number
    rank: int
    ehb: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "metric": self.metric.value,
            "kills": self.kills,
            "rank": self.rank,
        }
        if self.ehb is not None:
            data["ehb"] = self.ehb
        return data


@dataclass(frozen=True)
class ActivityValue:
    metric: Metric
    score: Number
    rank: int

    def to_dict(self) -> Dict[str, Any]:
        return {"metric": self.metric.value, "score": self.score, "rank": self.rank}


@dataclass(frozen=True)
class ComputedMetricValue:
    metric: Metric
    value: Number
    rank: int

    def to_dict(self) -> Dict[str, Any]:
        return {"metric": self.metric.value, "value": self.value, "rank": self.rank}


# ============================================================================
# Leader records
# ============================================================================


@dataclass(frozen=True)
class SkillLeader(SkillValue):
    player: Optional[Player] = None

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "player": _player_dict(self.player)}


@dataclass(frozen=True)
class BossLeader(BossValue):
    player: Optional[Player] = None

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "player": _player_dict(self.player)}


@dataclass(frozen=True)
class ActivityLeader(ActivityValue):
    player: Optional[Player] = None

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "player": _player_dict(self.player)}


@dataclass(frozen=True)
class ComputedMetricLeader(ComputedMetricValue):
    player: Optional[Player] = None

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "player": _player_dict(self.player)}


AnyLeader = Union[SkillLeader, BossLeader, ActivityLeader, ComputedMetricLeader]


# ============================================================================
# Formatted snapshot
# ============================================================================


def _group_dict(group: Mapping[Metric, Any]) -> Dict[str, Dict[str, Any]]:
    return {metric.value: entry.to_dict() for metric, entry in group.items()}


@dataclass(frozen=True)
class SnapshotData:
    """Per-category metric values of a formatted snapshot."""

    skills: Mapping[Metric, SkillValue]
    bosses: Mapping[Metric, BossValue]
    activities: Mapping[Metric, ActivityValue]
    computed: Mapping[Metric, ComputedMetricValue]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "skills": _group_dict(self.skills),
            "bosses": _group_dict(self.bosses),
            "activities": _group_dict(self.activities),
            "computed": _group_dict(self.computed),
        }


@dataclass(frozen=True)
class FormattedSnapshot:
    """
    Nested, consumer-friendly view of a snapshot.

    Attributes
    ----------
    id : int
        Snapshot id
    player_id : int
        Owning player
    created_at : Optional[datetime]
        Measurement time
    imported_at : Optional[datetime]
        Historical import time, if any
    data : SnapshotData
        Metric values grouped by category
    """

    id: int
    player_id: int
    created_at: Optional[datetime]
    imported_at: Optional[datetime]
    data: SnapshotData

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "playerId": self.player_id,
            "createdAt": _iso(self.created_at),
            "importedAt": _iso(self.imported_at),
            "data": self.data.to_dict(),
        }


# ============================================================================
# Metric leaders
# ============================================================================


@dataclass(frozen=True)
class MetricLeaders:
    """Leading record per metric, grouped by category."""

    skills: Mapping[Metric, SkillLeader]
    bosses: Mapping[Metric, BossLeader]
    activities: Mapping[Metric, ActivityLeader]
    computed: Mapping[Metric, ComputedMetricLeader]

    def leader(self, metric: Metric) -> AnyLeader:
        for group in (self.skills, self.bosses, self.activities, self.computed):
            if metric in group:
                return group[metric]
        raise KeyError(metric)

    def __iter__(self) -> Iterator[AnyLeader]:
        yield from self.skills.values()
        yield from self.bosses.values()
        yield from self.activities.values()
        yield from self.computed.values()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "skills": _group_dict(self.skills),
            "bosses": _group_dict(self.bosses),
            "activities": _group_dict(self.activities),
            "computed": _group_dict(self.computed),
        }


# ============================================================================
# Gain check
# ============================================================================


@dataclass(frozen=True)
class GainCheck:
    """
    Outcome of validating the transition between two snapshots.

    ``within_range`` is stored rather than derived because an absent
    ``before`` or ``after`` decides it without evaluating either rule.
    """

    player_id: Optional[int]
    within_range: bool
    negative_gains: bool = False
    excessive_gains: bool = False

    @property
    def flagged_rules(self) -> Tuple[str, ...]:
        rules = []
        if self.negative_gains:
            rules.append("negative_gains")
        if self.excessive_gains:
            rules.append("excessive_gains")
        return tuple(rules)

    def to_event(self) -> DomainEvent:
        """Rejection event for observability collaborators."""
        return DomainEvent(
            event_name=GAINS_FLAGGED_EVENT,
            payload={
                "player_id": self.player_id,
                "within_range": self.within_range,
                "rules": list(self.flagged_rules),
            },
        )
