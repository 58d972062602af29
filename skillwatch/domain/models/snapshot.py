"""
Snapshot Domain Model for Skillwatch.

Purpose
-------
Immutable point-in-time measurement of one player's metrics. Every catalog
metric carries a value (experience, kills, score or computed value) and a
rank. Missing data is the UNRANKED sentinel, never an omitted metric.

Responsibilities
----------------
- Hold per-metric value/rank records behind explicit accessors
- Fill metrics absent from the input with the UNRANKED record
- Convert from/to the persisted flat row layout
  (``attackExperience``, ``attackRank``, ..., ``playerId``, ``createdAt``)

Non-Responsibilities
--------------------
- Persistence and ingestion (external collaborators)
- Derived stats and validation (handled by skillwatch.modules.snapshots)

Usage Example
-------------
>>> snapshot = Snapshot.from_row({"id": 1, "playerId": 7, "attackExperience": 83})
>>> snapshot.value(Metric.ATTACK)
83
>>> snapshot.rank(Metric.ATTACK)
-1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Final, Mapping, Optional, Union

from skillwatch.modules.metrics import (
    METRICS,
    Metric,
    get_metric_rank_key,
    get_metric_value_key,
)

Number = Union[int, float]

UNRANKED: Final[int] = -1
SYNTHETIC_ID: Final[int] = -1


@dataclass(frozen=True)
class MetricRecord:
    """
    Value and rank of a single metric on a snapshot.

    Attributes
    ----------
    value : int | float
        Experience, kills, score or computed value (UNRANKED if unknown)
    rank : int
        Hiscores rank (UNRANKED if unknown)
    """

    value: Number = UNRANKED
    rank: int = UNRANKED

    @property
    def is_ranked(self) -> bool:
        """Whether the value is a real measurement rather than the sentinel."""
        return self.value > UNRANKED

    @property
    def ranked_value(self) -> Optional[Number]:
        return self.value if self.is_ranked else None


UNRANKED_RECORD: Final[MetricRecord] = MetricRecord()


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    raise TypeError(f"Unsupported timestamp type: {type(value).__name__}")


def _metric_field(row: Mapping[str, Any], key: str) -> Number:
    value = row.get(key)
    return UNRANKED if value is None else value


def _timestamp_to_row(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class Snapshot:
    """
    Immutable snapshot of a player's tracked metrics.

    Attributes
    ----------
    id : int
        Surrogate key (SYNTHETIC_ID for averaged snapshots)
    player_id : int
        Owning player (SYNTHETIC_ID for averaged snapshots)
    created_at : Optional[datetime]
        When the measurement was taken
    imported_at : Optional[datetime]
        Set when the snapshot was imported from history
    records : Mapping[Metric, MetricRecord]
        Value/rank per metric; total over the catalog after construction
    """

    id: int
    player_id: int
    created_at: Optional[datetime] = None
    imported_at: Optional[datetime] = None
    records: Mapping[Metric, MetricRecord] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        complete: Dict[Metric, MetricRecord] = {
            metric: self.records.get(metric, UNRANKED_RECORD) for metric in METRICS
        }
        object.__setattr__(self, "records", MappingProxyType(complete))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def record(self, metric: Metric) -> MetricRecord:
        return self.records[metric]

    def value(self, metric: Metric) -> Number:
        return self.records[metric].value

    def rank(self, metric: Metric) -> int:
        return self.records[metric].rank

    # ------------------------------------------------------------------
    # Row conversion
    # ------------------------------------------------------------------

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Snapshot:
        """
        Build a snapshot from the persisted flat layout.

        Missing or null metric fields load as UNRANKED; ``id`` and ``playerId``
        default to SYNTHETIC_ID.
        """
        records = {
            metric: MetricRecord(
                value=_metric_field(row, get_metric_value_key(metric)),
                rank=_metric_field(row, get_metric_rank_key(metric)),
            )
            for metric in METRICS
        }

        return cls(
            id=row.get("id", SYNTHETIC_ID),
            player_id=row.get("playerId", SYNTHETIC_ID),
            created_at=_parse_timestamp(row.get("createdAt")),
            imported_at=_parse_timestamp(row.get("importedAt")),
            records=records,
        )

    def to_row(self) -> Dict[str, Any]:
        """Inverse of from_row; timestamps are written as ISO-8601 strings."""
        row: Dict[str, Any] = {
            "id": self.id,
            "playerId": self.player_id,
            "createdAt": _timestamp_to_row(self.created_at),
            "importedAt": _timestamp_to_row(self.imported_at),
        }

        for metric, record in self.records.items():
            row[get_metric_value_key(metric)] = record.value
            row[get_metric_rank_key(metric)] = record.rank

        return row
