"""
Efficiency collaborator contract.

The snapshot engine does not compute efficiency hours itself. Callers supply
an object implementing EfficiencyCalculator; when they do not, the EHP/EHB
values already stored on the snapshot are used.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from skillwatch.domain.models.snapshot import Snapshot
from skillwatch.modules.metrics import Metric

EfficiencyMap = Mapping[Metric, float]


@runtime_checkable
class EfficiencyCalculator(Protocol):
    """Source of efficiency hours played (EHP) and bossed (EHB)."""

    def efficiency_hours_played(self, snapshot: Snapshot) -> float:
        ...

    def efficiency_hours_bossed(self, snapshot: Snapshot) -> float:
        ...


class StoredEfficiency:
    """Reads the computed EHP/EHB metrics stored on the snapshot."""

    def efficiency_hours_played(self, snapshot: Snapshot) -> float:
        return max(0.0, float(snapshot.value(Metric.EHP)))

    def efficiency_hours_bossed(self, snapshot: Snapshot) -> float:
        return max(0.0, float(snapshot.value(Metric.EHB)))


DEFAULT_EFFICIENCY: EfficiencyCalculator = StoredEfficiency()
