"""
Snapshot rule constants.

Gain validation ignores different metric families per rule: activity
scores such as LMS and PvP Arena can legitimately go down, while efficiency
metrics fluctuate whenever their source rates change.
"""

from __future__ import annotations

from typing import FrozenSet, Final

from skillwatch.modules.metrics import Metric

# Metrics never flagged as decreasing
NEGATIVE_GAINS_IGNORED_METRICS: Final[FrozenSet[Metric]] = frozenset(
    {
        Metric.EHP,
        Metric.EHB,
        Metric.LAST_MAN_STANDING,
        Metric.PVP_ARENA,
    }
)

# Metrics that do not count as progress
CHANGE_IGNORED_METRICS: Final[FrozenSet[Metric]] = frozenset(
    {
        Metric.EHP,
        Metric.EHB,
    }
)

# Elapsed-time floor for the excessive gains rule
MIN_EXCESSIVE_GAINS_HOURS: Final[int] = 120

GAINS_FLAGGED_EVENT: Final[str] = "snapshot.gains_flagged"
