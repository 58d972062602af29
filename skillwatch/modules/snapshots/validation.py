"""
Gain Validation
===============

Purpose
-------
Decide whether a newly ingested snapshot is plausible progress from the
player's previous one. Two rules reject a transition:

- Negative gains: a tracked value went down
- Excessive gains: more efficiency hours were gained than hours elapsed
  (with a minimum window of MIN_EXCESSIVE_GAINS_HOURS)

A rejection is a reported outcome, not an error: the functions here never
raise, and flagged transitions are logged at debug level with the player id
and the rules that tripped.

Dependencies
------------
- Efficiency collaborator (EHP/EHB source), stored values by default
- Clock, used only when the later snapshot has no timestamp
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from skillwatch.core.logging import get_logger
from skillwatch.domain.models.snapshot import Snapshot
from skillwatch.modules.metrics import METRICS
from skillwatch.modules.snapshots.constants import (
    CHANGE_IGNORED_METRICS,
    MIN_EXCESSIVE_GAINS_HOURS,
    NEGATIVE_GAINS_IGNORED_METRICS,
)
from skillwatch.modules.snapshots.efficiency import DEFAULT_EFFICIENCY, EfficiencyCalculator
from skillwatch.modules.snapshots.types import Clock, GainCheck, utc_now

logger = get_logger(__name__)

SECONDS_PER_HOUR = 3600


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are stored in UTC
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def has_negative_gains(before: Snapshot, after: Snapshot) -> bool:
    """True if any tracked metric has a ranked value lower than before."""
    for metric in METRICS:
        if metric in NEGATIVE_GAINS_IGNORED_METRICS:
            continue

        record = after.record(metric)
        if record.is_ranked and record.value < before.value(metric):
            return True

    return False


def has_excessive_gains(
    before: Snapshot,
    after: Snapshot,
    *,
    efficiency: EfficiencyCalculator = DEFAULT_EFFICIENCY,
    clock: Clock = utc_now,
) -> bool:
    """
    True if the combined EHP + EHB gained exceeds the elapsed hours.

    Elapsed time is floored at MIN_EXCESSIVE_GAINS_HOURS so snapshots taken
    close together are not flagged for ordinary progress. A missing
    ``before.created_at`` counts as no elapsed time.

    Example:
        >>> # one second apart, 200 efficiency hours gained
        >>> has_excessive_gains(before, after)
        True
    """
    after_date = _as_utc(after.created_at or clock())
    elapsed_hours = 0.0
    if before.created_at is not None:
        elapsed = after_date - _as_utc(before.created_at)
        elapsed_hours = elapsed.total_seconds() / SECONDS_PER_HOUR

    window = max(MIN_EXCESSIVE_GAINS_HOURS, elapsed_hours)

    ehp_diff = efficiency.efficiency_hours_played(after) - efficiency.efficiency_hours_played(before)
    ehb_diff = efficiency.efficiency_hours_bossed(after) - efficiency.efficiency_hours_bossed(before)

    return ehp_diff + ehb_diff > window


def has_changed(before: Optional[Snapshot], after: Optional[Snapshot]) -> bool:
    """
    True if any tracked metric progressed.

    No previous snapshot always counts as a change; no new snapshot never
    does. Efficiency metrics are ignored since they move without the player
    doing anything.
    """
    if before is None:
        return True
    if after is None:
        return False

    for metric in METRICS:
        if metric in CHANGE_IGNORED_METRICS:
            continue

        record = after.record(metric)
        if record.is_ranked and record.value > before.value(metric):
            return True

    return False


def check_gains(
    before: Optional[Snapshot],
    after: Optional[Snapshot],
    *,
    efficiency: EfficiencyCalculator = DEFAULT_EFFICIENCY,
    clock: Clock = utc_now,
) -> GainCheck:
    """
    Evaluate both rejection rules for a snapshot transition.

    A player's first snapshot (no ``before``) is accepted as a baseline.
    A missing ``after`` cannot be validated and is rejected without
    evaluating the rules.
    """
    if before is None:
        return GainCheck(
            player_id=after.player_id if after is not None else None,
            within_range=True,
        )

    if after is None:
        return GainCheck(player_id=before.player_id, within_range=False)

    negative_gains = has_negative_gains(before, after)
    excessive_gains = has_excessive_gains(before, after, efficiency=efficiency, clock=clock)

    result = GainCheck(
        player_id=before.player_id,
        within_range=not negative_gains and not excessive_gains,
        negative_gains=negative_gains,
        excessive_gains=excessive_gains,
    )

    if not result.within_range:
        logger.debug(
            "Flagged: id:%s not within range",
            before.player_id,
            extra={
                "player_id": before.player_id,
                "negative_gains": negative_gains,
                "excessive_gains": excessive_gains,
                "rules": list(result.flagged_rules),
            },
        )

    return result


def within_range(
    before: Optional[Snapshot],
    after: Optional[Snapshot],
    *,
    efficiency: EfficiencyCalculator = DEFAULT_EFFICIENCY,
    clock: Clock = utc_now,
) -> bool:
    """True if ``after`` is plausible progress from ``before``."""
    return check_gains(before, after, efficiency=efficiency, clock=clock).within_range
