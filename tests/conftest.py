"""
Pytest Configuration and Fixtures for Skillwatch Tests
======================================================

Purpose
-------
Centralized fixtures for the snapshot engine test suite: a fixed clock,
snapshot factories and a sample player list.

Architecture Notes
------------------
- All tests are unit tests over in-memory snapshots (no I/O)
- Snapshots are built through ``make_snapshot`` so every test states only
  the metrics it cares about; everything else is UNRANKED
- The fixed clock pins every "now" path
"""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Mapping, Optional

import pytest

from skillwatch.domain.models import MetricRecord, Player, Snapshot
from skillwatch.modules.metrics import REAL_SKILLS, Metric, get_experience_for_level

# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config):
    """Configure pytest environment."""
    os.environ["ENVIRONMENT"] = "testing"
    os.environ["LOG_LEVEL"] = "DEBUG"
    os.environ["LOG_TO_FILE"] = "false"


# ============================================================================
# CLOCK FIXTURES
# ============================================================================


FIXED_NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


# ============================================================================
# SNAPSHOT FACTORIES
# ============================================================================


SnapshotFactory = Callable[..., Snapshot]


@pytest.fixture
def make_snapshot() -> SnapshotFactory:
    """
    Factory for snapshots.

    Usage:
        snapshot = make_snapshot({Metric.ATTACK: 1000}, player_id=2)
    """

    def _make(
        values: Optional[Mapping[Metric, float]] = None,
        ranks: Optional[Mapping[Metric, int]] = None,
        *,
        id: int = 1,
        player_id: int = 1,
        created_at: Optional[datetime] = FIXED_NOW,
        imported_at: Optional[datetime] = None,
    ) -> Snapshot:
        values = values or {}
        ranks = ranks or {}
        records = {
            metric: MetricRecord(value=values.get(metric, -1), rank=ranks.get(metric, -1))
            for metric in set(values) | set(ranks)
        }
        return Snapshot(
            id=id,
            player_id=player_id,
            created_at=created_at,
            imported_at=imported_at,
            records=records,
        )

    return _make


def skill_levels(levels: Mapping[Metric, int], default: int = 1) -> Dict[Metric, int]:
    """Experience per real skill for the given levels (others at ``default``)."""
    return {
        skill: get_experience_for_level(levels.get(skill, default))
        for skill in REAL_SKILLS
    }


@pytest.fixture
def make_account(make_snapshot) -> SnapshotFactory:
    """
    Factory for snapshots described by skill levels.

    Usage:
        snapshot = make_account({Metric.DEFENCE: 1, Metric.ATTACK: 60})
    """

    def _make(levels: Mapping[Metric, int], default: int = 1, extra=None, **kwargs) -> Snapshot:
        values: Dict[Metric, float] = dict(skill_levels(levels, default))
        values.update(extra or {})
        return make_snapshot(values, **kwargs)

    return _make


@pytest.fixture
def hours_later() -> Callable[[float], datetime]:
    return lambda hours: FIXED_NOW + timedelta(hours=hours)


# ============================================================================
# PLAYER FIXTURES
# ============================================================================


@pytest.fixture
def players():
    return [
        Player(id=1, username="zezima"),
        Player(id=2, username="lynx titan", display_name="Lynx Titan"),
        Player(id=3, username="b0aty"),
    ]
