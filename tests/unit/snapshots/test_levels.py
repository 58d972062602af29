"""
Unit tests for snapshot-level stats.
"""

import pytest

from skillwatch.modules.metrics import MAX_SKILL_EXP, REAL_SKILLS, Metric
from skillwatch.modules.snapshots import (
    combat_level_from_snapshot,
    get_200ms_count,
    get_capped_exp,
    get_minimum_exp,
    total_level,
)


@pytest.mark.unit
class TestTotalLevel:
    """Test total level."""

    def test_fresh_account(self, make_account):
        assert total_level(make_account({})) == 23

    def test_maxed_account(self, make_account):
        assert total_level(make_account({}, default=99)) == 23 * 99

    def test_overall_is_not_counted(self, make_account):
        snapshot = make_account({}, extra={Metric.OVERALL: 500_000_000})
        assert total_level(snapshot) == 23

    def test_unranked_skills_count_as_level_one(self, make_snapshot):
        assert total_level(make_snapshot()) == 23


@pytest.mark.unit
class TestCombatLevelFromSnapshot:
    """Test combat level derivation."""

    def test_absent_snapshot_is_minimum(self):
        assert combat_level_from_snapshot(None) == 3

    def test_fresh_account(self, make_account):
        assert combat_level_from_snapshot(make_account({Metric.HITPOINTS: 10})) == 3

    def test_maxed_account(self, make_account):
        assert combat_level_from_snapshot(make_account({}, default=99)) == 126

    def test_unranked_snapshot(self, make_snapshot):
        # Every skill at level 1, hitpoints floored to 10
        assert combat_level_from_snapshot(make_snapshot()) == 3


@pytest.mark.unit
class TestExperienceAggregates:
    """Test 200m count, minimum and capped experience."""

    def test_200ms_count(self, make_snapshot):
        snapshot = make_snapshot(
            {
                Metric.OVERALL: 4_600_000_000,
                Metric.ATTACK: MAX_SKILL_EXP,
                Metric.FISHING: MAX_SKILL_EXP,
                Metric.SLAYER: MAX_SKILL_EXP - 1,
            }
        )
        assert get_200ms_count(snapshot) == 2

    def test_minimum_exp(self, make_snapshot):
        values = {skill: 1_000_000 for skill in REAL_SKILLS}
        values[Metric.CONSTRUCTION] = 250_000

        assert get_minimum_exp(make_snapshot(values)) == 250_000

    def test_minimum_exp_treats_unranked_as_zero(self, make_snapshot):
        values = {skill: 1_000_000 for skill in REAL_SKILLS}
        values[Metric.HUNTER] = -1

        assert get_minimum_exp(make_snapshot(values)) == 0

    def test_capped_exp(self, make_snapshot):
        # Arrange
        values = {skill: 10 for skill in REAL_SKILLS}
        values[Metric.ATTACK] = MAX_SKILL_EXP

        # Act
        capped = get_capped_exp(make_snapshot(values), 13_034_431)

        # Assert
        assert capped == 22 * 10 + 13_034_431
