"""
Unit tests for the game formulas.

Covers the experience curve, levels from experience, the combat level
formula and half-up rounding.
"""

import pytest

from skillwatch.modules.shared.formulas import (
    EXPERIENCE_TABLE,
    MAX_LEVEL,
    combat_level,
    experience_points_curve,
    get_experience_for_level,
    level_from_experience,
    round_half_up,
)


@pytest.mark.unit
class TestExperienceCurve:
    """Test the cumulative experience table."""

    def test_table_covers_every_level(self):
        assert len(EXPERIENCE_TABLE) == MAX_LEVEL

    def test_known_thresholds(self):
        assert EXPERIENCE_TABLE[:4] == (0, 83, 174, 276)
        assert get_experience_for_level(45) == 61_512
        assert get_experience_for_level(92) == 6_517_253
        assert get_experience_for_level(99) == 13_034_431

    def test_table_is_strictly_increasing(self):
        assert all(a < b for a, b in zip(EXPERIENCE_TABLE, EXPERIENCE_TABLE[1:]))

    def test_short_curve(self):
        assert experience_points_curve(3) == (0, 83, 174)

    @pytest.mark.parametrize("level", [0, -1, 100])
    def test_out_of_range_level_has_no_experience(self, level):
        assert get_experience_for_level(level) is None


@pytest.mark.unit
class TestLevelFromExperience:
    """Test the experience -> level step function."""

    @pytest.mark.parametrize(
        "experience,expected",
        [
            (0, 1),
            (82, 1),
            (83, 2),
            (1_154, 10),
            (1_153, 9),
            (13_034_430, 98),
            (13_034_431, 99),
        ],
    )
    def test_thresholds(self, experience, expected):
        assert level_from_experience(experience) == expected

    def test_unranked_sentinel_is_level_one(self):
        assert level_from_experience(-1) == 1

    def test_none_is_level_one(self):
        assert level_from_experience(None) == 1

    def test_no_level_past_99(self):
        assert level_from_experience(200_000_000) == 99

    def test_monotonic(self):
        samples = range(0, 2_000_000, 997)
        levels = [level_from_experience(exp) for exp in samples]
        assert levels == sorted(levels)


@pytest.mark.unit
class TestCombatLevel:
    """Test the combat level formula."""

    def test_fresh_account(self):
        assert combat_level(1, 1, 1, 1, 1, 10, 1) == 3

    def test_maxed_account(self):
        assert combat_level(99, 99, 99, 99, 99, 99, 99) == 126

    def test_hitpoints_floor_of_ten(self):
        # Hitpoints below 10 count as 10
        assert combat_level(1, 1, 1, 1, 1, 1, 1) == combat_level(1, 1, 1, 1, 1, 10, 1)

    def test_pure_ranged_branch_wins(self):
        # 0.25 * (1 + 10 + 0) + 0.325 * floor(3 * 99 / 2) = 2.75 + 48.1
        assert combat_level(1, 1, 1, 99, 1, 10, 1) == 50

    def test_zerker_melee(self):
        # 0.25 * (45 + 99 + 26) + 0.325 * (99 + 99) = 42.5 + 64.35
        assert combat_level(99, 99, 45, 1, 1, 99, 52) == 106

    def test_zero_level_is_invalid(self):
        assert combat_level(0, 99, 99, 99, 99, 99, 99) == 0


@pytest.mark.unit
class TestRoundHalfUp:
    """Test rounding used by averages."""

    @pytest.mark.parametrize(
        "value,expected",
        [(2.5, 3), (3.5, 4), (2.4, 2), (-0.5, 0), (-1.5, -1), (-1.6, -2), (7.0, 7)],
    )
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected
