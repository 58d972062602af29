"""
Unit tests for the metric catalog.

Test Coverage
-------------
- Group sizes and membership
- Row key derivation
- Metric lookup and type helpers
"""

import pytest

from skillwatch.modules.metrics import (
    ACTIVITIES,
    BOSSES,
    COMBAT_SKILLS,
    COMPUTED_METRICS,
    F2P_BOSSES,
    MEMBER_SKILLS,
    METRIC_PROPS,
    METRICS,
    REAL_SKILLS,
    SKILLS,
    Metric,
    MetricType,
    find_metric,
    get_metric_name,
    get_metric_rank_key,
    get_metric_type,
    get_metric_value_key,
    is_activity,
    is_boss,
    is_computed_metric,
    is_metric,
    is_skill,
)
from skillwatch.modules.shared.exceptions import InvalidMetricError


@pytest.mark.unit
class TestMetricGroups:
    """Test catalog groupings."""

    def test_group_sizes(self):
        assert len(SKILLS) == 24
        assert len(REAL_SKILLS) == 23
        assert len(ACTIVITIES) == 14
        assert len(BOSSES) == 48
        assert len(COMPUTED_METRICS) == 2

    def test_metrics_is_every_enum_member_once(self):
        assert len(METRICS) == len(set(METRICS)) == len(Metric)

    def test_overall_is_not_a_real_skill(self):
        assert SKILLS[0] is Metric.OVERALL
        assert Metric.OVERALL not in REAL_SKILLS

    def test_member_and_combat_skills_are_real_skills(self):
        assert set(MEMBER_SKILLS) <= set(REAL_SKILLS)
        assert set(COMBAT_SKILLS) <= set(REAL_SKILLS)
        assert len(COMBAT_SKILLS) == 7

    def test_f2p_bosses(self):
        assert set(F2P_BOSSES) == {Metric.OBOR, Metric.BRYOPHYTA}
        assert set(F2P_BOSSES) <= set(BOSSES)

    def test_members_flag(self):
        assert METRIC_PROPS[Metric.HERBLORE].is_members is True
        assert METRIC_PROPS[Metric.ZULRAH].is_members is True
        assert METRIC_PROPS[Metric.OBOR].is_members is False
        assert METRIC_PROPS[Metric.ATTACK].is_members is False


@pytest.mark.unit
class TestRowKeys:
    """Test persisted row key derivation."""

    @pytest.mark.parametrize(
        "metric,key",
        [
            (Metric.OVERALL, "overallExperience"),
            (Metric.ATTACK, "attackExperience"),
            (Metric.ZULRAH, "zulrahKills"),
            (Metric.CLUE_SCROLLS_ALL, "clue_scrolls_allScore"),
            (Metric.EHP, "ehpValue"),
        ],
    )
    def test_value_key(self, metric, key):
        assert get_metric_value_key(metric) == key

    def test_rank_key(self):
        assert get_metric_rank_key(Metric.ZULRAH) == "zulrahRank"

    def test_keys_are_unique(self):
        keys = [get_metric_value_key(m) for m in METRICS] + [get_metric_rank_key(m) for m in METRICS]
        assert len(keys) == len(set(keys))


@pytest.mark.unit
class TestLookups:
    """Test metric lookup helpers."""

    def test_find_metric_by_string(self):
        assert find_metric("Zulrah") is Metric.ZULRAH

    def test_find_metric_passthrough(self):
        assert find_metric(Metric.EHB) is Metric.EHB

    @pytest.mark.parametrize("value", ["sailing", "", 5, None])
    def test_find_metric_rejects_unknown(self, value):
        with pytest.raises(InvalidMetricError):
            find_metric(value)

    def test_is_metric(self):
        assert is_metric("attack") is True
        assert is_metric("not_a_metric") is False
        assert is_metric(12) is False

    def test_type_helpers(self):
        assert get_metric_type(Metric.SLAYER) is MetricType.SKILL
        assert is_skill(Metric.OVERALL)
        assert is_boss(Metric.OBOR)
        assert is_activity(Metric.LAST_MAN_STANDING)
        assert is_computed_metric(Metric.EHP)
        assert not is_boss(Metric.EHP)

    def test_display_names(self):
        assert get_metric_name(Metric.TZTOK_JAD) == "TzTok-Jad"
        assert get_metric_name(Metric.GUARDIANS_OF_THE_RIFT) == "Guardians Of The Rift"
