"""
Unit Tests for Snapshot Domain Model
====================================

Test Coverage
-------------
- Totality over the catalog (missing metrics are UNRANKED)
- Accessors and the ranked/unranked distinction
- Flat row conversion at the persistence boundary
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from skillwatch.domain.models import (
    SYNTHETIC_ID,
    UNRANKED,
    MetricRecord,
    Snapshot,
)
from skillwatch.modules.metrics import METRICS, Metric


@pytest.mark.unit
@pytest.mark.domain
class TestMetricRecord:
    """Test MetricRecord value object."""

    def test_defaults_to_unranked(self):
        record = MetricRecord()

        assert record.value == UNRANKED
        assert record.rank == UNRANKED
        assert record.is_ranked is False
        assert record.ranked_value is None

    def test_zero_is_a_real_measurement(self):
        record = MetricRecord(value=0, rank=2_000_000)

        assert record.is_ranked is True
        assert record.ranked_value == 0


@pytest.mark.unit
@pytest.mark.domain
class TestSnapshot:
    """Test Snapshot aggregate."""

    def test_fills_every_metric(self, make_snapshot):
        # Arrange & Act
        snapshot = make_snapshot({Metric.ATTACK: 83})

        # Assert
        assert set(snapshot.records) == set(METRICS)
        assert snapshot.value(Metric.ATTACK) == 83
        assert snapshot.value(Metric.ZULRAH) == UNRANKED
        assert snapshot.rank(Metric.ZULRAH) == UNRANKED

    def test_records_are_read_only(self, make_snapshot):
        snapshot = make_snapshot({Metric.ATTACK: 83})

        with pytest.raises(TypeError):
            snapshot.records[Metric.ATTACK] = MetricRecord(1, 1)  # type: ignore[index]

    def test_is_immutable(self, make_snapshot):
        snapshot = make_snapshot()

        with pytest.raises(FrozenInstanceError):
            snapshot.player_id = 5  # type: ignore[misc]

    def test_input_mapping_is_not_shared(self):
        # Arrange
        records = {Metric.ATTACK: MetricRecord(83, 10)}

        # Act
        snapshot = Snapshot(id=1, player_id=1, records=records)
        records[Metric.ATTACK] = MetricRecord(0, 0)

        # Assert
        assert snapshot.value(Metric.ATTACK) == 83


@pytest.mark.unit
@pytest.mark.domain
class TestSnapshotRows:
    """Test conversion from/to the persisted flat layout."""

    def test_from_row(self):
        # Arrange
        row = {
            "id": 10,
            "playerId": 3,
            "createdAt": "2024-03-01T12:00:00Z",
            "importedAt": None,
            "attackExperience": 1_154,
            "attackRank": 500_000,
            "zulrahKills": 12,
            "ehpValue": 3.5,
        }

        # Act
        snapshot = Snapshot.from_row(row)

        # Assert
        assert snapshot.id == 10
        assert snapshot.player_id == 3
        assert snapshot.created_at == datetime(2024, 3, 1, 12, tzinfo=timezone.utc)
        assert snapshot.imported_at is None
        assert snapshot.record(Metric.ATTACK) == MetricRecord(1_154, 500_000)
        assert snapshot.value(Metric.ZULRAH) == 12
        assert snapshot.rank(Metric.ZULRAH) == UNRANKED
        assert snapshot.value(Metric.EHP) == 3.5

    def test_from_row_defaults_ids_to_synthetic(self):
        snapshot = Snapshot.from_row({})

        assert snapshot.id == SYNTHETIC_ID
        assert snapshot.player_id == SYNTHETIC_ID
        assert snapshot.created_at is None

    def test_from_row_null_loads_unranked(self):
        snapshot = Snapshot.from_row({"attackExperience": None, "attackRank": None, "zulrahKills": 0})

        assert snapshot.record(Metric.ATTACK) == MetricRecord(UNRANKED, UNRANKED)
        assert snapshot.record(Metric.ATTACK).is_ranked is False
        assert snapshot.value(Metric.ZULRAH) == 0

    def test_from_row_rejects_unknown_timestamp_type(self):
        with pytest.raises(TypeError):
            Snapshot.from_row({"createdAt": 1_700_000_000})

    def test_to_row_writes_every_metric(self, make_snapshot, fixed_now):
        # Arrange
        snapshot = make_snapshot({Metric.ATTACK: 83}, {Metric.ATTACK: 9}, id=4, player_id=2)

        # Act
        row = snapshot.to_row()

        # Assert
        assert row["id"] == 4
        assert row["playerId"] == 2
        assert row["createdAt"] == fixed_now.isoformat()
        assert row["importedAt"] is None
        assert row["attackExperience"] == 83
        assert row["attackRank"] == 9
        assert row["clue_scrolls_allScore"] == UNRANKED
        assert len(row) == 4 + 2 * len(METRICS)

    def test_row_conversion_preserves_snapshot(self, make_snapshot):
        snapshot = make_snapshot({Metric.ATTACK: 83, Metric.OBOR: 4}, {Metric.OBOR: 1})

        assert Snapshot.from_row(snapshot.to_row()) == snapshot
