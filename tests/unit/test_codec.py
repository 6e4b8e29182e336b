"""
Unit tests for the snapshot codec.
"""

import json
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from speedbump.core.codec import (
    SnapshotDecodeError,
    decode_events,
    encode_events,
    event_from_dict,
    event_to_dict,
)
from speedbump.core.event import TrackingEvent


class TestEventToDict:
    """Tests for the snapshot field layout."""

    def test_field_names(self, sample_events):
        data = event_to_dict(sample_events[0])

        assert set(data) == {"id", "timestamp", "vehicleModel", "isEntry"}
        assert data["id"] == "6f1c2d3e-0000-4000-8000-000000000003"
        assert data["timestamp"] == "2024-12-14T17:05:00+00:00"
        assert data["vehicleModel"] == "Tesla Model 3"
        assert data["isEntry"] is True

    def test_encoded_snapshot_is_json_array(self, sample_events):
        payload = json.loads(encode_events(sample_events))

        assert isinstance(payload, list)
        assert [item["id"] for item in payload] == [str(e.id) for e in sample_events]


class TestDecodeEvents:
    """Tests for reading snapshots back."""

    def test_round_trip_preserves_order_and_fields(self, sample_events):
        decoded = decode_events(encode_events(sample_events))

        assert decoded == sample_events

    def test_empty_array(self):
        assert decode_events("[]") == []

    def test_accepts_bytes(self, sample_events):
        blob = encode_events(sample_events).encode("utf-8")
        assert len(decode_events(blob)) == 3

    def test_reference_date_seconds(self):
        """Numeric timestamps count seconds from 2001-01-01 UTC."""
        event = event_from_dict(
            {
                "id": "A1B2C3D4-E5F6-4789-8ABC-DEF012345678",
                "timestamp": 755861400.5,
                "vehicleModel": "Ford F-150",
                "isEntry": False,
            }
        )

        expected = datetime(2001, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=755861400.5)
        assert event.timestamp == expected
        assert event.id == uuid.UUID("a1b2c3d4-e5f6-4789-8abc-def012345678")
        assert event.is_entry is False

    def test_naive_timestamp_read_as_utc(self):
        event = event_from_dict(
            {
                "id": str(uuid.uuid4()),
                "timestamp": "2024-12-14T09:30:00",
                "vehicleModel": "",
                "isEntry": True,
            }
        )
        assert event.timestamp == datetime(2024, 12, 14, 9, 30, tzinfo=timezone.utc)

    def test_zulu_suffix(self):
        event = event_from_dict(
            {
                "id": str(uuid.uuid4()),
                "timestamp": "2024-12-14T09:30:00Z",
                "vehicleModel": "",
                "isEntry": True,
            }
        )
        assert event.timestamp.utcoffset() == timedelta(0)

    def test_duplicate_ids_keep_first(self, sample_events):
        first = sample_events[0]
        clone = TrackingEvent(
            id=first.id,
            timestamp=first.timestamp,
            vehicle_model="Impostor",
            is_entry=False,
        )
        decoded = decode_events(encode_events([first, clone, sample_events[1]]))

        assert [e.id for e in decoded] == [first.id, sample_events[1].id]
        assert decoded[0].vehicle_model == "Tesla Model 3"

    @pytest.mark.parametrize(
        "blob",
        [
            "",
            "not json",
            "{}",
            '{"id": "x"}',
            "[1, 2]",
            '[{"id": "not-a-uuid", "timestamp": "2024-12-14T09:30:00Z", '
            '"vehicleModel": "", "isEntry": true}]',
            '[{"id": "6f1c2d3e-0000-4000-8000-000000000001", '
            '"timestamp": "yesterday", "vehicleModel": "", "isEntry": true}]',
            '[{"id": "6f1c2d3e-0000-4000-8000-000000000001", '
            '"timestamp": true, "vehicleModel": "", "isEntry": true}]',
            '[{"id": "6f1c2d3e-0000-4000-8000-000000000001", '
            '"timestamp": "2024-12-14T09:30:00Z", "vehicleModel": 3, "isEntry": true}]',
            '[{"id": "6f1c2d3e-0000-4000-8000-000000000001", '
            '"timestamp": "2024-12-14T09:30:00Z", "vehicleModel": "", "isEntry": "yes"}]',
            '[{"id": "6f1c2d3e-0000-4000-8000-000000000001", '
            '"timestamp": "2024-12-14T09:30:00Z", "isEntry": true}]',
        ],
    )
    def test_invalid_snapshots(self, blob):
        with pytest.raises(SnapshotDecodeError):
            decode_events(blob)

    def test_decode_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode_events("[")


def snapshot_with_timestamp(raw: str) -> str:
    """One-record snapshot whose timestamp is the raw JSON text given."""
    return (
        '[{"id": "6f1c2d3e-0000-4000-8000-000000000001", '
        f'"timestamp": {raw}, "vehicleModel": "", "isEntry": true}}]'
    )


class TestTimestampRange:
    """Tests for timestamps that cannot become a calendar day."""

    @pytest.mark.parametrize(
        "raw",
        [
            "NaN",
            "Infinity",
            "-Infinity",
            "1e20",
            "-1e20",
            '"9999-12-31T23:59:59-01:00"',
            '"9999-12-31T23:59:59Z"',
            '"0001-01-01T00:00:00+01:00"',
            '"0001-01-01T00:00:00Z"',
        ],
    )
    def test_out_of_range_rejected(self, raw):
        with pytest.raises(SnapshotDecodeError):
            decode_events(snapshot_with_timestamp(raw))

    def test_far_future_inside_range(self):
        events = decode_events(snapshot_with_timestamp('"9999-12-30T00:00:00Z"'))

        assert events[0].timestamp.year == 9999
        assert events[0].timestamp.astimezone(timezone(timedelta(hours=14))).day == 30
