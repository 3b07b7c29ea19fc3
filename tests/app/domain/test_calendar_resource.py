"""Testes da construcao do evento de calendario."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from app.domain.calendar_resource import (
    build_calendar_resource,
    build_description,
    format_instant,
    parse_instant,
    time_bounds_issue,
)
from app.domain.quoteiq_event import QuoteIQPayload


def _payload(**raw: object) -> QuoteIQPayload:
    base: dict[str, object] = {
        "doc_id": "Q1",
        "schedule_starts_at": "2025-01-10T15:00:00Z",
        "schedule_ends_at": "2025-01-10T16:00:00Z",
    }
    base.update(raw)
    return QuoteIQPayload.from_raw(base)


class TestParseInstant:
    @pytest.mark.parametrize(
        "value",
        [
            "2025-01-10T15:00:00Z",
            "2025-01-10T15:00:00+00:00",
            "2025-01-10T10:00:00-05:00",
            "2025-01-10T15:00:00",
            1736521200000,
        ],
    )
    def test_accepts_iso_and_epoch_ms(self, value: object) -> None:
        assert parse_instant(value) == datetime(2025, 1, 10, 15, tzinfo=UTC)

    @pytest.mark.parametrize("value", [None, "", "tomorrow", True, {"x": 1}])
    def test_invalid_values(self, value: object) -> None:
        assert parse_instant(value) is None


def test_format_instant_uses_milliseconds_and_z() -> None:
    assert format_instant(datetime(2025, 1, 10, 15, tzinfo=UTC)) == "2025-01-10T15:00:00.000Z"


def test_description_lists_fields_in_order_with_placeholders() -> None:
    description = build_description(_payload(customer_name="Alice", service_list="Roof"))

    assert description.splitlines() == [
        "Customer: Alice",
        "Phone: N/A",
        "Email: N/A",
        "Address: N/A",
        "Services: Roof",
        "Notes: None",
        "QuoteIQ Doc ID: Q1",
    ]


def test_resource_for_full_payload() -> None:
    resource = build_calendar_resource(
        _payload(
            customer_name="Alice",
            customer_email="alice@example.com",
            customer_address="1 Main St",
        )
    )

    assert resource is not None
    assert resource.summary == "Appointment - Alice"
    assert resource.location == "1 Main St"
    assert resource.attendees == ("alice@example.com",)
    body = resource.to_google_body()
    assert body["end"] == {"dateTime": "2025-01-10T16:00:00.000Z", "timeZone": "UTC"}
    assert body["attendees"] == [{"email": "alice@example.com"}]


def test_resource_defaults_without_customer_data() -> None:
    resource = build_calendar_resource(_payload())

    assert resource is not None
    assert resource.summary == "Appointment - QuoteIQ Customer"
    assert resource.location == ""
    assert "attendees" not in resource.to_google_body()


def test_same_payload_builds_same_resource() -> None:
    assert build_calendar_resource(_payload(customer_name="Bob")) == build_calendar_resource(
        _payload(customer_name="Bob")
    )


def test_missing_bounds() -> None:
    payload = _payload(schedule_ends_at=None)

    assert build_calendar_resource(payload) is None
    assert time_bounds_issue(payload) == "missing_time_bounds"


def test_end_before_start() -> None:
    payload = _payload(schedule_ends_at="2025-01-10T14:00:00Z")

    assert build_calendar_resource(payload) is None
    assert time_bounds_issue(payload) == "invalid_time_bounds"
