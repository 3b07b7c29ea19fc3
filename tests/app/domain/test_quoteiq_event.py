"""Testes dos modelos de evento QuoteIQ."""

from __future__ import annotations

import pytest

from app.domain.quoteiq_event import EventEnvelope, EventType, QuoteIQPayload, coerce_text


class TestCoerceText:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, None),
            (True, None),
            ("  Alice  ", "Alice"),
            ("   ", None),
            (42, "42"),
            (["Gutter", "", "Windows"], "Gutter, Windows"),
            ({"nested": "x"}, None),
        ],
    )
    def test_coerce(self, value: object, expected: str | None) -> None:
        assert coerce_text(value) == expected


class TestQuoteIQPayload:
    def test_tolerates_missing_and_wrongly_typed_fields(self) -> None:
        payload = QuoteIQPayload.from_raw(
            {"doc_id": 123, "customer_name": None, "schedule_starts_at": {"bad": 1}}
        )

        assert payload.doc_id == "123"
        assert payload.customer_name is None
        assert payload.schedule_starts_at is None

    def test_keeps_unknown_fields(self) -> None:
        payload = QuoteIQPayload.from_raw({"doc_id": "Q1", "crew": "A"})

        assert payload.model_extra == {"crew": "A"}

    def test_services_falls_back_to_service_list(self) -> None:
        assert QuoteIQPayload.from_raw({"service_list": "Roof"}).services == "Roof"
        assert (
            QuoteIQPayload.from_raw({"services_list": "Gutter", "service_list": "Roof"}).services
            == "Gutter"
        )

    def test_from_raw_none(self) -> None:
        assert QuoteIQPayload.from_raw(None).doc_id is None


class TestEventEnvelope:
    def test_known_type(self) -> None:
        envelope = EventEnvelope.model_validate({"type": "schedule.created", "payload": {}})

        assert envelope.event_type is EventType.SCHEDULE_CREATED

    def test_unknown_type_is_kept_but_not_mapped(self) -> None:
        envelope = EventEnvelope.model_validate({"type": "unknown.event"})

        assert envelope.type == "unknown.event"
        assert envelope.event_type is None
        assert envelope.payload == {}

    def test_null_payload_becomes_empty(self) -> None:
        envelope = EventEnvelope.model_validate({"type": "estimate.created", "payload": None})

        assert envelope.payload == {}

    def test_quoteiq_payload_view(self) -> None:
        envelope = EventEnvelope.model_validate(
            {"type": "schedule.deleted", "payload": {"doc_id": "Q2"}}
        )

        assert envelope.quoteiq_payload().doc_id == "Q2"
