"""Testes do normalizador de vocabulário externo de pagamentos."""

from __future__ import annotations

import pytest

from ong_lifecycle.domain.errors import UnknownExternalStateError
from ong_lifecycle.domain.payment import (
    PaymentStatus,
    PaymentWebhookEvent,
    from_external_event,
    is_known_external_value,
    resolve_webhook_target,
)


class TestFromExternalEvent:
    """Status de gateway, ações de webhook e verbos internos."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("authorized", PaymentStatus.APPROVED),
            ("approved", PaymentStatus.APPROVED),
            ("in_process", PaymentStatus.PENDING),
            ("in_mediation", PaymentStatus.PENDING),
            ("canceled", PaymentStatus.REJECTED),
            ("charged_back", PaymentStatus.CHARGED_BACK),
            ("payment.refunded", PaymentStatus.REFUNDED),
            ("payment.created", PaymentStatus.PENDING),
            ("chargeback", PaymentStatus.CHARGED_BACK),
        ],
    )
    def test_known_values(self, value: str, expected: PaymentStatus) -> None:
        assert from_external_event(value) is expected

    def test_case_and_whitespace_insensitive(self) -> None:
        assert from_external_event("  AUTHORIZED ") is PaymentStatus.APPROVED

    @pytest.mark.parametrize("value", ["bogus_status", "", None, "payment.updated", "unknown"])
    def test_unknown_values_raise(self, value) -> None:
        with pytest.raises(UnknownExternalStateError) as exc_info:
            from_external_event(value)
        assert exc_info.value.value == value

    def test_unknown_value_logged(self, caplog) -> None:
        with caplog.at_level("WARNING"):
            with pytest.raises(UnknownExternalStateError):
                from_external_event("bogus_status", source="test")

        recs = [r for r in caplog.records if r.message == "unknown_external_payment_state"]
        assert recs
        assert recs[-1].external_value == "bogus_status"

    def test_is_known_external_value(self) -> None:
        assert is_known_external_value("authorized") is True
        assert is_known_external_value("bogus_status") is False


class TestResolveWebhookTarget:
    def test_fixed_action_wins_over_status(self) -> None:
        event = PaymentWebhookEvent.model_validate(
            {"action": "payment.refunded", "data": {"status": "approved"}}
        )
        assert resolve_webhook_target(event) is PaymentStatus.REFUNDED

    def test_updated_resolves_from_status(self) -> None:
        target = resolve_webhook_target(
            {"action": "payment.updated", "type": "payment", "data": {"status": "rejected"}}
        )
        assert target is PaymentStatus.REJECTED

    def test_missing_action_uses_status(self) -> None:
        assert resolve_webhook_target({"data": {"status": "refunded"}}) is PaymentStatus.REFUNDED

    def test_updated_without_status_raises(self) -> None:
        with pytest.raises(UnknownExternalStateError):
            resolve_webhook_target({"action": "payment.updated"})

    def test_extra_fields_ignored(self) -> None:
        event = PaymentWebhookEvent.model_validate(
            {"action": "payment.approved", "live_mode": True, "data": {"id": 42, "x": 1}}
        )
        assert event.data.id == "42"
        assert resolve_webhook_target(event) is PaymentStatus.APPROVED
