"""Máquina de estados de pagamento."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from ong_lifecycle.config.settings import get_settings
from ong_lifecycle.domain.errors import InvalidTransitionError
from ong_lifecycle.domain.fsm.facade import LifecycleMachine
from ong_lifecycle.domain.payment.normalizer import PaymentWebhookEvent, resolve_webhook_target
from ong_lifecycle.domain.payment.states import (
    INITIAL_PAYMENT_STATUS,
    PAYMENT_TRANSITIONS,
    PaymentStatus,
)
from ong_lifecycle.observability.logging import get_logger

logger = get_logger(__name__)

WEBHOOK_SOURCE = "gateway_webhook"


class PaymentStateMachine(LifecycleMachine[PaymentStatus]):
    """pending → approved | rejected; approved → charged_back | refunded."""

    __slots__ = ()

    TABLE = PAYMENT_TRANSITIONS
    INITIAL_STATE = INITIAL_PAYMENT_STATUS

    def approve(self, *, at: datetime | None = None, **metadata: Any) -> PaymentStateMachine:
        return self._apply(PaymentStatus.APPROVED, "approve", metadata, at=at)

    def reject(
        self, reason: str | None = None, *, at: datetime | None = None, **metadata: Any
    ) -> PaymentStateMachine:
        return self._apply(PaymentStatus.REJECTED, "reject", metadata, at=at, reason=reason)

    def refund(
        self, amount: Any = None, *, at: datetime | None = None, **metadata: Any
    ) -> PaymentStateMachine:
        """Estorno; `amount` é registrado como veio (sem conversão monetária)."""
        return self._apply(PaymentStatus.REFUNDED, "refund", metadata, at=at, amount=amount)

    def chargeback(self, *, at: datetime | None = None, **metadata: Any) -> PaymentStateMachine:
        return self._apply(PaymentStatus.CHARGED_BACK, "chargeback", metadata, at=at)

    def handle_webhook_event(
        self,
        event: PaymentWebhookEvent | Mapping[str, Any],
        *,
        ignore_duplicates: bool | None = None,
        at: datetime | None = None,
        **metadata: Any,
    ) -> PaymentStateMachine:
        """Aplica notificação do gateway já normalizada para o estado canônico.

        Reentrega (destino == estado atual):
        - ignore_duplicates=True → retorna a mesma instância, sem histórico novo
        - ignore_duplicates=False → InvalidTransitionError
        - None → segue WEBHOOK_DUPLICATE_POLICY das configurações

        Raises:
            UnknownExternalStateError: ação/status fora do vocabulário
            InvalidTransitionError: destino ilegal a partir do estado atual
        """
        if not isinstance(event, PaymentWebhookEvent):
            event = PaymentWebhookEvent.model_validate(event)

        target = resolve_webhook_target(event)

        if target == self.current_state:
            if ignore_duplicates is None:
                ignore_duplicates = get_settings().ignore_duplicate_webhooks
            if ignore_duplicates:
                logger.info(
                    "webhook_duplicate_ignored",
                    extra={
                        "webhook_action": event.action,
                        "current_state": self.current_state.value,
                        "payment_ref": event.data.id,
                    },
                )
                return self
            raise InvalidTransitionError(
                self.current_state,
                target,
                self.available_transitions(),
                detail="duplicate webhook delivery",
            )

        payload: dict[str, Any] = {"event": event.action, **metadata, "source": WEBHOOK_SOURCE}
        if event.data.id is not None:
            payload.setdefault("external_id", event.data.id)
        if event.data.status is not None:
            payload.setdefault("external_status", event.data.status)
        return self._apply(target, "webhook", payload, at=at)

    # === Predicados ===

    def is_successful(self) -> bool:
        return self.machine.is_state(PaymentStatus.APPROVED)

    def is_failed(self) -> bool:
        return self.machine.is_state(PaymentStatus.REJECTED)

    def is_reversed(self) -> bool:
        """Aprovado e depois estornado ou contestado."""
        return self.machine.is_one_of((PaymentStatus.REFUNDED, PaymentStatus.CHARGED_BACK))

    def is_final(self) -> bool:
        return self.machine.is_terminal
