"""Pagamentos: estados, normalizador de eventos externos e máquina."""

from ong_lifecycle.domain.payment.machine import PaymentStateMachine
from ong_lifecycle.domain.payment.normalizer import (
    PaymentWebhookData,
    PaymentWebhookEvent,
    from_external_event,
    is_known_external_value,
    resolve_webhook_target,
)
from ong_lifecycle.domain.payment.states import (
    INITIAL_PAYMENT_STATUS,
    PAYMENT_TRANSITIONS,
    TERMINAL_PAYMENT_STATUSES,
    PaymentStatus,
)

__all__ = [
    "PaymentStatus",
    "PaymentStateMachine",
    "PaymentWebhookData",
    "PaymentWebhookEvent",
    "PAYMENT_TRANSITIONS",
    "INITIAL_PAYMENT_STATUS",
    "TERMINAL_PAYMENT_STATUSES",
    "from_external_event",
    "is_known_external_value",
    "resolve_webhook_target",
]
