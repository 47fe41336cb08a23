"""Normalização do vocabulário externo de pagamentos.

Converte status do gateway (ex.: Mercado Pago), ações de webhook e verbos
internos para PaymentStatus antes de qualquer chamada ao motor.

Valor fora do vocabulário nunca vira um estado padrão: levanta
UnknownExternalStateError.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ong_lifecycle.domain.errors import UnknownExternalStateError
from ong_lifecycle.domain.payment.states import PaymentStatus
from ong_lifecycle.observability.logging import get_logger

logger = get_logger(__name__)

# Status reportados pelo gateway
GATEWAY_STATUS_MAP: Mapping[str, PaymentStatus] = MappingProxyType(
    {
        "pending": PaymentStatus.PENDING,
        "in_process": PaymentStatus.PENDING,
        "in_mediation": PaymentStatus.PENDING,
        "approved": PaymentStatus.APPROVED,
        "authorized": PaymentStatus.APPROVED,
        "rejected": PaymentStatus.REJECTED,
        "cancelled": PaymentStatus.REJECTED,
        "canceled": PaymentStatus.REJECTED,
        "refunded": PaymentStatus.REFUNDED,
        "charged_back": PaymentStatus.CHARGED_BACK,
    }
)

# Ações de webhook com destino fixo ("payment.updated" depende do status)
WEBHOOK_ACTION_MAP: Mapping[str, PaymentStatus] = MappingProxyType(
    {
        "payment.created": PaymentStatus.PENDING,
        "payment.approved": PaymentStatus.APPROVED,
        "payment.rejected": PaymentStatus.REJECTED,
        "payment.cancelled": PaymentStatus.REJECTED,
        "payment.refunded": PaymentStatus.REFUNDED,
        "payment.charged_back": PaymentStatus.CHARGED_BACK,
    }
)

# Verbos usados por código interno / filas
ACTION_VERB_MAP: Mapping[str, PaymentStatus] = MappingProxyType(
    {
        "approve": PaymentStatus.APPROVED,
        "reject": PaymentStatus.REJECTED,
        "cancel": PaymentStatus.REJECTED,
        "refund": PaymentStatus.REFUNDED,
        "chargeback": PaymentStatus.CHARGED_BACK,
    }
)

STATUS_DEPENDENT_ACTIONS = frozenset({"payment.updated"})
"""Ações cujo destino vem de data.status."""


def _normalize_token(value: Any) -> str:
    return str(value).strip().lower() if value is not None else ""


def _lookup(token: str) -> PaymentStatus | None:
    for vocabulary in (GATEWAY_STATUS_MAP, WEBHOOK_ACTION_MAP, ACTION_VERB_MAP):
        status = vocabulary.get(token)
        if status is not None:
            return status
    return None


def from_external_event(value: Any, source: str | None = None) -> PaymentStatus:
    """Resolve status/ação externa para o estado canônico.

    Case e espaços são ignorados. Valores desconhecidos (incluindo vazio ou
    None) levantam UnknownExternalStateError.
    """
    status = _lookup(_normalize_token(value))
    if status is None:
        logger.warning(
            "unknown_external_payment_state",
            extra={"external_value": str(value)[:64], "source": source},
        )
        raise UnknownExternalStateError(value, source=source)
    return status


def is_known_external_value(value: Any) -> bool:
    """True se o valor pertence ao vocabulário conhecido (sem logs)."""
    return _lookup(_normalize_token(value)) is not None


class PaymentWebhookData(BaseModel):
    """Bloco `data` da notificação do gateway."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str | None = None
    status: str | None = None


class PaymentWebhookEvent(BaseModel):
    """Notificação de pagamento recebida via webhook (campos essenciais)."""

    model_config = ConfigDict(extra="ignore")

    action: str | None = None
    type: str | None = None  # noqa: A003
    data: PaymentWebhookData = Field(default_factory=PaymentWebhookData)


def resolve_webhook_target(event: PaymentWebhookEvent | Mapping[str, Any]) -> PaymentStatus:
    """Determina o estado canônico alvo de um webhook.

    - Ação com destino fixo (ex.: payment.approved) → mapeamento direto
    - payment.updated, ou ação ausente/sem mapeamento → data.status
    - Nada resolvível → UnknownExternalStateError
    """
    if not isinstance(event, PaymentWebhookEvent):
        event = PaymentWebhookEvent.model_validate(event)

    action = _normalize_token(event.action)
    if action and action not in STATUS_DEPENDENT_ACTIONS:
        status = WEBHOOK_ACTION_MAP.get(action)
        if status is not None:
            return status

    if event.data.status is not None:
        return from_external_event(event.data.status, source="webhook_status")

    return from_external_event(event.action, source="webhook_action")
