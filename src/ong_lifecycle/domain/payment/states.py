"""Estados canônicos de pagamento e tabela de transições."""

from __future__ import annotations

from enum import StrEnum

from ong_lifecycle.domain.fsm.table import TransitionTable


class PaymentStatus(StrEnum):
    """5 estados canônicos de um pagamento."""

    PENDING = "pending"
    """Criado; aguardando confirmação do gateway."""

    APPROVED = "approved"
    """Autorizado/capturado pelo gateway."""

    REJECTED = "rejected"
    """Recusado ou cancelado antes da aprovação; encerrado."""

    CHARGED_BACK = "charged_back"
    """Contestado pelo portador após aprovação; encerrado."""

    REFUNDED = "refunded"
    """Estornado após aprovação; encerrado."""


INITIAL_PAYMENT_STATUS: PaymentStatus = PaymentStatus.PENDING

PAYMENT_TRANSITIONS: TransitionTable[PaymentStatus] = TransitionTable(
    {
        PaymentStatus.PENDING: (PaymentStatus.APPROVED, PaymentStatus.REJECTED),
        PaymentStatus.APPROVED: (PaymentStatus.CHARGED_BACK, PaymentStatus.REFUNDED),
        # === Terminais ===
        PaymentStatus.REJECTED: (),
        PaymentStatus.CHARGED_BACK: (),
        PaymentStatus.REFUNDED: (),
    },
    name="payment",
)

TERMINAL_PAYMENT_STATUSES = PAYMENT_TRANSITIONS.terminal_states
"""Estados sem transição de saída."""
