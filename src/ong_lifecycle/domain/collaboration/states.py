"""Estados de colaboração entre ONGs e tabela de transições."""

from __future__ import annotations

from enum import StrEnum

from ong_lifecycle.domain.fsm.table import TransitionTable


class CollaborationStatus(StrEnum):
    DRAFT = "draft"
    PENDING = "pending"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REJECTED = "rejected"


INITIAL_COLLABORATION_STATUS: CollaborationStatus = CollaborationStatus.DRAFT

COLLABORATION_TRANSITIONS: TransitionTable[CollaborationStatus] = TransitionTable(
    {
        CollaborationStatus.DRAFT: (CollaborationStatus.PENDING, CollaborationStatus.CANCELLED),
        CollaborationStatus.PENDING: (
            CollaborationStatus.ACTIVE,
            CollaborationStatus.REJECTED,
            CollaborationStatus.CANCELLED,
        ),
        CollaborationStatus.ACTIVE: (
            CollaborationStatus.PAUSED,
            CollaborationStatus.COMPLETED,
            CollaborationStatus.CANCELLED,
        ),
        CollaborationStatus.PAUSED: (CollaborationStatus.ACTIVE, CollaborationStatus.CANCELLED),
        CollaborationStatus.COMPLETED: (),
        CollaborationStatus.CANCELLED: (),
        # Reenvio após ajustes
        CollaborationStatus.REJECTED: (CollaborationStatus.PENDING,),
    },
    name="collaboration",
)
