"""Máquina de estados de colaborações entre ONGs."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ong_lifecycle.domain.collaboration.states import (
    COLLABORATION_TRANSITIONS,
    INITIAL_COLLABORATION_STATUS,
    CollaborationStatus,
)
from ong_lifecycle.domain.fsm.facade import LifecycleMachine

_EDITABLE = frozenset({CollaborationStatus.DRAFT, CollaborationStatus.REJECTED})
_FINAL = frozenset({CollaborationStatus.COMPLETED, CollaborationStatus.CANCELLED})


class CollaborationStateMachine(LifecycleMachine[CollaborationStatus]):
    """Proposta → aprovação → execução, com reenvio após rejeição."""

    __slots__ = ()

    TABLE = COLLABORATION_TRANSITIONS
    INITIAL_STATE = INITIAL_COLLABORATION_STATUS

    def submit(self, *, at: datetime | None = None, **metadata: Any) -> CollaborationStateMachine:
        """Submete para aprovação (também usado no reenvio após rejeição)."""
        return self._apply(
            CollaborationStatus.PENDING, "submit", metadata, at=at, stamp="submitted_at"
        )

    def approve(
        self, approved_by: str | None = None, *, at: datetime | None = None, **metadata: Any
    ) -> CollaborationStateMachine:
        return self._apply(
            CollaborationStatus.ACTIVE,
            "approve",
            metadata,
            at=at,
            stamp="approved_at",
            approved_by=approved_by,
        )

    def reject(
        self,
        reason: str | None = None,
        rejected_by: str | None = None,
        *,
        at: datetime | None = None,
        **metadata: Any,
    ) -> CollaborationStateMachine:
        return self._apply(
            CollaborationStatus.REJECTED,
            "reject",
            metadata,
            at=at,
            stamp="rejected_at",
            reason=reason,
            rejected_by=rejected_by,
        )

    def pause(
        self, reason: str | None = None, *, at: datetime | None = None, **metadata: Any
    ) -> CollaborationStateMachine:
        return self._apply(
            CollaborationStatus.PAUSED, "pause", metadata, at=at, stamp="paused_at", reason=reason
        )

    def resume(self, *, at: datetime | None = None, **metadata: Any) -> CollaborationStateMachine:
        return self._apply(
            CollaborationStatus.ACTIVE, "resume", metadata, at=at, stamp="resumed_at"
        )

    def complete(
        self, *, at: datetime | None = None, **metadata: Any
    ) -> CollaborationStateMachine:
        return self._apply(
            CollaborationStatus.COMPLETED, "complete", metadata, at=at, stamp="completed_at"
        )

    def cancel(
        self, reason: str | None = None, *, at: datetime | None = None, **metadata: Any
    ) -> CollaborationStateMachine:
        return self._apply(
            CollaborationStatus.CANCELLED,
            "cancel",
            metadata,
            at=at,
            stamp="cancelled_at",
            reason=reason,
        )

    # === Predicados ===

    def is_active(self) -> bool:
        return self.machine.is_state(CollaborationStatus.ACTIVE)

    def is_editable(self) -> bool:
        """Rascunho ou rejeitada (ajustes antes de reenviar)."""
        return self.machine.is_one_of(_EDITABLE)

    def is_final(self) -> bool:
        return self.machine.is_one_of(_FINAL)
