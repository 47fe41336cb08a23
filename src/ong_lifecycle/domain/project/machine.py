"""Máquina de estados de projetos das ONGs.

Nenhum estado é terminal: arquivado pode ser republicado e cancelado volta a
rascunho.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ong_lifecycle.domain.fsm.facade import LifecycleMachine
from ong_lifecycle.domain.project.states import (
    INITIAL_PROJECT_STATUS,
    PROJECT_TRANSITIONS,
    ProjectStatus,
)

_ACCEPTS_DONATIONS = frozenset({ProjectStatus.PUBLISHED, ProjectStatus.IN_PROGRESS})
_EDITABLE = frozenset({ProjectStatus.DRAFT, ProjectStatus.ON_HOLD})
_FINALIZED = frozenset({ProjectStatus.COMPLETED, ProjectStatus.ARCHIVED})


class ProjectStateMachine(LifecycleMachine[ProjectStatus]):
    __slots__ = ()

    TABLE = PROJECT_TRANSITIONS
    INITIAL_STATE = INITIAL_PROJECT_STATUS

    def publish(
        self, published_by: str | None = None, *, at: datetime | None = None, **metadata: Any
    ) -> ProjectStateMachine:
        """Publica rascunho ou republica projeto arquivado."""
        return self._apply(
            ProjectStatus.PUBLISHED,
            "publish",
            metadata,
            at=at,
            stamp="published_at",
            published_by=published_by,
        )

    def start(
        self, started_by: str | None = None, *, at: datetime | None = None, **metadata: Any
    ) -> ProjectStateMachine:
        return self._apply(
            ProjectStatus.IN_PROGRESS,
            "start",
            metadata,
            at=at,
            stamp="started_at",
            started_by=started_by,
        )

    def hold(
        self, reason: str | None = None, *, at: datetime | None = None, **metadata: Any
    ) -> ProjectStateMachine:
        return self._apply(
            ProjectStatus.ON_HOLD, "hold", metadata, at=at, stamp="held_at", reason=reason
        )

    def complete(
        self, completed_by: str | None = None, *, at: datetime | None = None, **metadata: Any
    ) -> ProjectStateMachine:
        return self._apply(
            ProjectStatus.COMPLETED,
            "complete",
            metadata,
            at=at,
            stamp="completed_at",
            completed_by=completed_by,
        )

    def archive(
        self, archived_by: str | None = None, *, at: datetime | None = None, **metadata: Any
    ) -> ProjectStateMachine:
        return self._apply(
            ProjectStatus.ARCHIVED,
            "archive",
            metadata,
            at=at,
            stamp="archived_at",
            archived_by=archived_by,
        )

    def cancel(
        self,
        reason: str | None = None,
        cancelled_by: str | None = None,
        *,
        at: datetime | None = None,
        **metadata: Any,
    ) -> ProjectStateMachine:
        return self._apply(
            ProjectStatus.CANCELLED,
            "cancel",
            metadata,
            at=at,
            stamp="cancelled_at",
            reason=reason,
            cancelled_by=cancelled_by,
        )

    def reopen(
        self, reopened_by: str | None = None, *, at: datetime | None = None, **metadata: Any
    ) -> ProjectStateMachine:
        """Cancelado → rascunho, para recriar o projeto."""
        return self._apply(
            ProjectStatus.DRAFT,
            "reopen",
            metadata,
            at=at,
            stamp="reopened_at",
            reopened_by=reopened_by,
        )

    # === Predicados ===

    def is_in_progress(self) -> bool:
        return self.machine.is_state(ProjectStatus.IN_PROGRESS)

    def can_receive_donations(self) -> bool:
        return self.machine.is_one_of(_ACCEPTS_DONATIONS)

    def is_editable(self) -> bool:
        return self.machine.is_one_of(_EDITABLE)

    def is_finalized(self) -> bool:
        return self.machine.is_one_of(_FINALIZED)
