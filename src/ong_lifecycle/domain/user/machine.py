"""Máquina de estados de contas de usuário.

A expiração de suspensão é apenas dado (`expires_at` nos metadados); a
reativação é sempre uma chamada explícita a `activate`.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from ong_lifecycle.domain.fsm.facade import LifecycleMachine
from ong_lifecycle.domain.user.states import INITIAL_USER_STATUS, USER_TRANSITIONS, UserStatus

_CAN_LOGIN = frozenset({UserStatus.ACTIVE, UserStatus.INACTIVE})
_BLOCKED = frozenset({UserStatus.SUSPENDED, UserStatus.BANNED, UserStatus.DELETED})


class UserStateMachine(LifecycleMachine[UserStatus]):
    __slots__ = ()

    TABLE = USER_TRANSITIONS
    INITIAL_STATE = INITIAL_USER_STATUS

    def activate(
        self, verified_by: str | None = None, *, at: datetime | None = None, **metadata: Any
    ) -> UserStateMachine:
        """Ativa após verificação, inatividade ou suspensão."""
        return self._apply(
            UserStatus.ACTIVE,
            "activate",
            metadata,
            at=at,
            stamp="activated_at",
            verified_by=verified_by,
        )

    def deactivate(
        self, reason: str | None = None, *, at: datetime | None = None, **metadata: Any
    ) -> UserStateMachine:
        return self._apply(
            UserStatus.INACTIVE,
            "deactivate",
            metadata,
            at=at,
            stamp="deactivated_at",
            reason=reason,
        )

    def suspend(
        self,
        reason: str | None = None,
        duration: timedelta | None = None,
        suspended_by: str | None = None,
        *,
        at: datetime | None = None,
        **metadata: Any,
    ) -> UserStateMachine:
        """Suspende temporariamente; sem `duration` a suspensão não expira."""
        moment = at or datetime.now(tz=UTC)
        expires_at = None
        duration_seconds = None
        if duration is not None:
            expires_at = (moment + duration).isoformat()
            duration_seconds = duration.total_seconds()
        return self._apply(
            UserStatus.SUSPENDED,
            "suspend",
            metadata,
            at=moment,
            stamp="suspended_at",
            reason=reason,
            duration_seconds=duration_seconds,
            suspended_by=suspended_by,
            expires_at=expires_at,
        )

    def ban(
        self,
        reason: str | None = None,
        banned_by: str | None = None,
        *,
        at: datetime | None = None,
        **metadata: Any,
    ) -> UserStateMachine:
        return self._apply(
            UserStatus.BANNED,
            "ban",
            metadata,
            at=at,
            stamp="banned_at",
            reason=reason,
            banned_by=banned_by,
        )

    def delete(
        self, deleted_by: str | None = None, *, at: datetime | None = None, **metadata: Any
    ) -> UserStateMachine:
        """Remoção lógica (soft delete)."""
        return self._apply(
            UserStatus.DELETED,
            "delete",
            metadata,
            at=at,
            stamp="deleted_at",
            deleted_by=deleted_by,
        )

    # === Predicados ===

    def is_active(self) -> bool:
        return self.machine.is_state(UserStatus.ACTIVE)

    def can_login(self) -> bool:
        return self.machine.is_one_of(_CAN_LOGIN)

    def is_blocked(self) -> bool:
        return self.machine.is_one_of(_BLOCKED)

    def needs_verification(self) -> bool:
        return self.machine.is_state(UserStatus.PENDING_VERIFICATION)

    @property
    def suspension_expires_at(self) -> datetime | None:
        """Expiração da suspensão corrente, se houver (nunca aplicada aqui)."""
        if not self.machine.is_state(UserStatus.SUSPENDED):
            return None
        source = self.machine.history[-1].metadata if self.machine.history else self.metadata
        expires_at = source.get("expires_at")
        return datetime.fromisoformat(expires_at) if expires_at else None
