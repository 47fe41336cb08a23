"""Estados de contas de usuário e tabela de transições."""

from __future__ import annotations

from enum import StrEnum

from ong_lifecycle.domain.fsm.table import TransitionTable


class UserStatus(StrEnum):
    PENDING_VERIFICATION = "pending_verification"
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    BANNED = "banned"
    DELETED = "deleted"


INITIAL_USER_STATUS: UserStatus = UserStatus.PENDING_VERIFICATION

USER_TRANSITIONS: TransitionTable[UserStatus] = TransitionTable(
    {
        UserStatus.PENDING_VERIFICATION: (UserStatus.ACTIVE, UserStatus.DELETED),
        UserStatus.ACTIVE: (UserStatus.INACTIVE, UserStatus.SUSPENDED, UserStatus.DELETED),
        UserStatus.INACTIVE: (UserStatus.ACTIVE, UserStatus.DELETED),
        UserStatus.SUSPENDED: (UserStatus.ACTIVE, UserStatus.BANNED, UserStatus.DELETED),
        # Ban permanente: só pode ser removido
        UserStatus.BANNED: (UserStatus.DELETED,),
        UserStatus.DELETED: (),
    },
    name="user",
)
