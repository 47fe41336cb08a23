"""Contas de usuário: estados e máquina."""

from ong_lifecycle.domain.user.machine import UserStateMachine
from ong_lifecycle.domain.user.states import INITIAL_USER_STATUS, USER_TRANSITIONS, UserStatus

__all__ = [
    "UserStatus",
    "UserStateMachine",
    "USER_TRANSITIONS",
    "INITIAL_USER_STATUS",
]
