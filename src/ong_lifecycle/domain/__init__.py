"""Domínio: motor FSM genérico e máquinas de ciclo de vida."""

from ong_lifecycle.domain.errors import (
    InvalidTransitionError,
    StateMachineError,
    UnknownExternalStateError,
)

__all__ = [
    "StateMachineError",
    "InvalidTransitionError",
    "UnknownExternalStateError",
]
