"""Colaborações entre ONGs: estados e máquina."""

from ong_lifecycle.domain.collaboration.machine import CollaborationStateMachine
from ong_lifecycle.domain.collaboration.states import (
    COLLABORATION_TRANSITIONS,
    INITIAL_COLLABORATION_STATUS,
    CollaborationStatus,
)

__all__ = [
    "CollaborationStatus",
    "CollaborationStateMachine",
    "COLLABORATION_TRANSITIONS",
    "INITIAL_COLLABORATION_STATUS",
]
