"""Projetos das ONGs: estados e máquina."""

from ong_lifecycle.domain.project.machine import ProjectStateMachine
from ong_lifecycle.domain.project.states import (
    INITIAL_PROJECT_STATUS,
    PROJECT_TRANSITIONS,
    ProjectStatus,
)

__all__ = [
    "ProjectStatus",
    "ProjectStateMachine",
    "PROJECT_TRANSITIONS",
    "INITIAL_PROJECT_STATUS",
]
