"""Estados de projetos das ONGs e tabela de transições."""

from __future__ import annotations

from enum import StrEnum

from ong_lifecycle.domain.fsm.table import TransitionTable


class ProjectStatus(StrEnum):
    DRAFT = "draft"
    PUBLISHED = "published"
    IN_PROGRESS = "in_progress"
    ON_HOLD = "on_hold"
    COMPLETED = "completed"
    ARCHIVED = "archived"
    CANCELLED = "cancelled"


INITIAL_PROJECT_STATUS: ProjectStatus = ProjectStatus.DRAFT

PROJECT_TRANSITIONS: TransitionTable[ProjectStatus] = TransitionTable(
    {
        ProjectStatus.DRAFT: (ProjectStatus.PUBLISHED, ProjectStatus.CANCELLED),
        ProjectStatus.PUBLISHED: (
            ProjectStatus.IN_PROGRESS,
            ProjectStatus.ARCHIVED,
            ProjectStatus.CANCELLED,
        ),
        ProjectStatus.IN_PROGRESS: (
            ProjectStatus.ON_HOLD,
            ProjectStatus.COMPLETED,
            ProjectStatus.CANCELLED,
        ),
        ProjectStatus.ON_HOLD: (ProjectStatus.IN_PROGRESS, ProjectStatus.CANCELLED),
        ProjectStatus.COMPLETED: (ProjectStatus.ARCHIVED,),
        ProjectStatus.ARCHIVED: (ProjectStatus.PUBLISHED,),  # republicação
        ProjectStatus.CANCELLED: (ProjectStatus.DRAFT,),  # recriação
    },
    name="project",
)
