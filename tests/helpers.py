from __future__ import annotations

from datetime import date, datetime

from priority_insights.models import Project, Task, TaskStatus

# Wednesday, noon
REFERENCE_NOW = datetime(2025, 3, 12, 12, 0, 0)


def completed_task(
    task_id: str,
    project_id: str | None = "p1",
    estimated: float = 4.0,
    actual: float | None = 4.0,
    completed_at: datetime | None = REFERENCE_NOW,
) -> Task:
    return Task(
        id=task_id,
        project_id=project_id,
        estimated_time=estimated,
        actual_time=actual,
        status=TaskStatus.COMPLETED,
        completed_at=completed_at,
    )


def pending_task(
    task_id: str,
    project_id: str | None = "p1",
    estimated: float = 2.0,
    due_date: date | None = None,
    priority_score: float | None = None,
) -> Task:
    return Task(
        id=task_id,
        project_id=project_id,
        estimated_time=estimated,
        due_date=due_date,
        priority_score=priority_score,
        status=TaskStatus.PENDING,
    )


def projects_by_id(*projects: Project) -> dict[str, Project]:
    return {project.id: project for project in projects}
