"""Project-type efficiency and distribution."""

import logging
from typing import Dict, List, Mapping

from ..models.project import Project, format_project_type
from ..models.results import InsightResult, InsufficientData, Ok, PriorityRange, ProjectTypeEfficiency
from ..models.task import Task
from .time_estimates import group_by_project_type

logger = logging.getLogger(__name__)

MIN_TASKS_FOR_EFFICIENCY = 5
MIN_TASKS_PER_TYPE = 3

UNSPECIFIED_PROJECT_TYPE = "unspecified"


def get_project_type_efficiency(
    tasks: List[Task],
    projects: Mapping[str, Project],
) -> InsightResult[List[ProjectTypeEfficiency]]:
    """Completion rate and time ratio per project type, best completion rate first."""
    if len(tasks) < MIN_TASKS_FOR_EFFICIENCY:
        logger.debug("Project type efficiency suppressed: %d tasks", len(tasks))
        return InsufficientData(f"need at least {MIN_TASKS_FOR_EFFICIENCY} tasks, got {len(tasks)}")

    results = []
    for project_type, group in group_by_project_type(tasks, projects).items():
        if len(group) < MIN_TASKS_PER_TYPE:
            continue

        task_count = len(group)
        completed_count = sum(1 for task in group if task.is_completed)

        ratios = [task.get_time_ratio() for task in group if task.has_time_data]
        average_time_ratio = sum(ratios) / len(ratios) if ratios else 1.0

        results.append(ProjectTypeEfficiency(
            project_type=format_project_type(project_type),
            task_count=task_count,
            completed_count=completed_count,
            completion_rate=completed_count / task_count * 100,
            average_time_ratio=average_time_ratio,
        ))

    if not results:
        return InsufficientData(f"no project type has at least {MIN_TASKS_PER_TYPE} tasks")

    results.sort(key=lambda item: item.completion_rate, reverse=True)
    return Ok(results)


def get_project_type_distribution(projects: List[Project]) -> Dict[str, int]:
    """Count projects per type key."""
    counts: Dict[str, int] = {}
    for project in projects:
        key = project.project_type or UNSPECIFIED_PROJECT_TYPE
        counts[key] = counts.get(key, 0) + 1
    return counts


def get_project_priority_range(projects: List[Project]) -> PriorityRange:
    """Min, max and mean over projects that have a positive priority score."""
    scores = [project.priority_score for project in projects if project.priority_score]
    scores = [score for score in scores if score > 0]
    if not scores:
        return PriorityRange()
    return PriorityRange(min=min(scores), max=max(scores), avg=sum(scores) / len(scores))
