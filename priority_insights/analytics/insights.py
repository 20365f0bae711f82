"""Overall productivity insights across all tasks."""

import logging
from typing import Dict, List, Mapping, Optional

from ..models.project import Project
from ..models.results import InsightResult, InsufficientData, Ok, UserInsights
from ..models.settings import UserSettings
from ..models.task import Task
from .productivity import get_most_productive_day
from .project_types import get_project_type_efficiency
from .time_estimates import estimate_accuracy, tasks_with_time_data

logger = logging.getLogger(__name__)

MIN_TASKS_FOR_INSIGHTS = 5
MIN_COMPLETED_TASKS = 3
MIN_TASKS_WITH_TIME_DATA = 2


def project_balance_score(tasks: List[Task]) -> float:
    """
    How evenly tasks are spread across the projects they reference.

    100 means every project holds the same share of tasks; 0 means one
    project holds all of them. Computed as ``100 * (1 - avg_dev / max_dev)``
    where ``avg_dev`` is the mean absolute deviation of each project's share
    from ``1/n`` and ``max_dev = (n - 1) / n``.
    """
    counts: Dict[Optional[str], int] = {}
    for task in tasks:
        counts[task.project_id] = counts.get(task.project_id, 0) + 1

    project_count = len(counts)
    if project_count <= 1:
        return 100.0

    total = sum(counts.values())
    even_share = 1 / project_count
    deviations = [abs(count / total - even_share) for count in counts.values()]
    average_deviation = sum(deviations) / project_count
    max_deviation = (project_count - 1) / project_count

    return max(0.0, 100 * (1 - average_deviation / max_deviation))


def get_user_insights(
    tasks: List[Task],
    projects: Mapping[str, Project],
    settings: Optional[UserSettings] = None,
) -> InsightResult[UserInsights]:
    """Completion, estimation, weekday and balance insights over all tasks.

    ``settings`` is accepted for parity with the other views; no current
    insight depends on it.
    """
    if len(tasks) < MIN_TASKS_FOR_INSIGHTS:
        logger.debug("User insights suppressed: %d tasks", len(tasks))
        return InsufficientData(f"need at least {MIN_TASKS_FOR_INSIGHTS} tasks, got {len(tasks)}")

    completed = [task for task in tasks if task.is_completed]
    timed = tasks_with_time_data(completed)

    average_ratio = 0.0
    accuracy = 0.0
    if timed:
        ratios = [task.get_time_ratio() for task in timed]
        average_ratio = sum(ratios) / len(ratios)
        accuracy = sum(estimate_accuracy(ratio) for ratio in ratios) / len(ratios)

    most_productive_day = get_most_productive_day(completed)

    efficiency = get_project_type_efficiency(tasks, projects)
    most_efficient_type = efficiency.value[0].project_type if efficiency.is_ok else None

    return Ok(UserInsights(
        task_completion_rate=len(completed) / len(tasks) * 100,
        average_actual_vs_estimated=average_ratio,
        estimation_accuracy=accuracy,
        project_balance_score=project_balance_score(tasks),
        total_completed_tasks=len(completed),
        total_tracked_time=sum(task.actual_time for task in timed),
        most_productive_day=most_productive_day.display_name if most_productive_day else None,
        most_efficient_project_type=most_efficient_type,
    ))


def has_enough_data_for_insights(tasks: List[Task]) -> bool:
    """At least 5 tasks, 3 of them completed and 2 with tracked time."""
    completed = [task for task in tasks if task.is_completed]
    if len(tasks) < MIN_TASKS_FOR_INSIGHTS or len(completed) < MIN_COMPLETED_TASKS:
        return False
    return len(tasks_with_time_data(completed)) >= MIN_TASKS_WITH_TIME_DATA
