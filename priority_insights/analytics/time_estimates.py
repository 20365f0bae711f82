"""Time-estimate accuracy analysis."""

import logging
from enum import Enum
from typing import Dict, List, Mapping, Optional

from ..models.project import Project, format_project_type
from ..models.results import InsightResult, InsufficientData, Ok, TimeEstimateAccuracy
from ..models.task import Task

logger = logging.getLogger(__name__)

MIN_TASKS_WITH_TIME_DATA = 3
MIN_TASKS_PER_TYPE = 2
MIN_TASKS_FOR_ESTIMATION_STYLE = 5

# Accuracy drops 50 points per 1.0 of ratio error: 0 at a ratio of 3.0 or 0.0
ACCURACY_PENALTY_PER_RATIO_UNIT = 50

OVERESTIMATOR_MAX_RATIO = 0.8
UNDERESTIMATOR_MIN_RATIO = 1.2

UNKNOWN_PROJECT_TYPE = "unknown"


class EstimationStyle(Enum):
    OVERESTIMATOR = "overestimator"
    UNDERESTIMATOR = "underestimator"
    BALANCED = "balanced"
    NOT_ENOUGH_DATA = "not enough data"

    @property
    def description(self) -> str:
        return _ESTIMATION_STYLE_DESCRIPTIONS[self]


_ESTIMATION_STYLE_DESCRIPTIONS = {
    EstimationStyle.OVERESTIMATOR: "Overestimator (you finish faster than estimated)",
    EstimationStyle.UNDERESTIMATOR: "Underestimator (tasks take longer than estimated)",
    EstimationStyle.BALANCED: "Balanced estimator (your estimates are quite accurate)",
    EstimationStyle.NOT_ENOUGH_DATA: "Not enough data",
}


def estimate_accuracy(ratio: float) -> float:
    """Accuracy of one estimate from its actual/estimated ratio, in [0, 100]."""
    return max(0.0, 100 - abs(ratio - 1) * ACCURACY_PENALTY_PER_RATIO_UNIT)


def tasks_with_time_data(tasks: List[Task]) -> List[Task]:
    return [task for task in tasks if task.has_time_data]


def project_type_of(task: Task, projects: Mapping[str, Project]) -> str:
    """Project type key for a task, ``unknown`` when the project is missing."""
    project: Optional[Project] = projects.get(task.project_id) if task.project_id else None
    if project is None or not project.project_type:
        return UNKNOWN_PROJECT_TYPE
    return project.project_type


def group_by_project_type(tasks: List[Task], projects: Mapping[str, Project]) -> Dict[str, List[Task]]:
    """Group tasks by project type, in order of first appearance."""
    groups: Dict[str, List[Task]] = {}
    for task in tasks:
        groups.setdefault(project_type_of(task, projects), []).append(task)
    return groups


def get_time_estimate_accuracy(
    tasks: List[Task],
    projects: Mapping[str, Project],
) -> InsightResult[List[TimeEstimateAccuracy]]:
    """Estimate accuracy per project type, most tasks first."""
    timed = tasks_with_time_data(tasks)
    if len(timed) < MIN_TASKS_WITH_TIME_DATA:
        logger.debug("Time estimate accuracy suppressed: %d timed tasks", len(timed))
        return InsufficientData(
            f"need at least {MIN_TASKS_WITH_TIME_DATA} completed tasks with time data, got {len(timed)}"
        )

    results = []
    for project_type, group in group_by_project_type(timed, projects).items():
        if len(group) < MIN_TASKS_PER_TYPE:
            continue

        count = len(group)
        accuracies = [estimate_accuracy(task.get_time_ratio()) for task in group]
        results.append(TimeEstimateAccuracy(
            task_type=format_project_type(project_type),
            accuracy_score=sum(accuracies) / count,
            average_estimated_time=sum(task.estimated_time for task in group) / count,
            average_actual_time=sum(task.actual_time for task in group) / count,
            task_count=count,
        ))

    if not results:
        return InsufficientData(
            f"no project type has at least {MIN_TASKS_PER_TYPE} completed tasks with time data"
        )

    # Stable: ties keep first-appearance order
    results.sort(key=lambda item: item.task_count, reverse=True)
    return Ok(results)


def get_estimation_style(tasks: List[Task]) -> EstimationStyle:
    """Classify whether the user tends to over- or underestimate."""
    timed = tasks_with_time_data(tasks)
    if len(timed) < MIN_TASKS_FOR_ESTIMATION_STYLE:
        return EstimationStyle.NOT_ENOUGH_DATA

    average_ratio = sum(task.get_time_ratio() for task in timed) / len(timed)
    if average_ratio < OVERESTIMATOR_MAX_RATIO:
        return EstimationStyle.OVERESTIMATOR
    if average_ratio > UNDERESTIMATOR_MIN_RATIO:
        return EstimationStyle.UNDERESTIMATOR
    return EstimationStyle.BALANCED
