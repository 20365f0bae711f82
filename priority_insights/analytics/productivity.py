"""Productivity patterns by weekday and upcoming deadlines."""

import logging
from datetime import date, datetime
from typing import Dict, List, Optional, Union

from ..models.results import DayProductivity, InsightResult, InsufficientData, Ok, UpcomingDeadlines
from ..models.task import Task
from ..utils.datetime_utils import (
    CANONICAL_WEEKDAYS,
    SUNDAY_FIRST_WEEKDAYS,
    Weekday,
    ceil_days_between,
    weekday_of,
)

logger = logging.getLogger(__name__)

MIN_COMPLETED_TASKS_FOR_PRODUCTIVITY = 5


def _completed_with_timestamp(tasks: List[Task]) -> List[Task]:
    return [task for task in tasks if task.is_completed and task.completed_at is not None]


def group_by_weekday(tasks: List[Task]) -> Dict[Weekday, List[Task]]:
    """Fixed 7-slot map, Monday first, of tasks by completion weekday."""
    groups: Dict[Weekday, List[Task]] = {day: [] for day in CANONICAL_WEEKDAYS}
    for task in tasks:
        groups[weekday_of(task.completed_at)].append(task)
    return groups


def get_productivity_by_day(tasks: List[Task]) -> InsightResult[List[DayProductivity]]:
    """Completed task count and mean tracked time per weekday, Monday to Sunday."""
    completed = _completed_with_timestamp(tasks)
    if len(completed) < MIN_COMPLETED_TASKS_FOR_PRODUCTIVITY:
        logger.debug("Productivity by day suppressed: %d timestamped completions", len(completed))
        return InsufficientData(
            f"need at least {MIN_COMPLETED_TASKS_FOR_PRODUCTIVITY} completed tasks "
            f"with a completion time, got {len(completed)}"
        )

    results = []
    for day, group in group_by_weekday(completed).items():
        if not group:
            continue

        tracked = [task.actual_time for task in group if task.actual_time is not None and task.actual_time > 0]
        results.append(DayProductivity(
            day=day.display_name,
            task_count=len(group),
            completed_count=len(group),
            average_time_per_task=sum(tracked) / len(tracked) if tracked else 0.0,
        ))

    return Ok(results)


def get_most_productive_day(tasks: List[Task]) -> Optional[Weekday]:
    """Weekday with the most completions; ties go to the earliest day Sunday to Saturday."""
    completed = _completed_with_timestamp(tasks)
    if not completed:
        return None

    counts = {day: len(group) for day, group in group_by_weekday(completed).items()}
    best = SUNDAY_FIRST_WEEKDAYS[0]
    for day in SUNDAY_FIRST_WEEKDAYS[1:]:
        if counts[day] > counts[best]:
            best = day
    return best


def get_upcoming_deadlines(
    tasks: List[Task],
    as_of: Optional[Union[date, datetime]] = None,
) -> UpcomingDeadlines:
    """Count pending tasks with a due date and describe the nearest one."""
    now = as_of if as_of is not None else datetime.now()
    dated = [task for task in tasks if task.is_pending and task.due_date is not None]
    if not dated:
        return UpcomingDeadlines(count=0)

    nearest = min(task.due_date for task in dated)
    days_until = ceil_days_between(now, nearest)

    return UpcomingDeadlines(
        count=len(dated),
        nearest="Today" if days_until <= 0 else f"In {days_until} days",
    )
