"""Deterministic task ordering: priority first, then deadline."""

from datetime import date
from typing import List

from ..models.task import Task


def order_tasks(tasks: List[Task]) -> List[Task]:
    """Order tasks by priority (higher first), then due date (sooner first).

    Tasks with a due date come before undated ones; remaining ties keep input
    order. The input list is not modified.
    """

    def sort_key(task: Task):
        # Primary: priority (higher first, so negate)
        priority_key = -(task.priority_score or 0)

        # Secondary: due date (earlier first, undated last)
        if task.due_date is not None:
            due_key = (0, task.due_date)
        else:
            due_key = (1, date.max)

        return (priority_key, due_key)

    return sorted(tasks, key=sort_key)
