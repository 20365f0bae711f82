"""Task data model."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional

from ..utils.datetime_utils import parse_date, parse_datetime
from .base import parse_enum, parse_optional_float, record_to_dict


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Task:
    """Represents a unit of project work with estimate and tracked time.

    ``priority_score`` uses the 1-10 task scale, not the 0-100 project scale.
    ``actual_time`` and ``completed_at`` are only meaningful once completed.
    """

    id: str
    project_id: Optional[str]
    description: str = ""
    estimated_time: float = 0.0
    actual_time: Optional[float] = None
    priority_score: Optional[float] = None
    due_date: Optional[date] = None
    stage: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    started_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Task':
        """Build a task from its stored representation."""
        project_id = data.get('project_id')
        estimated_time = parse_optional_float(data.get('estimated_time'))

        return cls(
            id=str(data['id']),
            project_id=str(project_id) if project_id is not None else None,
            description=data.get('description', ''),
            estimated_time=estimated_time if estimated_time is not None else 0.0,
            actual_time=parse_optional_float(data.get('actual_time')),
            priority_score=parse_optional_float(data.get('priority_score')),
            due_date=parse_date(data.get('due_date')),
            stage=data.get('stage') or None,
            status=parse_enum(TaskStatus, data.get('status'), TaskStatus.PENDING),
            completed_at=parse_datetime(data.get('completed_at')),
            created_at=parse_datetime(data.get('created_at')),
            started_at=parse_datetime(data.get('started_at')),
        )

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    @property
    def is_pending(self) -> bool:
        return self.status == TaskStatus.PENDING

    @property
    def has_time_data(self) -> bool:
        """Completed with a positive estimate and a positive tracked time."""
        return (
            self.is_completed
            and bool(self.estimated_time)
            and self.estimated_time > 0
            and self.actual_time is not None
            and self.actual_time > 0
        )

    def get_time_ratio(self) -> Optional[float]:
        """Calculate actual / estimated time, or None when undefined."""
        if not self.has_time_data:
            return None
        return self.actual_time / self.estimated_time

    def to_dict(self) -> Dict[str, Any]:
        return record_to_dict(self)
