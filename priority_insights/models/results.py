"""Result models returned by the scoring and insight functions."""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from .base import record_to_dict, to_plain

T = TypeVar('T')


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A computed insight."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        value = self.value
        if isinstance(value, list):
            payload = [item.to_dict() if hasattr(item, 'to_dict') else to_plain(item) for item in value]
        elif hasattr(value, 'to_dict'):
            payload = value.to_dict()
        else:
            payload = to_plain(value)
        return {'status': 'ok', 'value': payload}


@dataclass(frozen=True)
class InsufficientData:
    """Too few samples for a meaningful statistic; nothing is computed."""

    reason: str

    @property
    def is_ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {'status': 'insufficient_data', 'reason': self.reason}


InsightResult = Union[Ok[T], InsufficientData]


@dataclass(frozen=True)
class FactorScore:
    """One priority factor: its bracket, raw score and weighted contribution."""

    name: str
    bracket: str
    raw_score: float
    weight: float
    contribution: float


@dataclass(frozen=True)
class ScoreBreakdown:
    """Detailed breakdown of how a project's priority score was calculated."""

    project_id: Optional[str]
    total: int
    factors: List[FactorScore] = field(default_factory=list)
    config_version: int = 1

    def factor(self, name: str) -> FactorScore:
        for factor in self.factors:
            if factor.name == name:
                return factor
        raise KeyError(name)

    def to_dict(self) -> Dict[str, Any]:
        return record_to_dict(self)

    def to_human_readable(self) -> str:
        """Generate a short explanation, one line per factor."""
        lines = [f"Priority {self.total}/100 (project {self.project_id})"]
        for factor in self.factors:
            lines.append(
                f"  {factor.name:<14} {factor.bracket:<24} "
                f"{factor.raw_score:>5.0f} x {factor.weight:.2f} = {factor.contribution:.2f}"
            )
        return "\n".join(lines)


@dataclass(frozen=True)
class UserInsights:
    task_completion_rate: float
    average_actual_vs_estimated: float
    estimation_accuracy: float
    project_balance_score: float
    total_completed_tasks: int
    total_tracked_time: float
    most_productive_day: Optional[str] = None
    most_efficient_project_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return record_to_dict(self)


@dataclass(frozen=True)
class TimeEstimateAccuracy:
    task_type: str
    accuracy_score: float
    average_estimated_time: float
    average_actual_time: float
    task_count: int

    def to_dict(self) -> Dict[str, Any]:
        return record_to_dict(self)


@dataclass(frozen=True)
class ProjectTypeEfficiency:
    project_type: str
    task_count: int
    completed_count: int
    completion_rate: float
    average_time_ratio: float

    def to_dict(self) -> Dict[str, Any]:
        return record_to_dict(self)


@dataclass(frozen=True)
class DayProductivity:
    day: str
    task_count: int
    completed_count: int
    average_time_per_task: float

    def to_dict(self) -> Dict[str, Any]:
        return record_to_dict(self)


@dataclass(frozen=True)
class PriorityRange:
    min: float = 0
    max: float = 0
    avg: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return record_to_dict(self)


@dataclass(frozen=True)
class UpcomingDeadlines:
    count: int
    nearest: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {'count': self.count}
        if self.nearest is not None:
            result['nearest'] = self.nearest
        return result
