"""User settings data model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..utils.datetime_utils import DEFAULT_WORK_DAYS, Weekday
from .base import parse_enum, record_to_dict
from .project import Currency


class GoalTimeframe(str, Enum):
    SHORT_TERM = "short-term"
    LONG_TERM = "long-term"


@dataclass(frozen=True)
class Skill:
    name: str
    proficiency: int = 3


@dataclass(frozen=True)
class Goal:
    description: str
    timeframe: GoalTimeframe = GoalTimeframe.SHORT_TERM


@dataclass(frozen=True)
class Stage:
    name: str
    description: str = ""


@dataclass(frozen=True)
class Workflow:
    """Working preferences: capacity, work days, goals and ordered stages."""

    display_name: Optional[str] = None
    max_daily_hours: float = 8.0
    work_days: Tuple[Weekday, ...] = DEFAULT_WORK_DAYS
    goals: Tuple[Goal, ...] = ()
    stages: Tuple[Stage, ...] = ()
    preferred_currency: Currency = Currency.USD

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Workflow':
        # Accept both the stored camelCase keys and snake_case
        def pick(*keys, default=None):
            for key in keys:
                if data.get(key) is not None:
                    return data[key]
            return default

        max_daily_hours = pick('max_daily_hours', 'maxDailyHours', default=8)
        work_days = pick('work_days', 'workDays')

        return cls(
            display_name=pick('display_name', 'displayName'),
            max_daily_hours=float(max_daily_hours) if float(max_daily_hours) > 0 else 8.0,
            work_days=(
                tuple(sorted({Weekday.parse(day) for day in work_days}, key=lambda day: day.day_number))
                if work_days is not None else DEFAULT_WORK_DAYS
            ),
            goals=tuple(
                Goal(
                    description=goal.get('description', ''),
                    timeframe=parse_enum(GoalTimeframe, goal.get('timeframe'), GoalTimeframe.SHORT_TERM),
                )
                for goal in pick('goals', default=[])
            ),
            stages=tuple(
                Stage(name=stage.get('name', ''), description=stage.get('description', ''))
                for stage in pick('stages', default=[])
            ),
            preferred_currency=parse_enum(
                Currency, pick('preferred_currency', 'preferredCurrency'), Currency.USD
            ),
        )


@dataclass(frozen=True)
class UserSettings:
    skills: List[Skill] = field(default_factory=list)
    workflow: Optional[Workflow] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UserSettings':
        skills = [
            Skill(name=skill.get('name', ''), proficiency=int(skill.get('proficiency', 3)))
            for skill in data.get('skills') or []
        ]
        workflow = data.get('workflow')
        return cls(
            skills=skills,
            workflow=Workflow.from_dict(workflow) if workflow is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return record_to_dict(self)
