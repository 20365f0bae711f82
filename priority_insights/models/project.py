"""Project data model."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional

from ..utils.datetime_utils import parse_date
from .base import parse_enum, parse_optional_float, record_to_dict


class ProjectType(str, Enum):
    """Known project types. Scoring looks types up by value, so the
    configured priority table may also carry types not listed here."""

    RETAINER = "retainer"
    MVP = "mvp"
    LANDING_PAGE = "landing_page"
    WEBSITE = "website"
    CONTENT_CREATION = "content_creation"
    CONTENT_STRATEGY = "content_strategy"
    OTHER = "other"


class Complexity(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Currency(str, Enum):
    USD = "USD"
    INR = "INR"
    GBP = "GBP"


def format_project_type(project_type: Optional[str]) -> str:
    """Display name for a project type key, e.g. ``landing_page`` -> ``Landing Page``."""
    if not project_type:
        return "Unknown"
    key = project_type.value if isinstance(project_type, Enum) else str(project_type)
    return " ".join(word[:1].upper() + word[1:] for word in key.split("_"))


@dataclass(frozen=True)
class Project:
    """A client or personal project. ``priority_score`` is derived (0-100)."""

    id: str
    name: str = ""
    budget: Optional[float] = None
    currency: Currency = Currency.USD
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_recurring: bool = False
    user_priority: Optional[int] = 3
    project_type: Optional[str] = None
    project_type_other: Optional[str] = None
    complexity: Optional[Complexity] = Complexity.MEDIUM
    priority_score: Optional[int] = None
    client_name: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Project':
        """Build a project from its stored representation."""
        user_priority = data.get('user_priority', 3)
        priority_score = data.get('priority_score')
        project_type = data.get('project_type') or None

        return cls(
            id=str(data['id']),
            name=data.get('name', ''),
            budget=parse_optional_float(data.get('budget')),
            currency=parse_enum(Currency, data.get('currency'), Currency.USD),
            start_date=parse_date(data.get('start_date')),
            end_date=parse_date(data.get('end_date')),
            is_recurring=bool(data.get('is_recurring', False)),
            user_priority=int(user_priority) if user_priority is not None else None,
            project_type=str(project_type) if project_type is not None else None,
            project_type_other=data.get('project_type_other'),
            complexity=parse_enum(Complexity, data.get('complexity'), None),
            priority_score=int(priority_score) if priority_score is not None else None,
            client_name=data.get('client_name'),
            description=data.get('description'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return record_to_dict(self)
