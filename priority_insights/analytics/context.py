"""Compact, deterministic user context for embedding into generation prompts."""

import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..models.note import Note
from ..models.project import Project
from ..models.settings import UserSettings
from ..models.task import Task
from ..utils.datetime_utils import format_work_days
from .productivity import get_upcoming_deadlines
from .project_types import get_project_priority_range, get_project_type_distribution
from .time_estimates import get_estimation_style

MAX_SKILLS = 20
MAX_STAGES = 10
MAX_PROJECT_TYPES = 10

MIN_NOTES_FOR_DETAIL_LEVEL = 3
DETAIL_MARKERS = ("because", "therefore", "however", "additionally", "specifically")
NUMERIC_TOKEN = re.compile(r"\d+([.,%]\d+)?")
LIST_LINE = re.compile(r"\n(?:- |\d+\. )")

SKILL_LEVELS = {
    1: "Beginner",
    2: "Basic",
    3: "Intermediate",
    4: "Advanced",
    5: "Expert",
}


class NoteDetailLevel(Enum):
    HIGH_LEVEL = "high-level"
    BALANCED = "balanced"
    DETAILED = "detailed"
    NOT_ENOUGH_DATA = "not enough data"

    @property
    def description(self) -> str:
        return _NOTE_DETAIL_DESCRIPTIONS[self]


_NOTE_DETAIL_DESCRIPTIONS = {
    NoteDetailLevel.HIGH_LEVEL: "High-level notes (few specific details)",
    NoteDetailLevel.BALANCED: "Balanced notes (mix of high-level and detailed)",
    NoteDetailLevel.DETAILED: "Detailed notes (rich with specifics)",
    NoteDetailLevel.NOT_ENOUGH_DATA: "Not enough notes to determine",
}


def get_skill_level_description(level: int) -> str:
    return SKILL_LEVELS.get(level, "Unknown")


def note_detail_score(content: str) -> int:
    """Detail heuristic for one note: markers, numbers and list lines."""
    text = content.lower()
    score = sum(1 for marker in DETAIL_MARKERS if marker in text)
    if NUMERIC_TOKEN.search(text):
        score += 1
    if LIST_LINE.search(text):
        score += 2
    return score


def get_note_detail_level(notes: List[Note]) -> NoteDetailLevel:
    if len(notes) < MIN_NOTES_FOR_DETAIL_LEVEL:
        return NoteDetailLevel.NOT_ENOUGH_DATA

    average = sum(note_detail_score(note.content) for note in notes) / len(notes)
    if average < 0.5:
        return NoteDetailLevel.HIGH_LEVEL
    if average < 1.5:
        return NoteDetailLevel.BALANCED
    return NoteDetailLevel.DETAILED


def get_average_note_length(notes: List[Note]) -> str:
    """Describe the mean note length in words."""
    if not notes:
        return "No notes"

    total_words = sum(len(note.content.split()) for note in notes)
    # Round half up, matching how word counts are shown elsewhere
    average = int(total_words / len(notes) + 0.5)

    if average < 30:
        return "Brief notes (average less than 30 words)"
    if average < 100:
        return "Medium-length notes (average 30-100 words)"
    return "Detailed notes (average more than 100 words)"


def get_ai_user_context(
    settings: Optional[UserSettings],
    tasks: List[Task],
    projects: List[Project],
    notes: List[Note],
    as_of: Optional[Union[date, datetime]] = None,
) -> Dict[str, Any]:
    """Summarize skills, work patterns, projects, task habits and notes."""
    context: Dict[str, Any] = {
        'skills': [],
        'work_patterns': {},
        'projects': {},
        'insights': {},
    }

    if settings is not None:
        context['skills'] = [
            {
                'name': skill.name,
                'proficiency': skill.proficiency,
                'description': get_skill_level_description(skill.proficiency),
            }
            for skill in settings.skills[:MAX_SKILLS]
        ]

        workflow = settings.workflow
        if workflow is not None:
            context['work_patterns'] = {
                'max_daily_hours': workflow.max_daily_hours,
                'work_days': format_work_days(workflow.work_days),
                'stages': [stage.name for stage in workflow.stages[:MAX_STAGES]],
                'preferred_currency': workflow.preferred_currency.value,
            }

    if projects:
        distribution = sorted(
            get_project_type_distribution(projects).items(),
            key=lambda item: (-item[1], item[0]),
        )
        context['projects'] = {
            'count': len(projects),
            'types': dict(distribution[:MAX_PROJECT_TYPES]),
            'priority_range': get_project_priority_range(projects).to_dict(),
        }

    if tasks:
        completed = sum(1 for task in tasks if task.is_completed)
        context['insights'] = {
            'completion_rate': f"{completed / len(tasks) * 100:.0f}%" if completed else "No data",
            'estimation_style': get_estimation_style(tasks).description,
            'task_count': len(tasks),
            'upcoming_deadlines': get_upcoming_deadlines(tasks, as_of).to_dict(),
        }

    if notes:
        context['notes'] = {
            'count': len(notes),
            'average_length': get_average_note_length(notes),
            'detail_level': get_note_detail_level(notes).description,
        }

    return context
