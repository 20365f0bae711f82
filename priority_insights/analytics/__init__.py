"""Productivity insights over task, project, note and settings snapshots."""

from .context import NoteDetailLevel, get_ai_user_context, get_average_note_length, get_note_detail_level
from .insights import get_user_insights, has_enough_data_for_insights, project_balance_score
from .productivity import get_most_productive_day, get_productivity_by_day, get_upcoming_deadlines
from .project_types import (
    get_project_priority_range,
    get_project_type_distribution,
    get_project_type_efficiency,
)
from .streak import next_streak
from .time_estimates import EstimationStyle, estimate_accuracy, get_estimation_style, get_time_estimate_accuracy

__all__ = [
    'EstimationStyle',
    'NoteDetailLevel',
    'estimate_accuracy',
    'get_ai_user_context',
    'get_average_note_length',
    'get_estimation_style',
    'get_most_productive_day',
    'get_note_detail_level',
    'get_productivity_by_day',
    'get_project_priority_range',
    'get_project_type_distribution',
    'get_project_type_efficiency',
    'get_time_estimate_accuracy',
    'get_upcoming_deadlines',
    'get_user_insights',
    'has_enough_data_for_insights',
    'next_streak',
    'project_balance_score',
]
