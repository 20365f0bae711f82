"""Project priority scoring."""

from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .ordering import order_tasks
from .priority import PriorityScorer, calculate_priority_score

__all__ = [
    'DEFAULT_SCORING_CONFIG',
    'PriorityScorer',
    'ScoringConfig',
    'calculate_priority_score',
    'order_tasks',
]
