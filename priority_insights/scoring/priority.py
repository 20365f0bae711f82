"""
Project priority scoring.

A project's priority is a weighted sum of five factor scores, each in
[0, 100]:

    priority = cost * 0.25 + timeline * 0.20 + user_priority * 0.25
             + project_type * 0.15 + complexity * 0.15

Factors use discrete brackets rather than continuous formulas, so a score can
be explained as "which bracket did each factor land in" and stays stable
against small input changes. Missing fields fall back to neutral defaults;
scoring never raises for a type-valid (possibly partial) project.
"""

import logging
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple, Union

from ..models.project import Project
from ..models.results import FactorScore, ScoreBreakdown
from ..utils.datetime_utils import ceil_days_between, parse_date, to_datetime
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig

logger = logging.getLogger(__name__)

ProjectLike = Union[Project, Mapping[str, Any]]

# (minimum budget, score)
COST_TIERS = (
    (20000, 100),
    (10000, 80),
    (5000, 60),
    (1000, 40),
)
COST_BASE_SCORE = 20

# (maximum days remaining until end date, score)
DEADLINE_TIERS = (
    (7, 100),
    (14, 85),
    (30, 70),
    (60, 50),
    (90, 30),
)
DEADLINE_FAR_SCORE = 15
RECURRING_DAMPING = 15
RECURRING_MIN_SCORE = 15

# (maximum days since start, score) for projects without an end date
START_AGE_TIERS = (
    (7, 65),
    (30, 50),
    (90, 40),
)
START_AGE_LONG_RUNNING_SCORE = 30

USER_PRIORITY_MULTIPLIER = 20
DEFAULT_USER_PRIORITY_SCORE = 60
DEFAULT_PROJECT_TYPE_SCORE = 50
DEFAULT_COMPLEXITY_SCORE = 60

MIN_SCORE = 0
MAX_SCORE = 100


def _field(project: ProjectLike, name: str) -> Any:
    if isinstance(project, Mapping):
        return project.get(name)
    return getattr(project, name, None)


def _key(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _clamp(value: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, value))


class PriorityScorer:
    """
    Main class for calculating project priority scores.

    Stateless apart from its immutable configuration; a single instance can
    be shared freely.
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        """Initialize scorer with a scoring configuration."""
        self.config = config or DEFAULT_SCORING_CONFIG

    def score(self, project: ProjectLike, as_of: Optional[Union[date, datetime]] = None) -> int:
        """Priority score in [0, 100] for a project as of the given moment."""
        return self.explain(project, as_of).total

    def explain(
        self,
        project: ProjectLike,
        as_of: Optional[Union[date, datetime]] = None,
    ) -> ScoreBreakdown:
        """Compute every factor, its bracket and contribution, and the total."""
        now = to_datetime(as_of) if as_of is not None else datetime.now()

        components = {
            'cost': self.cost_score(_field(project, 'budget')),
            'timeline': self.timeline_score(
                parse_date(_field(project, 'start_date')),
                parse_date(_field(project, 'end_date')),
                bool(_field(project, 'is_recurring')),
                now,
            ),
            'user_priority': self.user_priority_score(_field(project, 'user_priority')),
            'project_type': self.project_type_score(_field(project, 'project_type')),
            'complexity': self.complexity_score(_field(project, 'complexity')),
        }

        factors: List[FactorScore] = []
        weighted_sum = Decimal(0)
        for name, (raw_score, bracket) in components.items():
            weight = self.config.weights[name]
            contribution = Decimal(str(raw_score)) * Decimal(str(weight))
            weighted_sum += contribution
            factors.append(FactorScore(
                name=name,
                bracket=bracket,
                raw_score=raw_score,
                weight=weight,
                contribution=float(contribution),
            ))

        # Round half up, then keep within range
        rounded = int(weighted_sum.quantize(Decimal(1), rounding=ROUND_HALF_UP))
        total = int(_clamp(rounded))

        project_id = _key(_field(project, 'id'))
        logger.debug("Project %s scored %d (weighted sum %s)", project_id, total, weighted_sum)

        return ScoreBreakdown(
            project_id=project_id,
            total=total,
            factors=factors,
            config_version=self.config.version,
        )

    def cost_score(self, budget: Optional[float]) -> Tuple[float, str]:
        """Tiered budget score; a missing or zero budget scores 0."""
        if not budget:
            return 0, "no budget"

        for minimum, score in COST_TIERS:
            if budget >= minimum:
                return score, f"budget >= {minimum}"
        return COST_BASE_SCORE, f"budget < {COST_TIERS[-1][0]}"

    def timeline_score(
        self,
        start_date: Optional[date],
        end_date: Optional[date],
        is_recurring: bool,
        now: datetime,
    ) -> Tuple[float, str]:
        """Urgency from the end date, or from project age when only a start date is known."""
        if end_date is not None:
            days_remaining = max(0, ceil_days_between(now, end_date))

            score = DEADLINE_FAR_SCORE
            bracket = f"due in > {DEADLINE_TIERS[-1][0]} days"
            for max_days, tier_score in DEADLINE_TIERS:
                if days_remaining <= max_days:
                    score = tier_score
                    bracket = f"due in <= {max_days} days"
                    break

            if is_recurring:
                score = max(RECURRING_MIN_SCORE, score - RECURRING_DAMPING)
                bracket += " (recurring)"
            return score, bracket

        if start_date is not None:
            days_since_start = max(0, ceil_days_between(start_date, now))

            for max_days, tier_score in START_AGE_TIERS:
                if days_since_start <= max_days:
                    return tier_score, f"started <= {max_days} days ago"
            return START_AGE_LONG_RUNNING_SCORE, f"started > {START_AGE_TIERS[-1][0]} days ago"

        return 0, "no dates"

    def user_priority_score(self, user_priority: Optional[int]) -> Tuple[float, str]:
        """Linear map of the 1-5 user priority to 20-100; unset scores 60."""
        if not user_priority:
            return DEFAULT_USER_PRIORITY_SCORE, "priority unset"
        return _clamp(user_priority * USER_PRIORITY_MULTIPLIER), f"priority {user_priority}"

    def project_type_score(self, project_type: Optional[str]) -> Tuple[float, str]:
        key = _key(project_type)
        if key is None:
            return DEFAULT_PROJECT_TYPE_SCORE, "type unset"
        if key not in self.config.project_type_priorities:
            return DEFAULT_PROJECT_TYPE_SCORE, f"type {key} (unknown)"
        return self.config.project_type_priorities[key], f"type {key}"

    def complexity_score(self, complexity: Optional[str]) -> Tuple[float, str]:
        key = _key(complexity)
        if key is None:
            return DEFAULT_COMPLEXITY_SCORE, "complexity unset"
        if key not in self.config.complexity_values:
            return DEFAULT_COMPLEXITY_SCORE, f"complexity {key} (unknown)"
        return self.config.complexity_values[key], f"complexity {key}"


_default_scorer = PriorityScorer()


def calculate_priority_score(
    project: ProjectLike,
    as_of: Optional[Union[date, datetime]] = None,
) -> int:
    """Score a project with the default configuration."""
    return _default_scorer.score(project, as_of)
