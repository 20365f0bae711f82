"""Versioned weight and lookup tables for priority scoring."""

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from ..utils.config import ConfigError, get_default_config, merge_config

logger = logging.getLogger(__name__)

FACTORS = ('cost', 'timeline', 'user_priority', 'project_type', 'complexity')


def _frozen_table(name: str, table: Mapping[str, Any]) -> Mapping[str, float]:
    values = {}
    for key, value in table.items():
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise ConfigError(f"{name}[{key!r}] must be a number, got {value!r}")
        if not 0 <= number <= 100:
            raise ConfigError(f"{name}[{key!r}] must be within [0, 100], got {number}")
        values[str(key)] = number
    return MappingProxyType(values)


@dataclass(frozen=True)
class ScoringConfig:
    """
    Immutable scoring configuration.

    The five factor weights must sum to 1.0. The project-type and complexity
    tables map a key to a score in [0, 100]; adding a project type only needs
    a new table entry.
    """

    version: int
    weights: Mapping[str, float]
    project_type_priorities: Mapping[str, float]
    complexity_values: Mapping[str, float]

    def __post_init__(self):
        unknown = set(self.weights) - set(FACTORS)
        if unknown:
            raise ConfigError(f"Unknown scoring weights: {sorted(unknown)}")
        missing = set(FACTORS) - set(self.weights)
        if missing:
            raise ConfigError(f"Missing scoring weights: {sorted(missing)}")
        total = sum(self.weights.values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ConfigError(f"Scoring weights must sum to 1.0, got {total}")
        if any(weight < 0 for weight in self.weights.values()):
            raise ConfigError("Scoring weights must be non-negative")

    @classmethod
    def from_dict(cls, section: Optional[Dict[str, Any]] = None) -> 'ScoringConfig':
        """Build from a ``scoring`` config section, merged over the defaults."""
        defaults = get_default_config()['scoring']
        merged = merge_config(defaults, section or {})

        weights = {}
        for key, value in merged['weights'].items():
            try:
                weights[str(key)] = float(value)
            except (TypeError, ValueError):
                raise ConfigError(f"weights[{key!r}] must be a number, got {value!r}")

        config = cls(
            version=int(merged.get('version', 1)),
            weights=MappingProxyType(weights),
            project_type_priorities=_frozen_table(
                'project_type_priorities', merged['project_type_priorities']
            ),
            complexity_values=_frozen_table('complexity_values', merged['complexity_values']),
        )
        logger.debug("Scoring config v%s: weights=%s", config.version, dict(config.weights))
        return config

    def to_dict(self) -> Dict[str, Any]:
        return {
            'version': self.version,
            'weights': dict(self.weights),
            'project_type_priorities': dict(self.project_type_priorities),
            'complexity_values': dict(self.complexity_values),
        }


DEFAULT_SCORING_CONFIG = ScoringConfig.from_dict()
