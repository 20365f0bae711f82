"""Configuration management."""

import json
import logging
import yaml
from pathlib import Path
from typing import Dict, Any

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration section is present but invalid."""


def load_data_file(file_path: str) -> Dict[str, Any]:
    """Load a mapping from a YAML or JSON file."""
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported file format: {path.suffix}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"File must contain a mapping at the top level: {file_path}")
    return data


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file."""
    data = load_data_file(config_path)
    logger.debug("Loaded config from %s (sections: %s)", config_path, sorted(data))
    return data


def load_config_or_default(config_path: str) -> Dict[str, Any]:
    """Load configuration from a file when it exists, else the built-in defaults."""
    if config_path and Path(config_path).exists():
        return merge_config(get_default_config(), load_config(config_path))
    return get_default_config()


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` over ``base`` without mutating either."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'scoring': {
            'version': 1,
            'weights': {
                'cost': 0.25,
                'timeline': 0.20,
                'user_priority': 0.25,
                'project_type': 0.15,
                'complexity': 0.15,
            },
            'project_type_priorities': {
                'retainer': 80,
                'mvp': 90,
                'website': 70,
                'landing_page': 60,
                'content_creation': 50,
                'content_strategy': 65,
                'other': 50,
            },
            'complexity_values': {
                'easy': 30,
                'medium': 60,
                'hard': 90,
            },
        },
        'sample': {
            'seed': 42,
            'project_count': 5,
            'task_count': 40,
            'note_count': 6,
        },
    }
