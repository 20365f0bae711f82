"""Shared helpers for record (de)serialization."""

from dataclasses import asdict
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

from ..utils.datetime_utils import Weekday

E = TypeVar('E', bound=Enum)


def parse_enum(enum_cls: Type[E], value: Any, default: Optional[E] = None) -> Optional[E]:
    """Coerce a raw value into ``enum_cls``; empty values yield ``default``."""
    if value is None or value == "":
        return default
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(member.value) for member in enum_cls)
        raise ValueError(f"Invalid {enum_cls.__name__} {value!r} (expected one of: {allowed})")


def parse_optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def to_plain(value: Any) -> Any:
    """Convert dataclass output into JSON-friendly primitives."""
    if isinstance(value, Weekday):
        return value.day_number
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(to_plain(k)): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value


def record_to_dict(record) -> Dict[str, Any]:
    """Convert a dataclass record to a dictionary for JSON export."""
    return to_plain(asdict(record))
