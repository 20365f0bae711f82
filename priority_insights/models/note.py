"""Note data model."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..utils.datetime_utils import parse_datetime
from .base import record_to_dict


@dataclass(frozen=True)
class Note:
    id: str
    content: str = ""
    project_id: Optional[str] = None
    title: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Note':
        project_id = data.get('project_id')
        return cls(
            id=str(data['id']),
            content=data.get('content') or "",
            project_id=str(project_id) if project_id is not None else None,
            title=data.get('title'),
            created_at=parse_datetime(data.get('created_at')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return record_to_dict(self)
