"""A consistent point-in-time set of records handed to the engine."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .note import Note
from .project import Project
from .settings import UserSettings
from .task import Task


@dataclass(frozen=True)
class Snapshot:
    projects: List[Project] = field(default_factory=list)
    tasks: List[Task] = field(default_factory=list)
    notes: List[Note] = field(default_factory=list)
    settings: Optional[UserSettings] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Snapshot':
        settings = data.get('settings')
        return cls(
            projects=[Project.from_dict(item) for item in data.get('projects') or []],
            tasks=[Task.from_dict(item) for item in data.get('tasks') or []],
            notes=[Note.from_dict(item) for item in data.get('notes') or []],
            settings=UserSettings.from_dict(settings) if settings is not None else None,
        )

    @property
    def projects_by_id(self) -> Dict[str, Project]:
        """The ``project_id -> Project`` join map used by the insight functions."""
        return {project.id: project for project in self.projects}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'projects': [project.to_dict() for project in self.projects],
            'tasks': [task.to_dict() for task in self.tasks],
            'notes': [note.to_dict() for note in self.notes],
            'settings': self.settings.to_dict() if self.settings is not None else None,
        }
