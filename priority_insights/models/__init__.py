"""Data models for projects, tasks, notes, settings and results."""

from .note import Note
from .project import Complexity, Currency, Project, ProjectType, format_project_type
from .results import (
    DayProductivity,
    FactorScore,
    InsightResult,
    InsufficientData,
    Ok,
    PriorityRange,
    ProjectTypeEfficiency,
    ScoreBreakdown,
    TimeEstimateAccuracy,
    UpcomingDeadlines,
    UserInsights,
)
from .settings import Goal, GoalTimeframe, Skill, Stage, UserSettings, Workflow
from .snapshot import Snapshot
from .task import Task, TaskStatus

__all__ = [
    'Complexity',
    'Currency',
    'DayProductivity',
    'FactorScore',
    'Goal',
    'GoalTimeframe',
    'InsightResult',
    'InsufficientData',
    'Note',
    'Ok',
    'PriorityRange',
    'Project',
    'ProjectType',
    'ProjectTypeEfficiency',
    'ScoreBreakdown',
    'Skill',
    'Snapshot',
    'Stage',
    'Task',
    'TaskStatus',
    'TimeEstimateAccuracy',
    'UpcomingDeadlines',
    'UserInsights',
    'UserSettings',
    'Workflow',
    'format_project_type',
]
