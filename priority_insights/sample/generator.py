"""Deterministic sample snapshot generator for demos and evaluation."""

import random
from dataclasses import replace
from datetime import date, datetime, time, timedelta
from typing import List

from ..models.note import Note
from ..models.project import Complexity, Project, ProjectType
from ..models.settings import Goal, GoalTimeframe, Skill, Stage, UserSettings, Workflow
from ..models.snapshot import Snapshot
from ..models.task import Task, TaskStatus
from ..scoring.priority import PriorityScorer

NOTE_TEMPLATES = [
    "Call with client about scope.",
    "Decided to postpone the launch because the copy is not ready.",
    "Kickoff notes:\n- agree on 3 milestones\n- weekly check-in on Fridays",
    "Budget is 4,500 and the deadline is fixed; however the scope may grow.",
    "Ideas for next quarter.",
    "Specifically, the hero section needs 2 variants.\n1. short headline\n2. long headline",
]


class SampleDataGenerator:
    """Generates reproducible projects, tasks, notes and settings."""

    def __init__(self, seed: int = 42, config: dict = None):
        """Initialize generator with seed for reproducibility."""
        self.seed = seed
        self.random = random.Random(seed)
        self.config = config or {}
        self.sample_config = self.config.get('sample', {})

    def generate_projects(self, count: int, today: date) -> List[Project]:
        """Generate projects with varied budgets, timelines and types."""
        scorer = PriorityScorer()
        project_types = list(ProjectType)
        complexities = list(Complexity)
        projects = []

        for i in range(count):
            is_recurring = self.random.random() < 0.3
            start_date = today - timedelta(days=self.random.randint(0, 120))

            # Recurring projects often have no end date
            if is_recurring and self.random.random() < 0.6:
                end_date = None
            else:
                end_date = today + timedelta(days=self.random.randint(-5, 120))

            draft = Project(
                id=f"project_{i:02d}",
                name=f"Project {i}",
                budget=self.random.choice([None, 500, 2500, 7500, 15000, 30000]),
                start_date=start_date,
                end_date=end_date,
                is_recurring=is_recurring,
                user_priority=self.random.randint(1, 5),
                project_type=self.random.choice(project_types).value,
                complexity=self.random.choice(complexities),
            )
            projects.append(replace(draft, priority_score=scorer.score(draft, today)))

        return projects

    def generate_tasks(self, count: int, projects: List[Project], today: date) -> List[Task]:
        """Generate tasks; about 60% completed with tracked time."""
        tasks = []

        for i in range(count):
            project = self.random.choice(projects)
            estimated_time = self.random.choice([0.5, 1, 2, 3, 4, 6, 8])

            if self.random.random() < 0.6:
                # Overrun factor around 1.2, like most real estimates
                overrun = max(0.3, self.random.gauss(1.2, 0.35))
                completed_day = today - timedelta(days=self.random.randint(1, 28))
                completed_at = datetime.combine(completed_day, time(hour=self.random.randint(8, 19)))
                tasks.append(Task(
                    id=f"task_{i:03d}",
                    project_id=project.id,
                    description=f"Task {i}",
                    estimated_time=estimated_time,
                    actual_time=round(estimated_time * overrun, 2),
                    priority_score=self.random.randint(1, 10),
                    status=TaskStatus.COMPLETED,
                    completed_at=completed_at,
                ))
            else:
                due_date = today + timedelta(days=self.random.randint(0, 30)) if self.random.random() < 0.8 else None
                tasks.append(Task(
                    id=f"task_{i:03d}",
                    project_id=project.id,
                    description=f"Task {i}",
                    estimated_time=estimated_time,
                    priority_score=self.random.randint(1, 10),
                    due_date=due_date,
                    status=TaskStatus.PENDING,
                ))

        return tasks

    def generate_notes(self, count: int, projects: List[Project], today: date) -> List[Note]:
        notes = []
        for i in range(count):
            notes.append(Note(
                id=f"note_{i:02d}",
                project_id=self.random.choice(projects).id if projects else None,
                title=f"Note {i}",
                content=NOTE_TEMPLATES[i % len(NOTE_TEMPLATES)],
                created_at=datetime.combine(today - timedelta(days=i), time(hour=9)),
            ))
        return notes

    def generate_settings(self) -> UserSettings:
        return UserSettings(
            skills=[
                Skill(name="Copywriting", proficiency=4),
                Skill(name="Web design", proficiency=3),
                Skill(name="SEO", proficiency=2),
            ],
            workflow=Workflow(
                display_name="Sample User",
                max_daily_hours=6,
                goals=(Goal("Ship two client sites", GoalTimeframe.SHORT_TERM),),
                stages=(Stage("Research"), Stage("Draft"), Stage("Review")),
            ),
        )

    def generate_snapshot(
        self,
        today: date,
        project_count: int = None,
        task_count: int = None,
        note_count: int = None,
    ) -> Snapshot:
        """Generate a complete snapshot relative to ``today``."""
        project_count = project_count or self.sample_config.get('project_count', 5)
        task_count = task_count or self.sample_config.get('task_count', 40)
        note_count = note_count or self.sample_config.get('note_count', 6)

        projects = self.generate_projects(project_count, today)
        return Snapshot(
            projects=projects,
            tasks=self.generate_tasks(task_count, projects, today),
            notes=self.generate_notes(note_count, projects, today),
            settings=self.generate_settings(),
        )
