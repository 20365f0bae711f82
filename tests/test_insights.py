from __future__ import annotations

from datetime import datetime
import unittest

from priority_insights.analytics import (
    estimate_accuracy,
    get_user_insights,
    has_enough_data_for_insights,
    project_balance_score,
)
from priority_insights.models import InsufficientData, Project, Task, TaskStatus
from tests.helpers import completed_task, pending_task, projects_by_id

MONDAY = datetime(2025, 3, 10, 10, 0)
TUESDAY = datetime(2025, 3, 11, 10, 0)
SATURDAY = datetime(2025, 3, 15, 10, 0)
SUNDAY = datetime(2025, 3, 16, 10, 0)


class TestEstimateAccuracy(unittest.TestCase):
    def test_accuracy_per_ratio(self) -> None:
        self.assertEqual(100, estimate_accuracy(4 / 4))
        self.assertEqual(75, estimate_accuracy(6 / 4))
        self.assertEqual(50, estimate_accuracy(8 / 4))
        self.assertEqual(0, estimate_accuracy(12 / 4))
        self.assertEqual(0, estimate_accuracy(0.0))
        self.assertEqual(0, estimate_accuracy(10.0))


class TestProjectBalance(unittest.TestCase):
    def test_even_split_is_perfect(self) -> None:
        tasks = [pending_task(f"a{i}", "p1") for i in range(5)] + [pending_task(f"b{i}", "p2") for i in range(5)]
        self.assertEqual(100, project_balance_score(tasks))

    def test_nine_to_one_split(self) -> None:
        tasks = [pending_task(f"a{i}", "p1") for i in range(9)] + [pending_task("b0", "p2")]
        # shares 0.9 / 0.1, mean deviation 0.4, max deviation 0.5
        self.assertAlmostEqual(20.0, project_balance_score(tasks))

    def test_single_project_is_balanced_by_definition(self) -> None:
        tasks = [pending_task(f"a{i}", "p1") for i in range(7)]
        self.assertEqual(100, project_balance_score(tasks))

    def test_three_projects_uneven(self) -> None:
        counts = {"p1": 4, "p2": 2, "p3": 2}
        tasks = [pending_task(f"{pid}-{i}", pid) for pid, n in counts.items() for i in range(n)]
        # shares .5/.25/.25 vs 1/3: mean deviation 1/9, max deviation 2/3
        self.assertAlmostEqual(100 * (1 - (1 / 9) / (2 / 3)), project_balance_score(tasks))


class TestUserInsights(unittest.TestCase):
    def setUp(self) -> None:
        self.projects = projects_by_id(
            Project(id="p1", project_type="mvp"),
            Project(id="p2", project_type="website"),
        )

    def test_fewer_than_five_tasks_is_insufficient(self) -> None:
        tasks = [completed_task(f"t{i}") for i in range(4)]
        result = get_user_insights(tasks, self.projects)
        self.assertIsInstance(result, InsufficientData)
        self.assertFalse(result.is_ok)
        self.assertIn("5", result.reason)

    def test_full_insights(self) -> None:
        tasks = [
            completed_task("t1", "p1", 4, 4, MONDAY),
            completed_task("t2", "p1", 4, 6, MONDAY),
            completed_task("t3", "p1", 4, 12, TUESDAY),
            pending_task("t4", "p2"),
            pending_task("t5", "p2"),
            completed_task("t6", "p2", 2, None, TUESDAY),
        ]
        result = get_user_insights(tasks, self.projects)
        self.assertTrue(result.is_ok)
        insights = result.value

        self.assertAlmostEqual(4 / 6 * 100, insights.task_completion_rate)
        self.assertAlmostEqual((1 + 1.5 + 3) / 3, insights.average_actual_vs_estimated)
        self.assertAlmostEqual((100 + 75 + 0) / 3, insights.estimation_accuracy)
        self.assertEqual(4, insights.total_completed_tasks)
        self.assertEqual(22, insights.total_tracked_time)
        self.assertEqual(100, insights.project_balance_score)
        # Two completions each on Monday and Tuesday; Monday comes first
        self.assertEqual("Monday", insights.most_productive_day)
        # mvp: 3/3 completed, website: 1/3 completed
        self.assertEqual("Mvp", insights.most_efficient_project_type)

    def test_weekend_tie_goes_to_sunday(self) -> None:
        tasks = [
            completed_task("t1", completed_at=SATURDAY),
            completed_task("t2", completed_at=SUNDAY),
            completed_task("t3", completed_at=SATURDAY),
            completed_task("t4", completed_at=SUNDAY),
            pending_task("t5"),
        ]
        self.assertEqual("Sunday", get_user_insights(tasks, self.projects).value.most_productive_day)

    def test_zero_estimate_is_excluded_from_ratios(self) -> None:
        tasks = [
            completed_task("t1", estimated=0, actual=3),
            completed_task("t2", estimated=2, actual=2),
        ] + [pending_task(f"p{i}") for i in range(3)]
        insights = get_user_insights(tasks, self.projects).value

        self.assertEqual(1.0, insights.average_actual_vs_estimated)
        self.assertEqual(100, insights.estimation_accuracy)
        self.assertEqual(2, insights.total_tracked_time)

    def test_no_time_data_or_timestamps(self) -> None:
        tasks = [pending_task(f"t{i}", project_id=None) for i in range(5)]
        insights = get_user_insights(tasks, {}).value

        self.assertEqual(0, insights.task_completion_rate)
        self.assertEqual(0, insights.estimation_accuracy)
        self.assertEqual(0, insights.average_actual_vs_estimated)
        self.assertIsNone(insights.most_productive_day)
        # Tasks without a known project still form the "unknown" type group
        self.assertEqual("Unknown", insights.most_efficient_project_type)

    def test_insights_are_idempotent_and_do_not_mutate_input(self) -> None:
        tasks = [completed_task(f"t{i}", "p1" if i % 2 else "p2", 3, 2 + i, MONDAY) for i in range(6)]
        before = list(tasks)

        first = get_user_insights(tasks, self.projects)
        second = get_user_insights(tasks, self.projects)

        self.assertEqual(first, second)
        self.assertEqual(first.to_dict(), second.to_dict())
        self.assertEqual(before, tasks)

    def test_to_dict_shape(self) -> None:
        tasks = [completed_task(f"t{i}") for i in range(5)]
        payload = get_user_insights(tasks, self.projects).to_dict()
        self.assertEqual("ok", payload["status"])
        self.assertIn("project_balance_score", payload["value"])

        short = get_user_insights(tasks[:2], self.projects).to_dict()
        self.assertEqual("insufficient_data", short["status"])


class TestHasEnoughData(unittest.TestCase):
    def test_requires_completed_and_timed_tasks(self) -> None:
        timed = [completed_task(f"t{i}") for i in range(2)]
        untimed = [completed_task("u1", actual=None)]
        pending = [pending_task(f"p{i}") for i in range(2)]

        self.assertTrue(has_enough_data_for_insights(timed + untimed + pending))
        self.assertFalse(has_enough_data_for_insights(timed + untimed))
        self.assertFalse(has_enough_data_for_insights(timed[:1] + untimed * 2 + pending))

    def test_cancelled_tasks_are_not_completed(self) -> None:
        tasks = [Task(id=f"c{i}", project_id="p1", estimated_time=1, actual_time=1,
                      status=TaskStatus.CANCELLED) for i in range(5)]
        self.assertFalse(has_enough_data_for_insights(tasks))


if __name__ == "__main__":
    unittest.main()
