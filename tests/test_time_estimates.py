from __future__ import annotations

import unittest

from priority_insights.analytics import EstimationStyle, get_estimation_style, get_time_estimate_accuracy
from priority_insights.models import InsufficientData, Project
from tests.helpers import completed_task, pending_task, projects_by_id


class TestTimeEstimateAccuracy(unittest.TestCase):
    def setUp(self) -> None:
        self.projects = projects_by_id(
            Project(id="p1", project_type="mvp"),
            Project(id="p2", project_type="website"),
            Project(id="p3", project_type="landing_page"),
        )

    def test_needs_three_timed_tasks(self) -> None:
        tasks = [completed_task("t1"), completed_task("t2"), completed_task("t3", actual=None), pending_task("t4")]
        result = get_time_estimate_accuracy(tasks, self.projects)
        self.assertIsInstance(result, InsufficientData)

    def test_groups_by_project_type_most_tasks_first(self) -> None:
        tasks = [
            completed_task("w1", "p2", 2, 3),
            completed_task("w2", "p2", 4, 4),
            completed_task("m1", "p1", 1, 1),
            completed_task("m2", "p1", 2, 2),
            completed_task("m3", "p1", 3, 3),
            completed_task("l1", "p3", 1, 5),
        ]
        result = get_time_estimate_accuracy(tasks, self.projects)
        self.assertTrue(result.is_ok)

        groups = result.value
        self.assertEqual(["Mvp", "Website"], [group.task_type for group in groups])

        mvp, website = groups
        self.assertEqual(3, mvp.task_count)
        self.assertEqual(100, mvp.accuracy_score)
        self.assertEqual(2, mvp.average_estimated_time)

        self.assertEqual(2, website.task_count)
        self.assertEqual(3, website.average_estimated_time)
        self.assertEqual(3.5, website.average_actual_time)
        self.assertEqual(87.5, website.accuracy_score)

    def test_missing_project_groups_as_unknown(self) -> None:
        tasks = [
            completed_task("g1", "ghost", 2, 2),
            completed_task("g2", "ghost", 2, 4),
            completed_task("g3", None, 2, 3),
        ]
        result = get_time_estimate_accuracy(tasks, self.projects)
        self.assertEqual(["Unknown"], [group.task_type for group in result.value])
        self.assertEqual(3, result.value[0].task_count)

    def test_no_group_reaches_minimum(self) -> None:
        tasks = [
            completed_task("a", "p1"),
            completed_task("b", "p2"),
            completed_task("c", "p3"),
        ]
        result = get_time_estimate_accuracy(tasks, self.projects)
        self.assertFalse(result.is_ok)
        self.assertIn("project type", result.reason)

    def test_repeat_calls_agree(self) -> None:
        tasks = [
            completed_task("w1", "p2", 2, 3),
            completed_task("w2", "p2", 4, 4),
            completed_task("m1", "p1", 1, 2),
            completed_task("m2", "p1", 2, 2),
        ]
        first = get_time_estimate_accuracy(tasks, self.projects)
        second = get_time_estimate_accuracy(tasks, self.projects)
        self.assertEqual(first, second)
        self.assertEqual(first.to_dict(), second.to_dict())

    def test_ties_keep_first_appearance(self) -> None:
        tasks = [
            completed_task("w1", "p2"),
            completed_task("m1", "p1"),
            completed_task("w2", "p2"),
            completed_task("m2", "p1"),
        ]
        result = get_time_estimate_accuracy(tasks, self.projects)
        self.assertEqual(["Website", "Mvp"], [group.task_type for group in result.value])


class TestEstimationStyle(unittest.TestCase):
    def _tasks(self, estimated: float, actual: float, count: int = 5):
        return [completed_task(f"t{i}", estimated=estimated, actual=actual) for i in range(count)]

    def test_not_enough_data(self) -> None:
        self.assertEqual(EstimationStyle.NOT_ENOUGH_DATA, get_estimation_style(self._tasks(1, 1, count=4)))

    def test_overestimator(self) -> None:
        self.assertEqual(EstimationStyle.OVERESTIMATOR, get_estimation_style(self._tasks(4, 2)))

    def test_underestimator(self) -> None:
        style = get_estimation_style(self._tasks(2, 4))
        self.assertEqual(EstimationStyle.UNDERESTIMATOR, style)
        self.assertIn("longer than estimated", style.description)

    def test_near_accurate_is_balanced(self) -> None:
        self.assertEqual(EstimationStyle.BALANCED, get_estimation_style(self._tasks(10, 9)))
        self.assertEqual(EstimationStyle.BALANCED, get_estimation_style(self._tasks(10, 11)))
        self.assertEqual(EstimationStyle.BALANCED, get_estimation_style(self._tasks(3, 3)))


if __name__ == "__main__":
    unittest.main()
