from __future__ import annotations

import json
from pathlib import Path
from tempfile import TemporaryDirectory
import unittest

from priority_insights.scoring import DEFAULT_SCORING_CONFIG, ScoringConfig
from priority_insights.utils.config import (
    ConfigError,
    get_default_config,
    load_config,
    load_config_or_default,
)


class TestScoringConfig(unittest.TestCase):
    def test_default_weights_and_tables(self) -> None:
        config = DEFAULT_SCORING_CONFIG
        self.assertEqual(
            {"cost": 0.25, "timeline": 0.20, "user_priority": 0.25, "project_type": 0.15, "complexity": 0.15},
            dict(config.weights),
        )
        self.assertEqual(90, config.project_type_priorities["mvp"])
        self.assertEqual({"easy": 30, "medium": 60, "hard": 90}, dict(config.complexity_values))
        self.assertEqual(1, config.version)

    def test_tables_are_read_only(self) -> None:
        with self.assertRaises(TypeError):
            DEFAULT_SCORING_CONFIG.project_type_priorities["mvp"] = 10  # type: ignore[index]

    def test_weights_must_sum_to_one(self) -> None:
        with self.assertRaises(ConfigError):
            ScoringConfig.from_dict({"weights": {"cost": 0.5}})

    def test_unknown_weight_is_rejected(self) -> None:
        with self.assertRaises(ConfigError):
            ScoringConfig.from_dict({"weights": {"cost": 0.05, "novelty": 0.20}})

    def test_table_values_must_be_percentages(self) -> None:
        with self.assertRaises(ConfigError):
            ScoringConfig.from_dict({"complexity_values": {"hard": 150}})
        with self.assertRaises(ConfigError):
            ScoringConfig.from_dict({"project_type_priorities": {"mvp": "high"}})

    def test_config_error_is_a_value_error(self) -> None:
        self.assertTrue(issubclass(ConfigError, ValueError))

    def test_rebalanced_weights_are_accepted(self) -> None:
        config = ScoringConfig.from_dict({"weights": {"cost": 0.20, "timeline": 0.25}})
        self.assertAlmostEqual(1.0, sum(config.weights.values()))
        self.assertEqual(0.25, config.weights["timeline"])

    def test_round_trip_through_dict(self) -> None:
        config = ScoringConfig.from_dict({"version": 3, "project_type_priorities": {"podcast": 40}})
        self.assertEqual(config, ScoringConfig.from_dict(config.to_dict()))


class TestLoadConfig(unittest.TestCase):
    def test_load_yaml(self) -> None:
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.yaml"
            path.write_text("scoring:\n  version: 4\n  complexity_values:\n    hard: 100\n", encoding="utf-8")

            data = load_config(str(path))
            self.assertEqual(4, data["scoring"]["version"])

            config = ScoringConfig.from_dict(data["scoring"])
            self.assertEqual(100, config.complexity_values["hard"])
            self.assertEqual(30, config.complexity_values["easy"])

    def test_load_json(self) -> None:
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"sample": {"seed": 7}}), encoding="utf-8")
            self.assertEqual({"sample": {"seed": 7}}, load_config(str(path)))

    def test_empty_yaml_is_empty_config(self) -> None:
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.yml"
            path.write_text("", encoding="utf-8")
            self.assertEqual({}, load_config(str(path)))

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

    def test_unsupported_format_raises(self) -> None:
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.toml"
            path.write_text("a = 1\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_config(str(path))

    def test_top_level_must_be_mapping(self) -> None:
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.yaml"
            path.write_text("- 1\n- 2\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config(str(path))

    def test_defaults_when_file_absent(self) -> None:
        self.assertEqual(get_default_config(), load_config_or_default("/nonexistent/config.yaml"))

    def test_file_values_merge_over_defaults(self) -> None:
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.yaml"
            path.write_text("sample:\n  seed: 9\n", encoding="utf-8")

            config = load_config_or_default(str(path))
            self.assertEqual(9, config["sample"]["seed"])
            self.assertEqual(40, config["sample"]["task_count"])
            self.assertIn("weights", config["scoring"])


if __name__ == "__main__":
    unittest.main()
