"""Main entry point for the priority scoring and insights engine."""

import argparse
import json
import logging
from datetime import date, datetime
from pathlib import Path

from priority_insights.analytics import (
    get_ai_user_context,
    get_productivity_by_day,
    get_project_type_efficiency,
    get_time_estimate_accuracy,
    get_user_insights,
)
from priority_insights.models import Snapshot
from priority_insights.sample import SampleDataGenerator
from priority_insights.scoring import PriorityScorer, ScoringConfig
from priority_insights.utils.config import load_config_or_default, load_data_file

logger = logging.getLogger(__name__)


def load_snapshot(snapshot_path: str) -> Snapshot:
    """Load a snapshot of projects, tasks, notes and settings from YAML or JSON."""
    return Snapshot.from_dict(load_data_file(snapshot_path))


def run_scoring(config: dict, snapshot_path: str, as_of: datetime):
    """Score every project in the snapshot."""
    scorer = PriorityScorer(ScoringConfig.from_dict(config.get('scoring')))
    snapshot = load_snapshot(snapshot_path)

    breakdowns = [scorer.explain(project, as_of) for project in snapshot.projects]
    for breakdown in breakdowns:
        logger.info("\n%s", breakdown.to_human_readable())

    print(json.dumps([b.to_dict() for b in breakdowns], indent=2))
    return breakdowns


def run_insights(snapshot_path: str, as_of: datetime):
    """Run every insight view over the snapshot."""
    snapshot = load_snapshot(snapshot_path)
    projects = snapshot.projects_by_id

    report = {
        'user_insights': get_user_insights(snapshot.tasks, projects, snapshot.settings).to_dict(),
        'time_estimate_accuracy': get_time_estimate_accuracy(snapshot.tasks, projects).to_dict(),
        'project_type_efficiency': get_project_type_efficiency(snapshot.tasks, projects).to_dict(),
        'productivity_by_day': get_productivity_by_day(snapshot.tasks).to_dict(),
        'ai_context': get_ai_user_context(
            snapshot.settings, snapshot.tasks, snapshot.projects, snapshot.notes, as_of
        ),
    }

    print(json.dumps(report, indent=2, default=str))
    return report


def run_generate_sample(config: dict, as_of: datetime) -> Path:
    """Write a deterministic sample snapshot."""
    sample_config = config.get('sample', {})
    generator = SampleDataGenerator(seed=sample_config.get('seed', 42), config=config)
    snapshot = generator.generate_snapshot(as_of.date())

    results_dir = Path("results")
    results_dir.mkdir(exist_ok=True)

    snapshot_path = results_dir / "sample_snapshot.json"
    with open(snapshot_path, 'w') as f:
        json.dump(snapshot.to_dict(), f, indent=2)

    print(f"Generated {len(snapshot.projects)} projects, {len(snapshot.tasks)} tasks, "
          f"{len(snapshot.notes)} notes")
    print(f"Snapshot saved to: {snapshot_path}")
    return snapshot_path


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Project priority scoring and productivity insights"
    )
    parser.add_argument(
        'command',
        choices=['score', 'insights', 'generate-sample'],
        help='Command to run'
    )
    parser.add_argument(
        'snapshot',
        nargs='?',
        help='Snapshot file (YAML or JSON) for score and insights'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '--as-of',
        type=date.fromisoformat,
        default=None,
        help='Reference date, YYYY-MM-DD (default: now)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config_or_default(args.config)
    as_of = datetime.combine(args.as_of, datetime.min.time()) if args.as_of else datetime.now()

    if args.command in ('score', 'insights') and not args.snapshot:
        parser.error(f"{args.command} requires a snapshot file")

    if args.command == 'score':
        run_scoring(config, args.snapshot, as_of)
    elif args.command == 'insights':
        run_insights(args.snapshot, as_of)
    elif args.command == 'generate-sample':
        run_generate_sample(config, as_of)


if __name__ == "__main__":
    main()
