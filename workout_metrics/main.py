"""
Main entry point for workout analysis.

Provides CLI interface for analyzing training plans and workout batches
stored as JSON, plus a built-in demo plan.
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from .config import AppConfig
from .models import Exercise, Workout, WorkoutIntensity, TrainingGoal
from .plan import WorkoutPlan, EmptyCollectionError
from .loader import load_plan_from_file, load_workouts_from_file
from .analyzer import compare_workouts, summarize_batch


logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_demo_plan() -> WorkoutPlan:
    """
    Build the sample strength plan used by the demo command.

    Returns:
        Plan with a single 75 minute high intensity session.
    """
    plan = WorkoutPlan("Strength Training", TrainingGoal.STRENGTH)

    bench_press = Exercise(
        name="Bench Press",
        muscle_groups=["Chest", "Triceps"],
        sets=4,
        reps=6,
        weight=100.0,
        rest_time=180,
    )
    squats = Exercise(
        name="Squats",
        muscle_groups=["Legs", "Glutes"],
        sets=4,
        reps=8,
        weight=120.0,
        rest_time=180,
    )

    plan.add_workout(
        Workout(
            id="day1",
            date="2024-01-01",
            exercises=[bench_press, squats],
            duration=75,
            intensity=WorkoutIntensity.HIGH,
        )
    )
    return plan


def print_plan_summary(plan: WorkoutPlan, config: AppConfig) -> None:
    """
    Print summary of a training plan.

    Parameters:
        plan: Plan to summarize.
        config: Application configuration.
    """
    print("\n" + "=" * 60)
    print(f"PLAN: {plan.name} ({plan.goal.value})")
    print("=" * 60)

    print(f"\n   Workouts: {len(plan.workouts)}")
    print(f"   Weekly Volume: {plan.calculate_weekly_volume():.2f}")
    print(f"   Average Intensity: {plan.get_average_intensity():.2f}")

    try:
        balance = plan.analyze_muscle_balance()
    except EmptyCollectionError as e:
        logger.warning(f"Skipping muscle balance: {e}")
        balance = {}

    if balance:
        print("\n   Muscle Balance:")
        for group, pct in sorted(balance.items(), key=lambda x: x[1], reverse=True):
            print(f"     {group}: {pct:.1f}%")

    print("\n   Recommendations:")
    for rec in plan.recommend_adjustments(config.thresholds):
        print(f"     - {rec}")

    print("\n" + "=" * 60)


def cmd_demo(args: argparse.Namespace, config: AppConfig) -> None:
    """Analyze the built-in sample plan."""
    plan = build_demo_plan()

    print(f"Weekly Volume: {plan.calculate_weekly_volume():.2f}")
    print(f"Average Intensity: {plan.get_average_intensity():.2f}")

    for rec in plan.recommend_adjustments(config.thresholds):
        print(f"Recommendation: {rec}")


def cmd_analyze(args: argparse.Namespace, config: AppConfig) -> None:
    """Analyze a plan file and show summary."""
    filepath = Path(args.file) if args.file else config.paths.data_dir / "plan.json"
    plan = load_plan_from_file(filepath)
    print_plan_summary(plan, config)


def cmd_batch(args: argparse.Namespace, config: AppConfig) -> None:
    """Summarize a batch of workouts."""
    workouts = load_workouts_from_file(Path(args.file))

    if not workouts:
        print("No workouts found")
        return

    summary = summarize_batch(workouts)
    print(f"Workouts: {summary.workout_count}")
    print(f"Total Volume: {summary.total_volume:.2f}")
    print(f"Average Intensity: {summary.average_intensity:.2f}")
    print(f"Unique Exercises: {summary.unique_exercises}")


def cmd_compare(args: argparse.Namespace, config: AppConfig) -> None:
    """Compare two workouts by volume."""
    workouts = load_workouts_from_file(Path(args.file))
    by_id = {w.id: w for w in workouts}

    missing = [wid for wid in (args.first, args.second) if wid not in by_id]
    if missing:
        raise ValueError(f"Workout not found: {', '.join(missing)}")

    first, second = by_id[args.first], by_id[args.second]
    result = compare_workouts(first, second)

    if result > 0:
        print(f"{first.id} has more volume than {second.id}")
    elif result < 0:
        print(f"{second.id} has more volume than {first.id}")
    else:
        print(f"{first.id} and {second.id} have equal volume")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Workout plan metrics and recommendations"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # demo command
    subparsers.add_parser("demo", help="Analyze a built-in sample plan")

    # analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Show plan summary")
    analyze_parser.add_argument(
        "file", nargs="?", help="Plan JSON file (default: data/plan.json)"
    )

    # batch command
    batch_parser = subparsers.add_parser("batch", help="Summarize a batch of workouts")
    batch_parser.add_argument("file", help="Workout or plan JSON file")

    # compare command
    compare_parser = subparsers.add_parser("compare", help="Compare two workouts")
    compare_parser.add_argument("file", help="Workout or plan JSON file")
    compare_parser.add_argument("first", help="Id of the first workout")
    compare_parser.add_argument("second", help="Id of the second workout")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig.load()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    commands = {
        "demo": cmd_demo,
        "analyze": cmd_analyze,
        "batch": cmd_batch,
        "compare": cmd_compare,
    }

    try:
        commands[args.command](args, config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
