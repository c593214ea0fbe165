"""
JSON workout loader.

Reads training plans and loose workout lists from JSON files so the
command line runner can feed them to the analysis core.
"""

import json
import logging
from pathlib import Path
from typing import List

from .models import Workout
from .plan import WorkoutPlan


logger = logging.getLogger(__name__)


def _read_json(filepath: Path):
    if not filepath.exists():
        raise FileNotFoundError(f"Workout file not found: {filepath}")

    with open(filepath, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {filepath}: {e}")
        except UnicodeDecodeError as e:
            raise ValueError(f"{filepath} is not valid UTF-8: {e}")


def load_plan_from_file(filepath: Path) -> WorkoutPlan:
    """
    Load a training plan from a JSON file.

    Parameters:
        filepath: Path to a JSON object with "name", "goal" and "workouts".

    Returns:
        Parsed WorkoutPlan.
    """
    data = _read_json(filepath)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a plan object in {filepath}")

    try:
        plan = WorkoutPlan.from_dict(data)
    except (ValueError, TypeError, AttributeError) as e:
        raise ValueError(f"Could not parse plan in {filepath}: {e}")

    logger.info(
        f"Loaded plan '{plan.name}' with {len(plan.workouts)} workouts "
        f"from {filepath}"
    )
    return plan


def load_workouts_from_file(filepath: Path) -> List[Workout]:
    """
    Load workouts from a JSON file.

    Accepts either a bare list of workouts or a plan object, in which
    case its "workouts" list is used.

    Parameters:
        filepath: Path to workout data file.

    Returns:
        List of parsed Workout objects.
    """
    data = _read_json(filepath)
    items = data.get("workouts", []) if isinstance(data, dict) else data

    if not isinstance(items, list):
        raise ValueError(f"Expected a list of workouts in {filepath}")

    try:
        workouts = [Workout.from_dict(item) for item in items]
    except (ValueError, TypeError, AttributeError) as e:
        raise ValueError(f"Could not parse workouts in {filepath}: {e}")

    logger.info(f"Loaded {len(workouts)} workouts from {filepath}")
    return workouts
