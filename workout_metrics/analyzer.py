"""
Workout batch analyzer.

Provides the WorkoutAnalyzer capability shared by anything that can
report volume, intensity and muscle group distribution, plus helpers
that compare and summarize arbitrary collections of workouts.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Protocol, Sequence, Tuple

from .models import Exercise, WorkoutIntensity


logger = logging.getLogger(__name__)


class WorkoutAnalyzer(Protocol):
    """Anything exposing exercises, a duration and an intensity."""

    exercises: List[Exercise]
    duration: int
    intensity: WorkoutIntensity

    def calculate_volume(self) -> float:
        ...

    def calculate_intensity_score(self) -> float:
        ...

    def get_muscle_group_distribution(self) -> Dict[str, int]:
        ...


@dataclass
class BatchSummary:
    """Aggregated statistics for an arbitrary batch of workouts."""

    total_volume: float
    average_intensity: float
    unique_exercises: int
    workout_count: int


def compare_workouts(workout1: WorkoutAnalyzer, workout2: WorkoutAnalyzer) -> int:
    """
    Order two workouts by training volume.

    Returns -1, 0 or 1 in the style of a classic ``cmp`` function, so the
    result can be passed to ``functools.cmp_to_key``. Volumes that cannot
    be ordered (NaN) compare as equal.
    """
    volume1 = workout1.calculate_volume()
    volume2 = workout2.calculate_volume()

    if volume1 < volume2:
        return -1
    if volume1 > volume2:
        return 1
    return 0


def process_workout_batch(
    workouts: Sequence[WorkoutAnalyzer],
) -> Tuple[float, float, int]:
    """
    Summarize a batch of workouts that need not belong to a plan.

    Parameters:
        workouts: Workouts to summarize. Must not be empty: the average
            intensity is a plain division by the workout count and raises
            ZeroDivisionError for an empty batch.

    Returns:
        Tuple of (total volume, average intensity score, number of
        distinct exercise names).
    """
    total_volume = sum((w.calculate_volume() for w in workouts), 0.0)

    avg_intensity = sum(w.calculate_intensity_score() for w in workouts) / len(
        workouts
    )

    unique_exercises = len({e.name for w in workouts for e in w.exercises})

    logger.debug(
        f"Processed batch of {len(workouts)} workouts: volume={total_volume}, "
        f"avg_intensity={avg_intensity}, unique_exercises={unique_exercises}"
    )

    return total_volume, avg_intensity, unique_exercises


def summarize_batch(workouts: Sequence[WorkoutAnalyzer]) -> BatchSummary:
    """Named-field version of process_workout_batch."""
    total_volume, avg_intensity, unique_exercises = process_workout_batch(workouts)
    return BatchSummary(
        total_volume=total_volume,
        average_intensity=avg_intensity,
        unique_exercises=unique_exercises,
        workout_count=len(workouts),
    )
