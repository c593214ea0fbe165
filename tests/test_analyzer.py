"""
Tests for batch workout analysis.

Tests volume comparison and batch summaries over loose workouts.
"""

import functools
import math

import pytest

from workout_metrics.analyzer import (
    compare_workouts,
    process_workout_batch,
    summarize_batch,
)
from workout_metrics.models import Exercise, Workout, WorkoutIntensity


def make_workout(workout_id, exercises, duration=60, intensity=WorkoutIntensity.MODERATE):
    return Workout(
        id=workout_id,
        date="2024-01-01",
        exercises=exercises,
        duration=duration,
        intensity=intensity,
    )


class FixedVolume:
    """Minimal non-Workout type exposing the analyzer methods."""

    def __init__(self, volume):
        self.exercises = []
        self.duration = 0
        self.intensity = WorkoutIntensity.MODERATE
        self._volume = volume

    def calculate_volume(self):
        return self._volume

    def calculate_intensity_score(self):
        return 0.0

    def get_muscle_group_distribution(self):
        return {}


class TestCompareWorkouts:
    """Tests for compare_workouts."""

    def test_greater_volume(self):
        """Test heavier workout orders after the lighter one."""
        heavy = make_workout("heavy", [Exercise("Squat", ["Legs"], 5, 5, 140.0)])
        light = make_workout("light", [Exercise("Squat", ["Legs"], 3, 5, 60.0)])

        assert compare_workouts(heavy, light) == 1
        assert compare_workouts(light, heavy) == -1

    def test_equal_volume(self):
        """Test equal volumes compare as equal."""
        a = make_workout("a", [Exercise("Row", ["Back"], 3, 10, 50.0)])
        b = make_workout("b", [Exercise("Curl", ["Biceps"], 5, 6, 50.0)])

        assert compare_workouts(a, b) == 0

    def test_empty_workouts_equal(self):
        """Test two empty workouts compare as equal."""
        assert compare_workouts(make_workout("a", []), make_workout("b", [])) == 0

    def test_nan_volume_collapses_to_equal(self):
        """Test incomparable volumes compare as equal."""
        assert compare_workouts(FixedVolume(math.nan), FixedVolume(100.0)) == 0
        assert compare_workouts(FixedVolume(100.0), FixedVolume(math.nan)) == 0

    def test_usable_as_sort_key(self):
        """Test result works with functools.cmp_to_key."""
        workouts = [FixedVolume(300.0), FixedVolume(100.0), FixedVolume(200.0)]
        ordered = sorted(workouts, key=functools.cmp_to_key(compare_workouts))

        assert [w.calculate_volume() for w in ordered] == [100.0, 200.0, 300.0]


class TestProcessWorkoutBatch:
    """Tests for process_workout_batch."""

    def test_batch_totals(self):
        """Test total volume, average intensity and unique exercises."""
        day1 = make_workout(
            "day1",
            [
                Exercise("Bench Press", ["Chest"], 3, 10, 80.0),
                Exercise("Squats", ["Legs"], 4, 8, 100.0),
            ],
            duration=60,
        )
        day2 = make_workout(
            "day2",
            [Exercise("Deadlift", ["Back"], 3, 5, 150.0)],
            duration=30,
            intensity=WorkoutIntensity.LOW,
        )

        total_volume, avg_intensity, unique = process_workout_batch([day1, day2])

        assert total_volume == 2400.0 + 3200.0 + 2250.0
        # day1: 20 * 1.0 * 1.0, day2: 10 * 2.0 * 0.5
        assert avg_intensity == pytest.approx((20.0 + 10.0) / 2)
        assert unique == 3

    def test_shared_exercise_name_counted_once(self):
        """Test one exercise name across all workouts counts as one."""
        workouts = [
            make_workout(f"day{i}", [Exercise("Squats", ["Legs"], 3, 5, 100.0 + i)])
            for i in range(4)
        ]

        _, _, unique = process_workout_batch(workouts)
        assert unique == 1

    def test_names_compared_exactly(self):
        """Test exercise names differing in case are distinct."""
        workouts = [
            make_workout("a", [Exercise("squat", ["Legs"], 3, 5, 100.0)]),
            make_workout("b", [Exercise("Squat", ["Legs"], 3, 5, 100.0)]),
        ]

        _, _, unique = process_workout_batch(workouts)
        assert unique == 2

    def test_empty_batch_raises(self):
        """Test an empty batch divides by zero."""
        with pytest.raises(ZeroDivisionError):
            process_workout_batch([])


class TestSummarizeBatch:
    """Tests for summarize_batch."""

    def test_summary_fields(self):
        """Test summary mirrors process_workout_batch."""
        workouts = [
            make_workout("a", [Exercise("Row", ["Back"], 3, 10, 50.0)]),
            make_workout("b", [Exercise("Curl", ["Biceps"], 3, 12, 15.0)]),
        ]

        summary = summarize_batch(workouts)

        assert summary.workout_count == 2
        assert summary.total_volume == 1500.0 + 540.0
        assert summary.average_intensity == pytest.approx(10.0)
        assert summary.unique_exercises == 2
