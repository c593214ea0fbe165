"""Data models for workout analysis."""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence
from collections import defaultdict
from enum import Enum


class WorkoutIntensity(Enum):
    """Qualitative intensity of a workout."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    EXTREME = "extreme"

    @property
    def multiplier(self) -> float:
        """Fixed multiplier applied to the intensity score."""
        return _INTENSITY_MULTIPLIERS[self]

    @classmethod
    def from_string(cls, value: str) -> "WorkoutIntensity":
        """Parse intensity from a case-insensitive name."""
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError):
            raise ValueError(f"Unknown workout intensity: {value!r}")

    def __str__(self) -> str:
        return self.value.capitalize()


_INTENSITY_MULTIPLIERS: Dict[WorkoutIntensity, float] = {
    WorkoutIntensity.LOW: 0.5,
    WorkoutIntensity.MODERATE: 1.0,
    WorkoutIntensity.HIGH: 1.5,
    WorkoutIntensity.EXTREME: 2.0,
}


class TrainingGoal(Enum):
    """Enumeration of supported training goals."""

    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"
    POWER_LIFTING = "power_lifting"
    BODY_BUILDING = "body_building"

    @classmethod
    def from_string(cls, value: str) -> "TrainingGoal":
        """
        Parse a training goal from free text.

        Accepts "PowerLifting", "power lifting", "power_lifting" and
        similar spellings.
        """
        if not isinstance(value, str):
            raise ValueError(f"Unknown training goal: {value!r}")

        key = value.strip().lower().replace(" ", "").replace("_", "").replace("-", "")
        mapping = {
            "strength": cls.STRENGTH,
            "hypertrophy": cls.HYPERTROPHY,
            "endurance": cls.ENDURANCE,
            "powerlifting": cls.POWER_LIFTING,
            "bodybuilding": cls.BODY_BUILDING,
        }
        if key not in mapping:
            raise ValueError(f"Unknown training goal: {value!r}")
        return mapping[key]


@dataclass(frozen=True)
class Exercise:
    """Represents a single exercise within a workout."""

    name: str
    muscle_groups: Sequence[str]
    sets: int
    reps: int
    weight: float
    rest_time: int = 0  # seconds

    def __post_init__(self):
        if isinstance(self.muscle_groups, str):
            raise TypeError("muscle_groups must be a sequence of names, not a string")
        object.__setattr__(self, "muscle_groups", tuple(self.muscle_groups))

    @property
    def volume(self) -> float:
        """Calculate volume as sets × reps × weight."""
        return float(self.sets) * float(self.reps) * self.weight

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """
        Create Exercise from a plain dictionary.

        Expects keys "name", "sets", "reps" and "weight"; "muscle_groups"
        and "rest_time" are optional.
        """
        muscle_groups = data.get("muscle_groups", [])
        if not isinstance(muscle_groups, (list, tuple)):
            raise ValueError("Exercise field 'muscle_groups' must be a list")

        try:
            return cls(
                name=data["name"],
                muscle_groups=muscle_groups,
                sets=int(data["sets"]),
                reps=int(data["reps"]),
                weight=float(data["weight"]),
                rest_time=int(data.get("rest_time", 0)),
            )
        except KeyError as e:
            raise ValueError(f"Exercise is missing field {e}")


@dataclass
class Workout:
    """Represents a single training session."""

    id: str
    date: str
    exercises: List[Exercise] = field(default_factory=list)
    duration: int = 0  # minutes
    intensity: WorkoutIntensity = WorkoutIntensity.MODERATE

    @property
    def exercise_count(self) -> int:
        """Count of exercises in this workout."""
        return len(self.exercises)

    def add_exercise(self, exercise: Exercise) -> None:
        """Append an exercise to this workout."""
        self.exercises.append(exercise)

    def calculate_volume(self) -> float:
        """Calculate total volume across all exercises."""
        return sum((e.volume for e in self.exercises), 0.0)

    def calculate_intensity_score(self) -> float:
        """
        Calculate the heuristic intensity score for this workout.

        Ten points per exercise, scaled to a 60 minute session and then by
        the intensity multiplier. A zero duration leaves the score unscaled.
        """
        base_score = self.exercise_count * 10.0
        duration_factor = 60.0 / self.duration if self.duration > 0 else 1.0
        return base_score * duration_factor * self.intensity.multiplier

    def get_muscle_group_distribution(self) -> Dict[str, int]:
        """Total sets performed per muscle group."""
        distribution: Dict[str, int] = defaultdict(int)

        for exercise in self.exercises:
            for muscle_group in exercise.muscle_groups:
                distribution[muscle_group] += exercise.sets

        return dict(distribution)

    @classmethod
    def from_dict(cls, data: dict) -> "Workout":
        """
        Create Workout from a plain dictionary.

        Intensity is given by name ("low", "moderate", "high", "extreme")
        and defaults to moderate.
        """
        try:
            workout_id = str(data["id"])
        except KeyError:
            raise ValueError("Workout is missing field 'id'")

        intensity = data.get("intensity")
        return cls(
            id=workout_id,
            date=str(data.get("date", "")),
            exercises=[Exercise.from_dict(e) for e in data.get("exercises", [])],
            duration=int(data.get("duration", 0)),
            intensity=(
                WorkoutIntensity.from_string(intensity)
                if intensity is not None
                else WorkoutIntensity.MODERATE
            ),
        )
