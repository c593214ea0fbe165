"""
Training plan aggregation.

A WorkoutPlan collects workouts toward a single training goal and
derives plan-wide metrics from them: weekly volume, average intensity,
muscle balance and goal-specific adjustment recommendations.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional

from .models import TrainingGoal, Workout


logger = logging.getLogger(__name__)


BALANCE_MESSAGE = "Consider balancing muscle group distribution"
STRENGTH_MESSAGE = "Increase intensity for strength gains"
HYPERTROPHY_MESSAGE = "Consider reducing intensity for better recovery"
ENDURANCE_MESSAGE = "Increase workout duration for endurance goals"
WELL_BALANCED_MESSAGE = "Workout plan looks well-balanced!"


class EmptyCollectionError(ValueError):
    """Raised when an aggregate needs at least one workout and the plan has none."""


@dataclass(frozen=True)
class RecommendationThresholds:
    """Cut-offs used by the plan recommendation rules."""

    balance_spread: float = 30.0
    strength_min_intensity: float = 50.0
    hypertrophy_max_intensity: float = 80.0
    endurance_min_duration: int = 30  # minutes


class WorkoutPlan:
    """A named collection of workouts pursuing one training goal."""

    def __init__(self, name: str, goal: TrainingGoal):
        """
        Initialize an empty plan.

        Args:
            name: Display name of the plan
            goal: Training goal, fixed for the lifetime of the plan
        """
        self._name = name
        self._goal = goal
        self.workouts: List[Workout] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def goal(self) -> TrainingGoal:
        return self._goal

    def __repr__(self) -> str:
        return (
            f"WorkoutPlan(name={self._name!r}, goal={self._goal}, "
            f"workouts={len(self.workouts)})"
        )

    def add_workout(self, workout: Workout) -> None:
        """Append a workout to the plan."""
        self.workouts.append(workout)

    def calculate_weekly_volume(self) -> float:
        """Total volume across every workout in the plan."""
        return sum((w.calculate_volume() for w in self.workouts), 0.0)

    def get_average_intensity(self) -> float:
        """
        Mean intensity score across the plan's workouts.

        Returns 0.0 for a plan without workouts.
        """
        if not self.workouts:
            return 0.0

        total_intensity = sum(w.calculate_intensity_score() for w in self.workouts)
        return total_intensity / len(self.workouts)

    def analyze_muscle_balance(self) -> Dict[str, float]:
        """
        Share of total sets (0-100) attributed to each muscle group.

        Raises:
            EmptyCollectionError: If the plan has no workouts.

        Groups that appear but account for zero sets in total get 0.0; a
        plan whose exercises list no muscle groups yields an empty mapping.
        """
        if not self.workouts:
            raise EmptyCollectionError("No workouts to analyze")

        total_distribution: Dict[str, int] = defaultdict(int)
        total_sets = 0

        for workout in self.workouts:
            for muscle_group, sets in workout.get_muscle_group_distribution().items():
                total_distribution[muscle_group] += sets
                total_sets += sets

        if total_sets == 0:
            logger.warning(
                f"Plan '{self._name}' has no sets recorded against any muscle group"
            )
            return {group: 0.0 for group in total_distribution}

        return {
            group: (sets / total_sets) * 100.0
            for group, sets in total_distribution.items()
        }

    def recommend_adjustments(
        self, thresholds: Optional[RecommendationThresholds] = None
    ) -> List[str]:
        """
        Suggest plan adjustments.

        Runs the muscle balance check, then at most one goal-specific rule.
        Falls back to a single "well-balanced" message when nothing fires.

        Args:
            thresholds: Rule cut-offs; defaults to RecommendationThresholds()

        Returns:
            Non-empty list of recommendation strings
        """
        if thresholds is None:
            thresholds = RecommendationThresholds()

        recommendations: List[str] = []

        try:
            muscle_balance = self.analyze_muscle_balance()
        except EmptyCollectionError:
            muscle_balance = None

        if muscle_balance is not None:
            percentages = list(muscle_balance.values())
            spread = max(percentages) - min(percentages) if percentages else 0.0
            if spread > thresholds.balance_spread:
                recommendations.append(BALANCE_MESSAGE)

        avg_intensity = self.get_average_intensity()
        goal_message = self._goal_recommendation(avg_intensity, thresholds)
        if goal_message:
            recommendations.append(goal_message)

        if not recommendations:
            recommendations.append(WELL_BALANCED_MESSAGE)

        logger.debug(f"Recommendations for '{self._name}': {recommendations}")
        return recommendations

    def _goal_recommendation(
        self, avg_intensity: float, thresholds: RecommendationThresholds
    ) -> Optional[str]:
        if self._goal == TrainingGoal.STRENGTH:
            if avg_intensity < thresholds.strength_min_intensity:
                return STRENGTH_MESSAGE
        elif self._goal == TrainingGoal.HYPERTROPHY:
            if avg_intensity > thresholds.hypertrophy_max_intensity:
                return HYPERTROPHY_MESSAGE
        elif self._goal == TrainingGoal.ENDURANCE:
            if any(w.duration < thresholds.endurance_min_duration for w in self.workouts):
                return ENDURANCE_MESSAGE
        # power lifting and body building have no goal-specific rule
        return None

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutPlan":
        """
        Create WorkoutPlan from a plain dictionary.

        Expects "name" and "goal"; "workouts" is an optional list of
        workout dictionaries.
        """
        try:
            name = str(data["name"])
            goal = TrainingGoal.from_string(data["goal"])
        except KeyError as e:
            raise ValueError(f"Plan is missing field {e}")

        plan = cls(name, goal)
        for workout_data in data.get("workouts", []):
            plan.add_workout(Workout.from_dict(workout_data))
        return plan
