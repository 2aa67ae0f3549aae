"""Domain models for the daily health log."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4


@dataclass(frozen=True)
class NutrientRecord:
    """A logged meal with AI-estimated macros."""

    description: str
    calories: float
    protein: float
    carbs: float
    fat: float
    id: UUID = field(default_factory=uuid4)

    def numeric_fields(self) -> dict[str, float]:
        """Return the numeric attributes keyed by name."""
        return {
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
        }


@dataclass(frozen=True)
class WorkoutRecord:
    """A logged workout with AI-estimated duration and burn."""

    description: str
    duration: float
    calories_burned: float
    id: UUID = field(default_factory=uuid4)

    def numeric_fields(self) -> dict[str, float]:
        """Return the numeric attributes keyed by name."""
        return {"duration": self.duration, "calories_burned": self.calories_burned}


@dataclass(frozen=True)
class DailyLog:
    """Snapshot of everything tracked for one day."""

    date: date
    base_weight: float
    current_weight: float
    goal: str
    meals: tuple[NutrientRecord, ...] = ()
    workouts: tuple[WorkoutRecord, ...] = ()
    water_intake: int = 0
    sleep_hours: float = 0.0


@dataclass(frozen=True)
class Totals:
    """Aggregate sums over a log's records."""

    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    total_calories_burned: float

    @property
    def net_calories(self) -> float:
        """Calories eaten minus calories burned."""
        return self.total_calories - self.total_calories_burned


@dataclass(frozen=True)
class GoalTargets:
    """Daily targets derived from the user's profile."""

    calorie_goal: int
    protein_goal: int
    water_goal: int


@dataclass(frozen=True)
class GoalProgress:
    """Progress toward one daily target."""

    metric: str
    label: str
    unit: str
    current: float
    goal: float
    fraction: float

    @property
    def completed(self) -> bool:
        """Whether the target has been reached."""
        return self.fraction >= 1
