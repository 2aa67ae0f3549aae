"""Daily goal targets and progress tracking."""

from dataclasses import dataclass, field

from aurafit.domain.log import DailyLog, GoalProgress, GoalTargets, Totals

MAINTENANCE_CALORIES = 2000
GAIN_CALORIES = 2500
PROTEIN_G_PER_KG = 1.6
WATER_GOAL_GLASSES = 8


def compute_goals(log: DailyLog) -> GoalTargets:
    """Derive daily targets from the log's profile fields.

    The calorie target is a keyword heuristic: any goal mentioning "gain"
    gets the surplus target. It is not a nutrition model.
    """
    if "gain" in log.goal.lower():
        calorie_goal = GAIN_CALORIES
    else:
        calorie_goal = MAINTENANCE_CALORIES
    return GoalTargets(
        calorie_goal=calorie_goal,
        protein_goal=round(log.base_weight * PROTEIN_G_PER_KG),
        water_goal=WATER_GOAL_GLASSES,
    )


def compute_progress(current: float, goal: float) -> float:
    """Return current/goal clamped to [0, 1]; zero for non-positive goals."""
    if goal <= 0:
        return 0.0
    return min(max(current / goal, 0.0), 1.0)


def evaluate_progress(log: DailyLog, totals: Totals) -> list[GoalProgress]:
    """Return progress for calories, protein and water."""
    targets = compute_goals(log)
    rows = [
        ("calories", "Calories", "kcal", totals.total_calories, targets.calorie_goal),
        ("protein", "Protein", "g", totals.total_protein, targets.protein_goal),
        ("water", "Water", "glasses", log.water_intake, targets.water_goal),
    ]
    return [
        GoalProgress(
            metric=metric,
            label=label,
            unit=unit,
            current=current,
            goal=goal,
            fraction=compute_progress(current, goal),
        )
        for metric, label, unit, current, goal in rows
    ]


@dataclass
class GoalCelebrationTracker:
    """Edge-triggered completion detector, one flag per metric."""

    _celebrated: dict[str, bool] = field(default_factory=dict)

    def observe(self, metric: str, fraction: float) -> bool:
        """Record a new fraction and return True on a fresh completion."""
        if fraction >= 1:
            if self._celebrated.get(metric, False):
                return False
            self._celebrated[metric] = True
            return True
        self._celebrated[metric] = False
        return False

    def reset(self) -> None:
        """Forget all completion flags."""
        self._celebrated.clear()
