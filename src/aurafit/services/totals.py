"""Daily log aggregation."""

from aurafit.domain.log import DailyLog, Totals


def compute_totals(log: DailyLog) -> Totals:
    """Sum meal macros and workout burn for a log snapshot.

    Always recomputes from the records; callers that need memoization can key
    it on the identity of ``log.meals`` and ``log.workouts``.
    """
    return Totals(
        total_calories=sum(meal.calories for meal in log.meals),
        total_protein=sum(meal.protein for meal in log.meals),
        total_carbs=sum(meal.carbs for meal in log.meals),
        total_fat=sum(meal.fat for meal in log.meals),
        total_calories_burned=sum(
            workout.calories_burned for workout in log.workouts
        ),
    )

