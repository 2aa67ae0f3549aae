"""Tests for daily log aggregation."""

from aurafit.domain.log import NutrientRecord, WorkoutRecord
from aurafit.services.totals import compute_totals
from tests.conftest import make_log


def _meal(calories: float, protein: float = 0, carbs: float = 0, fat: float = 0):
    return NutrientRecord(
        description="meal", calories=calories, protein=protein, carbs=carbs, fat=fat
    )


def test_compute_totals_empty_log_is_zero() -> None:
    totals = compute_totals(make_log())

    assert totals.total_calories == 0
    assert totals.total_calories_burned == 0
    assert totals.net_calories == 0


def test_compute_totals_sums_meals_and_workouts() -> None:
    log = make_log(
        meals=(_meal(500, 40, 50, 10), _meal(300, 20, 20, 5)),
        workouts=(
            WorkoutRecord(description="run", duration=30, calories_burned=250),
            WorkoutRecord(description="yoga", duration=45, calories_burned=120),
        ),
    )

    totals = compute_totals(log)

    assert totals.total_calories == 800
    assert totals.total_protein == 60
    assert totals.total_carbs == 70
    assert totals.total_fat == 15
    assert totals.total_calories_burned == 370
    assert totals.net_calories == 430


def test_compute_totals_independent_of_order() -> None:
    meals = [_meal(120.5), _meal(640), _meal(75.25), _meal(310)]

    forward = compute_totals(make_log(meals=tuple(meals)))
    backward = compute_totals(make_log(meals=tuple(reversed(meals))))

    assert forward.total_calories == backward.total_calories == 1145.75


def test_net_calories_can_be_negative() -> None:
    log = make_log(
        meals=(_meal(200),),
        workouts=(WorkoutRecord(description="ride", duration=90, calories_burned=700),),
    )

    assert compute_totals(log).net_calories == -500
