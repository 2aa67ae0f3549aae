"""Tests for the session log store."""

import logging
import math
from datetime import date

import pytest

from aurafit.domain.errors import InputValidationError
from aurafit.domain.log import NutrientRecord, WorkoutRecord
from aurafit.services.session_log import SessionLogStore
from tests.conftest import make_log


def test_append_meal_keeps_insertion_order(store: SessionLogStore) -> None:
    first = NutrientRecord(
        description="oats", calories=300, protein=10, carbs=50, fat=5
    )
    second = NutrientRecord(
        description="eggs", calories=200, protein=14, carbs=1, fat=15
    )

    store.append_meal(first)
    snapshot = store.append_meal(second)

    assert snapshot.meals == (first, second)
    assert store.snapshot is snapshot


def test_append_meal_does_not_deduplicate(store: SessionLogStore) -> None:
    meal = NutrientRecord(description="apple", calories=95, protein=0, carbs=25, fat=0)

    store.append_meal(meal)
    store.append_meal(meal)

    assert len(store.snapshot.meals) == 2


def test_mutation_replaces_snapshot(store: SessionLogStore) -> None:
    before = store.snapshot

    after = store.append_workout(
        WorkoutRecord(description="swim", duration=40, calories_burned=350)
    )

    assert before.workouts == ()
    assert after is not before
    assert after.workouts[0].calories_burned == 350


def test_negative_record_is_rejected(store: SessionLogStore) -> None:
    before = store.snapshot

    with pytest.raises(InputValidationError):
        store.append_meal(
            NutrientRecord(description="bad", calories=-1, protein=0, carbs=0, fat=0)
        )
    with pytest.raises(InputValidationError):
        store.append_workout(
            WorkoutRecord(description="bad", duration=10, calories_burned=-50)
        )

    assert store.snapshot is before


@pytest.mark.parametrize("value", [float("inf"), float("nan")])
def test_non_finite_record_is_rejected(store: SessionLogStore, value: float) -> None:
    with pytest.raises(InputValidationError):
        store.append_meal(
            NutrientRecord(
                description="bad", calories=value, protein=0, carbs=0, fat=0
            )
        )

    assert store.snapshot.meals == ()


@pytest.mark.parametrize("start", [0, 3, 12])
def test_adjust_water_never_negative(start: int) -> None:
    store = SessionLogStore(make_log(water_intake=start))

    assert store.adjust_water(-1000).water_intake == 0


def test_adjust_water_has_no_upper_bound(store: SessionLogStore) -> None:
    assert store.adjust_water(25).water_intake == 25


def test_adjust_sleep_supports_half_hours(store: SessionLogStore) -> None:
    assert store.adjust_sleep(0.5).sleep_hours == 8.0
    assert store.adjust_sleep(-20).sleep_hours == 0.0


def test_set_weight_is_permissive(
    store: SessionLogStore,
    caplog: pytest.LogCaptureFixture,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(logging.getLogger("aurafit"), "propagate", True)
    assert store.set_weight(68.4).current_weight == 68.4

    with caplog.at_level(logging.WARNING, logger="aurafit"):
        snapshot = store.set_weight(-3)

    assert snapshot.current_weight == -3
    assert snapshot.base_weight == 70
    assert "implausible weight" in caplog.text
    assert math.isnan(store.set_weight(float("nan")).current_weight)


def test_summary_and_reset(store: SessionLogStore) -> None:
    store.adjust_water(4)
    store.set_summary("### Report\nGreat day")

    assert store.summary == "### Report\nGreat day"

    fresh = store.reset(make_log())

    assert fresh.water_intake == 0
    assert store.summary is None


def test_reset_without_log_starts_today(store: SessionLogStore) -> None:
    store.set_weight(68.0)
    store.append_workout(
        WorkoutRecord(description="walk", duration=20, calories_burned=90)
    )

    fresh = store.reset()

    assert fresh.date == date.today()
    assert fresh.workouts == ()
    assert fresh.base_weight == 70
    assert fresh.current_weight == 70
    assert fresh.goal == make_log().goal
    assert store.snapshot is fresh
