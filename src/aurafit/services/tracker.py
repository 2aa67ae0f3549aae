"""Tracker orchestration: AI-backed logging on top of the session store."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TypeVar

from aurafit.domain.errors import OperationInProgressError, UpstreamError
from aurafit.domain.log import (
    DailyLog,
    GoalProgress,
    GoalTargets,
    NutrientRecord,
    Totals,
    WorkoutRecord,
)
from aurafit.services.coach import CoachService
from aurafit.services.goals import (
    GoalCelebrationTracker,
    compute_goals,
    evaluate_progress,
)
from aurafit.services.session_log import SessionLogStore
from aurafit.services.totals import compute_totals

OPERATIONS = ("meal", "workout", "summary")

_logger = logging.getLogger(__name__)

_ResultT = TypeVar("_ResultT")


@dataclass(frozen=True)
class DashboardSnapshot:
    """Everything a client needs to render the day."""

    log: DailyLog
    totals: Totals
    targets: GoalTargets
    progress: list[GoalProgress]
    celebrations: frozenset[str]
    loading: dict[str, bool]
    summary: str | None


@dataclass
class TrackerService:
    """Coordinates coach calls with session log mutations."""

    store: SessionLogStore
    coach: CoachService
    celebrations: GoalCelebrationTracker = field(
        default_factory=GoalCelebrationTracker
    )
    _in_flight: set[str] = field(default_factory=set)

    async def add_meal(self, description: str) -> NutrientRecord:
        """Analyze a meal description and append the resulting record."""
        nutrients = await self._run(
            "meal", lambda: self.coach.analyze_meal(description)
        )
        record = NutrientRecord(
            description=description.strip(),
            calories=nutrients.calories,
            protein=nutrients.protein,
            carbs=nutrients.carbs,
            fat=nutrients.fat,
        )
        self.store.append_meal(record)
        _logger.info(
            "Meal logged: %s (%.0f kcal)", record.description, record.calories
        )
        return record

    async def add_workout(self, description: str) -> WorkoutRecord:
        """Analyze a workout description and append the resulting record."""
        estimate = await self._run(
            "workout", lambda: self.coach.analyze_workout(description)
        )
        record = WorkoutRecord(
            description=description.strip(),
            duration=estimate.duration,
            calories_burned=estimate.calories_burned,
        )
        self.store.append_workout(record)
        _logger.info(
            "Workout logged: %s (%.0f kcal)",
            record.description,
            record.calories_burned,
        )
        return record

    async def generate_summary(self) -> str:
        """Generate and store the narrative summary for the current log."""
        snapshot = self.store.snapshot
        summary = await self._run(
            "summary", lambda: self.coach.generate_daily_summary(snapshot)
        )
        self.store.set_summary(summary)
        return summary

    def adjust_water(self, delta: int) -> DailyLog:
        """Change water intake by delta glasses."""
        return self.store.adjust_water(delta)

    def adjust_sleep(self, delta: float) -> DailyLog:
        """Change sleep hours by delta."""
        return self.store.adjust_sleep(delta)

    def set_weight(self, value: float) -> DailyLog:
        """Replace the current weight."""
        return self.store.set_weight(value)

    def start_new_day(self) -> DailyLog:
        """Replace the log with an empty one and re-arm goal celebrations."""
        if self._in_flight:
            raise OperationInProgressError(sorted(self._in_flight)[0])
        log = self.store.reset()
        self.celebrations.reset()
        _logger.info("Started a new day: %s", log.date.isoformat())
        return log

    def loading_states(self) -> dict[str, bool]:
        """Return whether each operation currently has a request in flight."""
        return {operation: operation in self._in_flight for operation in OPERATIONS}

    def dashboard(self) -> DashboardSnapshot:
        """Derive totals and goal progress for the current log.

        Completion edges are recorded as the dashboard is observed, so a
        metric shows up in ``celebrations`` once per completion.
        """
        log = self.store.snapshot
        totals = compute_totals(log)
        progress = evaluate_progress(log, totals)
        celebrations = frozenset(
            row.metric
            for row in progress
            if self.celebrations.observe(row.metric, row.fraction)
        )
        return DashboardSnapshot(
            log=log,
            totals=totals,
            targets=compute_goals(log),
            progress=progress,
            celebrations=celebrations,
            loading=self.loading_states(),
            summary=self.store.summary,
        )

    async def _run(
        self, operation: str, call: Callable[[], Awaitable[_ResultT]]
    ) -> _ResultT:
        if operation in self._in_flight:
            raise OperationInProgressError(operation)
        self._in_flight.add(operation)
        try:
            return await call()
        except UpstreamError:
            _logger.exception("Coach %s request failed", operation)
            raise
        finally:
            self._in_flight.discard(operation)
