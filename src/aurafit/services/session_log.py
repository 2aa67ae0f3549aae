"""In-memory state container for the current day's log."""

import logging
import math
from dataclasses import dataclass, field, replace
from datetime import date

from aurafit.domain.errors import InputValidationError
from aurafit.domain.log import DailyLog, NutrientRecord, WorkoutRecord

_logger = logging.getLogger(__name__)


def new_daily_log(
    base_weight: float,
    goal: str,
    sleep_hours: float = 7.5,
    day: date | None = None,
) -> DailyLog:
    """Build an empty log for a day."""
    return DailyLog(
        date=day or date.today(),
        base_weight=base_weight,
        current_weight=base_weight,
        goal=goal,
        sleep_hours=sleep_hours,
    )


@dataclass
class SessionLogStore:
    """Owns the single DailyLog for a session.

    Every mutation swaps in a new frozen snapshot, so readers never see a
    half-applied change.
    """

    _log: DailyLog
    _summary: str | None = field(default=None)

    @property
    def snapshot(self) -> DailyLog:
        """Return the current log snapshot."""
        return self._log

    @property
    def summary(self) -> str | None:
        """Return the last generated narrative summary, if any."""
        return self._summary

    def append_meal(self, record: NutrientRecord) -> DailyLog:
        """Append a meal record at the end of the day's meals."""
        _ensure_valid_amounts(record.numeric_fields())
        return self._commit(replace(self._log, meals=(*self._log.meals, record)))

    def append_workout(self, record: WorkoutRecord) -> DailyLog:
        """Append a workout record at the end of the day's workouts."""
        _ensure_valid_amounts(record.numeric_fields())
        return self._commit(
            replace(self._log, workouts=(*self._log.workouts, record))
        )

    def adjust_water(self, delta: int) -> DailyLog:
        """Change water intake by delta glasses, floored at zero."""
        return self._commit(
            replace(self._log, water_intake=max(0, self._log.water_intake + delta))
        )

    def adjust_sleep(self, delta: float) -> DailyLog:
        """Change sleep hours by delta, floored at zero."""
        return self._commit(
            replace(self._log, sleep_hours=max(0.0, self._log.sleep_hours + delta))
        )

    def set_weight(self, value: float) -> DailyLog:
        """Replace the current weight without validation."""
        if not math.isfinite(value) or value <= 0:
            _logger.warning("Accepting implausible weight value: %s", value)
        return self._commit(replace(self._log, current_weight=value))

    def set_summary(self, text: str) -> None:
        """Store a narrative summary verbatim."""
        self._summary = text

    def reset(self, log: DailyLog | None = None) -> DailyLog:
        """Start over with a fresh log and no summary.

        Without an explicit log, today's empty log keeps the current base
        weight and goal.
        """
        if log is None:
            log = new_daily_log(self._log.base_weight, self._log.goal)
        self._summary = None
        return self._commit(log)

    def _commit(self, log: DailyLog) -> DailyLog:
        self._log = log
        return log


def _ensure_valid_amounts(values: dict[str, float]) -> None:
    invalid = [
        name
        for name, value in values.items()
        if not math.isfinite(value) or value < 0
    ]
    if invalid:
        raise InputValidationError(
            f"Record fields must be finite and non-negative: {', '.join(invalid)}"
        )
