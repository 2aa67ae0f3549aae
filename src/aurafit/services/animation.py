"""Count-up animation model for dashboard numbers."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field


def ease_out_expo(t: float) -> float:
    """Exponential ease-out; exactly 1 at t >= 1."""
    if t >= 1:
        return 1.0
    return 1 - 2 ** (-10 * t)


@dataclass
class CountUpAnimation:
    """Eases a displayed number from its previous value to a new target.

    A new target cancels the running animation and restarts from whatever
    value is on screen at that moment.
    """

    target: float = 0.0
    duration: float = 1.0
    clock: Callable[[], float] = time.monotonic
    start_value: float = field(init=False)
    started_at: float = field(init=False)

    def __post_init__(self) -> None:
        self.start_value = self.target
        self.started_at = self.clock()

    def progress(self, now: float | None = None) -> float:
        """Return normalized elapsed time in [0, 1]."""
        current = self.clock() if now is None else now
        if self.duration <= 0:
            return 1.0
        return min(max((current - self.started_at) / self.duration, 0.0), 1.0)

    def value_at(self, now: float | None = None) -> float:
        """Return the eased value for a point in time."""
        t = self.progress(now)
        if t >= 1:
            return self.target
        return self.start_value + (self.target - self.start_value) * ease_out_expo(t)

    def display_at(self, now: float | None = None) -> int:
        """Return the value rounded for display."""
        return round(self.value_at(now))

    def finished(self, now: float | None = None) -> bool:
        """Return whether the animation reached its target."""
        return self.progress(now) >= 1

    def retarget(self, target: float, now: float | None = None) -> None:
        """Start animating toward a new target from the displayed value."""
        current = self.clock() if now is None else now
        self.start_value = self.value_at(current)
        self.target = target
        self.started_at = current
