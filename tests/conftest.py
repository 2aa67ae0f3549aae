"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import date

import pytest

from aurafit.config import Settings
from aurafit.containers import AppContainer
from aurafit.domain.log import DailyLog
from aurafit.services.coach import CoachClient, CoachService
from aurafit.services.session_log import SessionLogStore, new_daily_log
from aurafit.services.tracker import TrackerService

SAMPLE_SUMMARY = (
    "### 🌟 Daily Quest Report\n"
    "Quest complete! You stayed 300 kcal under budget.\n\n"
    "### 🔬 Weight & Goal Analysis\n"
    "Keep protein high to build lean muscle.\n\n"
    "### ✨ Pro-Tip Unlocked!\n"
    "Drink a glass of water with every meal."
)


@dataclass
class FakeCoachClient(CoachClient):
    """Fake coach client returning canned payloads."""

    meal_payload: object = field(
        default_factory=lambda: {
            "calories": 500,
            "protein": 40,
            "carbs": 50,
            "fat": 10,
        }
    )
    workout_payload: object = field(
        default_factory=lambda: {"duration": 30, "calories_burned": 300}
    )
    summary_text: str = SAMPLE_SUMMARY
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def extract(
        self,
        *,
        model: str,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
    ) -> dict[str, object]:
        self.calls.append({"kind": schema_name, "model": model, "prompt": prompt})
        if self.error is not None:
            raise self.error
        if schema_name == "meal_analysis":
            return self.meal_payload  # type: ignore[return-value]
        return self.workout_payload  # type: ignore[return-value]

    async def compose(self, *, model: str, instructions: str, prompt: str) -> str:
        self.calls.append({"kind": "summary", "model": model, "prompt": prompt})
        if self.error is not None:
            raise self.error
        return self.summary_text


def make_log(**overrides: object) -> DailyLog:
    """Build a log for tests with sensible defaults."""
    log = new_daily_log(
        base_weight=70,
        goal="Lose belly fat and gain lean muscle",
        day=date(2024, 5, 1),
    )
    if overrides:
        log = replace(log, **overrides)
    return log


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def coach_client() -> FakeCoachClient:
    return FakeCoachClient()


@pytest.fixture
def coach_service(coach_client: FakeCoachClient) -> CoachService:
    return CoachService(client=coach_client, model="gpt-test", summary_model="gpt-pro")


@pytest.fixture
def store() -> SessionLogStore:
    return SessionLogStore(make_log())


@pytest.fixture
def tracker(store: SessionLogStore, coach_service: CoachService) -> TrackerService:
    return TrackerService(store=store, coach=coach_service)


@pytest.fixture
def container(
    settings: Settings,
    coach_service: CoachService,
    tracker: TrackerService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        coach_service=coach_service,
        tracker_service=tracker,
        close_resources=close_resources,
    )
