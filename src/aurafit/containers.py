"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from pydantic import ValidationError

from aurafit.adapters.openai_coach_client import OpenAICoachClient
from aurafit.config import Settings
from aurafit.domain.errors import ConfigurationError
from aurafit.services.coach import CoachService
from aurafit.services.session_log import SessionLogStore, new_daily_log
from aurafit.services.tracker import TrackerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    coach_service: CoachService
    tracker_service: TrackerService
    close_resources: Callable[[], Awaitable[None]]


def load_settings() -> Settings:
    """Load settings from the environment, failing fast when incomplete."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(
            "AuraFit needs OPENAI_API_KEY (and other settings) to start"
        ) from exc


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or load_settings()
    if not resolved_settings.openai_api_key.strip():
        raise ConfigurationError("OPENAI_API_KEY must not be empty")
    coach_client = OpenAICoachClient.create(
        resolved_settings.openai_api_key,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
        max_retries=resolved_settings.openai_max_retries,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    coach_service = CoachService(
        client=coach_client,
        model=resolved_settings.openai_model,
        summary_model=resolved_settings.openai_summary_model,
    )
    store = SessionLogStore(
        new_daily_log(
            base_weight=resolved_settings.default_base_weight,
            goal=resolved_settings.default_goal,
            sleep_hours=resolved_settings.default_sleep_hours,
        )
    )
    tracker_service = TrackerService(store=store, coach=coach_service)

    async def close_resources() -> None:
        await coach_client.close()

    return AppContainer(
        settings=resolved_settings,
        coach_service=coach_service,
        tracker_service=tracker_service,
        close_resources=close_resources,
    )
