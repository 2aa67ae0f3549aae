"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from aurafit.api.models import (
    DescriptionPayload,
    SleepPayload,
    WaterPayload,
    WeightPayload,
)
from aurafit.app_logging import configure_logging
from aurafit.containers import AppContainer
from aurafit.domain.errors import (
    InputValidationError,
    OperationInProgressError,
    UpstreamError,
)
from aurafit.domain.log import DailyLog, NutrientRecord, WorkoutRecord
from aurafit.services.summary_format import split_sections
from aurafit.services.tracker import DashboardSnapshot

_UPSTREAM_MESSAGES = {
    "/meals": "AI couldn't analyze the meal. Please try again.",
    "/workouts": "AI couldn't analyze the workout. Please try again.",
    "/summary": "AI failed to generate a summary. Please try again later.",
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("AuraFit started (environment=%s)", container.settings.environment)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(InputValidationError)
    async def input_validation_handler(
        request: Request, exc: InputValidationError
    ) -> JSONResponse:
        return _notification_response(
            status.HTTP_400_BAD_REQUEST, "warning", str(exc)
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("Rejected request to %s: %s", request.url.path, exc.errors())
        return _notification_response(
            status.HTTP_400_BAD_REQUEST, "warning", _describe_errors(exc)
        )

    @app.exception_handler(OperationInProgressError)
    async def in_progress_handler(
        request: Request, exc: OperationInProgressError
    ) -> JSONResponse:
        return _notification_response(
            status.HTTP_409_CONFLICT,
            "warning",
            f"Still working on the previous {exc.operation} request.",
        )

    @app.exception_handler(UpstreamError)
    async def upstream_handler(request: Request, exc: UpstreamError) -> JSONResponse:
        message = _UPSTREAM_MESSAGES.get(
            request.url.path, "AI request failed. Please try again."
        )
        return _notification_response(status.HTTP_502_BAD_GATEWAY, "error", message)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/dashboard")
    async def dashboard(request: Request) -> dict[str, object]:
        """Return the day's log with totals and goal progress."""
        state_container: AppContainer = request.app.state.container
        return _dashboard_payload(state_container.tracker_service.dashboard())

    @app.post("/meals")
    async def add_meal(
        payload: DescriptionPayload, request: Request
    ) -> dict[str, object]:
        """Analyze a meal description and log it."""
        tracker = request.app.state.container.tracker_service
        await tracker.add_meal(payload.description)
        return _action_payload(
            "success", "Meal added successfully!", tracker.dashboard()
        )

    @app.post("/workouts")
    async def add_workout(
        payload: DescriptionPayload, request: Request
    ) -> dict[str, object]:
        """Analyze a workout description and log it."""
        tracker = request.app.state.container.tracker_service
        await tracker.add_workout(payload.description)
        return _action_payload(
            "success", "Workout added successfully!", tracker.dashboard()
        )

    @app.post("/water")
    async def adjust_water(
        payload: WaterPayload, request: Request
    ) -> dict[str, object]:
        """Change water intake by a number of glasses."""
        tracker = request.app.state.container.tracker_service
        log = tracker.adjust_water(payload.delta)
        return _action_payload(
            "info", f"Water: {log.water_intake} glasses", tracker.dashboard()
        )

    @app.post("/sleep")
    async def adjust_sleep(
        payload: SleepPayload, request: Request
    ) -> dict[str, object]:
        """Change sleep by a number of hours."""
        tracker = request.app.state.container.tracker_service
        log = tracker.adjust_sleep(payload.delta)
        return _action_payload(
            "info", f"Sleep: {log.sleep_hours:.1f} hours", tracker.dashboard()
        )

    @app.put("/weight")
    async def set_weight(payload: WeightPayload, request: Request) -> dict[str, object]:
        """Replace the current weight."""
        tracker = request.app.state.container.tracker_service
        log = tracker.set_weight(payload.value)
        return _action_payload(
            "info", f"Weight: {log.current_weight} kg", tracker.dashboard()
        )

    @app.post("/summary")
    async def generate_summary(request: Request) -> dict[str, object]:
        """Generate the coach's narrative summary for today."""
        tracker = request.app.state.container.tracker_service
        await tracker.generate_summary()
        return _action_payload("info", "Daily summary unlocked!", tracker.dashboard())

    @app.post("/day")
    async def start_new_day(request: Request) -> dict[str, object]:
        """Start a fresh log for today."""
        tracker = request.app.state.container.tracker_service
        log = tracker.start_new_day()
        return _action_payload(
            "info", f"New day started: {log.date.isoformat()}", tracker.dashboard()
        )

    return app


def _notification_response(
    status_code: int, level: str, message: str
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"notification": {"level": level, "message": message}},
    )


def _describe_errors(exc: RequestValidationError) -> str:
    fields = [
        ".".join(
            part for part in error["loc"] if isinstance(part, str) and part != "body"
        )
        for error in exc.errors()
    ]
    named = [name for name in fields if name]
    if not named:
        return "Invalid request body."
    return f"Invalid value for: {', '.join(named)}"


def _action_payload(
    level: str, message: str, snapshot: DashboardSnapshot
) -> dict[str, object]:
    return {
        "notification": {"level": level, "message": message},
        "dashboard": _dashboard_payload(snapshot),
    }


def _dashboard_payload(snapshot: DashboardSnapshot) -> dict[str, object]:
    """Serialize a dashboard snapshot for JSON responses."""
    totals = snapshot.totals
    return {
        "log": _log_payload(snapshot.log),
        "totals": {
            "total_calories": totals.total_calories,
            "total_protein": totals.total_protein,
            "total_carbs": totals.total_carbs,
            "total_fat": totals.total_fat,
            "total_calories_burned": totals.total_calories_burned,
            "net_calories": totals.net_calories,
        },
        "targets": {
            "calorie_goal": snapshot.targets.calorie_goal,
            "protein_goal": snapshot.targets.protein_goal,
            "water_goal": snapshot.targets.water_goal,
        },
        "progress": [
            {
                "metric": row.metric,
                "label": row.label,
                "unit": row.unit,
                "current": row.current,
                "goal": row.goal,
                "fraction": row.fraction,
                "completed": row.completed,
                "celebrate": row.metric in snapshot.celebrations,
            }
            for row in snapshot.progress
        ],
        "loading": snapshot.loading,
        "summary": snapshot.summary,
        "summary_sections": (
            [
                {"heading": section.heading, "body": section.body}
                for section in split_sections(snapshot.summary)
            ]
            if snapshot.summary
            else []
        ),
    }


def _log_payload(log: DailyLog) -> dict[str, object]:
    return {
        "date": log.date.isoformat(),
        "meals": [_meal_payload(meal) for meal in log.meals],
        "workouts": [_workout_payload(workout) for workout in log.workouts],
        "water_intake": log.water_intake,
        "sleep_hours": log.sleep_hours,
        "base_weight": log.base_weight,
        "current_weight": log.current_weight,
        "goal": log.goal,
    }


def _meal_payload(meal: NutrientRecord) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "description": meal.description,
        "calories": meal.calories,
        "protein": meal.protein,
        "carbs": meal.carbs,
        "fat": meal.fat,
    }


def _workout_payload(workout: WorkoutRecord) -> dict[str, object]:
    return {
        "id": str(workout.id),
        "description": workout.description,
        "duration": workout.duration,
        "calories_burned": workout.calories_burned,
    }
