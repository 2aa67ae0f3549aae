"""AI coach service: meal/workout estimation and daily summaries."""

import logging
from dataclasses import dataclass
from typing import Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from aurafit.domain.analysis import MealAnalysis, WorkoutAnalysis
from aurafit.domain.errors import InputValidationError, UpstreamError
from aurafit.domain.log import DailyLog
from aurafit.services.totals import compute_totals

_logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)

MEAL_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "calories": {"type": "number", "description": "Estimated calories"},
        "protein": {"type": "number", "description": "Estimated protein in grams"},
        "carbs": {
            "type": "number",
            "description": "Estimated carbohydrates in grams",
        },
        "fat": {"type": "number", "description": "Estimated fat in grams"},
    },
    "required": ["calories", "protein", "carbs", "fat"],
    "additionalProperties": False,
}

WORKOUT_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "duration": {
            "type": "number",
            "description": "Estimated duration of the workout in minutes",
        },
        "calories_burned": {
            "type": "number",
            "description": "Estimated calories burned",
        },
    },
    "required": ["duration", "calories_burned"],
    "additionalProperties": False,
}

COACH_INSTRUCTIONS = (
    "You are a highly motivational and knowledgeable fitness and nutrition "
    "coach. Your tone is encouraging, positive, and gamified. You are helping "
    "a user achieve their health goals. Respond only with the markdown summary."
)

SUMMARY_HEADINGS = (
    "### 🌟 Daily Quest Report",
    "### 🔬 Weight & Goal Analysis",
    "### ✨ Pro-Tip Unlocked!",
)


class CoachClient(Protocol):
    """Interface for the generative model backing the coach."""

    async def extract(
        self,
        *,
        model: str,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
    ) -> dict[str, object]:
        """Return structured JSON output for a prompt."""

    async def compose(self, *, model: str, instructions: str, prompt: str) -> str:
        """Return free-form text for a prompt."""


@dataclass
class CoachService:
    """Service that prepares coach prompts and validates results."""

    client: CoachClient
    model: str
    summary_model: str

    async def analyze_meal(self, description: str) -> MealAnalysis:
        """Estimate calories and macros for a meal description."""
        text = _require_description(description, "meal")
        prompt = (
            f'Analyze the nutritional content of this meal: "{text}". '
            "Provide your best estimate."
        )
        raw = await self._extract(prompt, MEAL_SCHEMA, "meal_analysis")
        return _validate(MealAnalysis, raw, "meal")

    async def analyze_workout(self, description: str) -> WorkoutAnalysis:
        """Estimate duration and calories burned for a workout description."""
        text = _require_description(description, "workout")
        prompt = (
            f'Analyze this workout: "{text}". '
            "Estimate the duration in minutes and calories burned."
        )
        raw = await self._extract(prompt, WORKOUT_SCHEMA, "workout_analysis")
        return _validate(WorkoutAnalysis, raw, "workout")

    async def generate_daily_summary(self, log: DailyLog) -> str:
        """Ask the coach for a narrative report on the day."""
        try:
            text = await self.client.compose(
                model=self.summary_model,
                instructions=COACH_INSTRUCTIONS,
                prompt=build_summary_prompt(log),
            )
        except Exception as exc:
            raise UpstreamError("Summary generation failed") from exc
        if not text or not text.strip():
            raise UpstreamError("Coach returned an empty summary")
        return text

    async def _extract(
        self, prompt: str, schema: dict[str, object], schema_name: str
    ) -> dict[str, object]:
        try:
            return await self.client.extract(
                model=self.model,
                prompt=prompt,
                schema=schema,
                schema_name=schema_name,
            )
        except Exception as exc:
            raise UpstreamError(f"Coach request failed for {schema_name}") from exc


def build_summary_prompt(log: DailyLog) -> str:
    """Render the daily summary prompt for a log snapshot."""
    totals = compute_totals(log)
    meal_names = ", ".join(meal.description for meal in log.meals) or "None"
    workout_names = (
        ", ".join(workout.description for workout in log.workouts) or "None"
    )
    report, analysis, tip = SUMMARY_HEADINGS
    lines = [
        "Based on the following daily log for a user whose base weight is "
        f"{log.base_weight} kg and goal is to '{log.goal}', "
        "provide a summary and analysis.",
        "",
        f"User's Goal: {log.goal}",
        f"Base Weight: {log.base_weight} kg",
        f"Current Weight: {log.current_weight} kg",
        "",
        "Today's Data:",
        f"- Calorie Intake: {totals.total_calories:.0f} kcal "
        f"from meals: {meal_names}",
        f"- Calories Burned: {totals.total_calories_burned:.0f} kcal "
        f"from workouts: {workout_names}",
        f"- Net Calorie Balance: {totals.net_calories:.0f} kcal",
        f"- Protein Intake: {totals.total_protein:.0f} g",
        f"- Water Intake: {log.water_intake} glasses",
        f"- Sleep: {log.sleep_hours} hours",
        "",
        "Your response must be a single string containing markdown.",
        "Your response must include these sections with these exact headings:",
        "",
        report,
        "Give a brief, super positive summary of the day. Frame their efforts "
        "as completing a quest. Mention their calorie balance.",
        "",
        analysis,
        "Provide an approximate prediction for weight change based on today's "
        "data. Explain it simply. Offer specific advice for their goal of "
        f"'{log.goal}'. For example, if they want muscle gain, comment on their "
        "protein intake. If they want fat loss, comment on their calorie deficit.",
        "",
        tip,
        "Give one actionable, inspiring tip for tomorrow. Make it sound like "
        "they've unlocked an achievement.",
        "",
        "Keep the entire response concise, under 200 words. "
        "Use emojis to make it engaging and motivational.",
    ]
    return "\n".join(lines)


def _require_description(description: str, kind: str) -> str:
    text = (description or "").strip()
    if not text:
        raise InputValidationError(f"Please enter a {kind} description.")
    return text


def _validate(
    model: type[_ModelT], raw: dict[str, object], kind: str
) -> _ModelT:
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        _logger.warning("Coach returned an invalid %s payload: %s", kind, raw)
        raise UpstreamError(f"Received invalid data for {kind} analysis") from exc
