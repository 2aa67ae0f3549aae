"""Models for AI analysis results."""

from pydantic import BaseModel, ConfigDict, Field


class MealAnalysis(BaseModel):
    """Structured nutrition estimate for a meal description."""

    model_config = ConfigDict(allow_inf_nan=False)

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)


class WorkoutAnalysis(BaseModel):
    """Structured estimate for a workout description."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    duration: float = Field(ge=0)
    calories_burned: float = Field(ge=0, alias="caloriesBurned")
