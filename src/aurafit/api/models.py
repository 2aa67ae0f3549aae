"""Pydantic models for dashboard request payloads."""

from pydantic import BaseModel, Field


class DescriptionPayload(BaseModel):
    """Free-text meal or workout description."""

    description: str = ""


class WaterPayload(BaseModel):
    """Change in water intake, in glasses."""

    delta: int


class SleepPayload(BaseModel):
    """Change in sleep, in hours."""

    delta: float = Field(allow_inf_nan=False)


class WeightPayload(BaseModel):
    """New current weight in kg."""

    value: float = Field(allow_inf_nan=False)
