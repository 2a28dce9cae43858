"""Domain models for the food log."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class NutritionEstimate(BaseModel):
    """Structured nutrition estimate for a described food."""

    model_config = ConfigDict(frozen=True)

    item_name: str
    calories: float = Field(ge=0.0)
    protein: float = Field(ge=0.0)
    carbohydrates: float = Field(ge=0.0)
    fat: float = Field(ge=0.0)
    serving_size: str


class FoodLogEntry(NutritionEstimate):
    """A logged food with identity and timestamp."""

    id: UUID
    date: datetime


@dataclass(frozen=True)
class DailyTotals:
    """Daily total macros."""

    day: date
    calories: float
    protein: float
    carbohydrates: float
    fat: float


@dataclass(frozen=True)
class PeriodSummary:
    """Aggregated totals for a period."""

    daily: list[DailyTotals]
    avg_calories: float
    avg_protein: float
    avg_carbohydrates: float
    avg_fat: float


@dataclass(frozen=True)
class MacroTotals:
    """Summed calories and macros."""

    calories: float
    protein: float
    carbohydrates: float
    fat: float
