"""Domain models for goals and the dashboard view."""

from dataclasses import dataclass

from nutrition_planner.domain.food_log import DailyTotals, FoodLogEntry
from nutrition_planner.domain.weight import WeightEntry


@dataclass(frozen=True)
class MacroTargets:
    """Daily calorie and macronutrient targets."""

    calorie_goal: float
    protein_grams_goal: float
    carb_grams_goal: float
    fat_grams_goal: float


@dataclass(frozen=True)
class DashboardView:
    """Today's totals against targets plus the weight series."""

    targets: MacroTargets
    totals: DailyTotals
    calorie_progress: float
    protein_progress: float
    carb_progress: float
    fat_progress: float
    weight_series: list[WeightEntry]
    today_entries: list[FoodLogEntry]
