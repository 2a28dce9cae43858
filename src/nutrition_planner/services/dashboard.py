"""Dashboard assembly from profile, food log and weight history."""

from datetime import UTC, date, tzinfo

from nutrition_planner.domain.dashboard import DashboardView
from nutrition_planner.domain.food_log import FoodLogEntry
from nutrition_planner.domain.profile import Profile
from nutrition_planner.domain.weight import WeightEntry
from nutrition_planner.services.food_log import aggregate_for_day, entries_for_day
from nutrition_planner.services.targets import compute_targets


def progress_ratio(consumed: float, target: float) -> float:
    """Return consumed/target, or 0.0 when the target is not positive."""
    if target <= 0:
        return 0.0
    return consumed / target


def assemble(
    profile: Profile,
    entries: list[FoodLogEntry],
    history: list[WeightEntry],
    today: date,
    tz: tzinfo = UTC,
) -> DashboardView:
    """Build today's dashboard without mutating any input."""
    targets = compute_targets(profile)
    totals = aggregate_for_day(entries, today, tz)
    return DashboardView(
        targets=targets,
        totals=totals,
        calorie_progress=progress_ratio(totals.calories, targets.calorie_goal),
        protein_progress=progress_ratio(totals.protein, targets.protein_grams_goal),
        carb_progress=progress_ratio(totals.carbohydrates, targets.carb_grams_goal),
        fat_progress=progress_ratio(totals.fat, targets.fat_grams_goal),
        weight_series=list(history),
        today_entries=entries_for_day(entries, today, tz),
    )
