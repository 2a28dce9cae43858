"""Food log entry creation and aggregation."""

from datetime import UTC, date, datetime, timedelta, tzinfo
from uuid import uuid4

from nutrition_planner.domain.food_log import (
    DailyTotals,
    FoodLogEntry,
    NutritionEstimate,
    PeriodSummary,
)

DAYS_PER_WEEK = 7


def create_entry(estimate: NutritionEstimate, now: datetime) -> FoodLogEntry:
    """Stamp an estimate with a fresh id and a UTC timestamp."""
    return FoodLogEntry(
        id=uuid4(),
        date=now.astimezone(UTC),
        **estimate.model_dump(),
    )


def entries_for_day(
    entries: list[FoodLogEntry], reference_date: date, tz: tzinfo = UTC
) -> list[FoodLogEntry]:
    """Return entries logged on the reference date in the given timezone."""
    return [
        entry for entry in entries if entry.date.astimezone(tz).date() == reference_date
    ]


def aggregate_for_day(
    entries: list[FoodLogEntry], reference_date: date, tz: tzinfo = UTC
) -> DailyTotals:
    """Sum calories and macros for entries logged on the reference date."""
    total = DailyTotals(
        day=reference_date, calories=0.0, protein=0.0, carbohydrates=0.0, fat=0.0
    )
    for entry in entries_for_day(entries, reference_date, tz):
        total = DailyTotals(
            day=reference_date,
            calories=total.calories + entry.calories,
            protein=total.protein + entry.protein,
            carbohydrates=total.carbohydrates + entry.carbohydrates,
            fat=total.fat + entry.fat,
        )
    return total


def aggregate_week(
    entries: list[FoodLogEntry], reference_date: date, tz: tzinfo = UTC
) -> PeriodSummary:
    """Return daily totals and averages for the Monday-based week."""
    start = reference_date - timedelta(days=reference_date.weekday())
    daily = [
        aggregate_for_day(entries, start + timedelta(days=offset), tz)
        for offset in range(DAYS_PER_WEEK)
    ]
    return PeriodSummary(
        daily=daily,
        avg_calories=sum(day.calories for day in daily) / DAYS_PER_WEEK,
        avg_protein=sum(day.protein for day in daily) / DAYS_PER_WEEK,
        avg_carbohydrates=sum(day.carbohydrates for day in daily) / DAYS_PER_WEEK,
        avg_fat=sum(day.fat for day in daily) / DAYS_PER_WEEK,
    )
