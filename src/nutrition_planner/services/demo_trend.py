"""Illustrative weight trend for brand-new profiles.

The points are a display affordance only and are never persisted.
"""

from datetime import date, timedelta

from nutrition_planner.domain.weight import WeightEntry

DEMO_OFFSETS_KG = (2.0, 1.5, 1.0, 0.5, 0.0)
DEMO_STEP_DAYS = 7


def build_demo_trend(
    history: list[WeightEntry], current_weight: float, today: date
) -> list[WeightEntry]:
    """Return weekly back-dated points easing toward the anchor weight.

    Histories with more than one real entry are returned unchanged.
    """
    if len(history) > 1:
        return history
    anchor = history[0].weight if history else current_weight
    last_index = len(DEMO_OFFSETS_KG) - 1
    return [
        WeightEntry(
            date=today - timedelta(days=DEMO_STEP_DAYS * (last_index - index)),
            weight=anchor + offset,
        )
        for index, offset in enumerate(DEMO_OFFSETS_KG)
    ]
