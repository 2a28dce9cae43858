"""Weight history tracking."""

from datetime import date

from nutrition_planner.domain.weight import WeightEntry


def record_weight(
    history: list[WeightEntry], day: date, weight: float
) -> list[WeightEntry]:
    """Return a new history with the day's weight replaced or appended.

    An existing entry for the same day keeps its position; otherwise the entry
    goes to the end. Entries are never removed or sorted.
    """
    updated: list[WeightEntry] = []
    replaced = False
    for entry in history:
        if entry.date == day:
            updated.append(WeightEntry(date=day, weight=weight))
            replaced = True
        else:
            updated.append(entry)
    if not replaced:
        updated.append(WeightEntry(date=day, weight=weight))
    return updated
