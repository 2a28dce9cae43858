"""Tests for session state persistence."""

from datetime import UTC, date, datetime

from nutrition_planner.domain.food_log import NutritionEstimate
from nutrition_planner.domain.weight import WeightEntry
from nutrition_planner.services.food_log import create_entry
from nutrition_planner.services.state import (
    FOOD_LOG_KEY,
    PROFILE_KEY,
    WEIGHT_HISTORY_KEY,
    StateService,
)
from tests.conftest import InMemoryStateStore, food_payload, make_profile


def test_load_empty_store_returns_blank_state() -> None:
    state = StateService(InMemoryStateStore()).load()

    assert state.profile is None
    assert state.food_log == []
    assert state.weight_history == []


def test_saved_state_round_trips_through_json_values() -> None:
    store = InMemoryStateStore()
    service = StateService(store)
    profile = make_profile(dietary_restrictions="vegetarian")
    entry = create_entry(
        NutritionEstimate.model_validate(food_payload()),
        datetime(2024, 3, 14, 8, tzinfo=UTC),
    )
    history = [WeightEntry(date=date(2024, 3, 14), weight=70.0)]

    service.save_profile(profile)
    service.save_food_log([entry])
    service.save_weight_history(history)

    assert store.values[WEIGHT_HISTORY_KEY] == [{"date": "2024-03-14", "weight": 70.0}]
    assert store.values[PROFILE_KEY]["activity_level"] == "light"
    loaded = service.load()
    assert loaded.profile == profile
    assert loaded.food_log == [entry]
    assert loaded.weight_history == history


def test_write_failures_are_swallowed() -> None:
    store = InMemoryStateStore(fail_writes=True)
    service = StateService(store)

    service.save_profile(make_profile())
    service.save_weight_history([])

    assert store.values == {}


def test_unreadable_store_loads_blank_state() -> None:
    state = StateService(InMemoryStateStore(fail_reads=True)).load()

    assert state.profile is None
    assert state.food_log == []


def test_invalid_stored_values_are_discarded() -> None:
    store = InMemoryStateStore(
        values={
            PROFILE_KEY: {"name": "Alex", "age": -3},
            FOOD_LOG_KEY: "not-a-list",
            WEIGHT_HISTORY_KEY: [{"date": "2024-03-14", "weight": 70}],
        }
    )

    state = StateService(store).load()

    assert state.profile is None
    assert state.food_log == []
    assert state.weight_history == [WeightEntry(date=date(2024, 3, 14), weight=70)]
