"""Session state and its key-value persistence."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from pydantic import BaseModel, TypeAdapter

from nutrition_planner.domain.food_log import FoodLogEntry
from nutrition_planner.domain.profile import Profile
from nutrition_planner.domain.weight import WeightEntry

PROFILE_KEY = "profile"
FOOD_LOG_KEY = "foodLog"
WEIGHT_HISTORY_KEY = "weightHistory"

_FOOD_LOG_ADAPTER = TypeAdapter(list[FoodLogEntry])
_WEIGHT_HISTORY_ADAPTER = TypeAdapter(list[WeightEntry])

_logger = logging.getLogger(__name__)


class StateStore(Protocol):
    """Durable mapping from a few fixed keys to JSON values."""

    def get(self, key: str) -> object | None:
        """Return the stored JSON value for a key, if present."""

    def set(self, key: str, value: object) -> None:
        """Store a JSON-serializable value under a key."""


@dataclass
class SessionState:
    """In-memory state of the single user session."""

    profile: Profile | None = None
    food_log: list[FoodLogEntry] = field(default_factory=list)
    weight_history: list[WeightEntry] = field(default_factory=list)


@dataclass
class StateService:
    """Loads and saves session state; storage failures are logged, not raised."""

    store: StateStore

    def load(self) -> SessionState:
        """Load the session state, treating unreadable keys as absent."""
        profile_raw = self._read(PROFILE_KEY)
        food_log_raw = self._read(FOOD_LOG_KEY)
        weight_raw = self._read(WEIGHT_HISTORY_KEY)
        return SessionState(
            profile=self._parse(PROFILE_KEY, profile_raw, Profile.model_validate),
            food_log=self._parse(
                FOOD_LOG_KEY, food_log_raw, _FOOD_LOG_ADAPTER.validate_python
            )
            or [],
            weight_history=self._parse(
                WEIGHT_HISTORY_KEY, weight_raw, _WEIGHT_HISTORY_ADAPTER.validate_python
            )
            or [],
        )

    def save_profile(self, profile: Profile) -> None:
        """Persist the profile."""
        self._write(PROFILE_KEY, profile.model_dump(mode="json"))

    def save_food_log(self, food_log: list[FoodLogEntry]) -> None:
        """Persist the full food log."""
        self._write(FOOD_LOG_KEY, _dump_models(food_log))

    def save_weight_history(self, history: list[WeightEntry]) -> None:
        """Persist the weight history."""
        self._write(WEIGHT_HISTORY_KEY, _dump_models(history))

    def _read(self, key: str) -> object | None:
        try:
            return self.store.get(key)
        except Exception:
            _logger.exception("Failed to read state key %s", key)
            return None

    def _write(self, key: str, value: object) -> None:
        try:
            self.store.set(key, value)
        except Exception:
            _logger.exception("Failed to persist state key %s", key)

    def _parse(
        self, key: str, raw: object | None, validate: Callable[[object], Any]
    ) -> Any:
        if raw is None:
            return None
        try:
            return validate(raw)
        except ValueError:
            _logger.exception("Discarding invalid stored value for %s", key)
            return None


def _dump_models(models: Sequence[BaseModel]) -> list[dict[str, object]]:
    return [model.model_dump(mode="json") for model in models]
