"""Application service behind the onboarding, logger, planner and profile views."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

from nutrition_planner.domain.dashboard import DashboardView
from nutrition_planner.domain.errors import InvalidInputError
from nutrition_planner.domain.food_log import (
    FoodLogEntry,
    NutritionEstimate,
    PeriodSummary,
)
from nutrition_planner.domain.plans import MealPlan
from nutrition_planner.domain.profile import Profile
from nutrition_planner.services.dashboard import assemble
from nutrition_planner.services.demo_trend import build_demo_trend
from nutrition_planner.services.food_log import aggregate_week, create_entry
from nutrition_planner.services.gateway import NutritionGateway
from nutrition_planner.services.state import SessionState, StateService
from nutrition_planner.services.weight import record_weight

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SessionService:
    """Coordinates session state, the AI gateway and persistence."""

    state: SessionState
    state_service: StateService
    gateway: NutritionGateway
    timezone_name: str = "UTC"
    demo_weight_trend: bool = False
    clock: Callable[[], datetime] = _utc_now

    def today(self) -> date:
        """Return the current calendar day in the configured timezone."""
        return self.clock().astimezone(ZoneInfo(self.timezone_name)).date()

    def is_onboarded(self) -> bool:
        """Return True once a profile exists."""
        return self.state.profile is not None

    def complete_onboarding(self, profile: Profile) -> None:
        """Store the first profile and seed the weight history with it."""
        if self.is_onboarded():
            raise InvalidInputError("Onboarding is already complete.")
        self.state.profile = profile
        self.state.weight_history = record_weight([], self.today(), profile.weight)
        self.state_service.save_profile(profile)
        self.state_service.save_weight_history(self.state.weight_history)
        _logger.info("Onboarding completed for %s", profile.name)

    def update_profile(self, updated: Profile) -> None:
        """Replace the profile, recording today's weight when it changed."""
        current = self._require_profile()
        if updated.weight != current.weight:
            self.state.weight_history = record_weight(
                self.state.weight_history, self.today(), updated.weight
            )
            self.state_service.save_weight_history(self.state.weight_history)
        self.state.profile = updated
        self.state_service.save_profile(updated)

    async def analyze_food(self, description: str) -> NutritionEstimate:
        """Ask the gateway to estimate a described food."""
        cleaned = description.strip()
        if not cleaned:
            raise InvalidInputError("Please enter a food.")
        return await self.gateway.analyze_food(cleaned)

    def log_food(self, estimate: NutritionEstimate) -> FoodLogEntry:
        """Append an analyzed food to the log."""
        entry = create_entry(estimate, self.clock())
        self.state.food_log = [*self.state.food_log, entry]
        self.state_service.save_food_log(self.state.food_log)
        _logger.info("Logged %s (%.0f kcal)", entry.item_name, entry.calories)
        return entry

    async def generate_plan(self) -> MealPlan:
        """Generate a full-day meal plan for the current profile."""
        return await self.gateway.generate_meal_plan(self._require_profile())

    def dashboard(self) -> DashboardView:
        """Return today's dashboard."""
        profile = self._require_profile()
        tz = ZoneInfo(self.timezone_name)
        today = self.today()
        view = assemble(
            profile, self.state.food_log, self.state.weight_history, today, tz
        )
        if not self.demo_weight_trend:
            return view
        return replace(
            view,
            weight_series=build_demo_trend(view.weight_series, profile.weight, today),
        )

    def weekly_summary(self) -> PeriodSummary:
        """Return Monday-to-Sunday totals for the current week and daily averages."""
        return aggregate_week(
            self.state.food_log, self.today(), ZoneInfo(self.timezone_name)
        )

    def _require_profile(self) -> Profile:
        if self.state.profile is None:
            raise InvalidInputError("Complete onboarding first.")
        return self.state.profile
