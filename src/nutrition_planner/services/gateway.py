"""AI gateway for food analysis and meal plan generation."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from nutrition_planner.domain.errors import AnalysisError, PlanGenerationError
from nutrition_planner.domain.food_log import NutritionEstimate
from nutrition_planner.domain.plans import MealPlan
from nutrition_planner.domain.profile import (
    ACTIVITY_LEVEL_LABELS,
    GOAL_LABELS,
    SEX_LABELS,
    Profile,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

_logger = logging.getLogger(__name__)

NONE_SENTINEL = "none"
NO_PREFERENCE_SENTINEL = "no specific preference"

FOOD_ANALYSIS_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "item_name": {
            "type": "string",
            "description": "Food or dish name, e.g. 'Grilled chicken with rice'.",
        },
        "calories": {"type": "number", "description": "Estimated total kcal."},
        "protein": {"type": "number", "description": "Grams of protein."},
        "carbohydrates": {"type": "number", "description": "Grams of carbohydrates."},
        "fat": {"type": "number", "description": "Grams of fat."},
        "serving_size": {
            "type": "string",
            "description": "Analyzed portion, e.g. '100g', '1 cup', '1 plate'.",
        },
    },
    "required": [
        "item_name",
        "calories",
        "protein",
        "carbohydrates",
        "fat",
        "serving_size",
    ],
    "additionalProperties": False,
}

_RECIPE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "ingredients": {"type": "array", "items": {"type": "string"}},
        "instructions": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["name", "ingredients", "instructions"],
    "additionalProperties": False,
}

MEAL_PLAN_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "daily_calorie_goal": {
            "type": "number",
            "description": "Total daily calorie target for the plan.",
        },
        "meals": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "meal_type": {
                        "type": "string",
                        "description": "e.g. 'Breakfast', 'Lunch', 'Dinner', 'Snack'.",
                    },
                    "description": {"type": "string"},
                    "recipes": {"type": "array", "items": _RECIPE_SCHEMA},
                    "calories": {"type": "number"},
                    "protein": {"type": "number"},
                    "carbohydrates": {"type": "number"},
                    "fat": {"type": "number"},
                },
                "required": [
                    "meal_type",
                    "description",
                    "recipes",
                    "calories",
                    "protein",
                    "carbohydrates",
                    "fat",
                ],
                "additionalProperties": False,
            },
        },
    },
    "required": ["daily_calorie_goal", "meals"],
    "additionalProperties": False,
}


class AIClient(Protocol):
    """Interface for structured LLM generation."""

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema: dict[str, object],
        schema_name: str,
        prompt: str,
    ) -> dict[str, object]:
        """Return a JSON object matching the schema."""


@dataclass
class NutritionGateway:
    """Builds prompts, calls the AI client and validates its output."""

    client: AIClient
    model: str
    reasoning_effort: str | None
    store: bool
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def analyze_food(self, description: str) -> NutritionEstimate:
        """Estimate nutrition for a free-text food description."""
        prompt = (
            "Analyze the following food entry and provide its nutrition "
            f'information. Entry: "{description}"'
        )
        try:
            raw = await self._call_with_retry(
                prompt, FOOD_ANALYSIS_SCHEMA, "food_analysis"
            )
            return NutritionEstimate.model_validate(raw)
        except Exception as exc:
            _logger.exception("Food analysis failed: %s", description)
            raise AnalysisError(
                "Could not analyze the food. Please try again."
            ) from exc

    async def generate_meal_plan(self, profile: Profile) -> MealPlan:
        """Generate a one-day plan with exactly ``profile.num_meals`` meals."""
        try:
            raw = await self._call_with_retry(
                build_plan_prompt(profile), MEAL_PLAN_SCHEMA, "meal_plan"
            )
            plan = MealPlan.model_validate(raw)
        except Exception as exc:
            _logger.exception("Meal plan generation failed")
            raise PlanGenerationError(
                "Could not generate the meal plan. Please try again."
            ) from exc
        if len(plan.meals) != profile.num_meals:
            _logger.warning(
                "Meal plan has %s meals, expected %s",
                len(plan.meals),
                profile.num_meals,
            )
            raise PlanGenerationError(
                f"The plan must contain exactly {profile.num_meals} meals."
            )
        return plan

    async def _call_with_retry(
        self, prompt: str, schema: dict[str, object], schema_name: str
    ) -> dict[str, object]:
        return await _retry(
            lambda: self.client.generate(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                schema=schema,
                schema_name=schema_name,
                prompt=prompt,
            ),
            action=schema_name,
            attempts=self.retry_attempts,
            delay_seconds=self.retry_delay_seconds,
        )


async def _retry(
    func: "Callable[[], Awaitable[dict[str, object]]]",
    *,
    action: str,
    attempts: int,
    delay_seconds: float,
) -> dict[str, object]:
    """Call an async function, retrying a fixed number of times."""
    attempt = 0
    while True:
        try:
            return await func()
        except Exception as exc:
            attempt += 1
            _logger.warning(
                "AI %s failed (attempt %s/%s): %s",
                action,
                attempt,
                attempts + 1,
                exc,
            )
            if attempt > attempts:
                raise
            await asyncio.sleep(delay_seconds)


def build_plan_prompt(profile: Profile) -> str:
    """Render every profile field into the meal plan request."""
    return f"""
Create a one-day meal plan for the following user profile:
- Age: {profile.age}
- Sex: {SEX_LABELS[profile.sex]}
- Height: {_format_number(profile.height)} cm
- Weight: {_format_number(profile.weight)} kg
- Activity level: {ACTIVITY_LEVEL_LABELS[profile.activity_level]}
- Goal: {GOAL_LABELS[profile.goal]}
- Meals per day: {profile.num_meals}
- General dietary restrictions: {_or_sentinel(profile.dietary_restrictions)}
- Intolerances: {_or_sentinel(profile.intolerances)}
- Favorite foods: {_or_sentinel(profile.favorite_foods, NO_PREFERENCE_SENTINEL)}
- Foods to avoid: {_or_sentinel(profile.disliked_foods)}

The plan must contain exactly {profile.num_meals} meals spread across the day \
(e.g. Breakfast, Lunch, Dinner).
Distribute calories and macronutrients across the meals to reach the user's \
goal in a healthy way.
Base recipes on the foods the user likes and strictly avoid the ones they do not.
Respect the intolerances and restrictions.
Offer variety and detailed healthy recipes (ingredients and preparation steps).
Return the answer as JSON.
""".strip()


def _or_sentinel(value: str, sentinel: str = NONE_SENTINEL) -> str:
    cleaned = value.strip()
    return cleaned or sentinel


def _format_number(value: float) -> str:
    """Format a number without a trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
