"""Manual meal plan assembly with per-item AI analysis."""

import math
from dataclasses import dataclass, field

from nutrition_planner.domain.errors import InvalidInputError
from nutrition_planner.domain.food_groups import FOOD_GROUPS
from nutrition_planner.domain.food_log import MacroTotals
from nutrition_planner.domain.plans import AnalyzedFoodItem, CustomMeal
from nutrition_planner.services.gateway import NutritionGateway


@dataclass
class CustomPlanService:
    """Holds the meals being assembled in the custom planner."""

    gateway: NutritionGateway
    meals: list[CustomMeal] = field(
        default_factory=lambda: [CustomMeal(name="Meal 1")]
    )

    @staticmethod
    def food_groups() -> dict[str, list[str]]:
        """Return the selectable foods by group."""
        return FOOD_GROUPS

    def add_meal(self) -> CustomMeal:
        """Append an empty meal named after its position."""
        meal = CustomMeal(name=f"Meal {len(self.meals) + 1}")
        self.meals.append(meal)
        return meal

    def remove_meal(self, meal_index: int) -> None:
        """Remove a meal by index."""
        self._meal_at(meal_index)
        del self.meals[meal_index]

    async def add_food(
        self, meal_index: int, food_name: str, grams: float
    ) -> AnalyzedFoodItem:
        """Analyze a weighed food and append it to a meal.

        Meals are left untouched when validation or analysis fails.
        """
        meal = self._meal_at(meal_index)
        if not math.isfinite(grams) or grams <= 0:
            raise InvalidInputError("Grams must be a positive number.")
        if not food_name.strip():
            raise InvalidInputError("Please choose a food.")
        estimate = await self.gateway.analyze_food(
            f"{_format_grams(grams)}g of {food_name.strip()}"
        )
        item = AnalyzedFoodItem(grams=grams, **estimate.model_dump())
        meal.items.append(item)
        return item

    def remove_food(self, meal_index: int, item_index: int) -> None:
        """Remove an item from a meal."""
        meal = self._meal_at(meal_index)
        if not 0 <= item_index < len(meal.items):
            raise InvalidInputError(f"No item at position {item_index}.")
        del meal.items[item_index]

    def totals(self) -> MacroTotals:
        """Return summed calories and macros across every meal."""
        items = [item for meal in self.meals for item in meal.items]
        return MacroTotals(
            calories=sum(item.calories for item in items),
            protein=sum(item.protein for item in items),
            carbohydrates=sum(item.carbohydrates for item in items),
            fat=sum(item.fat for item in items),
        )

    def _meal_at(self, meal_index: int) -> CustomMeal:
        if not 0 <= meal_index < len(self.meals):
            raise InvalidInputError(f"No meal at position {meal_index}.")
        return self.meals[meal_index]


def _format_grams(grams: float) -> str:
    if float(grams).is_integer():
        return str(int(grams))
    return str(grams)
