"""Meal plan models."""

from pydantic import BaseModel, Field

from nutrition_planner.domain.food_log import NutritionEstimate


class Recipe(BaseModel):
    """Recipe suggested for a planned meal."""

    name: str
    ingredients: list[str]
    instructions: list[str]


class PlannedMeal(BaseModel):
    """Single meal of a generated plan."""

    meal_type: str
    description: str
    recipes: list[Recipe]
    calories: float = Field(ge=0.0)
    protein: float = Field(ge=0.0)
    carbohydrates: float = Field(ge=0.0)
    fat: float = Field(ge=0.0)


class MealPlan(BaseModel):
    """Full-day meal plan returned by the AI gateway."""

    daily_calorie_goal: float = Field(ge=0.0)
    meals: list[PlannedMeal]


class AnalyzedFoodItem(NutritionEstimate):
    """Nutrition estimate for a weighed portion in a custom meal."""

    grams: float = Field(gt=0.0)


class CustomMeal(BaseModel):
    """Manually assembled meal."""

    name: str
    items: list[AnalyzedFoodItem] = Field(default_factory=list)
