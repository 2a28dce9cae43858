"""User profile domain models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Sex(StrEnum):
    """Biological sex used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(StrEnum):
    """Weekly activity level."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    EXTRA_ACTIVE = "extra_active"


class Goal(StrEnum):
    """Body-weight goal."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


SEX_LABELS: dict[Sex, str] = {
    Sex.MALE: "Male",
    Sex.FEMALE: "Female",
}

ACTIVITY_LEVEL_LABELS: dict[ActivityLevel, str] = {
    ActivityLevel.SEDENTARY: "Sedentary (little or no exercise)",
    ActivityLevel.LIGHT: "Light exercise (1-3 days/week)",
    ActivityLevel.MODERATE: "Moderate exercise (3-5 days/week)",
    ActivityLevel.ACTIVE: "Very active (6-7 days/week)",
    ActivityLevel.EXTRA_ACTIVE: "Extremely active (physical job and daily training)",
}

GOAL_LABELS: dict[Goal, str] = {
    Goal.LOSE: "Lose weight",
    Goal.MAINTAIN: "Maintain weight",
    Goal.GAIN: "Gain muscle",
}


class Profile(BaseModel):
    """Static attributes of the single app user."""

    model_config = ConfigDict(frozen=True)

    name: str
    age: int = Field(gt=0)
    sex: Sex
    height: float = Field(gt=0, description="Height in centimetres.")
    weight: float = Field(gt=0, description="Body weight in kilograms.")
    activity_level: ActivityLevel
    goal: Goal
    dietary_restrictions: str = ""
    num_meals: int = Field(default=3, ge=1, le=8)
    intolerances: str = ""
    favorite_foods: str = ""
    disliked_foods: str = ""
