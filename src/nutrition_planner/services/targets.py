"""Daily calorie and macro targets from a profile.

BMR uses the Mifflin-St Jeor equation, scaled by a fixed activity multiplier
to estimate TDEE, then shifted by the goal's calorie adjustment. Macro gram
targets are independent shares of the calorie goal.
"""

from nutrition_planner.domain.dashboard import MacroTargets
from nutrition_planner.domain.profile import ActivityLevel, Goal, Profile, Sex

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.EXTRA_ACTIVE: 1.9,
}

GOAL_CALORIE_ADJUSTMENTS: dict[Goal, float] = {
    Goal.LOSE: -500.0,
    Goal.MAINTAIN: 0.0,
    Goal.GAIN: 500.0,
}

_SEX_CONSTANTS: dict[Sex, float] = {
    Sex.MALE: 5.0,
    Sex.FEMALE: -161.0,
}

PROTEIN_SHARE = 0.30
CARB_SHARE = 0.40
FAT_SHARE = 0.30

KCAL_PER_GRAM_PROTEIN = 4.0
KCAL_PER_GRAM_CARB = 4.0
KCAL_PER_GRAM_FAT = 9.0


def basal_metabolic_rate(profile: Profile) -> float:
    """Return the Mifflin-St Jeor BMR in kcal/day."""
    return (
        10 * profile.weight
        + 6.25 * profile.height
        - 5 * profile.age
        + _SEX_CONSTANTS[profile.sex]
    )


def total_daily_energy_expenditure(profile: Profile) -> float:
    """Return BMR scaled by the profile's activity multiplier."""
    return basal_metabolic_rate(profile) * ACTIVITY_MULTIPLIERS[profile.activity_level]


def compute_targets(profile: Profile) -> MacroTargets:
    """Compute the daily calorie goal and macro gram targets."""
    calorie_goal = (
        total_daily_energy_expenditure(profile) + GOAL_CALORIE_ADJUSTMENTS[profile.goal]
    )
    return MacroTargets(
        calorie_goal=calorie_goal,
        protein_grams_goal=calorie_goal * PROTEIN_SHARE / KCAL_PER_GRAM_PROTEIN,
        carb_grams_goal=calorie_goal * CARB_SHARE / KCAL_PER_GRAM_CARB,
        fat_grams_goal=calorie_goal * FAT_SHARE / KCAL_PER_GRAM_FAT,
    )
