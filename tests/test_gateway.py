"""Tests for the AI nutrition gateway."""

import asyncio

import pytest

from nutrition_planner.domain.errors import AnalysisError, PlanGenerationError
from nutrition_planner.domain.profile import ActivityLevel, Goal, Sex
from nutrition_planner.services.gateway import NutritionGateway, build_plan_prompt
from tests.conftest import FakeAIClient, food_payload, make_profile, meal_plan_payload


def _gateway(client: FakeAIClient, retry_attempts: int = 0) -> NutritionGateway:
    return NutritionGateway(
        client=client,
        model="gpt-5.2",
        reasoning_effort=None,
        store=False,
        retry_attempts=retry_attempts,
        retry_delay_seconds=0,
    )


def test_analyze_food_returns_validated_estimate() -> None:
    client = FakeAIClient(payloads={"food_analysis": food_payload()})

    estimate = asyncio.run(_gateway(client).analyze_food("100g chicken breast"))

    assert estimate.item_name == "Grilled chicken breast"
    assert estimate.protein == 31.0
    assert '"100g chicken breast"' in client.calls[0]["prompt"]


def test_analyze_food_rejects_invalid_payload() -> None:
    client = FakeAIClient(payloads={"food_analysis": food_payload(calories=-10)})

    with pytest.raises(AnalysisError):
        asyncio.run(_gateway(client).analyze_food("mystery"))


def test_analyze_food_wraps_upstream_errors() -> None:
    client = FakeAIClient(error=RuntimeError("boom"))

    with pytest.raises(AnalysisError) as excinfo:
        asyncio.run(_gateway(client).analyze_food("apple"))

    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_gateway_retries_before_failing() -> None:
    client = FakeAIClient(error=RuntimeError("timeout"))

    with pytest.raises(AnalysisError):
        asyncio.run(_gateway(client, retry_attempts=2).analyze_food("apple"))

    assert len(client.calls) == 3


def test_generate_meal_plan_returns_requested_meal_count() -> None:
    client = FakeAIClient(payloads={"meal_plan": meal_plan_payload(3)})

    plan = asyncio.run(_gateway(client).generate_meal_plan(make_profile(num_meals=3)))

    assert len(plan.meals) == 3
    assert plan.meals[0].recipes[0].name == "Overnight oats"


def test_generate_meal_plan_rejects_wrong_meal_count() -> None:
    client = FakeAIClient(payloads={"meal_plan": meal_plan_payload(2)})

    with pytest.raises(PlanGenerationError):
        asyncio.run(_gateway(client).generate_meal_plan(make_profile(num_meals=3)))


def test_generate_meal_plan_rejects_malformed_payload() -> None:
    client = FakeAIClient(payloads={"meal_plan": {"meals": []}})

    with pytest.raises(PlanGenerationError):
        asyncio.run(_gateway(client).generate_meal_plan(make_profile()))


def test_plan_prompt_encodes_profile_fields() -> None:
    profile = make_profile(
        sex=Sex.FEMALE,
        height=162.5,
        weight=58,
        activity_level=ActivityLevel.MODERATE,
        goal=Goal.LOSE,
        num_meals=5,
        intolerances="lactose",
        favorite_foods="",
        disliked_foods="  ",
    )

    prompt = build_plan_prompt(profile)

    assert "- Age: 25" in prompt
    assert "- Sex: Female" in prompt
    assert "- Height: 162.5 cm" in prompt
    assert "- Weight: 58 kg" in prompt
    assert "Moderate exercise (3-5 days/week)" in prompt
    assert "- Goal: Lose weight" in prompt
    assert "- General dietary restrictions: none" in prompt
    assert "- Intolerances: lactose" in prompt
    assert "- Favorite foods: no specific preference" in prompt
    assert "- Foods to avoid: none" in prompt
    assert "exactly 5 meals" in prompt
