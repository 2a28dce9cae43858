"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from nutrition_planner.config import Settings
from nutrition_planner.domain.profile import ActivityLevel, Goal, Profile, Sex
from nutrition_planner.services.gateway import AIClient, NutritionGateway
from nutrition_planner.services.session import SessionService
from nutrition_planner.services.state import SessionState, StateService, StateStore

FIXED_NOW = datetime(2024, 3, 14, 12, 30, tzinfo=UTC)


def food_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "item_name": "Grilled chicken breast",
        "calories": 165.0,
        "protein": 31.0,
        "carbohydrates": 0.0,
        "fat": 3.6,
        "serving_size": "100g",
    }
    payload.update(overrides)
    return payload


def meal_plan_payload(num_meals: int) -> dict[str, object]:
    return {
        "daily_calorie_goal": 2300,
        "meals": [
            {
                "meal_type": f"Meal {index + 1}",
                "description": "Oats with banana",
                "recipes": [
                    {
                        "name": "Overnight oats",
                        "ingredients": ["60g oats", "1 banana", "200ml milk"],
                        "instructions": ["Mix everything", "Chill overnight"],
                    }
                ],
                "calories": 450,
                "protein": 20,
                "carbohydrates": 70,
                "fat": 9,
            }
            for index in range(num_meals)
        ],
    }


@dataclass
class FakeAIClient(AIClient):
    """Fake AI client returning queued payloads per schema name."""

    payloads: dict[str, dict[str, object]] = field(default_factory=dict)
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

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
        self.calls.append({"schema_name": schema_name, "prompt": prompt})
        if self.error is not None:
            raise self.error
        return self.payloads[schema_name]


@dataclass
class InMemoryStateStore(StateStore):
    """In-memory key-value store for tests."""

    values: dict[str, object] = field(default_factory=dict)
    fail_writes: bool = False
    fail_reads: bool = False

    def get(self, key: str) -> object | None:
        if self.fail_reads:
            raise OSError("storage unavailable")
        return self.values.get(key)

    def set(self, key: str, value: object) -> None:
        if self.fail_writes:
            raise OSError("storage unavailable")
        self.values[key] = value


def make_profile(**overrides: object) -> Profile:
    fields: dict[str, object] = {
        "name": "Alex",
        "age": 25,
        "sex": Sex.MALE,
        "height": 175,
        "weight": 70,
        "activity_level": ActivityLevel.LIGHT,
        "goal": Goal.MAINTAIN,
        "num_meals": 3,
    }
    fields.update(overrides)
    return Profile.model_validate(fields)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(openai_api_key="openai-key", data_dir=tmp_path / "state")


@pytest.fixture
def profile() -> Profile:
    return make_profile()


@pytest.fixture
def ai_client() -> FakeAIClient:
    return FakeAIClient(
        payloads={
            "food_analysis": food_payload(),
            "meal_plan": meal_plan_payload(3),
        }
    )


@pytest.fixture
def gateway(ai_client: FakeAIClient) -> NutritionGateway:
    return NutritionGateway(
        client=ai_client,
        model="gpt-5.2",
        reasoning_effort="low",
        store=False,
        retry_attempts=0,
    )


@pytest.fixture
def state_store() -> InMemoryStateStore:
    return InMemoryStateStore()


@pytest.fixture
def session_service(
    gateway: NutritionGateway, state_store: InMemoryStateStore
) -> SessionService:
    return SessionService(
        state=SessionState(),
        state_service=StateService(state_store),
        gateway=gateway,
        clock=lambda: FIXED_NOW,
    )

