"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrition_planner.adapters.json_file_state_store import JsonFileStateStore
from nutrition_planner.adapters.openai_ai_client import OpenAIStructuredClient
from nutrition_planner.adapters.supabase_state_store import SupabaseStateStore
from nutrition_planner.app_logging import configure_logging
from nutrition_planner.config import Settings
from nutrition_planner.services.custom_plans import CustomPlanService
from nutrition_planner.services.gateway import NutritionGateway
from nutrition_planner.services.session import SessionService
from nutrition_planner.services.state import StateService, StateStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    gateway: NutritionGateway
    state_service: StateService
    session_service: SessionService
    custom_plan_service: CustomPlanService
    close_resources: Callable[[], Awaitable[None]]


def build_state_store(settings: Settings) -> StateStore:
    """Create the configured key-value store."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase storage requires URL and service key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseStateStore(client)
    return JsonFileStateStore(settings.data_dir)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    configure_logging()
    resolved_settings = settings or Settings()
    ai_client = OpenAIStructuredClient.create(
        api_key=resolved_settings.openai_api_key,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
    )
    gateway = NutritionGateway(
        client=ai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
        retry_attempts=resolved_settings.ai_retry_attempts,
    )
    state_service = StateService(build_state_store(resolved_settings))
    session_service = SessionService(
        state=state_service.load(),
        state_service=state_service,
        gateway=gateway,
        timezone_name=resolved_settings.timezone,
        demo_weight_trend=resolved_settings.demo_weight_trend,
    )
    custom_plan_service = CustomPlanService(gateway)

    async def close_resources() -> None:
        await ai_client.close()

    return AppContainer(
        settings=resolved_settings,
        gateway=gateway,
        state_service=state_service,
        session_service=session_service,
        custom_plan_service=custom_plan_service,
        close_resources=close_resources,
    )
