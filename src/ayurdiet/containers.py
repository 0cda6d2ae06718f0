"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from ayurdiet.adapters.google_speech_client import HttpxGoogleSpeechClient
from ayurdiet.adapters.openai_generation_client import OpenAIGenerationClient
from ayurdiet.adapters.sqlite_nutrition_store import SqliteNutritionStore
from ayurdiet.adapters.supabase_patient_repository import SupabasePatientRepository
from ayurdiet.adapters.weather_client import HttpxWeatherClient
from ayurdiet.config import Settings
from ayurdiet.services.advisors import AdvisorService
from ayurdiet.services.diet_plans import DietPlanService
from ayurdiet.services.dosha import DoshaClassifier
from ayurdiet.services.food_names import FoodNameExtractor
from ayurdiet.services.generation import GenerationGateway
from ayurdiet.services.nutrition import NutritionService, NutritionStore
from ayurdiet.services.patients import PatientContextService
from ayurdiet.services.policies import PolicySelector
from ayurdiet.services.speech import SpeechService
from ayurdiet.services.weather import WeatherService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_store: NutritionStore
    dosha_classifier: DoshaClassifier
    diet_plan_service: DietPlanService
    advisor_service: AdvisorService
    patient_context_service: PatientContextService
    speech_service: SpeechService
    weather_service: WeatherService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Opening the nutrition dataset happens here; ``StoreUnavailable`` is fatal.
    """
    resolved_settings = settings or Settings()
    nutrition_store = SqliteNutritionStore.open(resolved_settings.nutrition_db_path)
    nutrition_service = NutritionService(nutrition_store)
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    generation_client = OpenAIGenerationClient.create(
        resolved_settings.openai_api_key,
        max_retries=resolved_settings.openai_max_retries,
    )
    gateway = GenerationGateway(
        client=generation_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
        timeout_seconds=resolved_settings.generation_timeout_seconds,
    )
    diet_plan_service = DietPlanService(
        gateway=gateway,
        nutrition_service=nutrition_service,
        food_name_extractor=FoodNameExtractor(),
        policy_selector=PolicySelector(),
        max_nutrition_records=resolved_settings.max_nutrition_records,
        max_policy_excerpts=resolved_settings.max_policy_excerpts,
    )
    advisor_service = AdvisorService(
        gateway=gateway,
        nutrition_service=nutrition_service,
        max_alternatives=resolved_settings.max_alternatives,
    )
    speech_client = HttpxGoogleSpeechClient.create(resolved_settings.google_api_key)
    weather_client = HttpxWeatherClient.create(
        api_key=resolved_settings.weather_api_key,
        base_url=resolved_settings.weather_base_url,
    )

    async def close_resources() -> None:
        await speech_client.close()
        await weather_client.close()
        await generation_client.client.close()
        nutrition_store.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_store=nutrition_store,
        dosha_classifier=DoshaClassifier(
            secondary_threshold=resolved_settings.dosha_secondary_threshold
        ),
        diet_plan_service=diet_plan_service,
        advisor_service=advisor_service,
        patient_context_service=PatientContextService(
            SupabasePatientRepository(supabase_client)
        ),
        speech_service=SpeechService(speech_client),
        weather_service=WeatherService(weather_client),
        close_resources=close_resources,
    )
