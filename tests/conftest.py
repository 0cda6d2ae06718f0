"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest
from sqlalchemy import Column, Float, MetaData, String, Table, create_engine, insert

from ayurdiet.adapters.sqlite_nutrition_store import SqliteNutritionStore
from ayurdiet.config import Settings
from ayurdiet.containers import AppContainer
from ayurdiet.domain.diet_plans import (
    DietPlanRequest,
    MessMenu,
    PatientProfile,
    VitalsSnapshot,
)
from ayurdiet.services.advisors import AdvisorService
from ayurdiet.services.diet_plans import DietPlanService
from ayurdiet.services.dosha import DoshaClassifier
from ayurdiet.services.food_names import FoodNameExtractor
from ayurdiet.services.generation import GenerationClient, GenerationGateway
from ayurdiet.services.nutrition import NutritionService
from ayurdiet.services.patients import PatientContextService, PatientRepository
from ayurdiet.services.policies import PolicySelector
from ayurdiet.services.speech import SpeechClient, SpeechService
from ayurdiet.services.weather import WeatherClient, WeatherService

BOM_CODE = "\ufeffcode"

IFCT_ROWS: list[dict[str, object]] = [
    {
        "code": "A015",
        "name": "Rice, raw, milled",
        "scie": "Oryza sativa",
        "grup": "Cereals and Millets",
        "enerc": 1491.0,
        "protcnt": 7.94,
        "fatce": 0.52,
        "choavldf": 78.24,
        "fibtg": 2.81,
    },
    {
        "code": "A013",
        "name": "Rice, parboiled, milled",
        "scie": "Oryza sativa",
        "grup": "Cereals and Millets",
        "enerc": 1485.0,
        "protcnt": 7.81,
        "fatce": 0.55,
        "choavldf": 77.73,
        "fibtg": 3.74,
    },
    {
        "code": "A019",
        "name": "Wheat flour, atta",
        "scie": "Triticum aestivum",
        "grup": "Cereals and Millets",
        "enerc": 1340.0,
        "protcnt": 10.57,
        "fatce": 1.53,
        "choavldf": 64.17,
        "fibtg": 11.36,
    },
    {
        "code": "B015",
        "name": "Lentil dal",
        "scie": "Lens culinaris",
        "grup": "Grain Legumes",
        "enerc": 1283.0,
        "protcnt": 24.35,
        "fatce": 0.75,
        "choavldf": 48.82,
        "fibtg": 10.43,
    },
    {
        "code": "L001",
        "name": "Milk, whole, Cow",
        "scie": None,
        "grup": "Milk and Milk Products",
        "enerc": 301.0,
        "protcnt": 3.26,
        "fatce": 4.48,
        "choavldf": None,
        "fibtg": None,
    },
    {
        "code": "T002",
        "name": "Ghee",
        "scie": None,
        "grup": "Edible Oils and Fats",
        "enerc": 3699.0,
        "protcnt": 0.0,
        "fatce": 99.8,
        "choavldf": None,
        "fibtg": None,
    },
]


def build_ifct_database(path: Path) -> Path:
    """Write a small IFCT table whose code header carries a UTF-8 BOM."""
    engine = create_engine(f"sqlite:///{path}")
    metadata = MetaData()
    table = Table(
        "ifct",
        metadata,
        Column(BOM_CODE, String),
        Column("name", String),
        Column("scie", String),
        Column("grup", String),
        Column("enerc", Float),
        Column("protcnt", Float),
        Column("fatce", Float),
        Column("choavldf", Float),
        Column("fibtg", Float),
    )
    metadata.create_all(engine)
    with engine.begin() as connection:
        connection.execute(
            insert(table),
            [_with_bom_header(row) for row in IFCT_ROWS],
        )
    engine.dispose()
    return path


def _with_bom_header(row: dict[str, object]) -> dict[str, object]:
    return {(BOM_CODE if key == "code" else key): value for key, value in row.items()}


@dataclass
class FakeGenerationClient(GenerationClient):
    """Returns queued payloads, or raises queued exceptions, in order."""

    responses: list[object] = field(default_factory=list)
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate(self, **kwargs):  # type: ignore[no-untyped-def]
        self.calls.append(kwargs)
        if not self.responses:
            raise RuntimeError("No fake response queued")
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response  # type: ignore[return-value]


@dataclass
class FakeSpeechClient(SpeechClient):
    """Speech client returning fixed audio and transcripts."""

    audio: bytes = b"ID3fake-mp3"
    transcript: str = " hello there "
    synthesized: list[tuple[str, str, str]] = field(default_factory=list)
    transcribed: list[tuple[bytes, str]] = field(default_factory=list)

    async def synthesize(self, text: str, language_code: str, voice_name: str) -> bytes:
        self.synthesized.append((text, language_code, voice_name))
        return self.audio

    async def transcribe(self, audio: bytes, language_code: str) -> str:
        self.transcribed.append((audio, language_code))
        return self.transcript


@dataclass
class FakeWeatherClient(WeatherClient):
    """Weather client returning a WeatherAPI-shaped payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "location": {"name": "Pune"},
            "current": {
                "temp_c": 31.0,
                "humidity": 40,
                "condition": {"text": "Sunny"},
                "wind_kph": 18.0,
            },
        }
    )
    queries: list[str] = field(default_factory=list)

    async def current(self, query: str) -> dict[str, object]:
        self.queries.append(query)
        return self.payload


@dataclass
class InMemoryPatientRepository(PatientRepository):
    """In-memory patient repository for tests."""

    profiles: dict[str, PatientProfile] = field(default_factory=dict)
    vitals: dict[str, VitalsSnapshot] = field(default_factory=dict)
    menus: dict[str, MessMenu] = field(default_factory=dict)
    active_menu: MessMenu | None = None

    def get_profile(self, patient_id: str) -> PatientProfile | None:
        return self.profiles.get(patient_id)

    def get_latest_vitals(self, patient_id: str) -> VitalsSnapshot | None:
        return self.vitals.get(patient_id)

    def get_mess_menu(self, menu_id: str | None = None) -> MessMenu | None:
        if menu_id:
            return self.menus.get(menu_id)
        return self.active_menu


def diet_plan_payload(chart: str = "Breakfast: warm oats") -> dict[str, object]:
    return {
        "dietChart": chart,
        "recommendations": ["Eat warm, freshly cooked meals"],
        "warnings": [],
    }


def make_request(
    meals: dict[str, tuple[str, ...]] | None = None,
    dosha_type: str | None = "Vata",
    conditions: tuple[str, ...] = (),
) -> DietPlanRequest:
    return DietPlanRequest(
        profile=PatientProfile(
            name="Asha",
            age=34,
            dosha_type=dosha_type,
            conditions=conditions,
        ),
        vitals=VitalsSnapshot(weight_kg=58.0, height_cm=162.0),
        mess_menu=MessMenu(meals=meals or {}),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        openai_api_key="openai-key",
        google_api_key="google-key",
        weather_api_key="weather-key",
    )


@pytest.fixture
def ifct_path(tmp_path: Path) -> Path:
    return build_ifct_database(tmp_path / "ifct2017.db")


@pytest.fixture
def nutrition_store(ifct_path: Path):  # type: ignore[no-untyped-def]
    store = SqliteNutritionStore.open(ifct_path)
    yield store
    store.close()


@pytest.fixture
def generation_client() -> FakeGenerationClient:
    return FakeGenerationClient()


@pytest.fixture
def gateway(generation_client: FakeGenerationClient) -> GenerationGateway:
    return GenerationGateway(
        client=generation_client,
        model="gpt-5.2",
        reasoning_effort="medium",
        store=False,
        timeout_seconds=5.0,
    )


@pytest.fixture
def diet_plan_service(
    gateway: GenerationGateway, nutrition_store: SqliteNutritionStore
) -> DietPlanService:
    return DietPlanService(
        gateway=gateway,
        nutrition_service=NutritionService(nutrition_store),
        food_name_extractor=FoodNameExtractor(),
        policy_selector=PolicySelector(),
    )


@pytest.fixture
def advisor_service(
    gateway: GenerationGateway, nutrition_store: SqliteNutritionStore
) -> AdvisorService:
    return AdvisorService(
        gateway=gateway, nutrition_service=NutritionService(nutrition_store)
    )


@pytest.fixture
def patient_repository() -> InMemoryPatientRepository:
    return InMemoryPatientRepository()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    nutrition_store: SqliteNutritionStore,
    diet_plan_service: DietPlanService,
    advisor_service: AdvisorService,
    patient_repository: InMemoryPatientRepository,
) -> AppContainer:
    async def close_resources() -> None:
        nutrition_store.close()

    return AppContainer(
        settings=settings,
        nutrition_store=nutrition_store,
        dosha_classifier=DoshaClassifier(),
        diet_plan_service=diet_plan_service,
        advisor_service=advisor_service,
        patient_context_service=PatientContextService(patient_repository),
        speech_service=SpeechService(FakeSpeechClient()),
        weather_service=WeatherService(FakeWeatherClient()),
        close_resources=close_resources,
    )
