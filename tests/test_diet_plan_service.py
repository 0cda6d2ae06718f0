"""Tests for diet plan generation."""

import asyncio
from dataclasses import dataclass
from datetime import date

import pytest

from ayurdiet.domain.diet_plans import DietPlanRequest, PolicyExcerpt
from ayurdiet.domain.errors import GenerationBackendError, GenerationContractViolation
from ayurdiet.services.diet_plans import (
    DietPlanService,
    build_diet_plan_prompt,
)
from ayurdiet.services.generation import GenerationGateway
from ayurdiet.services.policies import PolicySelector
from ayurdiet.services.prompts import NONE_AVAILABLE
from tests.conftest import (
    FakeGenerationClient,
    diet_plan_payload,
    make_request,
)

AUTUMN_DAY = date(2026, 10, 16)


@dataclass
class _SlowGenerationClient:
    delay: float

    async def generate(self, **_kwargs):  # type: ignore[no-untyped-def]
        await asyncio.sleep(self.delay)
        return diet_plan_payload()


@dataclass
class _BrokenPolicySelector(PolicySelector):
    def relevant_policies(
        self, request: DietPlanRequest, today: date | None = None
    ) -> list[PolicyExcerpt]:
        raise RuntimeError("corpus unavailable")


def test_generate_returns_plan_with_context(
    diet_plan_service: DietPlanService, generation_client: FakeGenerationClient
) -> None:
    generation_client.responses.append(diet_plan_payload())
    request = make_request(
        meals={"Breakfast": ("Poha", "Milk"), "Lunch": ("Rice", "Dal")}
    )

    result = asyncio.run(diet_plan_service.generate(request, today=AUTUMN_DAY))

    assert result.diet_chart == "Breakfast: warm oats"
    assert result.recommendations == ("Eat warm, freshly cooked meals",)
    assert result.warnings == ()
    assert [record.code for record in result.nutritional_data or ()] == [
        "B015",
        "L001",
        "A015",
    ]
    assert result.policy_compliance is not None
    assert result.policy_compliance.excerpt_ids == ("AYUSH/VATA/2023/001",)
    assert result.policy_compliance.notes == (
        "Plan generated against 1 guideline excerpt(s)"
    )
    call = generation_client.calls[0]
    assert call["schema_name"] == "diet_plan"
    assert call["model"] == "gpt-5.2"
    assert "Rice, raw, milled" in call["prompt"]
    assert "[AYUSH/VATA/2023/001]" in call["prompt"]


def test_empty_menu_still_produces_plan(
    diet_plan_service: DietPlanService, generation_client: FakeGenerationClient
) -> None:
    diet_plan_service.policy_selector = PolicySelector(corpus=())
    generation_client.responses.append(diet_plan_payload("Simple kitchari day"))

    result = asyncio.run(
        diet_plan_service.generate(make_request(dosha_type=None), today=AUTUMN_DAY)
    )

    assert result.diet_chart == "Simple kitchari day"
    assert result.nutritional_data == ()
    assert result.policy_compliance is not None
    assert result.policy_compliance.excerpt_ids == ()
    assert result.policy_compliance.notes.startswith("No guideline excerpts matched")
    prompt = generation_client.calls[0]["prompt"]
    assert prompt.count(NONE_AVAILABLE) == 3


def test_unmatched_menu_items_are_dropped(
    diet_plan_service: DietPlanService, generation_client: FakeGenerationClient
) -> None:
    generation_client.responses.append(diet_plan_payload())
    request = make_request(meals={"Dinner": ("Quinoa salad", "Ghee")})

    result = asyncio.run(diet_plan_service.generate(request, today=AUTUMN_DAY))

    assert [record.name for record in result.nutritional_data or ()] == ["Ghee"]


def test_nutrition_context_is_capped(
    diet_plan_service: DietPlanService, generation_client: FakeGenerationClient
) -> None:
    generation_client.responses.append(diet_plan_payload())
    diet_plan_service.max_nutrition_records = 2
    request = make_request(
        meals={"Lunch": ("Rice", "Dal", "Ghee", "Milk", "Wheat flour")}
    )

    result = asyncio.run(diet_plan_service.generate(request, today=AUTUMN_DAY))

    assert len(result.nutritional_data or ()) == 2


def test_policy_context_is_capped(
    diet_plan_service: DietPlanService, generation_client: FakeGenerationClient
) -> None:
    generation_client.responses.append(diet_plan_payload())
    diet_plan_service.max_policy_excerpts = 1
    request = make_request(conditions=("diabetes", "bloating"))

    result = asyncio.run(diet_plan_service.generate(request, today=AUTUMN_DAY))

    assert result.policy_compliance is not None
    assert result.policy_compliance.excerpt_ids == ("CCRAS/DIAB/2023/006",)


def test_policy_failure_is_skipped(
    diet_plan_service: DietPlanService, generation_client: FakeGenerationClient
) -> None:
    generation_client.responses.append(diet_plan_payload())
    diet_plan_service.policy_selector = _BrokenPolicySelector()

    result = asyncio.run(diet_plan_service.generate(make_request(), today=AUTUMN_DAY))

    assert result.policy_compliance is not None
    assert result.policy_compliance.excerpt_ids == ()


def test_store_failure_is_skipped(
    diet_plan_service: DietPlanService, generation_client: FakeGenerationClient
) -> None:
    generation_client.responses.append(diet_plan_payload())
    diet_plan_service.nutrition_service.store.close()
    request = make_request(meals={"Lunch": ("Rice",)})

    result = asyncio.run(diet_plan_service.generate(request, today=AUTUMN_DAY))

    assert result.nutritional_data == ()


def test_missing_diet_chart_is_contract_violation(
    diet_plan_service: DietPlanService, generation_client: FakeGenerationClient
) -> None:
    generation_client.responses.append({"recommendations": [], "warnings": []})

    with pytest.raises(GenerationContractViolation) as excinfo:
        asyncio.run(diet_plan_service.generate(make_request(), today=AUTUMN_DAY))

    assert excinfo.value.raw == {"recommendations": [], "warnings": []}


def test_blank_diet_chart_is_contract_violation(
    diet_plan_service: DietPlanService, generation_client: FakeGenerationClient
) -> None:
    generation_client.responses.append(diet_plan_payload("   "))

    with pytest.raises(GenerationContractViolation):
        asyncio.run(diet_plan_service.generate(make_request(), today=AUTUMN_DAY))


def test_backend_failure_raises_backend_error(
    diet_plan_service: DietPlanService, generation_client: FakeGenerationClient
) -> None:
    generation_client.responses.append(ConnectionError("network down"))

    with pytest.raises(GenerationBackendError):
        asyncio.run(diet_plan_service.generate(make_request(), today=AUTUMN_DAY))


def test_backend_timeout_raises_backend_error(
    diet_plan_service: DietPlanService, gateway: GenerationGateway
) -> None:
    gateway.client = _SlowGenerationClient(delay=1.0)
    gateway.timeout_seconds = 0.01

    with pytest.raises(GenerationBackendError):
        asyncio.run(diet_plan_service.generate(make_request(), today=AUTUMN_DAY))


def test_prompt_includes_profile_extras_and_menu() -> None:
    request = make_request(meals={"Breakfast": ("Idli",)})

    prompt = build_diet_plan_prompt(request, [], [])

    assert '"dosha_type": "Vata"' in prompt
    assert "Breakfast: Idli" in prompt
    assert request.ayurvedic_principles in prompt


def test_cancellation_propagates_to_caller(
    diet_plan_service: DietPlanService, gateway: GenerationGateway
) -> None:
    gateway.client = _SlowGenerationClient(delay=5.0)

    async def run() -> None:
        task = asyncio.create_task(
            diet_plan_service.generate(make_request(), today=AUTUMN_DAY)
        )
        await asyncio.sleep(0.05)
        task.cancel()
        await task

    with pytest.raises(asyncio.CancelledError):
        asyncio.run(run())
