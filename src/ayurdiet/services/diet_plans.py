"""Diet plan synthesis from patient context, reference data and guidelines."""

import asyncio
import dataclasses
import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from ayurdiet.domain.diet_plans import (
    DietPlanRequest,
    DietPlanResult,
    PolicyCompliance,
    PolicyExcerpt,
)
from ayurdiet.domain.generation import DietPlanDraft
from ayurdiet.domain.nutrition import NutritionRecord
from ayurdiet.services import prompts
from ayurdiet.services.food_names import FoodNameExtractor
from ayurdiet.services.generation import GenerationGateway, validate_payload
from ayurdiet.services.nutrition import NutritionService
from ayurdiet.services.policies import PolicySelector

DIET_PLAN_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "dietChart": {"type": "string"},
        "recommendations": {"type": "array", "items": {"type": "string"}},
        "warnings": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["dietChart", "recommendations", "warnings"],
    "additionalProperties": False,
}

_logger = logging.getLogger(__name__)


@dataclass
class DietPlanService:
    """Builds a bounded generation context and validates the diet plan."""

    gateway: GenerationGateway
    nutrition_service: NutritionService
    food_name_extractor: FoodNameExtractor
    policy_selector: PolicySelector
    max_nutrition_records: int = 10
    max_policy_excerpts: int = 5

    async def generate(
        self, request: DietPlanRequest, today: date | None = None
    ) -> DietPlanResult:
        """Generate a diet plan for the request.

        Reference lookups that fail are logged and skipped. Backend failures
        raise ``GenerationBackendError`` and malformed responses raise
        ``GenerationContractViolation``.
        """
        records = await self._nutrition_context(request)
        excerpts = self._policy_context(request, today)
        raw = await self.gateway.request(
            schema_name="diet_plan",
            schema=DIET_PLAN_SCHEMA,
            instructions=prompts.DIET_PLAN_INSTRUCTIONS,
            prompt=build_diet_plan_prompt(request, records, excerpts),
        )
        draft = validate_payload(DietPlanDraft, raw, schema_name="diet_plan")
        _logger.info(
            "Generated diet plan with %s nutrition records and %s excerpts",
            len(records),
            len(excerpts),
        )
        return DietPlanResult(
            diet_chart=draft.diet_chart,
            recommendations=tuple(draft.recommendations),
            warnings=tuple(draft.warnings),
            nutritional_data=tuple(records),
            policy_compliance=_compliance(excerpts),
        )

    async def _nutrition_context(
        self, request: DietPlanRequest
    ) -> list[NutritionRecord]:
        try:
            names = self.food_name_extractor.extract(request.mess_menu.as_text())
            return await asyncio.to_thread(
                self.nutrition_service.resolve, names, self.max_nutrition_records
            )
        except Exception:
            _logger.warning(
                "Nutrition enrichment failed; continuing without it", exc_info=True
            )
            return []

    def _policy_context(
        self, request: DietPlanRequest, today: date | None
    ) -> list[PolicyExcerpt]:
        try:
            excerpts = self.policy_selector.relevant_policies(request, today)
        except Exception:
            _logger.warning(
                "Guideline selection failed; continuing without it", exc_info=True
            )
            return []
        return excerpts[: self.max_policy_excerpts]


def build_diet_plan_prompt(
    request: DietPlanRequest,
    records: Sequence[NutritionRecord],
    excerpts: Sequence[PolicyExcerpt],
) -> str:
    """Fill the diet plan template with the assembled context."""
    nutrition = (
        json.dumps([record.summary() for record in records], indent=2)
        if records
        else prompts.NONE_AVAILABLE
    )
    policies = (
        "\n".join(
            f"- [{excerpt.id}] {excerpt.topic}: {excerpt.text}" for excerpt in excerpts
        )
        if excerpts
        else prompts.NONE_AVAILABLE
    )
    return prompts.DIET_PLAN_TEMPLATE.format(
        profile=_to_json(request.profile),
        vitals=_to_json(request.vitals),
        mess_menu=request.mess_menu.as_text() or prompts.NONE_AVAILABLE,
        principles=request.ayurvedic_principles,
        nutrition=nutrition,
        policies=policies,
    )


def _to_json(value: object) -> str:
    """Serialize a dataclass for the prompt, dropping empty fields."""
    data = dataclasses.asdict(value)  # type: ignore[call-overload]
    extra = data.pop("extra", {}) or {}
    cleaned = {key: item for key, item in data.items() if item not in (None, (), [])}
    cleaned.update(extra)
    return json.dumps(cleaned, indent=2, default=str) if cleaned else "{}"


def _compliance(excerpts: Sequence[PolicyExcerpt]) -> PolicyCompliance:
    if excerpts:
        notes = f"Plan generated against {len(excerpts)} guideline excerpt(s)"
    else:
        notes = "No guideline excerpts matched; standard Ayurvedic principles applied"
    return PolicyCompliance(
        excerpt_ids=tuple(excerpt.id for excerpt in excerpts),
        topics=tuple(excerpt.topic for excerpt in excerpts),
        notes=notes,
    )
