"""Food alternative and meal timing advice flows."""

import asyncio
import json
import logging
from dataclasses import dataclass

from ayurdiet.domain.dosha import Dosha
from ayurdiet.domain.errors import NoAlternativesFound
from ayurdiet.domain.generation import (
    FoodAlternatives,
    FoodAlternativeSuggestion,
    MealTimingSchedule,
)
from ayurdiet.services import prompts
from ayurdiet.services.generation import GenerationGateway, validate_payload
from ayurdiet.services.nutrition import NutritionService

ALTERNATIVES_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "alternatives": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "reason": {"type": "string"},
                    "ayurvedicBenefit": {"type": "string"},
                },
                "required": ["name", "reason", "ayurvedicBenefit"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["alternatives"],
    "additionalProperties": False,
}

MEAL_TIMING_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "entries": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "meal": {"type": "string"},
                    "time": {"type": "string"},
                    "notes": {"type": "string"},
                },
                "required": ["meal", "time", "notes"],
                "additionalProperties": False,
            },
        },
        "rationale": {"type": "string"},
    },
    "required": ["entries", "rationale"],
    "additionalProperties": False,
}

_logger = logging.getLogger(__name__)


@dataclass
class AdvisorService:
    """Secondary generation flows sharing the diet plan gateway."""

    gateway: GenerationGateway
    nutrition_service: NutritionService
    max_alternatives: int = 5

    async def suggest_alternatives(
        self, food_name: str, reason: str
    ) -> list[FoodAlternativeSuggestion]:
        """Suggest replacements for a food.

        Raises ``NoAlternativesFound`` when the backend answers with none.
        """
        nutrients = await self._nutrient_profile(food_name)
        raw = await self.gateway.request(
            schema_name="food_alternatives",
            schema=ALTERNATIVES_SCHEMA,
            instructions=prompts.ALTERNATIVES_INSTRUCTIONS,
            prompt=prompts.ALTERNATIVES_TEMPLATE.format(
                food_name=food_name,
                reason=reason,
                nutrients=nutrients,
                count=f"3-{self.max_alternatives}",
            ),
        )
        result = validate_payload(
            FoodAlternatives, raw, schema_name="food_alternatives"
        )
        if not result.alternatives:
            raise NoAlternativesFound(food_name)
        return result.alternatives[: self.max_alternatives]

    async def generate_meal_timings(
        self, dosha_type: str, daily_routine: str
    ) -> MealTimingSchedule:
        """Plan meal timings; the dosha is validated before any backend call."""
        dosha = Dosha.parse(dosha_type)
        raw = await self.gateway.request(
            schema_name="meal_timings",
            schema=MEAL_TIMING_SCHEMA,
            instructions=prompts.MEAL_TIMING_INSTRUCTIONS,
            prompt=prompts.MEAL_TIMING_TEMPLATE.format(
                dosha=dosha.value, routine=daily_routine
            ),
        )
        return validate_payload(MealTimingSchedule, raw, schema_name="meal_timings")

    async def _nutrient_profile(self, food_name: str) -> str:
        try:
            record = await asyncio.to_thread(
                self.nutrition_service.first_match, food_name
            )
        except Exception:
            _logger.warning("Nutrient lookup failed for %r", food_name, exc_info=True)
            return prompts.NONE_AVAILABLE
        if record is None:
            return prompts.NONE_AVAILABLE
        return json.dumps(record.summary(), indent=2)
