"""Models for structured generation results."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

MEAL_TIME_PATTERN = (
    r"^\d{1,2}:\d{2}(\s?[AaPp][Mm])?(\s*(-|to)\s*\d{1,2}:\d{2}(\s?[AaPp][Mm])?)?$"
)


class DietPlanDraft(BaseModel):
    """Diet plan content returned by the generation backend."""

    model_config = ConfigDict(populate_by_name=True)

    diet_chart: NonEmptyStr = Field(alias="dietChart")
    recommendations: list[str]
    warnings: list[str]


class FoodAlternativeSuggestion(BaseModel):
    """A replacement food with its Ayurvedic rationale."""

    model_config = ConfigDict(populate_by_name=True)

    name: NonEmptyStr
    reason: NonEmptyStr
    ayurvedic_benefit: NonEmptyStr = Field(alias="ayurvedicBenefit")


class FoodAlternatives(BaseModel):
    """Structured output for alternative suggestions."""

    alternatives: list[FoodAlternativeSuggestion]


class MealTimingEntry(BaseModel):
    """Single meal slot in a timing schedule."""

    meal: NonEmptyStr
    time: Annotated[
        str,
        StringConstraints(strip_whitespace=True, pattern=MEAL_TIME_PATTERN),
    ]
    notes: str


class MealTimingSchedule(BaseModel):
    """Meal timings for a dosha and routine."""

    entries: list[MealTimingEntry] = Field(min_length=1)
    rationale: NonEmptyStr
