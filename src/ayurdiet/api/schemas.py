"""Pydantic models for API request bodies."""

from pydantic import BaseModel, ConfigDict, Field

from ayurdiet.domain.diet_plans import (
    DietPlanRequest,
    MessMenu,
    PatientProfile,
    VitalsSnapshot,
)


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def extras(self) -> dict[str, object]:
        """Fields not declared on the model, passed through as prompt text."""
        return dict(self.model_extra or {})


class PatientProfileBody(_Body):
    """Patient profile payload."""

    name: str | None = None
    age: int | None = None
    gender: str | None = None
    dosha_type: str | None = Field(default=None, alias="doshaType")
    conditions: list[str] = Field(default_factory=list)
    allergies: list[str] = Field(default_factory=list)
    dietary_preference: str | None = Field(default=None, alias="dietaryPreference")

    def to_domain(self) -> PatientProfile:
        return PatientProfile(
            name=self.name,
            age=self.age,
            gender=self.gender,
            dosha_type=self.dosha_type,
            conditions=tuple(self.conditions),
            allergies=tuple(self.allergies),
            dietary_preference=self.dietary_preference,
            extra=self.extras(),
        )


class VitalsBody(_Body):
    """Vitals payload."""

    weight_kg: float | None = Field(default=None, alias="weightKg")
    height_cm: float | None = Field(default=None, alias="heightCm")
    blood_pressure: str | None = Field(default=None, alias="bloodPressure")
    heart_rate: int | None = Field(default=None, alias="heartRate")
    blood_sugar: float | None = Field(default=None, alias="bloodSugar")
    notes: str | None = None

    def to_domain(self) -> VitalsSnapshot:
        return VitalsSnapshot(
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            blood_pressure=self.blood_pressure,
            heart_rate=self.heart_rate,
            blood_sugar=self.blood_sugar,
            notes=self.notes,
            extra=self.extras(),
        )


class MessMenuBody(BaseModel):
    """Menu payload keyed by meal name."""

    meals: dict[str, list[str]] = Field(default_factory=dict)
    notes: str | None = None

    def to_domain(self) -> MessMenu:
        return MessMenu(
            meals={meal: tuple(items) for meal, items in self.meals.items()},
            notes=self.notes,
        )


class GenerateDietBody(BaseModel):
    """Request body for diet plan generation."""

    model_config = ConfigDict(populate_by_name=True)

    patient_profile: PatientProfileBody = Field(alias="patientProfile")
    vitals: VitalsBody
    mess_menu: MessMenuBody = Field(alias="messMenu")
    ayurvedic_principles: str | None = Field(default=None, alias="ayurvedicPrinciples")

    def to_domain(self) -> DietPlanRequest:
        return DietPlanRequest(
            profile=self.patient_profile.to_domain(),
            vitals=self.vitals.to_domain(),
            mess_menu=self.mess_menu.to_domain(),
            ayurvedic_principles=(
                self.ayurvedic_principles or "General Ayurvedic principles"
            ),
        )


class StoredPatientDietBody(BaseModel):
    """Request body for generating a plan from stored patient context."""

    model_config = ConfigDict(populate_by_name=True)

    menu_id: str | None = Field(default=None, alias="menuId")
    ayurvedic_principles: str | None = Field(default=None, alias="ayurvedicPrinciples")


class AnalyzeDoshaBody(BaseModel):
    """Request body for dosha analysis."""

    symptoms: list[str] = Field(default_factory=list)
    characteristics: list[str] = Field(default_factory=list)
    preferences: list[str] = Field(default_factory=list)


class AlternativesBody(BaseModel):
    """Request body for food alternatives."""

    model_config = ConfigDict(populate_by_name=True)

    food_name: str = Field(alias="foodName", min_length=1)
    reason: str = Field(min_length=1)


class MealTimingsBody(BaseModel):
    """Request body for meal timings."""

    model_config = ConfigDict(populate_by_name=True)

    dosha_type: str = Field(alias="doshaType")
    daily_routine: str = Field(alias="dailyRoutine", min_length=1)


class TextToSpeechBody(BaseModel):
    """Request body for speech synthesis."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(min_length=1)
    language_code: str | None = Field(default=None, alias="languageCode")
    voice_name: str | None = Field(default=None, alias="voiceName")


class SpeechToTextBody(BaseModel):
    """Request body for transcription; ``audio`` is base64 encoded."""

    model_config = ConfigDict(populate_by_name=True)

    audio: str = Field(min_length=1)
    language_code: str | None = Field(default=None, alias="languageCode")
