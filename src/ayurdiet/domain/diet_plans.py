"""Domain models for diet plan requests and results."""

from dataclasses import dataclass, field

from ayurdiet.domain.nutrition import NutritionRecord


@dataclass(frozen=True)
class PatientProfile:
    """Minimal patient attributes; anything else travels in ``extra``."""

    name: str | None = None
    age: int | None = None
    gender: str | None = None
    dosha_type: str | None = None
    conditions: tuple[str, ...] = ()
    allergies: tuple[str, ...] = ()
    dietary_preference: str | None = None
    extra: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class VitalsSnapshot:
    """Latest recorded vitals for a patient."""

    weight_kg: float | None = None
    height_cm: float | None = None
    blood_pressure: str | None = None
    heart_rate: int | None = None
    blood_sugar: float | None = None
    notes: str | None = None
    extra: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class MessMenu:
    """Facility menu keyed by meal name."""

    meals: dict[str, tuple[str, ...]] = field(default_factory=dict)
    notes: str | None = None

    def as_text(self) -> str:
        """Render the menu as one line per meal."""
        lines = [f"{meal}: {', '.join(items)}" for meal, items in self.meals.items()]
        if self.notes:
            lines.append(self.notes)
        return "\n".join(lines)


@dataclass(frozen=True)
class DietPlanRequest:
    """Inputs for a diet plan generation call."""

    profile: PatientProfile
    vitals: VitalsSnapshot
    mess_menu: MessMenu
    ayurvedic_principles: str = "General Ayurvedic principles"


@dataclass(frozen=True)
class PolicyExcerpt:
    """A codified dietary guideline excerpt."""

    id: str
    topic: str
    text: str


@dataclass(frozen=True)
class PolicyCompliance:
    """Which guideline excerpts were consulted for a plan."""

    excerpt_ids: tuple[str, ...]
    topics: tuple[str, ...]
    notes: str


@dataclass(frozen=True)
class DietPlanResult:
    """Validated diet plan with the reference data used to build it."""

    diet_chart: str
    recommendations: tuple[str, ...]
    warnings: tuple[str, ...]
    nutritional_data: tuple[NutritionRecord, ...] | None = None
    policy_compliance: PolicyCompliance | None = None
