"""JSON payload builders for domain results."""

from ayurdiet.domain.diet_plans import DietPlanResult
from ayurdiet.domain.dosha import DoshaProfile
from ayurdiet.domain.nutrition import NutritionRecord
from ayurdiet.services.policy_corpus import PolicyEntry


def diet_plan_payload(result: DietPlanResult) -> dict[str, object]:
    """Render a diet plan with camelCase keys."""
    payload: dict[str, object] = {
        "dietChart": result.diet_chart,
        "recommendations": list(result.recommendations),
        "warnings": list(result.warnings),
    }
    if result.nutritional_data is not None:
        payload["nutritionalData"] = [
            record.summary() for record in result.nutritional_data
        ]
    if result.policy_compliance is not None:
        compliance = result.policy_compliance
        payload["policyCompliance"] = {
            "excerptIds": list(compliance.excerpt_ids),
            "topics": list(compliance.topics),
            "notes": compliance.notes,
        }
    return payload


def dosha_payload(profile: DoshaProfile) -> dict[str, object]:
    return {
        "primary": profile.primary.value,
        "secondary": profile.secondary.value if profile.secondary else None,
        "imbalanceScore": profile.imbalance_score,
        "recommendations": list(profile.recommendations),
    }


def food_payload(record: NutritionRecord) -> dict[str, object]:
    return {
        "code": record.code,
        "name": record.name,
        "scientific_name": record.scientific_name,
        "category": record.category,
        "nutrients": dict(record.nutrients),
    }


def policy_payload(entry: PolicyEntry) -> dict[str, object]:
    return {
        "id": entry.excerpt.id,
        "topic": entry.excerpt.topic,
        "text": entry.excerpt.text,
        "keywords": list(entry.keywords),
        "seasons": list(entry.seasons),
    }
