"""Supabase implementation for reading patient context."""

from dataclasses import dataclass

from supabase import Client

from ayurdiet.domain.diet_plans import MessMenu, PatientProfile, VitalsSnapshot
from ayurdiet.services.patients import PatientRepository

_PROFILE_FIELDS = {
    "id",
    "name",
    "age",
    "gender",
    "dosha_type",
    "conditions",
    "allergies",
    "dietary_preference",
    "created_at",
    "updated_at",
}
_VITALS_FIELDS = {
    "id",
    "patient_id",
    "recorded_at",
    "weight_kg",
    "height_cm",
    "blood_pressure",
    "heart_rate",
    "blood_sugar",
    "notes",
}


@dataclass
class SupabasePatientRepository(PatientRepository):
    """Supabase-backed read-only repository for patients, vitals and menus."""

    client: Client

    def get_profile(self, patient_id: str) -> PatientProfile | None:
        """Return the patient's profile, if present."""
        response = (
            self.client.table("patients")
            .select("*")
            .eq("id", patient_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def get_latest_vitals(self, patient_id: str) -> VitalsSnapshot | None:
        """Return the most recent vitals row for a patient."""
        response = (
            self.client.table("vitals")
            .select("*")
            .eq("patient_id", patient_id)
            .order("recorded_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_vitals(response.data[0])

    def get_mess_menu(self, menu_id: str | None = None) -> MessMenu | None:
        """Return a menu by id, or the newest active menu."""
        query = self.client.table("mess_menus").select("*")
        if menu_id:
            query = query.eq("id", menu_id)
        else:
            query = query.eq("is_active", True).order("created_at", desc=True)
        response = query.limit(1).execute()
        if not response.data:
            return None
        return _parse_menu(response.data[0])


def _parse_profile(row: dict[str, object]) -> PatientProfile:
    """Parse a patient row into a domain model."""
    age = row.get("age")
    return PatientProfile(
        name=row.get("name"),
        age=int(age) if age is not None else None,
        gender=row.get("gender"),
        dosha_type=row.get("dosha_type"),
        conditions=tuple(row.get("conditions") or ()),
        allergies=tuple(row.get("allergies") or ()),
        dietary_preference=row.get("dietary_preference"),
        extra={
            key: value
            for key, value in row.items()
            if key not in _PROFILE_FIELDS and value is not None
        },
    )


def _parse_vitals(row: dict[str, object]) -> VitalsSnapshot:
    """Parse a vitals row into a domain model."""
    return VitalsSnapshot(
        weight_kg=_optional_float(row.get("weight_kg")),
        height_cm=_optional_float(row.get("height_cm")),
        blood_pressure=row.get("blood_pressure"),
        heart_rate=_optional_int(row.get("heart_rate")),
        blood_sugar=_optional_float(row.get("blood_sugar")),
        notes=row.get("notes"),
        extra={
            key: value
            for key, value in row.items()
            if key not in _VITALS_FIELDS and value is not None
        },
    )


def _parse_menu(row: dict[str, object]) -> MessMenu:
    """Parse a menu row whose ``meals`` column maps meal names to items."""
    meals_raw = row.get("meals") or {}
    meals = {
        str(meal): tuple(str(item) for item in items or ())
        for meal, items in meals_raw.items()
    }
    return MessMenu(meals=meals, notes=row.get("notes"))


def _optional_float(value: object) -> float | None:
    return float(value) if value is not None else None


def _optional_int(value: object) -> int | None:
    return int(value) if value is not None else None
