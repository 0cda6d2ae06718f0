"""Assembly of diet plan requests from stored patient context."""

from dataclasses import dataclass
from typing import Protocol

from ayurdiet.domain.diet_plans import (
    DietPlanRequest,
    MessMenu,
    PatientProfile,
    VitalsSnapshot,
)
from ayurdiet.domain.errors import PatientNotFound


class PatientRepository(Protocol):
    """Read-only access to stored patient context."""

    def get_profile(self, patient_id: str) -> PatientProfile | None:
        """Return the patient's profile, if present."""

    def get_latest_vitals(self, patient_id: str) -> VitalsSnapshot | None:
        """Return the most recent vitals for a patient, if any."""

    def get_mess_menu(self, menu_id: str | None = None) -> MessMenu | None:
        """Return a menu by id, or the newest active menu."""


@dataclass
class PatientContextService:
    """Builds a ``DietPlanRequest`` for a stored patient."""

    repository: PatientRepository

    def build_request(
        self,
        patient_id: str,
        menu_id: str | None = None,
        ayurvedic_principles: str | None = None,
    ) -> DietPlanRequest:
        """Load profile, latest vitals and a menu into a request."""
        profile = self.repository.get_profile(patient_id)
        if profile is None:
            raise PatientNotFound(f"Patient {patient_id} not found")
        vitals = self.repository.get_latest_vitals(patient_id) or VitalsSnapshot()
        menu = self.repository.get_mess_menu(menu_id) or MessMenu()
        principles = ayurvedic_principles or _default_principles(profile)
        return DietPlanRequest(
            profile=profile,
            vitals=vitals,
            mess_menu=menu,
            ayurvedic_principles=principles,
        )


def _default_principles(profile: PatientProfile) -> str:
    if profile.dosha_type:
        return f"Balance {profile.dosha_type} dosha using general Ayurvedic principles"
    return "General Ayurvedic principles"
