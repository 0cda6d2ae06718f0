"""Diet plans built from stored patient context."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from ayurdiet.api.schemas import StoredPatientDietBody
from ayurdiet.api.serialization import diet_plan_payload

if TYPE_CHECKING:
    from ayurdiet.containers import AppContainer

router = APIRouter(prefix="/api/patients", tags=["patients"])


@router.post("/{patient_id}/diet-plan")
async def stored_patient_diet_plan(
    patient_id: str, body: StoredPatientDietBody, request: Request
) -> dict[str, object]:
    """Generate a diet plan from the patient's stored profile, vitals and menu."""
    container: AppContainer = request.app.state.container
    diet_request = await asyncio.to_thread(
        container.patient_context_service.build_request,
        patient_id,
        menu_id=body.menu_id,
        ayurvedic_principles=body.ayurvedic_principles,
    )
    result = await container.diet_plan_service.generate(diet_request)
    return {"data": diet_plan_payload(result)}
