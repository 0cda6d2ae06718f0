"""Read-only guideline corpus endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from ayurdiet.api.serialization import policy_payload
from ayurdiet.services.policy_corpus import POLICY_CORPUS_VERSION

if TYPE_CHECKING:
    from ayurdiet.containers import AppContainer

router = APIRouter(prefix="/api/policies", tags=["policies"])


@router.get("")
async def list_policies(
    request: Request,
    season: str | None = Query(default=None, pattern="^(spring|summer|autumn|winter)$"),
    keyword: str | None = Query(default=None, min_length=1),
) -> dict[str, object]:
    """List guideline excerpts, optionally narrowed to a season or keyword."""
    container: AppContainer = request.app.state.container
    selector = container.diet_plan_service.policy_selector
    entries = selector.entries(season=season, keyword=keyword)
    return {
        "version": POLICY_CORPUS_VERSION,
        "data": [policy_payload(entry) for entry in entries],
    }


@router.get("/{policy_id:path}")
async def policy_detail(policy_id: str, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    entry = container.diet_plan_service.policy_selector.find(policy_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"data": policy_payload(entry)}
