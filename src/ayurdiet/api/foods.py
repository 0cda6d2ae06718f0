"""Nutrition reference lookup endpoints."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from ayurdiet.api.serialization import food_payload

if TYPE_CHECKING:
    from ayurdiet.containers import AppContainer

router = APIRouter(prefix="/api/foods", tags=["foods"])


@router.get("/search")
async def search_foods(
    request: Request, name: str = Query(min_length=1)
) -> dict[str, object]:
    """Find foods whose name contains the query, case-insensitively."""
    container: AppContainer = request.app.state.container
    records = await asyncio.to_thread(container.nutrition_store.find_by_name, name)
    return {"data": [food_payload(record) for record in records]}


@router.get("/nutrient")
async def foods_by_nutrient(
    request: Request,
    key: str,
    minimum: float = Query(alias="min"),
    maximum: float = Query(alias="max"),
) -> dict[str, object]:
    """Find foods with a nutrient value inside an inclusive range."""
    container: AppContainer = request.app.state.container
    records = await asyncio.to_thread(
        container.nutrition_store.find_by_nutrient_range, key, minimum, maximum
    )
    return {"data": [food_payload(record) for record in records]}


@router.get("/{code}")
async def food_detail(code: str, request: Request) -> dict[str, object]:
    """Return a single food by its dataset code."""
    container: AppContainer = request.app.state.container
    record = await asyncio.to_thread(container.nutrition_store.find_by_code, code)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"data": food_payload(record)}
