"""Generation, dosha, speech and weather endpoints."""

from __future__ import annotations

import base64
import binascii
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import Response

from ayurdiet.api.schemas import (
    AlternativesBody,
    AnalyzeDoshaBody,
    GenerateDietBody,
    MealTimingsBody,
    SpeechToTextBody,
    TextToSpeechBody,
)
from ayurdiet.api.serialization import diet_plan_payload, dosha_payload
from ayurdiet.domain.errors import NoAlternativesFound

if TYPE_CHECKING:
    from ayurdiet.containers import AppContainer

router = APIRouter(prefix="/api/ai", tags=["ai"])


@router.post("/generate-diet")
async def generate_diet(body: GenerateDietBody, request: Request) -> dict[str, object]:
    """Generate a diet plan for an inline patient context."""
    container: AppContainer = request.app.state.container
    result = await container.diet_plan_service.generate(body.to_domain())
    return {"data": diet_plan_payload(result)}


@router.post("/analyze-dosha")
async def analyze_dosha(body: AnalyzeDoshaBody, request: Request) -> dict[str, object]:
    """Classify the dominant dosha from reported signals."""
    container: AppContainer = request.app.state.container
    profile = container.dosha_classifier.analyze(
        body.symptoms, body.characteristics, body.preferences
    )
    return {"data": dosha_payload(profile)}


@router.post("/suggest-alternatives")
async def suggest_alternatives(
    body: AlternativesBody, request: Request
) -> dict[str, object]:
    """Suggest replacement foods; an empty list when none are found."""
    container: AppContainer = request.app.state.container
    try:
        alternatives = await container.advisor_service.suggest_alternatives(
            body.food_name, body.reason
        )
    except NoAlternativesFound:
        return {"data": {"alternatives": []}}
    return {
        "data": {
            "alternatives": [
                alternative.model_dump(by_alias=True) for alternative in alternatives
            ]
        }
    }


@router.post("/generate-timings")
async def generate_timings(
    body: MealTimingsBody, request: Request
) -> dict[str, object]:
    """Plan meal timings for a dosha and daily routine."""
    container: AppContainer = request.app.state.container
    schedule = await container.advisor_service.generate_meal_timings(
        body.dosha_type, body.daily_routine
    )
    return {"data": schedule.model_dump()}


@router.post("/tts")
async def text_to_speech(body: TextToSpeechBody, request: Request) -> Response:
    """Synthesize speech and return MP3 audio."""
    container: AppContainer = request.app.state.container
    audio = await container.speech_service.text_to_speech(
        body.text, body.language_code, body.voice_name
    )
    return Response(content=audio, media_type="audio/mpeg")


@router.post("/stt")
async def speech_to_text(body: SpeechToTextBody, request: Request) -> dict[str, object]:
    """Transcribe base64 encoded LINEAR16 audio."""
    container: AppContainer = request.app.state.container
    try:
        audio = base64.b64decode(body.audio, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Audio must be base64 encoded",
        ) from exc
    text = await container.speech_service.speech_to_text(audio, body.language_code)
    return {"data": {"text": text}}


@router.get("/weather")
async def weather(
    request: Request,
    lat: float | None = None,
    lon: float | None = None,
    city: str | None = None,
) -> dict[str, object]:
    """Return current weather by coordinates or city name."""
    container: AppContainer = request.app.state.container
    if lat is not None and lon is not None:
        report = await container.weather_service.get_weather(lat, lon)
    elif city:
        report = await container.weather_service.get_weather_by_city(city)
    else:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Provide lat and lon or city",
        )
    return {
        "data": {
            "temperature": report.temperature_c,
            "humidity": report.humidity,
            "description": report.description,
            "windSpeed": report.wind_speed_ms,
            "location": report.location,
        }
    }
