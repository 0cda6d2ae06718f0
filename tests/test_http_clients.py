"""Tests for HTTP-based adapters."""

import asyncio
import base64
import json

import httpx
import pytest

from ayurdiet.adapters.google_speech_client import HttpxGoogleSpeechClient
from ayurdiet.adapters.openai_generation_client import OpenAIGenerationClient
from ayurdiet.adapters.weather_client import HttpxWeatherClient
from ayurdiet.domain.errors import GenerationContractViolation


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str) -> None:
        self.responses = _FakeResponses(output_text)


def _generate(  # type: ignore[no-untyped-def]
    client: OpenAIGenerationClient, reasoning_effort: str | None
):
    return client.generate(
        model="gpt-5.2",
        reasoning_effort=reasoning_effort,
        store=False,
        schema_name="diet_plan",
        schema={"type": "object"},
        instructions="You are an Ayurvedic dietitian.",
        prompt="Plan meals",
    )


def test_openai_generation_client_parses_output() -> None:
    fake = _FakeOpenAI(json.dumps({"dietChart": "Plan"}))
    client = OpenAIGenerationClient(client=fake)

    result = asyncio.run(_generate(client, "medium"))

    assert result == {"dietChart": "Plan"}
    payload = fake.responses.last_payload
    assert payload is not None
    assert payload["instructions"] == "You are an Ayurvedic dietitian."
    assert payload["text"]["format"]["name"] == "diet_plan"
    assert payload["text"]["format"]["strict"] is True
    assert payload["reasoning"] == {"effort": "medium"}
    assert payload["store"] is False


def test_openai_generation_client_omits_reasoning_when_unset() -> None:
    fake = _FakeOpenAI(json.dumps({"dietChart": "Plan"}))
    client = OpenAIGenerationClient(client=fake)

    asyncio.run(_generate(client, None))

    assert fake.responses.last_payload is not None
    assert "reasoning" not in fake.responses.last_payload


def test_openai_generation_client_rejects_non_json() -> None:
    client = OpenAIGenerationClient(client=_FakeOpenAI("Here is your plan!"))

    with pytest.raises(GenerationContractViolation) as excinfo:
        asyncio.run(_generate(client, None))

    assert excinfo.value.raw == "Here is your plan!"


def test_openai_generation_client_rejects_empty_output() -> None:
    client = OpenAIGenerationClient(client=_FakeOpenAI(""))

    with pytest.raises(RuntimeError):
        asyncio.run(_generate(client, None))


def test_google_speech_client_synthesize() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["key"] == "google-key"
        payload = json.loads(request.content.decode())
        assert payload["voice"] == {
            "languageCode": "en-US",
            "name": "en-US-Neural2-D",
        }
        assert payload["audioConfig"]["audioEncoding"] == "MP3"
        audio = base64.b64encode(b"mp3-bytes").decode()
        return httpx.Response(200, json={"audioContent": audio})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxGoogleSpeechClient(api_key="google-key", http_client=async_client)

    audio = asyncio.run(client.synthesize("Namaste", "en-US", "en-US-Neural2-D"))

    assert audio == b"mp3-bytes"


def test_google_speech_client_transcribe_joins_results() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content.decode())
        assert payload["config"]["encoding"] == "LINEAR16"
        assert payload["config"]["sampleRateHertz"] == 16000
        assert base64.b64decode(payload["audio"]["content"]) == b"pcm"
        return httpx.Response(
            200,
            json={
                "results": [
                    {"alternatives": [{"transcript": "what should I "}]},
                    {"alternatives": [{"transcript": "eat for dinner"}]},
                ]
            },
        )

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxGoogleSpeechClient(api_key="google-key", http_client=async_client)

    text = asyncio.run(client.transcribe(b"pcm", "en-IN"))

    assert text == "what should I eat for dinner"


def test_google_speech_client_raises_on_http_error() -> None:
    transport = httpx.MockTransport(lambda _request: httpx.Response(403))
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxGoogleSpeechClient(api_key="bad-key", http_client=async_client)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.synthesize("Namaste", "en-US", "en-US-Neural2-D"))


def test_weather_client_current() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/current.json"
        assert request.url.params["q"] == "18.52,73.85"
        assert request.url.params["aqi"] == "no"
        return httpx.Response(200, json={"location": {"name": "Pune"}})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxWeatherClient(
        api_key="weather-key",
        base_url="https://api.weatherapi.com/v1",
        http_client=async_client,
    )

    payload = asyncio.run(client.current("18.52,73.85"))

    assert payload == {"location": {"name": "Pune"}}
