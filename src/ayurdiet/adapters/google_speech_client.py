"""Google Cloud Text-to-Speech and Speech-to-Text REST client."""

import base64
from dataclasses import dataclass

import httpx

from ayurdiet.services.speech import SpeechClient

TTS_URL = "https://texttospeech.googleapis.com/v1/text:synthesize"
STT_URL = "https://speech.googleapis.com/v1/speech:recognize"


@dataclass
class HttpxGoogleSpeechClient(SpeechClient):
    """Speech client using Google Cloud REST endpoints with an API key."""

    api_key: str
    http_client: httpx.AsyncClient
    tts_url: str = TTS_URL
    stt_url: str = STT_URL

    @classmethod
    def create(cls, api_key: str) -> "HttpxGoogleSpeechClient":
        """Create a speech client with a managed httpx session."""
        return cls(api_key=api_key, http_client=httpx.AsyncClient())

    async def synthesize(self, text: str, language_code: str, voice_name: str) -> bytes:
        """Synthesize MP3 audio for the text."""
        response = await self.http_client.post(
            self.tts_url,
            params={"key": self.api_key},
            json={
                "input": {"text": text},
                "voice": {"languageCode": language_code, "name": voice_name},
                "audioConfig": {"audioEncoding": "MP3"},
            },
            timeout=30,
        )
        response.raise_for_status()
        audio_content = response.json().get("audioContent") or ""
        return base64.b64decode(audio_content)

    async def transcribe(self, audio: bytes, language_code: str) -> str:
        """Transcribe 16 kHz LINEAR16 audio."""
        response = await self.http_client.post(
            self.stt_url,
            params={"key": self.api_key},
            json={
                "config": {
                    "encoding": "LINEAR16",
                    "sampleRateHertz": 16000,
                    "languageCode": language_code,
                },
                "audio": {"content": base64.b64encode(audio).decode("utf-8")},
            },
            timeout=30,
        )
        response.raise_for_status()
        transcripts = []
        for result in response.json().get("results", []):
            alternatives = result.get("alternatives") or [{}]
            transcript = alternatives[0].get("transcript")
            if transcript:
                transcripts.append(transcript.strip())
        return " ".join(transcripts)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
