"""Pass-through speech synthesis and recognition."""

import logging
from dataclasses import dataclass
from typing import Protocol

from ayurdiet.domain.errors import SpeechBackendError

DEFAULT_LANGUAGE_CODE = "en-US"
DEFAULT_VOICE_NAME = "en-US-Neural2-D"

_logger = logging.getLogger(__name__)


class SpeechClient(Protocol):
    """Interface for speech backends."""

    async def synthesize(self, text: str, language_code: str, voice_name: str) -> bytes:
        """Return encoded audio for the text."""

    async def transcribe(self, audio: bytes, language_code: str) -> str:
        """Return the transcript of the audio."""


@dataclass
class SpeechService:
    """Forwards speech calls and rejects empty inputs or results."""

    client: SpeechClient

    async def text_to_speech(
        self,
        text: str,
        language_code: str | None = None,
        voice_name: str | None = None,
    ) -> bytes:
        """Synthesize speech for the text."""
        if not text or not text.strip():
            raise SpeechBackendError("Text to synthesize is empty")
        try:
            audio = await self.client.synthesize(
                text,
                language_code or DEFAULT_LANGUAGE_CODE,
                voice_name or DEFAULT_VOICE_NAME,
            )
        except Exception as exc:
            _logger.warning("Speech synthesis failed: %s", exc)
            raise SpeechBackendError("Failed to synthesize speech") from exc
        if not audio:
            raise SpeechBackendError("Speech synthesis returned no audio")
        return audio

    async def speech_to_text(
        self, audio: bytes, language_code: str | None = None
    ) -> str:
        """Transcribe audio to text."""
        if not audio:
            raise SpeechBackendError("Audio to transcribe is empty")
        try:
            transcript = await self.client.transcribe(
                audio, language_code or DEFAULT_LANGUAGE_CODE
            )
        except Exception as exc:
            _logger.warning("Speech transcription failed: %s", exc)
            raise SpeechBackendError("Failed to transcribe audio") from exc
        if not transcript or not transcript.strip():
            raise SpeechBackendError("Speech transcription returned no text")
        return transcript.strip()
