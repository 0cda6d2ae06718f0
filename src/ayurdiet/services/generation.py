"""Structured generation calls with timeout and contract validation."""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from ayurdiet.domain.errors import GenerationBackendError, GenerationContractViolation

_logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class GenerationClient(Protocol):
    """Interface for a structured-output generation backend."""

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema_name: str,
        schema: dict[str, object],
        instructions: str,
        prompt: str,
    ) -> dict[str, object]:
        """Return an object matching ``schema``."""


@dataclass
class GenerationGateway:
    """Invokes the backend once per call, bounded by a timeout.

    Retries are left to the backend client.
    """

    client: GenerationClient
    model: str
    reasoning_effort: str | None
    store: bool
    timeout_seconds: float

    async def request(
        self,
        *,
        schema_name: str,
        schema: dict[str, object],
        instructions: str,
        prompt: str,
    ) -> dict[str, object]:
        """Call the backend and return its raw structured payload."""
        try:
            return await asyncio.wait_for(
                self.client.generate(
                    model=self.model,
                    reasoning_effort=self.reasoning_effort,
                    store=self.store,
                    schema_name=schema_name,
                    schema=schema,
                    instructions=instructions,
                    prompt=prompt,
                ),
                timeout=self.timeout_seconds,
            )
        except GenerationContractViolation as exc:
            _logger.error("%s; raw=%s", exc, _dump(exc.raw))
            raise
        except TimeoutError as exc:
            _logger.warning(
                "Generation %s timed out after %ss", schema_name, self.timeout_seconds
            )
            raise GenerationBackendError(
                f"Generation backend timed out after {self.timeout_seconds}s"
            ) from exc
        except Exception as exc:
            _logger.warning("Generation %s failed: %s", schema_name, exc)
            raise GenerationBackendError("Generation backend call failed") from exc


def validate_payload(
    model_cls: type[ModelT], raw: object, *, schema_name: str
) -> ModelT:
    """Validate a backend payload, logging the raw response on failure."""
    try:
        return model_cls.model_validate(raw)
    except ValidationError as exc:
        _logger.error(
            "Generation %s violated its output contract: %s; raw=%s",
            schema_name,
            exc.errors(include_url=False),
            _dump(raw),
        )
        raise GenerationContractViolation(
            f"Generation {schema_name} response does not match its contract",
            raw=raw,
        ) from exc


def _dump(raw: object) -> str:
    try:
        return json.dumps(raw, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(raw)
