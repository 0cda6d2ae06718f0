"""Dosha domain models."""

from dataclasses import dataclass
from enum import Enum

from ayurdiet.domain.errors import InvalidDoshaType

IMBALANCE_SCORE_MAX = 10.0


class Dosha(str, Enum):
    """Ayurvedic constitutional categories, declared in tie-break priority order."""

    VATA = "Vata"
    PITTA = "Pitta"
    KAPHA = "Kapha"

    @classmethod
    def parse(cls, value: str) -> "Dosha":
        """Parse a dosha name case-insensitively."""
        cleaned = value.strip().lower() if isinstance(value, str) else ""
        for dosha in cls:
            if dosha.value.lower() == cleaned:
                return dosha
        raise InvalidDoshaType(value)


DOSHA_PRIORITY: tuple[Dosha, ...] = (Dosha.VATA, Dosha.PITTA, Dosha.KAPHA)


@dataclass(frozen=True)
class DoshaProfile:
    """Result of a dosha classification."""

    primary: Dosha
    secondary: Dosha | None
    imbalance_score: float
    recommendations: tuple[str, ...]

    def __post_init__(self) -> None:
        if self.secondary is not None and self.secondary == self.primary:
            raise ValueError("secondary dosha must differ from primary")
        if not 0.0 <= self.imbalance_score <= IMBALANCE_SCORE_MAX:
            raise ValueError(
                f"imbalance_score must be within 0-{IMBALANCE_SCORE_MAX:g}"
            )
