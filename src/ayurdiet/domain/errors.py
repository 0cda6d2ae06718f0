"""Error types raised by the diet engine."""


class AyurDietError(Exception):
    """Base class for engine errors."""


class StoreUnavailable(AyurDietError):
    """The nutrition reference dataset cannot be opened or was closed."""


class InvalidNutrientKey(AyurDietError):
    """A nutrient key is not a recognized nutrient column."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown nutrient key: {key!r}")
        self.key = key


class GenerationBackendError(AyurDietError):
    """The generation backend failed, timed out or was unreachable."""


class GenerationContractViolation(AyurDietError):
    """The generation backend returned data that breaks the output contract."""

    def __init__(self, message: str, raw: object = None) -> None:
        super().__init__(message)
        self.raw = raw


class InvalidDoshaType(AyurDietError):
    """A dosha name is not one of Vata, Pitta or Kapha."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid dosha type: {value!r}")
        self.value = value


class SpeechBackendError(AyurDietError):
    """Speech synthesis or recognition failed or returned nothing."""


class WeatherUnavailable(AyurDietError):
    """Weather data could not be retrieved."""


class PatientNotFound(AyurDietError):
    """No stored patient matches the requested id."""


class NoAlternativesFound(Exception):  # noqa: N818
    """The backend returned no alternatives.

    Not an engine failure: callers should treat it as zero results.
    """

    def __init__(self, food_name: str) -> None:
        super().__init__(f"No alternatives found for {food_name!r}")
        self.food_name = food_name
