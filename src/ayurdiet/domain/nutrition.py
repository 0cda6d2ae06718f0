"""Nutrition domain models."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

NUTRIENT_ALIASES: dict[str, str] = {
    "energy": "enerc",
    "protein": "protcnt",
    "fat": "fatce",
    "carbohydrate": "choavldf",
    "fiber": "fibtg",
    "calcium": "ca",
    "iron": "fe",
    "vitamin_c": "vitc",
}


@dataclass(frozen=True)
class NutritionRecord:
    """Composition record for a single food from the reference dataset.

    ``nutrients`` is stored as a read-only mapping and is left out of the hash.
    """

    code: str
    name: str
    scientific_name: str | None = None
    category: str | None = None
    nutrients: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "nutrients", MappingProxyType(dict(self.nutrients)))

    def nutrient(self, key: str) -> float | None:
        """Return a nutrient value by column name or friendly alias."""
        column = NUTRIENT_ALIASES.get(key, key)
        return self.nutrients.get(column)

    def summary(self) -> dict[str, object]:
        """Return a compact view with the headline nutrients for prompts."""
        return {
            "code": self.code,
            "name": self.name,
            "nutrients": {
                alias: self.nutrients[column]
                for alias, column in NUTRIENT_ALIASES.items()
                if column in self.nutrients
            },
        }
