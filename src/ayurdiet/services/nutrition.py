"""Nutrition reference lookups."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from ayurdiet.domain.nutrition import NutritionRecord

_logger = logging.getLogger(__name__)


class NutritionStore(Protocol):
    """Read-only interface to the nutrition reference dataset."""

    def find_by_name(self, query: str) -> list[NutritionRecord]:
        """Return records whose name contains the query, case-insensitively."""

    def find_by_nutrient_range(
        self, nutrient_key: str, minimum: float, maximum: float
    ) -> list[NutritionRecord]:
        """Return records with a nutrient value within inclusive bounds."""

    def find_by_code(self, code: str) -> NutritionRecord | None:
        """Return the record with the exact code, if present."""

    def close(self) -> None:
        """Release the underlying storage handle."""


@dataclass
class NutritionService:
    """Resolves free-form food names to reference records."""

    store: NutritionStore

    def resolve(self, names: Iterable[str], limit: int) -> list[NutritionRecord]:
        """Resolve names to their first matching record.

        Names are processed in sorted order so results are stable. Names with no
        match are dropped without a warning. At most ``limit`` records are
        returned, one per code.
        """
        records: list[NutritionRecord] = []
        seen_codes: set[str] = set()
        for name in sorted(names):
            if len(records) >= limit:
                break
            matches = self.store.find_by_name(name)
            if not matches:
                _logger.debug("No nutrition match for %r", name)
                continue
            record = matches[0]
            if record.code in seen_codes:
                continue
            seen_codes.add(record.code)
            records.append(record)
        return records

    def first_match(self, name: str) -> NutritionRecord | None:
        """Return the first record matching a food name."""
        matches = self.store.find_by_name(name)
        return matches[0] if matches else None
