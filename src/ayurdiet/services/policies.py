"""Selection of dietary guideline excerpts relevant to a request."""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from ayurdiet.domain.diet_plans import DietPlanRequest, PolicyExcerpt
from ayurdiet.services.policy_corpus import POLICY_CORPUS, PolicyEntry

_logger = logging.getLogger(__name__)

SEASONS: tuple[str, ...] = ("spring", "summer", "autumn", "winter")

_SEASONS_BY_MONTH = {
    3: "spring",
    4: "spring",
    5: "spring",
    6: "summer",
    7: "summer",
    8: "summer",
    9: "autumn",
    10: "autumn",
    11: "autumn",
}


def season_for(day: date) -> str:
    """Return the season name used for guideline selection."""
    return _SEASONS_BY_MONTH.get(day.month, "winter")


@dataclass
class PolicySelector:
    """Keyword and season matching over the static guideline corpus."""

    corpus: Sequence[PolicyEntry] = POLICY_CORPUS

    def relevant_policies(
        self, request: DietPlanRequest, today: date | None = None
    ) -> list[PolicyExcerpt]:
        """Return excerpts matching the request or the season, in corpus order."""
        text = request_search_text(request)
        season = season_for(today or date.today())
        selected = [
            entry.excerpt
            for entry in self.corpus
            if season in entry.seasons
            or any(_contains(text, keyword) for keyword in entry.keywords)
        ]
        _logger.debug("Selected %s guideline excerpts for %s", len(selected), season)
        return selected

    def entries(
        self, season: str | None = None, keyword: str | None = None
    ) -> list[PolicyEntry]:
        """List corpus entries, optionally narrowed to a season or keyword text."""
        selected = list(self.corpus)
        if season:
            season = season.lower()
            selected = [entry for entry in selected if season in entry.seasons]
        if keyword:
            needle = keyword.strip().lower()
            selected = [entry for entry in selected if _mentions(entry, needle)]
        return selected

    def find(self, excerpt_id: str) -> PolicyEntry | None:
        return next(
            (entry for entry in self.corpus if entry.excerpt.id == excerpt_id), None
        )


def request_search_text(request: DietPlanRequest) -> str:
    """Flatten the searchable parts of a request into lower-cased text."""
    profile = request.profile
    vitals = request.vitals
    parts: list[object] = [
        profile.dosha_type,
        *profile.conditions,
        *profile.allergies,
        profile.dietary_preference,
        *profile.extra.values(),
        vitals.notes,
        *vitals.extra.values(),
        request.ayurvedic_principles,
    ]
    return " ".join(str(part) for part in parts if part).lower()


def _contains(text: str, keyword: str) -> bool:
    return re.search(rf"\b{re.escape(keyword)}\b", text) is not None


def _mentions(entry: PolicyEntry, needle: str) -> bool:
    if any(needle in keyword for keyword in entry.keywords):
        return True
    return needle in entry.excerpt.topic.lower()
