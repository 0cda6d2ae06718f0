"""Rule-based dosha classification."""

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from ayurdiet.domain.dosha import (
    DOSHA_PRIORITY,
    IMBALANCE_SCORE_MAX,
    Dosha,
    DoshaProfile,
)
from ayurdiet.services import dosha_rules

_logger = logging.getLogger(__name__)


@dataclass
class DoshaClassifier:
    """Scores Vata, Pitta and Kapha from keyword signals.

    Ties are broken in the order Vata, Pitta, Kapha. With no signal at all the
    result is Vata with an imbalance score of zero and general advice.
    """

    weights: Mapping[str, Mapping[Dosha, float]] = field(
        default_factory=lambda: dosha_rules.KEYWORD_WEIGHTS
    )
    recommendations: Mapping[Dosha, Sequence[str]] = field(
        default_factory=lambda: dosha_rules.RECOMMENDATIONS
    )
    secondary_recommendations: Mapping[Dosha, Sequence[str]] = field(
        default_factory=lambda: dosha_rules.SECONDARY_RECOMMENDATIONS
    )
    general_recommendations: Sequence[str] = dosha_rules.GENERAL_RECOMMENDATIONS
    secondary_threshold: float = 0.4

    def __post_init__(self) -> None:
        # Longest phrases first so "dry skin" wins over any shorter keyword.
        self._patterns = [
            (keyword, re.compile(rf"\b{re.escape(keyword.lower())}\b"))
            for keyword in sorted(self.weights, key=len, reverse=True)
        ]

    def analyze(
        self,
        symptoms: Sequence[str],
        characteristics: Sequence[str],
        preferences: Sequence[str],
    ) -> DoshaProfile:
        """Classify the dominant dosha from the three signal lists."""
        totals = self.score([*symptoms, *characteristics, *preferences])
        ranked = sorted(
            DOSHA_PRIORITY,
            key=lambda dosha: (-totals[dosha], DOSHA_PRIORITY.index(dosha)),
        )
        primary, runner_up = ranked[0], ranked[1]
        top = totals[primary]
        if top <= 0:
            return DoshaProfile(
                primary=DOSHA_PRIORITY[0],
                secondary=None,
                imbalance_score=0.0,
                recommendations=tuple(self.general_recommendations),
            )

        secondary = None
        runner_up_total = totals[runner_up]
        if runner_up_total > 0 and runner_up_total >= self.secondary_threshold * top:
            secondary = runner_up

        profile = DoshaProfile(
            primary=primary,
            secondary=secondary,
            imbalance_score=_imbalance_score(totals),
            recommendations=self._recommendations(primary, secondary),
        )
        _logger.debug("Dosha totals %s -> %s", totals, profile.primary.value)
        return profile

    def score(self, signals: Sequence[str]) -> dict[Dosha, float]:
        """Accumulate keyword weights per dosha."""
        totals = {dosha: 0.0 for dosha in DOSHA_PRIORITY}
        for signal in signals:
            if not isinstance(signal, str):
                continue
            text = signal.lower()
            for keyword, pattern in self._patterns:
                text, hits = pattern.subn(" ", text)
                if not hits:
                    continue
                for dosha, weight in self.weights[keyword].items():
                    totals[dosha] += weight * hits
        return totals

    def _recommendations(
        self, primary: Dosha, secondary: Dosha | None
    ) -> tuple[str, ...]:
        advice = list(self.recommendations.get(primary, ()))
        if secondary is not None:
            advice.extend(self.secondary_recommendations.get(secondary, ()))
        return tuple(dict.fromkeys(advice))


def _imbalance_score(totals: Mapping[Dosha, float]) -> float:
    """Spread of the top total over the mean, scaled to 0-10."""
    values = list(totals.values())
    top = max(values)
    if top <= 0:
        return 0.0
    mean = sum(values) / len(values)
    # Largest possible spread is when one dosha holds every point.
    max_spread = top - top / len(values)
    score = IMBALANCE_SCORE_MAX * (top - mean) / max_spread
    return round(min(max(score, 0.0), IMBALANCE_SCORE_MAX), 1)
