"""Food name extraction from menu and diet plan text."""

import re
from dataclasses import dataclass

KNOWN_FOODS: frozenset[str] = frozenset(
    {
        "rice", "wheat", "milk", "curd", "yogurt", "butter", "ghee", "oil",
        "salt", "sugar", "honey", "tea", "coffee", "bread", "chapati", "roti",
        "dal", "lentils", "beans", "peas", "potato", "tomato", "onion",
        "garlic", "ginger", "turmeric", "cumin", "coriander", "cardamom",
        "cinnamon", "cloves", "pepper", "chili", "spinach", "carrot",
        "cucumber", "lettuce", "apple", "banana", "mango", "orange", "grapes",
        "lemon", "lime", "almonds", "cashews", "raisins", "dates", "chicken",
        "fish", "egg", "mutton", "beef", "oats", "barley", "millet", "khichdi",
        "poha", "idli", "dosa", "upma", "paneer", "buttermilk", "moong",
    }
)  # fmt: skip

MAX_WORDS = 5

_SEPARATORS = re.compile(r"[\n\r,;:|/+•·]|\s[-*]\s|\band\b|\bwith\b", re.IGNORECASE)
_LABEL = re.compile(r"^[^:]{0,30}:")
_LABEL_WORDS = re.compile(
    r"\b(?:breakfast|brunch|lunch|dinner|supper|snacks?|tiffin|meals?|menu|"
    r"morning|noon|afternoon|evening|night|bedtime|day|week|"
    r"monday|tuesday|wednesday|thursday|friday|saturday|sunday|"
    r"pre-workout|post-workout|notes?|tips?|options?)\b",
    re.IGNORECASE,
)
_PARENTHESES = re.compile(r"\([^)]*\)|\[[^\]]*\]")
_LIST_MARKER = re.compile(r"^\s*(?:[-*#>]+|\d+[.)])\s*")
_QUANTITY = re.compile(
    r"\b\d+(?:[./]\d+)?\s*"
    r"(?:g|gm|gms|grams?|kg|mg|ml|l|litres?|liters?|cups?|tbsp|tsp|"
    r"tablespoons?|teaspoons?|bowls?|glass(?:es)?|pieces?|pcs|slices?|nos?|"
    r"servings?|plates?|katori)?\b\.?",
    re.IGNORECASE,
)
_NON_WORD = re.compile(r"[^a-z\s'-]")
_WHITESPACE = re.compile(r"\s+")
_WORD = re.compile(r"[a-z]+")


@dataclass
class FoodNameExtractor:
    """Best-effort segmentation of free text into candidate food names."""

    known_foods: frozenset[str] = KNOWN_FOODS
    max_words: int = MAX_WORDS

    def extract(self, text: str) -> set[str]:
        """Return a deduplicated set of lower-cased candidate food names."""
        if not isinstance(text, str) or not text.strip():
            return set()
        names: set[str] = set()
        for raw_line in text.splitlines():
            line = _strip_meal_label(_PARENTHESES.sub(" ", raw_line).strip())
            for fragment in _SEPARATORS.split(line):
                candidate = self._clean(fragment)
                if candidate:
                    names.add(candidate)
        lowered = text.lower()
        names.update(
            word for word in _WORD.findall(lowered) if word in self.known_foods
        )
        return names

    def _clean(self, fragment: str) -> str | None:
        value = _LIST_MARKER.sub("", fragment)
        value = _PARENTHESES.sub(" ", value)
        value = _QUANTITY.sub(" ", value)
        value = _NON_WORD.sub(" ", value.lower())
        value = _WHITESPACE.sub(" ", value).strip(" -'")
        if not value or not _WORD.search(value):
            return None
        if len(value.split()) > self.max_words:
            return None
        return value


def _strip_meal_label(line: str) -> str:
    """Drop a leading "Lunch:" style label; other colons split items."""
    match = _LABEL.match(line)
    if match and _LABEL_WORDS.search(match.group()):
        return line[match.end() :]
    return line
