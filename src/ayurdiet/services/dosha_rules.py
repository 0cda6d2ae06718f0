"""Keyword weights and advice used by the dosha classifier.

Bump ``DOSHA_RULES_VERSION`` whenever weights or advice change.
"""

from ayurdiet.domain.dosha import Dosha

DOSHA_RULES_VERSION = "2024.1"

V, P, K = Dosha.VATA, Dosha.PITTA, Dosha.KAPHA

KEYWORD_WEIGHTS: dict[str, dict[Dosha, float]] = {
    # symptoms
    "anxiety": {V: 3.0},
    "worry": {V: 2.0},
    "fear": {V: 1.5},
    "insomnia": {V: 3.0},
    "restless sleep": {V: 2.0},
    "dry skin": {V: 3.0},
    "dry hair": {V: 2.0},
    "constipation": {V: 3.0},
    "bloating": {V: 2.0},
    "gas": {V: 1.5},
    "irregular appetite": {V: 3.0},
    "irregular digestion": {V: 3.0},
    "cold hands": {V: 2.0},
    "cold feet": {V: 2.0},
    "joint pain": {V: 2.0},
    "cracking joints": {V: 2.0},
    "weight loss": {V: 2.0},
    "fatigue": {V: 1.0, K: 1.0},
    "acid reflux": {P: 3.0},
    "acidity": {P: 3.0},
    "heartburn": {P: 3.0},
    "skin rash": {P: 3.0},
    "skin rashes": {P: 3.0},
    "acne": {P: 2.0},
    "inflammation": {P: 2.0},
    "irritability": {P: 3.0},
    "anger": {P: 2.0},
    "excessive hunger": {P: 3.0},
    "hot flashes": {P: 3.0},
    "excessive sweating": {P: 2.0},
    "loose stools": {P: 2.0},
    "diarrhea": {P: 2.0},
    "burning sensation": {P: 2.5},
    "headache": {P: 1.0, V: 1.0},
    "weight gain": {K: 3.0},
    "obesity": {K: 3.0},
    "congestion": {K: 3.0},
    "cough": {K: 1.5},
    "mucus": {K: 2.0},
    "lethargy": {K: 3.0},
    "sluggish": {K: 2.0},
    "slow digestion": {K: 3.0},
    "water retention": {K: 3.0},
    "swelling": {K: 1.5},
    "depression": {K: 2.0},
    "excessive sleep": {K: 2.5},
    "oversleeping": {K: 2.5},
    # characteristics
    "thin build": {V: 2.0},
    "thin": {V: 1.5},
    "slender": {V: 1.5},
    "light frame": {V: 1.5},
    "quick movements": {V: 2.0},
    "talkative": {V: 1.0},
    "creative": {V: 1.0},
    "medium build": {P: 2.0},
    "muscular": {P: 1.5},
    "sharp intellect": {P: 1.5},
    "competitive": {P: 1.5},
    "warm body": {P: 1.5},
    "oily skin": {P: 1.0, K: 1.0},
    "heavy build": {K: 2.0},
    "large frame": {K: 2.0},
    "calm": {K: 1.5},
    "steady": {K: 1.0},
    "slow movements": {K: 2.0},
    "thick skin": {K: 1.0},
    # preferences
    "warm food": {V: 1.5},
    "warm drinks": {V: 1.0},
    "warm climate": {V: 1.0},
    "dislikes cold": {V: 1.5},
    "cold food": {P: 1.5},
    "cold drinks": {P: 1.5},
    "cool climate": {P: 1.0},
    "spicy food": {K: 1.0, P: 0.5},
    "sweet food": {K: 1.5},
    "sweets": {K: 1.5},
    "heavy food": {K: 1.5},
    "fried food": {K: 1.0, P: 0.5},
    "dairy": {K: 1.0},
}

RECOMMENDATIONS: dict[Dosha, tuple[str, ...]] = {
    V: (
        "Favor warm, cooked, moist and grounding meals",
        "Include ghee or sesame oil in daily cooking",
        "Keep regular meal times and avoid skipping meals",
        "Prefer sweet, sour and salty tastes",
        "Limit raw salads, cold drinks and dry snacks",
    ),
    P: (
        "Favor cooling, mildly spiced meals",
        "Prefer sweet, bitter and astringent tastes",
        "Avoid fried, very sour and chili-heavy dishes",
        "Drink cool (not iced) water between meals",
        "Do not skip lunch; eat at steady intervals",
    ),
    K: (
        "Favor light, warm and dry meals",
        "Use warming spices such as ginger, black pepper and turmeric",
        "Limit heavy, oily, sweet and dairy-rich foods",
        "Keep dinner light and early",
        "Prefer pungent, bitter and astringent tastes",
    ),
}

# Two refinements added when the dosha is secondary.
SECONDARY_RECOMMENDATIONS: dict[Dosha, tuple[str, ...]] = {
    V: (
        "Add warm soups or stews to balance dryness",
        "Keep a steady daily routine",
    ),
    P: (
        "Balance warming spices with coriander, fennel or mint",
        "Avoid eating when stressed or angry",
    ),
    K: (
        "Reduce portion sizes at the evening meal",
        "Include light grains such as barley or millet",
    ),
}

GENERAL_RECOMMENDATIONS: tuple[str, ...] = (
    "Eat freshly cooked, seasonal meals at regular times",
    "Eat mindfully and stop before feeling overly full",
    "Drink warm water through the day",
    "Complete a constitutional assessment for tailored advice",
)
