"""Dietary guideline excerpts consulted during plan generation.

Entries are listed in priority order; selection preserves this order.
"""

from dataclasses import dataclass

from ayurdiet.domain.diet_plans import PolicyExcerpt

POLICY_CORPUS_VERSION = "2023.3"


@dataclass(frozen=True)
class PolicyEntry:
    """A guideline excerpt with the keywords and seasons that make it relevant."""

    excerpt: PolicyExcerpt
    keywords: tuple[str, ...]
    seasons: tuple[str, ...] = ()


POLICY_CORPUS: tuple[PolicyEntry, ...] = (
    PolicyEntry(
        excerpt=PolicyExcerpt(
            id="CCRAS/DIAB/2023/006",
            topic="Diabetes management",
            text=(
                "Favor bitter and astringent tastes such as bitter gourd, fenugreek "
                "and barley. Replace refined sugar and polished rice with millets "
                "and whole grains. Keep meal times fixed and avoid heavy dinners."
            ),
        ),
        keywords=(
            "diabetes",
            "diabetic",
            "prediabetes",
            "blood sugar",
            "insulin resistance",
            "metabolic syndrome",
        ),
    ),
    PolicyEntry(
        excerpt=PolicyExcerpt(
            id="AYUSH/COMB/2023/005",
            topic="Food combination principles",
            text=(
                "Avoid incompatible combinations (viruddha ahara): milk with fish, "
                "milk with sour fruits, honey heated or mixed with equal ghee. "
                "Eat fruit apart from meals and avoid cold drinks with hot food."
            ),
        ),
        keywords=(
            "indigestion",
            "digestive disorder",
            "food allergy",
            "food allergies",
            "allergy",
            "bloating",
            "toxin",
            "food combination",
        ),
    ),
    PolicyEntry(
        excerpt=PolicyExcerpt(
            id="AYUSH/VATA/2023/001",
            topic="Vata dosha management",
            text=(
                "Prefer warm, cooked, moist foods with healthy fats such as ghee "
                "and sesame oil. Favor sweet, sour and salty tastes. Eat three "
                "regular meals, dinner before 8 PM. Limit raw salads, cold drinks "
                "and dried fruit."
            ),
        ),
        keywords=(
            "vata",
            "anxiety",
            "insomnia",
            "dry skin",
            "constipation",
            "joint pain",
            "irregular digestion",
        ),
        seasons=("autumn", "winter"),
    ),
    PolicyEntry(
        excerpt=PolicyExcerpt(
            id="CCRAS/PITTA/2023/002",
            topic="Pitta dosha management",
            text=(
                "Emphasize cooling, non-spicy foods with sweet, bitter and "
                "astringent tastes. Avoid fried, sour and very salty dishes, "
                "alcohol and caffeine. Allow three to four hours between meals."
            ),
        ),
        keywords=(
            "pitta",
            "acid reflux",
            "acidity",
            "skin rash",
            "irritability",
            "excessive hunger",
            "inflammation",
        ),
        seasons=("summer",),
    ),
    PolicyEntry(
        excerpt=PolicyExcerpt(
            id="CCRAS/KAPHA/2023/003",
            topic="Kapha dosha management",
            text=(
                "Favor light, dry, warm foods with pungent, bitter and astringent "
                "tastes: barley, millet, leafy greens, ginger. Minimize heavy, "
                "oily, cold and sweet foods. Keep the evening meal light."
            ),
        ),
        keywords=(
            "kapha",
            "weight gain",
            "obesity",
            "congestion",
            "lethargy",
            "slow digestion",
            "edema",
        ),
        seasons=("spring",),
    ),
    PolicyEntry(
        excerpt=PolicyExcerpt(
            id="AYUSH/SEAS/2023/004",
            topic="Winter seasonal diet",
            text=(
                "In winter digestive fire is strong: include warming foods, "
                "root vegetables, ghee, sesame and golden milk. Avoid cold, "
                "light and dry foods."
            ),
        ),
        keywords=("winter", "cold sensitivity", "joint stiffness", "low immunity"),
        seasons=("winter",),
    ),
    PolicyEntry(
        excerpt=PolicyExcerpt(
            id="AYUSH/SEAS/2023/007",
            topic="Summer seasonal diet",
            text=(
                "In summer favor sweet, cold and liquid foods: buttermilk, "
                "coconut water, rice and seasonal fruit. Reduce pungent, sour "
                "and salty foods and avoid exertion after meals."
            ),
        ),
        keywords=("summer", "heat", "dehydration"),
        seasons=("summer",),
    ),
    PolicyEntry(
        excerpt=PolicyExcerpt(
            id="AYUSH/SEAS/2023/008",
            topic="Spring seasonal diet",
            text=(
                "In spring accumulated Kapha liquefies: prefer light, warm, "
                "easily digested grains such as barley and old rice, honey in "
                "moderation, and avoid heavy, oily and sweet foods."
            ),
        ),
        keywords=("spring",),
        seasons=("spring",),
    ),
)
