"""
Default Rule Table — Used when no rule file is configured.

Kept as plain data so it goes through the same validation as a rule file.
"""

from __future__ import annotations

from typing import Any

PROHIBITED_TERMS: list[str] = [
    # English profanity and adult content
    "fuck", "shit", "bitch", "damn", "hell", "ass", "bastard", "crap",
    "whore", "slut", "sexy", "porn", "nude", "naked", "sex", "adult",
    "escort", "massage", "weapons", "gun", "drug", "cocaine", "weed",
    "marijuana", "kill", "murder", "death", "suicide", "violence",
    "terrorism", "bomb", "explosive", "hate", "nazi", "racist",
    # Persian (transliterated)
    "kos", "kir", "kon", "koon", "jende", "faheshe", "haroomzade",
    "koskesh", "kiram", "goh", "tokhmam", "javadi", "pedar",
    # Fraud
    "scam", "fraud", "fake", "stolen", "illegal", "counterfeit",
    "pyramid", "mlm", "get rich quick", "guaranteed money",
]

SUSPICIOUS_PATTERNS: list[str] = [
    r"\b(sex|porn|adult|escort|massage)\b",
    r"\b(drug|cocaine|heroin|meth|weed|marijuana)\b",
    r"\b(weapon|gun|rifle|pistol|bomb|explosive)\b",
    r"\b(kill|murder|death|suicide|violence)\b",
    r"\b(scam|fraud|fake|stolen|illegal|counterfeit)\b",
    r"\b(nazi|terrorist|hate|racist)\b",
    r"\$\d+.*guarantee",  # money-back guarantees
    r"\b(work from home|make money fast|get rich quick)\b",
    r"\b(call now|limited time|act fast|urgent)\b",  # high-pressure sales
]

CATEGORY_PRICE_BANDS: dict[str, dict[str, float]] = {
    "vehicles": {"min": 500, "max": 200_000},
    "real-estate": {"min": 50_000, "max": 10_000_000},
    "digital-goods": {"min": 10, "max": 5_000},
    "fashion": {"min": 5, "max": 2_000},
    "pets": {"min": 50, "max": 5_000},
}

PRICE_HEURISTICS: list[dict[str, Any]] = [
    {
        "phrase": "urgent sale",
        "below": 100,
        "flag": "Potential scam: urgent low-price sale",
    },
    {
        "phrase": "brand new",
        "below": 5_000,
        "category": "vehicles",
        "flag": "Suspicious: brand new vehicle at very low price",
    },
]

IMAGE_KEYWORDS: list[str] = [
    "nude", "naked", "adult", "sexy", "inappropriate", "weapon", "violence",
]

CLASSIFIED_IMAGE_HOSTS: list[str] = ["unsplash.com"]

CATEGORY_RULES: dict[str, list[dict[str, Any]]] = {
    "vehicles": [
        {
            "rule_id": "vehicle_missing_documents",
            "flag": "Vehicle: Missing legal documentation",
            "any_of": ["no papers", "no title", "no registration"],
        },
    ],
    "real-estate": [
        {
            "rule_id": "rental_scam",
            "flag": "Real estate: Potential rental scam indicators",
            "all_of": ["cash only", "urgent"],
        },
    ],
    "jobs": [
        {
            "rule_id": "employment_scam",
            "flag": "Job: Potential employment scam",
            "all_of": ["no experience required", "high pay"],
        },
        {
            "rule_id": "work_from_home_scam",
            "flag": "Job: Work-from-home scam indicators",
            "all_of": ["work from home", "guaranteed income"],
        },
    ],
    "services": [
        {
            "rule_id": "inappropriate_massage",
            "flag": "Services: Potentially inappropriate massage service",
            "all_of": ["massage"],
            "any_of": ["private", "discreet"],
        },
    ],
}


def default_rule_data() -> dict[str, Any]:
    """The default rule table in rule-file shape."""
    return {
        "prohibited_terms": list(PROHIBITED_TERMS),
        "suspicious_patterns": [{"pattern": p} for p in SUSPICIOUS_PATTERNS],
        "category_price_bands": {k: dict(v) for k, v in CATEGORY_PRICE_BANDS.items()},
        "price_heuristics": [dict(h) for h in PRICE_HEURISTICS],
        "image_keywords": list(IMAGE_KEYWORDS),
        "classified_image_hosts": list(CLASSIFIED_IMAGE_HOSTS),
        "category_rules": {
            category: [dict(rule) for rule in rules]
            for category, rules in CATEGORY_RULES.items()
        },
    }
