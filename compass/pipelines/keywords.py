"""
Theme keyword lists
compass/pipelines/keywords.py

Terms are matched as substrings of the lower-cased description, except
"ai", which must end a word: "OpenAI" and "xAI" count, "email" and "rails" do not.
"""

from __future__ import annotations

import re
from typing import Dict, Pattern, Tuple

from compass.models.enumerations import Theme

THEME_KEYWORDS: Dict[Theme, Tuple[str, ...]] = {
    Theme.AI: (
        "artificial intelligence",
        "machine learning",
        "deep learning",
        "llm",
        "nlp",
        "genai",
        "neural network",
        "gpt",
        "computer vision",
    ),
    Theme.CLIMATE: (
        "climate",
        "carbon",
        "emission",
        "renewable",
        "solar",
        "battery",
        "sustainable",
        "energy",
        "clean tech",
        "green",
        "environment",
        "wind",
        "hydro",
    ),
    Theme.FINTECH: (
        "fintech",
        "payment",
        "lending",
        "banking",
        "crypto",
        "wallet",
        "neobank",
        "insurance",
        "wealth",
        "trading",
        "blockchain",
        "defi",
    ),
    Theme.HEALTHCARE: (
        "biotech",
        "health",
        "pharma",
        "medical",
        "therapeutics",
        "biology",
        "patient",
        "doctor",
        "care",
        "clinic",
        "drug",
        "genomic",
        "life science",
    ),
    Theme.SAAS: (
        "enterprise",
        "saas",
        "b2b",
        "software",
        "cloud",
        "automation",
        "workflow",
        "productivity",
        "crm",
        "erp",
        "platform",
        "infrastructure",
        "api",
    ),
    Theme.CONSUMER: (
        "b2c",
        "consumer",
        "retail",
        "e-commerce",
        "social",
        "app",
        "marketplace",
        "brand",
        "fashion",
        "food",
        "d2c",
        "subscription",
        "media",
    ),
}

# Terms that only count at the end of a word
WORD_END_TERMS: Dict[Theme, Tuple[str, ...]] = {
    Theme.AI: ("ai",),
}


def _compile(theme: Theme) -> Pattern[str]:
    parts = [re.escape(term) for term in THEME_KEYWORDS[theme]]
    parts += [rf"{re.escape(term)}\b" for term in WORD_END_TERMS.get(theme, ())]
    return re.compile("|".join(parts))


THEME_PATTERNS: Dict[Theme, Pattern[str]] = {theme: _compile(theme) for theme in Theme}
