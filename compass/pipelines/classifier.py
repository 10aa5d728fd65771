"""
Theme Classifier
compass/pipelines/classifier.py
"""

from __future__ import annotations

from compass.models.company import RawRecord, ThemeFlags
from compass.pipelines.keywords import THEME_PATTERNS


def description_text(record: RawRecord) -> str:
    """Short and full description joined and lower-cased."""
    return f"{record.description or ''} {record.full_description or ''}".lower()


def classify_text(text: str) -> ThemeFlags:
    """Tag text with every theme whose keyword list matches it."""
    lowered = text.lower()
    return ThemeFlags.from_themes(
        [theme for theme, pattern in THEME_PATTERNS.items() if pattern.search(lowered)]
    )


def classify(record: RawRecord) -> ThemeFlags:
    return classify_text(description_text(record))
