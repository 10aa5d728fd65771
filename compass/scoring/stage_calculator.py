# compass/scoring/stage_calculator.py
"""
Stage Score Lookup
------------------
Maps a free-text funding stage label to a maturity score in [0, 1].

Rules are checked in order against the lower-cased label; the first rule
with a matching substring wins:

    "series a"                 0.7
    "series b" / "series c"    0.9
    "ipo" / "acquired"         0.5
    anything else              0.3
"""

from typing import Optional, Tuple

STAGE_RULES: Tuple[Tuple[Tuple[str, ...], float], ...] = (
    (("series a",), 0.7),
    (("series b", "series c"), 0.9),
    (("ipo", "acquired"), 0.5),
)

DEFAULT_STAGE_SCORE = 0.3


def stage_score(funding_type: Optional[str]) -> float:
    """Return the maturity score for a funding stage label."""
    label = (funding_type or "").lower()
    for needles, score in STAGE_RULES:
        if any(needle in label for needle in needles):
            return score
    return DEFAULT_STAGE_SCORE
