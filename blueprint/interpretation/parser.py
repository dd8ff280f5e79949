"""
Trait parsing of scene descriptions.
Keyword tables only: substring lookups against fixed vocabularies, no model.
"""
import re
from typing import Iterable

from .schema import SceneTraits
from ..data.keywords import (
    MOOD_KEYWORDS,
    TIME_KEYWORDS,
    WEATHER_KEYWORDS,
    CINEMATIC_STYLES,
    EFFECT_KEYWORDS,
    CHARACTER_PATTERN,
    DEFAULT_MOOD,
    DEFAULT_TIME_OF_DAY,
    DEFAULT_WEATHER,
    DEFAULT_STYLE,
    DEFAULT_EFFECTS,
    DEFAULT_LOCATION,
)

# "in Mumbai", "at the docks", "inside the reactor", "within ..." up to a comma/period.
# Not word-bounded: "rain soaked" matches "in soaked".
_LOCATION_PATTERN = re.compile(
    r"(in|at|inside|within)\s+([A-Za-z\s'-]{3,})(?:,|\.)?",
    re.IGNORECASE,
)

_SENTENCE_SPLIT = re.compile(r"[.?!]")


def detect_keyword(candidates: Iterable[str], text: str) -> str | None:
    """
    First candidate (in declaration order) contained in the lowercased text.
    Position in the text is irrelevant: "epic and tense" resolves to "tense" for moods.
    """
    lower = (text or "").lower()
    for item in candidates:
        if item in lower:
            return item
    return None


def extract_effects(text: str) -> tuple[str, ...]:
    """All known FX terms present in text, in vocabulary order; fallback pair when none."""
    lower = (text or "").lower()
    selected = tuple(kw for kw in EFFECT_KEYWORDS if kw in lower)
    return selected or DEFAULT_EFFECTS


def extract_location(text: str) -> str:
    """Location after a preposition; else first sentence if long enough; else fallback."""
    match = _LOCATION_PATTERN.search(text or "")
    if match and match.group(2):
        return match.group(2).strip()
    first_sentence = _SENTENCE_SPLIT.split(text or "")[0]
    return first_sentence.strip() if len(first_sentence) > 5 else DEFAULT_LOCATION


def has_characters(text: str) -> bool:
    return bool(CHARACTER_PATTERN.search(text or ""))


def infer_traits(details: str) -> SceneTraits:
    """Turn a scene description into SceneTraits. Never fails; unmatched traits fall back to defaults."""
    return SceneTraits(
        mood=detect_keyword(MOOD_KEYWORDS, details) or DEFAULT_MOOD,
        time_of_day=detect_keyword(TIME_KEYWORDS, details) or DEFAULT_TIME_OF_DAY,
        weather=detect_keyword(WEATHER_KEYWORDS, details) or DEFAULT_WEATHER,
        style=detect_keyword(CINEMATIC_STYLES, details) or DEFAULT_STYLE,
        has_characters=has_characters(details),
        effects=extract_effects(details),
        location=extract_location(details),
    )
