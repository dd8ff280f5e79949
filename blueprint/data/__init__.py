# Fixed vocabularies for trait inference

from .keywords import (
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

__all__ = [
    "MOOD_KEYWORDS",
    "TIME_KEYWORDS",
    "WEATHER_KEYWORDS",
    "CINEMATIC_STYLES",
    "EFFECT_KEYWORDS",
    "CHARACTER_PATTERN",
    "DEFAULT_MOOD",
    "DEFAULT_TIME_OF_DAY",
    "DEFAULT_WEATHER",
    "DEFAULT_STYLE",
    "DEFAULT_EFFECTS",
    "DEFAULT_LOCATION",
]
