"""
Our data: keyword vocabularies used by the trait parser.
Order matters: the first entry found in the text wins, so these are tuples, not sets.
"""
import re

# Mood of the scene
MOOD_KEYWORDS: tuple[str, ...] = (
    "tense",
    "mysterious",
    "epic",
    "romantic",
    "melancholic",
    "hopeful",
    "dark",
    "chaotic",
    "serene",
)

# Time of day
TIME_KEYWORDS: tuple[str, ...] = (
    "dawn",
    "sunrise",
    "noon",
    "afternoon",
    "sunset",
    "dusk",
    "night",
    "midnight",
)

# Weather / atmosphere
WEATHER_KEYWORDS: tuple[str, ...] = (
    "rain",
    "storm",
    "snow",
    "fog",
    "wind",
    "sand",
    "ash",
)

# Camera rig / coverage style
CINEMATIC_STYLES: tuple[str, ...] = (
    "handheld",
    "steadicam",
    "drone",
    "dolly",
    "crane",
    "locked-off",
)

# FX elements; every match is collected (not just the first)
EFFECT_KEYWORDS: tuple[str, ...] = (
    "fire",
    "smoke",
    "rain",
    "snow",
    "magic",
    "sparks",
    "embers",
    "debris",
    "water",
    "mist",
    "nebula",
    "shockwave",
    "lightning",
    "glow",
    "hologram",
    "particles",
)

# Characters on screen (English + Marathi: hero, dancer)
CHARACTER_PATTERN = re.compile(
    r"character|actor|creature|हिरो|नर्तक|soldier|crowd",
    re.IGNORECASE,
)

# Fallbacks when nothing matches
DEFAULT_MOOD = "ambient"
DEFAULT_TIME_OF_DAY = "magic hour"
DEFAULT_WEATHER = "clear"
DEFAULT_STYLE = "hybrid"
DEFAULT_EFFECTS: tuple[str, ...] = ("atmospheric dust motes", "volumetric light shafts")
DEFAULT_LOCATION = "vast cinematic expanse"
