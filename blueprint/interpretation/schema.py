"""
Schema for what the scene description implies.
Categorical traits inferred from free text; built once per request and never mutated.
"""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SceneTraits:
    """
    Traits detected in a scene description: mood, time of day, weather, camera style,
    characters, FX elements and location. Every field has a fallback, so a trait set
    always exists for a validated description.
    """

    mood: str                  # tense | mysterious | epic | ... | ambient
    time_of_day: str           # dawn | sunrise | ... | midnight | magic hour
    weather: str               # rain | storm | snow | fog | wind | sand | ash | clear
    style: str                 # handheld | steadicam | drone | dolly | crane | locked-off | hybrid
    has_characters: bool
    effects: tuple[str, ...]   # never empty
    location: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging and API (camelCase wire keys)."""
        return {
            "mood": self.mood,
            "timeOfDay": self.time_of_day,
            "weather": self.weather,
            "style": self.style,
            "hasCharacters": self.has_characters,
            "effects": list(self.effects),
            "location": self.location,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "SceneTraits":
        """Reconstruct from the API form produced by to_dict."""
        return cls(
            mood=d["mood"],
            time_of_day=d["timeOfDay"],
            weather=d["weather"],
            style=d["style"],
            has_characters=bool(d["hasCharacters"]),
            effects=tuple(d["effects"]),
            location=d["location"],
        )
