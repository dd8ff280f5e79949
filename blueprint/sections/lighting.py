"""
Lighting setup: HDRI, key/fill/rim, practicals and color management.
Key, fill and rim are first-class parameters, matched to time of day and weather.
"""
from ..interpretation.schema import SceneTraits
from ..schema import LightingSetup

# HDRI per time of day; anything not listed uses the overcast lot
HDRI_BY_TIME: dict[str, str] = {
    "night": "Luminance City Night 4K",
    "dawn": "Sunrise Coastal V2 8K",
    "sunrise": "Sunrise Coastal V2 8K",
}
DEFAULT_HDRI = "Overcast Film Lot 8K"


def select_hdri(time_of_day: str) -> str:
    return HDRI_BY_TIME.get(time_of_day, DEFAULT_HDRI)


def build_lighting_setup(traits: SceneTraits) -> LightingSetup:
    key_tint = "deep blue" if traits.time_of_day == "night" else "warm amber"
    rim_type = "volumetric cylinder" if traits.weather == "fog" else "spot"
    return LightingSetup(
        hdri=f"HDRI: {select_hdri(traits.time_of_day)}",
        key=f"Key Light: 1.2 intensity, {key_tint}, angle 35° camera left, softness 0.45",
        fill="Fill Light: 0.38 intensity, hue shift +18°, negative fill flags for Marathi sculpted cheeks",
        rim=f"Rim Light: {rim_type}, intensity 0.65, angle 120° behind subject",
        practicals="Practicals: emissive cards with ACEScg tint to motivate in-world sources",
        notes="Color Management: ACEScg workflow, using IDT VFX Neutral, ODT Rec.709 + D65 white point.",
    )
