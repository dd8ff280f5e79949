"""
Scene layout beats: alternating Marathi vision and English technical notes.
"""
from ..interpretation.schema import SceneTraits

BRIEF_EXCERPT_CHARS = 160


def format_synopsis(traits: SceneTraits) -> str:
    return (
        f"Cinematic brief: {traits.location} | Mood: {traits.mood} | "
        f"Time: {traits.time_of_day} | Weather: {traits.weather}"
    )


def build_narrative_beats(
    traits: SceneTraits,
    details: str,
    *,
    excerpt_chars: int = BRIEF_EXCERPT_CHARS,
) -> tuple[str, ...]:
    """Six beats; the last quotes the start of the client brief."""
    effects = ", ".join(traits.effects)
    return (
        f"• Marathi Vision: {traits.location} मध्ये {traits.mood} मूडची तयारी, प्रॉप्स आणि स्केल रेफरन्सेस सेट करा.",
        f"• English Technical: Blocking key set-pieces, establishing hero assets, and matching proportions for {traits.style} coverage.",
        f"• Marathi Vision: {effects} साठी नोड स्ट्रक्चर डिझाईन करा, लूपेबल सिल्म्युलेशन्स तयार करा.",
        f"• English Technical: Author flipbooks, cache volumes (VDB) and particle emitters tuned for {traits.time_of_day} ambience.",
        f"• Marathi Vision: नॅचरल + सिनेमॅटिक की लाईट, {traits.weather} हवामानाला सपोर्ट करणारी रंग योजना.",
        f"• English Technical: Multi-camera previs beats aligning with client brief: {details[:excerpt_chars]}…",
    )
