"""
Pipeline: one scene description → one production blueprint.
Validate, infer traits, run every section builder, aggregate. Synchronous and pure.
"""
import logging
from typing import Any

from .config import get_generator_config
from .interpretation import infer_traits, validate_details
from .interpretation.schema import SceneTraits
from .schema import VfxPlan
from .sections import (
    build_camera_plan,
    build_compositing_setup,
    build_export_plan,
    build_lighting_setup,
    build_narrative_beats,
    build_render_settings,
    build_simulation_params,
    format_synopsis,
)
from .sections.narrative import BRIEF_EXCERPT_CHARS

logger = logging.getLogger(__name__)


def build_plan(
    traits: SceneTraits,
    details: str,
    *,
    excerpt_chars: int = BRIEF_EXCERPT_CHARS,
) -> VfxPlan:
    """Assemble the blueprint from traits and the raw description. Total for any traits."""
    return VfxPlan(
        scene_synopsis=format_synopsis(traits),
        narrative_beats=build_narrative_beats(traits, details, excerpt_chars=excerpt_chars),
        simulation_params=build_simulation_params(traits),
        lighting_setup=build_lighting_setup(traits),
        camera_plan=build_camera_plan(traits),
        render_settings=build_render_settings(traits),
        compositing_setup=build_compositing_setup(traits),
        export_plan=build_export_plan(),
        traits=traits,
    )


def generate_plan(details: str, *, config: dict[str, Any] | None = None) -> VfxPlan:
    """
    Generate a VFX blueprint from a free-text scene description.
    Raises ValidationError when the trimmed description is shorter than the configured minimum.
    Identical input always yields an identical plan.
    """
    min_length, excerpt_chars = get_generator_config(config)
    validate_details(details, min_length=min_length)
    traits = infer_traits(details)
    logger.debug(
        "Traits: mood=%s time=%s weather=%s style=%s effects=%s",
        traits.mood, traits.time_of_day, traits.weather, traits.style, ",".join(traits.effects),
    )
    return build_plan(traits, details, excerpt_chars=excerpt_chars)
