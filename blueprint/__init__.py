# VFX blueprint generator: scene description → production blueprint, keyword rules only

from .interpretation import SceneTraits, ValidationError, infer_traits, validate_details
from .pipeline import build_plan, generate_plan
from .schema import VfxPlan
from .stages import SAMPLE_DETAILS, STAGE_TITLES, render_report

__all__ = [
    "SceneTraits",
    "ValidationError",
    "VfxPlan",
    "infer_traits",
    "validate_details",
    "build_plan",
    "generate_plan",
    "STAGE_TITLES",
    "render_report",
    "SAMPLE_DETAILS",
]
