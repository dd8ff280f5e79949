# Interpretation: scene description → traits

from .schema import SceneTraits
from .parser import infer_traits, detect_keyword, extract_effects, extract_location
from .validation import ValidationError, validate_details, MIN_DETAIL_LENGTH

__all__ = [
    "SceneTraits",
    "infer_traits",
    "detect_keyword",
    "extract_effects",
    "extract_location",
    "ValidationError",
    "validate_details",
    "MIN_DETAIL_LENGTH",
]
