"""
Input validation for scene descriptions.
"""

MIN_DETAIL_LENGTH = 10

# Marathi + English: "please give more detail"
VALIDATION_MESSAGE = "कृपया अधिक तपशील द्या / please add more detail."


class ValidationError(ValueError):
    """Scene description rejected before any plan is built."""

    def __init__(self, message: str = VALIDATION_MESSAGE, min_length: int = MIN_DETAIL_LENGTH):
        super().__init__(message)
        self.message = message
        self.min_length = min_length


def validate_details(details: str, *, min_length: int = MIN_DETAIL_LENGTH) -> str:
    """Return details unchanged if long enough once trimmed; raise ValidationError otherwise."""
    if not isinstance(details, str) or len(details.strip()) < min_length:
        raise ValidationError(min_length=min_length)
    return details
