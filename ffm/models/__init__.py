from ffm.models.personality import (
    PersonalityProfile,
    TraitRangeError,
    calculate_likert_score,
    likert_descriptor,
    trait_is_in_range,
)

__all__ = [
    "PersonalityProfile",
    "TraitRangeError",
    "calculate_likert_score",
    "likert_descriptor",
    "trait_is_in_range",
]
