"""
FFM — Five Factor Model personality profiles.

Validated trait values, Likert conversion, and text / record views::

    from ffm import PersonalityProfile
    profile = PersonalityProfile(0.8, 0.4, 0.6, 0.9, 0.2)
    profile.describe()
"""

from ffm.models.personality import (
    LIKERT_EPSILON,
    TRAIT_NAMES,
    TRAIT_VALUE_AVG,
    TRAIT_VALUE_MAX,
    TRAIT_VALUE_MIN,
    PersonalityProfile,
    TraitRangeError,
    calculate_likert_score,
    likert_descriptor,
    trait_is_in_range,
)

__all__ = [
    "LIKERT_EPSILON",
    "TRAIT_NAMES",
    "TRAIT_VALUE_AVG",
    "TRAIT_VALUE_MAX",
    "TRAIT_VALUE_MIN",
    "PersonalityProfile",
    "TraitRangeError",
    "calculate_likert_score",
    "likert_descriptor",
    "trait_is_in_range",
]
