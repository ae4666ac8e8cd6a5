"""
FFM — PersonalityProfile value object (Five Factor Model).

A profile holds five trait values (openness, conscientiousness, extraversion,
agreeableness, neuroticism), each a normalized float in [0, 1].  Values are
validated on construction and on every assignment, so an instance never holds
an out-of-range trait.

Three views are provided:
  - ``describe()``   — an English sentence built from Likert descriptors
  - ``to_record()``  — a plain dict with ``normalized`` and ``likert`` blocks
                       (``to_schema()`` gives the same data as a pydantic model)
  - ``to_text()``    — compact ``FFM[Normalized:{...}, Likert:{...}]`` string

Likert conversion maps the normalized scale onto 1-5 with
``ceil((value + 1e-10) * 5)`` clamped to [1, 5].  The epsilon keeps values
sitting exactly on a multiple of 0.2 in the upper bucket regardless of
binary representation error.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping

import structlog

from ffm.schemas.personality import LikertTraits, NormalizedTraits, PersonalityRecord
from ffm.utils.formatting import format_decimal

# Emits through stdlib logging; silent unless the host enables the ffm logger.
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    wrapper_class=structlog.stdlib.BoundLogger,
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.render_to_log_kwargs,
    ],
)

# ──────────────────────────────────────────────────────────────────────────────
# Constants
# ──────────────────────────────────────────────────────────────────────────────

TRAIT_VALUE_MIN: float = 0.0
TRAIT_VALUE_MAX: float = 1.0
TRAIT_VALUE_AVG: float = 0.5

LIKERT_EPSILON: float = 1e-10
LIKERT_MIN: int = 1
LIKERT_MAX: int = 5

TRAIT_NAMES: tuple[str, ...] = (
    "openness",
    "conscientiousness",
    "extraversion",
    "agreeableness",
    "neuroticism",
)

# Written adjective for each trait, used by describe()
TRAIT_ADJECTIVES: dict[str, str] = {
    "openness": "open",
    "conscientiousness": "conscientious",
    "extraversion": "extraverted",
    "agreeableness": "agreeable",
    "neuroticism": "neurotic",
}

# Single-letter key for each trait, used by to_text()
TRAIT_ABBREVIATIONS: dict[str, str] = {
    "openness": "O",
    "conscientiousness": "C",
    "extraversion": "E",
    "agreeableness": "A",
    "neuroticism": "N",
}

LIKERT_DESCRIPTORS: dict[int, str] = {
    1: "not",
    2: "slightly",
    3: "somewhat",
    4: "moderately",
    5: "strongly",
}

GENERIC_RANGE_MESSAGE = "Personality trait values must be between 0 and 1.0 inclusive."


class TraitRangeError(ValueError):
    """A trait value fell outside [0, 1].

    ``trait`` names the offending trait when the failure came from a
    per-trait assignment, and is ``None`` for construction and Likert
    conversion failures.
    """

    def __init__(self, message: str, trait: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.trait = trait
        self.value = value

    @classmethod
    def for_trait(cls, trait: str, value: Any) -> "TraitRangeError":
        return cls(
            f"{trait.capitalize()} value must be between 0 and 1.0 inclusive.",
            trait=trait,
            value=value,
        )


# ──────────────────────────────────────────────────────────────────────────────
# Pure helpers
# ──────────────────────────────────────────────────────────────────────────────


def trait_is_in_range(value: float) -> bool:
    """Return True iff ``value`` lies in [TRAIT_VALUE_MIN, TRAIT_VALUE_MAX]."""
    return TRAIT_VALUE_MIN <= value <= TRAIT_VALUE_MAX


def calculate_likert_score(value: float) -> int:
    """Convert a normalized trait value to a Likert score in 1..5.

    Raises
    ------
    TraitRangeError
        If ``value`` is outside [0, 1].
    """
    if not trait_is_in_range(value):
        raise TraitRangeError(GENERIC_RANGE_MESSAGE, value=value)

    score = math.ceil((value + LIKERT_EPSILON) * 5)
    return min(max(score, LIKERT_MIN), LIKERT_MAX)


def likert_descriptor(score: int) -> str:
    """Adverb describing the intensity of a Likert score ("not" … "strongly")."""
    return LIKERT_DESCRIPTORS[score]


def _trait_property(name: str) -> property:
    attr = f"_{name}"

    def getter(self: "PersonalityProfile") -> float:
        return getattr(self, attr)

    def setter(self: "PersonalityProfile", value: float) -> None:
        if not trait_is_in_range(value):
            raise TraitRangeError.for_trait(name, value)
        old = getattr(self, attr)
        setattr(self, attr, value)
        logger.debug("trait_updated", trait=name, old=old, new=value)

    return property(getter, setter, doc=f"The {name} trait value in [0, 1].")


# ──────────────────────────────────────────────────────────────────────────────
# PersonalityProfile
# ──────────────────────────────────────────────────────────────────────────────


class PersonalityProfile:
    """A personality described by the five FFM traits.

    Each trait is a float between 0 and 1.0 inclusive, 0 being the lowest
    possible score and 1.0 the highest.  Assigning an out-of-range value to
    any trait raises ``TraitRangeError`` and leaves the profile unchanged.
    """

    TRAIT_VALUE_MIN = TRAIT_VALUE_MIN
    TRAIT_VALUE_MAX = TRAIT_VALUE_MAX
    TRAIT_VALUE_AVG = TRAIT_VALUE_AVG

    openness = _trait_property("openness")
    conscientiousness = _trait_property("conscientiousness")
    extraversion = _trait_property("extraversion")
    agreeableness = _trait_property("agreeableness")
    neuroticism = _trait_property("neuroticism")

    def __init__(
        self,
        openness: float,
        conscientiousness: float,
        extraversion: float,
        agreeableness: float,
        neuroticism: float,
    ) -> None:
        values = (openness, conscientiousness, extraversion, agreeableness, neuroticism)
        for value in values:
            if not trait_is_in_range(value):
                raise TraitRangeError(GENERIC_RANGE_MESSAGE, value=value)

        self._openness = openness
        self._conscientiousness = conscientiousness
        self._extraversion = extraversion
        self._agreeableness = agreeableness
        self._neuroticism = neuroticism

        logger.debug("profile_created", **self.normalized_values())

    # ── Alternate constructors ──────────────────────────────────────

    @classmethod
    def create_average_personality(cls) -> "PersonalityProfile":
        """Return a profile with every trait set to ``TRAIT_VALUE_AVG``."""
        return cls(*(TRAIT_VALUE_AVG for _ in TRAIT_NAMES))

    @classmethod
    def from_record(
        cls, record: PersonalityRecord | Mapping[str, Any]
    ) -> "PersonalityProfile":
        """Rebuild a profile from the output of ``to_record()``.

        Only the ``normalized`` block is read; the Likert block is derived
        data and is recomputed.  A missing block or trait raises
        ``KeyError``; out-of-range values raise ``TraitRangeError``.
        """
        if isinstance(record, PersonalityRecord):
            normalized: Mapping[str, Any] = record.normalized.model_dump()
        else:
            normalized = record["normalized"]
        return cls(*(normalized[name] for name in TRAIT_NAMES))

    # ── Derived values ──────────────────────────────────────────────

    def normalized_values(self) -> dict[str, float]:
        """Stored trait values keyed by trait name, in canonical order."""
        return {name: getattr(self, name) for name in TRAIT_NAMES}

    def likert_scores(self) -> dict[str, int]:
        """Likert score per trait, keyed by trait name, in canonical order."""
        return {
            name: calculate_likert_score(value)
            for name, value in self.normalized_values().items()
        }

    # ── Views ───────────────────────────────────────────────────────

    def describe(self) -> str:
        """Describe the profile in one English sentence.

        Each trait is qualified by the adverb for its Likert score, e.g.
        "According to the Five Factor Model this personality is: strongly
        open, somewhat conscientious, moderately extraverted, strongly
        agreeable, and slightly neurotic."
        """
        clauses = [
            f"{likert_descriptor(score)} {TRAIT_ADJECTIVES[name]}"
            for name, score in self.likert_scores().items()
        ]
        return (
            "According to the Five Factor Model this personality is: "
            f"{', '.join(clauses[:-1])}, and {clauses[-1]}."
        )

    def to_record(self) -> dict[str, dict[str, Any]]:
        """Return ``{"normalized": {...}, "likert": {...}}`` as plain Python.

        The ``normalized`` block holds the stored values exactly as given.
        """
        return {
            "normalized": self.normalized_values(),
            "likert": self.likert_scores(),
        }

    def to_schema(self) -> PersonalityRecord:
        """Return the record as a validated ``PersonalityRecord`` model.

        Normalized values are coerced to ``float`` by the schema.
        """
        return PersonalityRecord(
            normalized=NormalizedTraits(**self.normalized_values()),
            likert=LikertTraits(**self.likert_scores()),
        )

    def to_text(self) -> str:
        """Return the compact ``FFM[Normalized:{...}, Likert:{...}]`` form."""
        normalized = ", ".join(
            f"{TRAIT_ABBREVIATIONS[name]}:{format_decimal(value)}"
            for name, value in self.normalized_values().items()
        )
        likert = ", ".join(
            f"{TRAIT_ABBREVIATIONS[name]}:{score}"
            for name, score in self.likert_scores().items()
        )
        return f"FFM[Normalized:{{{normalized}}}, Likert:{{{likert}}}]"

    # ── Dunder methods ──────────────────────────────────────────────

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={value!r}" for name, value in self.normalized_values().items())
        return f"<PersonalityProfile {values}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersonalityProfile):
            return NotImplemented
        return self.normalized_values() == other.normalized_values()
