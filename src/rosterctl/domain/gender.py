"""Gender token resolution, including Russian synonyms."""

from __future__ import annotations

from rosterctl.domain.errors import InvalidGenderError
from rosterctl.domain.types import Gender

# Keys are casefolded.
GENDER_SYNONYMS: dict[str, Gender] = {
    "male": Gender.MALE,
    "м": Gender.MALE,
    "мужской": Gender.MALE,
    "female": Gender.FEMALE,
    "ж": Gender.FEMALE,
    "женский": Gender.FEMALE,
}


def resolve_gender(text: str | None) -> Gender:
    """Map a free-form gender token to :class:`Gender`.

    Matching is case-insensitive after trimming. No fuzzy matching.

    Examples:
        >>> resolve_gender(" Female ")
        <Gender.FEMALE: 'FEMALE'>
        >>> resolve_gender("М")
        <Gender.MALE: 'MALE'>
    """
    if text is None or not text.strip():
        raise InvalidGenderError("Gender must not be empty")
    gender = GENDER_SYNONYMS.get(text.strip().casefold())
    if gender is None:
        raise InvalidGenderError(f"Unknown gender: {text.strip()!r}")
    return gender
