"""
Verse reference parsing and validation.

Accepted forms:
- "surah:ayah" (e.g. "2:255")
- "surah name ayah" (e.g. "Al-Baqarah 255"), name matched case-insensitively

The colon form is tried first and is final: "115:1" is rejected outright and
never retried as a name.
"""

import re
from typing import Optional

from quran_flashcards.data.surahs import MAX_SURAH, MIN_SURAH, get_surah_number
from quran_flashcards.exceptions import (
    EMPTY_INPUT_MESSAGE,
    INVALID_FORMAT_MESSAGE,
    SURAH_RANGE_MESSAGE,
    InvalidReferenceError,
)
from quran_flashcards.models import ParsedReference, ValidationResult

# ASCII digits only; whitespace between name and number is required
COLON_PATTERN = re.compile(r"([0-9]+):([0-9]+)")
NAME_PATTERN = re.compile(r"(.+?)\s+([0-9]+)")

# CPython's default int() string limit; longer numbers are rejected
MAX_NUMBER_DIGITS = 4300


def _to_int(digits: str) -> Optional[int]:
    significant = digits.lstrip("0") or "0"
    if len(significant) > MAX_NUMBER_DIGITS:
        return None
    try:
        return int(significant)
    except ValueError:
        # interpreter configured with a lower sys.set_int_max_str_digits()
        return None


def parse_reference(user_input: str) -> Optional[ParsedReference]:
    """
    Parse user input into a surah/ayah reference.

    Args:
        user_input: Free-form reference such as "2:255" or "Al-Baqarah 255"

    Returns:
        ParsedReference if the input is a valid reference, None otherwise
    """
    trimmed = (user_input or "").strip()
    if not trimmed:
        return None

    colon_match = COLON_PATTERN.fullmatch(trimmed)
    if colon_match:
        surah = _to_int(colon_match.group(1))
        ayah = _to_int(colon_match.group(2))
        if surah is None or ayah is None:
            return None
        if MIN_SURAH <= surah <= MAX_SURAH and ayah >= 1:
            return ParsedReference(surah=surah, ayah=ayah)
        return None

    name_match = NAME_PATTERN.fullmatch(trimmed)
    if name_match:
        surah = get_surah_number(name_match.group(1))
        ayah = _to_int(name_match.group(2))
        if surah is not None and ayah is not None and ayah >= 1:
            return ParsedReference(surah=surah, ayah=ayah)
        return None

    return None


def _check_input(user_input: str) -> tuple[Optional[ParsedReference], ValidationResult]:
    if not user_input or not user_input.strip():
        return None, ValidationResult.fail(EMPTY_INPUT_MESSAGE)

    parsed = parse_reference(user_input)
    if parsed is None:
        return None, ValidationResult.fail(INVALID_FORMAT_MESSAGE)

    if parsed.surah < MIN_SURAH or parsed.surah > MAX_SURAH:
        return None, ValidationResult.fail(SURAH_RANGE_MESSAGE)

    return parsed, ValidationResult.ok()


def validate_input(user_input: str) -> ValidationResult:
    """
    Validate user input for an ayah reference.

    Args:
        user_input: Raw text from the user

    Returns:
        ValidationResult with a user-facing error message when invalid
    """
    return _check_input(user_input)[1]


def require_reference(user_input: str) -> ParsedReference:
    """
    Validate and parse user input, raising on failure.

    Args:
        user_input: Raw text from the user

    Returns:
        The parsed reference

    Raises:
        InvalidReferenceError: With the validation message if the input is rejected
    """
    parsed, result = _check_input(user_input)
    if parsed is None:
        raise InvalidReferenceError(result.error, user_input=user_input)
    return parsed
