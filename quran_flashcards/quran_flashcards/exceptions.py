"""
Custom exceptions for the quran-flashcards library.

All exceptions inherit from QuranFlashcardsError for easy catching of library-specific errors.

Expected invalid user input is not an exception: the parser returns None and the
validator returns an invalid ValidationResult. These classes cover the places where
a caller asked for a guaranteed result (require_reference, generate) or where the
remote verse API failed.
"""

from typing import Any


# User-facing messages shared by the validator, the API client and the generator
EMPTY_INPUT_MESSAGE = "Please enter an ayah reference"
INVALID_FORMAT_MESSAGE = "Invalid format. Use surah:ayah (e.g., 2:255) or surah name + number"
SURAH_RANGE_MESSAGE = "Surah must be between 1 and 114"
NOT_FOUND_MESSAGE = "Ayah not found. Please check the reference."
NETWORK_ERROR_MESSAGE = "Network error. Please check your connection and try again."
NO_VOCABULARY_MESSAGE = "No vocabulary found for this ayah."


class QuranFlashcardsError(Exception):
    """Base exception for all quran-flashcards errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class InvalidReferenceError(QuranFlashcardsError):
    """Raised when a verse reference cannot be validated or parsed."""

    def __init__(
        self,
        message: str = INVALID_FORMAT_MESSAGE,
        user_input: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if user_input is not None:
            ctx["input"] = repr(user_input)
        super().__init__(message, ctx)
        self.user_input = user_input


class ApiError(QuranFlashcardsError):
    """Raised when the verse API request fails."""

    def __init__(
        self,
        message: str = NETWORK_ERROR_MESSAGE,
        status_code: int | None = None,
        verse_key: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if status_code is not None:
            ctx["status_code"] = status_code
        if verse_key:
            ctx["verse_key"] = verse_key
        super().__init__(message, ctx)
        self.status_code = status_code
        self.verse_key = verse_key


class VerseNotFoundError(ApiError):
    """Raised when the API has no verse for the requested reference."""

    def __init__(self, verse_key: str | None = None) -> None:
        super().__init__(NOT_FOUND_MESSAGE, status_code=404, verse_key=verse_key)


class EmptyVerseError(QuranFlashcardsError):
    """Raised when a fetched verse carries no words to build flashcards from."""

    def __init__(
        self,
        message: str = NO_VOCABULARY_MESSAGE,
        verse_key: str | None = None,
    ) -> None:
        super().__init__(message, {"verse_key": verse_key} if verse_key else None)
        self.verse_key = verse_key


class ConfigurationError(QuranFlashcardsError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        setting_name: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if setting_name:
            ctx["setting"] = setting_name
        super().__init__(message, ctx)
        self.setting_name = setting_name
