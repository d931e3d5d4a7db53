"""
quran-flashcards — Word-by-word vocabulary flashcards for Quran verses.

Usage:
    from quran_flashcards import parse_reference, validate_input, generate

    # Parse a reference
    ref = parse_reference("Al-Baqarah 255")   # ParsedReference(surah=2, ayah=255)

    # Validate before fetching
    result = validate_input("   ")
    print(result.error)                        # "Please enter an ayah reference"

    # Fetch the verse and build flashcards
    card = generate("2:255")
    for flashcard in card.flashcards:
        print(f"{flashcard.arabic}: {flashcard.meaning}")
"""

from quran_flashcards.models import (
    AyahCard,
    Flashcard,
    ParsedReference,
    ValidationResult,
    Verse,
    WordRecord,
)
from quran_flashcards.config import (
    QuranFlashcardsSettings,
    get_settings,
    configure,
    reset_settings,
)
from quran_flashcards.core import (
    parse_reference,
    validate_input,
    require_reference,
    transform_to_flashcards,
)
from quran_flashcards.data import SURAH_NAMES, get_surah_display_name, get_surah_number
from quran_flashcards.api import QuranApiClient, fetch_verse
from quran_flashcards.generator import generate
from quran_flashcards.exceptions import (
    QuranFlashcardsError,
    InvalidReferenceError,
    ApiError,
    VerseNotFoundError,
    EmptyVerseError,
    ConfigurationError,
)

__version__ = "1.0.0"
__all__ = [
    # Version
    "__version__",
    # Models
    "AyahCard",
    "Flashcard",
    "ParsedReference",
    "ValidationResult",
    "Verse",
    "WordRecord",
    # Config
    "QuranFlashcardsSettings",
    "get_settings",
    "configure",
    "reset_settings",
    # Core
    "parse_reference",
    "validate_input",
    "require_reference",
    "transform_to_flashcards",
    # Data
    "SURAH_NAMES",
    "get_surah_display_name",
    "get_surah_number",
    # API
    "QuranApiClient",
    "fetch_verse",
    "generate",
    # Exceptions
    "QuranFlashcardsError",
    "InvalidReferenceError",
    "ApiError",
    "VerseNotFoundError",
    "EmptyVerseError",
    "ConfigurationError",
]
