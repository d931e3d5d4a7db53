"""
Pydantic data models for the quran-flashcards library.

These models represent the core data structures used throughout the library:
- ParsedReference: A validated (surah, ayah) pair
- ValidationResult: Outcome of validating user input
- WordRecord, Verse: Verse data as returned by the Quran.com API
- Flashcard: A vocabulary card for one word
- AyahCard: A verse ready for display with its flashcards
"""

from quran_flashcards.models.reference import ParsedReference, ValidationResult
from quran_flashcards.models.verse import (
    WORD_CHAR_TYPE,
    AudioField,
    TextField,
    Verse,
    WordRecord,
)
from quran_flashcards.models.flashcard import AyahCard, Flashcard

__all__ = [
    "ParsedReference",
    "ValidationResult",
    "WORD_CHAR_TYPE",
    "AudioField",
    "TextField",
    "Verse",
    "WordRecord",
    "Flashcard",
    "AyahCard",
]
