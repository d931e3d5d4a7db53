"""
Core modules for the quran-flashcards library.

This package contains the pure business logic for:
- Verse reference parsing and validation
- Word-to-flashcard transformation
"""

from quran_flashcards.core.parser import (
    parse_reference,
    validate_input,
    require_reference,
)
from quran_flashcards.core.flashcards import transform_to_flashcards

__all__ = [
    # Parser
    "parse_reference",
    "validate_input",
    "require_reference",
    # Flashcards
    "transform_to_flashcards",
]
