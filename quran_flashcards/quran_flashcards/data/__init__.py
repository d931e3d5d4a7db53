"""
Quran reference data for the quran-flashcards library.

Provides the static surah name table and name lookups.
"""

from quran_flashcards.data.surahs import (
    MAX_SURAH,
    MIN_SURAH,
    SURAH_NAMES,
    get_surah_display_name,
    get_surah_number,
)

__all__ = [
    "MAX_SURAH",
    "MIN_SURAH",
    "SURAH_NAMES",
    "get_surah_display_name",
    "get_surah_number",
]
