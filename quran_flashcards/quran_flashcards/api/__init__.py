"""
Remote verse data access for the quran-flashcards library.
"""

from quran_flashcards.api.client import QuranApiClient, fetch_verse, resolve_audio_url

__all__ = [
    "QuranApiClient",
    "fetch_verse",
    "resolve_audio_url",
]
