"""
End-to-end flashcard generation for a user-entered reference.

Sequence: validate input -> parse -> fetch verse -> build flashcards.
"""

from typing import Optional

from quran_flashcards._logging import get_logger, log_flashcards_built
from quran_flashcards.api.client import QuranApiClient
from quran_flashcards.core.flashcards import transform_to_flashcards
from quran_flashcards.core.parser import require_reference
from quran_flashcards.data.surahs import get_surah_display_name
from quran_flashcards.exceptions import EmptyVerseError
from quran_flashcards.models import AyahCard, ParsedReference, Verse

logger = get_logger(__name__)


def build_label(reference: ParsedReference) -> str:
    """Display label such as "Al-Baqarah 2:255"."""
    return f"{get_surah_display_name(reference.surah)} {reference.verse_key}"


def build_ayah_card(reference: ParsedReference, verse: Verse) -> AyahCard:
    """
    Combine a reference and its fetched verse into an AyahCard.

    Raises:
        EmptyVerseError: If the verse has no words
    """
    if not verse.words:
        raise EmptyVerseError(verse_key=reference.verse_key)

    flashcards = transform_to_flashcards(verse.words, verse.fallback_audio_url)
    log_flashcards_built(
        reference.verse_key,
        len(flashcards),
        len(verse.words) - len(flashcards),
    )

    return AyahCard(
        reference=reference,
        label=build_label(reference),
        arabic=verse.text_uthmani or None,
        translation=verse.translation_text,
        flashcards=flashcards,
    )


def generate(user_input: str, client: Optional[QuranApiClient] = None) -> AyahCard:
    """
    Generate flashcards for a user-entered verse reference.

    Args:
        user_input: Reference such as "2:255" or "Al-Baqarah 255"
        client: API client to use; a temporary one is created if omitted

    Returns:
        AyahCard with the verse text, translation and flashcards

    Raises:
        InvalidReferenceError: If the input is not a valid reference
        VerseNotFoundError: If the verse does not exist
        ApiError: On network or API failures
        EmptyVerseError: If the verse has no words
    """
    reference = require_reference(user_input)
    logger.debug(f"Parsed {user_input!r} as {reference.verse_key}")

    if client is not None:
        verse = client.fetch_verse(reference.surah, reference.ayah)
    else:
        with QuranApiClient() as temp_client:
            verse = temp_client.fetch_verse(reference.surah, reference.ayah)

    return build_ayah_card(reference, verse)
