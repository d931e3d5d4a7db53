"""
Word-to-flashcard transformation.
"""

from typing import Any, Iterable, Mapping, Optional, Union

from quran_flashcards.models import Flashcard, WordRecord

WordInput = Union[WordRecord, Mapping[str, Any]]


def _as_word(word: Any) -> Optional[WordRecord]:
    if isinstance(word, WordRecord):
        return word
    if isinstance(word, Mapping):
        return WordRecord.model_validate(word)
    return None


def transform_to_flashcards(
    words: Iterable[WordInput],
    verse_audio_url: Optional[str] = None,
) -> list[Flashcard]:
    """
    Build one flashcard per word of a verse.

    Only tokens with char_type_name == "word" are kept; end-of-verse and pause
    markers are dropped, as are entries that are not objects at all. Missing
    or mistyped text fields become empty strings. Audio comes from the word
    itself, else from verse_audio_url, else None.

    Args:
        words: Verse tokens as WordRecord models or raw API dicts
        verse_audio_url: Verse-level audio used for words without their own

    Returns:
        Flashcards in the same order as the source words
    """
    parsed = (_as_word(w) for w in words)
    actual_words = [w for w in parsed if w is not None and w.is_word]

    return [
        Flashcard(
            id=f"word-{word.id or index}",
            arabic=word.text_uthmani or "",
            transliteration=word.transliteration_text or "",
            meaning=word.translation_text or "",
            audio_url=word.audio_url or verse_audio_url or None,
        )
        for index, word in enumerate(actual_words)
    ]
