"""
Verse data models matching the Quran.com v4 API response.

Only the fields used by this library are declared; anything else in the
payload is ignored. Word fields of the wrong shape are read as missing
rather than rejected, so a partly malformed word still yields a flashcard.
"""

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

# char_type_name of tokens that are real words (others: "end", "pause", ...)
WORD_CHAR_TYPE = "word"


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


class TextField(BaseModel):
    """A nested {"text": ...} object."""

    text: Optional[str] = None

    model_config = {"extra": "ignore"}

    @field_validator("text", mode="before")
    @classmethod
    def text_must_be_string(cls, value: Any) -> Optional[str]:
        return _str_or_none(value)


class AudioField(BaseModel):
    """A nested {"url": ...} object."""

    url: Optional[str] = None

    model_config = {"extra": "ignore"}

    @field_validator("url", mode="before")
    @classmethod
    def url_must_be_string(cls, value: Any) -> Optional[str]:
        return _str_or_none(value)


class WordRecord(BaseModel):
    """
    A single token of a verse as returned by the API.

    Attributes:
        id: Word id (may be missing or 0)
        text_uthmani: Arabic text of the word
        translation: Word translation ({"text": ...})
        transliteration: Word transliteration ({"text": ...})
        audio: Word pronunciation audio ({"url": ...})
        char_type_name: Token kind ("word", "end", "pause", ...)
    """

    id: Optional[int | str] = None
    text_uthmani: Optional[str] = None
    translation: Optional[TextField] = None
    transliteration: Optional[TextField] = None
    audio: Optional[AudioField] = None
    char_type_name: Optional[str] = Field(default=None, description="Token kind")

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "text_uthmani": "ٱللَّهُ",
                    "translation": {"text": "Allah"},
                    "transliteration": {"text": "al-lahu"},
                    "audio": {"url": "wbw/002_255_001.mp3"},
                    "char_type_name": "word",
                }
            ]
        },
    }

    @field_validator("id", mode="before")
    @classmethod
    def id_must_be_int_or_string(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            return None
        return value

    @field_validator("text_uthmani", "char_type_name", mode="before")
    @classmethod
    def must_be_string(cls, value: Any) -> Optional[str]:
        return _str_or_none(value)

    @field_validator("translation", "transliteration", "audio", mode="before")
    @classmethod
    def must_be_object(cls, value: Any) -> Any:
        if isinstance(value, (Mapping, BaseModel)):
            return value
        return None

    @property
    def is_word(self) -> bool:
        return self.char_type_name == WORD_CHAR_TYPE

    @property
    def audio_url(self) -> Optional[str]:
        return self.audio.url if self.audio else None

    @property
    def translation_text(self) -> Optional[str]:
        return self.translation.text if self.translation else None

    @property
    def transliteration_text(self) -> Optional[str]:
        return self.transliteration.text if self.transliteration else None


class Verse(BaseModel):
    """
    A verse with its word breakdown.

    Attributes:
        id: Verse id (1-6236)
        verse_key: Reference in "surah:ayah" form
        text_uthmani: Full Arabic text of the verse
        audio_url: Verse recitation audio path (flat form)
        audio: Verse recitation audio ({"url": ...})
        translations: Verse-level translations
        words: Ordered tokens of the verse
    """

    id: Optional[int] = None
    verse_key: Optional[str] = None
    text_uthmani: Optional[str] = None
    audio_url: Optional[str] = None
    audio: Optional[AudioField] = None
    translations: list[TextField] = Field(default_factory=list)
    words: list[WordRecord] = Field(default_factory=list)

    model_config = {"extra": "ignore"}

    @property
    def fallback_audio_url(self) -> Optional[str]:
        """Verse-level audio used when a word has none of its own."""
        if self.audio and self.audio.url:
            return self.audio.url
        return self.audio_url or None

    @property
    def translation_text(self) -> Optional[str]:
        """
        Verse translation: the first verse-level translation, else the
        word translations joined with spaces, else None.
        """
        if self.translations and self.translations[0].text:
            return self.translations[0].text

        joined = " ".join(
            word.translation_text or "" for word in self.words if word.is_word
        ).strip()
        return joined or None

    def __str__(self) -> str:
        return f"Verse({self.verse_key}, {len(self.words)} words)"
