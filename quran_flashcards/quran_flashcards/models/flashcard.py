"""
Flashcard data models.
"""

from typing import Optional

from pydantic import BaseModel, Field

from quran_flashcards.models.reference import ParsedReference


class Flashcard(BaseModel):
    """
    A vocabulary flashcard for one word of a verse.

    Attributes:
        id: Identifier unique within one verse ("word-{id}")
        arabic: Arabic text of the word
        transliteration: Latin transliteration (may be empty)
        meaning: Word translation (may be empty)
        audio_url: Pronunciation audio, or None when no audio is known
    """

    id: str = Field(..., description="Identifier unique within one verse")
    arabic: str = Field(default="", description="Arabic text of the word")
    transliteration: str = Field(default="", description="Latin transliteration")
    meaning: str = Field(default="", description="Word translation")
    audio_url: Optional[str] = Field(
        default=None,
        description="Pronunciation audio URL",
        serialization_alias="audioUrl",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "word-1",
                    "arabic": "ٱللَّهُ",
                    "transliteration": "al-lahu",
                    "meaning": "Allah",
                    "audioUrl": "https://audio.qurancdn.com/wbw/002_255_001.mp3",
                }
            ]
        },
    }

    def __str__(self) -> str:
        return f"Flashcard({self.id}: {self.arabic} = {self.meaning})"


class AyahCard(BaseModel):
    """
    A fetched verse ready for display: its label, text, translation and flashcards.

    Attributes:
        reference: The verse reference
        label: Display label, e.g. "Al-Baqarah 2:255"
        arabic: Full Arabic text of the verse
        translation: Verse translation
        flashcards: One flashcard per word
    """

    reference: ParsedReference
    label: str
    arabic: Optional[str] = None
    translation: Optional[str] = None
    flashcards: list[Flashcard] = Field(default_factory=list)

    @property
    def word_count(self) -> int:
        return len(self.flashcards)

    def __str__(self) -> str:
        return f"AyahCard({self.label}, {self.word_count} words)"
