"""
Quran.com v4 API client.

Fetches a single verse with its word-by-word breakdown, translation and
recitation audio.

Example:
    with QuranApiClient() as client:
        verse = client.fetch_verse(2, 255)
        print(verse.text_uthmani)
"""

import time
from typing import Optional
from urllib.parse import urljoin

import httpx
from pydantic import ValidationError

from quran_flashcards._logging import (
    log_error,
    log_fetch_complete,
    log_fetch_start,
    log_warning,
)
from quran_flashcards.config import QuranFlashcardsSettings, get_settings
from quran_flashcards.exceptions import ApiError, VerseNotFoundError
from quran_flashcards.models import AudioField, Verse


def resolve_audio_url(url: Optional[str], base_url: str) -> Optional[str]:
    """
    Turn an API audio path into an absolute URL.

    The API returns word audio as relative paths ("wbw/002_255_001.mp3") and
    protocol-relative URLs ("//mirrors.quranicaudio.com/..."). Absolute URLs
    are returned unchanged; empty values become None.
    """
    if not url:
        return None
    if url.startswith(("http://", "https://")):
        return url
    if url.startswith("//"):
        return f"https:{url}"
    return urljoin(base_url if base_url.endswith("/") else base_url + "/", url.lstrip("/"))


class QuranApiClient:
    """
    Client for the Quran.com v4 verses endpoint.

    Args:
        settings: Settings instance to use (default: get_settings())
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests
    """

    def __init__(
        self,
        settings: QuranFlashcardsSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings or get_settings()
        self._transport = transport

        # HTTP client (lazy initialization)
        self._client: httpx.Client | None = None

    @property
    def is_loaded(self) -> bool:
        """Whether the HTTP client has been created."""
        return self._client is not None

    @property
    def settings(self) -> QuranFlashcardsSettings:
        return self._settings

    def load(self) -> None:
        """Create the HTTP client."""
        if self._client is not None:
            return

        self._client = httpx.Client(
            base_url=self._settings.api_base_url.rstrip("/"),
            timeout=httpx.Timeout(
                self._settings.request_timeout,
                connect=self._settings.connect_timeout,
            ),
            headers={
                "Accept": "application/json",
                "User-Agent": self._settings.user_agent,
            },
            transport=self._transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "QuranApiClient":
        self.load()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def build_params(self) -> dict[str, str]:
        """Query parameters requesting words, translation and audio."""
        return {
            "words": "true",
            "translations": str(self._settings.translation_id),
            "fields": "text_uthmani,audio_url",
            "word_fields": "text_uthmani,audio",
            "translation_fields": "text",
            "recitation": str(self._settings.recitation_id),
        }

    def fetch_verse(self, surah: int, ayah: int) -> Verse:
        """
        Fetch a verse with its words.

        Args:
            surah: Surah number (1-114)
            ayah: Ayah number

        Returns:
            Verse with absolute audio URLs

        Raises:
            VerseNotFoundError: If the API returns 404
            ApiError: On any other HTTP, transport or payload error
        """
        if self._client is None:
            self.load()

        verse_key = f"{surah}:{ayah}"
        path = f"/verses/by_key/{verse_key}"
        log_fetch_start(verse_key, f"{self._settings.api_base_url}{path}")

        start = time.time()
        try:
            response = self._client.get(path, params=self.build_params())
        except httpx.HTTPError as e:
            log_warning("Verse request failed", verse_key=verse_key, error=e)
            raise ApiError(verse_key=verse_key) from e

        if response.status_code == 404:
            raise VerseNotFoundError(verse_key=verse_key)

        if not response.is_success:
            raise ApiError(status_code=response.status_code, verse_key=verse_key)

        try:
            payload = response.json()
            verse = Verse.model_validate(payload["verse"])
        except (ValueError, KeyError, TypeError, ValidationError) as e:
            log_error("Malformed verse response", verse_key=verse_key, error=e)
            raise ApiError(status_code=response.status_code, verse_key=verse_key) from e

        verse = self._resolve_audio(verse)
        log_fetch_complete(verse_key, len(verse.words), time.time() - start)
        return verse

    def _resolve_audio(self, verse: Verse) -> Verse:
        word_base = self._settings.word_audio_base_url
        verse_base = self._settings.verse_audio_base_url

        words = [
            word.model_copy(
                update={"audio": AudioField(url=resolve_audio_url(word.audio_url, word_base))}
            )
            if word.audio_url
            else word
            for word in verse.words
        ]

        update = {"words": words}
        if verse.audio and verse.audio.url:
            update["audio"] = AudioField(url=resolve_audio_url(verse.audio.url, verse_base))
        if verse.audio_url:
            update["audio_url"] = resolve_audio_url(verse.audio_url, verse_base)
        return verse.model_copy(update=update)


def fetch_verse(surah: int, ayah: int) -> Verse:
    """
    Fetch a single verse using a short-lived client and the active settings.

    Args:
        surah: Surah number (1-114)
        ayah: Ayah number

    Returns:
        Verse with its words
    """
    with QuranApiClient() as client:
        return client.fetch_verse(surah, ayah)
