import copy

import httpx
import pytest

from quran_flashcards.api import QuranApiClient
from quran_flashcards.config import QuranFlashcardsSettings, reset_settings


# Trimmed Quran.com v4 response for 112:1
SAMPLE_VERSE_PAYLOAD = {
    "verse": {
        "id": 6222,
        "verse_key": "112:1",
        "text_uthmani": "قُلْ هُوَ ٱللَّهُ أَحَدٌ",
        "audio": {"url": "Alafasy/mp3/112001.mp3"},
        "translations": [
            {"id": 1, "resource_id": 131, "text": "Say, He is Allah, One."}
        ],
        "words": [
            {
                "id": 1,
                "position": 1,
                "char_type_name": "word",
                "text_uthmani": "قُلْ",
                "audio": {"url": "wbw/112_001_001.mp3"},
                "translation": {"text": "Say", "language_name": "english"},
                "transliteration": {"text": "qul", "language_name": "english"},
            },
            {
                "id": 2,
                "position": 2,
                "char_type_name": "word",
                "text_uthmani": "هُوَ",
                "audio": {"url": "wbw/112_001_002.mp3"},
                "translation": {"text": "He", "language_name": "english"},
                "transliteration": {"text": "huwa", "language_name": "english"},
            },
            {
                "id": 3,
                "position": 3,
                "char_type_name": "word",
                "text_uthmani": "ٱللَّهُ",
                "audio": {"url": None},
                "translation": {"text": "(is) Allah", "language_name": "english"},
                "transliteration": {"text": "l-lahu", "language_name": "english"},
            },
            {
                "id": 4,
                "position": 4,
                "char_type_name": "word",
                "text_uthmani": "أَحَدٌ",
                "audio": {"url": "wbw/112_001_004.mp3"},
                "translation": {"text": "the One", "language_name": "english"},
                "transliteration": {"text": "aḥadun", "language_name": "english"},
            },
            {
                "id": 5,
                "position": 5,
                "char_type_name": "end",
                "text_uthmani": "١",
                "audio": {"url": None},
                "translation": {"text": "(1)", "language_name": "english"},
                "transliteration": {"text": None, "language_name": "english"},
            },
        ],
    }
}


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def verse_payload():
    return copy.deepcopy(SAMPLE_VERSE_PAYLOAD)


@pytest.fixture
def settings():
    return QuranFlashcardsSettings(
        api_base_url="https://api.example.test/api/v4",
        word_audio_base_url="https://audio.example.test/",
        verse_audio_base_url="https://verses.example.test/",
    )


@pytest.fixture
def make_client(settings):
    """Build a QuranApiClient whose requests are answered by a handler function."""
    clients = []

    def _make(handler):
        client = QuranApiClient(settings=settings, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def recorded_requests():
    return []


@pytest.fixture
def verse_client(make_client, verse_payload, recorded_requests):
    """Client that answers every request with the sample verse."""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        return httpx.Response(200, json=verse_payload)

    return make_client(handler)
