"""
Tests for the Quran.com API client.

Requests never leave the process: every client is backed by httpx.MockTransport.
"""

import logging

import httpx
import pytest

from quran_flashcards._logging import LOGGER_NAME
from quran_flashcards.api import QuranApiClient, resolve_audio_url
from quran_flashcards.exceptions import (
    NETWORK_ERROR_MESSAGE,
    NOT_FOUND_MESSAGE,
    ApiError,
    VerseNotFoundError,
)


class TestResolveAudioUrl:

    BASE = "https://audio.example.test/"

    def test_relative_path(self):
        assert resolve_audio_url("wbw/112_001_001.mp3", self.BASE) == (
            "https://audio.example.test/wbw/112_001_001.mp3"
        )

    def test_leading_slash(self):
        assert resolve_audio_url("/wbw/a.mp3", self.BASE) == "https://audio.example.test/wbw/a.mp3"

    def test_base_without_trailing_slash(self):
        assert resolve_audio_url("a.mp3", "https://cdn.example.test/audio") == (
            "https://cdn.example.test/audio/a.mp3"
        )

    def test_absolute_url_unchanged(self):
        url = "https://mirrors.example.test/a.mp3"
        assert resolve_audio_url(url, self.BASE) == url

    def test_protocol_relative(self):
        assert resolve_audio_url("//mirrors.example.test/a.mp3", self.BASE) == (
            "https://mirrors.example.test/a.mp3"
        )

    @pytest.mark.parametrize("url", [None, ""])
    def test_empty(self, url):
        assert resolve_audio_url(url, self.BASE) is None


class TestFetchVerse:

    def test_request_shape(self, verse_client, recorded_requests):
        verse_client.fetch_verse(112, 1)

        (request,) = recorded_requests
        assert request.method == "GET"
        assert request.url.host == "api.example.test"
        assert request.url.path == "/api/v4/verses/by_key/112:1"
        params = request.url.params
        assert params["words"] == "true"
        assert params["translations"] == "131"
        assert params["recitation"] == "7"
        assert params["fields"] == "text_uthmani,audio_url"
        assert params["word_fields"] == "text_uthmani,audio"
        assert params["translation_fields"] == "text"
        assert request.headers["User-Agent"] == "quran-flashcards/1.0"

    def test_parses_verse(self, verse_client):
        verse = verse_client.fetch_verse(112, 1)
        assert verse.verse_key == "112:1"
        assert verse.text_uthmani == "قُلْ هُوَ ٱللَّهُ أَحَدٌ"
        assert len(verse.words) == 5

    def test_resolves_audio_urls(self, verse_client):
        verse = verse_client.fetch_verse(112, 1)
        assert verse.words[0].audio_url == "https://audio.example.test/wbw/112_001_001.mp3"
        assert verse.words[2].audio_url is None
        assert verse.fallback_audio_url == "https://verses.example.test/Alafasy/mp3/112001.mp3"

    def test_settings_select_translation_and_recitation(self, settings, verse_payload):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=verse_payload)

        custom = settings.model_copy(update={"translation_id": 20, "recitation_id": 3})
        with QuranApiClient(settings=custom, transport=httpx.MockTransport(handler)) as client:
            client.fetch_verse(112, 1)
        assert seen[0].url.params["translations"] == "20"
        assert seen[0].url.params["recitation"] == "3"

    def test_not_found(self, make_client):
        client = make_client(lambda request: httpx.Response(404, json={"status": 404}))
        with pytest.raises(VerseNotFoundError) as exc_info:
            client.fetch_verse(1, 999)
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == NOT_FOUND_MESSAGE
        assert exc_info.value.verse_key == "1:999"

    @pytest.mark.parametrize("status", [400, 429, 500, 503])
    def test_http_error(self, make_client, status):
        client = make_client(lambda request: httpx.Response(status))
        with pytest.raises(ApiError) as exc_info:
            client.fetch_verse(2, 255)
        assert not isinstance(exc_info.value, VerseNotFoundError)
        assert exc_info.value.status_code == status
        assert exc_info.value.message == NETWORK_ERROR_MESSAGE

    def test_transport_error(self, make_client):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)
        with pytest.raises(ApiError) as exc_info:
            client.fetch_verse(2, 255)
        assert exc_info.value.status_code is None
        assert exc_info.value.message == NETWORK_ERROR_MESSAGE
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="not json"),
            httpx.Response(200, json={"unexpected": True}),
            httpx.Response(200, json=[1, 2, 3]),
            httpx.Response(200, json={"verse": None}),
        ],
    )
    def test_malformed_payload(self, make_client, response):
        client = make_client(lambda request: response)
        with pytest.raises(ApiError) as exc_info:
            client.fetch_verse(2, 255)
        assert exc_info.value.message == NETWORK_ERROR_MESSAGE


class TestFailureLogging:
    """Failed fetches are logged under the package logger before raising."""

    def test_transport_error_logs_warning(self, make_client, caplog):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            with pytest.raises(ApiError):
                client.fetch_verse(2, 255)

        (record,) = [r for r in caplog.records if r.name == LOGGER_NAME]
        assert record.levelno == logging.WARNING
        assert "verse_key=2:255" in record.getMessage()
        assert "connection refused" in record.getMessage()

    def test_malformed_payload_logs_error(self, make_client, caplog):
        client = make_client(lambda request: httpx.Response(200, text="not json"))
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            with pytest.raises(ApiError):
                client.fetch_verse(2, 255)

        (record,) = [r for r in caplog.records if r.name == LOGGER_NAME]
        assert record.levelno == logging.ERROR
        assert "Malformed verse response" in record.getMessage()
        assert "verse_key=2:255" in record.getMessage()

    def test_http_status_errors_are_not_logged(self, make_client, caplog):
        client = make_client(lambda request: httpx.Response(500))
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            with pytest.raises(ApiError):
                client.fetch_verse(2, 255)
        assert not [r for r in caplog.records if r.name == LOGGER_NAME]


class TestClientLifecycle:

    def test_lazy_load(self, settings):
        client = QuranApiClient(settings=settings, transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        assert not client.is_loaded
        client.load()
        assert client.is_loaded
        client.close()
        assert not client.is_loaded

    def test_context_manager(self, settings, verse_payload):
        transport = httpx.MockTransport(lambda r: httpx.Response(200, json=verse_payload))
        with QuranApiClient(settings=settings, transport=transport) as client:
            assert client.is_loaded
            client.fetch_verse(112, 1)
        assert not client.is_loaded

    def test_fetch_loads_on_demand(self, verse_client):
        assert not verse_client.is_loaded
        verse_client.fetch_verse(112, 1)
        assert verse_client.is_loaded

    def test_close_is_idempotent(self, settings):
        client = QuranApiClient(settings=settings)
        client.close()
        client.close()
        assert not client.is_loaded
