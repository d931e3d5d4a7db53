"""
Configuration for the quran-flashcards library.

Settings are read from environment variables prefixed with QURAN_FLASHCARDS_
(or a local .env file) and can be overridden programmatically:

    from quran_flashcards import configure

    configure(translation_id=20, request_timeout=5.0)

Or using environment variables:
    export QURAN_FLASHCARDS_API_BASE_URL="https://api.quran.com/api/v4"
    export QURAN_FLASHCARDS_RECITATION_ID=7
"""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quran_flashcards.exceptions import ConfigurationError


class QuranFlashcardsSettings(BaseSettings):
    """
    Runtime settings for the verse API client.

    Attributes:
        api_base_url: Base URL of the Quran.com v4 API
        word_audio_base_url: Base URL prepended to relative word audio paths
        verse_audio_base_url: Base URL prepended to relative verse audio paths
        translation_id: Translation resource to request (131 = Dr. Mustafa Khattab)
        recitation_id: Recitation resource to request (7 = Mishari Rashid al-Afasy)
        request_timeout: Total request timeout in seconds
        connect_timeout: Connection timeout in seconds
        user_agent: User-Agent header sent with every request
    """

    model_config = SettingsConfigDict(
        env_prefix="QURAN_FLASHCARDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = Field(
        default="https://api.quran.com/api/v4",
        description="Base URL of the Quran.com v4 API",
    )
    word_audio_base_url: str = Field(
        default="https://audio.qurancdn.com/",
        description="Base URL for relative word-by-word audio paths",
    )
    verse_audio_base_url: str = Field(
        default="https://verses.quran.com/",
        description="Base URL for relative verse recitation audio paths",
    )
    translation_id: int = Field(
        default=131,
        description="Translation resource id",
        ge=1,
    )
    recitation_id: int = Field(
        default=7,
        description="Recitation resource id",
        ge=1,
    )
    request_timeout: float = Field(
        default=10.0,
        description="Total request timeout in seconds",
        gt=0.0,
    )
    connect_timeout: float = Field(
        default=5.0,
        description="Connection timeout in seconds",
        gt=0.0,
    )
    user_agent: str = Field(
        default="quran-flashcards/1.0",
        description="User-Agent header for API requests",
    )

    @field_validator("api_base_url", "word_audio_base_url", "verse_audio_base_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("must be an http(s) URL")
        return value


_settings: QuranFlashcardsSettings | None = None


def get_settings() -> QuranFlashcardsSettings:
    """
    Get the active settings, loading them from the environment on first use.

    Returns:
        Shared QuranFlashcardsSettings instance

    Raises:
        ConfigurationError: If environment values are invalid
    """
    global _settings
    if _settings is None:
        _settings = _build_settings()
    return _settings


def configure(**overrides) -> QuranFlashcardsSettings:
    """
    Replace the active settings, applying keyword overrides on top of the environment.

    Args:
        **overrides: Setting values to override (e.g. translation_id=20)

    Returns:
        The new active settings

    Raises:
        ConfigurationError: If an override is unknown or invalid
    """
    global _settings
    unknown = set(overrides) - set(QuranFlashcardsSettings.model_fields)
    if unknown:
        name = sorted(unknown)[0]
        raise ConfigurationError(f"Unknown setting: {name}", setting_name=name)

    _settings = _build_settings(**overrides)
    return _settings


def reset_settings() -> None:
    """Forget the active settings so the next get_settings() reloads them."""
    global _settings
    _settings = None


def _build_settings(**overrides) -> QuranFlashcardsSettings:
    try:
        return QuranFlashcardsSettings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        name = ".".join(str(part) for part in first["loc"]) or None
        raise ConfigurationError(
            f"Invalid configuration: {first['msg']}",
            setting_name=name,
        ) from e
