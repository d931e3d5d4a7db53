"""
Verse reference and validation result models.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class ParsedReference(BaseModel):
    """
    A validated (surah, ayah) reference.

    Only the parser creates these from user input; both fields are always valid.

    Attributes:
        surah: Surah number (1-114)
        ayah: Ayah number within the surah (1-based)
    """

    surah: int = Field(
        ...,
        description="Surah number (1-114)",
        ge=1,
        le=114,
    )
    ayah: int = Field(
        ...,
        description="Ayah number within the surah (1-based)",
        ge=1,
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "surah": 2,
                    "ayah": 255,
                }
            ]
        },
    }

    @property
    def verse_key(self) -> str:
        """Reference in "surah:ayah" form, as used by the verse API."""
        return f"{self.surah}:{self.ayah}"

    def __str__(self) -> str:
        return self.verse_key


class ValidationResult(BaseModel):
    """
    Outcome of validating a user-entered reference.

    Attributes:
        valid: Whether the input is an acceptable reference
        error: User-facing error message, set only when invalid
    """

    valid: bool
    error: Optional[str] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _error_iff_invalid(self) -> "ValidationResult":
        if self.valid and self.error is not None:
            raise ValueError("a valid result cannot carry an error")
        if not self.valid and not self.error:
            raise ValueError("an invalid result needs an error message")
        return self

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, error: str) -> "ValidationResult":
        return cls(valid=False, error=error)
