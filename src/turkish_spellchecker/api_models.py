"""Request and response models for the spell checker HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class WordRequest(BaseModel):
    """Single word to check or correct."""

    word: str = Field(..., max_length=200, description="Word, possibly with trailing punctuation")


class WordCheckResponse(BaseModel):
    word: str
    correct: bool


class SuggestionsResponse(BaseModel):
    word: str
    suggestions: list[str] = Field(default_factory=list)


class SpellcheckRequest(BaseModel):
    """Batch of words, e.g. the words of a paragraph in an editor."""

    words: list[str] = Field(..., min_length=1, description="Words to check, in document order")


class WordResult(BaseModel):
    word: str
    correct: bool
    suggestions: list[str] = Field(
        default_factory=list, description="Only filled in for incorrect words"
    )


class SpellcheckResponse(BaseModel):
    results: list[WordResult]
    misspelled_count: int
    processing_time_ms: int
