"""Pydantic schemas for vocabulary and review API request/response validation."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field


class WordBase(BaseModel):
    """Base schema for a saved word."""

    word: str = Field(..., min_length=1, max_length=255, description="The word itself")
    language: Literal["en", "fi"] = Field(..., description="Language code of the word")
    definition: str | None = Field(None, description="Definition text")
    phonetic: str | None = Field(None, max_length=255, description="Pronunciation")
    example: str | None = Field(None, description="Example sentence")
    notes: str = Field("", description="Free-form user notes")
    category: str | None = Field(
        None, max_length=100, description="Category, e.g. part of speech"
    )


class WordCreateRequest(WordBase):
    """Schema for saving a new word."""

    quick_note_id: int | None = Field(
        None, ge=1, description="Quick note the word was looked up from"
    )


class Word(WordBase):
    """Schema for a saved word response."""

    id: int
    category: str
    mastery_level: int = Field(..., description="Current mastery level")
    next_review_at: date | None = Field(
        None, description="Day the word is due again, null if never reviewed"
    )
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class WordCreateResponse(BaseModel):
    """Schema for word creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    word: Word = Field(..., description="Saved word")


class WordDeleteResponse(BaseModel):
    """Schema for word deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class WordsListResponse(BaseModel):
    """Schema for list of words response."""

    words: list[Word] = Field(..., description="List of words")


class NotebookStatsResponse(BaseModel):
    """Schema for notebook statistics."""

    total: int = Field(..., description="Number of saved words")
    due: int = Field(..., description="Number of words due for review now")
    by_language: dict[str, int] = Field(..., description="Word count per language")
    by_mastery_level: dict[int, int] = Field(..., description="Word count per mastery level")


class ReviewSessionResponse(BaseModel):
    """Schema for the words of a review session, in presentation order."""

    words: list[Word] = Field(..., description="Due words in random order")


class ReviewOutcomeRequest(BaseModel):
    """Schema for reporting a flashcard answer."""

    was_recalled_correctly: bool = Field(..., description="Whether the user knew the word")


class ReviewOutcomeResponse(BaseModel):
    """Schema for review outcome response."""

    success: bool = Field(..., description="Whether the outcome was recorded")
    message: str = Field(..., description="Response message")
    word: Word = Field(..., description="Word with its new mastery state")
