"""Pydantic schemas for quick note API request/response validation."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class QuickNoteCreateRequest(BaseModel):
    """Schema for jotting down a quick note."""

    word: str = Field(..., min_length=1, max_length=255, description="The word to look up later")
    language: Literal["en", "fi"] = Field("en", description="Language code of the word")
    notes: str = Field("", description="Context the word was heard or read in")


class QuickNote(BaseModel):
    """Schema for a quick note response."""

    id: int
    word: str
    language: Literal["en", "fi"]
    notes: str
    processed: bool
    created_at: datetime | None = None


class QuickNoteResponse(BaseModel):
    """Schema for a single quick note change."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    quick_note: QuickNote = Field(..., description="The quick note")


class QuickNoteDeleteResponse(BaseModel):
    """Schema for quick note deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class QuickNotesListResponse(BaseModel):
    """Schema for list of quick notes response."""

    quick_notes: list[QuickNote] = Field(..., description="List of quick notes")
