"""API routes for quick notes jotted down for later lookup."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from wordjotter.application.learning.use_cases.quick_notes.delete_quick_note_use_case import (
    DeleteQuickNoteUseCase,
)
from wordjotter.application.learning.use_cases.quick_notes.get_quick_notes_use_case import (
    GetQuickNotesUseCase,
)
from wordjotter.application.learning.use_cases.quick_notes.jot_quick_note_use_case import (
    JotQuickNoteUseCase,
)
from wordjotter.application.learning.use_cases.quick_notes.mark_quick_note_processed_use_case import (  # noqa: E501
    MarkQuickNoteProcessedUseCase,
)
from wordjotter.core import container
from wordjotter.domain.common.exceptions import DomainError
from wordjotter.exceptions import WordJotterError
from wordjotter.infrastructure.common.di import inject_use_case
from wordjotter.infrastructure.learning.mappers.word_schema_mapper import to_quick_note_schema
from wordjotter.infrastructure.learning.schemas import (
    QuickNoteCreateRequest,
    QuickNoteDeleteResponse,
    QuickNoteResponse,
    QuickNotesListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quick-notes", tags=["quick-notes"])


@router.post("", response_model=QuickNoteResponse, status_code=status.HTTP_201_CREATED)
def jot_quick_note(
    request: QuickNoteCreateRequest,
    use_case: JotQuickNoteUseCase = Depends(
        inject_use_case(
            container.jot_quick_note_use_case,
            quick_note_store=container.quick_note_repository,
        )
    ),
) -> QuickNoteResponse:
    """Jot down a word to look up later."""
    try:
        note = use_case.jot(word=request.word, language=request.language, notes=request.notes)
        return QuickNoteResponse(
            success=True,
            message="Quick note saved",
            quick_note=to_quick_note_schema(note),
        )
    except (WordJotterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to save quick note '{request.word}': {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("", response_model=QuickNotesListResponse, status_code=status.HTTP_200_OK)
def get_quick_notes(
    include_processed: bool = Query(False, description="Also list processed notes"),
    q: str | None = Query(None, max_length=255, description="Filter by word text"),
    use_case: GetQuickNotesUseCase = Depends(
        inject_use_case(
            container.get_quick_notes_use_case,
            quick_note_store=container.quick_note_repository,
        )
    ),
) -> QuickNotesListResponse:
    """
    List quick notes, newest first.

    Only unprocessed notes are listed unless include_processed is set.
    """
    try:
        notes = use_case.get_quick_notes(include_processed=include_processed, query=q)
        return QuickNotesListResponse(quick_notes=[to_quick_note_schema(n) for n in notes])
    except (WordJotterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list quick notes: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{note_id}/processed",
    response_model=QuickNoteResponse,
    status_code=status.HTTP_200_OK,
)
def mark_quick_note_processed(
    note_id: Annotated[int, Path(ge=1)],
    use_case: MarkQuickNoteProcessedUseCase = Depends(
        inject_use_case(
            container.mark_quick_note_processed_use_case,
            quick_note_store=container.quick_note_repository,
        )
    ),
) -> QuickNoteResponse:
    """
    Mark a quick note as processed.

    Raises:
        HTTPException: If the note is not found
    """
    try:
        note = use_case.mark_processed(note_id)
        return QuickNoteResponse(
            success=True,
            message="Quick note marked as processed",
            quick_note=to_quick_note_schema(note),
        )
    except (WordJotterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to process quick note {note_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{note_id}",
    response_model=QuickNoteDeleteResponse,
    status_code=status.HTTP_200_OK,
)
def delete_quick_note(
    note_id: Annotated[int, Path(ge=1)],
    use_case: DeleteQuickNoteUseCase = Depends(
        inject_use_case(
            container.delete_quick_note_use_case,
            quick_note_store=container.quick_note_repository,
        )
    ),
) -> QuickNoteDeleteResponse:
    """
    Delete a quick note.

    Raises:
        HTTPException: If the note is not found
    """
    try:
        use_case.delete_quick_note(note_id)
        return QuickNoteDeleteResponse(success=True, message="Quick note deleted")
    except (WordJotterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete quick note {note_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
