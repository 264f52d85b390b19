"""API routes for the saved word collection."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from wordjotter.application.learning.use_cases.words.delete_word_use_case import (
    DeleteWordUseCase,
)
from wordjotter.application.learning.use_cases.words.get_notebook_stats_use_case import (
    GetNotebookStatsUseCase,
)
from wordjotter.application.learning.use_cases.words.get_words_use_case import GetWordsUseCase
from wordjotter.application.learning.use_cases.words.save_word_use_case import SaveWordUseCase
from wordjotter.config import get_settings
from wordjotter.core import container
from wordjotter.domain.common.exceptions import DomainError
from wordjotter.exceptions import WordJotterError
from wordjotter.infrastructure.common.clock import local_now
from wordjotter.infrastructure.common.di import inject_use_case
from wordjotter.infrastructure.learning.mappers.word_schema_mapper import to_word_schema
from wordjotter.infrastructure.learning.schemas import (
    NotebookStatsResponse,
    WordCreateRequest,
    WordCreateResponse,
    WordDeleteResponse,
    WordsListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/words", tags=["words"])


@router.post(
    "",
    response_model=WordCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def save_word(
    request: WordCreateRequest,
    use_case: SaveWordUseCase = Depends(
        inject_use_case(
            container.save_word_use_case,
            vocabulary_store=container.vocabulary_repository,
            quick_note_store=container.quick_note_repository,
        )
    ),
) -> WordCreateResponse:
    """
    Save a word to the notebook.

    The word starts at mastery level 0 with no review date, so it is due
    in the next review session.
    """
    try:
        item = use_case.save_word(
            word=request.word,
            language=request.language,
            definition=request.definition,
            phonetic=request.phonetic,
            example=request.example,
            notes=request.notes,
            category=request.category,
            quick_note_id=request.quick_note_id,
        )
        return WordCreateResponse(
            success=True,
            message="Word saved successfully",
            word=to_word_schema(item),
        )
    except (WordJotterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to save word '{request.word}': {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("", response_model=WordsListResponse, status_code=status.HTTP_200_OK)
def get_words(
    category: str | None = Query(None, description="Only return words in this category"),
    use_case: GetWordsUseCase = Depends(
        inject_use_case(
            container.get_words_use_case,
            vocabulary_store=container.vocabulary_repository,
        )
    ),
) -> WordsListResponse:
    """List saved words, newest first."""
    try:
        items = use_case.get_words(category=category)
        return WordsListResponse(words=[to_word_schema(item) for item in items])
    except (WordJotterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list words: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/recent", response_model=WordsListResponse, status_code=status.HTTP_200_OK)
def get_recent_words(
    limit: int | None = Query(None, ge=1, le=100, description="Number of words to return"),
    use_case: GetWordsUseCase = Depends(
        inject_use_case(
            container.get_words_use_case,
            vocabulary_store=container.vocabulary_repository,
        )
    ),
) -> WordsListResponse:
    """List the most recently saved words."""
    try:
        items = use_case.get_recent_words(limit or get_settings().RECENT_WORDS_LIMIT)
        return WordsListResponse(words=[to_word_schema(item) for item in items])
    except (WordJotterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list recent words: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/stats", response_model=NotebookStatsResponse, status_code=status.HTTP_200_OK)
def get_notebook_stats(
    use_case: GetNotebookStatsUseCase = Depends(
        inject_use_case(
            container.get_notebook_stats_use_case,
            vocabulary_store=container.vocabulary_repository,
        )
    ),
) -> NotebookStatsResponse:
    """Count saved words by language, mastery level and due state."""
    try:
        stats = use_case.get_stats(now=local_now())
        return NotebookStatsResponse(
            total=stats.total,
            due=stats.due,
            by_language=stats.by_language,
            by_mastery_level=stats.by_mastery_level,
        )
    except (WordJotterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to compute notebook stats: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{word_id}",
    response_model=WordDeleteResponse,
    status_code=status.HTTP_200_OK,
)
def delete_word(
    word_id: Annotated[int, Path(ge=1)],
    use_case: DeleteWordUseCase = Depends(
        inject_use_case(
            container.delete_word_use_case,
            vocabulary_store=container.vocabulary_repository,
        )
    ),
) -> WordDeleteResponse:
    """
    Delete a word.

    Raises:
        HTTPException: If word not found or deletion fails
    """
    try:
        use_case.delete_word(item_id=word_id)
        return WordDeleteResponse(
            success=True,
            message="Word deleted successfully",
        )
    except (WordJotterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete word {word_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
