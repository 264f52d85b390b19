"""API routes for flashcard review sessions."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from wordjotter.application.learning.use_cases.review.get_due_items_use_case import (
    GetDueItemsUseCase,
)
from wordjotter.application.learning.use_cases.review.record_review_outcome_use_case import (
    RecordReviewOutcomeUseCase,
)
from wordjotter.core import container
from wordjotter.domain.common.exceptions import DomainError
from wordjotter.exceptions import WordJotterError
from wordjotter.infrastructure.common.clock import local_now
from wordjotter.infrastructure.common.di import inject_use_case
from wordjotter.infrastructure.learning.mappers.word_schema_mapper import to_word_schema
from wordjotter.infrastructure.learning.schemas import (
    ReviewOutcomeRequest,
    ReviewOutcomeResponse,
    ReviewSessionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/review", tags=["review"])


@router.get("/due", response_model=ReviewSessionResponse, status_code=status.HTTP_200_OK)
def get_due_words(
    use_case: GetDueItemsUseCase = Depends(
        inject_use_case(
            container.get_due_items_use_case,
            vocabulary_store=container.vocabulary_repository,
        )
    ),
) -> ReviewSessionResponse:
    """
    Get the words due for review, shuffled for a practice session.

    Raises:
        HTTPException: 503 if the vocabulary store cannot be read
    """
    try:
        items = use_case.get_due_items(now=local_now())
        return ReviewSessionResponse(words=[to_word_schema(item) for item in items])
    except (WordJotterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to build review session: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{word_id}/outcome",
    response_model=ReviewOutcomeResponse,
    status_code=status.HTTP_200_OK,
)
def record_review_outcome(
    word_id: Annotated[int, Path(ge=1)],
    request: ReviewOutcomeRequest,
    use_case: RecordReviewOutcomeUseCase = Depends(
        inject_use_case(
            container.record_review_outcome_use_case,
            vocabulary_store=container.vocabulary_repository,
        )
    ),
) -> ReviewOutcomeResponse:
    """
    Record a flashcard answer and reschedule the word.

    Args:
        word_id: ID of the reviewed word
        request: Whether the user recalled the word
        use_case: RecordReviewOutcomeUseCase injected via dependency container

    Returns:
        Word with its new mastery level and next review date

    Raises:
        HTTPException: If word not found or the store fails
    """
    try:
        item = use_case.record_outcome(
            item_id=word_id,
            was_recalled_correctly=request.was_recalled_correctly,
            now=local_now(),
        )
        return ReviewOutcomeResponse(
            success=True,
            message="Review outcome recorded",
            word=to_word_schema(item),
        )
    except (WordJotterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to record review outcome for word {word_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
