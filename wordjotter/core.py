import random

from dependency_injector import containers, providers

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
from wordjotter.application.learning.use_cases.review.get_due_items_use_case import (
    GetDueItemsUseCase,
)
from wordjotter.application.learning.use_cases.review.record_review_outcome_use_case import (
    RecordReviewOutcomeUseCase,
)
from wordjotter.application.learning.use_cases.words.delete_word_use_case import (
    DeleteWordUseCase,
)
from wordjotter.application.learning.use_cases.words.get_notebook_stats_use_case import (
    GetNotebookStatsUseCase,
)
from wordjotter.application.learning.use_cases.words.get_words_use_case import GetWordsUseCase
from wordjotter.application.learning.use_cases.words.save_word_use_case import SaveWordUseCase
from wordjotter.config import get_settings
from wordjotter.domain.learning.services.review_scheduler import ReviewScheduler
from wordjotter.domain.learning.value_objects.review_intervals import ReviewIntervals
from wordjotter.infrastructure.learning.repositories.quick_note_repository import (
    QuickNoteRepository,
)
from wordjotter.infrastructure.learning.repositories.vocabulary_repository import (
    VocabularyRepository,
)


class Container(containers.DeclarativeContainer):
    """
    Dependency injection container.

    Repositories are request-scoped: they take the request's session as the
    `db` argument when called, and use cases receive them as call arguments.
    """

    settings = providers.Singleton(get_settings)

    # Repositories
    vocabulary_repository = providers.Factory(VocabularyRepository)
    quick_note_repository = providers.Factory(QuickNoteRepository)

    # Domain services (stateless, shared)
    review_intervals = providers.Singleton(
        ReviewIntervals.from_days, settings.provided.REVIEW_INTERVALS
    )
    review_scheduler = providers.Singleton(
        ReviewScheduler,
        intervals=review_intervals,
        rng=providers.Singleton(random.Random),
        failure_level_drop=settings.provided.REVIEW_FAILURE_LEVEL_DROP,
    )

    # Review use cases
    get_due_items_use_case = providers.Factory(
        GetDueItemsUseCase,
        review_scheduler=review_scheduler,
    )
    record_review_outcome_use_case = providers.Factory(
        RecordReviewOutcomeUseCase,
        review_scheduler=review_scheduler,
    )

    # Word use cases
    save_word_use_case = providers.Factory(SaveWordUseCase)
    get_words_use_case = providers.Factory(GetWordsUseCase)
    delete_word_use_case = providers.Factory(DeleteWordUseCase)
    get_notebook_stats_use_case = providers.Factory(
        GetNotebookStatsUseCase,
        review_scheduler=review_scheduler,
    )

    # Quick note use cases
    jot_quick_note_use_case = providers.Factory(JotQuickNoteUseCase)
    get_quick_notes_use_case = providers.Factory(GetQuickNotesUseCase)
    mark_quick_note_processed_use_case = providers.Factory(MarkQuickNoteProcessedUseCase)
    delete_quick_note_use_case = providers.Factory(DeleteQuickNoteUseCase)


# Initialize container
container = Container()
