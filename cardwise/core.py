from datetime import timedelta

from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from cardwise.application.learning.services import (
    BundleCache,
    DueSetAggregator,
    IdentityResolver,
    TopicInvalidator,
)
from cardwise.application.learning.use_cases.flashcards.add_translation_use_case import (
    AddTranslationUseCase,
)
from cardwise.application.learning.use_cases.flashcards.create_flashcard_use_case import (
    CreateFlashcardUseCase,
)
from cardwise.application.learning.use_cases.flashcards.delete_flashcard_use_case import (
    DeleteFlashcardUseCase,
)
from cardwise.application.learning.use_cases.flashcards.get_topic_bundle_use_case import (
    GetTopicBundleUseCase,
)
from cardwise.application.learning.use_cases.flashcards.record_attempt_use_case import (
    RecordAttemptUseCase,
)
from cardwise.config import get_settings
from cardwise.domain.common.clock import utc_now
from cardwise.domain.learning.services import Scheduler
from cardwise.infrastructure.learning.repositories import (
    AttemptRepository,
    FlashcardRepository,
    TopicRepository,
    TranslationRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)
    clock = providers.Object(utc_now)

    # Repositories
    flashcard_repository = providers.Factory(FlashcardRepository, db=db)
    translation_repository = providers.Factory(TranslationRepository, db=db)
    attempt_repository = providers.Factory(AttemptRepository, db=db)
    topic_repository = providers.Factory(TopicRepository, db=db)

    # Domain services (pure domain logic, no db)
    scheduler = providers.Singleton(Scheduler, clock=clock)

    # Shared across requests; must outlive the request-scoped session
    bundle_cache = providers.Singleton(
        BundleCache,
        ttl=providers.Factory(timedelta, seconds=settings.provided.BUNDLE_CACHE_TTL_SECONDS),
        clock=clock,
    )

    # Application services
    identity_resolver = providers.Factory(
        IdentityResolver,
        translation_repository=translation_repository,
    )
    due_set_aggregator = providers.Factory(
        DueSetAggregator,
        flashcard_repository=flashcard_repository,
        topic_repository=topic_repository,
        attempt_repository=attempt_repository,
        identity_resolver=identity_resolver,
        clock=clock,
    )
    topic_invalidator = providers.Factory(
        TopicInvalidator,
        topic_repository=topic_repository,
        bundle_cache=bundle_cache,
    )

    # Learning module, application use cases
    get_topic_bundle_use_case = providers.Factory(
        GetTopicBundleUseCase,
        topic_repository=topic_repository,
        due_set_aggregator=due_set_aggregator,
        bundle_cache=bundle_cache,
        clock=clock,
        default_language=settings.provided.DEFAULT_LANGUAGE,
    )
    record_attempt_use_case = providers.Factory(
        RecordAttemptUseCase,
        flashcard_repository=flashcard_repository,
        attempt_repository=attempt_repository,
        identity_resolver=identity_resolver,
        scheduler=scheduler,
        topic_invalidator=topic_invalidator,
        clock=clock,
    )
    create_flashcard_use_case = providers.Factory(
        CreateFlashcardUseCase,
        flashcard_repository=flashcard_repository,
        topic_repository=topic_repository,
        topic_invalidator=topic_invalidator,
    )
    add_translation_use_case = providers.Factory(
        AddTranslationUseCase,
        flashcard_repository=flashcard_repository,
        translation_repository=translation_repository,
        identity_resolver=identity_resolver,
        topic_invalidator=topic_invalidator,
    )
    delete_flashcard_use_case = providers.Factory(
        DeleteFlashcardUseCase,
        flashcard_repository=flashcard_repository,
        translation_repository=translation_repository,
        topic_invalidator=topic_invalidator,
    )


container = Container()
