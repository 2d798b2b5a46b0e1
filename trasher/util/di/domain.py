"""Domain layer DI providers."""

from dishka import Scope, provide

from trasher.domain.repository import (
    CommentRepository,
    DecisionRepository,
    Transaction,
)
from trasher.domain.service import ModerationService, WordMatcher
from trasher.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_moderation_service(
        self,
        comment_repository: CommentRepository,
        decision_repository: DecisionRepository,
        transaction: Transaction,
        word_matcher: WordMatcher,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            comment_repository=comment_repository,
            decision_repository=decision_repository,
            transaction=transaction,
            word_matcher=word_matcher,
        )
