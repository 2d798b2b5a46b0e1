"""Moderation domain service.

Reconciles the site's comments with the decision table. A comment needs
review while it is visible, has no decision row and contains offensive terms.
"""

from contextlib import aclosing

import logfire
from sqlalchemy.exc import SQLAlchemyError

from trasher.domain.error import ModerationFailedError
from trasher.domain.model import FlaggedComment
from trasher.domain.repository import (
    CommentRepository,
    DecisionRepository,
    Transaction,
)
from trasher.domain.value import CommentId, CommentStatus, Transition

from .base import Service
from .word_matcher import WordMatcher

DEFAULT_QUEUE_LIMIT = 50

# Failures of the stores themselves (unreachable database, broken connection)
STORE_ERRORS = (SQLAlchemyError, OSError)


class ModerationService(Service):
    """Domain service for the review queue and moderation transitions."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        decision_repository: DecisionRepository,
        transaction: Transaction,
        word_matcher: WordMatcher,
    ) -> None:
        """Initialize moderation service.

        Args:
            comment_repository: Comment repository
            decision_repository: Decision repository
            transaction: Transaction shared by both repositories
            word_matcher: Offensive term matcher
        """
        self.comment_repository = comment_repository
        self.decision_repository = decision_repository
        self.transaction = transaction
        self.word_matcher = word_matcher

    async def list_queue(self, limit: int = DEFAULT_QUEUE_LIMIT) -> list[FlaggedComment]:
        """Build the review queue.

        Pending comments are scanned newest first. Comments without offensive
        terms are skipped and do not count toward the limit.

        Args:
            limit: Maximum number of flagged comments to return

        Returns:
            Flagged comments ordered by creation time, newest first

        Raises:
            ValueError: If limit is less than 1
        """
        if limit < 1:
            raise ValueError("Queue limit must be at least 1")

        with logfire.span("moderation_service.list_queue", limit=limit) as span:
            flagged: list[FlaggedComment] = []
            scanned = 0

            await self.decision_repository.ensure_storage()
            async with aclosing(self.comment_repository.stream_pending()) as pending:
                async for comment in pending:
                    scanned += 1
                    terms = self.word_matcher.match(comment.content)
                    if not terms:
                        continue

                    flagged.append(FlaggedComment(comment=comment, matched_terms=terms))
                    if len(flagged) >= limit:
                        break

            span.set_attribute("scanned", scanned)
            span.set_attribute("flagged", len(flagged))
            return flagged

    async def apply(self, transition: Transition, comment_id: CommentId) -> None:
        """Apply a moderation transition.

        - remove: hide the comment and record a decision
        - approve: record a decision, leave the comment visible
        - cancel: make the comment visible and drop its decision

        Cancel cannot know which decision it undoes, so it always performs
        both writes. Both stores are written in a single transaction. Creating
        the decision table on first use happens inside the same failure
        handling, so an unreachable database is reported as a failed
        transition.

        Args:
            transition: Transition to apply
            comment_id: Target comment ID

        Raises:
            ModerationFailedError: If a store failed; nothing was changed
        """
        with logfire.span(
            "moderation_service.apply",
            transition=transition.value,
            comment_id=comment_id,
        ):
            try:
                await self.decision_repository.ensure_storage()

                if transition is Transition.REMOVE:
                    await self.comment_repository.set_status(
                        comment_id, CommentStatus.REMOVED
                    )
                    await self.decision_repository.add(comment_id)
                elif transition is Transition.APPROVE:
                    await self.decision_repository.add(comment_id)
                elif transition is Transition.CANCEL:
                    await self.comment_repository.set_status(
                        comment_id, CommentStatus.VISIBLE
                    )
                    await self.decision_repository.discard(comment_id)

                await self.transaction.commit()
            except STORE_ERRORS as e:
                logfire.warn(
                    "Moderation transition failed",
                    transition=transition.value,
                    comment_id=comment_id,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                await self._rollback()
                raise ModerationFailedError(transition.value, comment_id) from e

            logfire.info(
                "Moderation transition applied",
                transition=transition.value,
                comment_id=comment_id,
            )

    async def remove(self, comment_id: CommentId) -> None:
        """Remove a comment from the site and from the queue."""
        await self.apply(Transition.REMOVE, comment_id)

    async def approve(self, comment_id: CommentId) -> None:
        """Keep a comment visible and stop flagging it."""
        await self.apply(Transition.APPROVE, comment_id)

    async def cancel(self, comment_id: CommentId) -> None:
        """Undo any decision and put the comment back into the queue."""
        await self.apply(Transition.CANCEL, comment_id)

    async def _rollback(self) -> None:
        try:
            await self.transaction.rollback()
        except STORE_ERRORS as e:
            # The connection is usually gone at this point; the transition
            # failure is what gets reported.
            logfire.error("Rollback failed", error=str(e))
