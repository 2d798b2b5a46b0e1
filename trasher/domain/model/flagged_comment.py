"""Flagged comment read model."""

from pydantic import Field

from trasher.domain.model.comment import Comment
from trasher.domain.model.common import DomainModel


class FlaggedComment(DomainModel):
    """A comment in the review queue together with the terms that flagged it."""

    comment: Comment
    matched_terms: tuple[str, ...] = Field(min_length=1)

    @property
    def motive(self) -> str:
        """Matched terms joined for display."""
        return ", ".join(self.matched_terms)
