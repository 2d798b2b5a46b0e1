"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ModerationFailedError(DomainError):
    """Raised when a moderation transition could not be persisted.

    The transaction has been rolled back when this is raised, so neither
    store was changed.
    """

    def __init__(self, transition: str, comment_id: int):
        self.transition = transition
        self.comment_id = comment_id
        super().__init__(f"Failed to {transition} comment {comment_id}")
