"""Domain enumerations for moderation."""

from enum import Enum


class CommentStatus(str, Enum):
    """Visibility status of a comment on the site."""

    VISIBLE = "visible"
    REMOVED = "removed"


class Transition(str, Enum):
    """Moderation transition requested by a moderator.

    Values match the ``status`` field of the command sent by the page.
    """

    REMOVE = "remove"
    APPROVE = "approve"
    CANCEL = "cancel"
