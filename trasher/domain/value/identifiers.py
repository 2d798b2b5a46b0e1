"""Strongly typed identifiers for moderation entities.

Comment and post identifiers come from the site's comments table, which uses
integer keys.
"""

from typing import NewType

CommentId = NewType("CommentId", int)
PostId = NewType("PostId", int)
DecisionId = NewType("DecisionId", int)
