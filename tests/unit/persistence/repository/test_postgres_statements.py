"""Tests for the SQL issued by the PostgreSQL repositories."""

from datetime import datetime

from sqlalchemy.dialects import postgresql

from trasher.domain.repository import CommentRepository
from trasher.domain.value import CommentId, CommentStatus
from trasher.persistence.mappers import row_to_comment
from trasher.persistence.repository.comment import (
    PostgresCommentRepository,
    pending_comments_query,
)
from trasher.persistence.repository.decision import (
    add_decision_statement,
    discard_decision_statement,
)


def compile_sql(statement) -> str:
    return str(statement.compile(dialect=postgresql.dialect()))


def test_pending_query_excludes_decided_comments():
    """Comments with a decision row are filtered out by the outer join."""
    sql = compile_sql(pending_comments_query())

    assert "LEFT OUTER JOIN trasher ON trasher.comment_id = comments.id" in sql
    assert "trasher.comment_id IS NULL" in sql
    assert "comments.status = " in sql


def test_pending_query_is_newest_first():
    sql = compile_sql(pending_comments_query())

    assert sql.endswith("ORDER BY comments.created DESC")


def test_add_decision_ignores_duplicates():
    sql = compile_sql(add_decision_statement(CommentId(7)))

    assert sql.startswith("INSERT INTO trasher (comment_id)")
    assert "ON CONFLICT (comment_id) DO NOTHING" in sql


def test_discard_decision_targets_comment():
    sql = compile_sql(discard_decision_statement(CommentId(7)))

    assert sql.startswith("DELETE FROM trasher WHERE trasher.comment_id = ")


def test_row_to_comment_treats_zero_parent_as_top_level():
    comment = row_to_comment(
        {
            "id": 7,
            "parent": 0,
            "post_id": 100,
            "content": "ты дурак",
            "created": datetime(2024, 3, 1, 12, 0),
            "status": "visible",
        }
    )

    assert comment.parent is None
    assert comment.status == CommentStatus.VISIBLE


def test_site_comments_are_never_inserted():
    """Comments are created by the site; only their status is written."""
    assert not hasattr(CommentRepository, "save")
    assert not hasattr(PostgresCommentRepository, "save")
