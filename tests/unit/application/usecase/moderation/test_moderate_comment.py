"""Unit tests for ModerateCommentUseCase."""

import pytest
from pydantic import ValidationError

from trasher.application.usecase.moderation import (
    ModerateCommentRequest,
    ModerateCommentUseCase,
)
from trasher.domain.error import ModerationFailedError
from trasher.domain.repository import CommentRepository, DecisionRepository
from trasher.domain.value import CommentId, CommentStatus, Transition
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_remove_command(unit_env):
    """Remove command hides the comment and succeeds."""
    # Arrange
    comments = await unit_env.get(CommentRepository)
    decisions = await unit_env.get(DecisionRepository)
    use_case = await unit_env.get(ModerateCommentUseCase)
    await comments.save(make_comment(7, "ты дурак"))

    # Act
    result = await use_case.execute(ModerateCommentRequest(status="remove", id=7))

    # Assert
    assert result.success is True
    comment = await comments.find_by_id(CommentId(7))
    assert comment.status == CommentStatus.REMOVED
    assert await decisions.count() == 1


@pytest.mark.asyncio
async def test_string_id_is_accepted(unit_env):
    """The page sends IDs as strings."""
    # Arrange
    decisions = await unit_env.get(DecisionRepository)
    use_case = await unit_env.get(ModerateCommentUseCase)

    # Act
    result = await use_case.execute(ModerateCommentRequest(status="approve", id="42"))

    # Assert
    assert result.success is True
    assert await decisions.find_by_comment(CommentId(42)) is not None


@pytest.mark.asyncio
async def test_unknown_status_succeeds_without_changes(unit_env):
    """Unknown statuses are ignored and still report success."""
    # Arrange
    decisions = await unit_env.get(DecisionRepository)
    use_case = await unit_env.get(ModerateCommentUseCase)

    # Act
    result = await use_case.execute(ModerateCommentRequest(status="delete", id=7))

    # Assert
    assert result.success is True
    assert await decisions.count() == 0


@pytest.mark.asyncio
async def test_non_numeric_id_fails(unit_env):
    """An ID that isn't a number can't name a comment."""
    # Arrange
    decisions = await unit_env.get(DecisionRepository)
    use_case = await unit_env.get(ModerateCommentUseCase)

    # Act
    result = await use_case.execute(ModerateCommentRequest(status="remove", id="abc"))

    # Assert
    assert result.success is False
    assert await decisions.count() == 0


class FailingModerationService:
    """Moderation service whose stores are down."""

    async def apply(self, transition: Transition, comment_id: CommentId) -> None:
        raise ModerationFailedError(transition.value, comment_id)


@pytest.mark.asyncio
async def test_store_failure_reports_failure():
    """A failed transition is reported as success=False."""
    # Arrange
    use_case = ModerateCommentUseCase(FailingModerationService())  # type: ignore[arg-type]

    # Act
    result = await use_case.execute(ModerateCommentRequest(status="cancel", id=7))

    # Assert
    assert result.success is False


@pytest.mark.parametrize("comment_id", [True, False, 7.0])
def test_boolean_and_float_ids_are_rejected(comment_id):
    """Only integers and strings name a comment."""
    with pytest.raises(ValidationError):
        ModerateCommentRequest(status="approve", id=comment_id)
