"""Unit tests for GetQueueUseCase."""

import pytest

from trasher.application.usecase.moderation import GetQueueRequest, GetQueueUseCase
from trasher.domain.repository import CommentRepository
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_queue_items_link_to_site(unit_env):
    """Items carry links to the comment and to its parent."""
    # Arrange
    comments = await unit_env.get(CommentRepository)
    use_case = await unit_env.get(GetQueueUseCase)
    await comments.save(make_comment(7, "ты дурак, идиот", post_id=100, parent=5))

    # Act
    result = await use_case.execute(GetQueueRequest())

    # Assert
    assert result.total == 1
    assert result.limit == 50
    item = result.items[0]
    assert item.id == 7
    assert item.matched_terms == ["дурак", "идиот"]
    assert item.motive == "дурак, идиот"
    assert item.url == "https://knife.media/?p=100#comment-7"
    assert item.parent_url == "https://knife.media/?p=100#comment-5"


@pytest.mark.asyncio
async def test_top_level_comment_has_no_parent_link(unit_env):
    """Comments that aren't replies get no parent link."""
    # Arrange
    comments = await unit_env.get(CommentRepository)
    use_case = await unit_env.get(GetQueueUseCase)
    await comments.save(make_comment(8, "shit"))

    # Act
    result = await use_case.execute(GetQueueRequest())

    # Assert
    assert result.items[0].parent is None
    assert result.items[0].parent_url is None


@pytest.mark.asyncio
async def test_queue_respects_requested_limit(unit_env):
    """The request limit caps the queue."""
    # Arrange
    comments = await unit_env.get(CommentRepository)
    use_case = await unit_env.get(GetQueueUseCase)
    for comment_id in range(1, 11):
        await comments.save(make_comment(comment_id, "идиот"))

    # Act
    result = await use_case.execute(GetQueueRequest(limit=4))

    # Assert
    assert [item.id for item in result.items] == [10, 9, 8, 7]
    assert result.total == 4
