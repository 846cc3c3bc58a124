"""Unit tests for UpdatePostUseCase."""

import pytest

from scribe.application.usecase.post import UpdatePostRequest, UpdatePostUseCase
from scribe.domain.error import NotAuthorizedError
from scribe.domain.service import PostService
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdatePostUseCase:
    """Tests for UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_author_updates_content(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        update_post = await unit_env.get(UpdatePostUseCase)
        author = make_user("alice")
        post = await post_service.create_post(author, "Title", "Old body")

        # Act
        view = await update_post.execute(
            UpdatePostRequest(
                post_id=str(post.id), user_id=str(author.id), content="New body"
            )
        )

        # Assert
        assert view.title == "Title"
        assert view.content == "New body"

    @pytest.mark.asyncio
    async def test_non_author_forbidden(self, unit_env):
        post_service = await unit_env.get(PostService)
        update_post = await unit_env.get(UpdatePostUseCase)
        post = await post_service.create_post(make_user("alice"), "Title", "Body")

        with pytest.raises(NotAuthorizedError):
            await update_post.execute(
                UpdatePostRequest(
                    post_id=str(post.id), user_id=str(make_user("bob").id), title="X"
                )
            )
