"""Comments."""

from __future__ import annotations

import logging

from adapters.jsonplaceholder.base import Resource
from core.domain.models import Comment

logger = logging.getLogger(__name__)


class CommentsApi(Resource):
    async def get_all_comments(self, post_id: int | None = None) -> list[Comment]:
        """GET /comments, or /comments?postId= when `post_id` is given."""

        if post_id is None:
            logger.info("Fetching all comments...")
        else:
            logger.info("Fetching comments with postId=%s...", post_id)
        comments = await self._get_many(Comment, "comments", postId=post_id)
        logger.info("Retrieved %d comments", len(comments))
        return comments

    async def get_comments_for_post(self, post_id: int) -> list[Comment]:
        """Nested route: GET /posts/{id}/comments."""

        logger.info("Fetching comments for post %s...", post_id)
        comments = await self._get_many(Comment, "posts", post_id, "comments")
        logger.info("Found %d comments for post %s", len(comments), post_id)
        return comments
