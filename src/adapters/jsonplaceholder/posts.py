"""Posts: the only resource with the full CRUD set."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from adapters.jsonplaceholder.base import Resource, to_payload
from core.domain.models import Post, PostDraft, PostPatch

logger = logging.getLogger(__name__)


class PostsApi(Resource):
    async def get_all_posts(self, user_id: int | None = None) -> list[Post]:
        """GET /posts, optionally filtered with `?userId=`."""

        if user_id is not None:
            return await self.get_posts_by_user(user_id)
        logger.info("Fetching all posts...")
        posts = await self._get_many(Post, "posts")
        logger.info("Retrieved %d posts", len(posts))
        return posts

    async def get_post(self, post_id: int) -> Post:
        logger.info("Fetching post %s...", post_id)
        post = await self._get_one(Post, "posts", post_id)
        logger.info('Retrieved post: "%s"', post.title)
        return post

    async def get_posts_by_user(self, user_id: int) -> list[Post]:
        logger.info("Fetching posts by user %s...", user_id)
        posts = await self._get_many(Post, "posts", userId=user_id)
        logger.info("Found %d posts by user %s", len(posts), user_id)
        return posts

    async def create_post(self, data: PostDraft | Mapping[str, Any]) -> Post | dict[str, Any]:
        """POST /posts. The service answers with the post and its new id."""

        logger.info("Creating new post...")
        result = await self._session.request(
            self._session.url("posts"), method="POST", json_body=to_payload(data)
        )
        post = self._parse(Post, result)
        logger.info("Created post with ID: %s", getattr(post, "id", None))
        return post

    async def update_post(self, post_id: int, data: PostDraft | Mapping[str, Any]) -> Post | dict[str, Any]:
        """PUT /posts/{id} with `{"id": post_id, **data}`."""

        logger.info("Updating post %s...", post_id)
        body = {"id": post_id, **to_payload(data)}
        result = await self._session.request(
            self._session.url("posts", post_id), method="PUT", json_body=body
        )
        logger.info("Updated post %s", post_id)
        return self._parse(Post, result)

    async def patch_post(self, post_id: int, data: PostPatch | Mapping[str, Any]) -> Post | dict[str, Any]:
        logger.info("Patching post %s...", post_id)
        result = await self._session.request(
            self._session.url("posts", post_id), method="PATCH", json_body=to_payload(data)
        )
        logger.info("Patched post %s", post_id)
        return self._parse(Post, result)

    async def delete_post(self, post_id: int) -> dict[str, Any]:
        """DELETE /posts/{id}; returns the raw result (`{}` or `{"success": True}`)."""

        logger.info("Deleting post %s...", post_id)
        result = await self._session.request(self._session.url("posts", post_id), method="DELETE")
        logger.info("Deleted post %s", post_id)
        return result
