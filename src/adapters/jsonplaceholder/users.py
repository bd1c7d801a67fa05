"""Users and the resources nested under them."""

from __future__ import annotations

import logging

from adapters.jsonplaceholder.base import Resource
from core.domain.models import Album, Todo, User

logger = logging.getLogger(__name__)


class UsersApi(Resource):
    async def get_all_users(self) -> list[User]:
        logger.info("Fetching all users...")
        users = await self._get_many(User, "users")
        logger.info("Retrieved %d users", len(users))
        return users

    async def get_user(self, user_id: int) -> User:
        logger.info("Fetching user %s...", user_id)
        user = await self._get_one(User, "users", user_id)
        logger.info("Retrieved user: %s (%s)", user.name, user.email)
        return user

    async def get_user_albums(self, user_id: int) -> list[Album]:
        logger.info("Fetching albums for user %s...", user_id)
        albums = await self._get_many(Album, "users", user_id, "albums")
        logger.info("Found %d albums for user %s", len(albums), user_id)
        return albums

    async def get_user_todos(self, user_id: int) -> list[Todo]:
        logger.info("Fetching todos for user %s...", user_id)
        todos = await self._get_many(Todo, "users", user_id, "todos")
        logger.info("Found %d todos for user %s", len(todos), user_id)
        return todos
