"""Todos."""

from __future__ import annotations

import logging

from adapters.jsonplaceholder.base import Resource
from core.domain.models import Todo

logger = logging.getLogger(__name__)


class TodosApi(Resource):
    async def get_all_todos(self) -> list[Todo]:
        logger.info("Fetching all todos...")
        todos = await self._get_many(Todo, "todos")
        logger.info("Retrieved %d todos", len(todos))
        return todos

    async def get_completed_todos(self) -> list[Todo]:
        """GET /todos, keeping only the completed ones (filtered locally)."""

        logger.info("Fetching completed todos...")
        todos = await self._get_many(Todo, "todos")
        completed = [todo for todo in todos if todo.completed]
        logger.info("Found %d completed todos", len(completed))
        return completed
