"""Facade over every resource wrapper.

Usage:

    async with JsonPlaceholderClient() as api:
        post = await api.posts.get_post(1)
"""

from __future__ import annotations

import httpx

from adapters.http_client import build_async_client
from adapters.jsonplaceholder.albums import AlbumsApi, PhotosApi
from adapters.jsonplaceholder.base import ApiSession
from adapters.jsonplaceholder.comments import CommentsApi
from adapters.jsonplaceholder.posts import PostsApi
from adapters.jsonplaceholder.todos import TodosApi
from adapters.jsonplaceholder.users import UsersApi
from core.config import AppSettings, get_settings


class JsonPlaceholderClient:
    """Owns one `httpx.AsyncClient` and exposes the resources on top of it.

    A client passed in by the caller is used as-is and left open on exit;
    one built here is closed by `aclose()` / `async with`.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._owns_client = http_client is None
        self._http = http_client or build_async_client(self._settings, transport=transport)

        session = ApiSession(self._http, self._settings)
        self.posts = PostsApi(session)
        self.comments = CommentsApi(session)
        self.users = UsersApi(session)
        self.albums = AlbumsApi(session)
        self.photos = PhotosApi(session)
        self.todos = TodosApi(session)

    @property
    def settings(self) -> AppSettings:
        return self._settings

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "JsonPlaceholderClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
