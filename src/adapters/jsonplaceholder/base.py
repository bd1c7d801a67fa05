"""Shared plumbing for the resource wrappers."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel

from adapters.http_client import NO_CONTENT_RESULT, make_request
from core.config import AppSettings, get_settings
from core.domain.models import ApiModel

ModelT = TypeVar("ModelT", bound=ApiModel)


def to_payload(data: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """Request body for a model or a plain mapping.

    Mappings are sent exactly as given; models are serialized with their wire
    (camelCase) names.
    """

    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
    return dict(data)


class ApiSession:
    """Base URL + HTTP client pair shared by every resource."""

    def __init__(self, client: httpx.AsyncClient, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or get_settings()

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    def url(self, *segments: object, **query: object) -> str:
        """`{base}/{segment}/...[?key=value]`; `None` query values are dropped."""

        url = "/".join([self.base_url, *(str(s).strip("/") for s in segments)])
        params = {k: v for k, v in query.items() if v is not None}
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    async def request(
        self,
        url: str,
        *,
        method: str = "GET",
        json_body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await make_request(self._client, url, method=method, headers=headers, json_body=json_body)


class Resource:
    """Base class for a group of wrappers over one API resource."""

    def __init__(self, session: ApiSession) -> None:
        self._session = session

    @staticmethod
    def _parse(model: type[ModelT], data: Any) -> Any:
        """Validate a write answer; the 204 marker has no entity and is returned as is."""

        if data == NO_CONTENT_RESULT:
            return data
        return model.model_validate(data)

    async def _get_one(self, model: type[ModelT], *segments: object, **query: object) -> ModelT:
        data = await self._session.request(self._session.url(*segments, **query))
        return model.model_validate(data)

    async def _get_many(self, model: type[ModelT], *segments: object, **query: object) -> list[ModelT]:
        data = await self._session.request(self._session.url(*segments, **query))
        return [model.model_validate(item) for item in data]
