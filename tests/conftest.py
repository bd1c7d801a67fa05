"""Shared fixtures: an in-memory stand-in for the REST service.

Nothing here touches the network; every request goes through
`httpx.MockTransport` and is recorded on `FakeApi.requests`.
"""

import asyncio
import json

import httpx
import pytest

from adapters.jsonplaceholder import JsonPlaceholderClient
from core.config import AppSettings

BASE_URL = "https://api.test"

POSTS = [
    {"userId": 1, "id": 1, "title": "sunt aut facere", "body": "quia et suscipit"},
    {"userId": 1, "id": 2, "title": "qui est esse", "body": "est rerum tempore"},
    {"userId": 2, "id": 3, "title": "ea molestias", "body": "et iusto sed quo"},
]

COMMENTS = [
    {"postId": 1, "id": 1, "name": "id labore", "email": "Eliseo@gardner.biz", "body": "laudantium enim quasi est quidem magnam voluptate ipsam eos tempora"},
    {"postId": 1, "id": 2, "name": "quo vero", "email": "Jayne_Kuhic@sydney.com", "body": "est natus enim"},
    {"postId": 2, "id": 3, "name": "odio adipisci", "email": "Nikita@garfield.biz", "body": "quia molestiae"},
]

USERS = [
    {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "address": {
            "street": "Kulas Light",
            "suite": "Apt. 556",
            "city": "Gwenborough",
            "zipcode": "92998-3874",
            "geo": {"lat": "-37.3159", "lng": "81.1496"},
        },
        "phone": "1-770-736-8031 x56442",
        "website": "hildegard.org",
        "company": {"name": "Romaguera-Crona", "catchPhrase": "Multi-layered", "bs": "harness e-markets"},
    },
    {"id": 2, "name": "Ervin Howell", "username": "Antonette", "email": "Shanna@melissa.tv"},
]

ALBUMS = [
    {"userId": 1, "id": 1, "title": "quidem molestiae enim"},
    {"userId": 1, "id": 2, "title": "sunt qui excepturi"},
    {"userId": 2, "id": 3, "title": "omnis laborum"},
]

PHOTOS = [
    {"albumId": 1, "id": 1, "title": "accusamus beatae", "url": "https://via.placeholder.com/600/92c952", "thumbnailUrl": "https://via.placeholder.com/150/92c952"},
    {"albumId": 1, "id": 2, "title": "reprehenderit est", "url": "https://via.placeholder.com/600/771796", "thumbnailUrl": "https://via.placeholder.com/150/771796"},
    {"albumId": 2, "id": 3, "title": "officia porro", "url": "https://via.placeholder.com/600/24f355", "thumbnailUrl": "https://via.placeholder.com/150/24f355"},
]

TODOS = [
    {"userId": 1, "id": 1, "title": "delectus aut autem", "completed": False},
    {"userId": 1, "id": 2, "title": "quis ut nam", "completed": True},
    {"userId": 1, "id": 3, "title": "fugiat veniam", "completed": False},
    {"userId": 2, "id": 4, "title": "et porro tempora", "completed": True},
]

COLLECTIONS = {
    "posts": POSTS,
    "comments": COMMENTS,
    "users": USERS,
    "albums": ALBUMS,
    "photos": PHOTOS,
    "todos": TODOS,
}

# parent collection -> (child collection, foreign key)
NESTED = {
    ("posts", "comments"): "postId",
    ("users", "albums"): "userId",
    ("users", "todos"): "userId",
    ("albums", "photos"): "albumId",
}

NEW_POST_ID = 101


def _filter(items, params):
    for key, value in params.items():
        items = [item for item in items if str(item.get(key)) == value]
    return items


class FakeApi:
    """Canned JSONPlaceholder answers plus a log of every request."""

    def __init__(self):
        self.requests = []
        self.overrides = {}

    def respond(self, method, path, response):
        self.overrides[(method, path)] = response

    def handler(self, request):
        self.requests.append(request)
        override = self.overrides.get((request.method, request.url.path))
        if override is not None:
            return override
        return self._default(request)

    @property
    def calls(self):
        return [(r.method, str(r.url).replace(BASE_URL, "")) for r in self.requests]

    def _default(self, request):
        parts = request.url.path.strip("/").split("/")
        params = dict(request.url.params)
        body = json.loads(request.content) if request.content else None
        resource = parts[0]
        if resource not in COLLECTIONS:
            return httpx.Response(404, json={})
        items = COLLECTIONS[resource]

        if len(parts) == 1:
            if request.method == "POST":
                return httpx.Response(201, json={**body, "id": NEW_POST_ID})
            return httpx.Response(200, json=_filter(items, params))

        item_id = int(parts[1])
        if len(parts) == 3:
            key = NESTED.get((resource, parts[2]))
            if key is None:
                return httpx.Response(404, json={})
            children = [c for c in COLLECTIONS[parts[2]] if c[key] == item_id]
            return httpx.Response(200, json=children)

        found = next((item for item in items if item["id"] == item_id), None)
        if request.method == "PUT":
            return httpx.Response(200, json=body)
        if request.method == "PATCH":
            return httpx.Response(200, json={**(found or {"id": item_id, "userId": 1}), **body})
        if request.method == "DELETE":
            return httpx.Response(200, json={})
        if found is None:
            return httpx.Response(404, json={})
        return httpx.Response(200, json=found)


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest.fixture
def settings():
    return AppSettings(api_base_url=BASE_URL)


@pytest.fixture
def make_client(fake_api, settings):
    def factory():
        return JsonPlaceholderClient(settings, transport=httpx.MockTransport(fake_api.handler))

    return factory


@pytest.fixture
def api_call(make_client):
    """Run `fn(api)` against the fake service and return its result."""

    def call(fn):
        async def scenario():
            async with make_client() as api:
                return await fn(api)

        return asyncio.run(scenario())

    return call
