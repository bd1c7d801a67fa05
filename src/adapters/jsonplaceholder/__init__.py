"""JSONPlaceholder wrappers.

One module per resource; `JsonPlaceholderClient` wires them to a shared
HTTP client.
"""

from adapters.jsonplaceholder.albums import AlbumsApi, PhotosApi
from adapters.jsonplaceholder.base import ApiSession, Resource
from adapters.jsonplaceholder.client import JsonPlaceholderClient
from adapters.jsonplaceholder.comments import CommentsApi
from adapters.jsonplaceholder.posts import PostsApi
from adapters.jsonplaceholder.todos import TodosApi
from adapters.jsonplaceholder.users import UsersApi

__all__ = [
    "AlbumsApi",
    "ApiSession",
    "CommentsApi",
    "JsonPlaceholderClient",
    "PhotosApi",
    "PostsApi",
    "Resource",
    "TodosApi",
    "UsersApi",
]
