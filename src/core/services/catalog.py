"""Static catalog of the wrapper functions.

Drives two things: the interactive help listing (no network) and the generic
`call` command, which resolves a catalog name to the bound wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable

from adapters.jsonplaceholder import JsonPlaceholderClient


@dataclass(frozen=True)
class CatalogEntry:
    group: str
    name: str
    params: tuple[str, ...] = ()
    description: str = ""
    takes_data: bool = False
    optional: tuple[str, ...] = ()

    @property
    def signature(self) -> str:
        args = list(self.params) + [f"[{name}]" for name in self.optional]
        if self.takes_data:
            args.append("data")
        return f"{self.name}({', '.join(args)})"

    @property
    def resource(self) -> str:
        return self.name.split(".", 1)[0]

    @property
    def method(self) -> str:
        return self.name.split(".", 1)[1]


CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry("Posts", "posts.get_all_posts", (), "List every post, or one user's.", optional=("user_id",)),
    CatalogEntry("Posts", "posts.get_post", ("post_id",), "Fetch one post."),
    CatalogEntry("Posts", "posts.get_posts_by_user", ("user_id",), "Posts written by a user."),
    CatalogEntry("Posts", "posts.create_post", (), "Create a post {title, body, userId}.", True),
    CatalogEntry("Posts", "posts.update_post", ("post_id",), "Replace a post.", True),
    CatalogEntry("Posts", "posts.patch_post", ("post_id",), "Partially update a post.", True),
    CatalogEntry("Posts", "posts.delete_post", ("post_id",), "Delete a post."),
    CatalogEntry("Comments", "comments.get_all_comments", (), "List every comment, or one post's.", optional=("post_id",)),
    CatalogEntry("Comments", "comments.get_comments_for_post", ("post_id",), "Comments on a post."),
    CatalogEntry("Users", "users.get_all_users", (), "List every user."),
    CatalogEntry("Users", "users.get_user", ("user_id",), "Fetch one user."),
    CatalogEntry("Users", "users.get_user_albums", ("user_id",), "Albums owned by a user."),
    CatalogEntry("Users", "users.get_user_todos", ("user_id",), "Todos owned by a user."),
    CatalogEntry("Albums & Photos", "albums.get_all_albums", (), "List every album."),
    CatalogEntry("Albums & Photos", "albums.get_album", ("album_id",), "Fetch one album."),
    CatalogEntry("Albums & Photos", "albums.get_album_photos", ("album_id",), "Photos in an album."),
    CatalogEntry("Albums & Photos", "photos.get_all_photos", (), "List every photo."),
    CatalogEntry("Todos", "todos.get_all_todos", (), "List every todo."),
    CatalogEntry("Todos", "todos.get_completed_todos", (), "Only the completed todos."),
)

DEMO_COMMANDS: tuple[tuple[str, str], ...] = (
    ("quick", "Run the quick test."),
    ("full", "Run the full demo."),
    ("call NAME [ARGS]", "Invoke one wrapper and print its JSON result."),
)


def find_entry(name: str) -> CatalogEntry | None:
    for entry in CATALOG:
        if entry.name == name or entry.method == name:
            return entry
    return None


def grouped(entries: Iterable[CatalogEntry] = CATALOG) -> dict[str, list[CatalogEntry]]:
    groups: dict[str, list[CatalogEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.group, []).append(entry)
    return groups


def resolve(api: JsonPlaceholderClient, entry: CatalogEntry) -> Callable[..., Awaitable[Any]]:
    """Bound wrapper method on `api` for a catalog entry."""

    return getattr(getattr(api, entry.resource), entry.method)
