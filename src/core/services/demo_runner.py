"""Demo drivers.

Both drivers are plain sequential `await` chains over the wrappers. They do
not print: UI layers subscribe through `DemoHooks`, which keeps the drivers
usable from tests, scripts or other entry points. Any failure propagates and
stops the remaining steps.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from adapters.jsonplaceholder import JsonPlaceholderClient
from core.domain.models import DemoSummary, Post, PostDraft, PostPatch
from core.errors import ApiRequestError

EXCERPT_LENGTH = 50


@dataclass
class DemoHooks:
    """Optional callbacks for UI layers."""

    section: Callable[[str], None] | None = None
    note: Callable[[str], None] | None = None
    check: Callable[[str], None] | None = None


def _emit(callback: Callable[[str], None] | None, message: str) -> None:
    if callback is not None:
        callback(message)


def excerpt(text: str, length: int = EXCERPT_LENGTH) -> str:
    return f"{text[:length]}..."


async def run_full_demo(api: JsonPlaceholderClient, hooks: DemoHooks | None = None) -> DemoSummary:
    """Exercise every wrapper group in a fixed order and collect counts."""

    hooks = hooks or DemoHooks()

    _emit(hooks.section, "1. Posts")
    await api.posts.get_post(1)
    user_posts = await api.posts.get_posts_by_user(1)
    new_post = await api.posts.create_post(
        PostDraft(title="My Test Post", body="This is a test post created via API", user_id=1)
    )
    if not isinstance(new_post, Post):
        raise ApiRequestError("Create post answered without a post to update", method="POST")
    await api.posts.update_post(
        new_post.id,
        PostDraft(title="Updated Test Post", body="This post has been updated", user_id=1),
    )
    await api.posts.patch_post(new_post.id, PostPatch(title="Patched Test Post"))
    await api.posts.delete_post(new_post.id)

    _emit(hooks.section, "2. Comments")
    comments = await api.comments.get_comments_for_post(1)
    if comments:
        _emit(hooks.note, f'First comment: "{excerpt(comments[0].body)}"')

    _emit(hooks.section, "3. Users")
    users = await api.users.get_all_users()
    await api.users.get_user(1)
    await api.users.get_user_albums(1)
    await api.users.get_user_todos(1)

    _emit(hooks.section, "4. Albums & Photos")
    albums = await api.albums.get_all_albums()
    photos = await api.albums.get_album_photos(1)
    if photos:
        _emit(hooks.note, f"Sample photo: {photos[0].title}")

    _emit(hooks.section, "5. Todos")
    todos = await api.todos.get_all_todos()
    completed = await api.todos.get_completed_todos()

    summary = DemoSummary(
        user_posts=len(user_posts),
        comments=len(comments),
        users=len(users),
        albums=len(albums),
        photos=len(photos),
        todos=len(todos),
        completed_todos=len(completed),
        created_post_id=new_post.id,
    )
    _emit(hooks.note, f"Todo completion rate: {summary.completion_rate:.1f}%")
    return summary


async def run_quick_test(api: JsonPlaceholderClient, hooks: DemoHooks | None = None) -> list[str]:
    """One representative call per capability; returns the checks that passed."""

    hooks = hooks or DemoHooks()
    passed: list[str] = []

    def ok(label: str) -> None:
        passed.append(label)
        _emit(hooks.check, label)

    await api.posts.get_post(1)
    ok("GET request successful")

    await api.posts.create_post(PostDraft(title="Quick Test Post", body="Testing POST request", user_id=99))
    ok("POST request successful")

    await api.posts.get_posts_by_user(1)
    ok("Query parameters working")

    await api.comments.get_comments_for_post(1)
    ok("Nested routes working")

    return passed
