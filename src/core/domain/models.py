"""Domain models (Pydantic v2).

The shapes are owned by the remote service, not by us. The models give the
rest of the code typed attribute access while staying lenient:

- attributes are snake_case, the wire format is camelCase (aliases);
- only `id` is required; everything else, foreign keys included, may be
  missing from an answer;
- unknown fields are kept (`extra="allow"`) and round-trip through
  `model_dump(by_alias=True)` unchanged.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict


class ApiModel(BaseModel):
    """Base for every entity returned by the service."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_wire(self) -> dict:
        """The fields received (or set), in the service's own names."""

        return self.model_dump(by_alias=True, exclude_unset=True)


class Post(ApiModel):
    id: int = Field(..., description="Post identifier (assigned by the service).")
    user_id: int | None = Field(default=None, alias="userId", description="Author id.")
    title: str = Field(default="", description="Post title.")
    body: str = Field(default="", description="Post body.")


class Comment(ApiModel):
    id: int
    post_id: int | None = Field(default=None, alias="postId", description="Post the comment belongs to.")
    name: str = ""
    email: str = ""
    body: str = ""


class Geo(ApiModel):
    lat: str = ""
    lng: str = ""


class Address(ApiModel):
    street: str = ""
    suite: str = ""
    city: str = ""
    zipcode: str = ""
    geo: Geo | None = None


class Company(ApiModel):
    name: str = ""
    catch_phrase: str = Field(default="", alias="catchPhrase")
    bs: str = ""


class User(ApiModel):
    """A user profile as published by the service."""

    id: int
    name: str = Field(default="", description="Display name.")
    username: str = Field(default="", description="Login handle.")
    email: str = Field(default="", description="Contact email.")
    address: Address | None = None
    phone: str = ""
    website: str = ""
    company: Company | None = None


class Album(ApiModel):
    id: int
    user_id: int | None = Field(default=None, alias="userId")
    title: str = ""


class Photo(ApiModel):
    id: int
    album_id: int | None = Field(default=None, alias="albumId")
    title: str = ""
    url: str = ""
    thumbnail_url: str = Field(default="", alias="thumbnailUrl")


class Todo(ApiModel):
    id: int
    user_id: int | None = Field(default=None, alias="userId")
    title: str = ""
    completed: bool = Field(default=False, description="Whether the todo is done.")


class PostDraft(ApiModel):
    """Payload for creating or replacing a post (no id yet)."""

    title: str = Field(..., description="Post title.")
    body: str = Field(..., description="Post body.")
    user_id: int = Field(..., alias="userId", description="Author id.")


class PostPatch(ApiModel):
    """Partial update: only the fields that are set are sent."""

    title: str | None = None
    body: str | None = None
    user_id: int | None = Field(default=None, alias="userId")


class DemoSummary(BaseModel):
    """Counts gathered by the full demo."""

    user_posts: int = Field(default=0, ge=0, description="Posts written by user 1.")
    comments: int = Field(default=0, ge=0, description="Comments on post 1.")
    users: int = Field(default=0, ge=0, description="Total users.")
    albums: int = Field(default=0, ge=0, description="Total albums.")
    photos: int = Field(default=0, ge=0, description="Photos in album 1.")
    todos: int = Field(default=0, ge=0, description="Total todos.")
    completed_todos: int = Field(default=0, ge=0, description="Completed todos.")
    created_post_id: int | None = Field(default=None, description="Id assigned to the demo post.")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def completion_rate(self) -> float:
        """Completed todos as a percentage of all todos (0.0 when there are none)."""

        if not self.todos:
            return 0.0
        return self.completed_todos / self.todos * 100
