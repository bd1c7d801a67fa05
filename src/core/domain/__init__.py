"""Domain models.

Plain data structures (Pydantic v2). The domain knows nothing about HTTP or
the CLI.
"""

from core.domain.models import (
    Address,
    Album,
    ApiModel,
    Comment,
    Company,
    DemoSummary,
    Geo,
    Photo,
    Post,
    PostDraft,
    PostPatch,
    Todo,
    User,
)

__all__ = [
    "Address",
    "Album",
    "ApiModel",
    "Comment",
    "Company",
    "DemoSummary",
    "Geo",
    "Photo",
    "Post",
    "PostDraft",
    "PostPatch",
    "Todo",
    "User",
]
