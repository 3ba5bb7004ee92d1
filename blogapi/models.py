"""Posts, comments and the request payloads that create or change them."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

_TIMESTAMP = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<frac>\d+))?"
    r"(?P<zone>[Zz]|[+-]\d{2}:\d{2})$"
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _format_timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _parse_timestamp(text: Any) -> datetime:
    if not isinstance(text, str):
        raise ValueError(f"timestamp must be a string, got {type(text).__name__}")
    match = _TIMESTAMP.match(text)
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    base = match["base"].replace("t", "T").replace(" ", "T")
    if match["frac"]:
        base += "." + match["frac"][:6].ljust(6, "0")
    zone = match["zone"]
    if zone in ("Z", "z"):
        zone = "+00:00"
    return datetime.fromisoformat(base + zone).astimezone(timezone.utc)


def _parse_uuid(value: Any) -> uuid.UUID:
    if not isinstance(value, str):
        raise ValueError(f"id must be a string, got {type(value).__name__}")
    return uuid.UUID(value)


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass
class CreatePost:
    """Payload for creating a post."""

    title: str
    content: str
    author: str


@dataclass
class UpdatePost:
    """Payload for changing a post; fields left as None stay unchanged."""

    title: str | None = None
    content: str | None = None


@dataclass
class CreateComment:
    """Payload for creating a comment on a post."""

    post_id: uuid.UUID
    content: str
    author: str


@dataclass
class Post:
    """A blog post."""

    id: uuid.UUID
    title: str
    content: str
    author: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_create(cls, create_post: CreatePost) -> Post:
        """Build a new post with a fresh id and the current time."""
        now = _now()
        return cls(
            id=uuid.uuid4(),
            title=create_post.title,
            content=create_post.content,
            author=create_post.author,
            created_at=now,
            updated_at=now,
        )

    def update(self, update_post: UpdatePost) -> None:
        """Apply the given changes and stamp the modification time."""
        if update_post.title is not None:
            self.title = update_post.title
        if update_post.content is not None:
            self.content = update_post.content
        self.updated_at = _now()

    def to_dict(self) -> dict[str, str]:
        return {
            "id": str(self.id),
            "title": self.title,
            "content": self.content,
            "author": self.author,
            "created_at": _format_timestamp(self.created_at),
            "updated_at": _format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Post:
        try:
            return cls(
                id=_parse_uuid(data["id"]),
                title=_require_str(data, "title"),
                content=_require_str(data, "content"),
                author=_require_str(data, "author"),
                created_at=_parse_timestamp(data["created_at"]),
                updated_at=_parse_timestamp(data["updated_at"]),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid post: {exc}") from exc


@dataclass
class Comment:
    """A comment attached to a post."""

    id: uuid.UUID
    post_id: uuid.UUID
    content: str
    author: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_create(cls, create_comment: CreateComment) -> Comment:
        """Build a new comment with a fresh id and the current time."""
        now = _now()
        return cls(
            id=uuid.uuid4(),
            post_id=create_comment.post_id,
            content=create_comment.content,
            author=create_comment.author,
            created_at=now,
            updated_at=now,
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "id": str(self.id),
            "post_id": str(self.post_id),
            "content": self.content,
            "author": self.author,
            "created_at": _format_timestamp(self.created_at),
            "updated_at": _format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Comment:
        try:
            return cls(
                id=_parse_uuid(data["id"]),
                post_id=_parse_uuid(data["post_id"]),
                content=_require_str(data, "content"),
                author=_require_str(data, "author"),
                created_at=_parse_timestamp(data["created_at"]),
                updated_at=_parse_timestamp(data["updated_at"]),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid comment: {exc}") from exc