"""Thread-safe blog store persisted to a JSON file."""

from __future__ import annotations

import copy
import json
import threading
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import CommentNotFound, PostNotFound, StorageError
from .models import Comment, Post, UpdatePost


@dataclass
class BlogData:
    """Everything the blog holds: posts by id and all comments in order."""

    posts: dict[uuid.UUID, Post] = field(default_factory=dict)
    comments: list[Comment] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "posts": {str(post_id): post.to_dict() for post_id, post in self.posts.items()},
            "comments": [comment.to_dict() for comment in self.comments],
        }

    @classmethod
    def from_dict(cls, data: Any) -> BlogData:
        if not isinstance(data, dict):
            raise ValueError("blog data must be an object")
        try:
            posts = data["posts"]
            comments = data["comments"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc}") from exc
        if not isinstance(posts, dict) or not isinstance(comments, list):
            raise ValueError("posts must be an object and comments a list")
        return cls(
            posts={uuid.UUID(key): Post.from_dict(value) for key, value in posts.items()},
            comments=[Comment.from_dict(item) for item in comments],
        )


class Storage:
    """Blog posts and comments kept in memory and written through to a file."""

    def __init__(self, file_path: str | Path) -> None:
        self.file_path = Path(file_path)
        self._lock = threading.Lock()

        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Failed to create data directory: {exc}") from exc

        if self.file_path.exists():
            try:
                contents = self.file_path.read_text(encoding="utf-8")
            except OSError as exc:
                raise StorageError(f"Failed to read file: {exc}") from exc
            try:
                self._data = BlogData.from_dict(json.loads(contents))
            except ValueError as exc:
                raise StorageError(f"Failed to parse JSON: {exc}") from exc
        else:
            self._data = BlogData()
            with self._lock:
                self._save()

    def _save(self) -> None:
        """Write the current data to disk; the caller holds the lock."""
        text = json.dumps(self._data.to_dict(), indent=2, ensure_ascii=False)
        try:
            handle = self.file_path.open("w", encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Failed to create file: {exc}") from exc
        with handle:
            try:
                handle.write(text)
            except OSError as exc:
                raise StorageError(f"Failed to write file: {exc}") from exc

    def get_all_posts(self) -> dict[uuid.UUID, Post]:
        with self._lock:
            return copy.deepcopy(self._data.posts)

    def get_post(self, id: uuid.UUID) -> Post:
        with self._lock:
            post = self._data.posts.get(id)
            if post is None:
                raise PostNotFound()
            return copy.deepcopy(post)

    def create_post(self, post: Post) -> Post:
        with self._lock:
            self._data.posts[post.id] = copy.deepcopy(post)
            self._save()
        return post

    def update_post(self, id: uuid.UUID, title: str | None, content: str | None) -> Post:
        with self._lock:
            post = self._data.posts.get(id)
            if post is None:
                raise PostNotFound()
            post.update(UpdatePost(title=title, content=content))
            updated = copy.deepcopy(post)
            self._save()
        return updated

    def delete_post(self, id: uuid.UUID) -> None:
        with self._lock:
            if self._data.posts.pop(id, None) is None:
                raise PostNotFound()
            self._data.comments = [c for c in self._data.comments if c.post_id != id]
            self._save()

    def get_post_comments(self, post_id: uuid.UUID) -> list[Comment]:
        self.get_post(post_id)
        with self._lock:
            return [copy.deepcopy(c) for c in self._data.comments if c.post_id == post_id]

    def create_comment(self, comment: Comment) -> Comment:
        with self._lock:
            self._data.comments.append(copy.deepcopy(comment))
            self._save()
        return comment

    def delete_comment(self, id: uuid.UUID) -> None:
        with self._lock:
            index = next(
                (i for i, comment in enumerate(self._data.comments) if comment.id == id),
                None,
            )
            if index is None:
                raise CommentNotFound()
            del self._data.comments[index]
            self._save()