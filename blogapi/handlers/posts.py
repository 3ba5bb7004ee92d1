"""HTTP handlers for creating, reading, changing and deleting posts."""

from __future__ import annotations

import uuid
from typing import Any

from flask import Blueprint, abort, current_app, jsonify, request

from ..errors import ValidationError
from ..models import CreatePost, Post
from ..storage import Storage

STORAGE_KEY = "blogapi.storage"
MAX_TITLE_BYTES = 200
JSON_LIMIT = 2 * 1024 * 1024

blueprint = Blueprint("posts", __name__)


def _storage() -> Storage:
    return current_app.extensions[STORAGE_KEY]


def _json_body() -> dict[str, Any]:
    """Return the request's JSON object, rejecting anything else."""
    if not request.is_json:
        abort(415, description="Content type error")
    if request.content_length is not None and request.content_length > JSON_LIMIT:
        abort(413)
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description="Json deserialize error: expected an object")
    return data


def _required_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        abort(400, description=f"Json deserialize error: missing or invalid field `{key}`")
    return value


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        abort(400, description=f"Json deserialize error: invalid field `{key}`")
    return value


def _require_text(value: str, label: str) -> None:
    if not value.strip():
        raise ValidationError(f"{label} cannot be empty")


def _require_short_title(title: str) -> None:
    if len(title.encode("utf-8")) > MAX_TITLE_BYTES:
        raise ValidationError("Title too long (max 200 characters)")


@blueprint.get("/posts")
def get_posts():
    """List every post, keyed by id."""
    posts = _storage().get_all_posts()
    return jsonify({str(post_id): post.to_dict() for post_id, post in posts.items()})


@blueprint.get("/posts/<uuid:id>")
def get_post(id: uuid.UUID):
    """Return one post together with its comments."""
    storage = _storage()
    post = storage.get_post(id)
    comments = storage.get_post_comments(id)
    return jsonify(
        {
            "post": post.to_dict(),
            "comments": [comment.to_dict() for comment in comments],
        }
    )


@blueprint.post("/posts")
def create_post():
    """Validate the payload and store a new post."""
    data = _json_body()
    new_post = CreatePost(
        title=_required_str(data, "title"),
        content=_required_str(data, "content"),
        author=_required_str(data, "author"),
    )
    _require_text(new_post.title, "Title")
    _require_text(new_post.content, "Content")
    _require_text(new_post.author, "Author")
    _require_short_title(new_post.title)

    created = _storage().create_post(Post.from_create(new_post))
    return jsonify(created.to_dict()), 201


@blueprint.put("/posts/<uuid:id>")
def update_post(id: uuid.UUID):
    """Change the title and/or content of a post."""
    data = _json_body()
    title = _optional_str(data, "title")
    content = _optional_str(data, "content")
    if title is not None:
        _require_text(title, "Title")
        _require_short_title(title)
    if content is not None:
        _require_text(content, "Content")

    updated = _storage().update_post(id, title, content)
    return jsonify(updated.to_dict())


@blueprint.delete("/posts/<uuid:id>")
def delete_post(id: uuid.UUID):
    """Delete a post and every comment on it."""
    _storage().delete_post(id)
    return "", 204