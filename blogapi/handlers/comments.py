"""HTTP handlers for listing, adding and deleting comments."""

from __future__ import annotations

import uuid

from flask import Blueprint, abort, jsonify

from ..errors import ValidationError
from ..models import Comment, CreateComment
from .posts import _json_body, _required_str, _storage

blueprint = Blueprint("comments", __name__)


@blueprint.get("/posts/<uuid:post_id>/comments")
def get_comments(post_id: uuid.UUID):
    """List the comments on a post, oldest first."""
    comments = _storage().get_post_comments(post_id)
    return jsonify([comment.to_dict() for comment in comments])


@blueprint.post("/posts/<uuid:post_id>/comments")
def create_comment(post_id: uuid.UUID):
    """Validate the payload and store a comment on the post in the path."""
    data = _json_body()
    raw_post_id = _required_str(data, "post_id")
    try:
        uuid.UUID(raw_post_id)
    except ValueError:
        abort(400, description="Json deserialize error: invalid field `post_id`")
    content = _required_str(data, "content")
    author = _required_str(data, "author")

    if not author.strip():
        raise ValidationError("Author cannot be empty")
    if not content.strip():
        raise ValidationError("Content cannot be empty")

    comment = Comment.from_create(
        CreateComment(post_id=post_id, content=content, author=author)
    )
    created = _storage().create_comment(comment)
    return jsonify(created.to_dict()), 201


@blueprint.delete("/comments/<uuid:id>")
def delete_comment(id: uuid.UUID):
    """Delete a single comment."""
    _storage().delete_comment(id)
    return "", 204