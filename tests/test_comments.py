import uuid
from http import HTTPStatus

import pytest

from blogapi.server import create_app
from blogapi.storage import Storage


@pytest.fixture
def setup(tmp_path):
    path = tmp_path / "blog.json"
    storage = Storage(path)
    return create_app(storage).test_client(), storage, path


@pytest.fixture
def client(setup):
    return setup[0]


@pytest.fixture
def post_id(client):
    response = client.post(
        "/posts", json={"title": "Topic", "content": "Body", "author": "alice"}
    )
    return response.get_json()["id"]


def _comment(client, post_id, **overrides):
    body = {"post_id": post_id, "content": "Nice post", "author": "bob"}
    body.update(overrides)
    return client.post(f"/posts/{post_id}/comments", json=body)


def test_create_comment(client, post_id):
    response = _comment(client, post_id)
    assert response.status_code == HTTPStatus.CREATED
    body = response.get_json()
    assert body["post_id"] == post_id
    assert body["content"] == "Nice post"
    assert body["author"] == "bob"
    assert body["created_at"] == body["updated_at"]
    assert uuid.UUID(body["id"]).version == 4


def test_comment_is_persisted(setup, post_id):
    client, _, path = setup
    comment = _comment(client, post_id).get_json()
    reloaded = Storage(path)
    stored = reloaded.get_post_comments(uuid.UUID(post_id))
    assert [str(c.id) for c in stored] == [comment["id"]]


def test_path_post_id_overrides_body(client, post_id):
    body = {"post_id": str(uuid.uuid4()), "content": "Hi", "author": "bob"}
    response = client.post(f"/posts/{post_id}/comments", json=body)
    assert response.get_json()["post_id"] == post_id


def test_body_must_carry_post_id(client, post_id):
    response = client.post(
        f"/posts/{post_id}/comments", json={"content": "Hi", "author": "bob"}
    )
    assert response.status_code == HTTPStatus.BAD_REQUEST


def test_body_post_id_must_be_uuid(client, post_id):
    response = _comment(client, post_id, post_id="nope")
    assert response.status_code == HTTPStatus.BAD_REQUEST


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"author": "  "}, "Author cannot be empty"),
        ({"content": ""}, "Content cannot be empty"),
        ({"author": "", "content": ""}, "Author cannot be empty"),
    ],
)
def test_create_comment_validation(client, post_id, overrides, message):
    response = _comment(client, post_id, **overrides)
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.get_json() == {"error": f"Validation error: {message}"}


def test_comment_on_unknown_post_is_accepted(setup):
    client, storage, _ = setup
    missing = str(uuid.uuid4())
    response = _comment(client, missing)
    assert response.status_code == HTTPStatus.CREATED
    assert response.get_json()["post_id"] == missing


def test_get_comments_in_creation_order(client, post_id):
    first = _comment(client, post_id, content="one").get_json()
    second = _comment(client, post_id, content="two").get_json()
    response = client.get(f"/posts/{post_id}/comments")
    assert response.status_code == HTTPStatus.OK
    assert response.get_json() == [first, second]


def test_get_comments_only_for_that_post(client, post_id):
    other = client.post(
        "/posts", json={"title": "Other", "content": "Body", "author": "carol"}
    ).get_json()["id"]
    _comment(client, other)
    assert client.get(f"/posts/{post_id}/comments").get_json() == []


def test_get_comments_for_missing_post(client):
    response = client.get(f"/posts/{uuid.uuid4()}/comments")
    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.get_json() == {"error": "Post not found"}


def test_delete_comment(client, post_id):
    keep = _comment(client, post_id, content="keep").get_json()
    drop = _comment(client, post_id, content="drop").get_json()
    response = client.delete(f"/comments/{drop['id']}")
    assert response.status_code == HTTPStatus.NO_CONTENT
    assert response.data == b""
    assert client.get(f"/posts/{post_id}/comments").get_json() == [keep]


def test_delete_missing_comment(client):
    response = client.delete(f"/comments/{uuid.uuid4()}")
    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.get_json() == {"error": "Comment not found"}


def test_delete_comment_malformed_id(client):
    response = client.delete("/comments/123")
    assert response.status_code == HTTPStatus.NOT_FOUND