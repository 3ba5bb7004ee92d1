# blogapi

A small HTTP API for a blog, built on Flask. It keeps posts and their comments
in memory and writes every change to a JSON file.

## Installing

```
pip install .
```

## Running the server

```
blogapi
```

The command takes no options apart from `--help`. It listens on
`127.0.0.1:8080` and stores its data in `data/blog.json`, relative to the
current directory, creating that file and its directory if they do not exist
yet. If the data file cannot be read or parsed, the command prints the reason
to standard error and exits with status 1.

## Endpoints

| Method | Path                         | Result                                   |
|--------|------------------------------|------------------------------------------|
| GET    | `/posts`                     | All posts, as an object keyed by id      |
| GET    | `/posts/{id}`                | `{"post": ..., "comments": [...]}`       |
| POST   | `/posts`                     | Creates a post (201)                     |
| PUT    | `/posts/{id}`                | Updates a post's title and/or content    |
| DELETE | `/posts/{id}`                | Deletes a post and its comments (204)    |
| GET    | `/posts/{post_id}/comments`  | Comments on a post, oldest first         |
| POST   | `/posts/{post_id}/comments`  | Adds a comment to a post (201)           |
| DELETE | `/comments/{id}`             | Deletes a comment (204)                  |

Ids are UUIDs; timestamps (`created_at`, `updated_at`) are ISO 8601 in UTC
with a `Z` suffix.

A new post needs string fields `title`, `content` and `author`, none of them
blank. A title may be at most 200 bytes once encoded as UTF-8. An update may
give `title`, `content` or both, and the same rules apply to them; every update
sets `updated_at`.

A new comment needs string fields `author` and `content`, neither blank, and a
`post_id` field holding a valid UUID. The comment is attached to the post named
in the path; the `post_id` in the body is checked for form only. Adding a
comment does not check that the post exists.

Errors reported by the API come back as JSON of the form `{"error": "..."}`:

- 400 for validation errors, e.g. `Validation error: Title cannot be empty`
- 404 for `Post not found` and `Comment not found`
- 500 for storage errors, e.g. `Storage error: Failed to write file: ...`

Request bodies that are not JSON (415), too large (413), not a JSON object, or
missing a required field (400) are rejected with Flask's standard error pages.

## Example

```
curl -X POST http://localhost:8080/posts \
     -H 'Content-Type: application/json' \
     -d '{"title": "Hello", "content": "First post", "author": "alice"}'
```

## Using it from Python

`blogapi.server.create_app` builds a Flask application around a
`blogapi.storage.Storage`:

```python
from pathlib import Path

from blogapi.server import create_app
from blogapi.storage import Storage

app = create_app(Storage(Path("data/blog.json")))
client = app.test_client()
print(client.get("/posts").get_json())
```

`Storage` can also be used on its own. It offers `get_all_posts`, `get_post`,
`create_post`, `update_post`, `delete_post`, `get_post_comments`,
`create_comment` and `delete_comment`, works with the `Post` and `Comment`
dataclasses from `blogapi.models`, and raises the errors in `blogapi.errors`
(`PostNotFound`, `CommentNotFound`, `StorageError`, all subclasses of
`ApiError`).

## Limits

The server has no authentication, paging or search, and its host, port and
data file are fixed. It runs on Flask's built-in development server.

## Running the tests

Install the package with the `test` extra; pytest then runs the suite in
`tests/`.