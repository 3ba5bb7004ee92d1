"""Application factory and command-line entry point for the blog API."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from flask import Flask

from .errors import StorageError, register_error_handlers
from .handlers import comments, posts
from .storage import Storage

HOST = "127.0.0.1"
PORT = 8080
DATA_FILE = Path("data/blog.json")

_ENDPOINTS = (
    "GET    /posts",
    "GET    /posts/{id}",
    "POST   /posts",
    "PUT    /posts/{id}",
    "DELETE /posts/{id}",
    "GET    /posts/{post_id}/comments",
    "POST   /posts/{post_id}/comments",
    "DELETE /comments/{id}",
)


def create_app(storage: Storage) -> Flask:
    """Build a Flask application serving the blog held by ``storage``."""
    app = Flask(__name__)
    app.extensions[posts.STORAGE_KEY] = storage
    register_error_handlers(app)
    app.register_blueprint(posts.blueprint)
    app.register_blueprint(comments.blueprint)
    return app


def main(argv: list[str] | None = None) -> int:
    """Start the blog API server on localhost."""
    parser = argparse.ArgumentParser(prog="blogapi", description="Run the blog API server.")
    parser.parse_args(argv)

    print("Starting Blog API server...")
    try:
        storage = Storage(DATA_FILE)
    except StorageError as exc:
        print(f"Failed to initialize storage: {exc}", file=sys.stderr)
        return 1

    print(f"Server running at http://localhost:{PORT}")
    print("\nAvailable endpoints:")
    for endpoint in _ENDPOINTS:
        print(f"  {endpoint}")
    print("\nPress Ctrl+C to stop")

    create_app(storage).run(host=HOST, port=PORT)
    return 0


if __name__ == "__main__":
    sys.exit(main())