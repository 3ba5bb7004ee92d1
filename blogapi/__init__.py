"""A JSON blog API with posts and comments stored in a JSON file."""

__version__ = "0.1.0"