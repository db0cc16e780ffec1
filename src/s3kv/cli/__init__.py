"""Command line interface for s3kv."""

from .main import app, main

__all__ = ["app", "main"]
