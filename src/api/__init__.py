"""HTTP API for quiz generation."""

from .app import create_app, get_model_client

__all__ = ["create_app", "get_model_client"]
