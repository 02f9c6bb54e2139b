"""Web application entry point for the todo example."""

from .app import create_app

__all__ = ["create_app"]
