"""
Hotel booking API package.

Provides the FastAPI application for the hotel booking service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
