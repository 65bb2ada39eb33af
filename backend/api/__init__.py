"""
Expose the app factory so uvicorn and tests can import quickly:

    uvicorn backend.api.app:app
    from backend.api import create_app
"""
from .app import create_app

__all__ = ["create_app"]
