"""
Request dependencies for the API.

The catalogue store lives on ``app.state.store``; create_app() puts it there
and the lifespan handler loads it once at startup.
"""

from fastapi import Request

from catalog.store import CatalogStore


def get_store(request: Request) -> CatalogStore:
    """FastAPI dependency returning the application's catalogue store."""
    return request.app.state.store
