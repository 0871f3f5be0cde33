"""
Shared FastAPI dependencies: injected into route handlers.
"""

from textmapper.services.map_service import MapService


def get_map_service() -> MapService:
    """Provide a MapService; mappers are built per request."""
    return MapService()
