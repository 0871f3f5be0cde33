"""
Route aggregation for API v1.
"""

from fastapi import APIRouter

from textmapper.api.routes.map import router as map_router

router = APIRouter()
router.include_router(map_router)
