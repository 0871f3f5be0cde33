"""
Map endpoint: render events through a text sink mapper.

POST /map/
"""

from fastapi import APIRouter, Depends

from textmapper.api.dependencies import get_map_service
from textmapper.schemas.map_schema import MapRequest, MapResponse
from textmapper.services.map_service import MapService

router = APIRouter(prefix="/map", tags=["Map"])


@router.post(
    "/",
    response_model=MapResponse,
    summary="Map events to text payloads",
    description=(
        "Sets up a text sink mapper from the given stream definition and "
        "options, maps the events (null entries are skipped) and returns "
        "the payloads the sink would have published."
    ),
)
def map_events(
    req: MapRequest,
    service: MapService = Depends(get_map_service),
) -> MapResponse:
    return service.map(req)
