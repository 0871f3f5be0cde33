"""
Map service: orchestrates validate → set up mapper → send → collect.

Backs the preview endpoint: the caller supplies a stream definition,
options and events, and gets back exactly what a transport would have
received.
"""

from textmapper.core.exceptions import ValidationException
from textmapper.core.logging import get_logger
from textmapper.mappers.text_mapper import TextSinkMapper
from textmapper.schemas.map_schema import MapRequest, MapResponse
from textmapper.sinks import InMemorySink

logger = get_logger(__name__)


class MapService:
    """Run a text sink mapper against an in-memory sink."""

    def map(self, request: MapRequest) -> MapResponse:
        """
        Map the request's events and return the published payloads.

        Raises:
            ValidationException:    An event does not match the attribute count.
            ConfigurationException: The stream/options cannot be set up.
        """
        self._check_arity(request)

        mapper = TextSinkMapper(request.stream, request.options)
        sink = InMemorySink()
        mapper.map_and_send_many(request.events, sink)

        logger.info(
            "Map request complete",
            extra={
                "stream_id": request.stream.id,
                "event_count": len(request.events),
                "payload_count": len(sink),
            },
        )

        return MapResponse(
            status="ok",
            total_count=len(sink),
            payloads=sink.payloads,
            metadata={
                "stream_id": request.stream.id,
                "template": mapper.template_text,
                "custom": mapper.is_custom,
                "grouping_enabled": mapper.grouping_enabled,
            },
        )

    @staticmethod
    def _check_arity(request: MapRequest) -> None:
        expected = len(request.stream.attributes)
        mismatched = [
            index
            for index, event in enumerate(request.events)
            if event is not None and len(event.data) != expected
        ]
        if mismatched:
            raise ValidationException(
                message=f"Event data must hold exactly {expected} value(s).",
                details={"stream_id": request.stream.id, "event_indexes": mismatched},
            )
