"""
Abstract base sink mapper.

Every sink mapper implements ``map_and_send`` (single event) and may
override ``map_and_send_many`` (batch). Both return the number of
payloads handed to the sink.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from textmapper.schemas import Event
from textmapper.sinks import SinkListener


class SinkMapper(ABC):
    """Contract that every sink mapper must fulfil."""

    @property
    def output_event_classes(self) -> tuple[type, ...]:
        """Payload types this mapper publishes."""
        return (str,)

    @property
    def supported_dynamic_options(self) -> tuple[str, ...]:
        """Options that may change per event; none by default."""
        return ()

    @abstractmethod
    def map_and_send(self, event: Event | None, sink: SinkListener) -> int:
        """
        Map a single event and publish the result.

        A ``None`` event publishes nothing.
        """
        ...

    def map_and_send_many(
        self, events: Sequence[Event | None], sink: SinkListener
    ) -> int:
        """
        Map a batch of events.

        Override for grouped behaviour; default sends one-by-one.
        """
        return sum(self.map_and_send(e, sink) for e in events)
