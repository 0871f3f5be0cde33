"""
Publish sinks.

A mapper never talks to a transport; it hands every rendered payload to
a ``SinkListener``. The transport (or a test) decides what publishing
means.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SinkListener(Protocol):
    """Receives one rendered payload per call."""

    def publish(self, payload: str) -> None: ...


class InMemorySink:
    """Collect published payloads in order."""

    def __init__(self) -> None:
        self.payloads: list[str] = []

    def publish(self, payload: str) -> None:
        self.payloads.append(payload)

    def clear(self) -> None:
        self.payloads.clear()

    def __len__(self) -> int:
        return len(self.payloads)
