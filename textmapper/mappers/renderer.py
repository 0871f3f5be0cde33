"""
Per-event rendering: bind one event's values to the compiled template.
"""

from collections.abc import Sequence

from textmapper.schemas import Attribute, Event
from textmapper.templating import PlaceholderTemplate


class Renderer:
    """Render events of one stream through one compiled template."""

    def __init__(
        self, template: PlaceholderTemplate, attributes: Sequence[Attribute]
    ) -> None:
        self._template = template
        self._names = tuple(a.name for a in attributes)

    @property
    def template(self) -> PlaceholderTemplate:
        return self._template

    def render(self, event: Event) -> str:
        # A fresh context per event: no value can survive from a previous render.
        # Arity of event.data is checked upstream; zip stops at the shorter side.
        context = dict(zip(self._names, event.data))
        return self._template.render(context)
