"""
Concrete mapper: stream events → text payloads.

Default mapping renders one ``name:value`` line per attribute::

    symbol:"WSO2",
    price:55.6,
    volume:100

Custom mapping renders the single ``@payload`` template instead, e.g.
``SensorID : {{{symbol}}}/{{{volume}}}``. With event grouping enabled all
events of one send call are published as one payload, separated by the
delimiter line.
"""

from collections.abc import Mapping, Sequence
from typing import Any, NoReturn

from pydantic import ValidationError

from textmapper.core.exceptions import ConfigurationException
from textmapper.core.logging import get_logger
from textmapper.mappers.base_mapper import SinkMapper
from textmapper.mappers.group_assembler import GroupAssembler
from textmapper.mappers.renderer import Renderer
from textmapper.schemas import AttributeType, Event, StreamDefinition
from textmapper.schemas.options_schema import MapperOptions
from textmapper.sinks import SinkListener
from textmapper.templating import PlaceholderTemplate, TemplateSynthesizer

logger = get_logger(__name__)

DEFAULT_TEMPLATE_NAME = "defaultEvent"
CUSTOM_TEMPLATE_NAME = "customEvent"


class TextSinkMapper(SinkMapper):
    """Map events of one output stream into text, grouped or one per event."""

    def __init__(
        self,
        stream_definition: StreamDefinition,
        options: MapperOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """
        Validate the configuration and compile the template once.

        Raises:
            ConfigurationException:       Invalid options or @payload usage.
            TemplateCompilationException: The template text is malformed.
        """
        self._stream = stream_definition
        self._options = self._resolve_options(options)
        self._validate_options()

        self._synthesizer = TemplateSynthesizer(
            delimiter=self._options.delimiter,
            new_line=self._options.new_line_character,
        )

        custom_text = self._custom_payload_text()
        if custom_text is not None:
            self._template_text = self._synthesizer.build_custom(
                custom_text, self.grouping_enabled
            )
            name = CUSTOM_TEMPLATE_NAME
        else:
            self._template_text = self._synthesizer.build_default(
                stream_definition.attributes, self.grouping_enabled
            )
            name = DEFAULT_TEMPLATE_NAME

        template = PlaceholderTemplate.compile(self._template_text, name=name)
        self._renderer = Renderer(template, stream_definition.attributes)
        self._is_custom = custom_text is not None

        logger.info(
            "Text mapper initialised",
            extra={
                "stream_id": self.stream_id,
                "template": name,
                "grouping_enabled": self.grouping_enabled,
                "attribute_count": len(stream_definition.attributes),
            },
        )

    # ── Properties ────────────────────────────────────────────────────

    @property
    def stream_id(self) -> str:
        return self._stream.id

    @property
    def options(self) -> MapperOptions:
        return self._options

    @property
    def grouping_enabled(self) -> bool:
        return self._options.event_grouping_enabled

    @property
    def is_custom(self) -> bool:
        """True when the @payload template is in use."""
        return self._is_custom

    @property
    def template_text(self) -> str:
        """The template text compiled at setup."""
        return self._template_text

    @property
    def template(self) -> PlaceholderTemplate:
        return self._renderer.template

    # ── Sending ───────────────────────────────────────────────────────

    def map_and_send(self, event: Event | None, sink: SinkListener) -> int:
        """
        Map one event and publish it.

        When grouping is enabled the event is treated as a group of one:
        its own trailing delimiter block is trimmed before publishing.
        """
        if event is None:
            return 0
        if not self.grouping_enabled:
            sink.publish(self._renderer.render(event))
            return 1
        return self._send_group([event], sink)

    def map_and_send_many(
        self, events: Sequence[Event | None], sink: SinkListener
    ) -> int:
        """
        Map a batch of events in input order, skipping ``None`` entries.

        Ungrouped: one payload per event. Grouped: exactly one payload for
        the whole batch, or none when the batch holds no events.
        """
        if not self.grouping_enabled:
            published = 0
            for event in events:
                if event is not None:
                    sink.publish(self._renderer.render(event))
                    published += 1
            logger.debug(
                "Batch mapped",
                extra={
                    "stream_id": self.stream_id,
                    "received": len(events),
                    "published": published,
                },
            )
            return published
        return self._send_group(events, sink)

    # ── Private helpers ───────────────────────────────────────────────

    def _send_group(self, events: Sequence[Event | None], sink: SinkListener) -> int:
        assembler = GroupAssembler(self._synthesizer.group_suffix)
        for event in events:
            if event is not None:
                assembler.append(self._renderer.render(event))

        if assembler.is_empty:
            logger.debug(
                "Event group empty, nothing published",
                extra={"stream_id": self.stream_id, "received": len(events)},
            )
            return 0

        grouped = len(assembler)
        sink.publish(assembler.finish())
        logger.debug(
            "Event group mapped",
            extra={
                "stream_id": self.stream_id,
                "received": len(events),
                "grouped": grouped,
            },
        )
        return 1

    @staticmethod
    def _resolve_options(
        options: MapperOptions | Mapping[str, Any] | None,
    ) -> MapperOptions:
        if options is None:
            return MapperOptions()
        if isinstance(options, MapperOptions):
            return options
        try:
            return MapperOptions.model_validate(dict(options))
        except ValidationError as exc:
            raise ConfigurationException(
                message="Invalid text mapper options.",
                details={"errors": exc.errors(include_url=False, include_context=False)},
            ) from exc

    def _validate_options(self) -> None:
        new_line = self._options.new_line_character
        delimiter = self._options.delimiter
        if not new_line:
            self._config_error("'new.line.character' must not be empty")
        if self.grouping_enabled:
            if not delimiter:
                self._config_error(
                    "'delimiter' must be set when 'event.grouping.enabled' is true"
                )
            if "\n" in delimiter or "\r" in delimiter or new_line in delimiter:
                self._config_error("'delimiter' must be a single whole line")

    def _custom_payload_text(self) -> str | None:
        """
        Return the single @payload template, or None for default mapping.

        Raises:
            ConfigurationException: Zero or several templates, or a template
                that references an OBJECT attribute.
        """
        payload = self._stream.payload
        if payload is None:
            return None
        if len(payload) > 1:
            self._config_error("Text sink-mapper does not support multiple @payload mappings")
        if not payload:
            self._config_error("There is no template given in the @payload")

        text = payload[0].text
        compiled = PlaceholderTemplate.compile(text, name=CUSTOM_TEMPLATE_NAME)
        object_fields = sorted(
            a.name
            for a in self._stream.attributes
            if a.type is AttributeType.OBJECT and a.name in compiled.placeholder_names
        )
        if object_fields:
            self._config_error(
                "Text sink-mapper does not support object @payload mappings",
                fields=object_fields,
            )
        return text

    def _config_error(self, reason: str, **details: Any) -> NoReturn:
        logger.error(
            "Text mapper configuration rejected",
            extra={"stream_id": self.stream_id, "reason": reason, **details},
        )
        raise ConfigurationException(
            message=f"{reason}, error at the mapper of '{self.stream_id}'.",
            details={"stream_id": self.stream_id, **details},
        )
