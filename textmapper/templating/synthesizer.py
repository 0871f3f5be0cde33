"""
Template synthesis.

Builds the template text a mapper compiles at setup: either the default
field-per-line layout derived from the stream attributes, or the
user's ``@payload`` text. With event grouping enabled, both variants end
with ``line-ending + delimiter + line-ending`` so that grouped fragments
can simply be concatenated.
"""

from collections.abc import Sequence

from textmapper.schemas import Attribute, AttributeType
from textmapper.templating.placeholder_template import placeholder

ATTRIBUTE_SEPARATOR = ","
STRING_ENCLOSING_ELEMENT = '"'


class TemplateSynthesizer:
    """Produce default and custom template text for one line-ending/delimiter pair."""

    def __init__(self, delimiter: str, new_line: str) -> None:
        self._delimiter = delimiter
        self._new_line = new_line

    @property
    def group_suffix(self) -> str:
        """Block every grouped fragment ends with."""
        return f"{self._new_line}{self._delimiter}{self._new_line}"

    def build_default(
        self, attributes: Sequence[Attribute], grouping_enabled: bool
    ) -> str:
        """
        Build the default template, one ``name:value`` line per attribute.

        STRING values are wrapped in double quotes. The last line carries
        no separator; the ungrouped variant has no trailing line ending.

        >>> TemplateSynthesizer("~~~~~~~~~~", "\\n").build_default(
        ...     [Attribute(name="symbol", type=AttributeType.STRING),
        ...      Attribute(name="volume", type=AttributeType.LONG)], False)
        'symbol:"{{{symbol}}}",\\nvolume:{{{volume}}}'
        """
        lines = [self._field(attribute) for attribute in attributes]
        body = f"{ATTRIBUTE_SEPARATOR}{self._new_line}".join(lines)
        if grouping_enabled:
            return f"{body}{self.group_suffix}"
        return body

    def build_custom(self, raw_text: str, grouping_enabled: bool) -> str:
        """Use the ``@payload`` text verbatim, plus the delimiter block when grouping."""
        if grouping_enabled:
            return f"{raw_text}{self.group_suffix}"
        return raw_text

    # ── Private helpers ───────────────────────────────────────────────

    @staticmethod
    def _field(attribute: Attribute) -> str:
        value = placeholder(attribute.name)
        if attribute.type is AttributeType.STRING:
            value = f"{STRING_ENCLOSING_ELEMENT}{value}{STRING_ENCLOSING_ELEMENT}"
        return f"{attribute.name}:{value}"
