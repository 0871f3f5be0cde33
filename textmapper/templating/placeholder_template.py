"""
Compiled placeholder templates.

Templates are mustache text. ``{{{name}}}`` inserts a value as is,
``{{name}}`` inserts it HTML-escaped, ``{{! ... }}`` is a comment.
Everything else is literal text and is copied through byte for byte,
line endings included.

Templates are tokenized once with chevron; rendering replays the token
list. Placeholders are looked up in the render context only, and each
one must be a bare attribute name: sections, partials, delimiter
changes and dotted names are rejected at compile time.
"""

import re
from collections.abc import Mapping
from typing import Any

import chevron
from chevron.tokenizer import ChevronError, tokenize

from textmapper.core.exceptions import TemplateCompilationException

PLACEHOLDER_OPEN = "{{{"
PLACEHOLDER_CLOSE = "}}}"

_PLACEHOLDER_TAGS = ("variable", "no escape")
_ALLOWED_TAGS = ("literal", "comment", *_PLACEHOLDER_TAGS)
_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def placeholder(name: str) -> str:
    """Return the unescaped placeholder markup for ``name``."""
    return f"{PLACEHOLDER_OPEN}{name}{PLACEHOLDER_CLOSE}"


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class PlaceholderTemplate:
    """
    Immutable compiled template.

    Build with :meth:`compile`; render any number of times with
    :meth:`render`. Rendering never mutates the template.
    """

    __slots__ = ("_name", "_source", "_tokens", "_placeholder_names")

    def __init__(
        self,
        name: str,
        source: str,
        tokens: tuple[tuple[str, str], ...],
    ) -> None:
        self._name = name
        self._source = source
        self._tokens = tokens
        self._placeholder_names = frozenset(
            key for tag, key in tokens if tag in _PLACEHOLDER_TAGS
        )

    @classmethod
    def compile(cls, text: str, name: str = "template") -> "PlaceholderTemplate":
        """
        Compile ``text`` once.

        Raises:
            TemplateCompilationException: Unbalanced markers, or a tag that
                is not a plain placeholder, literal or comment.
        """
        try:
            tokens = tuple(tokenize(text))
        except ChevronError as exc:
            raise TemplateCompilationException(template_name=name, reason=str(exc)) from exc

        for tag, key in tokens:
            if tag == "no escape?":
                raise TemplateCompilationException(
                    template_name=name,
                    reason=f"unbalanced '{PLACEHOLDER_OPEN}' marker for '{key}'",
                )
            if tag not in _ALLOWED_TAGS:
                raise TemplateCompilationException(
                    template_name=name,
                    reason=f"'{tag}' tags are not supported in text templates",
                )
            if tag in _PLACEHOLDER_TAGS and not _NAME_RE.match(key):
                raise TemplateCompilationException(
                    template_name=name,
                    reason=f"placeholder '{key}' is not an attribute name",
                )
        return cls(name, text, tokens)

    @property
    def name(self) -> str:
        return self._name

    @property
    def source(self) -> str:
        """The template text this instance was compiled from."""
        return self._source

    @property
    def placeholder_names(self) -> frozenset[str]:
        return self._placeholder_names

    def render(self, context: Mapping[str, Any]) -> str:
        """
        Substitute every placeholder from ``context``.

        Missing names and ``None`` values render as empty text, booleans
        as ``true``/``false``, everything else through ``str()``.
        """
        data = {key: _to_text(value) for key, value in context.items()}
        return chevron.render(self._tokens, data)

    def __repr__(self) -> str:
        return f"PlaceholderTemplate(name={self._name!r}, placeholders={sorted(self._placeholder_names)!r})"
