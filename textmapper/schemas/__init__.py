"""
Pydantic schemas for the stream side of the mapper.

A ``StreamDefinition`` is what the host stream framework hands over at
setup: the ordered attribute list and, optionally, the ``@payload``
templates extracted from the sink's map annotation. ``Event`` is one
record flowing out of that stream.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class AttributeType(str, Enum):
    """Scalar types a stream attribute can carry, plus the opaque OBJECT type."""

    STRING = "STRING"
    INT = "INT"
    LONG = "LONG"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    BOOL = "BOOL"
    OBJECT = "OBJECT"


class Attribute(BaseModel):
    """One named, typed field of a stream."""

    name: str = Field(
        ...,
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Attribute name, also the placeholder name in templates",
    )
    type: AttributeType = Field(..., description="Attribute type")

    model_config = {"frozen": True}


class PayloadTemplate(BaseModel):
    """
    One template fragment taken from a ``@payload(...)`` annotation.

    The text is the raw custom template with ``{{{name}}}`` placeholders.
    """

    text: str = Field(..., description="Raw custom template text")

    model_config = {"frozen": True}


class StreamDefinition(BaseModel):
    """
    Output stream shape as seen by the mapper.

    ``payload`` is ``None`` when no ``@payload`` annotation was given,
    which selects the default field-per-line template.
    """

    id: str = Field(..., description="Stream identifier (e.g. FooStream)")
    attributes: list[Attribute] = Field(
        default_factory=list, description="Ordered attribute schema"
    )
    payload: list[PayloadTemplate] | None = Field(
        default=None, description="Templates from the @payload annotation"
    )

    model_config = {"frozen": True}

    @property
    def attribute_names(self) -> list[str]:
        return [a.name for a in self.attributes]


class Event(BaseModel):
    """
    A single record emitted by a stream.

    ``data[i]`` is the value of ``attributes[i]`` of the stream definition.
    """

    timestamp: int = Field(default=0, description="Event time in epoch millis")
    data: tuple[Any, ...] = Field(
        default_factory=tuple, description="Values aligned with the attributes"
    )

    model_config = {"frozen": True}
