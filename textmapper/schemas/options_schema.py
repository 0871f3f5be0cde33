"""
Mapper options as read from the sink's ``@map(...)`` annotation.

Option keys follow the annotation names (``event.grouping.enabled``,
``delimiter``, ``new.line.character``); python field names are accepted
as well. Unset options fall back to the values in Settings.
"""

from pydantic import BaseModel, Field

from textmapper.config import get_settings


class MapperOptions(BaseModel):
    """Static options of the text sink mapper."""

    event_grouping_enabled: bool = Field(
        default_factory=lambda: get_settings().event_grouping_enabled,
        alias="event.grouping.enabled",
        description="Group all events of one send call into a single payload",
    )
    delimiter: str = Field(
        default_factory=lambda: get_settings().event_delimiter,
        description="Whole-line marker placed between grouped events",
    )
    new_line_character: str = Field(
        default_factory=lambda: get_settings().new_line_character,
        alias="new.line.character",
        description="Line ending used in generated templates ('\\n' or '\\r\\n')",
    )

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}
