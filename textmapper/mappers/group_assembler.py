"""
Group assembly for event grouping.

Each grouped fragment ends with ``line-ending + delimiter + line-ending``.
Concatenating fragments therefore yields the delimiter between every pair
of events; only the block after the last event has to go. Fragments are
kept separately until ``finish`` so the trim only ever touches the last
fragment, even when event text contains the delimiter itself.
"""

from textmapper.core.exceptions import MappingStateException


class GroupAssembler:
    """Accumulate grouped fragments and emit one trimmed payload."""

    def __init__(self, group_suffix: str) -> None:
        if not group_suffix:
            raise ValueError("group_suffix must not be empty")
        self._group_suffix = group_suffix
        self._fragments: list[str] = []

    @property
    def is_empty(self) -> bool:
        return not self._fragments

    def __len__(self) -> int:
        return len(self._fragments)

    def append(self, fragment: str) -> None:
        self._fragments.append(fragment)

    def finish(self) -> str:
        """
        Join the fragments, drop the trailing delimiter block and reset.

        Raises:
            MappingStateException: If nothing was appended.
        """
        if not self._fragments:
            raise MappingStateException(
                message="Cannot finish an empty event group.",
            )
        *head, last = self._fragments
        self._fragments = []
        return "".join(head) + last.removesuffix(self._group_suffix)
