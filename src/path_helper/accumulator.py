"""Ordered, duplicate-free colon-separated path builder."""

from __future__ import annotations

from collections.abc import Iterable

from path_helper.errors import InvalidSegmentError

SEPARATOR = ":"


class PathAccumulator:
    """
    Build a colon-separated path list one segment at a time.

    A segment is dropped when it already appears as a whole colon-delimited
    field of the current value, so ``bin`` is still added after ``sbin``.
    The first occurrence of a segment fixes its position.
    """

    def __init__(self) -> None:
        self._segments: list[str] = []
        self._fields: set[str] = set()

    @property
    def value(self) -> str:
        return SEPARATOR.join(self._segments)

    def __contains__(self, segment: object) -> bool:
        return isinstance(segment, str) and bool(segment) and self._is_present(segment)

    def append(self, segment: str | None) -> PathAccumulator:
        """
        Append *segment* unless it is empty or already present.

        Raises:
            InvalidSegmentError: If *segment* is ``None``.
            MemoryError: If storage cannot grow; the value is left unchanged.

        """
        if segment is None:
            raise InvalidSegmentError("Cannot append a missing path segment")
        if not segment or segment in self:
            return self

        fields = segment.split(SEPARATOR)
        self._segments.append(segment)
        try:
            self._fields.update(fields)
        except MemoryError:
            self._segments.pop()
            self._fields = {field for existing in self._segments for field in existing.split(SEPARATOR)}
            raise
        return self

    def extend(self, segments: Iterable[str]) -> PathAccumulator:
        for segment in segments:
            self.append(segment)
        return self

    def _is_present(self, segment: str) -> bool:
        if SEPARATOR not in segment:
            return segment in self._fields
        # A segment spanning several fields must match a contiguous run of them.
        return f"{SEPARATOR}{segment}{SEPARATOR}" in f"{SEPARATOR}{self.value}{SEPARATOR}"
