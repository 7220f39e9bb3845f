from dataclasses import dataclass
from typing import Final, Literal


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of text length / offset into the original source."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def of(text: str) -> "TextSize":
        """Create a TextSize from a string's length."""
        return TextSize(len(text))

    @staticmethod
    def from_int(value: int) -> "TextSize":
        return TextSize(value)

    def __add__(self, other: "TextSize") -> "TextSize":
        return TextSize(self.value + other.value)

    def __sub__(self, other: "TextSize") -> "TextSize":
        result = self.value - other.value
        if result < 0:
            raise ValueError("Resulting TextSize cannot be negative")
        return TextSize(result)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in the original source.

    Invariant:
    - 0 <= start <= end

    Offsets are python string indices, so for ASCII sources they are byte offsets.
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def new(start: TextSize, end: TextSize) -> "TextRange":
        return TextRange(start.value, end.value)

    @staticmethod
    def at(offset: TextSize, length: TextSize) -> "TextRange":
        """Create a TextRange at offset with given length."""
        return TextRange(offset.value, offset.value + length.value)

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset.value, offset.value)

    @staticmethod
    def _from_offsets(start: int, end: int) -> "TextRange":
        """Create a TextRange from integer offsets (internal use - prefer using TextSize in most APIs)."""
        return TextRange(start, end)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def len(self) -> TextSize:
        return TextSize(self._end - self._start)

    def is_empty(self) -> bool:
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def contains_range(self, other: "TextRange") -> bool:
        """Check if the range fully contains another range."""
        return self._start <= other._start and other._end <= self._end

    def between(self, other: "TextRange") -> "TextRange":
        """Get the gap from the end of this range to the start of `other`.

        Touching or overlapping ranges have no gap; an empty range at `other.start`
        is returned for those.
        """
        if other._start <= self._end:
            return TextRange._from_offsets(other._start, other._start)
        return TextRange._from_offsets(self._end, other._start)

    def ordering(self, other: "TextRange") -> Literal[-1, 0, 1]:
        """Compare this range to another range for ordering.

        Returns:
        - -1 if this range is before the other range
        - 0 if the ranges overlap
        - 1 if this range is after the other range
        """
        if self._end <= other._start:
            return -1
        elif other._end <= self._start:
            return 1
        else:
            return 0

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


DUMMY_RANGE: Final[TextRange] = TextRange(0, 0)
"""Placeholder range for parts with no meaningful location in the source."""


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Coord system matches python string indices so we can just do this.
    """
    return source[range.start.value : range.end.value]
