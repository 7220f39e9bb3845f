"""Text offsets and ranges."""

from rsfmt.text.text import DUMMY_RANGE, TextRange, TextSize, slice_text_range

__all__ = [
    "DUMMY_RANGE",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
