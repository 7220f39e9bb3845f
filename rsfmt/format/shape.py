"""Width budgets and indentation."""

from dataclasses import dataclass
import sys
from typing import Final

from rsfmt.config import FormatOptions

INFINITE_WIDTH: Final[int] = sys.maxsize
"""Width of the unbounded shape; nothing is ever wrapped for exceeding it."""


@dataclass(frozen=True, slots=True)
class Indent:
    """Indentation split into a block part (multiples of tab_spaces) and an alignment part.

    Only the block part is rendered with tabs when `hard_tabs` is on; alignment
    is always spaces so visually aligned code stays aligned.
    """

    block_indent: int = 0
    alignment: int = 0

    def __post_init__(self):
        if self.block_indent < 0 or self.alignment < 0:
            raise ValueError("Indent cannot be negative")

    @staticmethod
    def empty() -> "Indent":
        return Indent(0, 0)

    def width(self) -> int:
        return self.block_indent + self.alignment

    def to_string(self, options: FormatOptions) -> str:
        if options.hard_tabs:
            tabs, spaces = divmod(self.block_indent, options.tab_spaces)
            return "\t" * tabs + " " * (spaces + self.alignment)
        return " " * self.width()

    def to_string_with_newline(self, options: FormatOptions) -> str:
        return "\n" + self.to_string(options)

    def __add__(self, extra: int) -> "Indent":
        return Indent(self.block_indent, self.alignment + extra)


@dataclass(frozen=True, slots=True)
class Shape:
    """Remaining width for a rewrite, plus where its continuation lines start.

    `offset` is the column (past `indent.block_indent`) at which the rewrite
    begins on its first line; visual indentation aligns to it.
    """

    width: int
    indent: Indent = Indent()
    offset: int = 0

    def __post_init__(self):
        if self.width < 0 or self.offset < 0:
            raise ValueError("Shape width and offset cannot be negative")

    @staticmethod
    def legacy(width: int, indent: Indent) -> "Shape":
        return Shape(width=width, indent=indent, offset=indent.alignment)

    @staticmethod
    def indented(indent: Indent, options: FormatOptions) -> "Shape":
        """Shape for a rewrite starting at `indent`, bounded by `max_width`."""
        return Shape(
            width=max(options.max_width - indent.width(), 0),
            indent=indent,
            offset=indent.alignment,
        )

    @property
    def is_unbounded(self) -> bool:
        return self.width == INFINITE_WIDTH

    def infinite_width(self) -> "Shape":
        return Shape(width=INFINITE_WIDTH, indent=self.indent, offset=self.offset)

    def with_max_width(self, options: FormatOptions) -> "Shape":
        return Shape(
            width=max(options.max_width - self.indent.width(), 0),
            indent=self.indent,
            offset=self.offset,
        )

    def visual_indent(self, extra_width: int) -> "Shape":
        """Align continuation lines at the current offset plus `extra_width`."""
        alignment = self.offset + extra_width
        return Shape(
            width=self.width,
            indent=Indent(self.indent.block_indent, alignment),
            offset=alignment,
        )

    def block_indent(self, extra_width: int) -> "Shape":
        if self.indent.alignment == 0:
            return Shape(width=self.width, indent=Indent(self.indent.block_indent + extra_width, 0), offset=0)
        return Shape(
            width=self.width,
            indent=self.indent + extra_width,
            offset=self.indent.alignment + extra_width,
        )

    def add_offset(self, extra_width: int) -> "Shape":
        return Shape(width=self.width, indent=self.indent, offset=self.offset + extra_width)

    def sub_width(self, width: int) -> "Shape | None":
        if self.is_unbounded:
            return self
        if width > self.width:
            return None
        return Shape(width=self.width - width, indent=self.indent, offset=self.offset)

    def offset_left(self, width: int) -> "Shape | None":
        """Consume `width` columns at the start of the line."""
        return self.add_offset(width).sub_width(width)
