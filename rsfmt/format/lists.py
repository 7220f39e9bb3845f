"""Formatting of comma-separated lists: import segments, fields, arguments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
import logging

from rsfmt.config import FormatOptions, IndentStyle, ListTactic, SeparatorTactic
from rsfmt.format.comment import column_of, is_line_comment, rewrite_comment
from rsfmt.format.context import RewriteContext
from rsfmt.format.shape import Indent, Shape
from rsfmt.text import DUMMY_RANGE, TextRange

logger = logging.getLogger(__name__)


class DefinitiveListTactic(StrEnum):
    """The tactic a list is actually written with."""

    HORIZONTAL = "Horizontal"
    VERTICAL = "Vertical"
    MIXED = "Mixed"


class ListItemCommentStyle(StrEnum):
    # Pre-comment on the line(s) before the item.
    DIFFERENT_LINE = "different_line"
    # Pre-comment on the same line as the item.
    SAME_LINE = "same_line"


@dataclass(frozen=True, slots=True)
class ListItem:
    """One already-rewritten list element and the comments that belong to it."""

    item: str
    pre_comment: str | None = None
    pre_comment_style: ListItemCommentStyle = ListItemCommentStyle.SAME_LINE
    post_comment: str | None = None
    range: TextRange = DUMMY_RANGE
    # Blank line after this item in the original.
    new_lines: bool = False
    # Source columns of the comment openers; continuation lines keep their offset to them.
    pre_comment_column: int | None = None
    post_comment_column: int | None = None

    @staticmethod
    def from_str(text: str) -> "ListItem":
        return ListItem(item=text)

    @staticmethod
    def from_source(
        context: RewriteContext,
        item: str,
        range: TextRange,
        *,
        pre_comment_range: TextRange | None = None,
        post_comment_range: TextRange | None = None,
        pre_comment_style: ListItemCommentStyle = ListItemCommentStyle.SAME_LINE,
        new_lines: bool = False,
    ) -> "ListItem":
        """Rewritten `item` with its comments read back from the source."""
        source = context.snippet_provider.source
        pre_comment = pre_column = post_comment = post_column = None
        if pre_comment_range is not None:
            pre_comment = context.snippet(pre_comment_range).strip()
            pre_column = column_of(source, pre_comment_range.start.value)
        if post_comment_range is not None:
            post_comment = context.snippet(post_comment_range).strip()
            post_column = column_of(source, post_comment_range.start.value)
        return ListItem(
            item=item,
            pre_comment=pre_comment,
            pre_comment_style=pre_comment_style,
            post_comment=post_comment,
            range=range,
            new_lines=new_lines,
            pre_comment_column=pre_column,
            post_comment_column=post_column,
        )

    @property
    def is_multiline(self) -> bool:
        return (
            "\n" in self.item
            or (self.pre_comment is not None and "\n" in self.pre_comment)
            or (self.post_comment is not None and "\n" in self.post_comment)
        )

    @property
    def has_line_comment(self) -> bool:
        return any(comment is not None and is_line_comment(comment) for comment in (self.pre_comment, self.post_comment))

    @property
    def is_substantial(self) -> bool:
        return bool(self.item) or bool(self.pre_comment) or bool(self.post_comment)


def comment_len(comment: str | None) -> int:
    if comment is None:
        return 0
    text_len = len(comment.strip())
    # 1 = the space separating the comment from its item
    return text_len + 1 if text_len > 0 else 0


def total_item_width(item: ListItem) -> int:
    return comment_len(item.pre_comment) + comment_len(item.post_comment) + len(item.item)


def definitive_tactic(
    items: Sequence[ListItem],
    tactic: ListTactic,
    separator: str,
    width: int,
) -> DefinitiveListTactic:
    """Resolve a tactic preference into the tactic the list is written with.

    A line comment anywhere in the list forces Vertical, whatever the preference.
    """
    if any(item.has_line_comment for item in items):
        return DefinitiveListTactic.VERTICAL

    match tactic:
        case ListTactic.HORIZONTAL:
            return DefinitiveListTactic.HORIZONTAL
        case ListTactic.VERTICAL:
            return DefinitiveListTactic.VERTICAL
        case ListTactic.MIXED | ListTactic.HORIZONTAL_VERTICAL:
            pass

    # 1 = the space after the separator
    sep_len = len(separator.rstrip()) + 1
    total_width = sum(total_item_width(item) for item in items)
    real_total = total_width + sep_len * max(len(items) - 1, 0)

    if real_total <= width and not any(item.is_multiline for item in items):
        return DefinitiveListTactic.HORIZONTAL
    if tactic == ListTactic.MIXED:
        return DefinitiveListTactic.MIXED
    return DefinitiveListTactic.VERTICAL


@dataclass(frozen=True, slots=True)
class ListFormatting:
    """How `write_list` renders items: tactic, separator and the shape items live in."""

    shape: Shape
    options: FormatOptions
    tactic: DefinitiveListTactic = DefinitiveListTactic.HORIZONTAL
    separator: str = ","
    trailing_separator: SeparatorTactic = SeparatorTactic.NEVER
    # The list is closed on a line of its own, so its last line always ends with a break.
    ends_with_newline: bool = True
    preserve_newline: bool = False
    # Items are import trees; `::` paths and nested lists get lines of their own in Mixed.
    nested: bool = False

    def needs_trailing_separator(self) -> bool:
        match self.trailing_separator:
            case SeparatorTactic.ALWAYS:
                return True
            case SeparatorTactic.MULTILINE_ONLY:
                return self.tactic == DefinitiveListTactic.VERTICAL
            case SeparatorTactic.NEVER:
                return False


def write_list(items: Sequence[ListItem], formatting: ListFormatting) -> str:
    """Render list items with their separators and comments, without brackets.

    Continuation lines start at `formatting.shape.indent`; the first line
    starts wherever the caller splices the result.
    """
    tactic = formatting.tactic
    options = formatting.options
    shape = formatting.shape
    separator = formatting.separator.rstrip()
    indent_str = shape.indent.to_string(options)
    newline = "\n" + indent_str

    trailing_separator = formatting.needs_trailing_separator()
    result = ""
    line_len = 0
    prev_item_had_post_comment = False
    prev_item_had_line_comment = False
    prev_item_is_nested_import = False

    substantial = [item for item in items if item.is_substantial]
    for index, item in enumerate(substantial):
        inner_item = item.item
        first = index == 0
        last = index == len(substantial) - 1
        separate = not last or trailing_separator
        item_sep_len = len(separator) if separate else 0

        match tactic:
            case DefinitiveListTactic.HORIZONTAL if not first:
                result += newline if prev_item_had_line_comment else " "
            case DefinitiveListTactic.VERTICAL if not first and result:
                result += newline
            case DefinitiveListTactic.MIXED:
                total_width = total_item_width(item) + item_sep_len
                nested_break = formatting.nested and (prev_item_is_nested_import or (not first and "::" in inner_item))
                # 1 = the space between the previous separator and this item
                if (
                    (line_len > 0 and line_len + 1 + total_width > shape.width)
                    or prev_item_had_post_comment
                    or nested_break
                ):
                    result += newline
                    line_len = 0
                    if formatting.ends_with_newline:
                        trailing_separator = True
                elif line_len > 0:
                    result += " "
                    line_len += 1

                if last:
                    separate = _last_separator(formatting, multiline=formatting.ends_with_newline or "\n" in result)
                line_len += total_width
            case _:
                pass

        if item.pre_comment:
            comment = rewrite_comment(item.pre_comment, shape, options, original_column=item.pre_comment_column)
            result += comment
            if inner_item:
                if _keep_pre_comment_inline(item, comment, tactic, item_sep_len, shape.width):
                    result += " "
                else:
                    result += newline
                    if tactic == DefinitiveListTactic.MIXED:
                        line_len = len(inner_item) + item_sep_len

        result += inner_item

        post_comment = item.post_comment
        if post_comment and not is_line_comment(post_comment) and tactic == DefinitiveListTactic.HORIZONTAL:
            result += " " + rewrite_comment(
                post_comment,
                Shape.legacy(shape.width, Indent.empty()),
                options,
                original_column=item.post_comment_column,
            )
            post_comment = None

        if separate:
            result += separator

        if post_comment:
            result += " " + rewrite_comment(post_comment, shape, options, original_column=item.post_comment_column)

        if formatting.preserve_newline and not last and tactic == DefinitiveListTactic.VERTICAL and item.new_lines:
            result += "\n"

        prev_item_had_post_comment = item.post_comment is not None
        prev_item_had_line_comment = item.post_comment is not None and is_line_comment(item.post_comment)
        prev_item_is_nested_import = "::" in inner_item

    return result


def _last_separator(formatting: ListFormatting, *, multiline: bool) -> bool:
    match formatting.trailing_separator:
        case SeparatorTactic.ALWAYS:
            return True
        case SeparatorTactic.MULTILINE_ONLY:
            return multiline
        case SeparatorTactic.NEVER:
            return False


def _keep_pre_comment_inline(
    item: ListItem,
    comment: str,
    tactic: DefinitiveListTactic,
    item_sep_len: int,
    width: int,
) -> bool:
    if is_line_comment(comment) or "\n" in comment:
        return False
    if tactic == DefinitiveListTactic.HORIZONTAL:
        return True
    if item.pre_comment_style == ListItemCommentStyle.DIFFERENT_LINE:
        return False
    # 1 = the space between comment and item
    return total_item_width(item) + item_sep_len + 1 <= width


@dataclass(frozen=True, slots=True)
class ListSettings:
    """Per-list layout configuration."""

    tactic: ListTactic = ListTactic.HORIZONTAL_VERTICAL
    indent_style: IndentStyle = IndentStyle.BLOCK
    trailing_separator: SeparatorTactic = SeparatorTactic.MULTILINE_ONLY
    separator: str = ","


def layout_list(
    context: RewriteContext,
    items: Sequence[ListItem],
    settings: ListSettings,
    shape: Shape,
    *,
    opener: str = "",
    closer: str = "",
    nested: bool = False,
    one_line_width: int | None = None,
) -> str:
    """Lay out a bracketed list, ready to splice where `opener` starts.

    `shape.offset` is the column the opener starts at. Block style moves a
    multi-line body one indent step in and puts the closer on its own line;
    visual style aligns continuation lines under the first item.
    """
    options = context.options
    if one_line_width is None:
        one_line_width = max(shape.width - len(opener) - len(closer), 0)

    tactic = definitive_tactic(items, settings.tactic, settings.separator, one_line_width)
    logger.debug("layout_list preference=%s tactic=%s width=%d", settings.tactic, tactic, one_line_width)

    match settings.indent_style:
        case IndentStyle.BLOCK:
            ends_with_newline = tactic != DefinitiveListTactic.HORIZONTAL
            nested_shape = _shrink(shape.block_indent(options.tab_spaces).with_max_width(options), 1)
            trailing_separator = settings.trailing_separator
            if not ends_with_newline and trailing_separator != SeparatorTactic.ALWAYS:
                trailing_separator = SeparatorTactic.NEVER
        case IndentStyle.VISUAL:
            ends_with_newline = False
            nested_shape = _shrink(shape.add_offset(len(opener)), len(opener) + len(closer)).visual_indent(0)
            trailing_separator = settings.trailing_separator
            if trailing_separator != SeparatorTactic.ALWAYS:
                trailing_separator = SeparatorTactic.NEVER

    formatting = ListFormatting(
        shape=nested_shape,
        options=options,
        tactic=tactic,
        separator=settings.separator,
        trailing_separator=trailing_separator,
        ends_with_newline=ends_with_newline,
        preserve_newline=True,
        nested=nested,
    )
    body = write_list(items, formatting)
    if not body:
        return f"{opener}{closer}"

    if settings.indent_style == IndentStyle.BLOCK and (
        "\n" in body or len(body) > one_line_width or tactic == DefinitiveListTactic.VERTICAL
    ):
        return (
            f"{opener}{nested_shape.indent.to_string_with_newline(options)}{body}"
            f"{shape.indent.to_string_with_newline(options)}{closer}"
        )

    if closer and items and items[-1].has_line_comment and _ends_with_line_comment(items[-1]):
        return f"{opener}{body}{shape.indent.to_string_with_newline(options)}{closer}"
    return f"{opener}{body}{closer}"


def _ends_with_line_comment(item: ListItem) -> bool:
    if item.post_comment is not None:
        return is_line_comment(item.post_comment)
    return not item.item and item.pre_comment is not None and is_line_comment(item.pre_comment)


def _shrink(shape: Shape, width: int) -> Shape:
    shrunk = shape.sub_width(width)
    if shrunk is None:
        return Shape(width=0, indent=shape.indent, offset=shape.offset)
    return shrunk
