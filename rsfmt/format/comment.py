"""Recovering comments that sit between two rewritten parts."""

from __future__ import annotations

from dataclasses import dataclass

from rsfmt.config import FormatOptions
from rsfmt.errors import CommentMergeError
from rsfmt.format.context import RewriteContext
from rsfmt.format.shape import Shape
from rsfmt.lexer import TokenKind
from rsfmt.text import TextRange


@dataclass(frozen=True, slots=True)
class GapComment:
    """One comment found in a gap, with the layout facts needed to place it."""

    text: str
    range: TextRange
    is_line: bool
    preceded_by_newline: bool
    column: int


@dataclass(frozen=True, slots=True)
class GapComments:
    comments: tuple[GapComment, ...]
    ends_with_newline: bool

    @property
    def is_empty(self) -> bool:
        return not self.comments


def is_line_comment(comment: str) -> bool:
    return comment.lstrip().startswith("//")


def first_line_width(text: str) -> int:
    return len(text.split("\n", 1)[0])


def last_line_width(text: str) -> int:
    return len(text.rsplit("\n", 1)[-1])


def column_of(source: str, offset: int) -> int:
    """Column of `offset` on its line in `source`."""
    return offset - (source.rfind("\n", 0, offset) + 1)


def gap_comments(context: RewriteContext, gap: TextRange) -> GapComments:
    """Decompose a gap into comments.

    Raises CommentMergeError if the gap holds code or an unterminated comment.
    """
    source = context.snippet_provider.source
    comments: list[GapComment] = []
    saw_newline = False
    for token in context.snippet_provider.tokens_in(gap):
        match token.kind:
            case TokenKind.WHITESPACE:
                continue
            case TokenKind.NEWLINE:
                saw_newline = True
            case TokenKind.LINE_COMMENT | TokenKind.BLOCK_COMMENT:
                if token.is_unterminated:
                    raise CommentMergeError("Unterminated comment", gap)
                comments.append(
                    GapComment(
                        text=context.snippet(token.range).rstrip(),
                        range=token.range,
                        is_line=token.kind == TokenKind.LINE_COMMENT,
                        preceded_by_newline=saw_newline,
                        column=column_of(source, token.range.start.value),
                    )
                )
                saw_newline = False
            case _:
                raise CommentMergeError(f"Unexpected {token.kind.name} token", gap)

    return GapComments(comments=tuple(comments), ends_with_newline=saw_newline)


def rewrite_comment(
    comment: str,
    shape: Shape,
    options: FormatOptions,
    *,
    original_column: int | None = None,
) -> str:
    """Reproduce a comment verbatim, re-indented to `shape.indent`.

    Continuation lines of a multi-line block comment keep their position
    relative to the comment opener. When the opener's column is unknown the
    continuation lines are re-based on their common leading whitespace.
    """
    lines = comment.strip().split("\n")
    if len(lines) == 1:
        return lines[0]

    rest = [line.rstrip() for line in lines[1:]]
    if original_column is None:
        original_column = min(
            (len(line) - len(line.lstrip()) for line in rest if line.strip()),
            default=0,
        )

    indent_str = shape.indent.to_string(options)
    rebased: list[str] = [lines[0].rstrip()]
    for line in rest:
        if not line.strip():
            rebased.append("")
            continue
        leading = len(line) - len(line.lstrip())
        rebased.append(indent_str + line[min(leading, original_column) :])
    return "\n".join(rebased)


def rewrite_missing_comment(context: RewriteContext, gap: TextRange, shape: Shape) -> tuple[str, GapComments]:
    """Render every comment in a gap, one after another, at `shape.indent`.

    Consecutive block comments that shared a line in the original stay on one
    line when `inline_comments` is on; otherwise each comment gets its own line.
    """
    found = gap_comments(context, gap)
    options = context.options
    newline = shape.indent.to_string_with_newline(options)

    result = ""
    previous: GapComment | None = None
    for comment in found.comments:
        if previous is not None:
            keep_inline = options.inline_comments and not previous.is_line and not comment.preceded_by_newline
            result += " " if keep_inline else newline
        result += rewrite_comment(comment.text, shape, options, original_column=comment.column)
        previous = comment
    return result, found


def combine_strs_with_missing_comments(
    context: RewriteContext,
    prev_str: str,
    next_str: str,
    gap: TextRange,
    shape: Shape,
    allow_extend: bool,
) -> str:
    """Join two rewritten parts, putting back any comments from the gap between them.

    Without comments the parts are joined by a space when `allow_extend` holds
    and the result fits `shape.width`, and by a line break otherwise. Comments
    force line breaks unless `inline_comments` allows same-line placement.
    Line comments always end their line.

    Raises CommentMergeError when the gap cannot be read as comments; callers
    must recover from it.
    """
    options = context.options
    newline = shape.indent.to_string_with_newline(options)

    allow_one_line = "\n" not in prev_str and "\n" not in next_str
    first_sep = "" if not prev_str or not next_str or not prev_str.rsplit("\n", 1)[-1].strip() else " "
    one_line_width = last_line_width(prev_str) + first_line_width(next_str) + len(first_sep)

    missing_comment, found = rewrite_missing_comment(context, gap, shape)
    if found.is_empty:
        result = prev_str
        if allow_extend and one_line_width <= shape.width:
            result += first_sep
        elif prev_str:
            result += newline
        return result + next_str

    first, last = found.comments[0], found.comments[-1]

    if not prev_str:
        first_sep = ""
    else:
        width = last_line_width(prev_str) + first_line_width(missing_comment) + 1
        same_line = options.inline_comments and not first.preceded_by_newline and width <= shape.width
        first_sep = " " if same_line else newline

    if not next_str:
        second_sep = ""
    elif last.is_line:
        second_sep = newline
    else:
        width = last_line_width(prev_str + first_sep + missing_comment) + 1 + first_line_width(next_str)
        same_line = (
            options.inline_comments
            and allow_one_line
            and "\n" not in missing_comment
            and not found.ends_with_newline
            and width <= shape.width
        )
        second_sep = " " if same_line else newline

    return prev_str + first_sep + missing_comment + second_sep + next_str
