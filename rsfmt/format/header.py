"""Headers are runs of consecutive keywords and names, such as
`pub const unsafe fn foo` and `pub(crate) unsafe trait Bar`.

A header is always kept on a single line, except where the original source
has comments between its parts.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import Final

from rsfmt.errors import CommentMergeError, InvariantViolation
from rsfmt.format.comment import combine_strs_with_missing_comments
from rsfmt.format.context import RewriteContext
from rsfmt.format.shape import Shape
from rsfmt.text import DUMMY_RANGE, TextRange, TextSize

logger = logging.getLogger(__name__)

PATH_ROOT: Final[str] = "{{root}}"
"""Name of the implicit first segment of a global (`::a::b`) path."""

_PATH_KEYWORDS: Final[frozenset[str]] = frozenset({"crate", "self", "super"})


@dataclass(frozen=True, slots=True)
class Ident:
    name: str
    range: TextRange = DUMMY_RANGE


@dataclass(frozen=True, slots=True)
class PathSegment:
    ident: Ident


@dataclass(frozen=True, slots=True)
class Path:
    segments: tuple[PathSegment, ...]
    range: TextRange = DUMMY_RANGE
    is_global: bool = False

    @staticmethod
    def from_names(*names: str, is_global: bool = False) -> "Path":
        segments = tuple(PathSegment(Ident(name)) for name in names)
        if is_global:
            segments = (PathSegment(Ident(PATH_ROOT)),) + segments
        return Path(segments=segments, is_global=is_global)


class VisibilityKind(StrEnum):
    PUBLIC = "public"
    INHERITED = "inherited"
    RESTRICTED = "restricted"


@dataclass(frozen=True, slots=True)
class Visibility:
    kind: VisibilityKind
    range: TextRange = DUMMY_RANGE
    path: Path | None = None

    @staticmethod
    def public(range: TextRange = DUMMY_RANGE) -> "Visibility":
        return Visibility(VisibilityKind.PUBLIC, range)

    @staticmethod
    def inherited() -> "Visibility":
        return Visibility(VisibilityKind.INHERITED)

    @staticmethod
    def restricted(path: Path, range: TextRange = DUMMY_RANGE) -> "Visibility":
        return Visibility(VisibilityKind.RESTRICTED, range, path)


class SafetyKind(StrEnum):
    UNSAFE = "unsafe"
    SAFE = "safe"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class Safety:
    kind: SafetyKind
    range: TextRange = DUMMY_RANGE

    @staticmethod
    def unsafe(range: TextRange) -> "Safety":
        return Safety(SafetyKind.UNSAFE, range)

    @staticmethod
    def safe(range: TextRange) -> "Safety":
        return Safety(SafetyKind.SAFE, range)

    @staticmethod
    def default() -> "Safety":
        return Safety(SafetyKind.DEFAULT)


def rewrite_ident(context: RewriteContext, ident: Ident) -> str:
    # Snippet keeps the source spelling, e.g. raw identifiers like `r#try`.
    if ident.range.is_empty():
        return ident.name
    return context.snippet(ident.range)


@dataclass(frozen=True, slots=True)
class HeaderPart:
    """Snippet of one header part, without surrounding space, and where it came from."""

    snippet: str
    range: TextRange

    @staticmethod
    def ident(context: RewriteContext, ident: Ident) -> "HeaderPart":
        return HeaderPart(rewrite_ident(context, ident), ident.range)

    @staticmethod
    def visibility(context: RewriteContext, vis: Visibility) -> "HeaderPart":
        match vis.kind:
            case VisibilityKind.PUBLIC:
                snippet = "pub"
            case VisibilityKind.INHERITED:
                snippet = ""
            case VisibilityKind.RESTRICTED:
                snippet = _rewrite_restricted(context, vis.path)
        return HeaderPart(snippet, vis.range)

    @staticmethod
    def safety(safety: Safety) -> "HeaderPart":
        match safety.kind:
            case SafetyKind.UNSAFE:
                return HeaderPart("unsafe", safety.range)
            case SafetyKind.SAFE:
                return HeaderPart("safe", safety.range)
            case SafetyKind.DEFAULT:
                return HeaderPart("", DUMMY_RANGE)

    @staticmethod
    def keyword(context: RewriteContext, keyword: str, range: TextRange) -> "HeaderPart":
        """Given a `range` covering `/* comment */ keyword /* comment */`, the part for just `keyword`.

        The tight range keeps the comments out of the keyword, so they show up
        in the gaps to its neighbours instead.
        """
        lo = context.snippet_provider.span_before(range, keyword)
        return HeaderPart(keyword, TextRange.at(lo, TextSize.of(keyword)))


def _rewrite_restricted(context: RewriteContext, path: Path | None) -> str:
    if path is None:
        raise InvariantViolation("Restricted visibility without a path")

    segments = iter(path.segments)
    if path.is_global and next(segments, None) is None:
        raise InvariantViolation("Global path in pub(restricted) has no root segment")

    joined = "::".join(rewrite_ident(context, segment.ident) for segment in segments)
    in_str = "" if joined in _PATH_KEYWORDS else "in "
    return f"pub({in_str}{joined})"


def format_header(context: RewriteContext, shape: Shape, parts: Iterable[HeaderPart]) -> str:
    """Join header parts on one line, breaking only where comments sit between them."""
    parts = [part for part in parts if part.snippet]
    logger.debug("format_header parts=%r", parts)
    shape = shape.infinite_width()

    if not parts:
        return ""

    result = parts[0].snippet
    range = parts[0].range

    for part in parts[1:]:
        if range.is_empty() or part.range.is_empty() or range.ordering(part.range) != -1:
            # Parts without a source location, or not after the previous one, have no gap to search.
            gap = TextRange.empty(part.range.start)
        else:
            gap = range.between(part.range)
        try:
            result = combine_strs_with_missing_comments(context, result, part.snippet, gap, shape, True)
        except CommentMergeError as exc:
            logger.debug("format_header falling back to plain join: %s", exc)
            result = f"{result} {part.snippet}"
        logger.debug("format_header result=%r", result)
        range = part.range

    return result
