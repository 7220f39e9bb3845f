import pytest

from rsfmt.errors import CommentMergeError
from rsfmt.format import Indent, Shape, combine_strs_with_missing_comments, rewrite_comment
from rsfmt.format.comment import gap_comments
from rsfmt.text import TextRange
from tests._shared_cases import context_for


def _gap(source: str, left: str, right: str) -> TextRange:
    start = source.index(left) + len(left)
    return TextRange(start, source.index(right, start))


def test_plain_gap_joins_with_space_when_it_fits() -> None:
    source = "a b"
    context = context_for(source)

    assert combine_strs_with_missing_comments(context, "a", "b", _gap(source, "a", "b"), Shape(width=10), True) == "a b"


def test_plain_gap_breaks_when_too_wide_or_not_extendable() -> None:
    source = "a b"
    context = context_for(source)
    gap = _gap(source, "a", "b")

    assert combine_strs_with_missing_comments(context, "a", "b", gap, Shape(width=2), True) == "a\nb"
    assert combine_strs_with_missing_comments(context, "a", "b", gap, Shape(width=10), False) == "a\nb"
    assert (
        combine_strs_with_missing_comments(context, "a", "b", gap, Shape(width=10, indent=Indent(4, 0)), False)
        == "a\n    b"
    )


def test_gap_with_code_cannot_be_merged() -> None:
    source = "a + b"
    context = context_for(source)

    with pytest.raises(CommentMergeError):
        combine_strs_with_missing_comments(context, "a", "b", _gap(source, "a", "b"), Shape(width=10), True)


def test_gap_with_unterminated_comment_cannot_be_merged() -> None:
    source = "a /* b"
    context = context_for(source)

    with pytest.raises(CommentMergeError):
        gap_comments(context, TextRange(1, len(source)))


def test_gap_comments_records_layout_facts() -> None:
    source = "x // one\n  /* two */ y"
    context = context_for(source)

    found = gap_comments(context, _gap(source, "x", "y"))

    assert [comment.text for comment in found.comments] == ["// one", "/* two */"]
    assert [comment.is_line for comment in found.comments] == [True, False]
    assert [comment.preceded_by_newline for comment in found.comments] == [False, True]
    assert [comment.column for comment in found.comments] == [2, 2]
    assert found.ends_with_newline is False


def test_comment_marker_inside_string_is_code() -> None:
    source = 'a "/* no */" b'
    context = context_for(source)

    with pytest.raises(CommentMergeError):
        gap_comments(context, _gap(source, "a", "b"))


def test_empty_left_side_starts_with_the_comment() -> None:
    source = "/* c */ b"
    context = context_for(source)

    result = combine_strs_with_missing_comments(context, "", "b", TextRange(0, 8), Shape(width=10), True)

    assert result == "/* c */\nb"


def test_inline_comment_breaks_when_width_is_exhausted() -> None:
    source = "alpha /* comment */ beta"
    context = context_for(source, inline_comments=True)
    gap = _gap(source, "alpha", "beta")

    assert combine_strs_with_missing_comments(context, "alpha", "beta", gap, Shape(width=100), True) == source
    assert combine_strs_with_missing_comments(context, "alpha", "beta", gap, Shape(width=10), True) == (
        "alpha\n/* comment */\nbeta"
    )


def test_inline_comment_keeps_original_line_break_before_comment() -> None:
    source = "a\n/* c */ b"
    context = context_for(source, inline_comments=True)

    result = combine_strs_with_missing_comments(context, "a", "b", _gap(source, "a", "b"), Shape(width=100), True)

    assert result == "a\n/* c */ b"


def test_rewrite_comment_single_line_is_verbatim() -> None:
    context = context_for("")

    assert rewrite_comment("  /* keep   spacing */  ", Shape(width=10), context.options) == "/* keep   spacing */"


def test_rewrite_comment_rebases_continuation_lines() -> None:
    context = context_for("")
    comment = "/*\n    * a\n    *   b\n    */"

    result = rewrite_comment(comment, Shape(width=10, indent=Indent(2, 0)), context.options)

    assert result == "/*\n  * a\n  *   b\n  */"


def test_rewrite_comment_uses_tabs_for_block_indent() -> None:
    context = context_for("", hard_tabs=True)
    comment = "/* a\n     b */"

    result = rewrite_comment(comment, Shape(width=10, indent=Indent(4, 0)), context.options, original_column=2)

    assert result == "/* a\n\t   b */"


def test_form_feed_and_other_whitespace_in_gap_keep_the_comment() -> None:
    source = "a /* x */\x0c\u200eb"
    context = context_for(source)

    result = combine_strs_with_missing_comments(context, "a", "b", _gap(source, "a", "b"), Shape(width=10), True)

    assert result == "a\n/* x */\nb"


def test_unicode_line_separator_counts_as_newline() -> None:
    source = "a\u2028/* x */ b"
    context = context_for(source, inline_comments=True)

    found = gap_comments(context, _gap(source, "a", "b"))

    assert found.comments[0].preceded_by_newline is True
