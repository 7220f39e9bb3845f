import pytest

from rsfmt.errors import InvariantViolation
from rsfmt.source import SnippetProvider
from rsfmt.text import TextRange, TextSize


def test_text_of_returns_raw_source() -> None:
    provider = SnippetProvider("pub /* x */ fn")

    assert provider.text_of(TextRange(3, 12)) == " /* x */ "


def test_text_of_out_of_bounds_is_fatal() -> None:
    provider = SnippetProvider("abc")

    with pytest.raises(InvariantViolation):
        provider.text_of(TextRange(1, 10))


def test_span_before_skips_comments_and_strings() -> None:
    source = '/* fn */ "fn" fn'
    provider = SnippetProvider(source)

    assert provider.span_before(TextRange(0, len(source)), "fn") == TextSize(14)


def test_span_before_matches_whole_identifiers() -> None:
    source = "unsafety unsafe"
    provider = SnippetProvider(source)

    assert provider.span_before(TextRange(0, len(source)), "unsafe") == TextSize(9)


def test_span_before_finds_punctuation() -> None:
    provider = SnippetProvider("a::b")

    assert provider.span_before(TextRange(0, 4), "::") == TextSize(1)


def test_span_before_respects_range_end() -> None:
    source = "trait Foo"
    provider = SnippetProvider(source)

    assert provider.opt_span_before(TextRange(0, 3), "trait") is None
    with pytest.raises(InvariantViolation):
        provider.span_before(TextRange(0, 3), "trait")
