import pytest

from rsfmt.text import TextRange, TextSize, slice_text_range


def test_between_is_the_gap_from_end_to_start() -> None:
    left = TextRange(0, 3)
    right = TextRange(10, 12)

    assert left.between(right) == TextRange(3, 10)


def test_between_touching_or_overlapping_ranges_is_empty() -> None:
    assert TextRange(0, 3).between(TextRange(3, 5)) == TextRange(3, 3)
    assert TextRange(0, 6).between(TextRange(3, 5)) == TextRange(3, 3)


def test_ranges_order_by_offset() -> None:
    first = TextRange(0, 3)
    second = TextRange(4, 6)

    assert first < second
    assert first.ordering(second) == -1
    assert second.ordering(first) == 1
    assert first.ordering(TextRange(2, 5)) == 0


def test_invalid_ranges_are_rejected() -> None:
    with pytest.raises(ValueError):
        TextRange(5, 3)
    with pytest.raises(ValueError):
        TextSize(-1)


def test_at_and_slice() -> None:
    source = "pub unsafe fn"
    keyword_range = TextRange.at(TextSize(4), TextSize.of("unsafe"))

    assert slice_text_range(source, keyword_range) == "unsafe"
    assert keyword_range.len() == TextSize(6)
    assert TextRange(0, 13).contains_range(keyword_range)
