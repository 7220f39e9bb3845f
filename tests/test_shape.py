from rsfmt.config import FormatOptions
from rsfmt.format import INFINITE_WIDTH, Indent, Shape

OPTIONS = FormatOptions()


def test_indent_renders_spaces_or_tabs() -> None:
    indent = Indent(8, 2)

    assert indent.to_string(OPTIONS) == " " * 10
    assert indent.to_string(FormatOptions(hard_tabs=True)) == "\t\t  "
    assert indent.to_string_with_newline(OPTIONS) == "\n" + " " * 10


def test_indent_alignment_is_added_to_the_block_part() -> None:
    indent = Indent(4, 0) + 3

    assert indent == Indent(4, 3)
    assert indent.width() == 7


def test_infinite_width_is_unbounded() -> None:
    shape = Shape(width=10, indent=Indent(4, 0)).infinite_width()

    assert shape.is_unbounded
    assert shape.width == INFINITE_WIDTH
    assert shape.indent == Indent(4, 0)
    assert shape.sub_width(1_000) == shape


def test_indented_shape_uses_remaining_width() -> None:
    shape = Shape.indented(Indent(8, 0), FormatOptions(max_width=40))

    assert shape.width == 32
    assert shape.offset == 0


def test_block_and_visual_indent() -> None:
    shape = Shape(width=50, indent=Indent(4, 0), offset=6)

    assert shape.block_indent(4) == Shape(width=50, indent=Indent(8, 0), offset=0)
    assert shape.visual_indent(1) == Shape(width=50, indent=Indent(4, 7), offset=7)

    aligned = Shape(width=50, indent=Indent(4, 2), offset=2)
    assert aligned.block_indent(4) == Shape(width=50, indent=Indent(4, 6), offset=6)


def test_offset_left_and_sub_width() -> None:
    shape = Shape(width=10)

    assert shape.offset_left(4) == Shape(width=6, offset=4)
    assert shape.sub_width(11) is None
    assert shape.offset_left(11) is None
