"""Formatting of `use` items."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from rsfmt.format.comment import last_line_width
from rsfmt.format.context import RewriteContext
from rsfmt.format.header import HeaderPart, Visibility, format_header
from rsfmt.format.lists import ListItem, ListSettings, layout_list
from rsfmt.format.shape import Shape
from rsfmt.text import TextRange


@dataclass(frozen=True, slots=True)
class UseItem:
    """`vis use prefix::{items};`, or `vis use prefix;` when `items` is None."""

    vis: Visibility
    # Covers the `use` keyword and any comments around it.
    use_range: TextRange
    prefix: tuple[str, ...]
    items: tuple[ListItem, ...] | None = None


def rewrite_use_list(context: RewriteContext, shape: Shape, items: Sequence[ListItem]) -> str:
    """Brace list of use segments laid out per `imports_layout` and `imports_indent`."""
    options = context.options
    has_nested_list = any("{" in item.item for item in items)
    # 2 = `{}`
    remaining_width = 0 if has_nested_list else max(shape.width - 2, 0)

    settings = ListSettings(
        tactic=options.imports_layout,
        indent_style=options.imports_indent,
        trailing_separator=options.trailing_comma,
    )
    return layout_list(
        context,
        items,
        settings,
        shape,
        opener="{",
        closer="}",
        nested=has_nested_list,
        one_line_width=remaining_width,
    )


def rewrite_use_item(context: RewriteContext, shape: Shape, item: UseItem) -> str:
    header = format_header(
        context,
        shape,
        [
            HeaderPart.visibility(context, item.vis),
            HeaderPart.keyword(context, "use", item.use_range),
        ],
    )
    path = "::".join(item.prefix)
    if item.items is None:
        return f"{header} {path};"

    path_str = f"{path}::" if path else ""
    # 1 = the space after the header, 1 = `;`
    used = last_line_width(header) + 1 + len(path_str)
    list_shape = shape.offset_left(used)
    list_shape = list_shape.sub_width(1) if list_shape is not None else None
    if list_shape is None:
        list_shape = Shape(width=0, indent=shape.indent, offset=shape.offset + used)

    return f"{header} {path_str}{rewrite_use_list(context, list_shape, item.items)};"
