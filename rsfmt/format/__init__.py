"""Header and list formatting."""

from rsfmt.format.comment import combine_strs_with_missing_comments, rewrite_comment
from rsfmt.format.context import RewriteContext
from rsfmt.format.header import (
    HeaderPart,
    Ident,
    Path,
    PathSegment,
    Safety,
    SafetyKind,
    Visibility,
    VisibilityKind,
    format_header,
)
from rsfmt.format.imports import UseItem, rewrite_use_item, rewrite_use_list
from rsfmt.format.items import FnHeader, TraitHeader, format_fn_header, format_trait_header
from rsfmt.format.lists import (
    DefinitiveListTactic,
    ListFormatting,
    ListItem,
    ListItemCommentStyle,
    ListSettings,
    definitive_tactic,
    layout_list,
    write_list,
)
from rsfmt.format.shape import INFINITE_WIDTH, Indent, Shape

__all__ = [
    "INFINITE_WIDTH",
    "DefinitiveListTactic",
    "FnHeader",
    "HeaderPart",
    "Ident",
    "Indent",
    "ListFormatting",
    "ListItem",
    "ListItemCommentStyle",
    "ListSettings",
    "Path",
    "PathSegment",
    "RewriteContext",
    "Safety",
    "SafetyKind",
    "Shape",
    "TraitHeader",
    "UseItem",
    "Visibility",
    "VisibilityKind",
    "combine_strs_with_missing_comments",
    "definitive_tactic",
    "format_fn_header",
    "format_header",
    "format_trait_header",
    "layout_list",
    "rewrite_comment",
    "rewrite_use_item",
    "rewrite_use_list",
    "write_list",
]
