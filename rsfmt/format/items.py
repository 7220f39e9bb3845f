"""Item headers built from header parts."""

from __future__ import annotations

from dataclasses import dataclass

from rsfmt.format.context import RewriteContext
from rsfmt.format.header import HeaderPart, Ident, Safety, Visibility, format_header
from rsfmt.format.shape import Shape
from rsfmt.text import TextRange


@dataclass(frozen=True, slots=True)
class TraitHeader:
    vis: Visibility
    safety: Safety
    ident: Ident
    trait_range: TextRange
    auto_range: TextRange | None = None


@dataclass(frozen=True, slots=True)
class FnHeader:
    vis: Visibility
    safety: Safety
    ident: Ident
    fn_range: TextRange
    const_range: TextRange | None = None
    async_range: TextRange | None = None


def format_trait_header(context: RewriteContext, shape: Shape, header: TraitHeader) -> str:
    """`pub unsafe auto trait Foo`"""
    parts = [
        HeaderPart.visibility(context, header.vis),
        HeaderPart.safety(header.safety),
    ]
    if header.auto_range is not None:
        parts.append(HeaderPart.keyword(context, "auto", header.auto_range))
    parts.append(HeaderPart.keyword(context, "trait", header.trait_range))
    parts.append(HeaderPart.ident(context, header.ident))
    return format_header(context, shape, parts)


def format_fn_header(context: RewriteContext, shape: Shape, header: FnHeader) -> str:
    """`pub const async unsafe fn foo`"""
    parts = [HeaderPart.visibility(context, header.vis)]
    if header.const_range is not None:
        parts.append(HeaderPart.keyword(context, "const", header.const_range))
    if header.async_range is not None:
        parts.append(HeaderPart.keyword(context, "async", header.async_range))
    parts.append(HeaderPart.safety(header.safety))
    parts.append(HeaderPart.keyword(context, "fn", header.fn_range))
    parts.append(HeaderPart.ident(context, header.ident))
    return format_header(context, shape, parts)
