from rsfmt.format import (
    FnHeader,
    Ident,
    Path,
    Safety,
    Shape,
    TraitHeader,
    Visibility,
    format_fn_header,
    format_trait_header,
)
from tests._shared_cases import context_for, range_of


def test_trait_header_with_every_qualifier() -> None:
    source = "pub(crate) unsafe auto trait Foo {}"
    context = context_for(source)
    header = TraitHeader(
        vis=Visibility.restricted(Path.from_names("crate"), range_of(source, "pub(crate)")),
        safety=Safety.unsafe(range_of(source, "unsafe")),
        ident=Ident("Foo", range_of(source, "Foo")),
        trait_range=range_of(source, "trait"),
        auto_range=range_of(source, "auto"),
    )

    assert format_trait_header(context, Shape(width=100), header) == "pub(crate) unsafe auto trait Foo"


def test_trait_header_normalizes_spacing_and_keeps_comments() -> None:
    source = "pub   unsafe /* why */\n    trait   Bar {}"
    context = context_for(source)
    header = TraitHeader(
        vis=Visibility.public(range_of(source, "pub")),
        safety=Safety.unsafe(range_of(source, "unsafe")),
        ident=Ident("Bar", range_of(source, "Bar")),
        trait_range=range_of(source, "trait"),
    )

    assert format_trait_header(context, Shape(width=100), header) == "pub unsafe\n/* why */\ntrait Bar"


def test_fn_header_orders_qualifiers() -> None:
    source = "pub const async unsafe fn foo() {}"
    context = context_for(source)
    header = FnHeader(
        vis=Visibility.public(range_of(source, "pub")),
        safety=Safety.unsafe(range_of(source, "unsafe")),
        ident=Ident("foo", range_of(source, "foo")),
        fn_range=range_of(source, "fn"),
        const_range=range_of(source, "const"),
        async_range=range_of(source, "async"),
    )

    assert format_fn_header(context, Shape(width=100), header) == "pub const async unsafe fn foo"


def test_fn_header_private_safe_default() -> None:
    source = "fn main() {}"
    context = context_for(source)
    header = FnHeader(
        vis=Visibility.inherited(),
        safety=Safety.default(),
        ident=Ident("main", range_of(source, "main")),
        fn_range=range_of(source, "fn"),
    )

    assert format_fn_header(context, Shape(width=100), header) == "fn main"
