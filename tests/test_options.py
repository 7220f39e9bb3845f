import pytest

from rsfmt.config import FormatOptions, IndentStyle, ListTactic, SeparatorTactic


def test_defaults() -> None:
    options = FormatOptions()

    assert options.max_width == 100
    assert options.tab_spaces == 4
    assert options.hard_tabs is False
    assert options.imports_layout == ListTactic.MIXED
    assert options.imports_indent == IndentStyle.BLOCK
    assert options.trailing_comma == SeparatorTactic.MULTILINE_ONLY
    assert options.inline_comments is False


def test_from_directives_reads_leading_comment_lines() -> None:
    source = "// rsfmt-imports_indent: Visual\n//rsfmt-imports_layout:HorizontalVertical\n\nuse a;\n// rsfmt-max_width: 10\n"

    options = FormatOptions.from_directives(source)

    assert options.imports_indent == IndentStyle.VISUAL
    assert options.imports_layout == ListTactic.HORIZONTAL_VERTICAL
    assert options.max_width == 100


def test_from_directives_ignores_plain_comments() -> None:
    source = "// just a comment\n// rsfmt-hard_tabs: true\nfn main() {}\n"

    assert FormatOptions.from_directives(source).hard_tabs is True


def test_with_overrides_coerces_strings() -> None:
    options = FormatOptions().with_overrides(max_width="80", inline_comments="TRUE", trailing_comma="Always")

    assert options.max_width == 80
    assert options.inline_comments is True
    assert options.trailing_comma == SeparatorTactic.ALWAYS


def test_unknown_option_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown formatting option"):
        FormatOptions.from_directives("// rsfmt-fn_single_line: true\n")


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValueError, match="expected one of"):
        FormatOptions().with_overrides(imports_layout="Diagonal")
    with pytest.raises(ValueError, match="expected an integer"):
        FormatOptions().with_overrides(max_width="wide")
    with pytest.raises(ValueError, match="expected true or false"):
        FormatOptions().with_overrides(hard_tabs="yes")
    with pytest.raises(ValueError):
        FormatOptions(max_width=0)
