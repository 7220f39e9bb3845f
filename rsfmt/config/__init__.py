"""Formatting configuration."""

from rsfmt.config.options import (
    DIRECTIVE_PREFIX,
    FormatOptions,
    IndentStyle,
    ListTactic,
    SeparatorTactic,
)

__all__ = [
    "DIRECTIVE_PREFIX",
    "FormatOptions",
    "IndentStyle",
    "ListTactic",
    "SeparatorTactic",
]
