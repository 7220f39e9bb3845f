"""Diagnostics."""

from rsfmt.diagnostics.codes import (
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from rsfmt.diagnostics.diagnostic import Diagnostic, Severity
from rsfmt.diagnostics.report import has_errors

__all__ = [
    "LEXER_UNTERMINATED_BLOCK_COMMENT",
    "LEXER_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
]
