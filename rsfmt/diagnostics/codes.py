"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from rsfmt.diagnostics.diagnostic import Diagnostic, Severity
from rsfmt.text import TextRange


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def at(self, range: TextRange) -> Diagnostic:
        """Materialize this spec as a diagnostic located at `range`."""
        return Diagnostic(
            code=self.code,
            message=self.message,
            range=range,
            severity=self.severity,
            hint=self.hint,
            category=self.category,
        )


LEXER_UNTERMINATED_BLOCK_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_BLOCK_COMMENT",
    message="Unterminated block comment.",
    hint="Close every `/*` with a matching `*/`; block comments nest.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a double quote.",
    severity="error",
    category="lexer",
)
