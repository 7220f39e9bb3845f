"""Per-call formatting context."""

from dataclasses import dataclass, field

from rsfmt.config import FormatOptions
from rsfmt.source import SnippetProvider
from rsfmt.text import TextRange


@dataclass(frozen=True, slots=True)
class RewriteContext:
    """Source buffer and active options, passed explicitly into every rewrite."""

    snippet_provider: SnippetProvider
    options: FormatOptions = field(default_factory=FormatOptions)

    @staticmethod
    def for_source(source: str, options: FormatOptions | None = None) -> "RewriteContext":
        return RewriteContext(SnippetProvider(source), options or FormatOptions())

    def snippet(self, range: TextRange) -> str:
        return self.snippet_provider.text_of(range)
