"""Read-only lookups over the original source buffer."""

from rsfmt.errors import InvariantViolation
from rsfmt.lexer import Lexer, Token, TokenKind
from rsfmt.text import TextRange, TextSize, slice_text_range


class SnippetProvider:
    """Original source text, addressed by TextRange."""

    def __init__(self, source: str) -> None:
        self._source = source

    @property
    def source(self) -> str:
        return self._source

    def text_of(self, range: TextRange) -> str:
        if not TextRange(0, len(self._source)).contains_range(range):
            raise InvariantViolation(f"{range!r} is out of bounds for a source of length {len(self._source)}")
        return slice_text_range(self._source, range)

    def tokens_in(self, range: TextRange) -> list[Token]:
        """Lex `range` into trivia and code tokens (trailing EOF excluded)."""
        tokens = Lexer(self._source, range=range).lex()
        return tokens[:-1]

    def opt_span_before(self, range: TextRange, needle: str) -> TextSize | None:
        """Offset of the first occurrence of `needle` inside `range` outside comments and literals."""
        end = range.end.value
        for token in self.tokens_in(range):
            if token.kind.is_trivia or token.kind in (TokenKind.STRING, TokenKind.CHAR):
                continue
            start = token.range.start.value
            if start + len(needle) > end:
                continue
            if token.kind == TokenKind.IDENTIFIER:
                if slice_text_range(self._source, token.range) == needle:
                    return token.range.start
                continue
            if self._source.startswith(needle, start):
                return token.range.start
        return None

    def span_before(self, range: TextRange, needle: str) -> TextSize:
        """Offset of a keyword known to be inside `range`."""
        offset = self.opt_span_before(range, needle)
        if offset is None:
            raise InvariantViolation(f"Expected {needle!r} in {range!r}: {self.text_of(range)!r}")
        return offset
