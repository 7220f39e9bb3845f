"""Lexer."""

from rsfmt.diagnostics import (
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    DiagnosticSpec,
)
from rsfmt.lexer.tokens import Token, TokenFlags, TokenKind
from rsfmt.text import TextRange, TextSize, slice_text_range

_PUNCTUATION = frozenset("!#$%&()*+,-./:;<=>?@[\\]^`{|}~")

# Pattern_White_Space, split into line breaks and the rest.
_NEWLINES = frozenset("\r\n\u0085\u2028\u2029")
_WHITESPACE = frozenset(" \t\x0b\x0c\u200e\u200f")


class Lexer:
    """Lossless lexer that tells comments and whitespace apart from code.

    Only the distinctions a formatter needs are made: trivia pieces are exact,
    code is split coarsely (identifiers, literals, single punctuation chars).
    Literals are lexed so that comment markers inside them are not mistaken
    for comments.
    """

    def __init__(self, source: str, *, range: TextRange | None = None) -> None:
        self._source = source
        self._start = 0 if range is None else range.start.value
        self._limit = len(source) if range is None else min(range.end.value, len(source))
        self._position = self._start
        self._after_newline = False
        self._current_start = TextSize.from_int(self._start)
        self._current_kind = TokenKind.EOF
        self._current_flags = TokenFlags.NONE
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def current_range(self) -> TextRange:
        return TextRange.new(self._current_start, TextSize.from_int(self._position))

    @property
    def is_eof(self) -> bool:
        return self._position >= self._limit

    @property
    def next_token(self) -> Token:
        self._current_start = TextSize.from_int(self._position)
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            self._current_kind = TokenKind.EOF
            return Token(TokenKind.EOF, TextRange.empty(self._current_start), self._current_flags)

        kind = self._lex_token()
        self._current_flags |= TokenFlags.PRECEDING_LINE_BREAK if self._after_newline else TokenFlags.NONE
        self._current_kind = kind

        if not kind.is_trivia:
            self._after_newline = False

        return Token(kind, self.current_range, self._current_flags)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch in _NEWLINES:
            self._consume_newline()
            self._after_newline = True
            return TokenKind.NEWLINE

        if ch in _WHITESPACE:
            self._consume_whitespaces()
            return TokenKind.WHITESPACE

        if ch == "/" and self._peek_char() == "/":
            return self._lex_line_comment()

        if ch == "/" and self._peek_char() == "*":
            return self._lex_block_comment()

        if ch == '"':
            return self._lex_string()

        if ch == "'":
            return self._lex_quote()

        if ch == "r" and self._at_raw_string(1):
            self._current_flags |= TokenFlags.RAW
            self._advance(1)
            return self._lex_raw_string()

        if ch == "b" and self._peek_char() == '"':
            self._advance(1)
            return self._lex_string()

        if ch == "b" and self._peek_char() == "r" and self._at_raw_string(2):
            self._current_flags |= TokenFlags.RAW
            self._advance(2)
            return self._lex_raw_string()

        if ch.isdigit():
            return self._lex_number()

        if ch == "r" and self._peek_char() == "#" and _is_ident_start(self._peek_char(2)):
            self._current_flags |= TokenFlags.RAW
            self._advance(2)
            return self._lex_identifier()

        if _is_ident_start(ch):
            return self._lex_identifier()

        self._advance(1)
        if ch in _PUNCTUATION:
            return TokenKind.PUNCT

        # Fallback: preserve bytes as SKIPPED.
        return TokenKind.SKIPPED

    def _lex_line_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        self._advance(2)
        while not self.is_eof:
            ch = self._current_char()
            if ch in _NEWLINES:
                break
            self._advance(1)
        return TokenKind.LINE_COMMENT

    def _lex_block_comment(self) -> TokenKind:
        self._advance(2)
        depth = 1
        while not self.is_eof:
            ch = self._current_char()
            if ch == "/" and self._peek_char() == "*":
                depth += 1
                self._advance(2)
                continue
            if ch == "*" and self._peek_char() == "/":
                depth -= 1
                self._advance(2)
                if depth == 0:
                    return TokenKind.BLOCK_COMMENT
                continue
            self._advance(1)

        self._report_unterminated(LEXER_UNTERMINATED_BLOCK_COMMENT)
        return TokenKind.BLOCK_COMMENT

    def _lex_string(self) -> TokenKind:
        # Consume opening quote. Strings may span lines.
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch == '"':
                self._advance(1)
                return TokenKind.STRING
            if ch == "\\":
                self._advance(2 if self._position + 1 < self._limit else 1)
                continue
            self._advance(1)

        self._report_unterminated(LEXER_UNTERMINATED_STRING)
        return TokenKind.STRING

    def _lex_raw_string(self) -> TokenKind:
        hashes = 0
        while self._current_char() == "#":
            hashes += 1
            self._advance(1)
        self._advance(1)  # opening quote
        closing = '"' + "#" * hashes
        while not self.is_eof:
            if self._source.startswith(closing, self._position) and self._position + len(closing) <= self._limit:
                self._advance(len(closing))
                return TokenKind.STRING
            self._advance(1)

        self._report_unterminated(LEXER_UNTERMINATED_STRING)
        return TokenKind.STRING

    def _lex_quote(self) -> TokenKind:
        # 'x', '\n' and '\u{..}' are chars; 'a (no closing quote) is a lifetime.
        if self._peek_char() == "\\":
            self._advance(3)
            while not self.is_eof:
                ch = self._current_char()
                self._advance(1)
                if ch == "'":
                    break
            return TokenKind.CHAR
        if self._peek_char(2) == "'":
            self._advance(3)
            return TokenKind.CHAR
        self._advance(1)
        while not self.is_eof and _is_ident_continue(self._current_char()):
            self._advance(1)
        return TokenKind.LIFETIME

    def _lex_number(self) -> TokenKind:
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_":
                self._advance(1)
                continue
            if ch == "." and self._peek_char().isdigit():
                self._advance(1)
                continue
            break
        return TokenKind.NUMBER

    def _lex_identifier(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof and _is_ident_continue(self._current_char()):
            self._advance(1)
        return TokenKind.IDENTIFIER

    def _at_raw_string(self, ahead: int) -> bool:
        index = ahead
        while self._peek_char(index) == "#":
            index += 1
        return self._peek_char(index) == '"'

    def _consume_whitespaces(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch in _WHITESPACE:
                self._advance(1)
                continue
            break

    def _consume_newline(self) -> None:
        if self._current_char() == "\r" and self._peek_char() == "\n":
            self._advance(2)
        else:
            self._advance(1)

    def _report_unterminated(self, spec: DiagnosticSpec) -> None:
        self._current_flags |= TokenFlags.UNTERMINATED
        self._diagnostics.append(spec.at(self.current_range))

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= self._limit:
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position = min(self._position + steps, self._limit)


def _is_ident_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def _is_ident_continue(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<14} range={tok.range.as_tuple()} flags={tok.flags} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
