"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag

from rsfmt.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia tokens (emitted by the lexer)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11
    LINE_COMMENT = 12  # // ... (doc comments included)
    BLOCK_COMMENT = 13  # /* ... */, nesting allowed

    # -------------------------
    # Code
    # -------------------------
    IDENTIFIER = 20  # keywords and raw identifiers included
    STRING = 21
    CHAR = 22
    NUMBER = 23
    LIFETIME = 24  # 'a
    PUNCT = 30  # any single punctuation character
    SKIPPED = 40  # bytes the lexer does not recognize

    @property
    def is_trivia(self) -> bool:
        return self in (
            TokenKind.WHITESPACE,
            TokenKind.NEWLINE,
            TokenKind.LINE_COMMENT,
            TokenKind.BLOCK_COMMENT,
        )

    @property
    def is_comment(self) -> bool:
        return self in (TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT)


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    PRECEDING_LINE_BREAK = 1 << 0  # NEWLINE before
    UNTERMINATED = 1 << 1
    RAW = 1 << 2  # r#ident or r"..."


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    def has_preceding_line_break(self) -> bool:
        return bool(self.flags & TokenFlags.PRECEDING_LINE_BREAK)

    @property
    def is_unterminated(self) -> bool:
        return bool(self.flags & TokenFlags.UNTERMINATED)

