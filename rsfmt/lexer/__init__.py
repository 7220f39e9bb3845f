"""Lexer."""

from rsfmt.lexer.lexer import Lexer, dump_tokens, token_text
from rsfmt.lexer.tokens import Token, TokenFlags, TokenKind

__all__ = [
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
    "token_text",
]
