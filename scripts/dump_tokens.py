#!/usr/bin/env python
from __future__ import annotations

import argparse
from pathlib import Path

from rsfmt.diagnostics import has_errors
from rsfmt.lexer import Lexer, dump_tokens


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the comment/whitespace/code tokens of a source file.")
    parser.add_argument("input", type=Path, help="Source file to lex.")
    args = parser.parse_args(argv)

    text = args.input.read_text(encoding="utf-8")
    lexer = Lexer(text)
    tokens = lexer.lex()
    dump_tokens(tokens, text, lexer.diagnostics)
    return 1 if has_errors(lexer.diagnostics) else 0


if __name__ == "__main__":
    raise SystemExit(main())
