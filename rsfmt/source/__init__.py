"""Source buffer access."""

from rsfmt.source.snippet import SnippetProvider

__all__ = ["SnippetProvider"]
