"""Formatting failures."""

from rsfmt.text import TextRange


class CommentMergeError(ValueError):
    """The gap between two parts holds something other than whitespace and comments."""

    def __init__(self, message: str, gap: TextRange) -> None:
        super().__init__(f"{message} in {gap!r}")
        self.gap = gap


class InvariantViolation(RuntimeError):
    """Collaborator input breaks an assumption the engine cannot recover from."""
