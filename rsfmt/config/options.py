"""Formatting options and their closed value sets."""

from dataclasses import dataclass, replace
from enum import StrEnum
import re
from typing import Final


class ListTactic(StrEnum):
    """Preferred packing strategy for list items."""

    HORIZONTAL = "Horizontal"
    VERTICAL = "Vertical"
    MIXED = "Mixed"
    HORIZONTAL_VERTICAL = "HorizontalVertical"


class IndentStyle(StrEnum):
    """Continuation-line alignment."""

    BLOCK = "Block"
    VISUAL = "Visual"


class SeparatorTactic(StrEnum):
    """Whether the last list item receives a separator."""

    ALWAYS = "Always"
    NEVER = "Never"
    MULTILINE_ONLY = "MultilineOnly"


DIRECTIVE_PREFIX: Final[str] = "rsfmt-"

_DIRECTIVE_RE = re.compile(r"^\s*//\s*" + re.escape(DIRECTIVE_PREFIX) + r"(?P<key>[a-z_]+)\s*:\s*(?P<value>\S+)\s*$")


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Style knobs threaded through every formatting call."""

    max_width: int = 100
    tab_spaces: int = 4
    hard_tabs: bool = False
    imports_layout: ListTactic = ListTactic.MIXED
    imports_indent: IndentStyle = IndentStyle.BLOCK
    trailing_comma: SeparatorTactic = SeparatorTactic.MULTILINE_ONLY
    inline_comments: bool = False

    def __post_init__(self):
        if self.max_width <= 0:
            raise ValueError("max_width must be a positive number of columns")
        if self.tab_spaces <= 0:
            raise ValueError("tab_spaces must be positive")

    def with_overrides(self, **overrides: object) -> "FormatOptions":
        """Copy with string or typed values coerced to each option's type."""
        coerced = {key: _coerce_option(key, value) for key, value in overrides.items()}
        return replace(self, **coerced)

    @staticmethod
    def from_directives(source: str, base: "FormatOptions | None" = None) -> "FormatOptions":
        """Read leading `// rsfmt-<option>: <value>` lines from a fixture source.

        Scanning stops at the first line that is neither blank nor a comment.
        """
        overrides: dict[str, object] = {}
        for line in source.splitlines():
            stripped = line.strip()
            if not stripped:
                continue
            if not stripped.startswith("//"):
                break
            match = _DIRECTIVE_RE.match(stripped)
            if match is None:
                continue
            overrides[match.group("key")] = match.group("value")

        return (base or FormatOptions()).with_overrides(**overrides)


_OPTION_TYPES: Final[dict[str, type]] = {
    "max_width": int,
    "tab_spaces": int,
    "hard_tabs": bool,
    "imports_layout": ListTactic,
    "imports_indent": IndentStyle,
    "trailing_comma": SeparatorTactic,
    "inline_comments": bool,
}


def _coerce_option(key: str, value: object) -> object:
    option_type = _OPTION_TYPES.get(key)
    if option_type is None:
        raise ValueError(f"Unknown formatting option: {key!r}")
    if isinstance(value, option_type):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid value for {key}: {value!r}")

    if option_type is bool:
        lowered = value.lower()
        if lowered not in {"true", "false"}:
            raise ValueError(f"Invalid value for {key}: {value!r} (expected true or false)")
        return lowered == "true"
    if option_type is int:
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"Invalid value for {key}: {value!r} (expected an integer)") from None
    try:
        return option_type(value)
    except ValueError:
        choices = ", ".join(member.value for member in option_type)
        raise ValueError(f"Invalid value for {key}: {value!r} (expected one of {choices})") from None
