"""
Attribute Values

A Value is the leaf of the RPSL object model: one line of attribute text,
an optional inline comment and, for references to other objects, the
RPSL type of the referenced object.

Inline comment syntax:
    "TEST-RIPE # my best buddy"
        value   = "TEST-RIPE"
        comment = "my best buddy"

    "### I am ASCII art ###"
        value   = ""            (not defined)
        comment = "I am ASCII art"

Values are immutable. Attributes replace them, never edit them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Characters removed from both ends of an inline comment.
COMMENT_STRIP_CHARS = "# \t\n\r\0\x0b"


@dataclass(frozen=True)
class Value:
    """
    One value of an attribute.

    Properties:
        name:
            Name of the attribute owning this value

        value:
            Attribute text without the inline comment. Only trailing
            whitespace is removed, leading whitespace may be intentional.

        comment:
            Inline comment, None if absent or blank

        type:
            RPSL type of the referenced object (e.g. "person"), None for
            plain text values

    INVARIANT:
        is_defined() depends on the text alone. A value consisting of a
        comment only is not defined.
    """

    name: str
    value: str
    comment: Optional[str] = None
    type: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "value", self.value.rstrip())
        object.__setattr__(self, "comment", _normalize_comment(self.comment))

    @classmethod
    def parse(
        cls,
        name: str,
        line: str,
        comment: Optional[str] = None,
        type: Optional[str] = None,
    ) -> Value:
        """
        Create a value from a line of attribute text.

        Without an explicit comment the line is split at the first "#".
        This never fails.

        Args:
            name: Owning attribute name
            line: Raw attribute text
            comment: Explicit inline comment (disables splitting)
            type: RPSL type of a referenced object

        Returns:
            Value object
        """
        if comment is None and "#" in line:
            line, comment = line.split("#", 1)

        return cls(name=name, value=line, comment=comment, type=type)

    def __str__(self) -> str:
        if not self.value:
            return ""
        if self.comment is None:
            return self.value.strip("# ")
        return f"{self.value} # {self.comment}".strip("# ")

    def is_defined(self) -> bool:
        return len(self.value) > 0

    def is_empty(self) -> bool:
        return not self.is_defined()


def _normalize_comment(comment: Optional[str]) -> Optional[str]:
    if comment is None:
        return None
    comment = comment.strip(COMMENT_STRIP_CHARS)
    return comment or None
