"""
Attributes - Data structures describing a located class attribute.

ParsedAttribute carries the exact character span of the class value so
the caller can replace it in place without re-parsing the line.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any


class AttributeKind(str, Enum):
    """Spelling of the class-bearing attribute."""

    CLASS = "class"
    CLASS_NAME = "className"


class QuoteStyle(str, Enum):
    """Quote character delimiting the attribute value."""

    DOUBLE = "double"
    SINGLE = "single"
    BACKTICK = "backtick"


@dataclass(frozen=True)
class ParsedAttribute:
    """
    A class attribute found in a line of markup.

    Example:
        line = '<div class="flex p-4">'
        attr = ParsedAttribute(
            full_match='class="flex p-4"',
            value="flex p-4",
            value_start=12,
            value_end=20,
            attribute_kind=AttributeKind.CLASS,
            quote_style=QuoteStyle.DOUBLE,
        )
    """

    full_match: str
    """Substring of the line matched by the attribute pattern."""

    value: str
    """Trimmed class list, never empty."""

    value_start: int
    """Start offset of the untrimmed captured value within the line."""

    value_end: int
    """End offset (exclusive) of the untrimmed captured value."""

    attribute_kind: AttributeKind
    quote_style: QuoteStyle

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "full_match": self.full_match,
            "value": self.value,
            "value_start": self.value_start,
            "value_end": self.value_end,
            "attribute_kind": self.attribute_kind.value,
            "quote_style": self.quote_style.value,
        }


@dataclass(frozen=True)
class AttributeLocation:
    """
    A ParsedAttribute found while scanning a whole document.

    When the attribute was recovered from a joined multi-line window, the
    offsets on ``parsed`` refer to that window. ``document_start`` and
    ``document_end`` always refer to the original document text.
    """

    parsed: ParsedAttribute

    line_index: int
    """Line the matched window starts at (the exact line for single-line hits)."""

    document_start: int
    document_end: int

    line_count: int = 1
    """Number of document lines joined to produce the match."""

    @property
    def is_multiline(self) -> bool:
        return self.line_count > 1

    def replace_in(self, text: str, new_value: str) -> str:
        """Return ``text`` with the class value replaced by ``new_value``."""
        return text[: self.document_start] + new_value + text[self.document_end :]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            **self.parsed.to_dict(),
            "line_index": self.line_index,
            "line_count": self.line_count,
            "document_start": self.document_start,
            "document_end": self.document_end,
        }
