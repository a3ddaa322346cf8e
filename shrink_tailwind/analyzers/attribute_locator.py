"""
Attribute Locator - Find class-bearing attributes in lines of markup.

Supports several markup dialects, tried from most to least specific:

    className={`...`}        JSX template literal
    className="..."          JSX string (double, then single quotes)
    class="..."              Plain HTML (double, then single quotes)
    :class="'...'"           Vue binding with a plain string
    [class]="..."            Angular binding

This is pattern matching on text, not a markup parser. Attributes that
wrap across lines are recovered heuristically by joining neighbouring
lines (see find_class_attribute_at_position).

Usage:
    from shrink_tailwind.analyzers import AttributeLocator

    locator = AttributeLocator()
    attr = locator.find_class_attribute('<div class="flex p-4">')
    print(attr.value)  # "flex p-4"
"""

import logging
import re
from typing import List, Optional, Pattern, Tuple

from ..contracts.attributes import (
    AttributeKind,
    AttributeLocation,
    ParsedAttribute,
    QuoteStyle,
)


logger = logging.getLogger(__name__)


DEFAULT_LOOKAROUND = 5
"""Lines searched above and below the requested line for wrapped attributes."""


class AttributeLocator:
    """
    Locates class attributes in single lines or small multi-line windows.

    The FIRST pattern that yields a non-empty value wins, regardless of
    where in the line other patterns would have matched.
    """

    PATTERNS: List[Pattern[str]] = [
        # JSX className with template literal
        re.compile(r"className\s*=\s*\{`([^`]*)`\}"),
        # JSX className with string
        re.compile(r'className\s*=\s*"([^"]*)"'),
        re.compile(r"className\s*=\s*'([^']*)'"),
        # Plain class, not preceded by ':', '[', '.', or a word character
        re.compile(r'(?<![:\[.\w])class\s*=\s*"([^"]*)"'),
        re.compile(r"(?<![:\[.\w])class\s*=\s*'([^']*)'"),
        # Vue :class with a single-quoted string only
        re.compile(r":class\s*=\s*\"'([^']*)'\""),
        # Angular [class]
        re.compile(r'\[class\]\s*=\s*"([^"]*)"'),
    ]

    def __init__(self, lookaround: int = DEFAULT_LOOKAROUND):
        self.lookaround = max(0, lookaround)

    # =========================================================================
    # SINGLE LINE
    # =========================================================================

    def find_class_attribute(self, line: str) -> Optional[ParsedAttribute]:
        """
        Find a class attribute in a single line.

        Args:
            line: One line of markup (or a joined window of lines)

        Returns:
            ParsedAttribute for the first pattern with a non-empty value,
            or None if no pattern matches
        """
        for pattern in self.PATTERNS:
            match = pattern.search(line)
            if match is None:
                continue

            raw_value = match.group(1)
            value = raw_value.strip()
            if not value:
                # An empty attribute is not a find; try the next pattern.
                continue

            full_match = match.group(0)
            return ParsedAttribute(
                full_match=full_match,
                value=value,
                value_start=match.start(1),
                value_end=match.end(1),
                attribute_kind=self._attribute_kind(full_match),
                quote_style=self._quote_style(full_match),
            )

        return None

    # =========================================================================
    # MULTI-LINE RECOVERY
    # =========================================================================

    def find_class_attribute_at_position(
        self,
        text: str,
        line_index: int,
    ) -> Optional[AttributeLocation]:
        """
        Find a class attribute at a line of a document.

        Tries the exact line first. Otherwise, for every start line from
        ``line_index - lookaround`` up to ``line_index``, grows a window
        forward (lines stripped and joined with a space) until
        ``line_index + lookaround`` and re-runs the single-line match
        after each added line.

        Args:
            text: Full document text
            line_index: Zero-based line number

        Returns:
            AttributeLocation, or None if nothing matches
        """
        lines = text.split("\n")
        offsets = self._line_offsets(lines)

        if 0 <= line_index < len(lines):
            parsed = self.find_class_attribute(lines[line_index])
            if parsed is not None:
                base = offsets[line_index]
                return AttributeLocation(
                    parsed=parsed,
                    line_index=line_index,
                    document_start=base + parsed.value_start,
                    document_end=base + parsed.value_end,
                )

        last_line = min(len(lines) - 1, line_index + self.lookaround)
        first_start = max(0, line_index - self.lookaround)

        for start in range(first_start, min(line_index, len(lines) - 1) + 1):
            window = ""
            segments: List[Tuple[int, int, int]] = []

            for index in range(start, last_line + 1):
                raw = lines[index]
                stripped = raw.strip()
                if index != start:
                    window += " "
                lead = len(raw) - len(raw.lstrip())
                segments.append((len(window), offsets[index] + lead, len(stripped)))
                window += stripped

                parsed = self.find_class_attribute(window)
                if parsed is not None:
                    logger.debug(
                        f"Recovered class attribute from lines {start}-{index}"
                    )
                    return AttributeLocation(
                        parsed=parsed,
                        line_index=start,
                        document_start=self._to_document(segments, parsed.value_start),
                        document_end=self._to_document(segments, parsed.value_end),
                        line_count=index - start + 1,
                    )

        return None

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    @staticmethod
    def _attribute_kind(full_match: str) -> AttributeKind:
        if "className" in full_match:
            return AttributeKind.CLASS_NAME
        return AttributeKind.CLASS

    @staticmethod
    def _quote_style(full_match: str) -> QuoteStyle:
        if "`" in full_match:
            return QuoteStyle.BACKTICK
        if "'" in full_match:
            return QuoteStyle.SINGLE
        return QuoteStyle.DOUBLE

    @staticmethod
    def _line_offsets(lines: List[str]) -> List[int]:
        """Absolute offset of the first character of every line."""
        offsets = []
        position = 0
        for line in lines:
            offsets.append(position)
            position += len(line) + 1
        return offsets

    @staticmethod
    def _to_document(segments: List[Tuple[int, int, int]], offset: int) -> int:
        """
        Map an offset in a joined window back to the document.

        Each segment is (window_start, document_start, length). A joining
        space maps to the end of the segment before it.
        """
        for window_start, document_start, length in reversed(segments):
            if offset >= window_start:
                return document_start + min(offset - window_start, length)
        return segments[0][1]

    def __repr__(self) -> str:
        return f"AttributeLocator(lookaround={self.lookaround})"
