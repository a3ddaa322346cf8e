"""
Rule Generator - Build consolidated @apply rules from utility tokens.

Output formats:

    Flat                          Grouped
    .card {                       .card {
      @apply flex p-4 bg-white;     /* Layout */
    }                               @apply flex;

                                    /* Spacing */
                                    @apply p-4;
                                  }

Generation is deterministic: grouped output always follows
CATEGORY_ORDER, whatever the iteration order of the input mapping.
"""

import re
from typing import Hashable, List, Mapping, Sequence, Tuple

from ..contracts.categories import CATEGORY_ORDER


FALLBACK_CLASS_NAME = "extracted-class"

_LEADING_DOTS = re.compile(r"^\.+")
_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9_-]")
_LEADING_HYPHENS = re.compile(r"^-+")
_VALID_START = re.compile(r"^[a-zA-Z_]")

INDENT = "  "


def sanitize_name(raw: str) -> str:
    """
    Turn an arbitrary string into a valid CSS class identifier.

    Leading dots and hyphens are removed, invalid characters become '-',
    and names that would start with a digit get an '_' prefix.
    """
    name = _LEADING_DOTS.sub("", raw)
    name = _INVALID_CHARS.sub("-", name)
    name = _LEADING_HYPHENS.sub("", name)
    if name and not _VALID_START.match(name):
        name = "_" + name
    return name or FALLBACK_CLASS_NAME


class RuleGenerator:
    """
    Generates CSS rules that @apply a list of Tailwind utilities.

    Example:
        generator = RuleGenerator()
        generator.generate_flat("card-header", ["flex", "p-4", "bg-blue-500"])
        # '.card-header {\\n  @apply flex p-4 bg-blue-500;\\n}\\n'
    """

    def generate_flat(self, name: str, tokens: Sequence[str]) -> str:
        """
        Generate a single @apply rule with all tokens in input order.

        Returns an empty string when there is nothing to apply.
        """
        if not tokens:
            return ""

        selector = sanitize_name(name)
        return f".{selector} {{\n{INDENT}@apply {' '.join(tokens)};\n}}\n"

    def generate_grouped(
        self,
        name: str,
        categorized: Mapping[Hashable, Sequence[str]],
    ) -> str:
        """
        Generate an @apply rule with one commented block per category.

        Categories are emitted in canonical order; categories unknown to
        CATEGORY_ORDER come last in input order. Empty buckets are skipped.

        Returns an empty string for an empty mapping.
        """
        if not categorized:
            return ""

        blocks = [
            (category, tokens)
            for category, tokens in self._sorted_categories(categorized)
            if tokens
        ]

        lines: List[str] = [f".{sanitize_name(name)} {{"]
        for index, (category, tokens) in enumerate(blocks):
            if index > 0:
                lines.append("")
            lines.append(f"{INDENT}/* {category} */")
            lines.append(f"{INDENT}@apply {' '.join(tokens)};")
        lines.append("}")
        lines.append("")

        return "\n".join(lines)

    @staticmethod
    def should_group(
        categorized: Mapping[Hashable, Sequence[str]],
        group_by_category: bool,
    ) -> bool:
        """True when grouping is requested and more than one category is non-empty."""
        populated = sum(1 for bucket in categorized.values() if bucket)
        return bool(group_by_category) and populated > 1

    def generate_output(
        self,
        name: str,
        tokens: Sequence[str],
        categorized: Mapping[Hashable, Sequence[str]],
        group_by_category: bool,
    ) -> str:
        """
        Generate grouped output if requested and useful, flat otherwise.

        Grouping is only used with more than one non-empty category; a
        single bucket always renders flat.
        """
        if self.should_group(categorized, group_by_category):
            return self.generate_grouped(name, categorized)
        return self.generate_flat(name, tokens)

    @staticmethod
    def _sorted_categories(
        categorized: Mapping[Hashable, Sequence[str]],
    ) -> List[Tuple[Hashable, Sequence[str]]]:
        unknown = len(CATEGORY_ORDER)

        def rank(item: Tuple[Hashable, Sequence[str]]) -> int:
            category = item[0]
            if category in CATEGORY_ORDER:
                return CATEGORY_ORDER.index(category)
            return unknown

        # sorted() is stable, so unknown categories keep their input order
        return sorted(categorized.items(), key=rank)

    def __repr__(self) -> str:
        return "RuleGenerator()"
