"""
Extraction - Results of the extract-classes workflow.

ExtractionPlan describes everything the host needs to apply an
extraction: the CSS rule to append and the value that replaces the
inline class list. ClassListSuggestion is one long class list found
while scanning a document.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional

from .attributes import AttributeLocation
from .categories import CategorizedTokens


@dataclass
class ExtractionPlan:
    """
    Planned replacement of an inline class list by an @apply rule.

    Example:
        plan.css
        # .card {
        #   @apply flex p-4 bg-white;
        # }
        plan.replacement_value
        # "card hover:bg-gray-100"
    """

    location: AttributeLocation
    class_name: str
    tokens: List[str]
    extracted_tokens: List[str]
    preserved_tokens: List[str] = field(default_factory=list)
    categories: CategorizedTokens = field(default_factory=dict)
    css: str = ""
    grouped: bool = False
    below_threshold: bool = False

    target_css_file: Optional[str] = None
    """Stylesheet the rule was appended to, once written."""

    @property
    def replacement_value(self) -> str:
        """New attribute value: the class name plus tokens kept inline."""
        return " ".join([self.class_name, *self.preserved_tokens])

    def apply(self, text: str) -> str:
        """Return ``text`` with the class list replaced."""
        return self.location.replace_in(text, self.replacement_value)

    def describe(self) -> str:
        """Generate human-readable summary."""
        summary = (
            f"Extracted {len(self.extracted_tokens)} Tailwind classes "
            f"into .{self.class_name}"
        )
        if self.preserved_tokens:
            summary += f" ({len(self.preserved_tokens)} state variants kept inline)"
        return summary

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "location": self.location.to_dict(),
            "class_name": self.class_name,
            "tokens": self.tokens,
            "extracted_tokens": self.extracted_tokens,
            "preserved_tokens": self.preserved_tokens,
            "categories": {str(c): list(t) for c, t in self.categories.items()},
            "css": self.css,
            "grouped": self.grouped,
            "below_threshold": self.below_threshold,
            "replacement_value": self.replacement_value,
            "target_css_file": self.target_css_file,
        }


@dataclass
class ClassListSuggestion:
    """A class list long enough to be worth extracting."""

    line_index: int
    value: str
    token_count: int
    value_start: int
    value_end: int
    categories: Dict[str, int] = field(default_factory=dict)

    def describe(self) -> str:
        return f"line {self.line_index + 1}: {self.token_count} classes"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "line_index": self.line_index,
            "value": self.value,
            "token_count": self.token_count,
            "value_start": self.value_start,
            "value_end": self.value_end,
            "categories": self.categories,
        }
