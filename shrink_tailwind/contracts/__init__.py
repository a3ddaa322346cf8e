"""
Contracts - Data structures for Tailwind class extraction.

Provides:
- TailwindCategory: Semantic bucket of a utility class
- ParsedAttribute / AttributeLocation: A located class attribute
- ExtractionPlan / ClassListSuggestion: Workflow results
- ExtractionError hierarchy: Host-layer failures
"""

from .categories import TailwindCategory, CATEGORY_ORDER, CategorizedTokens
from .attributes import (
    AttributeKind,
    QuoteStyle,
    ParsedAttribute,
    AttributeLocation,
)
from .extraction import ExtractionPlan, ClassListSuggestion
from .errors import (
    ExtractionError,
    ClassAttributeNotFoundError,
    BelowThresholdError,
    InvalidClassNameError,
    StylesheetPathError,
)

__all__ = [
    "TailwindCategory",
    "CATEGORY_ORDER",
    "CategorizedTokens",
    "AttributeKind",
    "QuoteStyle",
    "ParsedAttribute",
    "AttributeLocation",
    "ExtractionPlan",
    "ClassListSuggestion",
    "ExtractionError",
    "ClassAttributeNotFoundError",
    "BelowThresholdError",
    "InvalidClassNameError",
    "StylesheetPathError",
]
