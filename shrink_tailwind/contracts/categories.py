"""
Categories - Semantic buckets for Tailwind utility classes.

Every utility token is assigned exactly one category. The enum values
are the display names used in generated category comments.
"""

from enum import Enum
from typing import Dict, List


class TailwindCategory(str, Enum):
    """Semantic grouping of Tailwind utilities."""

    LAYOUT = "Layout"
    FLEXBOX_GRID = "Flexbox & Grid"
    SPACING = "Spacing"
    SIZING = "Sizing"
    TYPOGRAPHY = "Typography"
    COLORS = "Colors"
    BORDERS = "Borders & Radius"
    EFFECTS = "Effects"
    TRANSITIONS = "Transitions & Animation"
    TRANSFORMS = "Transforms"
    INTERACTIVITY = "Interactivity"

    STATES = "States"
    """Tokens carrying a state, responsive or mode variant (hover:, md:, dark:)."""

    OTHER = "Other"
    """Tokens with no known prefix."""

    def __str__(self) -> str:
        return self.value


CATEGORY_ORDER: List[TailwindCategory] = [
    TailwindCategory.LAYOUT,
    TailwindCategory.FLEXBOX_GRID,
    TailwindCategory.SPACING,
    TailwindCategory.SIZING,
    TailwindCategory.TYPOGRAPHY,
    TailwindCategory.COLORS,
    TailwindCategory.BORDERS,
    TailwindCategory.EFFECTS,
    TailwindCategory.TRANSITIONS,
    TailwindCategory.TRANSFORMS,
    TailwindCategory.INTERACTIVITY,
    TailwindCategory.STATES,
    TailwindCategory.OTHER,
]
"""Canonical display order for grouped output."""


CategorizedTokens = Dict[TailwindCategory, List[str]]
