"""
Tailwind Classifier - Assign each utility token a semantic category.

Classification order:
1. Any known state/responsive variant -> States
2. `text-` utilities -> Typography (sizes, alignment, wrapping) or Colors
3. Longest-prefix match against tailwind_rules.CATEGORY_PREFIXES
4. Fallback -> Other

Usage:
    from shrink_tailwind.analyzers import TailwindClassifier

    classifier = TailwindClassifier()
    classifier.categorize_token("items-center")
    # TailwindCategory.FLEXBOX_GRID
    classifier.categorize(["flex", "p-4", "hover:bg-blue-700"])
    # {LAYOUT: ["flex"], SPACING: ["p-4"], STATES: ["hover:bg-blue-700"]}
"""

from typing import Dict, Iterable, List

from ..contracts.categories import CategorizedTokens, TailwindCategory
from ..tailwind_rules import CATEGORY_PREFIXES, SORTED_PREFIXES, TEXT_TYPOGRAPHY_VALUES
from .tokenizer import has_state_variant, strip_variants


class TailwindClassifier:
    """
    Categorizes Tailwind utility tokens.

    Stateless: a single instance can be shared freely.
    """

    TEXT_PREFIX = "text-"

    # =========================================================================
    # SINGLE TOKEN
    # =========================================================================

    def categorize_token(self, token: str) -> TailwindCategory:
        """
        Categorize a single Tailwind class token.

        Args:
            token: Utility class, optionally with variant prefixes

        Returns:
            The token's TailwindCategory (never raises)
        """
        if has_state_variant(token):
            return TailwindCategory.STATES

        base = strip_variants(token).base

        if base.startswith(self.TEXT_PREFIX):
            rest = base[len(self.TEXT_PREFIX):]
            if rest in TEXT_TYPOGRAPHY_VALUES:
                return TailwindCategory.TYPOGRAPHY
            return TailwindCategory.COLORS

        return self._match_prefix(base)

    def _match_prefix(self, base: str) -> TailwindCategory:
        """Longest-prefix match of ``base`` against the category table."""
        for prefix in SORTED_PREFIXES:
            if prefix.endswith("-"):
                if base.startswith(prefix):
                    return CATEGORY_PREFIXES[prefix]
            elif base == prefix:
                return CATEGORY_PREFIXES[prefix]

        return TailwindCategory.OTHER

    # =========================================================================
    # TOKEN LISTS
    # =========================================================================

    def categorize(self, tokens: Iterable[str]) -> CategorizedTokens:
        """
        Group tokens by category.

        Buckets appear in first-seen order and keep token order.
        """
        categories: CategorizedTokens = {}
        for token in tokens:
            categories.setdefault(self.categorize_token(token), []).append(token)
        return categories

    def count_by_category(self, tokens: Iterable[str]) -> Dict[TailwindCategory, int]:
        """Number of tokens per category, in first-seen order."""
        return {
            category: len(bucket)
            for category, bucket in self.categorize(tokens).items()
        }

    def is_long_class_list(self, tokens: List[str], threshold: int) -> bool:
        """True if there are at least ``threshold`` tokens."""
        return len(tokens) >= threshold

    def __repr__(self) -> str:
        return "TailwindClassifier()"
