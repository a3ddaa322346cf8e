"""
Unit tests for TailwindClassifier.

Tests category assignment, text- disambiguation and grouping.
"""

import pytest

from shrink_tailwind.contracts import TailwindCategory


# ============================================================================
# SINGLE TOKEN
# ============================================================================

# Format: (token, expected_category)
CATEGORY_CASES = [
    ("flex", TailwindCategory.LAYOUT),
    ("grid", TailwindCategory.LAYOUT),
    ("absolute", TailwindCategory.LAYOUT),
    ("z-10", TailwindCategory.LAYOUT),
    ("overflow-hidden", TailwindCategory.LAYOUT),
    ("items-center", TailwindCategory.FLEXBOX_GRID),
    ("flex-col", TailwindCategory.FLEXBOX_GRID),
    ("grid-cols-3", TailwindCategory.FLEXBOX_GRID),
    ("gap-4", TailwindCategory.FLEXBOX_GRID),
    ("p-4", TailwindCategory.SPACING),
    ("px-2", TailwindCategory.SPACING),
    ("space-x-4", TailwindCategory.SPACING),
    ("w-full", TailwindCategory.SIZING),
    ("min-w-0", TailwindCategory.SIZING),
    ("max-h-screen", TailwindCategory.SIZING),
    ("font-bold", TailwindCategory.TYPOGRAPHY),
    ("leading-tight", TailwindCategory.TYPOGRAPHY),
    ("line-clamp-3", TailwindCategory.TYPOGRAPHY),
    ("uppercase", TailwindCategory.TYPOGRAPHY),
    ("bg-white", TailwindCategory.COLORS),
    ("from-indigo-500", TailwindCategory.COLORS),
    ("border", TailwindCategory.BORDERS),
    ("border-2", TailwindCategory.BORDERS),
    ("rounded-lg", TailwindCategory.BORDERS),
    ("ring-2", TailwindCategory.BORDERS),
    ("shadow", TailwindCategory.EFFECTS),
    ("opacity-50", TailwindCategory.EFFECTS),
    ("bg-blend-multiply", TailwindCategory.EFFECTS),
    ("drop-shadow-lg", TailwindCategory.EFFECTS),
    ("transition", TailwindCategory.TRANSITIONS),
    ("duration-300", TailwindCategory.TRANSITIONS),
    ("animate-spin", TailwindCategory.TRANSITIONS),
    ("rotate-45", TailwindCategory.TRANSFORMS),
    ("translate-x-2", TailwindCategory.TRANSFORMS),
    ("cursor-pointer", TailwindCategory.INTERACTIVITY),
    ("pointer-events-none", TailwindCategory.INTERACTIVITY),
    ("select-none", TailwindCategory.INTERACTIVITY),
    ("hover:bg-blue-700", TailwindCategory.STATES),
    ("md:flex", TailwindCategory.STATES),
    ("dark:text-white", TailwindCategory.STATES),
    ("totally-unknown-xyz", TailwindCategory.OTHER),
    ("my-custom-thing", TailwindCategory.SPACING),
]


class TestCategorizeToken:
    """Tests for categorize_token()."""

    @pytest.mark.parametrize("token,expected", CATEGORY_CASES)
    def test_category(self, classifier, token, expected):
        assert classifier.categorize_token(token) == expected

    def test_category_display_names(self, classifier):
        assert classifier.categorize_token("items-center") == "Flexbox & Grid"
        assert str(classifier.categorize_token("rounded")) == "Borders & Radius"

    def test_unknown_variant_uses_base(self, classifier):
        """Variants that are not state variants fall back to the base utility."""
        assert classifier.categorize_token("custom:p-4") == TailwindCategory.SPACING

    def test_state_variant_beats_any_base(self, classifier):
        for token in ["hover:p-4", "focus:text-lg", "sm:unknown-thing", "group-hover/item:flex"]:
            assert classifier.categorize_token(token) == TailwindCategory.STATES


class TestTextDisambiguation:
    """text- means typography for sizes, alignment and wrapping, color otherwise."""

    @pytest.mark.parametrize(
        "token",
        ["text-xs", "text-base", "text-lg", "text-2xl", "text-9xl",
         "text-center", "text-justify", "text-end",
         "text-nowrap", "text-balance", "text-ellipsis"],
    )
    def test_typography(self, classifier, token):
        assert classifier.categorize_token(token) == TailwindCategory.TYPOGRAPHY

    @pytest.mark.parametrize(
        "token",
        ["text-blue-500", "text-white", "text-[#fff]", "text-inherit",
         "text-current", "text-transparent", "text-red-500/50"],
    )
    def test_colors(self, classifier, token):
        assert classifier.categorize_token(token) == TailwindCategory.COLORS


# ============================================================================
# TOKEN LISTS
# ============================================================================


class TestCategorize:
    """Tests for categorize() and count_by_category()."""

    def test_buckets_in_first_seen_order(self, classifier):
        tokens = ["flex", "p-4", "hover:bg-blue-700", "items-center", "m-2"]
        categories = classifier.categorize(tokens)

        assert list(categories) == [
            TailwindCategory.LAYOUT,
            TailwindCategory.SPACING,
            TailwindCategory.STATES,
            TailwindCategory.FLEXBOX_GRID,
        ]
        assert categories[TailwindCategory.SPACING] == ["p-4", "m-2"]

    def test_every_token_in_exactly_one_bucket(self, classifier):
        tokens = ["flex", "p-4", "p-4", "unknown", "text-lg", "text-red-500"]
        categories = classifier.categorize(tokens)
        assert sum(len(bucket) for bucket in categories.values()) == len(tokens)

    def test_empty(self, classifier):
        assert classifier.categorize([]) == {}

    def test_count_by_category(self, classifier):
        counts = classifier.count_by_category(["flex", "p-4", "m-2"])
        assert counts == {TailwindCategory.LAYOUT: 1, TailwindCategory.SPACING: 2}


class TestIsLongClassList:
    """Tests for is_long_class_list()."""

    def test_at_threshold(self, classifier):
        assert classifier.is_long_class_list(["a"] * 5, 5)

    def test_above_threshold(self, classifier):
        assert classifier.is_long_class_list(["a"] * 6, 5)

    def test_below_threshold(self, classifier):
        assert not classifier.is_long_class_list(["a"] * 4, 5)
