"""
Tailwind Rules - Lookup tables used to classify Tailwind utilities.

This module is the single source of truth for:
- Prefix -> category mapping (longest-prefix match)
- Known state/responsive variant keywords
- `text-` values that mean typography rather than color

Usage:
    from shrink_tailwind.tailwind_rules import CATEGORY_PREFIXES, STATE_VARIANTS

    CATEGORY_PREFIXES["items-"]
    # TailwindCategory.FLEXBOX_GRID
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from .contracts.categories import TailwindCategory


_LAYOUT = TailwindCategory.LAYOUT
_FLEX = TailwindCategory.FLEXBOX_GRID
_SPACING = TailwindCategory.SPACING
_SIZING = TailwindCategory.SIZING
_TYPO = TailwindCategory.TYPOGRAPHY
_COLORS = TailwindCategory.COLORS
_BORDERS = TailwindCategory.BORDERS
_EFFECTS = TailwindCategory.EFFECTS
_TRANSITIONS = TailwindCategory.TRANSITIONS
_TRANSFORMS = TailwindCategory.TRANSFORMS
_INTERACT = TailwindCategory.INTERACTIVITY


# =========================================================================
# PREFIX TABLE
# =========================================================================
# Keys ending in "-" match by prefix, all others match the base exactly.

CATEGORY_PREFIXES: Mapping[str, TailwindCategory] = MappingProxyType({
    # Layout
    "block": _LAYOUT, "inline": _LAYOUT, "flex": _LAYOUT, "grid": _LAYOUT,
    "hidden": _LAYOUT, "table": _LAYOUT, "contents": _LAYOUT,
    "container": _LAYOUT, "box-": _LAYOUT, "float-": _LAYOUT, "clear-": _LAYOUT,
    "isolate": _LAYOUT, "isolation-": _LAYOUT, "object-": _LAYOUT,
    "overflow-": _LAYOUT, "overscroll-": _LAYOUT,
    "static": _LAYOUT, "fixed": _LAYOUT, "absolute": _LAYOUT,
    "relative": _LAYOUT, "sticky": _LAYOUT,
    "inset-": _LAYOUT, "top-": _LAYOUT, "right-": _LAYOUT,
    "bottom-": _LAYOUT, "left-": _LAYOUT,
    "visible": _LAYOUT, "invisible": _LAYOUT, "collapse": _LAYOUT,
    "z-": _LAYOUT,

    # Flexbox & Grid
    "flex-": _FLEX, "grow": _FLEX, "shrink": _FLEX,
    "basis-": _FLEX, "order-": _FLEX,
    "grid-": _FLEX, "col-": _FLEX, "row-": _FLEX,
    "auto-cols-": _FLEX, "auto-rows-": _FLEX,
    "gap-": _FLEX, "justify-": _FLEX,
    "items-": _FLEX, "content-": _FLEX,
    "self-": _FLEX, "place-": _FLEX,

    # Spacing
    "p-": _SPACING, "px-": _SPACING, "py-": _SPACING,
    "pt-": _SPACING, "pr-": _SPACING, "pb-": _SPACING, "pl-": _SPACING,
    "ps-": _SPACING, "pe-": _SPACING,
    "m-": _SPACING, "mx-": _SPACING, "my-": _SPACING,
    "mt-": _SPACING, "mr-": _SPACING, "mb-": _SPACING, "ml-": _SPACING,
    "ms-": _SPACING, "me-": _SPACING,
    "space-x-": _SPACING, "space-y-": _SPACING,

    # Sizing
    "w-": _SIZING, "min-w-": _SIZING, "max-w-": _SIZING,
    "h-": _SIZING, "min-h-": _SIZING, "max-h-": _SIZING,
    "size-": _SIZING,

    # Typography (text- is shared with Colors, see TEXT_TYPOGRAPHY_VALUES)
    "font-": _TYPO, "text-": _TYPO, "tracking-": _TYPO,
    "leading-": _TYPO, "antialiased": _TYPO, "subpixel-antialiased": _TYPO,
    "italic": _TYPO, "not-italic": _TYPO,
    "normal-nums": _TYPO, "ordinal": _TYPO,
    "slashed-zero": _TYPO, "lining-nums": _TYPO,
    "oldstyle-nums": _TYPO, "proportional-nums": _TYPO,
    "tabular-nums": _TYPO, "diagonal-fractions": _TYPO,
    "stacked-fractions": _TYPO,
    "list-": _TYPO, "decoration-": _TYPO,
    "underline": _TYPO, "overline": _TYPO, "line-through": _TYPO,
    "no-underline": _TYPO,
    "uppercase": _TYPO, "lowercase": _TYPO, "capitalize": _TYPO,
    "normal-case": _TYPO, "truncate": _TYPO,
    "indent-": _TYPO, "align-": _TYPO, "whitespace-": _TYPO,
    "break-": _TYPO, "hyphens-": _TYPO, "line-clamp-": _TYPO,

    # Colors
    "bg-": _COLORS, "from-": _COLORS, "via-": _COLORS, "to-": _COLORS,
    "accent-": _COLORS, "caret-": _COLORS,

    # Borders & Radius
    "border": _BORDERS, "border-": _BORDERS,
    "rounded": _BORDERS, "rounded-": _BORDERS,
    "divide-": _BORDERS, "ring-": _BORDERS,
    "outline": _BORDERS, "outline-": _BORDERS,

    # Effects
    "shadow": _EFFECTS, "shadow-": _EFFECTS, "opacity-": _EFFECTS,
    "mix-blend-": _EFFECTS, "bg-blend-": _EFFECTS,
    "blur": _EFFECTS, "blur-": _EFFECTS,
    "brightness-": _EFFECTS, "contrast-": _EFFECTS,
    "drop-shadow": _EFFECTS, "drop-shadow-": _EFFECTS,
    "grayscale": _EFFECTS, "hue-rotate-": _EFFECTS,
    "invert": _EFFECTS, "saturate-": _EFFECTS, "sepia": _EFFECTS,
    "backdrop-": _EFFECTS,

    # Transitions & Animation
    "transition": _TRANSITIONS, "transition-": _TRANSITIONS,
    "duration-": _TRANSITIONS, "ease-": _TRANSITIONS,
    "delay-": _TRANSITIONS, "animate-": _TRANSITIONS,

    # Transforms
    "scale-": _TRANSFORMS, "rotate-": _TRANSFORMS,
    "translate-": _TRANSFORMS, "skew-": _TRANSFORMS,
    "origin-": _TRANSFORMS, "transform": _TRANSFORMS,

    # Interactivity
    "cursor-": _INTERACT, "touch-": _INTERACT,
    "select-": _INTERACT, "resize": _INTERACT, "resize-": _INTERACT,
    "scroll-": _INTERACT, "snap-": _INTERACT,
    "appearance-": _INTERACT, "pointer-events-": _INTERACT,
    "will-change-": _INTERACT,
})

SORTED_PREFIXES: Tuple[str, ...] = tuple(
    sorted(CATEGORY_PREFIXES, key=len, reverse=True)
)
"""Prefixes longest-first. Ties keep table order (sort is stable)."""


# =========================================================================
# STATE VARIANTS
# =========================================================================

STATE_VARIANTS: Tuple[str, ...] = (
    # Pseudo-classes
    "hover", "focus", "focus-within", "focus-visible", "active", "visited",
    "target", "first", "last", "only", "odd", "even", "first-of-type",
    "last-of-type", "only-of-type", "empty", "disabled", "enabled", "checked",
    "indeterminate", "default", "required", "valid", "invalid", "in-range",
    "out-of-range", "placeholder-shown", "autofill", "read-only",
    # Pseudo-elements
    "before", "after", "first-letter", "first-line", "marker", "selection",
    "file", "backdrop", "placeholder",
    # Responsive breakpoints
    "sm", "md", "lg", "xl", "2xl",
    # Media and mode
    "dark", "motion-safe", "motion-reduce", "contrast-more", "contrast-less",
    "portrait", "landscape", "print", "rtl", "ltr",
    # Open state
    "open", "closed",
    # Group / peer
    "group-hover", "group-focus", "peer-hover", "peer-focus",
)

STATE_VARIANT_SET: FrozenSet[str] = frozenset(STATE_VARIANTS)


# =========================================================================
# TEXT- DISAMBIGUATION
# =========================================================================

TEXT_SIZES: FrozenSet[str] = frozenset({
    "xs", "sm", "base", "lg", "xl",
    "2xl", "3xl", "4xl", "5xl", "6xl", "7xl", "8xl", "9xl",
})

TEXT_ALIGNMENTS: FrozenSet[str] = frozenset({
    "left", "center", "right", "justify", "start", "end",
})

TEXT_WRAPPING: FrozenSet[str] = frozenset({
    "wrap", "nowrap", "balance", "pretty", "ellipsis", "clip",
})

TEXT_TYPOGRAPHY_VALUES: FrozenSet[str] = TEXT_SIZES | TEXT_ALIGNMENTS | TEXT_WRAPPING
"""Values after `text-` that select typography; anything else is a color."""
