"""
Tokenizer - Split class lists into utility tokens and inspect variants.

A token is a whitespace-delimited class name. It may carry any number
of colon-separated variant prefixes before its base utility:

    dark:hover:bg-blue-700  ->  variants ["dark", "hover"], base "bg-blue-700"
"""

import re
from typing import List, NamedTuple

from ..tailwind_rules import STATE_VARIANTS, STATE_VARIANT_SET


_WHITESPACE = re.compile(r"\s+")


class VariantSplit(NamedTuple):
    """A token split into its variant prefixes and base utility."""

    variants: List[str]
    base: str


def tokenize(value: str) -> List[str]:
    """
    Split a class attribute value into utility tokens.

    Order is preserved and duplicates are kept.
    """
    return [token for token in (t.strip() for t in _WHITESPACE.split(value)) if token]


def strip_variants(token: str) -> VariantSplit:
    """Split ``token`` on ':' into variants and the trailing base utility."""
    parts = token.split(":")
    base = parts.pop()
    return VariantSplit(variants=parts, base=base)


def _is_state_variant(variant: str) -> bool:
    # Exact keyword, or a keyword with a modifier suffix (group-hover/item).
    if variant in STATE_VARIANT_SET:
        return True
    return any(variant.startswith(keyword + "/") for keyword in STATE_VARIANTS)


def has_state_variant(token: str) -> bool:
    """True if any variant prefix of ``token`` is a known state/responsive variant."""
    return any(_is_state_variant(v) for v in strip_variants(token).variants)
