"""
Analyzers - Locate, tokenize and classify Tailwind class lists.

This module provides:
- AttributeLocator: Find class/className attributes in markup lines
- tokenize / strip_variants / has_state_variant: Token helpers
- TailwindClassifier: Map tokens to semantic categories

Usage:
    from shrink_tailwind.analyzers import AttributeLocator, TailwindClassifier, tokenize

    attr = AttributeLocator().find_class_attribute(line)
    tokens = tokenize(attr.value)
    categories = TailwindClassifier().categorize(tokens)
"""

from .attribute_locator import AttributeLocator, DEFAULT_LOOKAROUND
from .tokenizer import VariantSplit, tokenize, strip_variants, has_state_variant
from .classifier import TailwindClassifier

__all__ = [
    # Attribute Locator
    "AttributeLocator",
    "DEFAULT_LOOKAROUND",
    # Tokenizer
    "VariantSplit",
    "tokenize",
    "strip_variants",
    "has_state_variant",
    # Classifier
    "TailwindClassifier",
]
