"""
Generator - Synthesizes @apply stylesheet rules.
"""

from .rule_generator import RuleGenerator, sanitize_name, FALLBACK_CLASS_NAME

__all__ = [
    "RuleGenerator",
    "sanitize_name",
    "FALLBACK_CLASS_NAME",
]
