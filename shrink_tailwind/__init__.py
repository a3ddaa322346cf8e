"""
Shrink Tailwind - Extract long Tailwind class lists into @apply rules.

Core pipeline: AttributeLocator -> tokenize -> TailwindClassifier -> RuleGenerator.
"""

__version__ = "0.1.0"
