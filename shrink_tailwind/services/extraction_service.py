"""
ExtractionService - Runs the extract-classes workflow on plain text.

Flow for one extraction:
1. Locate the class attribute at the requested line (multi-line aware)
2. Tokenize and check the threshold
3. Optionally keep state-variant tokens inline
4. Categorize and generate the @apply rule
5. Compute the replacement value for the attribute

The service never touches files; writing the rule is StylesheetService's job.

Usage:
    from shrink_tailwind.services.extraction_service import extraction_service

    plan = extraction_service.plan_extraction(text, line_index=12, class_name="card")
    new_text = plan.apply(text)
"""

import logging
import re
from typing import List, Optional

from ..analyzers import AttributeLocator, TailwindClassifier, has_state_variant, tokenize
from ..contracts.errors import (
    BelowThresholdError,
    ClassAttributeNotFoundError,
    ExtractionError,
    InvalidClassNameError,
)
from ..contracts.extraction import ClassListSuggestion, ExtractionPlan
from ..core.config import settings
from ..generator import RuleGenerator, sanitize_name


logger = logging.getLogger(__name__)


_LEADING_DIGIT = re.compile(r"^[0-9]")
_WHITESPACE = re.compile(r"\s")


class ExtractionService:
    """
    Plans extractions of long Tailwind class lists into @apply rules.

    Defaults for threshold, grouping and state-variant preservation come
    from settings and can be overridden per call.
    """

    def __init__(
        self,
        locator: Optional[AttributeLocator] = None,
        classifier: Optional[TailwindClassifier] = None,
        generator: Optional[RuleGenerator] = None,
    ):
        self.locator = locator or AttributeLocator(settings.MULTILINE_LOOKAROUND)
        self.classifier = classifier or TailwindClassifier()
        self.generator = generator or RuleGenerator()

    # =========================================================================
    # VALIDATION
    # =========================================================================

    @staticmethod
    def validate_class_name(name: Optional[str]) -> str:
        """
        Validate a user-supplied class name.

        Returns:
            The sanitized class name

        Raises:
            InvalidClassNameError: Empty, starts with a digit or contains spaces
        """
        value = (name or "").strip()
        if not value:
            raise InvalidClassNameError(value, "Class name is required")
        if _LEADING_DIGIT.match(value):
            raise InvalidClassNameError(value, "Class name cannot start with a number")
        if _WHITESPACE.search(value):
            raise InvalidClassNameError(value, "Class name cannot contain spaces")
        return sanitize_name(value)

    # =========================================================================
    # SUGGESTIONS
    # =========================================================================

    def find_suggestions(
        self,
        text: str,
        threshold: Optional[int] = None,
    ) -> List[ClassListSuggestion]:
        """
        Find every line whose class list is long enough to extract.

        Only single-line attributes are reported, one per line.
        """
        threshold = threshold if threshold is not None else settings.CLASS_THRESHOLD
        suggestions: List[ClassListSuggestion] = []

        for line_index, line in enumerate(text.split("\n")):
            parsed = self.locator.find_class_attribute(line)
            if parsed is None:
                continue

            tokens = tokenize(parsed.value)
            if not self.classifier.is_long_class_list(tokens, threshold):
                logger.debug(
                    f"Line {line_index}: {len(tokens)} classes below threshold {threshold}"
                )
                continue

            suggestions.append(
                ClassListSuggestion(
                    line_index=line_index,
                    value=parsed.value,
                    token_count=len(tokens),
                    value_start=parsed.value_start,
                    value_end=parsed.value_end,
                    categories={
                        str(category): count
                        for category, count in self.classifier.count_by_category(tokens).items()
                    },
                )
            )

        logger.debug(f"Found {len(suggestions)} long class lists")
        return suggestions

    # =========================================================================
    # EXTRACTION
    # =========================================================================

    def plan_extraction(
        self,
        text: str,
        line_index: int,
        class_name: str,
        group_by_category: Optional[bool] = None,
        preserve_state_variants: Optional[bool] = None,
        threshold: Optional[int] = None,
        force: bool = False,
    ) -> ExtractionPlan:
        """
        Plan the extraction of the class list at ``line_index``.

        Args:
            text: Full document text
            line_index: Zero-based line of the class attribute
            class_name: Name of the new CSS class
            group_by_category: Emit category comments (default: settings)
            preserve_state_variants: Keep variant tokens inline (default: settings)
            threshold: Minimum class count (default: settings)
            force: Extract even when below the threshold

        Returns:
            ExtractionPlan with the generated CSS and replacement value

        Raises:
            InvalidClassNameError: Bad class name
            ClassAttributeNotFoundError: No attribute at the line
            BelowThresholdError: Too few classes and not forced
            ExtractionError: Nothing left to extract after preserving variants
        """
        name = self.validate_class_name(class_name)
        if group_by_category is None:
            group_by_category = settings.GROUP_BY_CATEGORY
        if preserve_state_variants is None:
            preserve_state_variants = settings.PRESERVE_STATE_VARIANTS
        if threshold is None:
            threshold = settings.CLASS_THRESHOLD

        location = self.locator.find_class_attribute_at_position(text, line_index)
        if location is None:
            raise ClassAttributeNotFoundError(line_index)

        tokens = tokenize(location.parsed.value)
        below_threshold = not self.classifier.is_long_class_list(tokens, threshold)
        if below_threshold and not force:
            raise BelowThresholdError(len(tokens), threshold)

        extracted = tokens
        preserved: List[str] = []
        if preserve_state_variants:
            extracted = [t for t in tokens if not has_state_variant(t)]
            preserved = [t for t in tokens if has_state_variant(t)]

        if not extracted:
            raise ExtractionError(
                "Every class carries a state variant; nothing left to extract"
            )

        categories = self.classifier.categorize(extracted)
        css = self.generator.generate_output(name, extracted, categories, group_by_category)

        plan = ExtractionPlan(
            location=location,
            class_name=name,
            tokens=tokens,
            extracted_tokens=extracted,
            preserved_tokens=preserved,
            categories=categories,
            css=css,
            grouped=self.generator.should_group(categories, group_by_category),
            below_threshold=below_threshold,
        )
        logger.info(plan.describe())
        return plan


# Singleton instance
extraction_service = ExtractionService()
