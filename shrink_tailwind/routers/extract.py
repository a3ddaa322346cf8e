"""
Extract Router - HTTP surface for Tailwind class extraction.

Endpoints:
- POST /tailwind/suggestions: Lines whose class list is long enough to extract
- POST /tailwind/categorize: Classify a class list
- POST /tailwind/extract: Replace a class list by an @apply rule

All business logic lives in ExtractionService and StylesheetService;
this router only translates errors into HTTP responses.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from ..analyzers import TailwindClassifier, tokenize
from ..contracts.categories import CATEGORY_ORDER
from ..contracts.errors import (
    BelowThresholdError,
    ClassAttributeNotFoundError,
    ExtractionError,
    InvalidClassNameError,
    StylesheetPathError,
)
from ..schemas.extract import (
    CategorizeRequest,
    CategorizeResponse,
    CategoryGroup,
    ExtractRequest,
    ExtractResponse,
    SuggestionResponse,
    SuggestionsRequest,
    SuggestionsResponse,
)
from ..services.extraction_service import extraction_service
from ..services.stylesheet_service import StylesheetService


# ---------------------------------------------------------------------------
# LOGGER SETUP
# ---------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/tailwind", tags=["tailwind"])

classifier = TailwindClassifier()


@router.post("/suggestions", response_model=SuggestionsResponse)
def find_suggestions(request: SuggestionsRequest):
    """List every line with a class list at or above the threshold."""
    suggestions = extraction_service.find_suggestions(request.text, request.threshold)
    return SuggestionsResponse(
        suggestions=[SuggestionResponse(**s.to_dict()) for s in suggestions],
        total=len(suggestions),
    )


@router.post("/categorize", response_model=CategorizeResponse)
def categorize_classes(request: CategorizeRequest):
    """Split a class list into tokens and group them by category."""
    tokens = tokenize(request.classes)
    categories = classifier.categorize(tokens)
    groups = [
        CategoryGroup(category=str(category), tokens=categories[category])
        for category in CATEGORY_ORDER
        if category in categories
    ]
    return CategorizeResponse(tokens=tokens, groups=groups)


@router.post("/extract", response_model=ExtractResponse)
def extract_classes(request: ExtractRequest):
    """
    Extract the class list at ``line`` into an @apply rule.

    Returns the CSS, the replacement value and the updated document text.
    With ``write`` set, the rule is appended to the target stylesheet.
    """
    try:
        plan = extraction_service.plan_extraction(
            text=request.text,
            line_index=request.line,
            class_name=request.class_name,
            group_by_category=request.group_by_category,
            preserve_state_variants=request.preserve_state_variants,
            threshold=request.threshold,
            force=request.force,
        )
        if request.write:
            path = StylesheetService().append_rule(request.target_css_file, plan.css)
            plan.target_css_file = str(path)
    except ClassAttributeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except BelowThresholdError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except (InvalidClassNameError, StylesheetPathError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ExtractionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    return ExtractResponse(
        class_name=plan.class_name,
        css=plan.css,
        replacement_value=plan.replacement_value,
        updated_text=plan.apply(request.text),
        line_index=plan.location.line_index,
        extracted_tokens=plan.extracted_tokens,
        preserved_tokens=plan.preserved_tokens,
        grouped=plan.grouped,
        below_threshold=plan.below_threshold,
        target_css_file=plan.target_css_file,
        message=plan.describe(),
    )
