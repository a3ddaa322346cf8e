"""
Pydantic schemas for the Tailwind extraction API.

These schemas define the REST contract used in shrink_tailwind/routers/extract.py
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============== SUGGESTIONS ==============

class SuggestionsRequest(BaseModel):
    """Request to scan a document for long class lists."""
    text: str = Field(..., description="Full document text")
    threshold: Optional[int] = Field(
        default=None, ge=1, description="Minimum class count (default: CLASS_THRESHOLD)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": '<div class="flex items-center p-4 bg-white rounded-lg shadow">',
                "threshold": 5,
            }
        }
    )


class SuggestionResponse(BaseModel):
    """One long class list."""
    line_index: int
    value: str
    token_count: int
    value_start: int
    value_end: int
    categories: Dict[str, int]


class SuggestionsResponse(BaseModel):
    suggestions: List[SuggestionResponse]
    total: int


# ============== CATEGORIZE ==============

class CategorizeRequest(BaseModel):
    """Request to classify a class list."""
    classes: str = Field(..., description="Space-separated Tailwind classes")


class CategoryGroup(BaseModel):
    category: str
    tokens: List[str]


class CategorizeResponse(BaseModel):
    """Tokens grouped by category, in canonical display order."""
    tokens: List[str]
    groups: List[CategoryGroup]


# ============== EXTRACT ==============

class ExtractRequest(BaseModel):
    """Request to extract the class list at a line into an @apply rule."""
    text: str = Field(..., description="Full document text")
    line: int = Field(..., ge=0, description="Zero-based line of the class attribute")
    class_name: str = Field(..., min_length=1, description="Name of the new CSS class")
    group_by_category: Optional[bool] = None
    preserve_state_variants: Optional[bool] = None
    threshold: Optional[int] = Field(default=None, ge=1)
    force: bool = Field(default=False, description="Extract even below the threshold")
    target_css_file: Optional[str] = Field(
        default=None, description="Stylesheet path relative to the workspace root"
    )
    write: bool = Field(default=False, description="Append the rule to the stylesheet")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": '<button class="px-4 py-2 bg-blue-600 text-white rounded hover:bg-blue-700">',
                "line": 0,
                "class_name": "btn-primary",
                "preserve_state_variants": True,
            }
        }
    )


class ExtractResponse(BaseModel):
    """Generated rule and the updated document."""
    class_name: str
    css: str
    replacement_value: str
    updated_text: str
    line_index: int
    extracted_tokens: List[str]
    preserved_tokens: List[str]
    grouped: bool
    below_threshold: bool
    target_css_file: Optional[str] = None
    message: str
