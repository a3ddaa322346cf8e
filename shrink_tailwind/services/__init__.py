"""
Services - Host-side workflow around the analyzers and generator.
"""

from .extraction_service import ExtractionService, extraction_service
from .stylesheet_service import StylesheetService

__all__ = [
    "ExtractionService",
    "extraction_service",
    "StylesheetService",
]
