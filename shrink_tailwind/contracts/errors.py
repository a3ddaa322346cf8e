"""
Errors - Exceptions raised by the extraction workflow.

The analyzers and the rule generator never raise: absence is expressed
as None or an empty string. These exceptions belong to the host layer
(services, routers, CLI) which has to tell the user why nothing happened.
"""

from typing import Optional


class ExtractionError(Exception):
    """Base class for extraction workflow failures."""


class ClassAttributeNotFoundError(ExtractionError):
    """No class or className attribute was found at the requested line."""

    def __init__(self, line_index: int):
        self.line_index = line_index
        super().__init__(
            f"No class attribute found on line {line_index + 1}. "
            'Place the cursor on a line with class="..." or className="...".'
        )


class BelowThresholdError(ExtractionError):
    """The class list is shorter than the configured threshold."""

    def __init__(self, token_count: int, threshold: int):
        self.token_count = token_count
        self.threshold = threshold
        super().__init__(
            f"Only {token_count} class(es) found (threshold: {threshold})"
        )


class InvalidClassNameError(ExtractionError):
    """The requested class name cannot be used."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(reason)


class StylesheetPathError(ExtractionError):
    """The target stylesheet path is outside the workspace root or not a file."""

    def __init__(
        self,
        path: str,
        root: Optional[str] = None,
        reason: str = "is outside the workspace root",
    ):
        self.path = path
        self.root = root
        self.reason = reason
        super().__init__(f"Stylesheet path {path!r} {reason}")

