"""
StylesheetService - Append generated rules to a stylesheet in the workspace.

Target paths are resolved against the workspace root and must stay
inside it. Missing directories and files are created.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..contracts.errors import StylesheetPathError
from ..core.config import settings


logger = logging.getLogger(__name__)


class StylesheetService:
    """
    Writes @apply rules to CSS files.

    Usage:
        service = StylesheetService("/path/to/project")
        path = service.append_rule("src/styles/components.css", css)
    """

    def __init__(self, workspace_root: Optional[Union[str, Path]] = None):
        root = workspace_root if workspace_root is not None else settings.WORKSPACE_ROOT
        self.workspace_root = Path(root).resolve()

    def resolve(self, target: Optional[Union[str, Path]] = None) -> Path:
        """
        Resolve a stylesheet path inside the workspace.

        Args:
            target: Relative or absolute path (default: settings.TARGET_CSS_FILE)

        Raises:
            StylesheetPathError: Path resolves outside the workspace root,
                to the root itself, or to an existing directory
        """
        target = target if target is not None else settings.TARGET_CSS_FILE
        path = (self.workspace_root / target).resolve()

        if path == self.workspace_root:
            logger.warning(f"Rejected stylesheet path at the workspace root: {target}")
            raise StylesheetPathError(
                str(target), str(self.workspace_root), reason="is the workspace root"
            )
        if self.workspace_root not in path.parents:
            logger.warning(f"Rejected stylesheet path outside workspace: {target}")
            raise StylesheetPathError(str(target), str(self.workspace_root))
        if path.is_dir():
            logger.warning(f"Rejected stylesheet path that is a directory: {target}")
            raise StylesheetPathError(
                str(target), str(self.workspace_root), reason="is a directory"
            )
        return path

    def append_rule(self, target: Optional[Union[str, Path]], css: str) -> Path:
        """
        Append a CSS rule to the target stylesheet.

        Existing content is separated from the new rule by one blank line.

        Returns:
            The resolved stylesheet path
        """
        path = self.resolve(target)
        if not css:
            return path

        path.parent.mkdir(parents=True, exist_ok=True)
        existing = path.read_text(encoding="utf-8") if path.exists() else ""

        prefix = ""
        if existing.strip() and not existing.endswith("\n\n"):
            if existing.endswith("\n"):
                prefix = "\n"
            else:
                prefix = "\n\n"

        with path.open("a", encoding="utf-8") as handle:
            handle.write(prefix + css)

        logger.info(f"Appended {len(css)} characters to {path}")
        return path
