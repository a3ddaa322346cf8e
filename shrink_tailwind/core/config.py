"""
Configuration module - centralized settings for Shrink Tailwind.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    Example:
        export CLASS_THRESHOLD=8
        export TARGET_CSS_FILE=assets/css/components.css
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    APP_NAME: str = "Shrink Tailwind"
    DEBUG: bool = False

    # LOG_LEVEL: Level for the shrink_tailwind logger (DEBUG shows per-line decisions)
    LOG_LEVEL: str = "INFO"

    # ---------------------------------------------------------------------------
    # EXTRACTION SETTINGS
    # ---------------------------------------------------------------------------
    # CLASS_THRESHOLD: Minimum number of classes before suggesting extraction
    CLASS_THRESHOLD: int = Field(default=5, ge=1)

    # TARGET_CSS_FILE: Stylesheet (relative to WORKSPACE_ROOT) receiving @apply rules
    TARGET_CSS_FILE: str = "src/styles/components.css"

    # GROUP_BY_CATEGORY: Emit one commented @apply block per category
    GROUP_BY_CATEGORY: bool = True

    # PRESERVE_STATE_VARIANTS: Keep hover:, md:, dark: ... classes inline
    PRESERVE_STATE_VARIANTS: bool = False

    # MULTILINE_LOOKAROUND: Lines searched around the cursor for wrapped attributes
    MULTILINE_LOOKAROUND: int = Field(default=5, ge=0)

    # WORKSPACE_ROOT: Directory stylesheet paths are resolved against
    WORKSPACE_ROOT: str = "."


settings = Settings()
