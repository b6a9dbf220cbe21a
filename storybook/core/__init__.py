# Storybook export - Core Domain

# Re-export types for convenient access
from .types import (
    DocumentLayout,
    ImageState,
    Page,
    PageLayout,
    PageRectangle,
    PageSizePreset,
    PageValidation,
    ReadingLevel,
    StoryConfig,
    TextState,
    ValidationError,
    WordCountStatus,
)

__all__ = [
    "DocumentLayout",
    "ImageState",
    "Page",
    "PageLayout",
    "PageRectangle",
    "PageSizePreset",
    "PageValidation",
    "ReadingLevel",
    "StoryConfig",
    "TextState",
    "ValidationError",
    "WordCountStatus",
]
