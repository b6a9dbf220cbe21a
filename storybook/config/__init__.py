"""
Configuration module for the Storybook export service.

Re-exports all configuration for convenient access.
"""

from .story import STORY_CONSTANTS, WORD_COUNT_TARGETS
from .layout import (
    BLEED_MM,
    LAYOUT_CONSTANTS,
    MM_TO_POINTS,
    PAGE_SIZES,
)
from .print import (
    PEECHO_PRODUCT_CODES,
    PRINT_CONSTANTS,
    STUB_QUOTES,
    get_peecho_api_key,
    print_retry,
)

__all__ = [
    # Story
    "STORY_CONSTANTS",
    "WORD_COUNT_TARGETS",
    # Layout
    "BLEED_MM",
    "LAYOUT_CONSTANTS",
    "MM_TO_POINTS",
    "PAGE_SIZES",
    # Print
    "PEECHO_PRODUCT_CODES",
    "PRINT_CONSTANTS",
    "STUB_QUOTES",
    "get_peecho_api_key",
    "print_retry",
]
