"""
Page layout constants for the Storybook export service.

Physical sizes are in millimetres; everything placed on a page is expressed
as a fraction of the page rectangle so it scales across presets.
"""

from ..core.types import MM_TO_POINTS, PageDimensions, PageSize, PageSizePreset

BLEED_MM = 3  # Added on each edge of the print variant

PAGE_SIZES: dict[PageSizePreset, PageSize] = {
    PageSizePreset.A5_PORTRAIT: PageSize(
        content=PageDimensions(148, 210),
        with_bleed=PageDimensions(154, 216),
    ),
    PageSizePreset.A4_PORTRAIT: PageSize(
        content=PageDimensions(210, 297),
        with_bleed=PageDimensions(216, 303),
    ),
    PageSizePreset.SQUARE_210: PageSize(
        content=PageDimensions(210, 210),
        with_bleed=PageDimensions(216, 216),
    ),
}

# Typography and placement. Sizes are (web, print); positions are fractions
# of page width/height measured from the bottom-left corner.
LAYOUT_CONSTANTS = {
    "font_name": "Helvetica",
    "fallback_title": "Magical Story",
    "title": {"x": 0.1, "y": 0.8, "size": (20, 24), "color": (0.2, 0.2, 0.2)},
    "subtitle": {"x": 0.1, "y": 0.75, "size": (14, 16), "color": (0.4, 0.4, 0.4)},
    "dedication": {"x": 0.1, "y": 0.2, "size": (12, 14), "color": (0.3, 0.3, 0.3)},
    "page_number": {"x": 0.9, "y": 0.05, "size": (10, 10), "color": (0.5, 0.5, 0.5)},
    "body": {
        "x": 0.1,
        "y": 0.6,
        "width": 0.8,
        "size": (14, 16),
        "line_advance": (18, 20),
        "color": (0.1, 0.1, 0.1),
    },
    "image_placeholder": {
        "x": 0.1,
        "y": 0.65,
        "width": 0.8,
        "height": 0.25,
        "border_color": (0.8, 0.8, 0.8),
        "border_width": 1,
    },
    "image_placeholder_label": {
        "text": "[Image Area]",
        "x": 0.45,
        "y": 0.75,
        "size": (12, 12),
        "color": (0.6, 0.6, 0.6),
    },
}

__all__ = [
    "BLEED_MM",
    "LAYOUT_CONSTANTS",
    "MM_TO_POINTS",
    "PAGE_SIZES",
]
