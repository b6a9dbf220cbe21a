"""Pydantic models for API responses."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from ...core.types import (
    ImageState,
    NamedPreset,
    StoryTypePreset,
    TextState,
    ThemePreset,
    WordCountStatus,
)


class ValidationErrorResponse(BaseModel):
    """A single failed rule, tagged with its form field."""

    field: str
    message: str


class PageStatusResponse(BaseModel):
    """Readiness of one page."""

    page_number: int
    word_count: int
    status: WordCountStatus  # Strict target, for display
    is_valid: bool  # Tolerance band, gates export
    message: Optional[str] = None
    text_state: TextState
    image_state: ImageState
    export_ready: bool


class ValidateExportResponse(BaseModel):
    """Result of checking a whole book."""

    is_valid: bool
    errors: list[ValidationErrorResponse] = Field(default_factory=list)
    pages: list[PageStatusResponse] = Field(default_factory=list)
    config_errors: list[ValidationErrorResponse] = Field(default_factory=list)  # Setup form, never blocks export


class PageDimensionsResponse(BaseModel):
    width_mm: float
    height_mm: float


class PageSizeResponse(BaseModel):
    """Trim and bleed rectangles for a preset, in millimetres."""

    content: PageDimensionsResponse
    with_bleed: PageDimensionsResponse


class ExportResponse(BaseModel):
    """Both PDFs as data URLs plus download names."""

    success: bool = True
    web_pdf_url: str
    print_pdf_url: str
    web_filename: str
    print_filename: str
    page_count: int  # Story pages + cover
    dimensions: PageSizeResponse


class PrintOrderResponse(BaseModel):
    """Vendor response for a placed (or stubbed) order."""

    success: bool = True
    provider: str
    order: dict[str, Any]
    pdf_url: str
    page_size: str


class ReadingLevelResponse(BaseModel):
    name: str
    min_words: int
    max_words: int
    tolerance: int


class PageSizePresetResponse(BaseModel):
    name: str
    content: PageDimensionsResponse
    with_bleed: PageDimensionsResponse


class PresetsResponse(BaseModel):
    """Everything the setup form offers."""

    themes: list[ThemePreset]
    story_types: list[StoryTypePreset]
    characters: list[NamedPreset]
    settings: list[NamedPreset]
    reading_levels: list[ReadingLevelResponse]
    page_sizes: list[PageSizePresetResponse]
