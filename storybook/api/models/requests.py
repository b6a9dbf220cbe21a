"""Pydantic models for API requests."""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from ...core.print_orders import PrintProvider
from ...core.types import Page, PageSizePreset, ReadingLevel, StoryConfig


class PageInput(BaseModel):
    """One story page as edited in the browser."""

    page_number: int = Field(
        ...,
        ge=1,
        validation_alias=AliasChoices("page_number", "page"),
        description="1-based page number, unique within the book",
    )
    text: Optional[str] = ""
    image_url: Optional[str] = None
    image_locked: bool = False

    def to_page(self) -> Page:
        return Page(
            page_number=self.page_number,
            text=self.text or "",
            image_url=self.image_url or None,
            image_locked=self.image_locked,
        )


class StoryConfigInput(BaseModel):
    """Parent preferences collected by the setup form."""

    children: list[str] = Field(default_factory=list)
    story_type: str = ""
    setting: str = ""
    characters: list[str] = Field(default_factory=list)
    reading_level: ReadingLevel = ReadingLevel.EARLY
    page_size: PageSizePreset = PageSizePreset.A5_PORTRAIT
    length_pages: int = 10
    content_safety: bool = False
    theme_preset: Optional[str] = None
    theme_custom: Optional[str] = None
    dedication: Optional[str] = None

    @field_validator("reading_level", mode="before")
    @classmethod
    def _parse_reading_level(cls, value):
        return ReadingLevel.parse(value)

    @field_validator("page_size", mode="before")
    @classmethod
    def _parse_page_size(cls, value):
        return PageSizePreset.parse(value)

    def to_config(self) -> StoryConfig:
        return StoryConfig(
            children=list(self.children),
            story_type=self.story_type,
            setting=self.setting,
            characters=list(self.characters),
            reading_level=self.reading_level,
            page_size=self.page_size,
            length_pages=self.length_pages,
            content_safety=self.content_safety,
            theme_preset=self.theme_preset,
            theme_custom=self.theme_custom,
            dedication=self.dedication,
        )


class ValidateExportRequest(BaseModel):
    """Request body for checking a book before export."""

    config: StoryConfigInput = Field(default_factory=StoryConfigInput)
    pages: list[PageInput] = Field(default_factory=list)

    def to_pages(self) -> list[Page]:
        return [page.to_page() for page in self.pages]


class ExportPdfRequest(ValidateExportRequest):
    """Request body for generating the web and print PDFs."""

    enforce_validation: bool = Field(
        default=True,
        description="Reject the export with 422 when any page fails validation",
    )


class PrintOrderRequest(BaseModel):
    """Request body for placing a print order."""

    provider: PrintProvider
    pdf_url: str = Field(..., min_length=1, description="URL of the print-ready PDF")
    page_size: PageSizePreset = PageSizePreset.A5_PORTRAIT

    @field_validator("page_size", mode="before")
    @classmethod
    def _parse_page_size(cls, value):
        return PageSizePreset.parse(value)
