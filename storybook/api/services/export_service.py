"""Export service: validation -> layout -> PDF."""

import base64
import time
from dataclasses import dataclass, field
from typing import Optional

from ...config import PAGE_SIZES
from ...core.layout import MeasureWidth, build_document, cover_title, helvetica_width
from ...core.pdf_renderer import render_pdf
from ...core.types import (
    Page,
    PageSize,
    PageSizePreset,
    ReadingLevel,
    StoryConfig,
    ValidationError,
)
from ...core.validation import (
    format_validation_errors,
    get_word_count_status,
    is_page_export_ready,
    validate_page_content,
    validate_pages_for_export,
    validate_story_config,
)
from ..config import DEFAULT_FILENAME_STEM, PDF_MEDIA_TYPE
from ..logging import export_logger


class ExportValidationError(Exception):
    """The book is not ready to export."""

    def __init__(self, errors: list[ValidationError]):
        super().__init__(f"{len(errors)} validation errors")
        self.errors = errors


@dataclass
class PageReport:
    """Display and export status of one page."""

    page_number: int
    word_count: int
    status: str
    is_valid: bool
    message: Optional[str]
    text_state: str
    image_state: str
    export_ready: bool


@dataclass
class ExportCheck:
    """
    Whole-book readiness.

    Only page errors block export; config errors report setup-form fields
    (story type, setting, characters, safety, length, theme) left incomplete.
    """

    errors: list[ValidationError] = field(default_factory=list)
    pages: list[PageReport] = field(default_factory=list)
    config_errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        return format_validation_errors(self.config_errors + self.errors)


@dataclass
class ExportResult:
    """Rendered PDFs for one export."""

    web_pdf: bytes
    print_pdf: bytes
    filename_stem: str
    page_count: int
    page_size: PageSize

    @property
    def web_filename(self) -> str:
        return f"{self.filename_stem}-web.pdf"

    @property
    def print_filename(self) -> str:
        return f"{self.filename_stem}-print.pdf"


def to_data_url(pdf: bytes) -> str:
    """Inline a PDF as a base64 data URL."""
    return f"data:{PDF_MEDIA_TYPE};base64,{base64.b64encode(pdf).decode('ascii')}"


def filename_stem(config: StoryConfig) -> str:
    """Download name stem: children's names joined with '-', or 'story'."""
    names = config.named_children
    return "-".join(names) if names else DEFAULT_FILENAME_STEM


class ExportService:
    """Checks a book and renders its web and print PDFs."""

    def __init__(self, measure_width: MeasureWidth = helvetica_width):
        self.measure_width = measure_width

    def check(self, config: StoryConfig, pages: list[Page]) -> ExportCheck:
        """Per-page status plus the list of rule violations."""
        level = ReadingLevel.parse(config.reading_level)
        reports = []
        for page in sorted(pages, key=lambda p: p.page_number):
            result = validate_page_content(page.text, level, page.page_number)
            reports.append(
                PageReport(
                    page_number=page.page_number,
                    word_count=result.word_count,
                    status=get_word_count_status(result.word_count, level).value,
                    is_valid=result.is_valid,
                    message=result.message,
                    text_state=page.text_state.value,
                    image_state=page.image_state.value,
                    export_ready=is_page_export_ready(page, level),
                )
            )

        return ExportCheck(
            errors=validate_pages_for_export(pages, level),
            pages=reports,
            config_errors=validate_story_config(config),
        )

    def export(
        self,
        config: StoryConfig,
        pages: list[Page],
        enforce_validation: bool = True,
    ) -> ExportResult:
        """
        Render both PDF variants.

        Raises:
            ExportValidationError: If enforce_validation is set and any page
                fails validation
        """
        start = time.monotonic()
        page_size = PageSizePreset.parse(config.page_size)
        export_logger.export_started(len(pages), page_size.value)

        if enforce_validation:
            errors = validate_pages_for_export(pages, ReadingLevel.parse(config.reading_level))
            if errors:
                export_logger.validation_failed(len(errors))
                raise ExportValidationError(errors)

        title = cover_title(config)
        rendered = {}
        for include_bleed in (False, True):
            variant_start = time.monotonic()
            layout = build_document(
                pages,
                page_size,
                include_bleed,
                story=config,
                measure_width=self.measure_width,
            )
            rendered[include_bleed] = render_pdf(layout, title=title)
            export_logger.variant_rendered(
                layout.variant, layout.page_count, time.monotonic() - variant_start
            )

        result = ExportResult(
            web_pdf=rendered[False],
            print_pdf=rendered[True],
            filename_stem=filename_stem(config),
            page_count=len(pages) + 1,  # +1 for cover
            page_size=PAGE_SIZES[page_size],
        )
        export_logger.export_completed(result.page_count, time.monotonic() - start)
        return result
