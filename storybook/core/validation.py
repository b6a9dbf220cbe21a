"""
Validation for story configuration and page content.

Pure functions that classify page text against reading-level targets and
decide whether a book is ready to export. The word-count table and tolerance
are parameters (defaulting to the static configuration) so callers and tests
can supply their own.
"""

from typing import Iterable, Optional

from ..config import STORY_CONSTANTS, WORD_COUNT_TARGETS
from .types import (
    ImageState,
    Page,
    PageValidation,
    ReadingLevel,
    StoryConfig,
    ValidationError,
    WordCountStatus,
    WordCountTarget,
)

DEFAULT_TOLERANCE = STORY_CONSTANTS["word_count_tolerance"]


def count_words(text: Optional[str]) -> int:
    """Count whitespace-separated words. Blank or missing text is 0 words."""
    if not text or not text.strip():
        return 0
    return len(text.split())


def get_target(
    reading_level: ReadingLevel,
    targets: dict[ReadingLevel, WordCountTarget] = WORD_COUNT_TARGETS,
) -> WordCountTarget:
    """Word-count interval for a reading level (unknown levels use the default)."""
    level = ReadingLevel.parse(reading_level)
    return targets.get(level, targets[ReadingLevel.default()])


def get_word_count_status(
    word_count: int,
    reading_level: ReadingLevel,
    targets: dict[ReadingLevel, WordCountTarget] = WORD_COUNT_TARGETS,
) -> WordCountStatus:
    """Classify a word count against the strict target (for display)."""
    target = get_target(reading_level, targets)

    if word_count < target.min_words:
        return WordCountStatus.LOW
    if word_count > target.max_words:
        return WordCountStatus.HIGH
    return WordCountStatus.GOOD


def validate_page_content(
    text: str,
    reading_level: ReadingLevel,
    page_number: int,
    targets: dict[ReadingLevel, WordCountTarget] = WORD_COUNT_TARGETS,
    tolerance: int = DEFAULT_TOLERANCE,
) -> PageValidation:
    """
    Check one page's text against the export band for its reading level.

    The export band is the target widened by ``tolerance`` on both sides, so
    a page may display as low or high and still be accepted.
    """
    word_count = count_words(text)
    target = get_target(reading_level, targets)

    if word_count < target.min_words - tolerance:
        return PageValidation(
            is_valid=False,
            word_count=word_count,
            message=f"Page {page_number} has too few words ({word_count}). Target: {target} words.",
        )

    if word_count > target.max_words + tolerance:
        return PageValidation(
            is_valid=False,
            word_count=word_count,
            message=f"Page {page_number} has too many words ({word_count}). Target: {target} words.",
        )

    return PageValidation(is_valid=True, word_count=word_count)


def is_page_export_ready(
    page: Page,
    reading_level: ReadingLevel,
    targets: dict[ReadingLevel, WordCountTarget] = WORD_COUNT_TARGETS,
    tolerance: int = DEFAULT_TOLERANCE,
) -> bool:
    """A page is ready when its text is in band and its image is resolved."""
    text_ok = validate_page_content(
        page.text, reading_level, page.page_number, targets, tolerance
    ).is_valid
    return text_ok and page.image_state != ImageState.NO_IMAGE


def validate_pages_for_export(
    pages: Iterable[Page],
    reading_level: ReadingLevel,
    targets: dict[ReadingLevel, WordCountTarget] = WORD_COUNT_TARGETS,
    tolerance: int = DEFAULT_TOLERANCE,
) -> list[ValidationError]:
    """
    Collect every rule violation across the book.

    Each page can contribute a text error and an image error. Export is
    permitted only when the returned list is empty.
    """
    errors: list[ValidationError] = []

    for page in sorted(pages, key=lambda p: p.page_number):
        number = page.page_number

        result = validate_page_content(page.text, reading_level, number, targets, tolerance)
        if not result.is_valid:
            errors.append(ValidationError(field=f"page{number}Text", message=result.message))

        # Image must be present unless explicitly locked without one
        if page.image_state == ImageState.NO_IMAGE:
            errors.append(
                ValidationError(
                    field=f"page{number}Image",
                    message=f"Page {number} needs an image or must be locked without one",
                )
            )

    return errors


def validate_story_config(config: StoryConfig) -> list[ValidationError]:
    """Check the setup form before any generation is requested."""
    errors: list[ValidationError] = []

    if not config.story_type or not config.story_type.strip():
        errors.append(ValidationError(field="storyType", message="Story type is required"))

    if not config.setting or not config.setting.strip():
        errors.append(ValidationError(field="setting", message="Setting is required"))

    if not config.characters:
        errors.append(
            ValidationError(field="characters", message="At least one character is required")
        )

    if not config.content_safety:
        errors.append(
            ValidationError(
                field="contentSafety", message="Content safety agreement is required"
            )
        )

    min_pages = STORY_CONSTANTS["min_pages"]
    max_pages = STORY_CONSTANTS["max_pages"]
    if config.length_pages < min_pages or config.length_pages > max_pages:
        errors.append(
            ValidationError(
                field="lengthPages",
                message=f"Story length must be between {min_pages} and {max_pages} pages",
            )
        )

    if not config.theme_preset and not (config.theme_custom or "").strip():
        errors.append(
            ValidationError(
                field="theme", message="Please select a theme or enter a custom theme"
            )
        )

    return errors


def format_validation_errors(errors: Iterable[ValidationError]) -> list[str]:
    """Plain messages for display."""
    return [error.message for error in errors]
