"""Tests for storybook/core/validation.py."""

import pytest

from storybook.config import WORD_COUNT_TARGETS
from storybook.core.types import (
    Page,
    ReadingLevel,
    StoryConfig,
    ValidationError,
    WordCountStatus,
    WordCountTarget,
)
from storybook.core.validation import (
    count_words,
    format_validation_errors,
    get_target,
    get_word_count_status,
    is_page_export_ready,
    validate_page_content,
    validate_pages_for_export,
    validate_story_config,
)
from tests.unit.conftest import words


# =============================================================================
# count_words
# =============================================================================


class TestCountWords:
    """Tests for the single word-counting function."""

    def test_empty_string_is_zero(self):
        assert count_words("") == 0

    def test_whitespace_only_is_zero(self):
        assert count_words("   ") == 0
        assert count_words("\n\t  \n") == 0

    def test_none_is_zero(self):
        assert count_words(None) == 0

    def test_multiple_spaces_collapse(self):
        assert count_words("one two  three") == 3

    def test_leading_and_trailing_whitespace_ignored(self):
        assert count_words("  once upon a time  ") == 4

    def test_newlines_and_tabs_separate_words(self):
        assert count_words("the\tdog\nran\r\naway") == 4

    def test_punctuation_stays_attached(self):
        """Punctuation is part of the word it touches."""
        assert count_words("Hello, world! It's me.") == 4


# =============================================================================
# Word-count targets
# =============================================================================


class TestWordCountTargets:
    """The reading-level table must match the published values exactly."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            (ReadingLevel.TODDLER, (60, 80)),
            (ReadingLevel.EARLY, (80, 120)),
            (ReadingLevel.PRIMARY, (120, 150)),
        ],
    )
    def test_table_values(self, level, expected):
        target = WORD_COUNT_TARGETS[level]
        assert (target.min_words, target.max_words) == expected

    def test_every_level_has_a_target(self):
        assert set(WORD_COUNT_TARGETS) == set(ReadingLevel)

    def test_unknown_level_string_uses_default(self):
        assert get_target("Teen 13-18") == WORD_COUNT_TARGETS[ReadingLevel.EARLY]

    def test_wire_value_string_resolves(self):
        assert get_target("Primary 6–8") == WORD_COUNT_TARGETS[ReadingLevel.PRIMARY]


# =============================================================================
# get_word_count_status (display classification)
# =============================================================================


class TestGetWordCountStatus:
    """Display classification uses the strict target with no tolerance."""

    def test_below_min_is_low(self):
        assert get_word_count_status(79, ReadingLevel.EARLY) == WordCountStatus.LOW

    def test_min_is_good(self):
        assert get_word_count_status(80, ReadingLevel.EARLY) == WordCountStatus.GOOD

    def test_max_is_good(self):
        assert get_word_count_status(120, ReadingLevel.EARLY) == WordCountStatus.GOOD

    def test_above_max_is_high(self):
        assert get_word_count_status(121, ReadingLevel.EARLY) == WordCountStatus.HIGH

    def test_zero_is_low_at_every_level(self):
        for level in ReadingLevel:
            assert get_word_count_status(0, level) == WordCountStatus.LOW

    def test_custom_targets_are_used(self):
        targets = {level: WordCountTarget(1, 2) for level in ReadingLevel}
        assert get_word_count_status(3, ReadingLevel.EARLY, targets) == WordCountStatus.HIGH


# =============================================================================
# validate_page_content (export gate)
# =============================================================================


class TestValidatePageContent:
    """Export validation widens the target by the tolerance on both sides."""

    def test_within_tolerance_below_min_is_valid(self):
        """65 words at Early 4-5 is accepted although it displays as low."""
        result = validate_page_content(words(65), ReadingLevel.EARLY, page_number=1)

        assert result.is_valid is True
        assert result.word_count == 65
        assert result.message is None
        assert get_word_count_status(65, ReadingLevel.EARLY) == WordCountStatus.LOW

    def test_just_outside_lower_band_is_invalid(self):
        result = validate_page_content(words(64), ReadingLevel.EARLY, page_number=1)

        assert result.is_valid is False
        assert result.word_count == 64

    def test_upper_band_edge(self):
        assert validate_page_content(words(135), ReadingLevel.EARLY, 1).is_valid is True
        assert validate_page_content(words(136), ReadingLevel.EARLY, 1).is_valid is False

    def test_too_few_message_names_page_and_target(self):
        result = validate_page_content(words(10), ReadingLevel.EARLY, page_number=4)

        assert result.message == "Page 4 has too few words (10). Target: 80-120 words."

    def test_too_many_message_names_page_and_target(self):
        result = validate_page_content(words(200), ReadingLevel.PRIMARY, page_number=2)

        assert result.message == "Page 2 has too many words (200). Target: 120-150 words."

    def test_empty_text_is_invalid_at_every_level(self):
        for level in ReadingLevel:
            result = validate_page_content("", level, page_number=1)
            assert result.is_valid is False
            assert result.word_count == 0

    def test_same_tolerance_for_every_level(self):
        """Toddler band is 45-95."""
        assert validate_page_content(words(45), ReadingLevel.TODDLER, 1).is_valid is True
        assert validate_page_content(words(44), ReadingLevel.TODDLER, 1).is_valid is False
        assert validate_page_content(words(95), ReadingLevel.TODDLER, 1).is_valid is True
        assert validate_page_content(words(96), ReadingLevel.TODDLER, 1).is_valid is False

    def test_custom_tolerance(self):
        result = validate_page_content(words(79), ReadingLevel.EARLY, 1, tolerance=0)
        assert result.is_valid is False


# =============================================================================
# validate_pages_for_export (document readiness)
# =============================================================================


class TestValidatePagesForExport:
    """Tests for whole-book export validation."""

    def test_ready_book_has_no_errors(self, ready_pages):
        assert validate_pages_for_export(ready_pages, ReadingLevel.EARLY) == []

    def test_missing_image_yields_one_error(self):
        pages = [
            Page(1, words(100), image_url="a.png"),
            Page(2, words(100)),
            Page(3, words(100), image_url="c.png"),
        ]

        errors = validate_pages_for_export(pages, ReadingLevel.EARLY)

        assert errors == [
            ValidationError(
                field="page2Image",
                message="Page 2 needs an image or must be locked without one",
            )
        ]

    def test_locking_page_clears_image_error(self):
        pages = [
            Page(1, words(100), image_url="a.png"),
            Page(2, words(100), image_locked=True),
            Page(3, words(100), image_url="c.png"),
        ]

        assert validate_pages_for_export(pages, ReadingLevel.EARLY) == []

    def test_page_can_contribute_text_and_image_errors(self):
        errors = validate_pages_for_export([Page(1, "")], ReadingLevel.EARLY)

        assert [e.field for e in errors] == ["page1Text", "page1Image"]

    def test_errors_follow_page_number_order(self):
        pages = [Page(3, ""), Page(1, ""), Page(2, words(100), image_locked=True)]

        errors = validate_pages_for_export(pages, ReadingLevel.EARLY)

        assert [e.field for e in errors] == [
            "page1Text",
            "page1Image",
            "page3Text",
            "page3Image",
        ]

    def test_empty_book_has_no_errors(self):
        assert validate_pages_for_export([], ReadingLevel.EARLY) == []

    def test_blank_image_url_counts_as_missing(self):
        errors = validate_pages_for_export([Page(1, words(100), image_url="")], ReadingLevel.EARLY)

        assert [e.field for e in errors] == ["page1Image"]


class TestIsPageExportReady:
    """Per-page readiness combines the text and image rules."""

    def test_drafted_with_image_is_ready(self):
        page = Page(1, words(100), image_url="a.png")
        assert is_page_export_ready(page, ReadingLevel.EARLY) is True

    def test_drafted_and_locked_is_ready(self):
        page = Page(1, words(100), image_locked=True)
        assert is_page_export_ready(page, ReadingLevel.EARLY) is True

    def test_drafted_without_image_is_not_ready(self):
        page = Page(1, words(100))
        assert is_page_export_ready(page, ReadingLevel.EARLY) is False

    def test_needs_text_is_not_ready(self):
        page = Page(1, "", image_url="a.png")
        assert is_page_export_ready(page, ReadingLevel.EARLY) is False

    def test_readiness_is_recomputed_after_edits(self):
        page = Page(1, words(10), image_url="a.png")
        assert is_page_export_ready(page, ReadingLevel.EARLY) is False

        page.text = words(90)
        assert is_page_export_ready(page, ReadingLevel.EARLY) is True


# =============================================================================
# validate_story_config
# =============================================================================


class TestValidateStoryConfig:
    """Tests for setup form validation."""

    def test_complete_config_is_valid(self, story_config):
        assert validate_story_config(story_config) == []

    def test_empty_config_reports_every_field(self):
        errors = validate_story_config(StoryConfig())

        assert [e.field for e in errors] == [
            "storyType",
            "setting",
            "characters",
            "contentSafety",
            "theme",
        ]

    def test_blank_story_type_is_rejected(self, story_config):
        story_config.story_type = "   "

        errors = validate_story_config(story_config)

        assert [e.field for e in errors] == ["storyType"]

    @pytest.mark.parametrize("length", [5, 21])
    def test_length_outside_range_is_rejected(self, story_config, length):
        story_config.length_pages = length

        errors = validate_story_config(story_config)

        assert errors == [
            ValidationError(
                field="lengthPages", message="Story length must be between 6 and 20 pages"
            )
        ]

    @pytest.mark.parametrize("length", [6, 20])
    def test_length_bounds_are_inclusive(self, story_config, length):
        story_config.length_pages = length
        assert validate_story_config(story_config) == []

    def test_custom_theme_satisfies_theme_rule(self, story_config):
        story_config.theme_preset = None
        story_config.theme_custom = "Rainbow sprinkles"

        assert validate_story_config(story_config) == []


class TestFormatValidationErrors:
    def test_returns_messages_in_order(self):
        errors = [ValidationError("a", "first"), ValidationError("b", "second")]
        assert format_validation_errors(errors) == ["first", "second"]
