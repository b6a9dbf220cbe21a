"""
Story constants for the Storybook export service.

Per-page word-count targets for each reading level, plus the limits the
setup form enforces on a story configuration.
"""

from ..core.types import ReadingLevel, WordCountTarget

# Per-page body text length by reading level
WORD_COUNT_TARGETS: dict[ReadingLevel, WordCountTarget] = {
    ReadingLevel.TODDLER: WordCountTarget(min_words=60, max_words=80),
    ReadingLevel.EARLY: WordCountTarget(min_words=80, max_words=120),
    ReadingLevel.PRIMARY: WordCountTarget(min_words=120, max_words=150),
}

STORY_CONSTANTS = {
    "word_count_tolerance": 15,  # Export gate is +/- this many words around the target
    "min_pages": 6,
    "max_pages": 20,
    "default_pages": 10,
}
