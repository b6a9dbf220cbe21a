"""
Centralized domain types for the Storybook export service.

All enums and dataclasses that are used across multiple modules are defined
here to make data flow explicit and avoid circular imports.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

logger = logging.getLogger(__name__)

MM_TO_POINTS = 2.834645669  # 1mm = 2.834645669 PDF points


# =============================================================================
# Enumerations
# =============================================================================


class _ParsableEnum(str, Enum):
    """String enum that resolves untyped input with a documented fallback."""

    @classmethod
    def default(cls) -> "_ParsableEnum":
        raise NotImplementedError

    @classmethod
    def parse(cls, value: Union[str, "_ParsableEnum", None]):
        """Resolve a wire value or member name, falling back to the default."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            candidate = value.strip()
            for member in cls:
                if member.value == candidate or member.name.lower() == candidate.lower():
                    return member
        logger.warning(
            f"Unrecognized {cls.__name__} {value!r}, using {cls.default().value!r}"
        )
        return cls.default()


class PageSizePreset(_ParsableEnum):
    """Physical book formats offered for export and print."""

    A5_PORTRAIT = "A5 portrait"
    A4_PORTRAIT = "A4 portrait"
    SQUARE_210 = "210×210 mm square"

    @classmethod
    def default(cls) -> "PageSizePreset":
        return cls.A5_PORTRAIT


class ReadingLevel(_ParsableEnum):
    """Audience tiers, each with its own per-page word-count target."""

    TODDLER = "Toddler 2–3"
    EARLY = "Early 4–5"
    PRIMARY = "Primary 6–8"

    @classmethod
    def default(cls) -> "ReadingLevel":
        return cls.EARLY


class WordCountStatus(str, Enum):
    """Display classification of a page's word count (no tolerance)."""

    LOW = "low"
    GOOD = "good"
    HIGH = "high"


class TextState(str, Enum):
    NEEDS_TEXT = "needs-text"
    DRAFTED = "drafted"


class ImageState(str, Enum):
    NO_IMAGE = "no-image"
    IMAGE_READY = "image-ready"
    LOCKED_NO_IMAGE = "locked-no-image"


# =============================================================================
# Static table entries
# =============================================================================


@dataclass(frozen=True)
class WordCountTarget:
    """Closed word-count interval for one page at a reading level."""

    min_words: int
    max_words: int

    def __str__(self) -> str:
        return f"{self.min_words}-{self.max_words}"


@dataclass(frozen=True)
class PageDimensions:
    """A physical rectangle in millimetres."""

    width_mm: float
    height_mm: float


@dataclass(frozen=True)
class PageSize:
    """Trim size and bleed size for one preset."""

    content: PageDimensions
    with_bleed: PageDimensions


@dataclass(frozen=True)
class PageRectangle:
    """A page rectangle in PDF points."""

    width: float
    height: float

    @classmethod
    def from_mm(cls, dimensions: PageDimensions) -> "PageRectangle":
        return cls(
            width=dimensions.width_mm * MM_TO_POINTS,
            height=dimensions.height_mm * MM_TO_POINTS,
        )


# =============================================================================
# Preset Catalogue Types
# =============================================================================


@dataclass(frozen=True)
class ThemePreset:
    """A named colour palette with mood words."""

    name: str
    description: str
    palette: list[str]
    mood: list[str]


@dataclass(frozen=True)
class StoryTypePreset:
    name: str
    description: str
    tags: list[str]


@dataclass(frozen=True)
class NamedPreset:
    """A character or setting suggestion."""

    name: str
    description: str


# =============================================================================
# Story Types
# =============================================================================


@dataclass
class Page:
    """One logical page of the finished book.

    Created empty by the outline step, filled by the writing and image steps,
    and edited freely by the parent until export.
    """

    page_number: int
    text: str = ""
    image_url: Optional[str] = None
    image_locked: bool = False

    @property
    def has_image(self) -> bool:
        return bool(self.image_url)

    @property
    def text_state(self) -> TextState:
        return TextState.DRAFTED if self.text.strip() else TextState.NEEDS_TEXT

    @property
    def image_state(self) -> ImageState:
        if self.has_image:
            return ImageState.IMAGE_READY
        if self.image_locked:
            return ImageState.LOCKED_NO_IMAGE
        return ImageState.NO_IMAGE


@dataclass
class StoryConfig:
    """Parent preferences that the export flow depends on."""

    children: list[str] = field(default_factory=list)
    story_type: str = ""
    setting: str = ""
    characters: list[str] = field(default_factory=list)
    reading_level: ReadingLevel = ReadingLevel.EARLY
    page_size: PageSizePreset = PageSizePreset.A5_PORTRAIT
    length_pages: int = 10
    content_safety: bool = False
    theme_preset: Optional[str] = None
    theme_custom: Optional[str] = None
    dedication: Optional[str] = None

    @property
    def named_children(self) -> list[str]:
        """Child names with blanks removed."""
        return [name.strip() for name in self.children if name and name.strip()]


# =============================================================================
# Validation Types
# =============================================================================


@dataclass
class ValidationError:
    """A single failed rule, tagged with the form field it belongs to."""

    field: str
    message: str


@dataclass
class PageValidation:
    """Result of checking one page's text against its reading level."""

    is_valid: bool
    word_count: int
    message: Optional[str] = None


# =============================================================================
# Layout Types
# =============================================================================

Color = tuple[float, float, float]


@dataclass(frozen=True)
class TextElement:
    """A single line of text. (x, y) is the baseline start, origin bottom-left."""

    text: str
    x: float
    y: float
    font_size: float
    color: Color
    role: str = "body"  # key into LAYOUT_CONSTANTS: title, body, page_number, ...


@dataclass(frozen=True)
class RectElement:
    """An outlined (unfilled) rectangle. (x, y) is the bottom-left corner."""

    x: float
    y: float
    width: float
    height: float
    border_color: Color
    border_width: float


@dataclass
class PageLayout:
    """Placement instructions for one physical page."""

    width: float
    height: float
    page_number: Optional[int] = None  # None for the cover
    texts: list[TextElement] = field(default_factory=list)
    rects: list[RectElement] = field(default_factory=list)

    @property
    def is_cover(self) -> bool:
        return self.page_number is None

    @property
    def body_lines(self) -> list[str]:
        """Wrapped story text in reading order."""
        return [t.text for t in self.texts if t.role == "body"]

    def find_text(self, role: str) -> Optional[TextElement]:
        """First text element with the given role, if any."""
        for element in self.texts:
            if element.role == role:
                return element
        return None


@dataclass
class DocumentLayout:
    """A paginated book: one cover followed by one page per story page."""

    preset: PageSizePreset
    include_bleed: bool
    pages: list[PageLayout] = field(default_factory=list)

    @property
    def cover(self) -> PageLayout:
        return self.pages[0]

    @property
    def story_pages(self) -> list[PageLayout]:
        return self.pages[1:]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def variant(self) -> str:
        return "print" if self.include_bleed else "web"
