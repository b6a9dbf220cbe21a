"""
Page layout for exported storybooks.

Turns a list of story pages into a DocumentLayout: one cover plus one page
per story page, with every element placed at a fraction of the page
rectangle. Two variants are produced from the same input:

- web: trim size, smaller type, no image placeholder
- print: trim size plus bleed, larger type, outlined image placeholder

Everything here is pure arithmetic and string handling; the PDF itself is
drawn by pdf_renderer.
"""

import logging
from typing import Callable, Iterable, Optional, Union

from reportlab.pdfbase.pdfmetrics import stringWidth

from ..config import LAYOUT_CONSTANTS, PAGE_SIZES
from .types import (
    DocumentLayout,
    Page,
    PageLayout,
    PageRectangle,
    PageSizePreset,
    RectElement,
    StoryConfig,
    TextElement,
)

logger = logging.getLogger(__name__)

MeasureWidth = Callable[[str, float], float]


def helvetica_width(text: str, font_size: float) -> float:
    """Rendered width of text in the export font, in points."""
    return stringWidth(text, LAYOUT_CONSTANTS["font_name"], font_size)


def _variant(values: tuple, include_bleed: bool):
    """Pick the (web, print) entry for the requested variant."""
    web, print_ = values
    return print_ if include_bleed else web


def resolve_page_rectangle(
    preset: Union[PageSizePreset, str, None], include_bleed: bool
) -> PageRectangle:
    """Page rectangle in points for a preset, with or without bleed."""
    size = PAGE_SIZES[PageSizePreset.parse(preset)]
    dimensions = size.with_bleed if include_bleed else size.content
    return PageRectangle.from_mm(dimensions)


def wrap_text(
    text: str,
    measure_width: MeasureWidth,
    font_size: float,
    max_width: float,
) -> list[str]:
    """
    Greedy word wrap.

    Words are never split. A word wider than max_width on its own is placed
    alone on a line.

    Args:
        text: Body text; any run of whitespace separates words
        measure_width: Callable returning the rendered width of a string at a size
        font_size: Size passed to measure_width
        max_width: Widest allowed line, in the same units as measure_width

    Returns:
        Lines in reading order, never ending with an empty line
    """
    lines: list[str] = []
    current_line = ""

    for word in text.split():
        candidate = f"{current_line} {word}" if current_line else word

        if measure_width(candidate, font_size) <= max_width:
            current_line = candidate
        elif current_line:
            lines.append(current_line)
            current_line = word
        else:
            # Overlong word with nothing before it
            lines.append(word)

    if current_line:
        lines.append(current_line)

    return lines


def cover_title(story: Optional[StoryConfig]) -> str:
    """Title derived from the children's names, or the generic fallback."""
    names = story.named_children if story else []
    if not names:
        return LAYOUT_CONSTANTS["fallback_title"]
    return f"{' & '.join(names)}'s Story"


def _place_text(
    text: str,
    role: str,
    rectangle: PageRectangle,
    include_bleed: bool,
    y: Optional[float] = None,
) -> TextElement:
    placement = LAYOUT_CONSTANTS[role]
    return TextElement(
        text=text,
        x=rectangle.width * placement["x"],
        y=rectangle.height * placement["y"] if y is None else y,
        font_size=_variant(placement["size"], include_bleed),
        color=placement["color"],
        role=role,
    )


def render_cover(
    story: Optional[StoryConfig],
    rectangle: PageRectangle,
    include_bleed: bool,
) -> PageLayout:
    """Cover page: title, optional subtitle, optional dedication."""
    cover = PageLayout(width=rectangle.width, height=rectangle.height)

    cover.texts.append(_place_text(cover_title(story), "title", rectangle, include_bleed))

    if story and story.story_type and story.story_type.strip():
        cover.texts.append(
            _place_text(f"A {story.story_type.strip()}", "subtitle", rectangle, include_bleed)
        )

    if story and story.dedication and story.dedication.strip():
        cover.texts.append(
            _place_text(story.dedication.strip(), "dedication", rectangle, include_bleed)
        )

    return cover


def render_page(
    page: Page,
    rectangle: PageRectangle,
    include_bleed: bool,
    measure_width: MeasureWidth = helvetica_width,
) -> PageLayout:
    """One story page: page number, wrapped body text, and (print only) image area."""
    layout = PageLayout(
        width=rectangle.width,
        height=rectangle.height,
        page_number=page.page_number,
    )

    layout.texts.append(
        _place_text(str(page.page_number), "page_number", rectangle, include_bleed)
    )

    body = LAYOUT_CONSTANTS["body"]
    font_size = _variant(body["size"], include_bleed)
    line_advance = _variant(body["line_advance"], include_bleed)

    y = rectangle.height * body["y"]
    lines = wrap_text(page.text or "", measure_width, font_size, rectangle.width * body["width"])
    for line in lines:
        layout.texts.append(_place_text(line, "body", rectangle, include_bleed, y=y))
        y -= line_advance

    floor = rectangle.height * LAYOUT_CONSTANTS["page_number"]["y"]
    last_baseline = y + line_advance
    if lines and last_baseline < floor:
        logger.warning(
            f"Page {page.page_number} body text overflows: {len(lines)} lines, "
            f"last baseline {last_baseline:.1f}pt is below the page number at {floor:.1f}pt"
        )

    if include_bleed:
        area = LAYOUT_CONSTANTS["image_placeholder"]
        layout.rects.append(
            RectElement(
                x=rectangle.width * area["x"],
                y=rectangle.height * area["y"],
                width=rectangle.width * area["width"],
                height=rectangle.height * area["height"],
                border_color=area["border_color"],
                border_width=area["border_width"],
            )
        )
        label = LAYOUT_CONSTANTS["image_placeholder_label"]
        layout.texts.append(
            _place_text(label["text"], "image_placeholder_label", rectangle, include_bleed)
        )

    return layout


def build_document(
    pages: Iterable[Page],
    preset: Union[PageSizePreset, str, None],
    include_bleed: bool,
    story: Optional[StoryConfig] = None,
    measure_width: MeasureWidth = helvetica_width,
) -> DocumentLayout:
    """
    Lay out a whole book.

    Pages are rendered in ascending page_number order regardless of the
    order they arrive in. An empty page list yields a cover-only document.
    """
    resolved = PageSizePreset.parse(preset)
    rectangle = resolve_page_rectangle(resolved, include_bleed)

    document = DocumentLayout(preset=resolved, include_bleed=include_bleed)
    document.pages.append(render_cover(story, rectangle, include_bleed))

    for page in sorted(pages, key=lambda p: p.page_number):
        document.pages.append(render_page(page, rectangle, include_bleed, measure_width))

    return document
