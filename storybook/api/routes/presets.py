"""Preset catalogue endpoints."""

from fastapi import APIRouter, HTTPException, status

from ...config import PAGE_SIZES, STORY_CONSTANTS, WORD_COUNT_TARGETS
from ...core.presets import (
    CHARACTER_PRESETS,
    SETTING_PRESETS,
    STORY_TYPE_PRESETS,
    THEME_PRESETS,
    get_character_by_name,
    get_setting_by_name,
    get_story_type_by_name,
    get_theme_by_name,
)
from ...core.types import NamedPreset, StoryTypePreset, ThemePreset
from ..models.responses import (
    PageDimensionsResponse,
    PageSizePresetResponse,
    PresetsResponse,
    ReadingLevelResponse,
)

router = APIRouter()


@router.get(
    "/",
    response_model=PresetsResponse,
    summary="List setup presets",
    description="Themes, story types, characters, settings, reading levels and page sizes.",
)
async def list_presets():
    """Everything the setup form can offer."""
    return PresetsResponse(
        themes=THEME_PRESETS,
        story_types=STORY_TYPE_PRESETS,
        characters=CHARACTER_PRESETS,
        settings=SETTING_PRESETS,
        reading_levels=[
            ReadingLevelResponse(
                name=level.value,
                min_words=target.min_words,
                max_words=target.max_words,
                tolerance=STORY_CONSTANTS["word_count_tolerance"],
            )
            for level, target in WORD_COUNT_TARGETS.items()
        ],
        page_sizes=[
            PageSizePresetResponse(
                name=preset.value,
                content=PageDimensionsResponse(
                    width_mm=size.content.width_mm, height_mm=size.content.height_mm
                ),
                with_bleed=PageDimensionsResponse(
                    width_mm=size.with_bleed.width_mm, height_mm=size.with_bleed.height_mm
                ),
            )
            for preset, size in PAGE_SIZES.items()
        ],
    )


def _lookup(kind: str, preset):
    if preset is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown {kind} preset",
        )
    return preset


@router.get("/themes/{name}", response_model=ThemePreset, summary="Get a theme preset")
async def get_theme(name: str):
    """Theme description, palette and mood words."""
    return _lookup("theme", get_theme_by_name(name))


@router.get("/story-types/{name}", response_model=StoryTypePreset, summary="Get a story type preset")
async def get_story_type(name: str):
    return _lookup("story type", get_story_type_by_name(name))


@router.get("/characters/{name}", response_model=NamedPreset, summary="Get a character preset")
async def get_character(name: str):
    return _lookup("character", get_character_by_name(name))


@router.get("/settings/{name}", response_model=NamedPreset, summary="Get a setting preset")
async def get_setting(name: str):
    return _lookup("setting", get_setting_by_name(name))
