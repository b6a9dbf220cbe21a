"""
Preset catalogues offered by the setup form.

Themes carry the palette used for illustrations; story types, characters
and settings are suggestions the parent can pick from or override.
"""

from typing import Optional, TypeVar

from .types import NamedPreset, StoryTypePreset, ThemePreset

THEME_PRESETS: list[ThemePreset] = [
    ThemePreset(
        name="Calm pastels",
        description="Soft, soothing colors perfect for bedtime stories",
        palette=["#FFB5A7", "#F8CD07", "#A8E6CF", "#DDA0DD", "#87CEEB"],
        mood=["peaceful", "gentle", "dreamy", "cozy"],
    ),
    ThemePreset(
        name="Adventure bright",
        description="Bold, energetic colors for exciting adventures",
        palette=["#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FECA57"],
        mood=["exciting", "bold", "energetic", "fun"],
    ),
    ThemePreset(
        name="Magical wonder",
        description="Mystical purples and golds for fantasy tales",
        palette=["#6C5CE7", "#A29BFE", "#FD79A8", "#FDCB6E", "#E17055"],
        mood=["magical", "mysterious", "enchanting", "whimsical"],
    ),
    ThemePreset(
        name="Nature earth",
        description="Warm earth tones inspired by nature",
        palette=["#6AB04C", "#F0932B", "#EB4D4B", "#E55039", "#F8B500"],
        mood=["natural", "grounded", "warm", "organic"],
    ),
    ThemePreset(
        name="Ocean breeze",
        description="Cool blues and teals like the seaside",
        palette=["#0FB9B1", "#3742FA", "#70A1FF", "#7BED9F", "#FF9F43"],
        mood=["refreshing", "calm", "flowing", "serene"],
    ),
]

STORY_TYPE_PRESETS: list[StoryTypePreset] = [
    StoryTypePreset("Adventure", "Exciting journeys and discoveries", ["exploration", "courage", "friendship"]),
    StoryTypePreset("Bedtime", "Gentle, calming stories for sleep time", ["peaceful", "dreamy", "soothing"]),
    StoryTypePreset("Learning", "Educational stories that teach while entertaining", ["educational", "discovery", "growth"]),
    StoryTypePreset("Friendship", "Stories about making friends and being kind", ["kindness", "sharing", "cooperation"]),
    StoryTypePreset("Fantasy", "Magical worlds with dragons, fairies, and wonder", ["magical", "imagination", "wonder"]),
    StoryTypePreset("Problem solving", "Stories where characters overcome challenges", ["resilience", "creativity", "perseverance"]),
]

CHARACTER_PRESETS: list[NamedPreset] = [
    NamedPreset("Friendly dog", "A loyal and playful companion"),
    NamedPreset("Wise owl", "A helpful guide with knowledge to share"),
    NamedPreset("Brave mouse", "Small but mighty and full of courage"),
    NamedPreset("Gentle dragon", "A kind dragon who loves to help"),
    NamedPreset("Curious cat", "Always exploring and discovering new things"),
    NamedPreset("Happy elephant", "A joyful friend who never forgets"),
    NamedPreset("Clever rabbit", "Quick-thinking and resourceful"),
    NamedPreset("Magical unicorn", "A mystical friend with special powers"),
    NamedPreset("Singing bird", "Brings music and joy wherever it goes"),
    NamedPreset("Dancing bear", "Loves to move and groove"),
]

SETTING_PRESETS: list[NamedPreset] = [
    NamedPreset("Enchanted forest", "A magical woodland full of wonder"),
    NamedPreset("Cozy bedroom", "A safe, warm space perfect for dreams"),
    NamedPreset("Sunny meadow", "Open fields with flowers and butterflies"),
    NamedPreset("Village playground", "A fun place where children love to play"),
    NamedPreset("Garden adventure", "A backyard full of discoveries"),
    NamedPreset("Castle tower", "A fairy tale setting with royal adventures"),
    NamedPreset("Beach treasure hunt", "Sandy shores with hidden surprises"),
    NamedPreset("Library corner", "A quiet nook surrounded by books"),
    NamedPreset("Treehouse hideout", "A secret place high in the branches"),
    NamedPreset("Magic shop", "A mysterious store full of wonders"),
]

T = TypeVar("T", ThemePreset, StoryTypePreset, NamedPreset)


def _find(presets: list[T], name: str) -> Optional[T]:
    for preset in presets:
        if preset.name == name:
            return preset
    return None


def get_theme_by_name(name: str) -> Optional[ThemePreset]:
    return _find(THEME_PRESETS, name)


def get_story_type_by_name(name: str) -> Optional[StoryTypePreset]:
    return _find(STORY_TYPE_PRESETS, name)


def get_character_by_name(name: str) -> Optional[NamedPreset]:
    return _find(CHARACTER_PRESETS, name)


def get_setting_by_name(name: str) -> Optional[NamedPreset]:
    return _find(SETTING_PRESETS, name)
