# ABOUTME: Display helpers for matchup panels: multiplier labels, tiers, emoji and hex colors.
# ABOUTME: Presentation code consumes these instead of re-deriving labels from raw multipliers.

from enum import Enum

from dexcore.matchups.engine import color_for
from dexcore.utils.type_chart import ElementType

DOUBLE_WEAKNESS_THRESHOLD = 4.0
WEAKNESS_THRESHOLD = 2.0
RESISTANCE_THRESHOLD = 0.5

_MULTIPLIER_LABELS: dict[float, str] = {
    0.0: "x0",
    0.25: "x¼",
    0.5: "x½",
    1.0: "x1",
    2.0: "x2",
    4.0: "x4",
}

TYPE_EMOJI: dict[ElementType, str] = {
    ElementType.NORMAL: "⚪",
    ElementType.FIRE: "🔥",
    ElementType.WATER: "💧",
    ElementType.ELECTRIC: "⚡",
    ElementType.GRASS: "🌿",
    ElementType.ICE: "❄️",
    ElementType.FIGHTING: "👊",
    ElementType.POISON: "☠️",
    ElementType.GROUND: "⛰️",
    ElementType.FLYING: "🦅",
    ElementType.PSYCHIC: "🔮",
    ElementType.BUG: "🐛",
    ElementType.ROCK: "🪨",
    ElementType.GHOST: "👻",
    ElementType.DRAGON: "🐉",
    ElementType.DARK: "🌙",
    ElementType.STEEL: "⚙️",
    ElementType.FAIRY: "🧚",
}
UNKNOWN_TYPE_EMOJI = "❓"


class MatchupTier(str, Enum):
    """Named damage tier for a single multiplier."""

    DOUBLE_WEAKNESS = "double_weakness"
    WEAKNESS = "weakness"
    NEUTRAL = "neutral"
    RESISTANCE = "resistance"
    DOUBLE_RESISTANCE = "double_resistance"
    IMMUNITY = "immunity"


def format_multiplier(multiplier: float) -> str:
    """Format a multiplier as a short chip label.

    Examples:
        >>> format_multiplier(4.0)
        'x4'
        >>> format_multiplier(0.25)
        'x¼'
        >>> format_multiplier(1.5)
        'x1.5'
    """
    label = _MULTIPLIER_LABELS.get(multiplier)
    if label is not None:
        return label
    return f"x{multiplier:.1f}"


def matchup_tier(multiplier: float) -> MatchupTier:
    """Return the named tier of a multiplier (e.g., 4.0 -> DOUBLE_WEAKNESS)."""
    if multiplier == 0.0:
        return MatchupTier.IMMUNITY
    if multiplier >= DOUBLE_WEAKNESS_THRESHOLD:
        return MatchupTier.DOUBLE_WEAKNESS
    if multiplier >= WEAKNESS_THRESHOLD:
        return MatchupTier.WEAKNESS
    if multiplier < RESISTANCE_THRESHOLD:
        return MatchupTier.DOUBLE_RESISTANCE
    if multiplier < 1.0:
        return MatchupTier.RESISTANCE
    return MatchupTier.NEUTRAL


def type_emoji(element_type: ElementType | str) -> str:
    """Return the emoji for a type, or a question mark for unknown names."""
    if not isinstance(element_type, ElementType):
        try:
            element_type = ElementType(str(element_type).strip().lower())
        except ValueError:
            return UNKNOWN_TYPE_EMOJI
    return TYPE_EMOJI.get(element_type, UNKNOWN_TYPE_EMOJI)


def hex_color(element_type: ElementType | str) -> str:
    """Return the type color as "#RRGGBB" (alpha channel dropped)."""
    return f"#{color_for(element_type) & 0xFFFFFF:06X}"


def rgb_color(element_type: ElementType | str) -> tuple[int, int, int]:
    """Return the type color as an (r, g, b) tuple."""
    packed = color_for(element_type)
    return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF
