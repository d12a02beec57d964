# ABOUTME: Element types and the static defensive type chart (Gen 6+, 18 types including Fairy).
# ABOUTME: Also holds the type color table and parsing of raw upstream type names.

from collections.abc import Iterable, Mapping
from enum import Enum
from types import MappingProxyType

# Effectiveness thresholds
SUPER_EFFECTIVE_THRESHOLD = 2.0
NEUTRAL_VALUE = 1.0
IMMUNITY_VALUE = 0.0


class ElementType(str, Enum):
    """The closed set of 18 element types, in canonical order."""

    NORMAL = "normal"
    FIRE = "fire"
    WATER = "water"
    ELECTRIC = "electric"
    GRASS = "grass"
    ICE = "ice"
    FIGHTING = "fighting"
    POISON = "poison"
    GROUND = "ground"
    FLYING = "flying"
    PSYCHIC = "psychic"
    BUG = "bug"
    ROCK = "rock"
    GHOST = "ghost"
    DRAGON = "dragon"
    DARK = "dark"
    STEEL = "steel"
    FAIRY = "fairy"

    @property
    def display_name(self) -> str:
        """Title-case name for display (e.g., "Fire")."""
        return self.value.capitalize()


TYPES: tuple[ElementType, ...] = tuple(ElementType)

# Position of each type in the canonical order, used as sort tie-break
TYPE_ORDER: Mapping[ElementType, int] = MappingProxyType({t: i for i, t in enumerate(TYPES)})

_T = ElementType

# Defensive chart: TYPE_CHART[defending_type][attacking_type].
# Only non-neutral multipliers are listed; a missing entry means 1.0.
TYPE_CHART: Mapping[ElementType, Mapping[ElementType, float]] = MappingProxyType(
    {
        _T.NORMAL: MappingProxyType(
            {
                _T.FIGHTING: 2.0,
                _T.GHOST: 0.0,
            }
        ),
        _T.FIRE: MappingProxyType(
            {
                _T.WATER: 2.0,
                _T.GROUND: 2.0,
                _T.ROCK: 2.0,
                _T.FIRE: 0.5,
                _T.GRASS: 0.5,
                _T.ICE: 0.5,
                _T.BUG: 0.5,
                _T.STEEL: 0.5,
                _T.FAIRY: 0.5,
            }
        ),
        _T.WATER: MappingProxyType(
            {
                _T.ELECTRIC: 2.0,
                _T.GRASS: 2.0,
                _T.FIRE: 0.5,
                _T.WATER: 0.5,
                _T.ICE: 0.5,
                _T.STEEL: 0.5,
            }
        ),
        _T.ELECTRIC: MappingProxyType(
            {
                _T.GROUND: 2.0,
                _T.ELECTRIC: 0.5,
                _T.FLYING: 0.5,
                _T.STEEL: 0.5,
            }
        ),
        _T.GRASS: MappingProxyType(
            {
                _T.FIRE: 2.0,
                _T.ICE: 2.0,
                _T.POISON: 2.0,
                _T.FLYING: 2.0,
                _T.BUG: 2.0,
                _T.WATER: 0.5,
                _T.ELECTRIC: 0.5,
                _T.GRASS: 0.5,
                _T.GROUND: 0.5,
            }
        ),
        _T.ICE: MappingProxyType(
            {
                _T.FIRE: 2.0,
                _T.FIGHTING: 2.0,
                _T.ROCK: 2.0,
                _T.STEEL: 2.0,
                _T.ICE: 0.5,
            }
        ),
        _T.FIGHTING: MappingProxyType(
            {
                _T.FLYING: 2.0,
                _T.PSYCHIC: 2.0,
                _T.FAIRY: 2.0,
                _T.BUG: 0.5,
                _T.ROCK: 0.5,
                _T.DARK: 0.5,
            }
        ),
        _T.POISON: MappingProxyType(
            {
                _T.GROUND: 2.0,
                _T.PSYCHIC: 2.0,
                _T.FIGHTING: 0.5,
                _T.POISON: 0.5,
                _T.BUG: 0.5,
                _T.GRASS: 0.5,
                _T.FAIRY: 0.5,
            }
        ),
        _T.GROUND: MappingProxyType(
            {
                _T.WATER: 2.0,
                _T.GRASS: 2.0,
                _T.ICE: 2.0,
                _T.POISON: 0.5,
                _T.ROCK: 0.5,
                _T.ELECTRIC: 0.0,
            }
        ),
        _T.FLYING: MappingProxyType(
            {
                _T.ELECTRIC: 2.0,
                _T.ICE: 2.0,
                _T.ROCK: 2.0,
                _T.FIGHTING: 0.5,
                _T.BUG: 0.5,
                _T.GRASS: 0.5,
                _T.GROUND: 0.0,
            }
        ),
        _T.PSYCHIC: MappingProxyType(
            {
                _T.BUG: 2.0,
                _T.GHOST: 2.0,
                _T.DARK: 2.0,
                _T.FIGHTING: 0.5,
                _T.PSYCHIC: 0.5,
            }
        ),
        _T.BUG: MappingProxyType(
            {
                _T.FIRE: 2.0,
                _T.FLYING: 2.0,
                _T.ROCK: 2.0,
                _T.FIGHTING: 0.5,
                _T.GRASS: 0.5,
                _T.GROUND: 0.5,
            }
        ),
        _T.ROCK: MappingProxyType(
            {
                _T.WATER: 2.0,
                _T.GRASS: 2.0,
                _T.FIGHTING: 2.0,
                _T.GROUND: 2.0,
                _T.STEEL: 2.0,
                _T.NORMAL: 0.5,
                _T.FIRE: 0.5,
                _T.POISON: 0.5,
                _T.FLYING: 0.5,
            }
        ),
        _T.GHOST: MappingProxyType(
            {
                _T.GHOST: 2.0,
                _T.DARK: 2.0,
                _T.POISON: 0.5,
                _T.BUG: 0.5,
                _T.NORMAL: 0.0,
                _T.FIGHTING: 0.0,
            }
        ),
        _T.DRAGON: MappingProxyType(
            {
                _T.ICE: 2.0,
                _T.DRAGON: 2.0,
                _T.FAIRY: 2.0,
                _T.FIRE: 0.5,
                _T.WATER: 0.5,
                _T.ELECTRIC: 0.5,
                _T.GRASS: 0.5,
            }
        ),
        _T.DARK: MappingProxyType(
            {
                _T.FIGHTING: 2.0,
                _T.BUG: 2.0,
                _T.FAIRY: 2.0,
                _T.GHOST: 0.5,
                _T.DARK: 0.5,
                _T.PSYCHIC: 0.0,
            }
        ),
        _T.STEEL: MappingProxyType(
            {
                _T.FIRE: 2.0,
                _T.FIGHTING: 2.0,
                _T.GROUND: 2.0,
                _T.NORMAL: 0.5,
                _T.GRASS: 0.5,
                _T.ICE: 0.5,
                _T.FLYING: 0.5,
                _T.PSYCHIC: 0.5,
                _T.BUG: 0.5,
                _T.ROCK: 0.5,
                _T.DRAGON: 0.5,
                _T.STEEL: 0.5,
                _T.FAIRY: 0.5,
                _T.POISON: 0.0,
            }
        ),
        _T.FAIRY: MappingProxyType(
            {
                _T.POISON: 2.0,
                _T.STEEL: 2.0,
                _T.FIGHTING: 0.5,
                _T.BUG: 0.5,
                _T.DARK: 0.5,
                _T.DRAGON: 0.0,
            }
        ),
    }
)

# Packed ARGB colors (0xAARRGGBB) for each type
TYPE_COLORS: Mapping[ElementType, int] = MappingProxyType(
    {
        _T.NORMAL: 0xFFA8A878,
        _T.FIRE: 0xFFF08030,
        _T.WATER: 0xFF6890F0,
        _T.ELECTRIC: 0xFFF8D030,
        _T.GRASS: 0xFF78C850,
        _T.ICE: 0xFF98D8D8,
        _T.FIGHTING: 0xFFC03028,
        _T.POISON: 0xFFA040A0,
        _T.GROUND: 0xFFE0C068,
        _T.FLYING: 0xFFA890F0,
        _T.PSYCHIC: 0xFFF85888,
        _T.BUG: 0xFFA8B820,
        _T.ROCK: 0xFFB8A038,
        _T.GHOST: 0xFF705898,
        _T.DRAGON: 0xFF7038F8,
        _T.DARK: 0xFF705848,
        _T.STEEL: 0xFFB8B8D0,
        _T.FAIRY: 0xFFEE99AC,
    }
)

DEFAULT_TYPE_COLOR = 0xFF68A090


def parse_element_type(raw: str) -> ElementType:
    """Parse an upstream type name into an ElementType.

    Args:
        raw: Type name as delivered upstream (e.g., "fire", " Fire ").

    Returns:
        The matching ElementType.

    Raises:
        ValueError: If the name is not one of the 18 element types.
    """
    normalized = raw.strip().lower()
    try:
        return ElementType(normalized)
    except ValueError:
        raise ValueError(f"Unknown element type: {raw!r}") from None


def parse_element_types(raw_names: Iterable[str]) -> tuple[ElementType, ...]:
    """Parse several upstream type names, keeping their order."""
    return tuple(parse_element_type(name) for name in raw_names)
