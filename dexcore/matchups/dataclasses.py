"""ABOUTME: Data classes for defensive type matchups.
ABOUTME: Contains the EffectivenessProfile alias and the MatchupClassification view."""

from dataclasses import dataclass

from dexcore.utils.type_chart import ElementType

EffectivenessProfile = dict[ElementType, float]
"""Combined multiplier for every attacking type against one defending combination."""


@dataclass(frozen=True)
class MatchupClassification:
    """Partition of an EffectivenessProfile into display groups.

    Attributes:
        weaknesses: (type, multiplier) pairs at >=2x, highest multiplier first.
        resistances: (type, multiplier) pairs between 0x and 1x, lowest multiplier first.
        immunities: Types at exactly 0x.
        neutral: Types at exactly 1x.

    Ties inside each group follow the canonical ElementType order.
    """

    weaknesses: tuple[tuple[ElementType, float], ...] = ()
    resistances: tuple[tuple[ElementType, float], ...] = ()
    immunities: tuple[ElementType, ...] = ()
    neutral: tuple[ElementType, ...] = ()

    @property
    def weakness_types(self) -> list[ElementType]:
        """Types from `weaknesses` without multipliers."""
        return [element_type for element_type, _ in self.weaknesses]

    @property
    def resistance_types(self) -> list[ElementType]:
        """Types from `resistances` without multipliers."""
        return [element_type for element_type, _ in self.resistances]
