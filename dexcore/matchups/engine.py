# ABOUTME: Defensive type effectiveness engine over the static type chart.
# ABOUTME: Computes combined profiles for 1-2 defending types, classifies them, and looks up colors.

from collections.abc import Sequence

from dexcore.matchups.dataclasses import EffectivenessProfile, MatchupClassification
from dexcore.utils.type_chart import (
    DEFAULT_TYPE_COLOR,
    IMMUNITY_VALUE,
    NEUTRAL_VALUE,
    SUPER_EFFECTIVE_THRESHOLD,
    TYPE_CHART,
    TYPE_COLORS,
    TYPE_ORDER,
    TYPES,
    ElementType,
)

MAX_DEFENDING_TYPES = 2


def _distinct_types(types: Sequence[ElementType]) -> list[ElementType]:
    """Drop repeated defending types while keeping first-seen order."""
    distinct: list[ElementType] = []
    for element_type in types:
        if element_type not in distinct:
            distinct.append(element_type)
    return distinct


def compute_profile(types: Sequence[ElementType]) -> EffectivenessProfile:
    """Compute the combined defensive multiplier for every attacking type.

    Each defending type's chart row is multiplied into a profile that starts
    at 1.0 everywhere. Repeated defending types count once, so Fire/Fire is
    the same as Fire.

    Args:
        types: One or two defending ElementType values.

    Returns:
        Dict mapping each of the 18 attacking types (canonical order) to its
        multiplier: 0, 0.25, 0.5, 1, 2 or 4.

    Raises:
        ValueError: If `types` is empty or has more than two distinct types.
    """
    defending = _distinct_types(types)
    if not defending or len(defending) > MAX_DEFENDING_TYPES:
        raise ValueError(f"Expected 1 or 2 defending types, got {len(defending)}: {list(types)}")

    profile: EffectivenessProfile = dict.fromkeys(TYPES, NEUTRAL_VALUE)
    for def_type in defending:
        for atk_type, multiplier in TYPE_CHART[def_type].items():
            profile[atk_type] *= multiplier

    return profile


def get_effectiveness(atk_type: ElementType, def_types: Sequence[ElementType]) -> float:
    """Return the multiplier of one attacking type against a defending combination.

    Args:
        atk_type: The attacking type.
        def_types: One or two defending types.

    Returns:
        Effectiveness multiplier: 0, 0.25, 0.5, 1, 2, or 4.
    """
    return compute_profile(def_types)[atk_type]


def _by_multiplier(entry: tuple[ElementType, float], descending: bool) -> tuple[float, int]:
    element_type, multiplier = entry
    return (-multiplier if descending else multiplier, TYPE_ORDER[element_type])


def classify(profile: EffectivenessProfile) -> MatchupClassification:
    """Split a profile into weaknesses, resistances, immunities and neutral types.

    Args:
        profile: Profile as returned by compute_profile.

    Returns:
        MatchupClassification with weaknesses sorted high to low, resistances
        sorted low to high, and immunities/neutral in canonical type order.
    """
    weaknesses: list[tuple[ElementType, float]] = []
    resistances: list[tuple[ElementType, float]] = []
    immunities: list[ElementType] = []
    neutral: list[ElementType] = []

    for atk_type in TYPES:
        multiplier = profile.get(atk_type, NEUTRAL_VALUE)

        if multiplier == IMMUNITY_VALUE:
            immunities.append(atk_type)
        elif multiplier < NEUTRAL_VALUE:
            resistances.append((atk_type, multiplier))
        elif multiplier >= SUPER_EFFECTIVE_THRESHOLD:
            weaknesses.append((atk_type, multiplier))
        else:
            neutral.append(atk_type)

    return MatchupClassification(
        weaknesses=tuple(sorted(weaknesses, key=lambda entry: _by_multiplier(entry, descending=True))),
        resistances=tuple(sorted(resistances, key=lambda entry: _by_multiplier(entry, descending=False))),
        immunities=tuple(immunities),
        neutral=tuple(neutral),
    )


def get_matchups(types: Sequence[ElementType]) -> MatchupClassification:
    """Compute and classify the defensive profile of a type combination."""
    return classify(compute_profile(types))


def color_for(element_type: ElementType | str) -> int:
    """Return the packed ARGB color for a type.

    Raw strings are accepted for convenience; anything that is not a known
    type name gets DEFAULT_TYPE_COLOR instead of raising.
    """
    if not isinstance(element_type, ElementType):
        try:
            element_type = ElementType(str(element_type).strip().lower())
        except ValueError:
            return DEFAULT_TYPE_COLOR
    return TYPE_COLORS.get(element_type, DEFAULT_TYPE_COLOR)


def generate_all_type_combinations() -> list[tuple[ElementType, ElementType | None]]:
    """Generate all 171 unique defending type combinations.

    Returns:
        List of 171 tuples:
        - 18 monotypes as (type, None)
        - 153 dual types as (type1, type2), type1 before type2 in canonical order
    """
    monotypes: list[tuple[ElementType, ElementType | None]] = [(t, None) for t in TYPES]

    dual_types: list[tuple[ElementType, ElementType | None]] = [
        (type1, type2) for i, type1 in enumerate(TYPES) for type2 in TYPES[i + 1 :]
    ]

    return monotypes + dual_types
