# ABOUTME: Matchups package: defensive type effectiveness engine and display helpers.
# ABOUTME: Re-exports the public engine operations and result types.

from dexcore.matchups.dataclasses import EffectivenessProfile, MatchupClassification
from dexcore.matchups.engine import (
    classify,
    color_for,
    compute_profile,
    generate_all_type_combinations,
    get_effectiveness,
    get_matchups,
)
from dexcore.matchups.formatting import (
    MatchupTier,
    format_multiplier,
    hex_color,
    matchup_tier,
    rgb_color,
    type_emoji,
)

__all__ = [
    "EffectivenessProfile",
    "MatchupClassification",
    "MatchupTier",
    "classify",
    "color_for",
    "compute_profile",
    "format_multiplier",
    "generate_all_type_combinations",
    "get_effectiveness",
    "get_matchups",
    "hex_color",
    "matchup_tier",
    "rgb_color",
    "type_emoji",
]
