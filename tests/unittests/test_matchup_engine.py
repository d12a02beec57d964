# ABOUTME: Unit tests for the defensive type effectiveness engine.
# ABOUTME: Tests profile computation, classification order, chart-wide properties and colors.

import pytest

from dexcore.matchups.dataclasses import MatchupClassification
from dexcore.matchups.engine import (
    classify,
    color_for,
    compute_profile,
    generate_all_type_combinations,
    get_effectiveness,
    get_matchups,
)
from dexcore.utils.type_chart import DEFAULT_TYPE_COLOR, TYPE_CHART, TYPES, ElementType

T = ElementType


class TestComputeProfile:
    """Tests for compute_profile function."""

    def test_covers_all_types(self) -> None:
        """The profile has an entry for every attacking type in canonical order."""
        profile = compute_profile([T.FIRE])
        assert list(profile) == list(TYPES)

    def test_single_type_equals_row(self) -> None:
        """A single type profile equals its chart row with 1.0 filled in."""
        for def_type in TYPES:
            profile = compute_profile([def_type])
            for atk_type in TYPES:
                assert profile[atk_type] == TYPE_CHART[def_type].get(atk_type, 1.0)

    def test_4x_weakness(self) -> None:
        """Rock vs Fire/Flying = 4x."""
        assert compute_profile([T.FIRE, T.FLYING])[T.ROCK] == 4.0

    def test_025x_resistance(self) -> None:
        """Fighting vs Poison/Flying = 0.25x."""
        assert compute_profile([T.POISON, T.FLYING])[T.FIGHTING] == 0.25

    def test_weakness_and_resistance_cancel(self) -> None:
        """Fire vs Grass/Water = 1x (2x * 0.5x)."""
        assert compute_profile([T.GRASS, T.WATER])[T.FIRE] == 1.0

    def test_dual_type_immunity(self) -> None:
        """Fighting vs Poison/Ghost = 0x (Ghost immunity)."""
        assert compute_profile([T.POISON, T.GHOST])[T.FIGHTING] == 0.0

    def test_immunity_beats_weakness(self) -> None:
        """Ground vs Fire/Flying = 0x even though Fire is weak to Ground."""
        assert compute_profile([T.FIRE, T.FLYING])[T.GROUND] == 0.0

    def test_duplicate_type_not_doubled(self) -> None:
        """Water vs Fire/Fire = 2x (NOT 4x)."""
        assert compute_profile([T.FIRE, T.FIRE])[T.WATER] == 2.0

    def test_empty_types_raise(self) -> None:
        """At least one defending type is required."""
        with pytest.raises(ValueError, match="1 or 2 defending types"):
            compute_profile([])

    def test_three_types_raise(self) -> None:
        """More than two distinct defending types is rejected."""
        with pytest.raises(ValueError, match="1 or 2 defending types"):
            compute_profile([T.FIRE, T.WATER, T.GRASS])

    def test_accepts_tuple(self) -> None:
        """Any sequence works as input."""
        assert compute_profile((T.NORMAL,)) == compute_profile([T.NORMAL])


class TestProfileProperties:
    """Chart-wide properties over every type and pair."""

    @pytest.mark.parametrize("def_type", list(TYPES))
    def test_idempotent_under_duplication(self, def_type: ElementType) -> None:
        """[t] and [t, t] give identical profiles."""
        assert compute_profile([def_type]) == compute_profile([def_type, def_type])

    def test_commutative(self) -> None:
        """[a, b] and [b, a] give identical profiles."""
        for type1 in TYPES:
            for type2 in TYPES:
                assert compute_profile([type1, type2]) == compute_profile([type2, type1])

    def test_classification_covers_domain(self) -> None:
        """Groups are disjoint and together cover all 18 types."""
        for type1, type2 in generate_all_type_combinations():
            types = [type1] if type2 is None else [type1, type2]
            matchups = get_matchups(types)

            groups = [
                set(matchups.weakness_types),
                set(matchups.resistance_types),
                set(matchups.immunities),
                set(matchups.neutral),
            ]
            total = sum(len(group) for group in groups)
            assert total == 18
            assert set().union(*groups) == set(TYPES)

    def test_immunity_dominance(self) -> None:
        """A listed 0x entry stays 0x whatever the other defending type is."""
        for def_type, row in TYPE_CHART.items():
            immune_to = [atk_type for atk_type, multiplier in row.items() if multiplier == 0.0]
            for other in TYPES:
                profile = compute_profile([def_type, other])
                for atk_type in immune_to:
                    assert profile[atk_type] == 0.0


class TestClassify:
    """Tests for classify function."""

    def test_fire_flying(self) -> None:
        """Charizard typing: 4x Rock, 2x Water/Electric, immune to Ground."""
        matchups = get_matchups([T.FIRE, T.FLYING])

        assert matchups.weaknesses == ((T.ROCK, 4.0), (T.WATER, 2.0), (T.ELECTRIC, 2.0))
        assert matchups.immunities == (T.GROUND,)
        assert set(matchups.resistance_types) == {T.FIGHTING, T.BUG, T.STEEL, T.FIRE, T.GRASS, T.FAIRY}

    def test_fire_flying_resistance_order(self) -> None:
        """Resistances go lowest first, ties in canonical order."""
        matchups = get_matchups([T.FIRE, T.FLYING])

        assert matchups.resistances == (
            (T.GRASS, 0.25),
            (T.BUG, 0.25),
            (T.FIRE, 0.5),
            (T.FIGHTING, 0.5),
            (T.STEEL, 0.5),
            (T.FAIRY, 0.5),
        )

    def test_normal(self) -> None:
        """Normal: immune to Ghost, weak to Fighting, no resistances."""
        matchups = get_matchups([T.NORMAL])

        assert matchups.immunities == (T.GHOST,)
        assert matchups.weaknesses == ((T.FIGHTING, 2.0),)
        assert matchups.resistances == ()

    def test_ghost_immunities_in_canonical_order(self) -> None:
        """Ghost is immune to Normal and Fighting, listed in enum order."""
        assert get_matchups([T.GHOST]).immunities == (T.NORMAL, T.FIGHTING)

    def test_weakness_ties_in_canonical_order(self) -> None:
        """Fire's 2x weaknesses keep Water, Ground, Rock order."""
        assert get_matchups([T.FIRE]).weakness_types == [T.WATER, T.GROUND, T.ROCK]

    def test_neutral_group(self) -> None:
        """Neutral types are those at exactly 1x."""
        matchups = get_matchups([T.NORMAL])
        assert len(matchups.neutral) == 16
        assert T.FIGHTING not in matchups.neutral

    def test_missing_entries_are_neutral(self) -> None:
        """A partial profile treats missing types as 1x."""
        matchups = classify({T.WATER: 2.0})

        assert matchups.weaknesses == ((T.WATER, 2.0),)
        assert len(matchups.neutral) == 17

    def test_empty_classification_defaults(self) -> None:
        """The dataclass defaults to empty groups."""
        assert MatchupClassification().weaknesses == ()


class TestGetEffectiveness:
    """Tests for get_effectiveness function."""

    def test_super_effective(self) -> None:
        """Water vs Fire = 2x."""
        assert get_effectiveness(T.WATER, [T.FIRE]) == 2.0

    def test_not_very_effective(self) -> None:
        """Fire vs Water = 0.5x."""
        assert get_effectiveness(T.FIRE, [T.WATER]) == 0.5

    def test_immune(self) -> None:
        """Normal vs Ghost = 0x."""
        assert get_effectiveness(T.NORMAL, [T.GHOST]) == 0.0

    def test_fairy_super_effective_on_dragon(self) -> None:
        """Fairy vs Dragon = 2x."""
        assert get_effectiveness(T.FAIRY, [T.DRAGON]) == 2.0


class TestColorFor:
    """Tests for color_for function."""

    def test_known_type(self) -> None:
        """Fire has its orange color."""
        assert color_for(T.FIRE) == 0xFFF08030

    def test_raw_string(self) -> None:
        """Raw type names resolve to the same color."""
        assert color_for("Water") == color_for(T.WATER)

    def test_unknown_falls_back(self) -> None:
        """Unknown names get the neutral fallback instead of raising."""
        assert color_for("shadow") == DEFAULT_TYPE_COLOR


class TestGenerateAllTypeCombinations:
    """Tests for generate_all_type_combinations function."""

    def test_count(self) -> None:
        """There are 171 unique combinations (18 + 153)."""
        combinations = generate_all_type_combinations()
        assert len(combinations) == 171
        assert len(set(combinations)) == 171

    def test_monotypes_first(self) -> None:
        """The first 18 entries are single types."""
        combinations = generate_all_type_combinations()
        assert all(type2 is None for _, type2 in combinations[:18])
        assert all(type2 is not None for _, type2 in combinations[18:])

    def test_no_mirrored_pairs(self) -> None:
        """Each pair appears once, first type earlier in canonical order."""
        for type1, type2 in generate_all_type_combinations()[18:]:
            assert type2 is not None
            assert TYPES.index(type1) < TYPES.index(type2)
