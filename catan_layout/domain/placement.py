from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Sequence

from .board import RED_TOKEN_NUMBERS, NumberToken, TilePosition, are_adjacent

HIGH_PIP_THRESHOLD = 4
MAX_ADJACENT_HIGH_PIPS = 2


@dataclass(frozen=True)
class PlacementRules:
    high_frequency_values: FrozenSet[int] = RED_TOKEN_NUMBERS
    high_pip_threshold: int = HIGH_PIP_THRESHOLD
    max_adjacent_high_pips: int = MAX_ADJACENT_HIGH_PIPS


DEFAULT_PLACEMENT_RULES = PlacementRules()


def is_balanced_placement(
    tokens: Sequence[NumberToken],
    production_slots: Sequence[int],
    positions: Sequence[TilePosition],
    rules: PlacementRules = DEFAULT_PLACEMENT_RULES,
) -> bool:
    """Check a candidate token arrangement.

    `tokens[i]` sits on slot `production_slots[i]`. Both rules must hold:
    high-frequency tokens never touch, and no high-pip tile has more than
    `rules.max_adjacent_high_pips` high-pip neighbours.
    """
    _check_lengths(tokens, production_slots)
    return validate_high_frequency_spacing(
        tokens, production_slots, positions, rules
    ) and validate_high_pip_clusters(tokens, production_slots, positions, rules)


def validate_high_frequency_spacing(
    tokens: Sequence[NumberToken],
    production_slots: Sequence[int],
    positions: Sequence[TilePosition],
    rules: PlacementRules = DEFAULT_PLACEMENT_RULES,
) -> bool:
    _check_lengths(tokens, production_slots)
    hot = [index for index, token in enumerate(tokens) if token.value in rules.high_frequency_values]
    if len(hot) <= 1:
        return True

    for offset, first in enumerate(hot):
        first_position = positions[production_slots[first]]
        for second in hot[offset + 1 :]:
            if are_adjacent(first_position, positions[production_slots[second]]):
                return False
    return True


def validate_high_pip_clusters(
    tokens: Sequence[NumberToken],
    production_slots: Sequence[int],
    positions: Sequence[TilePosition],
    rules: PlacementRules = DEFAULT_PLACEMENT_RULES,
) -> bool:
    _check_lengths(tokens, production_slots)
    high = [index for index, token in enumerate(tokens) if token.pip_weight >= rules.high_pip_threshold]

    for first in high:
        first_position = positions[production_slots[first]]
        neighbours = sum(
            1
            for second in high
            if second != first and are_adjacent(first_position, positions[production_slots[second]])
        )
        if neighbours > rules.max_adjacent_high_pips:
            return False
    return True


def _check_lengths(tokens: Sequence[NumberToken], production_slots: Sequence[int]) -> None:
    if len(tokens) != len(production_slots):
        raise ValueError(
            f"Expected {len(production_slots)} number tokens, received {len(tokens)}."
        )
