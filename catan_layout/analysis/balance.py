from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Mapping, Sequence

from catan_layout.domain.board import PRODUCTION_RESOURCES, NumberToken, Resource

CIBI_VARIANCE_MULTIPLIER = 2
CIBI_MAX_SCORE = 100


@dataclass(frozen=True)
class BalanceScore:
    score: int
    pip_totals: Dict[Resource, int]


def calculate_cibi(
    resources: Sequence[Resource],
    tokens: Sequence[NumberToken],
    production_slots: Sequence[int],
) -> BalanceScore:
    """Catan Island Balance Index for a finished arrangement.

    Sums pip weight per production resource (`tokens[i]` sits on
    `production_slots[i]`) and scores how evenly those totals are spread:
    100 means every resource has the same total.
    """
    if len(tokens) != len(production_slots):
        raise ValueError(f"Expected {len(production_slots)} number tokens, received {len(tokens)}.")

    pip_totals: Dict[Resource, int] = {resource: 0 for resource in PRODUCTION_RESOURCES}
    for slot, token in zip(production_slots, tokens):
        resource = resources[slot]
        if resource in pip_totals:
            pip_totals[resource] += token.pip_weight

    return BalanceScore(score=score_pip_totals(pip_totals), pip_totals=pip_totals)


def score_pip_totals(pip_totals: Mapping[Resource, int]) -> int:
    values = [float(pip_totals.get(resource, 0)) for resource in PRODUCTION_RESOURCES]
    mean = sum(values) / len(values)
    variance = sum((value - mean) ** 2 for value in values) / len(values)
    raw_score = CIBI_MAX_SCORE - (variance * CIBI_VARIANCE_MULTIPLIER)
    clamped = max(0.0, min(float(CIBI_MAX_SCORE), raw_score))
    # Half-up rounding, not round()'s half-to-even.
    return int(math.floor(clamped + 0.5))
