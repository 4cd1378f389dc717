from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .board import BoardConfig, BoardConfigError, NumberToken, Resource
from .placement import DEFAULT_PLACEMENT_RULES, PlacementRules, is_balanced_placement
from .prng import seeded_shuffle

logger = logging.getLogger(__name__)

BALANCE_ATTEMPTS = 200
RESOURCE_SEED_OFFSET = 500
NUMBER_SEED_OFFSET = 1000
SEED_JUMP = 100_000
MAX_SEED_JUMPS = 9


@dataclass(frozen=True)
class RandomizerConfig:
    balance_attempts: int = BALANCE_ATTEMPTS
    resource_seed_offset: int = RESOURCE_SEED_OFFSET
    number_seed_offset: int = NUMBER_SEED_OFFSET
    seed_jump: int = SEED_JUMP
    max_seed_jumps: int = MAX_SEED_JUMPS  # 0 = accept the last candidate of the first round
    rules: PlacementRules = field(default=DEFAULT_PLACEMENT_RULES)

    def __post_init__(self) -> None:
        if self.balance_attempts < 1:
            raise ValueError(f"balance_attempts must be >= 1, received {self.balance_attempts}.")
        if self.max_seed_jumps < 0:
            raise ValueError(f"max_seed_jumps must be >= 0, received {self.max_seed_jumps}.")

    @property
    def max_candidates(self) -> int:
        return self.balance_attempts * (self.max_seed_jumps + 1)


@dataclass(frozen=True)
class NumberPlacement:
    tokens: Tuple[NumberToken, ...]
    attempts: int
    seed_jumps: int
    balanced: bool


def assign_resources(
    config: BoardConfig,
    seed: int,
    *,
    resource_seed_offset: int = RESOURCE_SEED_OFFSET,
) -> List[Resource]:
    """Return one resource per slot, deserts restricted to edge tiles."""
    resources: List[Optional[Resource]] = [None] * config.tile_count

    shuffled_edges = seeded_shuffle(config.edge_indices(), seed)
    for slot in shuffled_edges[: config.desert_count]:
        resources[slot] = Resource.DESERT

    remaining_slots = [slot for slot, resource in enumerate(resources) if resource is None]
    shuffled_pool = seeded_shuffle(config.resource_pool(), seed + resource_seed_offset)
    if len(shuffled_pool) != len(remaining_slots):
        raise BoardConfigError(
            f"Board '{config.name}' has {len(remaining_slots)} production tiles, "
            f"received {len(shuffled_pool)} resources."
        )
    for slot, resource in zip(remaining_slots, shuffled_pool):
        resources[slot] = resource

    if any(resource is None for resource in resources):
        raise ValueError("Resource assignment does not cover every tile.")
    return [resource for resource in resources if resource is not None]


def production_slots(resources: Sequence[Resource]) -> List[int]:
    return [slot for slot, resource in enumerate(resources) if resource is not Resource.DESERT]


def place_numbers(
    config: BoardConfig,
    slots: Sequence[int],
    seed: int,
    randomizer_config: RandomizerConfig = RandomizerConfig(),
) -> NumberPlacement:
    """Rejection-sample a token order for `slots`.

    Each round tries `balance_attempts` shuffles. An exhausted round jumps
    the seed by `seed_jump` and restarts the counter; once `max_seed_jumps`
    jumps are spent the last candidate is kept even if it breaks the rules.
    """
    rules = randomizer_config.rules
    candidate: List[NumberToken] = []
    attempts = 0

    for seed_jumps in range(randomizer_config.max_seed_jumps + 1):
        round_seed = seed + (seed_jumps * randomizer_config.seed_jump) + randomizer_config.number_seed_offset
        if seed_jumps:
            logger.info(
                "No balanced placement after %d attempts; jumping seed space (%d/%d).",
                attempts,
                seed_jumps,
                randomizer_config.max_seed_jumps,
            )

        for attempt in range(randomizer_config.balance_attempts):
            attempts += 1
            candidate = seeded_shuffle(config.number_tokens, round_seed + attempt)
            if is_balanced_placement(candidate, slots, config.positions, rules):
                logger.debug("Balanced placement found after %d attempts.", attempts)
                return NumberPlacement(
                    tokens=tuple(candidate),
                    attempts=attempts,
                    seed_jumps=seed_jumps,
                    balanced=True,
                )

    logger.warning(
        "Accepting unbalanced number placement after %d attempts (seed=%d).",
        attempts,
        seed,
    )
    return NumberPlacement(
        tokens=tuple(candidate),
        attempts=attempts,
        seed_jumps=randomizer_config.max_seed_jumps,
        balanced=False,
    )


def validate_standard_counts(
    config: BoardConfig,
    resources: Sequence[Resource],
    tokens: Sequence[Optional[NumberToken]],
) -> bool:
    """Check per-slot resources/tokens against the configured multisets."""
    if len(resources) != config.tile_count or len(tokens) != config.tile_count:
        return False

    resource_counts: Counter[Resource] = Counter()
    placed_tokens: List[NumberToken] = []
    for slot, (resource, token) in enumerate(zip(resources, tokens)):
        resource_counts[resource] += 1
        if resource is Resource.DESERT:
            if token is not None or not config.positions[slot].is_edge:
                return False
        elif token is None:
            return False
        else:
            placed_tokens.append(token)

    expected_counts = Counter(config.resource_pool())
    expected_counts[Resource.DESERT] = config.desert_count
    if +resource_counts != +expected_counts:
        return False

    return Counter(placed_tokens) == Counter(config.number_tokens)
