"""Board topology, seeding and placement."""

from .board import (
    BOARD_CONFIGS,
    BoardConfig,
    BoardConfigError,
    BoardSize,
    NumberToken,
    Resource,
    TilePosition,
    UnsupportedBoardSizeError,
    are_adjacent,
    get_board_config,
    pip_value,
)
from .placement import PlacementRules, is_balanced_placement
from .prng import seeded_random, seeded_shuffle
from .randomizer import RandomizerConfig, assign_resources, place_numbers
from .seeding import hash_to_seed, random_friendly_name, resolve_seed_text

__all__ = [
    "BOARD_CONFIGS",
    "BoardConfig",
    "BoardConfigError",
    "BoardSize",
    "NumberToken",
    "PlacementRules",
    "RandomizerConfig",
    "Resource",
    "TilePosition",
    "UnsupportedBoardSizeError",
    "are_adjacent",
    "assign_resources",
    "get_board_config",
    "hash_to_seed",
    "is_balanced_placement",
    "pip_value",
    "place_numbers",
    "random_friendly_name",
    "resolve_seed_text",
    "seeded_random",
    "seeded_shuffle",
]
