from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from catan_layout.analysis.balance import calculate_cibi
from catan_layout.domain.board import (
    BoardConfig,
    BoardSize,
    NumberToken,
    Resource,
    TilePosition,
    get_board_config,
)
from catan_layout.domain.randomizer import (
    RandomizerConfig,
    assign_resources,
    place_numbers,
    production_slots,
)
from catan_layout.domain.seeding import hash_to_seed, resolve_seed_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TileAssignment:
    slot: int
    position: TilePosition
    resource: Resource
    token: Optional[NumberToken]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slot": self.slot,
            "row": self.position.row,
            "col": self.position.col,
            "edge": self.position.is_edge,
            "resource": self.resource.value,
            "number": self.token.value if self.token is not None else None,
            "letter": self.token.letter if self.token is not None else None,
            "pips": self.token.pip_weight if self.token is not None else None,
        }


@dataclass(frozen=True)
class BoardLayout:
    seed_text: str
    numeric_seed: int
    board_size: str
    tiles: Tuple[TileAssignment, ...]
    cibi_score: int
    pip_totals: Mapping[Resource, int]
    attempts: int
    seed_jumps: int
    balanced: bool

    @property
    def desert_slots(self) -> list[int]:
        return [tile.slot for tile in self.tiles if tile.resource is Resource.DESERT]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed_text": self.seed_text,
            "numeric_seed": self.numeric_seed,
            "board_size": self.board_size,
            "tiles": [tile.to_dict() for tile in self.tiles],
            "cibi_score": self.cibi_score,
            "pip_totals": {resource.value: total for resource, total in self.pip_totals.items()},
            "attempts": self.attempts,
            "seed_jumps": self.seed_jumps,
            "balanced": self.balanced,
        }


def generate_layout(
    seed_text: Optional[str] = None,
    board_size: Union[BoardSize, str, BoardConfig] = BoardSize.FIVE_SIX_PLAYER,
    *,
    config: RandomizerConfig = RandomizerConfig(),
    rng: Optional[random.Random] = None,
) -> BoardLayout:
    """Generate a reproducible, balance-checked board layout.

    Blank `seed_text` is replaced by a friendly name (drawn from `rng` when
    given). The same seed text and board size always produce the same layout.
    """
    board_config = get_board_config(board_size)
    used_seed_text = resolve_seed_text(seed_text, rng)
    seed = hash_to_seed(used_seed_text)
    logger.debug("Generating %s board from seed %r (%d).", board_config.name, used_seed_text, seed)

    resources = assign_resources(board_config, seed, resource_seed_offset=config.resource_seed_offset)
    slots = production_slots(resources)
    placement = place_numbers(board_config, slots, seed, config)
    balance = calculate_cibi(resources, placement.tokens, slots)

    token_by_slot = dict(zip(slots, placement.tokens))
    tiles = tuple(
        TileAssignment(
            slot=slot,
            position=board_config.positions[slot],
            resource=resource,
            token=token_by_slot.get(slot),
        )
        for slot, resource in enumerate(resources)
    )

    return BoardLayout(
        seed_text=used_seed_text,
        numeric_seed=seed,
        board_size=board_config.name,
        tiles=tiles,
        cibi_score=balance.score,
        pip_totals=MappingProxyType(dict(balance.pip_totals)),
        attempts=placement.attempts,
        seed_jumps=placement.seed_jumps,
        balanced=placement.balanced,
    )
