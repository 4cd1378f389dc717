from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple, Union

PIP_VALUES: Dict[int, int] = {
    2: 1,
    3: 2,
    4: 3,
    5: 4,
    6: 5,
    8: 5,
    9: 4,
    10: 3,
    11: 2,
    12: 1,
}
RED_TOKEN_NUMBERS = frozenset({6, 8})


class BoardConfigError(ValueError):
    """Raised when a board configuration is internally inconsistent."""


class UnsupportedBoardSizeError(BoardConfigError):
    """Raised for a board size selector with no known configuration."""


class Resource(str, Enum):
    WOOD = "wood"
    WHEAT = "wheat"
    SHEEP = "sheep"
    ORE = "ore"
    BRICK = "brick"
    DESERT = "desert"

    @property
    def label(self) -> str:
        return self.value.capitalize()


PRODUCTION_RESOURCES: Tuple[Resource, ...] = (
    Resource.WOOD,
    Resource.WHEAT,
    Resource.SHEEP,
    Resource.ORE,
    Resource.BRICK,
)


class BoardSize(str, Enum):
    FOUR_PLAYER = "4-player"
    FIVE_SIX_PLAYER = "5-6-player"


def pip_value(token_number: int | None) -> int:
    if token_number is None:
        return 0
    return PIP_VALUES.get(token_number, 0)


@dataclass(frozen=True)
class TilePosition:
    row: int
    col: int
    is_edge: bool = False


@dataclass(frozen=True)
class NumberToken:
    value: int
    letter: str

    def __post_init__(self) -> None:
        if self.value not in PIP_VALUES:
            raise BoardConfigError(f"Number token value must be 2..12 excluding 7, received {self.value}.")

    @property
    def pip_weight(self) -> int:
        return PIP_VALUES[self.value]

    @property
    def is_high_frequency(self) -> bool:
        return self.value in RED_TOKEN_NUMBERS

    @property
    def pips(self) -> str:
        return "•" * self.pip_weight


def are_adjacent(first: TilePosition, second: TilePosition) -> bool:
    """Return whether two offset-row positions share a hex edge.

    The column offset between neighbouring rows follows the parity of
    `first.row`: even rows reach `col` and `col - 1`, odd rows reach `col`
    and `col + 1`.
    """
    if abs(first.row - second.row) > 1:
        return False

    if first.row == second.row:
        return abs(first.col - second.col) == 1

    if first.row % 2 == 0:
        return second.col == first.col or second.col == first.col - 1
    return second.col == first.col or second.col == first.col + 1


@dataclass(frozen=True)
class BoardConfig:
    name: str
    positions: Tuple[TilePosition, ...]
    resource_counts: Mapping[Resource, int]
    desert_count: int
    number_tokens: Tuple[NumberToken, ...]
    _edge_indices: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "positions", tuple(self.positions))
        object.__setattr__(self, "number_tokens", tuple(self.number_tokens))
        object.__setattr__(self, "resource_counts", MappingProxyType(dict(self.resource_counts)))
        object.__setattr__(
            self,
            "_edge_indices",
            tuple(index for index, position in enumerate(self.positions) if position.is_edge),
        )
        self._validate()

    def _validate(self) -> None:
        if Resource.DESERT in self.resource_counts:
            raise BoardConfigError("Desert tiles are configured by desert_count, not resource_counts.")
        if self.desert_count < 0 or any(count < 0 for count in self.resource_counts.values()):
            raise BoardConfigError(f"Board '{self.name}' has a negative tile count.")

        production_count = sum(self.resource_counts.values())
        if production_count + self.desert_count != len(self.positions):
            raise BoardConfigError(
                f"Board '{self.name}' expects {len(self.positions)} tiles, "
                f"received {production_count} resources + {self.desert_count} deserts."
            )
        if len(self.number_tokens) != production_count:
            raise BoardConfigError(
                f"Board '{self.name}' expects {production_count} number tokens, "
                f"received {len(self.number_tokens)}."
            )
        if len(self._edge_indices) < self.desert_count:
            raise BoardConfigError(
                f"Board '{self.name}' has {len(self._edge_indices)} edge tiles "
                f"for {self.desert_count} deserts."
            )
        duplicates = [key for key, count in Counter((p.row, p.col) for p in self.positions).items() if count > 1]
        if duplicates:
            raise BoardConfigError(f"Board '{self.name}' repeats positions {sorted(duplicates)}.")

    @property
    def tile_count(self) -> int:
        return len(self.positions)

    @property
    def production_tile_count(self) -> int:
        return self.tile_count - self.desert_count

    def edge_indices(self) -> List[int]:
        return list(self._edge_indices)

    def resource_pool(self) -> List[Resource]:
        """Production resources in canonical kind order, one entry per tile."""
        pool: List[Resource] = []
        for resource in PRODUCTION_RESOURCES:
            pool.extend([resource] * self.resource_counts.get(resource, 0))
        return pool

    def adjacent_slots(self, slot: int) -> List[int]:
        position = self.positions[slot]
        return [
            other
            for other, candidate in enumerate(self.positions)
            if other != slot and are_adjacent(position, candidate)
        ]


def build_positions(row_lengths: Sequence[int], *, first_row: int, edge_slots: Sequence[int]) -> Tuple[TilePosition, ...]:
    edge_set = set(edge_slots)
    positions: List[TilePosition] = []
    for row_offset, length in enumerate(row_lengths):
        for col in range(length):
            positions.append(
                TilePosition(row=first_row + row_offset, col=col, is_edge=len(positions) in edge_set)
            )
    return tuple(positions)


def build_number_tokens(values: Sequence[int], letters: Sequence[str]) -> Tuple[NumberToken, ...]:
    if len(values) != len(letters):
        raise BoardConfigError(f"Expected {len(values)} token letters, received {len(letters)}.")
    return tuple(NumberToken(value=value, letter=letter) for value, letter in zip(values, letters))


_BASE_TOKEN_VALUES = [2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12]
_BASE_TOKEN_LETTERS = [chr(ord("A") + index) for index in range(len(_BASE_TOKEN_VALUES))]
_EXTENSION_TOKEN_VALUES = [2, 3, 4, 5, 6, 8, 9, 10, 11, 12]
_EXTENSION_TOKEN_LETTERS = ["S", "T", "U", "V", "W", "X", "Y", "Za", "Zb", "Zc"]

FOUR_PLAYER_CONFIG = BoardConfig(
    name=BoardSize.FOUR_PLAYER.value,
    positions=build_positions(
        [3, 4, 5, 4, 3],
        first_row=0,
        edge_slots=[0, 1, 2, 3, 6, 7, 11, 12, 15, 16, 17, 18],
    ),
    resource_counts={
        Resource.WOOD: 4,
        Resource.WHEAT: 4,
        Resource.SHEEP: 4,
        Resource.ORE: 3,
        Resource.BRICK: 3,
    },
    desert_count=1,
    number_tokens=build_number_tokens(_BASE_TOKEN_VALUES, _BASE_TOKEN_LETTERS),
)

FIVE_SIX_PLAYER_CONFIG = BoardConfig(
    name=BoardSize.FIVE_SIX_PLAYER.value,
    positions=build_positions(
        [3, 4, 5, 6, 5, 4, 3],
        first_row=1,
        edge_slots=[0, 1, 2, 3, 6, 7, 11, 12, 17, 18, 22, 23, 26, 27, 28, 29],
    ),
    resource_counts={
        Resource.WOOD: 6,
        Resource.WHEAT: 6,
        Resource.SHEEP: 6,
        Resource.ORE: 5,
        Resource.BRICK: 5,
    },
    desert_count=2,
    number_tokens=build_number_tokens(
        _BASE_TOKEN_VALUES + _EXTENSION_TOKEN_VALUES,
        _BASE_TOKEN_LETTERS + _EXTENSION_TOKEN_LETTERS,
    ),
)

BOARD_CONFIGS: Dict[BoardSize, BoardConfig] = {
    BoardSize.FOUR_PLAYER: FOUR_PLAYER_CONFIG,
    BoardSize.FIVE_SIX_PLAYER: FIVE_SIX_PLAYER_CONFIG,
}


def get_board_config(board_size: Union[BoardSize, str, BoardConfig]) -> BoardConfig:
    if isinstance(board_size, BoardConfig):
        return board_size
    try:
        size = BoardSize(board_size)
    except ValueError:
        supported = ", ".join(size.value for size in BoardSize)
        raise UnsupportedBoardSizeError(
            f"Unsupported board size {board_size!r}; expected one of: {supported}."
        ) from None
    return BOARD_CONFIGS[size]
