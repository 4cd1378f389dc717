"""Seeded, balance-validated Catan board layouts."""

from .generator import BoardLayout, TileAssignment, generate_layout

__version__ = "1.0.0"

__all__ = [
    "BoardLayout",
    "TileAssignment",
    "generate_layout",
    "__version__",
]
