"""Balance scoring."""

from .balance import CIBI_VARIANCE_MULTIPLIER, BalanceScore, calculate_cibi, score_pip_totals

__all__ = [
    "BalanceScore",
    "CIBI_VARIANCE_MULTIPLIER",
    "calculate_cibi",
    "score_pip_totals",
]
