"""Presentation-ready derived values: rounding, prices and labels."""

import math
from typing import Optional

from .constants import FDR_LABELS, POSITION_MAP, UNKNOWN_FDR_LABEL


def round_half_away(value: float, decimals: int = 1) -> float:
    """
    Round to ``decimals`` places with halves rounded away from zero.

    Python's built-in ``round`` uses banker's rounding (``round(0.25, 1)``
    is 0.2), which doesn't match what FPL displays.

    Example:
        >>> round_half_away(4.25)
        4.3
        >>> round_half_away(-0.05)
        -0.1
    """
    factor = 10 ** decimals
    magnitude = math.floor(abs(value) * factor + 0.5) / factor
    if magnitude == 0:
        return 0.0
    return magnitude if value > 0 else -magnitude


def tenths_to_price(tenths: Optional[int]) -> float:
    """Convert a provider price in tenths (``now_cost=37``) to units (3.7)."""
    return round_half_away((tenths or 0) / 10)


def fdr_label(difficulty: Optional[int]) -> str:
    """Label for a fixture difficulty rating; anything outside 1-5 is Unknown."""
    return FDR_LABELS.get(difficulty, UNKNOWN_FDR_LABEL)


def position_label(element_type: Optional[int]) -> Optional[str]:
    # Unmapped codes pass through as None rather than raising
    return POSITION_MAP.get(element_type)
