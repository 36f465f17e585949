from __future__ import annotations

from decimal import ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR, ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, ROUND_UP
from enum import Enum


class RoundingMode(Enum):
    """Rounding strategies available to monetary operations.

    Each value is the matching `decimal` module constant, so a member can be
    passed straight to `Decimal.quantize` via `.value`.

    HALF_EVEN (banker's rounding) is the default everywhere: it avoids the
    systematic upward bias of HALF_UP across many transactions.
    """

    HALF_EVEN = ROUND_HALF_EVEN
    HALF_UP = ROUND_HALF_UP
    HALF_DOWN = ROUND_HALF_DOWN
    UP = ROUND_UP
    DOWN = ROUND_DOWN
    CEILING = ROUND_CEILING
    FLOOR = ROUND_FLOOR


DEFAULT_ROUNDING = RoundingMode.HALF_EVEN
