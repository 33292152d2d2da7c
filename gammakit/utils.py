"""Client-side amount helpers."""

from __future__ import annotations

import math

U64_MAX = (1 << 64) - 1


def _to_u64(value: float) -> int:
    """Saturating float-to-u64 conversion; NaN becomes zero."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= U64_MAX:
        return U64_MAX
    return int(value)


def amount_with_slippage(amount: int, slippage: float, round_up: bool) -> int:
    """Widen an amount by a slippage fraction, up (ceil) or down (floor)."""
    if round_up:
        scaled = float(amount) * (1.0 + slippage)
        return _to_u64(math.ceil(scaled) if math.isfinite(scaled) else scaled)
    scaled = float(amount) * (1.0 - slippage)
    return _to_u64(math.floor(scaled) if math.isfinite(scaled) else scaled)