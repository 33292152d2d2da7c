"""Constant-product curve calculations on 128-bit unsigned amounts."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from gammakit.errors import ErrorCode, GammaError

U128_MAX = (1 << 128) - 1


def _checked(value: int) -> Optional[int]:
    return value if 0 <= value <= U128_MAX else None


def _checked_mul(a: int, b: int) -> Optional[int]:
    return _checked(a * b)


def _checked_div(a: int, b: int) -> Optional[int]:
    return None if b == 0 else a // b


def map_zero_to_none(x: int) -> Optional[int]:
    """Return None for zero, otherwise the value itself."""
    return None if x == 0 else x


class TradeDirection(enum.Enum):
    """Which token goes into the pool."""

    ZERO_FOR_ONE = "zero_for_one"
    ONE_FOR_ZERO = "one_for_zero"

    def opposite(self) -> "TradeDirection":
        """The direction of the reverse trade."""
        if self is TradeDirection.ZERO_FOR_ONE:
            return TradeDirection.ONE_FOR_ZERO
        return TradeDirection.ZERO_FOR_ONE


class RoundDirection(enum.Enum):
    """How to round LP-to-token conversions."""

    FLOOR = "floor"
    CEILING = "ceiling"


@dataclass(frozen=True)
class TradingTokenResult:
    """Amounts of both trading tokens."""

    token_0_amount: int
    token_1_amount: int


def validate_supply(token_0_amount: int, token_1_amount: int) -> None:
    """Raise EMPTY_SUPPLY if either amount is zero."""
    if token_0_amount == 0 or token_1_amount == 0:
        raise GammaError(ErrorCode.EMPTY_SUPPLY)


def swap_base_input_without_fees(
    source_amount_to_be_swapped: int,
    swap_source_amount: int,
    swap_destination_amount: int,
) -> int:
    """Destination amount received for a source amount, keeping x * y constant."""
    numerator = _checked_mul(source_amount_to_be_swapped, swap_destination_amount)
    denominator = _checked(swap_source_amount + source_amount_to_be_swapped)
    if numerator is None or denominator is None:
        raise GammaError(ErrorCode.MATH_OVERFLOW)
    result = _checked_div(numerator, denominator)
    if result is None:
        raise GammaError(ErrorCode.MATH_OVERFLOW)
    return result


def _share(lp_token_amount: int, swap_amount: int, lp_token_supply: int, ceiling: bool) -> Optional[int]:
    product = _checked_mul(lp_token_amount, swap_amount)
    if product is None or lp_token_supply == 0:
        return None
    amount, remainder = divmod(product, lp_token_supply)
    # A zero result stays zero so tiny requests get rejected later rather than rounded up.
    if ceiling and remainder > 0 and amount > 0:
        amount = _checked(amount + 1)
    return amount


def lp_tokens_to_trading_tokens(
    lp_token_amount: int,
    lp_token_supply: int,
    swap_token_0_amount: int,
    swap_token_1_amount: int,
    round_direction: RoundDirection,
) -> Optional[TradingTokenResult]:
    """Trading tokens worth an amount of LP tokens, or None on overflow or zero supply."""
    ceiling = round_direction is RoundDirection.CEILING
    token_0 = _share(lp_token_amount, swap_token_0_amount, lp_token_supply, ceiling)
    if token_0 is None:
        return None
    token_1 = _share(lp_token_amount, swap_token_1_amount, lp_token_supply, ceiling)
    if token_1 is None:
        return None
    return TradingTokenResult(token_0_amount=token_0, token_1_amount=token_1)


def token_0_to_lp_tokens(
    trading_token_0_amount: int, total_token_0_amount: int, lp_token_supply: int
) -> Optional[int]:
    """LP tokens worth an amount of token 0, or None on overflow or zero total."""
    product = _checked_mul(trading_token_0_amount, lp_token_supply)
    if product is None:
        return None
    return _checked_div(product, total_token_0_amount)


def token_1_to_lp_tokens(
    trading_token_1_amount: int, total_token_1_amount: int, lp_token_supply: int
) -> Optional[int]:
    """LP tokens worth an amount of token 1, or None on overflow or zero total."""
    product = _checked_mul(trading_token_1_amount, lp_token_supply)
    if product is None:
        return None
    return _checked_div(product, total_token_1_amount)