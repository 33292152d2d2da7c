"""Error codes raised by the pool calculations."""

from __future__ import annotations

import enum

_CUSTOM_ERROR_OFFSET = 6000


class ErrorCode(enum.IntEnum):
    """Numeric error codes, numbered from the custom-error offset."""

    NOT_APPROVED = _CUSTOM_ERROR_OFFSET
    INVALID_OWNER = enum.auto()
    EMPTY_SUPPLY = enum.auto()
    INVALID_INPUT = enum.auto()
    INCORRECT_LP_MINT = enum.auto()
    EXCEEDED_SLIPPAGE = enum.auto()
    ZERO_TRADING_TOKENS = enum.auto()
    NOT_SUPPORT_MINT = enum.auto()
    INVALID_VAULT = enum.auto()
    INIT_LP_AMOUNT_TOO_LESS = enum.auto()
    MATH_ERROR = enum.auto()
    DYNAMIC_FEE_IS_NEGATIVE = enum.auto()
    MATH_OVERFLOW = enum.auto()
    CLOCK_ERROR = enum.auto()
    INVALID_FEE = enum.auto()
    INVALID_OPEN_TIME = enum.auto()
    INVALID_LP_TOKEN_AMOUNT = enum.auto()
    INVALID_REWARD_TIME = enum.auto()

    @property
    def message(self) -> str:
        """Human-readable description of the error."""
        return _MESSAGES[self]


_MESSAGES = {
    ErrorCode.NOT_APPROVED: "Not approved",
    ErrorCode.INVALID_OWNER: "Input account owner is not the program address",
    ErrorCode.EMPTY_SUPPLY: "Input token account empty",
    ErrorCode.INVALID_INPUT: "InvalidInput",
    ErrorCode.INCORRECT_LP_MINT: "Address of the provided lp token mint is incorrect",
    ErrorCode.EXCEEDED_SLIPPAGE: "Exceeds desired slippage limit",
    ErrorCode.ZERO_TRADING_TOKENS: "Given pool token amount results in zero trading tokens",
    ErrorCode.NOT_SUPPORT_MINT: "Not support token_2022 mint extension",
    ErrorCode.INVALID_VAULT: "invaild vault",
    ErrorCode.INIT_LP_AMOUNT_TOO_LESS: (
        "Init lp amount is too less(Because 100 amount lp will be locked)"
    ),
    ErrorCode.MATH_ERROR: "Math error",
    ErrorCode.DYNAMIC_FEE_IS_NEGATIVE: "Invalid calculation, dynamic fee is negative",
    ErrorCode.MATH_OVERFLOW: "Math overflow",
    ErrorCode.CLOCK_ERROR: "Clock error",
    ErrorCode.INVALID_FEE: "Invalid fee",
    ErrorCode.INVALID_OPEN_TIME: "Invalid open time",
    ErrorCode.INVALID_LP_TOKEN_AMOUNT: "Invalid lp token amount",
    ErrorCode.INVALID_REWARD_TIME: "Invalid reward time",
}


class GammaError(Exception):
    """An error carrying one of the pool's error codes."""

    def __init__(self, code: ErrorCode) -> None:
        self.code = ErrorCode(code)
        super().__init__(self.code.message)

    @property
    def message(self) -> str:
        return self.code.message

    def __repr__(self) -> str:
        return f"GammaError({self.code.name})"