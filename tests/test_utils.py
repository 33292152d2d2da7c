import pytest

from gammakit.utils import U64_MAX, amount_with_slippage


def test_zero_slippage_keeps_amount():
    assert amount_with_slippage(12345, 0.0, True) == 12345
    assert amount_with_slippage(12345, 0.0, False) == 12345


@pytest.mark.parametrize("amount", [1, 99, 1_000_000, 123_456_789])
@pytest.mark.parametrize("slippage", [0.001, 0.01, 0.5])
def test_round_up_not_below_and_round_down_not_above(amount, slippage):
    up = amount_with_slippage(amount, slippage, True)
    down = amount_with_slippage(amount, slippage, False)
    assert up >= amount
    assert down <= amount
    assert up >= amount * (1 + slippage) - 1e-6
    assert down <= amount * (1 - slippage) + 1e-6


def test_round_down_saturates_at_zero():
    assert amount_with_slippage(100, 2.0, False) == 0


def test_round_up_saturates_at_max():
    assert amount_with_slippage(U64_MAX, 1.0, True) == U64_MAX


def test_nan_slippage_gives_zero():
    assert amount_with_slippage(100, float("nan"), True) == 0
    assert amount_with_slippage(100, float("nan"), False) == 0


def test_infinite_slippage_saturates():
    assert amount_with_slippage(100, float("inf"), True) == U64_MAX