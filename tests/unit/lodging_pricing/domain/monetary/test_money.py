from __future__ import annotations

from decimal import Decimal

import pytest

from lodging_pricing.domain.monetary.currency_registry import BRL, JPY, KWD, USD
from lodging_pricing.domain.monetary.errors import CurrencyMismatchError, MissingCurrencyError
from lodging_pricing.domain.monetary.money import Money
from lodging_pricing.domain.monetary.rounding import RoundingMode


def reais(amount) -> Money:
    return Money.of_major(amount, BRL)


# region Construction


def test_of_major_rounds_fraction_half_to_even() -> None:
    assert str(reais(10.12745)) == "R$10.13"
    assert str(reais(200)) == "R$200.00"


@pytest.mark.parametrize(
    "amount, expected_minor_units",
    [
        (Decimal("0.125"), 12),
        (Decimal("0.135"), 14),
        (Decimal("-0.125"), -12),
        ("1.005", 100),
        (Decimal("2.5"), 250),
    ],
)
def test_of_major_uses_bankers_rounding_by_default(amount, expected_minor_units) -> None:
    assert reais(amount).minor_units == expected_minor_units


def test_of_major_honours_explicit_rounding_mode() -> None:
    assert Money.of_major(Decimal("0.125"), BRL, RoundingMode.HALF_UP).minor_units == 13
    assert Money.of_major(Decimal("0.121"), BRL, RoundingMode.CEILING).minor_units == 13
    assert Money.of_major(Decimal("0.129"), BRL, RoundingMode.DOWN).minor_units == 12


def test_of_major_scales_by_currency_fraction_digits() -> None:
    assert Money.of_major(1500, JPY).minor_units == 1500
    assert Money.of_major(Decimal("1.25"), KWD).minor_units == 1250
    assert Money.of_major(Decimal("1.5"), JPY).minor_units == 2


def test_of_major_keeps_huge_amounts_exact() -> None:
    amount = Decimal("123456789012345678901234567890.12")
    assert reais(amount).minor_units == 12345678901234567890123456789012


def test_of_minor_takes_amount_unchanged() -> None:
    m = Money.of_minor(1013, BRL)
    assert m == Money(1013, BRL)
    assert m.amount == Decimal("10.13")
    assert m.currency is BRL


def test_missing_currency_raises() -> None:
    with pytest.raises(MissingCurrencyError):
        Money(100, None)
    with pytest.raises(MissingCurrencyError):
        Money.of_major(1, None)


def test_invalid_constructor_arguments_raise() -> None:
    with pytest.raises(TypeError):
        Money(Decimal("1.5"), BRL)
    with pytest.raises(TypeError):
        Money(True, BRL)
    with pytest.raises(TypeError):
        Money(100, "BRL")
    with pytest.raises(ValueError, match="cannot be converted"):
        Money.of_major("ten", BRL)
    with pytest.raises(ValueError):
        Money.of_major(Decimal("NaN"), BRL)


# endregion

# region Addition and subtraction


def test_add_and_subtract() -> None:
    assert str(reais(10.12745).add(reais(200))) == "R$210.13"
    assert str(reais(10.12745).subtract(reais(200))) == "R$-189.87"
    assert reais(5) + reais(7) == reais(12)
    assert reais(5) - reais(7) == reais(-2)


def test_add_identity_and_none() -> None:
    m = reais("42.42")
    assert m.add(Money.zero(BRL)) == m
    assert m.add(None) is m
    assert m.subtract(None) is m


def test_add_then_subtract_round_trips() -> None:
    m1 = reais("10.13")
    m2 = reais("-3.07")
    assert m1.add(m2).subtract(m2) == m1


def test_operations_return_new_values() -> None:
    m = reais(10)
    result = m.add(reais(1))
    assert m == reais(10)
    assert result is not m


@pytest.mark.parametrize("operation", ["add", "subtract", "compare_to"])
def test_cross_currency_operations_raise(operation) -> None:
    with pytest.raises(CurrencyMismatchError) as exc_info:
        getattr(reais(1), operation)(Money.of_major(1, USD))
    assert exc_info.value.left == BRL
    assert exc_info.value.right == USD


def test_cross_currency_operators_raise() -> None:
    with pytest.raises(CurrencyMismatchError):
        reais(1) + Money.of_major(1, USD)
    with pytest.raises(CurrencyMismatchError):
        reais(1) < Money.of_major(1, USD)


# endregion

# region Multiplication and division


def test_multiply() -> None:
    m = reais(200)
    assert str(m.multiply(Decimal(10) / Decimal(9))) == "R$222.22"
    assert str(m.multiply(10 / 9)) == "R$222.22"
    assert str(m.multiply(4 / 3)) == "R$266.67"
    assert str(m * 3) == "R$600.00"
    assert str(3 * m) == "R$600.00"


def test_multiply_by_one_returns_self() -> None:
    m = reais("10.13")
    assert m.multiply(1) is m
    assert m.multiply(Decimal("1.000")) is m


def test_multiply_rounding_modes() -> None:
    m = Money.of_minor(5, BRL)
    assert m.multiply(Decimal("0.5")).minor_units == 2
    assert m.multiply(Decimal("0.5"), RoundingMode.HALF_UP).minor_units == 3
    assert m.multiply(Decimal("0.3"), RoundingMode.UP).minor_units == 2


def test_divide() -> None:
    m = reais(200)
    assert str(m.divide(9)) == "R$22.22"
    assert str(m.divide(7)) == "R$28.57"
    assert str(m / 8) == "R$25.00"


def test_divide_by_one_returns_self() -> None:
    m = reais("10.13")
    assert m.divide(1) is m


def test_divide_by_zero_raises() -> None:
    with pytest.raises(ZeroDivisionError):
        reais(200).divide(0)
    with pytest.raises(ZeroDivisionError):
        reais(200).divide(Decimal("0.00"))


def test_divide_rounds_exact_halves_by_mode() -> None:
    m = Money.of_minor(25, BRL)
    assert m.divide(10).minor_units == 2
    assert m.divide(10, RoundingMode.HALF_UP).minor_units == 3
    assert Money.of_minor(35, BRL).divide(10).minor_units == 4


def test_divide_does_not_double_round() -> None:
    # The quotient has 29 significant digits; a 28-digit intermediate would drop the trailing half
    m = Money.of_minor(10**28 + 1, BRL)
    assert m.divide(2).minor_units == 5 * 10**27
    assert m.divide(2, RoundingMode.HALF_UP).minor_units == 5 * 10**27 + 1


def test_divide_loses_cents_when_used_for_splitting() -> None:
    m = reais(200)
    third = m.divide(3)
    assert third.multiply(3) != m


def test_invalid_rounding_argument_raises() -> None:
    with pytest.raises(TypeError):
        reais(1).multiply(2, "HALF_UP")


# endregion

# region Allocation


def test_allocate_equally_gives_larger_shares_first() -> None:
    shares = reais(200).allocate_equally(3)
    assert [str(s) for s in shares] == ["R$66.67", "R$66.67", "R$66.66"]


@pytest.mark.parametrize("minor_units", [0, 1, 99, 20000, 10001, -20000, -7])
@pytest.mark.parametrize("n", [1, 2, 3, 7, 12])
def test_allocate_equally_sums_exactly_and_is_even(minor_units, n) -> None:
    shares = Money.of_minor(minor_units, BRL).allocate_equally(n)
    values = [s.minor_units for s in shares]
    assert len(shares) == n
    assert sum(values) == minor_units
    assert max(values) - min(values) <= 1
    assert values == sorted(values, reverse=True)
    assert all(s.currency == BRL for s in shares)


@pytest.mark.parametrize("n", [0, -1])
def test_allocate_equally_rejects_non_positive_n(n) -> None:
    with pytest.raises(ValueError):
        reais(200).allocate_equally(n)


def test_allocate_by_ratio_distributes_remainder_from_the_start() -> None:
    shares = reais(200).allocate_by_ratio([3, 3, 7])
    assert [str(s) for s in shares] == ["R$46.16", "R$46.15", "R$107.69"]


def test_allocate_by_ratio_remainder_goes_to_index_zero_even_with_zero_ratio() -> None:
    shares = Money.of_minor(5, BRL).allocate_by_ratio([0, 1, 1])
    assert [s.minor_units for s in shares] == [1, 2, 2]


@pytest.mark.parametrize("minor_units", [0, 1, 20000, 10001, -20000, -1])
@pytest.mark.parametrize("ratios", [[1], [1, 1], [3, 3, 7], [0, 5, 0, 2], [70, 20, 10], [1, 1, 1, 1, 1, 1, 1]])
def test_allocate_by_ratio_sums_exactly(minor_units, ratios) -> None:
    shares = Money.of_minor(minor_units, BRL).allocate_by_ratio(ratios)
    assert len(shares) == len(ratios)
    assert sum(s.minor_units for s in shares) == minor_units


@pytest.mark.parametrize("ratios", [[], [0, 0], [1, -1]])
def test_allocate_by_ratio_rejects_invalid_ratios(ratios) -> None:
    with pytest.raises(ValueError):
        reais(200).allocate_by_ratio(ratios)


# endregion

# region Comparison and display


def test_compare_to() -> None:
    a, b, c = reais(1), reais(2), reais(3)
    assert a.compare_to(b) == -1
    assert b.compare_to(b) == 0
    assert c.compare_to(b) == 1
    assert a < b < c
    assert c >= b >= a
    assert sorted([c, a, b]) == [a, b, c]


def test_equality_and_hash() -> None:
    assert reais("10.10") == Money.of_minor(1010, BRL)
    assert reais(1) != Money.of_major(1, USD)
    assert reais(1) != 1
    assert len({reais(1), Money.of_minor(100, BRL), reais(2)}) == 2


@pytest.mark.parametrize(
    "money, expected",
    [
        (Money.of_minor(0, BRL), "R$0.00"),
        (Money.of_minor(5, BRL), "R$0.05"),
        (Money.of_minor(-18987, BRL), "R$-189.87"),
        (Money.of_minor(1500, JPY), "¥1500"),
        (Money.of_minor(1250, KWD), "KD1.250"),
        (Money.of_minor(123456789012345678901234567890, USD), "$1234567890123456789012345678.90"),
    ],
)
def test_to_display_string(money, expected) -> None:
    assert money.to_display_string() == expected
    assert str(money) == expected


def test_repr() -> None:
    assert repr(reais("10.13")) == "Money(10.13, BRL)"


def test_sign_helpers() -> None:
    assert reais(0).is_zero()
    assert reais(1).is_positive()
    assert (-reais(1)).is_negative()
    assert abs(reais(-3)) == reais(3)


# endregion
