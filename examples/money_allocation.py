from __future__ import annotations

from decimal import Decimal

from lodging_pricing.domain.monetary.currency_registry import BRL
from lodging_pricing.domain.monetary.money import Money
from lodging_pricing.domain.monetary.rounding import RoundingMode


def run() -> None:
    budget = Money.of_major(200, BRL)

    # Scalar arithmetic rounds once, half-to-even unless told otherwise
    print(f"{budget} * 10/9         = {budget.multiply(Decimal(10) / Decimal(9))}")
    print(f"{budget} / 9            = {budget.divide(9)}")
    print(f"{budget} / 9 (ceiling)  = {budget.divide(9, RoundingMode.CEILING)}")

    # Dividing and paying out each share loses a cent; allocation never does
    third = budget.divide(3)
    print(f"3 x ({budget} / 3)      = {third.multiply(3)}")

    shares = budget.allocate_equally(3)
    print(f"allocate_equally(3)     = {[str(s) for s in shares]}")

    shares = budget.allocate_by_ratio([3, 3, 7])
    print(f"allocate_by_ratio(3:3:7) = {[str(s) for s in shares]}")


if __name__ == "__main__":
    run()
