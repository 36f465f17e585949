from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lodging_pricing.domain.monetary.currency import Currency


class CurrencyMismatchError(ValueError):
    """Raised when two monetary values of different currencies are combined or compared."""

    def __init__(self, left: Currency, right: Currency, operation: str):
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(f"Cannot call `{operation}` on different currencies: {left} and {right}")


class MissingCurrencyError(TypeError):
    """Raised when a monetary value is constructed without a currency."""

    def __init__(self, owner: str):
        self.owner = owner
        super().__init__(f"Cannot init `{owner}` because $currency is None")
