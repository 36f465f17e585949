from __future__ import annotations

from collections.abc import Sequence
from decimal import Context, Decimal, ROUND_05UP, localcontext

from lodging_pricing.domain.monetary.currency import Currency
from lodging_pricing.domain.monetary.errors import CurrencyMismatchError, MissingCurrencyError
from lodging_pricing.domain.monetary.rounding import DEFAULT_ROUNDING, RoundingMode
from lodging_pricing.utils.decimal_tools import DecimalLike, as_decimal, count_digits

# Minimum precision (significant digits) of every intermediate decimal computation.
# It grows with the operands, so large amounts are never rounded before the final step.
WORKING_PRECISION = 28

_ONE = Decimal(1)


def _precision_for(*values: Decimal | int) -> int:
    # Two guard digits keep ROUND_05UP intermediate results safe to round a second time
    return max(WORKING_PRECISION, sum(count_digits(v) for v in values) + 2)


def _round_to_minor_units(value: Decimal, rounding: RoundingMode) -> int:
    # Caller must run this inside a context wide enough for the integer part of $value
    return int(value.quantize(_ONE, rounding=rounding.value))


def _require_rounding(rounding: RoundingMode, operation: str) -> None:
    # Raise: rounding must be an explicit RoundingMode, never a bare string or None
    if not isinstance(rounding, RoundingMode):
        raise TypeError(f"Cannot call `{operation}` because $rounding is not RoundingMode (got type '{type(rounding).__name__}')")


def _require_currency(currency: Currency) -> None:
    # Raise: every monetary value carries a currency
    if currency is None:
        raise MissingCurrencyError("Money")
    if not isinstance(currency, Currency):
        raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")


class Money:
    """Immutable monetary amount stored as an integer count of the currency's minor unit.

    A value of 10.13 BRL is kept as `1013` centavos; no fractional minor unit is ever
    stored. Every operation returns a new `Money` (or $self when the operation is a
    documented no-op), so values can be shared freely.

    Two values interoperate (add, subtract, compare) only when their currencies are
    equal; otherwise `CurrencyMismatchError` is raised. Equality never raises: values
    in different currencies are simply not equal.

    Construction:
        - `Money.of_major(Decimal("10.12745"), BRL)` rounds once to minor units (HALF_EVEN by default).
        - `Money.of_minor(1013, BRL)` (or `Money(1013, BRL)`) takes minor units as they are.

    Rounding:
        `multiply`, `divide` and `of_major` default to `RoundingMode.HALF_EVEN`.
        Intermediate results are computed with enough digits that this final rounding
        is the only one that affects the result.

    Splitting:
        Use `allocate_equally` or `allocate_by_ratio` to split an amount. Their shares
        always sum to the original amount; `divide` gives no such guarantee.
    """

    __slots__ = ("_minor_units", "_currency")

    def __init__(self, minor_units: int, currency: Currency):
        """Initialize Money from an amount already expressed in minor units.

        Args:
            minor_units: Integer count of the currency's minor unit (e.g., cents).
            currency (Currency): Currency object; must not be None.

        Raises:
            MissingCurrencyError: If $currency is None.
            TypeError: If $currency is not a Currency or $minor_units is not an int.
        """
        _require_currency(currency)

        # Raise: fractional minor units cannot exist; bool is rejected although it subclasses int
        if isinstance(minor_units, bool) or not isinstance(minor_units, int):
            raise TypeError(f"$minor_units must be an int, but provided value is: {minor_units!r} (type '{type(minor_units).__name__}')")

        self._minor_units = minor_units
        self._currency = currency

    # region Factories

    @classmethod
    def of_major(cls, amount: DecimalLike, currency: Currency, rounding: RoundingMode = DEFAULT_ROUNDING) -> Money:
        """Create Money from an amount in major units (e.g., reais, dollars).

        Integers are scaled exactly. Other values are converted to Decimal (floats via
        their string form) and rounded once to whole minor units.

        Args:
            amount: Major-unit amount as int, Decimal, str or float.
            currency (Currency): Currency object; must not be None.
            rounding (RoundingMode): How to round the surplus fraction of a minor unit.

        Returns:
            Money: New instance holding the rounded amount.

        Raises:
            MissingCurrencyError: If $currency is None.
            TypeError: If $amount or $rounding has an unsupported type.
            ValueError: If $amount cannot be converted to a finite Decimal.
        """
        _require_currency(currency)
        _require_rounding(rounding, "Money.of_major")

        if isinstance(amount, int) and not isinstance(amount, bool):
            return cls(amount * currency.minor_unit_factor, currency)

        try:
            major = as_decimal(amount)
        except ValueError as e:
            raise ValueError(f"Cannot call `Money.of_major` because $amount ({amount!r}) cannot be converted to Decimal") from e

        with localcontext() as ctx:
            ctx.prec = _precision_for(major, currency.minor_unit_factor)
            minor_units = _round_to_minor_units(major.scaleb(currency.fraction_digits), rounding)

        return cls(minor_units, currency)

    @classmethod
    def of_minor(cls, minor_units: int, currency: Currency) -> Money:
        """Create Money from minor units (e.g., cents) without any conversion."""
        return cls(minor_units, currency)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """Zero amount of $currency; the neutral start of a sum."""
        return cls(0, currency)

    # endregion

    # region Properties

    @property
    def minor_units(self) -> int:
        """Get the amount as an integer count of minor units."""
        return self._minor_units

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def amount(self) -> Decimal:
        """Get the exact amount in major units, with $currency.fraction_digits decimal places."""
        context = Context(prec=_precision_for(self._minor_units))
        return Decimal(self._minor_units).scaleb(-self._currency.fraction_digits, context=context)

    def is_zero(self) -> bool:
        return self._minor_units == 0

    def is_positive(self) -> bool:
        return self._minor_units > 0

    def is_negative(self) -> bool:
        return self._minor_units < 0

    # endregion

    # region Arithmetic

    def _check_same_currency(self, other: Money, operation: str) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            TypeError: If $other is not Money.
            CurrencyMismatchError: If currencies don't match.
        """
        if not isinstance(other, Money):
            raise TypeError(f"Cannot call `{operation}` because $other is not Money (got type '{type(other).__name__}')")
        if self._currency != other._currency:
            raise CurrencyMismatchError(self._currency, other._currency, operation)

    def add(self, other: Money | None) -> Money:
        """Return the sum of $self and $other.

        A None $other is the identity and returns $self unchanged, so a running total can
        start from any value without special cases.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        if other is None:
            return self
        self._check_same_currency(other, "add")
        return Money(self._minor_units + other._minor_units, self._currency)

    def subtract(self, other: Money | None) -> Money:
        """Return $self minus $other; a None $other returns $self unchanged.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        if other is None:
            return self
        self._check_same_currency(other, "subtract")
        return Money(self._minor_units - other._minor_units, self._currency)

    def _as_scalar(self, scalar: DecimalLike, operation: str) -> Decimal:
        try:
            return as_decimal(scalar)
        except ValueError as e:
            raise ValueError(f"Cannot call `{operation}` because $scalar ({scalar!r}) cannot be converted to Decimal") from e

    def multiply(self, scalar: DecimalLike, rounding: RoundingMode = DEFAULT_ROUNDING) -> Money:
        """Multiply the amount by a Decimal-like $scalar and round to whole minor units.

        Multiplying by exactly 1 returns $self without going through rounding.

        Args:
            scalar: Factor as Decimal, int, str or float (floats via their string form).
            rounding (RoundingMode): Rounding applied to the product.

        Returns:
            Money: round($minor_units * $scalar) in the same currency.
        """
        factor = self._as_scalar(scalar, "multiply")
        _require_rounding(rounding, "multiply")

        if factor == 1:
            return self

        with localcontext() as ctx:
            # Product of two exact operands is exact at this precision
            ctx.prec = _precision_for(self._minor_units, factor)
            product = Decimal(self._minor_units) * factor
            return Money(_round_to_minor_units(product, rounding), self._currency)

    def divide(self, scalar: DecimalLike, rounding: RoundingMode = DEFAULT_ROUNDING) -> Money:
        """Divide the amount by a Decimal-like $scalar and round to whole minor units.

        This is scalar division, not distribution: dividing 200.00 by 3 and handing the
        result to three people pays out 199.99. Use `allocate_equally` or
        `allocate_by_ratio` to split an amount among recipients.

        Dividing by exactly 1 returns $self.

        Args:
            scalar: Divisor as Decimal, int, str or float; must not be zero.
            rounding (RoundingMode): Rounding applied to the quotient.

        Returns:
            Money: round($minor_units / $scalar) in the same currency.

        Raises:
            ZeroDivisionError: If $scalar is zero.
        """
        divisor = self._as_scalar(scalar, "divide")
        _require_rounding(rounding, "divide")

        # Raise: division by zero has no monetary result
        if divisor == 0:
            raise ZeroDivisionError(f"Cannot call `divide` because $scalar ({scalar!r}) is zero")

        if divisor == 1:
            return self

        with localcontext() as ctx:
            # ROUND_05UP keeps enough information in the last guard digit that the
            # final rounding to minor units is correct for every RoundingMode
            ctx.prec = _precision_for(self._minor_units, divisor) + max(-divisor.as_tuple().exponent, 0)
            ctx.rounding = ROUND_05UP
            quotient = Decimal(self._minor_units) / divisor
            return Money(_round_to_minor_units(quotient, rounding), self._currency)

    # endregion

    # region Allocation

    def allocate_equally(self, n: int) -> list[Money]:
        """Split the amount into $n shares that sum exactly to $self.

        Shares differ by at most one minor unit. When the amount does not divide evenly,
        the first `amount % n` shares receive the larger value:
        200.00 split 3 ways is [66.67, 66.67, 66.66].

        Args:
            n: Number of shares; must be positive.

        Returns:
            list[Money]: $n shares in the same currency.

        Raises:
            TypeError: If $n is not an int.
            ValueError: If $n <= 0.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Cannot call `allocate_equally` because $n is not int (got type '{type(n).__name__}')")

        # Raise: at least one share is needed to hold the amount
        if n <= 0:
            raise ValueError(f"Cannot call `allocate_equally` because $n ({n}) <= 0")

        low, remainder = divmod(self._minor_units, n)
        high = low + 1
        return [Money(high if i < remainder else low, self._currency) for i in range(n)]

    def allocate_by_ratio(self, ratios: Sequence[int]) -> list[Money]:
        """Split the amount proportionally to $ratios; the shares sum exactly to $self.

        Each share starts as floor($minor_units * ratio / sum(ratios)). The minor units
        lost to flooring are then handed out one at a time from index 0 onwards, so the
        earliest shares may exceed their exact proportion by one minor unit (even a share
        whose ratio is 0). 200.00 split [3, 3, 7] is [46.16, 46.15, 107.69].

        Args:
            ratios: Non-negative integer weights, one per share.

        Returns:
            list[Money]: One share per ratio, in the same order.

        Raises:
            TypeError: If a ratio is not an int.
            ValueError: If $ratios is empty, contains a negative value, or sums to zero.
        """
        weights = list(ratios)

        # Raise: nothing to allocate into
        if not weights:
            raise ValueError("Cannot call `allocate_by_ratio` because $ratios is empty")

        for index, ratio in enumerate(weights):
            if isinstance(ratio, bool) or not isinstance(ratio, int):
                raise TypeError(f"Cannot call `allocate_by_ratio` because $ratios[{index}] is not int (got type '{type(ratio).__name__}')")
            if ratio < 0:
                raise ValueError(f"Cannot call `allocate_by_ratio` because $ratios[{index}] ({ratio}) is negative")

        total = sum(weights)

        # Raise: proportions are undefined when every ratio is zero
        if total == 0:
            raise ValueError(f"Cannot call `allocate_by_ratio` because all $ratios are zero: {weights}")

        shares = [self._minor_units * ratio // total for ratio in weights]
        remainder = self._minor_units - sum(shares)
        for i in range(remainder):
            shares[i] += 1

        return [Money(share, self._currency) for share in shares]

    # endregion

    # region Comparison

    def compare_to(self, other: Money) -> int:
        """Compare minor-unit amounts: -1 if $self is smaller, 0 if equal, 1 if larger.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        self._check_same_currency(other, "compare_to")
        return (self._minor_units > other._minor_units) - (self._minor_units < other._minor_units)

    def __eq__(self, other) -> bool:
        """Check equality with another Money object (same currency and amount)."""
        if not isinstance(other, Money):
            return False
        return self._currency == other._currency and self._minor_units == other._minor_units

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self._minor_units, self._currency.code))

    # endregion

    # region Operators

    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply Money by a number (HALF_EVEN rounding)."""
        if isinstance(other, (Money, bool)) or not isinstance(other, (Decimal, int, float)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by a number (HALF_EVEN rounding)."""
        if isinstance(other, (Money, bool)) or not isinstance(other, (Decimal, int, float)):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> Money:
        return Money(-self._minor_units, self._currency)

    def __abs__(self) -> Money:
        return Money(abs(self._minor_units), self._currency)

    # endregion

    # region String representations

    def to_display_string(self) -> str:
        """Return the currency symbol followed by the major-unit amount, e.g. 'R$-189.87'."""
        return f"{self._currency.symbol}{self.amount:f}"

    def __str__(self) -> str:
        """Return string like 'R$1000.50'."""
        return self.to_display_string()

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, BRL)'."""
        return f"{self.__class__.__name__}({self.amount:f}, {self._currency.code})"

    # endregion
