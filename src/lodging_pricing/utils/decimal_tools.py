from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TypeAlias


# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | str | int | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Convert supported scalar types into Decimal.

    Floats are converted via their string form so that `10.12745` becomes
    `Decimal("10.12745")` and not the binary approximation behind it.

    Args:
        value: Input value as Decimal, string, int or float.

    Returns:
        Value converted to Decimal.

    Raises:
        TypeError: If $value is a bool or not a Decimal-like scalar.
        ValueError: If $value cannot be parsed or is not finite.
    """
    # Raise: bool is an int subclass, but True/False are never amounts
    if isinstance(value, bool) or not isinstance(value, (Decimal, str, int, float)):
        raise TypeError(f"$value must be Decimal, str, int or float, but provided value is: {value!r} (type '{type(value).__name__}')")

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"$value ({value!r}) cannot be converted to Decimal") from e

    # Raise: NaN and Infinity have no monetary meaning
    if not result.is_finite():
        raise ValueError(f"$value must be a finite number, but provided value is: {value!r}")

    return result


def count_digits(value: Decimal | int) -> int:
    """Return how many digits it takes to write $value exactly in fixed-point notation.

    Leading zeros are not counted, trailing zeros implied by a positive exponent are
    (`Decimal("1E+3")` needs 4 digits). Used to size a decimal context so that products
    and quotients of monetary operands are not rounded before the final step.

    Args:
        value: An int or a finite Decimal.

    Returns:
        Digit count, at least 1.
    """
    if isinstance(value, int):
        return len(str(abs(value)))

    digits_and_exponent = value.as_tuple()
    return max(len(digits_and_exponent.digits) + max(digits_and_exponent.exponent, 0), 1)
