"""Number-to-text primitives used by the result formatter.

Every rounding here works on the exact binary value of the double and breaks
ties away from zero (``ROUND_HALF_UP``), so ``0.125`` rounds to ``0.13`` while
``0.3`` (stored as ``0.299999...``) never creeps upwards.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Tuple

# Shortest round-trip output stays positional for 1e-6 <= |x| < 1e21.
_MAX_POSITIONAL_POINT = 21
_MIN_POSITIONAL_POINT = -6


def _non_finite(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return None


def _exponent_suffix(exponent: int) -> str:
    return f"e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def _mantissa(digits: str) -> str:
    return digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"


def _shortest_digits(value: float) -> Tuple[str, int]:
    """Return the shortest round-trip digits of positive ``value``.

    The second item is the position of the decimal point relative to the first
    digit, i.e. ``value == 0.<digits> * 10 ** point``.
    """

    normalized = Decimal(repr(value)).normalize()
    _, digit_tuple, exponent = normalized.as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple)
    return digits, int(exponent) + len(digits)


def _round_significant(value: float, significant: int) -> Tuple[str, int]:
    """Round ``abs(value)`` to ``significant`` digits.

    Returns the digit string (exactly ``significant`` long) and the decimal
    exponent of its first digit.
    """

    exact = Decimal(abs(value))
    exponent = exact.adjusted()
    with localcontext() as ctx:
        ctx.prec = significant + 2
        rounded = exact.quantize(
            Decimal(1).scaleb(exponent - significant + 1), rounding=ROUND_HALF_UP
        )
        if rounded.adjusted() > exponent:
            # 9.99996 -> 10.0000 carried into a new leading digit
            exponent += 1
            rounded = exact.quantize(
                Decimal(1).scaleb(exponent - significant + 1), rounding=ROUND_HALF_UP
            )
    digits = "".join(str(digit) for digit in rounded.as_tuple().digits)
    return digits, exponent


def number_to_string(value: float) -> str:
    """Render the shortest decimal string that round-trips to ``value``.

    Positional notation is used while the decimal exponent lies in ``[-6, 21)``;
    outside that window the output switches to ``1.5e-7`` / ``1e+21`` form.
    Negative zero renders as ``"0"``.
    """

    text = _non_finite(value)
    if text is not None:
        return text
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    count = len(digits)
    if count <= point <= _MAX_POSITIONAL_POINT:
        body = digits + "0" * (point - count)
    elif 0 < point <= _MAX_POSITIONAL_POINT:
        body = f"{digits[:point]}.{digits[point:]}"
    elif _MIN_POSITIONAL_POINT < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        body = _mantissa(digits) + _exponent_suffix(point - 1)
    return sign + body


def to_exponential(value: float, fraction_digits: int) -> str:
    """Render ``value`` as ``d.ddddde±x`` with ``fraction_digits`` after the point."""

    if fraction_digits < 0:
        raise ValueError("fraction_digits must be non-negative.")
    text = _non_finite(value)
    if text is not None:
        return text
    if value == 0:
        return _mantissa("0" * (fraction_digits + 1)) + "e+0"
    sign = "-" if value < 0 else ""
    digits, exponent = _round_significant(value, fraction_digits + 1)
    return sign + _mantissa(digits) + _exponent_suffix(exponent)


def to_precision(value: float, precision: int) -> str:
    """Render ``value`` with ``precision`` significant digits.

    Positional output is used when the decimal exponent lies in
    ``[-6, precision)``, exponential output otherwise. Trailing zeroes are kept
    (``to_precision(1.5, 6) == "1.50000"``).
    """

    if precision < 1:
        raise ValueError("precision must be at least 1.")
    text = _non_finite(value)
    if text is not None:
        return text
    if value == 0:
        return _mantissa("0" * precision)
    sign = "-" if value < 0 else ""
    digits, exponent = _round_significant(value, precision)
    if exponent < _MIN_POSITIONAL_POINT or exponent >= precision:
        return sign + _mantissa(digits) + _exponent_suffix(exponent)
    if exponent >= 0:
        whole, fraction = digits[: exponent + 1], digits[exponent + 1 :]
        return sign + (f"{whole}.{fraction}" if fraction else whole)
    return sign + "0." + "0" * (-exponent - 1) + digits


def to_fixed(value: float, fraction_digits: int) -> str:
    """Render ``value`` with exactly ``fraction_digits`` decimals.

    Magnitudes of ``1e21`` and above fall back to :func:`number_to_string`.
    """

    if fraction_digits < 0:
        raise ValueError("fraction_digits must be non-negative.")
    text = _non_finite(value)
    if text is not None:
        return text
    if abs(value) >= 1e21:
        return number_to_string(value)
    if value == 0:
        value = 0.0
    with localcontext() as ctx:
        ctx.prec = _MAX_POSITIONAL_POINT + fraction_digits + 2
        rounded = Decimal(value).quantize(
            Decimal(1).scaleb(-fraction_digits), rounding=ROUND_HALF_UP
        )
    return format(rounded, "f")


def clean_decimal(value: float, places: int) -> str:
    """Round to ``places`` decimals, then drop trailing zeroes and point.

    ``1.5`` stays ``"1.5"``, ``2.0000000001`` becomes ``"2"`` and
    ``0.1 + 0.2`` becomes ``"0.3"``.
    """

    return number_to_string(float(to_fixed(value, places)))


__all__ = [
    "clean_decimal",
    "number_to_string",
    "to_exponential",
    "to_fixed",
    "to_precision",
]
