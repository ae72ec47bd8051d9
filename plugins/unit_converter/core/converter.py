"""Conversion and display formatting for the unit converter."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import asdict, dataclass, replace
from typing import Dict, List, Mapping, Optional

from .formatting import clean_decimal, number_to_string, to_exponential, to_fixed, to_precision
from .registry import Catalog, Category, ConversionError, Unit, default_catalog

logger = logging.getLogger("unit_converter.core")

SENTINEL = "---"
EXPONENTIAL_THRESHOLD = 1e-6
EXPONENTIAL_FRACTION_DIGITS = 4
MAX_PLAIN_LENGTH = 10
SIGNIFICANT_DIGITS = 6
DECIMAL_PLACES = 6
TEMPERATURE_RATIO_PLACES = 2

DEFAULT_AMOUNTS: Dict[str, str] = {
    "pressure": "101325",
    "temperature": "25",
    "speed": "100",
}
FALLBACK_AMOUNT = "1"

_AMOUNT_PATTERN = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII
)
# Space separators, line terminators and the byte order mark.
_LEADING_SPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class ParseError(ConversionError, ValueError):
    """Raised when user supplied text cannot be read as a number."""


class AmountParseError(ParseError):
    """Raised when an amount has no leading numeric value."""


@dataclass(frozen=True)
class Selection:
    """What the user is converting: an amount and a from/to unit pair."""

    category: str
    amount: str
    from_unit: str
    to_unit: str

    def swapped(self) -> "Selection":
        return replace(self, from_unit=self.to_unit, to_unit=self.from_unit)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def parse_amount(amount: str | float | int) -> float:
    """Read the leading decimal number from ``amount``.

    Leading whitespace is skipped and anything after the numeric prefix is
    ignored, so ``" 12.5kg"`` reads as ``12.5``. ``Infinity`` is accepted.
    Raises :class:`AmountParseError` when no number is found or the value is NaN.
    """

    if isinstance(amount, bool):
        raise AmountParseError("Amount must be text or a number.")
    if isinstance(amount, (int, float)):
        value = float(amount)
        if math.isnan(value):
            raise AmountParseError("Amount is not a number.")
        return value
    if not isinstance(amount, str):
        raise AmountParseError("Amount must be text or a number.")
    match = _AMOUNT_PATTERN.match(amount.lstrip(_LEADING_SPACE))
    if match is None:
        raise AmountParseError(f"Cannot read a number from {amount!r}.")
    return float(match.group(0))


def format_result(value: float) -> str:
    """Render a converted value for display.

    Rules, first match wins:

    1. non-finite values render as ``Infinity``, ``-Infinity`` or ``NaN``;
    2. non-zero magnitudes below ``1e-6`` use exponential notation with four
       fraction digits (``1.2345e-7``);
    3. values whose shortest decimal form is longer than ten characters are
       cut to six significant digits (``37.7778``, ``1.23457e+8``);
    4. everything else is rounded to six decimals with trailing zeroes removed.
    """

    if not math.isfinite(value):
        return number_to_string(value)
    if value != 0 and abs(value) < EXPONENTIAL_THRESHOLD:
        return to_exponential(value, EXPONENTIAL_FRACTION_DIGITS)
    if len(number_to_string(value)) > MAX_PLAIN_LENGTH:
        return to_precision(value, SIGNIFICANT_DIGITS)
    return clean_decimal(value, DECIMAL_PLACES)


def convert_units(amount: str | float | int, from_unit: Unit, to_unit: Unit) -> str:
    """Convert ``amount`` through the base unit and format it.

    Returns :data:`SENTINEL` when ``amount`` cannot be parsed.
    """

    try:
        value = parse_amount(amount)
    except ParseError as exc:
        logger.debug("amount not converted: %s", exc)
        return SENTINEL
    base = from_unit.to_base(value)
    return format_result(to_unit.from_base(base))


def format_ratio(from_unit: Unit, to_unit: Unit, category: Category | str) -> str:
    """Render ``"1 <from> = <value> <to>"``."""

    category_id = category if isinstance(category, str) else category.id
    value = to_unit.from_base(from_unit.to_base(1.0))
    if category_id == "temperature":
        rendered = to_fixed(value, TEMPERATURE_RATIO_PLACES)
    else:
        rendered = clean_decimal(value, DECIMAL_PLACES)
    return f"1 {from_unit.symbol} = {rendered} {to_unit.symbol}"


def swap(selection: Selection) -> Selection:
    """Exchange the from/to units of ``selection``; the amount is untouched."""

    return selection.swapped()


def default_selection(
    category: Category, amounts: Optional[Mapping[str, object]] = None
) -> Selection:
    """Selection shown when ``category`` is opened.

    The first unit converts into the second (or into itself for single-unit
    categories). ``amounts`` overrides the per-category starting amount.
    """

    from_unit, to_unit = category.default_pair()
    overrides = amounts or {}
    amount = overrides.get(category.id, DEFAULT_AMOUNTS.get(category.id, FALLBACK_AMOUNT))
    return Selection(
        category=category.id,
        amount=str(amount),
        from_unit=from_unit.id,
        to_unit=to_unit.id,
    )


class UnitConverter:
    """Id-based conversion API bound to a :class:`Catalog`."""

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()

    # ---- Listing helpers -------------------------------------------------
    def list_categories(self) -> List[Dict[str, object]]:
        return [category.describe() for category in self.catalog.categories()]

    def list_units(self, category_id: str) -> List[Dict[str, object]]:
        category = self.catalog.lookup_category(category_id)
        return [unit.describe() for unit in category.units]

    # ---- Conversion helpers ----------------------------------------------
    def convert(
        self,
        amount: str | float | int,
        category_id: str,
        from_unit_id: str,
        to_unit_id: str,
    ) -> str:
        category = self.catalog.lookup_category(category_id)
        from_unit = category.lookup_unit(from_unit_id)
        to_unit = category.lookup_unit(to_unit_id)
        return convert_units(amount, from_unit, to_unit)

    def ratio(self, category_id: str, from_unit_id: str, to_unit_id: str) -> str:
        category = self.catalog.lookup_category(category_id)
        from_unit = category.lookup_unit(from_unit_id)
        to_unit = category.lookup_unit(to_unit_id)
        return format_ratio(from_unit, to_unit, category)

    # ---- Selection helpers -----------------------------------------------
    def default_selection(
        self, category_id: str, amounts: Optional[Mapping[str, object]] = None
    ) -> Selection:
        return default_selection(self.catalog.lookup_category(category_id), amounts)

    def evaluate(self, selection: Selection) -> Dict[str, object]:
        """Return the converted result and ratio line for ``selection``."""

        return {
            "selection": selection.to_dict(),
            "result": self.convert(
                selection.amount,
                selection.category,
                selection.from_unit,
                selection.to_unit,
            ),
            "ratio": self.ratio(
                selection.category, selection.from_unit, selection.to_unit
            ),
        }

    def swap(self, selection: Selection) -> Dict[str, object]:
        """Swap from/to units and evaluate the swapped selection."""

        return self.evaluate(swap(selection))


__all__ = [
    "AmountParseError",
    "DEFAULT_AMOUNTS",
    "ParseError",
    "SENTINEL",
    "Selection",
    "UnitConverter",
    "convert_units",
    "default_selection",
    "format_ratio",
    "format_result",
    "parse_amount",
    "swap",
]
