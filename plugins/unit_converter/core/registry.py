"""Category and unit catalog for the unit converter core."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Iterable, Tuple, Union

CATEGORY_IDS: Tuple[str, ...] = (
    "pressure",
    "volume",
    "speed",
    "temperature",
    "length",
    "mass",
)


class ConversionError(Exception):
    """Base exception for conversion failures."""


class NotFoundError(ConversionError, LookupError):
    """Raised when a category or unit id is not part of the catalog."""


class UnknownCategoryError(NotFoundError):
    """Raised when a category id is not in the catalog."""

    def __init__(self, category_id: str) -> None:
        super().__init__(f"Unknown category '{category_id}'.")
        self.category_id = category_id


class UnknownUnitError(NotFoundError):
    """Raised when a unit id is absent from a category."""

    def __init__(self, category_id: str, unit_id: str) -> None:
        super().__init__(f"Unknown unit '{unit_id}' in category '{category_id}'.")
        self.category_id = category_id
        self.unit_id = unit_id


@dataclass(frozen=True)
class LinearTransform:
    """``1 unit = factor`` base units."""

    factor: float

    def __post_init__(self) -> None:
        if not self.factor > 0 or math.isinf(self.factor):
            raise ValueError("Linear factor must be a positive finite number.")

    def to_base(self, value: float) -> float:
        return value * self.factor

    def from_base(self, value: float) -> float:
        return value / self.factor

    def describe(self) -> Dict[str, object]:
        return {"kind": "linear", "factor": self.factor}


@dataclass(frozen=True)
class AffineTransform:
    """Scale-and-offset map relative to the base unit.

    ``to_base(v) = (v - offset) * numerator / denominator`` and the inverse
    ``from_base(v) = v * denominator / numerator + offset``. The scale is applied
    as a multiply then a divide, so ``(212 - 32) * 5 / 9`` is exactly ``100``.
    """

    offset: float = 0.0
    numerator: int = 1
    denominator: int = 1

    def __post_init__(self) -> None:
        if self.numerator <= 0 or self.denominator <= 0:
            raise ValueError("Affine scale terms must be positive.")

    def to_base(self, value: float) -> float:
        return (value - self.offset) * self.numerator / self.denominator

    def from_base(self, value: float) -> float:
        return value * self.denominator / self.numerator + self.offset

    def describe(self) -> Dict[str, object]:
        return {
            "kind": "affine",
            "offset": self.offset,
            "numerator": self.numerator,
            "denominator": self.denominator,
        }


Transform = Union[LinearTransform, AffineTransform]


@dataclass(frozen=True)
class Unit:
    """A unit of measure exposed to the UI."""

    id: str
    name: str
    symbol: str
    transform: Transform
    reference: str | None = field(default=None, compare=False)

    def to_base(self, value: float) -> float:
        return self.transform.to_base(value)

    def from_base(self, value: float) -> float:
        return self.transform.from_base(value)

    def describe(self) -> Dict[str, object]:
        return {"id": self.id, "name": self.name, "symbol": self.symbol}


@dataclass(frozen=True)
class Category:
    """An ordered group of units sharing one base unit."""

    id: str
    name: str
    icon: str
    units: Tuple[Unit, ...]

    def __post_init__(self) -> None:
        if not self.units:
            raise ValueError(f"Category '{self.id}' must define at least one unit.")
        seen: set[str] = set()
        for unit in self.units:
            if unit.id in seen:
                raise ValueError(
                    f"Duplicate unit id '{unit.id}' in category '{self.id}'."
                )
            seen.add(unit.id)

    def lookup_unit(self, unit_id: str) -> Unit:
        for unit in self.units:
            if unit.id == unit_id:
                return unit
        raise UnknownUnitError(self.id, unit_id)

    def default_pair(self) -> Tuple[Unit, Unit]:
        """Return the default ``(from, to)`` units for this category."""

        first = self.units[0]
        second = self.units[1] if len(self.units) > 1 else first
        return first, second

    def describe(self) -> Dict[str, object]:
        return {"id": self.id, "name": self.name, "icon": self.icon}


@dataclass(frozen=True)
class Catalog:
    """Immutable, ordered set of categories handed to the converter."""

    entries: Tuple[Category, ...]

    def __post_init__(self) -> None:
        ids = [category.id for category in self.entries]
        if len(ids) != len(set(ids)):
            raise ValueError("Category ids must be unique.")

    def categories(self) -> Tuple[Category, ...]:
        return self.entries

    def lookup_category(self, category_id: str) -> Category:
        for category in self.entries:
            if category.id == category_id:
                return category
        raise UnknownCategoryError(category_id)

    def lookup_unit(self, category: Category | str, unit_id: str) -> Unit:
        if isinstance(category, str):
            category = self.lookup_category(category)
        return category.lookup_unit(unit_id)


def _linear(
    unit_id: str, name: str, symbol: str, factor: float, reference: str
) -> Unit:
    return Unit(unit_id, name, symbol, LinearTransform(factor), reference)


def _category(
    category_id: str, name: str, icon: str, units: Iterable[Unit]
) -> Category:
    return Category(category_id, name, icon, tuple(units))


# Exact where the quantity is defined exactly (foot, pound, atm, kgf, ...).
_DEFINITIONS: Tuple[Category, ...] = (
    _category(
        "pressure",
        "Pressure",
        "compress",
        [
            _linear("pa", "Pascal", "Pa", 1.0, "pascal"),
            _linear("kpa", "Kilopascal", "kPa", 1e3, "kilopascal"),
            _linear("mpa", "Megapascal", "MPa", 1e6, "megapascal"),
            _linear("bar", "Bar", "bar", 1e5, "bar"),
            _linear("psi", "PSI", "psi", 6894.757293168361, "psi"),
            _linear(
                "kgf",
                "Kilogram-force/cm²",
                "kgf/cm²",
                98066.5,
                "kilogram_force / centimeter ** 2",
            ),
            _linear("atm", "Atmosphere", "atm", 101325.0, "atmosphere"),
            _linear("torr", "Torr", "Torr", 101325.0 / 760, "torr"),
            _linear("mmhg", "mmHg", "mmHg", 133.322387415, "millimeter_Hg"),
        ],
    ),
    _category(
        "volume",
        "Volume",
        "square",
        [
            _linear("l", "Liter", "L", 1.0, "liter"),
            _linear("ml", "Milliliter", "mL", 1e-3, "milliliter"),
            _linear("gal", "Gallon (US)", "gal", 3.785411784, "gallon"),
            _linear("floz", "Fluid Ounce", "fl oz", 0.0295735295625, "fluid_ounce"),
            _linear("m3", "Cubic Meter", "m³", 1e3, "meter ** 3"),
        ],
    ),
    _category(
        "speed",
        "Speed",
        "speed",
        [
            _linear("mps", "Meter per second", "m/s", 1.0, "meter / second"),
            _linear(
                "kmh", "Kilometer per hour", "km/h", 1000 / 3600, "kilometer / hour"
            ),
            _linear("mph", "Miles per hour", "mph", 0.44704, "mile / hour"),
            _linear("kn", "Knot", "kn", 1852 / 3600, "knot"),
            _linear("ft", "Foot per second", "ft/s", 0.3048, "foot / second"),
        ],
    ),
    _category(
        "temperature",
        "Temp",
        "thermometer",
        [
            Unit("c", "Celsius", "°C", AffineTransform(), "degC"),
            Unit("f", "Fahrenheit", "°F", AffineTransform(32.0, 5, 9), "degF"),
            Unit("k", "Kelvin", "K", AffineTransform(273.15), "kelvin"),
        ],
    ),
    _category(
        "length",
        "Length",
        "straighten",
        [
            _linear("m", "Meter", "m", 1.0, "meter"),
            _linear("km", "Kilometer", "km", 1e3, "kilometer"),
            _linear("cm", "Centimeter", "cm", 0.01, "centimeter"),
            _linear("mm", "Millimeter", "mm", 1e-3, "millimeter"),
            _linear("mi", "Mile", "mi", 1609.344, "mile"),
            _linear("ft", "Foot", "ft", 0.3048, "foot"),
            _linear("in", "Inch", "in", 0.0254, "inch"),
        ],
    ),
    _category(
        "mass",
        "Mass",
        "scale",
        [
            _linear("kg", "Kilogram", "kg", 1.0, "kilogram"),
            _linear("g", "Gram", "g", 1e-3, "gram"),
            _linear("lb", "Pound", "lb", 0.45359237, "pound"),
            _linear("oz", "Ounce", "oz", 0.028349523125, "ounce"),
            _linear("t", "Metric Ton", "t", 1e3, "metric_ton"),
        ],
    ),
)


def build_default_catalog() -> Catalog:
    """Return a fresh catalog holding the built-in categories."""

    return Catalog(_DEFINITIONS)


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """Return the process-wide default :class:`Catalog`."""

    return build_default_catalog()


__all__ = [
    "AffineTransform",
    "CATEGORY_IDS",
    "Catalog",
    "Category",
    "ConversionError",
    "LinearTransform",
    "NotFoundError",
    "Transform",
    "Unit",
    "UnknownCategoryError",
    "UnknownUnitError",
    "build_default_catalog",
    "default_catalog",
]
