"""Cross-check the built-in catalog against :mod:`pint` definitions."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List

from pint import UnitRegistry
from pint.errors import UndefinedUnitError

from .registry import Catalog, Category, ConversionError, Unit


class ReferenceUnavailableError(ConversionError):
    """Raised when a unit has no usable pint expression."""


def _build_registry() -> UnitRegistry:
    registry = UnitRegistry(autoconvert_offset_to_baseunit=True)
    return registry


@lru_cache(maxsize=1)
def get_registry() -> UnitRegistry:
    """Return a singleton :class:`~pint.UnitRegistry` instance."""

    return _build_registry()


def _pint_unit(unit: Unit):
    if not unit.reference:
        raise ReferenceUnavailableError(f"Unit '{unit.id}' has no reference expression.")
    try:
        return get_registry().Unit(unit.reference)
    except UndefinedUnitError as exc:
        raise ReferenceUnavailableError(str(exc)) from exc


def reference_convert(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """Convert ``value`` with pint using the units' reference expressions."""

    quantity = get_registry().Quantity(value, _pint_unit(from_unit))
    return float(quantity.to(_pint_unit(to_unit)).magnitude)


def _deviation(expected: float, actual: float) -> float:
    scale = max(abs(expected), abs(actual))
    if scale == 0:
        return 0.0
    return abs(expected - actual) / scale


def verify_category(category: Category) -> List[Dict[str, object]]:
    """Compare each unit of ``category`` with pint at a few probe values.

    The first unit acts as the base; the reported deviation is the largest
    relative difference between the catalog and pint across the probes.
    """

    base = category.units[0]
    report: List[Dict[str, object]] = []
    for unit in category.units:
        worst = 0.0
        for probe in (-40.0, 1.0, 250.0):
            expected = reference_convert(probe, unit, base)
            actual = base.from_base(unit.to_base(probe))
            worst = max(worst, _deviation(expected, actual))
        report.append(
            {
                "category": category.id,
                "unit": unit.id,
                "reference": unit.reference,
                "deviation": worst,
            }
        )
    return report


def verify_catalog(catalog: Catalog) -> List[Dict[str, object]]:
    """Return :func:`verify_category` rows for every category in ``catalog``."""

    rows: List[Dict[str, object]] = []
    for category in catalog.categories():
        rows.extend(verify_category(category))
    return rows


__all__ = [
    "ReferenceUnavailableError",
    "get_registry",
    "reference_convert",
    "verify_catalog",
    "verify_category",
]
