"""Facade for the unit converter core utilities."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Mapping, Optional

from .converter import (
    SENTINEL,
    AmountParseError,
    ParseError,
    Selection,
    UnitConverter,
    convert_units,
    format_ratio,
    format_result,
    parse_amount,
)
from .registry import (
    CATEGORY_IDS,
    AffineTransform,
    Catalog,
    Category,
    ConversionError,
    LinearTransform,
    NotFoundError,
    Unit,
    UnknownCategoryError,
    UnknownUnitError,
    build_default_catalog,
    default_catalog,
)


@lru_cache(maxsize=1)
def _converter() -> UnitConverter:
    return UnitConverter(default_catalog())


def list_categories() -> List[Dict[str, object]]:
    """Return ``{id, name, icon}`` for every category, in display order."""

    return _converter().list_categories()


def list_units(category_id: str) -> List[Dict[str, object]]:
    """Return ``{id, name, symbol}`` for the units of ``category_id``."""

    return _converter().list_units(category_id)


def convert(
    amount: str | float | int, category_id: str, from_unit_id: str, to_unit_id: str
) -> str:
    """Convert ``amount`` between two units of one category for display."""

    return _converter().convert(amount, category_id, from_unit_id, to_unit_id)


def ratio(category_id: str, from_unit_id: str, to_unit_id: str) -> str:
    """Return the ``"1 X = Y Z"`` line for a unit pair."""

    return _converter().ratio(category_id, from_unit_id, to_unit_id)


def default_selection(
    category_id: str, amounts: Optional[Mapping[str, object]] = None
) -> Selection:
    return _converter().default_selection(category_id, amounts)


def swap(selection: Selection) -> Dict[str, object]:
    return _converter().swap(selection)


def evaluate(selection: Selection) -> Dict[str, object]:
    return _converter().evaluate(selection)


__all__ = [
    "AffineTransform",
    "AmountParseError",
    "CATEGORY_IDS",
    "Catalog",
    "Category",
    "ConversionError",
    "LinearTransform",
    "NotFoundError",
    "ParseError",
    "SENTINEL",
    "Selection",
    "Unit",
    "UnitConverter",
    "UnknownCategoryError",
    "UnknownUnitError",
    "build_default_catalog",
    "convert",
    "convert_units",
    "default_catalog",
    "default_selection",
    "evaluate",
    "format_ratio",
    "format_result",
    "list_categories",
    "list_units",
    "parse_amount",
    "ratio",
    "swap",
]
