import pytest

from plugins.unit_converter.core import default_catalog
from plugins.unit_converter.core.reference import (
    ReferenceUnavailableError,
    reference_convert,
    verify_catalog,
)
from plugins.unit_converter.core.registry import LinearTransform, Unit


def test_catalog_agrees_with_pint():
    rows = verify_catalog(default_catalog())
    assert len(rows) == sum(len(c.units) for c in default_catalog().categories())
    worst = max(rows, key=lambda row: row["deviation"])
    assert worst["deviation"] < 1e-6, worst


def test_reference_temperature_conversion():
    catalog = default_catalog()
    celsius = catalog.lookup_unit("temperature", "c")
    fahrenheit = catalog.lookup_unit("temperature", "f")
    assert reference_convert(0.0, celsius, fahrenheit) == pytest.approx(32.0)
    assert reference_convert(-40.0, fahrenheit, celsius) == pytest.approx(-40.0)


def test_exact_constants_match_pint():
    catalog = default_catalog()
    meter = catalog.lookup_unit("length", "m")
    foot = catalog.lookup_unit("length", "ft")
    assert reference_convert(1.0, foot, meter) == pytest.approx(0.3048, rel=1e-12)
    pound = catalog.lookup_unit("mass", "lb")
    kilogram = catalog.lookup_unit("mass", "kg")
    assert reference_convert(1.0, pound, kilogram) == pytest.approx(0.45359237, rel=1e-12)


def test_unit_without_reference_is_rejected():
    bare = Unit("x", "Mystery", "x", LinearTransform(1.0))
    meter = default_catalog().lookup_unit("length", "m")
    with pytest.raises(ReferenceUnavailableError):
        reference_convert(1.0, bare, meter)
