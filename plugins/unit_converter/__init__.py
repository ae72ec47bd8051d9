"""Unit converter plugin."""

manifest = {
    "title": "Unit Converter",
    "summary": "Convert pressure, volume, speed, temperature, length and mass with tidy display formatting.",
    "blueprint": "unit_converter",
    "category": "General Utilities",
    "icon": "img/UnitConverter_icon.png",
}


__all__ = ["manifest"]
