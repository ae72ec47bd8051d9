"""Command line interface for the Unit Converter plugin."""

from __future__ import annotations

import argparse
import json
from typing import Any

from .core import (
    NotFoundError,
    convert,
    default_catalog,
    list_categories,
    list_units,
    ratio,
)
from .core.reference import verify_catalog

# Largest relative gap to pint tolerated by ``verify``.
VERIFY_TOLERANCE = 1e-6


def _print(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def command_categories(args: argparse.Namespace) -> None:
    _print(list_categories())


def command_units(args: argparse.Namespace) -> None:
    _print(list_units(args.category))


def command_convert(args: argparse.Namespace) -> None:
    _print(
        {
            "result": convert(args.amount, args.category, args.from_unit, args.to_unit),
            "ratio": ratio(args.category, args.from_unit, args.to_unit),
        }
    )


def command_ratio(args: argparse.Namespace) -> None:
    _print({"ratio": ratio(args.category, args.from_unit, args.to_unit)})


def command_verify(args: argparse.Namespace) -> int:
    rows = verify_catalog(default_catalog())
    failures = [row for row in rows if row["deviation"] > args.tolerance]
    _print({"checked": len(rows), "failures": failures})
    return 1 if failures else 0


def _add_pair_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("category", help="Category id (e.g. length)")
    parser.add_argument("from_unit", help="Source unit id (e.g. m)")
    parser.add_argument("to_unit", help="Target unit id (e.g. ft)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Unit Converter CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    categories_parser = subparsers.add_parser("categories", help="List categories")
    categories_parser.set_defaults(func=command_categories)

    units_parser = subparsers.add_parser("units", help="List the units of a category")
    units_parser.add_argument("category", help="Category id")
    units_parser.set_defaults(func=command_units)

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert an amount",
        epilog="Put -- before a negative amount: convert -- -1e3 length m ft",
    )
    convert_parser.add_argument(
        "amount", help="Amount text, e.g. 101325 or 1.5e3 (use -- before -1e3)"
    )
    _add_pair_arguments(convert_parser)
    convert_parser.set_defaults(func=command_convert)

    ratio_parser = subparsers.add_parser("ratio", help="Show the 1 X = Y Z line")
    _add_pair_arguments(ratio_parser)
    ratio_parser.set_defaults(func=command_ratio)

    verify_parser = subparsers.add_parser("verify", help="Compare the catalog with pint")
    verify_parser.add_argument(
        "--tolerance", type=float, default=VERIFY_TOLERANCE, help="Relative tolerance"
    )
    verify_parser.set_defaults(func=command_verify)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        status = args.func(args)
    except NotFoundError as exc:
        parser.exit(2, f"error: {exc}\n")
    return status or 0


if __name__ == "__main__":
    raise SystemExit(main())
