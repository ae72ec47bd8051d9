"""Unit converter API with standardized responses."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request
from pydantic import StrictFloat, StrictInt, StrictStr

from common.errors import NotFoundAppError, ValidationAppError
from common.logging import get_logger
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import (
    NotFoundError,
    Selection,
    UnknownCategoryError,
    default_selection,
    evaluate,
    list_categories,
    list_units,
    ratio,
    swap,
)

logger = get_logger("unit_converter.api")


class SelectionPayload(SchemaModel):
    category: str
    amount: StrictStr | StrictFloat | StrictInt = ""
    from_unit: str
    to_unit: str

    def to_selection(self) -> Selection:
        return Selection(
            category=self.category,
            amount=str(self.amount),
            from_unit=self.from_unit,
            to_unit=self.to_unit,
        )


class RatioQuery(SchemaModel):
    category: str
    from_unit: str
    to_unit: str


api_bp = Blueprint("unit_converter_api", __name__, url_prefix="/api/unit_converter")


def _plugin_settings() -> dict:
    settings = current_app.config.get("PLUGIN_SETTINGS", {}) or {}
    return settings.get("unit_converter", {}) or {}


def _not_found(exc: NotFoundError) -> Response:
    code = (
        "unit.unknown_category"
        if isinstance(exc, UnknownCategoryError)
        else "unit.unknown_unit"
    )
    logger.warning("lookup failed: %s", exc)
    return fail(NotFoundAppError(message=str(exc), code=code))


def _invalid(exc: ValidationError) -> Response:
    return fail(
        ValidationAppError(
            message=str(exc),
            code="unit.invalid_request",
            details=getattr(exc, "details", None),
        )
    )


@api_bp.get("/categories")
def categories() -> Response:
    payload = []
    for category in list_categories():
        entry = dict(category)
        entry["units"] = list_units(str(category["id"]))
        payload.append(entry)
    return ok({"categories": payload})


@api_bp.get("/categories/<category_id>")
def category_detail(category_id: str) -> Response:
    amounts = _plugin_settings().get("default_amounts")
    try:
        units = list_units(category_id)
        selection = default_selection(category_id, amounts)
    except NotFoundError as exc:
        return _not_found(exc)
    return ok(
        {
            "category": category_id,
            "units": units,
            "defaults": evaluate(selection),
        }
    )


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(SelectionPayload, raw_payload)
    except ValidationError as exc:
        return _invalid(exc)
    try:
        result = evaluate(payload.to_selection())
    except NotFoundError as exc:
        return _not_found(exc)
    return ok(result)


@api_bp.post("/swap")
def swap_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(SelectionPayload, raw_payload)
    except ValidationError as exc:
        return _invalid(exc)
    try:
        result = swap(payload.to_selection())
    except NotFoundError as exc:
        return _not_found(exc)
    return ok(result)


@api_bp.get("/ratio")
def ratio_endpoint() -> Response:
    try:
        query = parse_model(RatioQuery, request.args.to_dict())
    except ValidationError as exc:
        return _invalid(exc)
    try:
        line = ratio(query.category, query.from_unit, query.to_unit)
    except NotFoundError as exc:
        return _not_found(exc)
    return ok({"ratio": line})


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "categories",
    "category_detail",
    "convert_endpoint",
    "swap_endpoint",
    "ratio_endpoint",
]
