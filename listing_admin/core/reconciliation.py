from __future__ import annotations

import re
from typing import Any, Callable, Optional

from .amenity_codec import amenities_to_text, decode_amenities, encode_amenities
from .html_sanitizer import sanitize_rich_text_html
from .payment_plans import (
    normalize_plan,
    payment_plan_text,
    to_editable_plans,
    to_number,
    to_persisted_plans,
)

DEFAULT_HIGHLIGHT_ICON = "star"
TEXT_AMENITY_CATEGORY = "general"
TEXT_AMENITY_ICON = "check"
DEFAULT_PRICE_CURRENCY = "AED"

SNAPSHOT_FIELDS = (
    "highlights",
    "amenities",
    "paymentPlan",
    "faqs",
    "neighborhood",
    "units",
    "floorPlans",
)
SNAPSHOT_TEXT_FIELDS = ("highlightsText", "amenitiesText", "paymentPlanText")

_HIGHLIGHT_ICON_RE = re.compile(r"^\[([^\]]+)\]\s*")
_HIGHLIGHT_VALUE_RE = re.compile(r"\s*\(([^)]+)\)$")


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return str(value)
        except ValueError:
            # int longer than the interpreter's digit limit
            return ""
    return ""


def _list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _dicts(value: Any) -> list[dict]:
    return [item for item in _list(value) if isinstance(item, dict)]


def _display_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return _text(value)
    return str(value)


# ---- load: persisted record -> editable form ----


def highlights_to_text(highlights: Any) -> str:
    lines = []
    for item in _list(highlights):
        if isinstance(item, str):
            item = {"title": item}
        if not isinstance(item, dict):
            continue
        title = _text(item.get("title")) or _text(item.get("titleHe"))
        if not title:
            continue
        parts = []
        icon = _text(item.get("icon"))
        if icon and icon != DEFAULT_HIGHLIGHT_ICON:
            parts.append(f"[{icon}]")
        parts.append(title)
        value = _display_value(item.get("value"))
        if value:
            parts.append(f"({value})")
        lines.append(" ".join(parts))
    return "\n".join(lines)


def extract_highlights(highlights: Any) -> list[dict]:
    extracted = []
    for item in _list(highlights):
        if isinstance(item, str):
            item = {"title": item}
        if not isinstance(item, dict):
            continue
        title = _text(item.get("title"))
        title_he = _text(item.get("titleHe"))
        extracted.append(
            {
                "icon": item["icon"] if isinstance(item.get("icon"), str) else DEFAULT_HIGHLIGHT_ICON,
                "title": title or title_he,
                "titleHe": title_he or title,
                "value": _display_value(item.get("value")),
            }
        )
    return extracted


def extract_faqs(faqs: Any) -> list[dict]:
    return [
        {
            "question": _text(item.get("question")) or _text(item.get("questionHe")),
            "answer": _text(item.get("answer")) or _text(item.get("answerHe")),
        }
        for item in _dicts(faqs)
    ]


def extract_neighborhood(neighborhood: Any) -> dict:
    if not isinstance(neighborhood, dict):
        return {"description": "", "descriptionEn": "", "nearbyPlaces": []}
    return {
        "description": _text(neighborhood.get("description")),
        "descriptionEn": _text(neighborhood.get("descriptionEn")),
        "nearbyPlaces": [
            {
                "name": _text(place.get("name")),
                "nameEn": _text(place.get("nameEn")),
                "distance": _text(place.get("distance")),
                "type": _text(place.get("type")) or "landmark",
            }
            for place in _dicts(neighborhood.get("nearbyPlaces"))
        ],
    }


def extract_units(units: Any) -> list[dict]:
    return [
        {
            "type": _text(unit.get("type")),
            "typeHe": _text(unit.get("typeHe")) or _text(unit.get("type")),
            "bedrooms": _text(unit.get("bedrooms")),
            "sizeFrom": to_number(unit.get("sizeFrom")),
            "sizeTo": to_number(unit.get("sizeTo")),
            "priceFrom": to_number(unit.get("priceFrom")),
            "priceTo": to_number(unit.get("priceTo")),
            "floor": _text(unit.get("floor")),
            "view": _text(unit.get("view")),
            "status": _text(unit.get("status")) or "available",
            "parking": to_number(unit.get("parking")),
        }
        for unit in _dicts(units)
    ]


def extract_floor_plans(floor_plans: Any) -> list[dict]:
    return [
        {
            "name": _text(plan.get("name")),
            "image": _text(plan.get("image")),
            "size": _text(plan.get("size")),
            "bedrooms": _text(plan.get("bedrooms")),
        }
        for plan in _dicts(floor_plans)
    ]


def project_to_form(record: Any) -> dict:
    record = record if isinstance(record, dict) else {}
    amenities = record.get("amenities")
    payment_plan = record.get("paymentPlan")
    return {
        "description": _text(record.get("description")),
        "descriptionEn": _text(record.get("descriptionEn")),
        "priceCurrency": _text(record.get("priceCurrency")) or DEFAULT_PRICE_CURRENCY,
        "highlightsText": highlights_to_text(record.get("highlights")),
        "highlights": extract_highlights(record.get("highlights")),
        "amenityIds": decode_amenities(amenities),
        "amenitiesText": amenities_to_text(amenities),
        "paymentPlanText": payment_plan_text(payment_plan),
        "paymentPlans": to_editable_plans(payment_plan),
        "faqs": extract_faqs(record.get("faqs")),
        "neighborhood": extract_neighborhood(record.get("neighborhood")),
        "units": extract_units(record.get("units")),
        "floorPlans": extract_floor_plans(record.get("floorPlans")),
    }


def build_snapshot(record: Any, form: dict) -> dict:
    """Capture what the editor loaded, so untouched groups can be re-emitted."""
    record = record if isinstance(record, dict) else {}
    snapshot = {field: record.get(field) for field in SNAPSHOT_FIELDS}
    for field in SNAPSHOT_TEXT_FIELDS:
        snapshot[field] = _text(form.get(field))
    return snapshot


# ---- save: editable form -> persisted fields ----


def parse_highlights_text(text: str) -> list[dict] | None:
    highlights = []
    for line in _text(text).split("\n"):
        title = line.strip()
        if not title:
            continue
        icon = DEFAULT_HIGHLIGHT_ICON
        value = ""
        icon_match = _HIGHLIGHT_ICON_RE.match(title)
        if icon_match:
            icon = icon_match.group(1)
            title = title[icon_match.end():]
        value_match = _HIGHLIGHT_VALUE_RE.search(title)
        if value_match:
            value = value_match.group(1)
            title = title[: value_match.start()]
        highlights.append({"title": title, "titleHe": title, "icon": icon, "value": value})
    return highlights or None


def parse_amenities_text(text: str) -> list[dict] | None:
    names = [line for line in _text(text).split("\n") if line.strip()]
    if not names:
        return None
    return [
        {
            "category": TEXT_AMENITY_CATEGORY,
            "items": [{"icon": TEXT_AMENITY_ICON, "name": name, "nameHe": name} for name in names],
        }
    ]


def parse_payment_plan_text(text: str) -> dict | None:
    value = _text(text)
    return {"name": value} if value else None


def text_changed(form: dict, snapshot: Optional[dict], field: str) -> bool:
    current = _text(form.get(field))
    if snapshot is None:
        return current.strip() != ""
    return current != _text(snapshot.get(field))


def resolve_field(
    structured: Any,
    snapshot: Optional[dict],
    field: str,
    changed_text: bool = False,
    parse_text: Optional[Callable[[], Any]] = None,
) -> Any:
    """Pick the value to persist for one field group.

    Structured editor state wins when it holds anything valid, then an edited
    freeform text, and otherwise the value loaded from the record.
    """
    if structured:
        return structured
    if changed_text and parse_text is not None:
        return parse_text()
    if snapshot is None:
        return None
    return snapshot.get(field)


def _structured_highlights(highlights: Any) -> list[dict]:
    valid = [
        item
        for item in _dicts(highlights)
        if _text(item.get("title")).strip() or _text(item.get("titleHe")).strip()
    ]
    return [
        {
            "icon": _text(item.get("icon")) or DEFAULT_HIGHLIGHT_ICON,
            "title": _text(item.get("title")),
            "titleHe": _text(item.get("titleHe")) or _text(item.get("title")),
            "value": _display_value(item.get("value")),
        }
        for item in valid
    ]


def _structured_faqs(faqs: Any) -> list[dict]:
    return [
        {"question": _text(item.get("question")), "answer": _text(item.get("answer"))}
        for item in _dicts(faqs)
        if _text(item.get("question")).strip() and _text(item.get("answer")).strip()
    ]


def _structured_neighborhood(neighborhood: Any) -> dict | None:
    if not isinstance(neighborhood, dict):
        return None
    description = _text(neighborhood.get("description"))
    raw_places = _list(neighborhood.get("nearbyPlaces"))
    # Any place row, even an unnamed one, marks the group as edited.
    if not description and not raw_places:
        return None
    places = [place for place in _dicts(raw_places) if _text(place.get("name"))]
    return {
        "description": description,
        "descriptionEn": _text(neighborhood.get("descriptionEn")) or None,
        "nearbyPlaces": places,
    }


def _structured_units(units: Any, price_currency: str) -> list[dict]:
    structured = []
    for unit in _dicts(units):
        unit_type = _text(unit.get("type"))
        unit_type_he = _text(unit.get("typeHe"))
        if not (unit_type or unit_type_he):
            continue
        item = {
            "type": unit_type or unit_type_he,
            "typeHe": unit_type_he or unit_type,
            "bedrooms": _text(unit.get("bedrooms")),
            "sizeFrom": to_number(unit.get("sizeFrom")),
            "sizeTo": to_number(unit.get("sizeTo")),
            "priceFrom": to_number(unit.get("priceFrom")),
            "priceTo": to_number(unit.get("priceTo")),
            "status": _text(unit.get("status")) or "available",
            "parking": to_number(unit.get("parking")),
            "sizeUnit": "sqm",
            "priceCurrency": price_currency,
        }
        for key in ("floor", "view"):
            if _text(unit.get(key)):
                item[key] = _text(unit.get(key))
        structured.append(item)
    return structured


def _structured_floor_plans(floor_plans: Any) -> list[dict]:
    return [
        {
            "name": _text(plan.get("name")),
            "image": _text(plan.get("image")),
            "size": _text(plan.get("size")),
            "bedrooms": _text(plan.get("bedrooms")),
        }
        for plan in _dicts(floor_plans)
        if _text(plan.get("name")).strip() and _text(plan.get("image")).strip()
    ]


def form_to_project(
    form: Any,
    snapshot: Optional[dict],
    on_drop: Optional[Callable[[str], None]] = None,
) -> dict:
    form = form if isinstance(form, dict) else {}
    price_currency = _text(form.get("priceCurrency")) or DEFAULT_PRICE_CURRENCY

    amenity_ids = _list(form.get("amenityIds"))
    plans = _list(form.get("paymentPlans"))
    named_plans = [normalize_plan(plan) for plan in _dicts(plans) if _text(plan.get("name")).strip()]

    return {
        "description": sanitize_rich_text_html(form.get("description")),
        "descriptionEn": sanitize_rich_text_html(form.get("descriptionEn")) or None,
        "highlights": resolve_field(
            _structured_highlights(form.get("highlights")),
            snapshot,
            "highlights",
            changed_text=text_changed(form, snapshot, "highlightsText"),
            parse_text=lambda: parse_highlights_text(form.get("highlightsText")),
        ),
        "amenities": resolve_field(
            encode_amenities(amenity_ids, on_drop=on_drop) if amenity_ids else None,
            snapshot,
            "amenities",
            changed_text=text_changed(form, snapshot, "amenitiesText"),
            parse_text=lambda: parse_amenities_text(form.get("amenitiesText")),
        ),
        "paymentPlan": resolve_field(
            to_persisted_plans(plans),
            snapshot,
            "paymentPlan",
            changed_text=text_changed(form, snapshot, "paymentPlanText"),
            parse_text=lambda: parse_payment_plan_text(form.get("paymentPlanText")),
        ),
        "paymentPlans": named_plans or None,
        "faqs": resolve_field(_structured_faqs(form.get("faqs")), snapshot, "faqs"),
        "neighborhood": resolve_field(_structured_neighborhood(form.get("neighborhood")), snapshot, "neighborhood"),
        "units": resolve_field(_structured_units(form.get("units"), price_currency), snapshot, "units"),
        "floorPlans": resolve_field(_structured_floor_plans(form.get("floorPlans")), snapshot, "floorPlans"),
    }
