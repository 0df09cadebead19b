from __future__ import annotations

import json
from typing import Any

# Persisted record key -> JSON text column on the projects table.
JSON_FIELD_COLUMNS = {
    "highlights": "highlights_json",
    "amenities": "amenities_json",
    "paymentPlan": "payment_plan_json",
    "paymentPlans": "payment_plans_json",
    "faqs": "faqs_json",
    "neighborhood": "neighborhood_json",
    "units": "units_json",
    "floorPlans": "floor_plans_json",
}

TEXT_FIELD_COLUMNS = {
    "name": "name",
    "nameEn": "name_en",
    "slug": "slug",
    "status": "status",
    "description": "description",
    "descriptionEn": "description_en",
    "priceCurrency": "price_currency",
}


def parse_json_field(raw_text: Any) -> Any:
    if not isinstance(raw_text, str):
        return None
    text = raw_text.strip()
    if not text:
        return None
    try:
        return json.loads(text)
    except Exception:  # noqa: BLE001
        return None


def dump_json_field(value: Any) -> str | None:
    if value is None:
        return None
    return json.dumps(value, ensure_ascii=False)


def project_record(project: Any) -> dict:
    record: dict[str, Any] = {"id": getattr(project, "id", None)}
    for key, column in TEXT_FIELD_COLUMNS.items():
        record[key] = getattr(project, column, None)
    for key, column in JSON_FIELD_COLUMNS.items():
        record[key] = parse_json_field(getattr(project, column, None))
    return record


def apply_record(project: Any, fields: dict) -> list[str]:
    """Write record fields onto a project row; returns the changed record keys."""
    changed: list[str] = []
    for key, value in fields.items():
        if key in JSON_FIELD_COLUMNS:
            column = JSON_FIELD_COLUMNS[key]
            encoded = dump_json_field(value)
        elif key in TEXT_FIELD_COLUMNS:
            column = TEXT_FIELD_COLUMNS[key]
            encoded = value
        else:
            continue
        if getattr(project, column, None) != encoded:
            setattr(project, column, encoded)
            changed.append(key)
    return changed
