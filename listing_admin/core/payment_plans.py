from __future__ import annotations

import math
from typing import Any

FLAT_PLAN_NAME = "תכנית תשלומים"

# Ordered from most specific to most general; the first match decides the shape.
SHAPE_EMPTY = "empty"
SHAPE_TEXT = "text"
SHAPE_TEXT_OBJECT = "text_object"
SHAPE_STRUCTURED = "structured"
SHAPE_FLAT = "flat"
SHAPE_UNKNOWN = "unknown"


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


def to_number(value: Any) -> float | int:
    if isinstance(value, bool) or value in (None, ""):
        return 0
    if isinstance(value, (int, float)):
        try:
            return value if math.isfinite(value) else 0
        except OverflowError:
            return 0
    try:
        parsed = float(str(value).strip().replace("%", ""))
    except (OverflowError, ValueError, TypeError):
        return 0
    return parsed if math.isfinite(parsed) else 0


def classify_payment_plan(raw: Any) -> str:
    if raw is None or raw == "" or raw == [] or raw == {}:
        return SHAPE_EMPTY
    if isinstance(raw, str):
        return SHAPE_TEXT
    if isinstance(raw, dict):
        if raw.get("name") and "milestones" not in raw and "milestone" not in raw:
            return SHAPE_TEXT_OBJECT
        return SHAPE_UNKNOWN
    if isinstance(raw, list) and isinstance(raw[0], dict):
        first = raw[0]
        if "milestones" in first:
            return SHAPE_STRUCTURED
        if "milestone" in first or "percentage" in first:
            return SHAPE_FLAT
    return SHAPE_UNKNOWN


def _editable_milestone(raw: dict) -> dict:
    title = _text(raw.get("title"))
    title_he = _text(raw.get("titleHe"))
    return {
        "title": title or title_he,
        "titleHe": title_he or title,
        "percentage": to_number(raw.get("percentage")),
        "dueDate": _text(raw.get("dueDate")) or None,
        "isPostHandover": bool(raw.get("isPostHandover")),
    }


def normalize_plan(raw: dict) -> dict:
    milestones = raw.get("milestones")
    return {
        "name": _text(raw.get("name")),
        "isPostHandover": bool(raw.get("isPostHandover")),
        "milestones": [
            _editable_milestone(milestone)
            for milestone in (milestones if isinstance(milestones, list) else [])
            if isinstance(milestone, dict)
        ],
    }


def _plan_from_flat_list(raw: list) -> dict:
    return {
        "name": FLAT_PLAN_NAME,
        "isPostHandover": False,
        "milestones": [
            {
                "title": "",
                "titleHe": _text(item.get("milestone")),
                "percentage": to_number(item.get("percentage")),
                "dueDate": _text(item.get("description")) or None,
                "isPostHandover": False,
            }
            for item in raw
            if isinstance(item, dict)
        ],
    }


def to_editable_plans(persisted: Any) -> list[dict]:
    """Convert any stored payment-plan shape into editable structured plans.

    Text-only shapes yield no plans; their content reaches the editor through
    ``payment_plan_text`` instead.
    """
    shape = classify_payment_plan(persisted)
    if shape == SHAPE_STRUCTURED:
        return [normalize_plan(plan) for plan in persisted if isinstance(plan, dict)]
    if shape == SHAPE_FLAT:
        return [_plan_from_flat_list(persisted)]
    return []


def payment_plan_text(persisted: Any) -> str:
    if isinstance(persisted, str):
        return persisted
    if isinstance(persisted, dict):
        return _text(persisted.get("name")) or _text(persisted.get("description"))
    return ""


def _persisted_milestone(milestone: dict) -> dict:
    title = _text(milestone.get("title"))
    item = {
        "title": title,
        "titleHe": _text(milestone.get("titleHe")) or title,
        "percentage": to_number(milestone.get("percentage")),
        "isPostHandover": bool(milestone.get("isPostHandover")),
    }
    due_date = _text(milestone.get("dueDate"))
    if due_date:
        item["dueDate"] = due_date
    return item


def to_persisted_plans(plans: Any) -> list[dict] | None:
    if not isinstance(plans, (list, tuple)):
        return None

    persisted: list[dict] = []
    for plan in plans:
        if not isinstance(plan, dict):
            continue
        name = _text(plan.get("name"))
        milestones = plan.get("milestones")
        if not name.strip() or not isinstance(milestones, list) or not milestones:
            continue
        persisted.append(
            {
                "name": name,
                "isPostHandover": bool(plan.get("isPostHandover")),
                "milestones": [
                    _persisted_milestone(milestone)
                    for milestone in milestones
                    if isinstance(milestone, dict) and to_number(milestone.get("percentage")) > 0
                ],
            }
        )
    return persisted or None
